"""Tests for the async transport against a local aiohttp server."""
import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from placeadmin.core.api import (
    AsyncAPIClient,
    APIConfig,
    APIResponse,
    APIError,
    AuthorizationRejected,
    ConfigurationError,
    HTTPError,
    RequestDescriptor,
    TransportError,
)


async def echo(request: web.Request) -> web.Response:
    """Echoes what the server received."""
    body = await request.text()
    return web.json_response({
        'method': request.method,
        'path': request.path,
        'authorization': request.headers.get('Authorization'),
        'content_type': request.content_type,
        'body': body,
    })


async def unauthorized(request: web.Request) -> web.Response:
    return web.json_response({'detail': 'Token expired'}, status=401)


async def not_found(request: web.Request) -> web.Response:
    return web.json_response({'detail': 'Not found'}, status=404)


async def plain_text(request: web.Request) -> web.Response:
    return web.Response(text='pong')


async def no_content(request: web.Request) -> web.Response:
    return web.Response(status=204)


@pytest_asyncio.fixture
async def server():
    app = web.Application()
    app.router.add_route('*', '/echo/{tail:.*}', echo)
    app.router.add_get('/unauthorized/', unauthorized)
    app.router.add_get('/missing/', not_found)
    app.router.add_get('/ping/', plain_text)
    app.router.add_delete('/empty/', no_content)
    async with TestServer(app) as srv:
        yield srv


@pytest_asyncio.fixture
async def client(server):
    async with AsyncAPIClient(APIConfig(base_url=str(server.make_url('/')))) as api:
        yield api


class TestAsyncAPIClient:
    """Test suite for AsyncAPIClient."""

    def test_requires_base_url(self):
        with pytest.raises(ConfigurationError):
            AsyncAPIClient(APIConfig())

    @pytest.mark.asyncio
    async def test_get_returns_payload(self, client):
        payload = await client.get('/echo/places/')

        assert payload['method'] == 'GET'
        assert payload['path'] == '/echo/places/'
        assert payload['body'] == ''

    @pytest.mark.asyncio
    async def test_post_sends_json(self, client):
        payload = await client.post('/echo/add/', {'name': 'Harbour'})

        assert payload['content_type'] == 'application/json'
        assert payload['body'] == '{"name": "Harbour"}'

    @pytest.mark.asyncio
    async def test_patch_and_delete(self, client):
        patched = await client.patch('/echo/1/edit/', {'name': 'x'})
        deleted = await client.delete('/echo/1/delete/')

        assert patched['method'] == 'PATCH'
        assert deleted['method'] == 'DELETE'

    @pytest.mark.asyncio
    async def test_base_url_with_trailing_slash(self, server):
        config = APIConfig(base_url=str(server.make_url('/')) + '/')
        async with AsyncAPIClient(config) as api:
            payload = await api.get('echo/tags/')

        assert payload['path'] == '/echo/tags/'

    @pytest.mark.asyncio
    async def test_text_payload(self, client):
        assert await client.get('/ping/') == 'pong'

    @pytest.mark.asyncio
    async def test_empty_payload(self, client):
        assert await client.delete('/empty/') is None

    @pytest.mark.asyncio
    async def test_unauthorized_raises_typed_error(self, client):
        with pytest.raises(AuthorizationRejected) as exc_info:
            await client.get('/unauthorized/')

        assert exc_info.value.status == 401
        assert exc_info.value.payload == {'detail': 'Token expired'}
        assert exc_info.value.request.path == '/unauthorized/'

    @pytest.mark.asyncio
    async def test_http_error(self, client):
        with pytest.raises(HTTPError) as exc_info:
            await client.get('/missing/')

        assert not isinstance(exc_info.value, AuthorizationRejected)
        assert exc_info.value.status == 404

    @pytest.mark.asyncio
    async def test_transport_error(self, server):
        url = str(server.make_url('/'))
        await server.close()
        async with AsyncAPIClient(APIConfig(base_url=url)) as api:
            with pytest.raises(TransportError) as exc_info:
                await api.get('/echo/places/')

        assert exc_info.value.status is None

    @pytest.mark.asyncio
    async def test_closed_client_refuses(self, server):
        api = AsyncAPIClient(APIConfig(base_url=str(server.make_url('/'))))
        await api.close()

        with pytest.raises(APIError, match='closed'):
            await api.get('/echo/places/')


class TestHooks:
    """Tests for request and response hooks."""

    @pytest.mark.asyncio
    async def test_request_hooks_run_in_order(self, client):
        client.add_request_hook(lambda r: r.with_header('Authorization', 'Bearer one'))
        client.add_request_hook(
            lambda r: r.with_header('Authorization', r.headers['Authorization'] + '-two')
        )

        payload = await client.get('/echo/places/')

        assert payload['authorization'] == 'Bearer one-two'

    @pytest.mark.asyncio
    async def test_async_hooks_are_awaited(self, client):
        async def hook(request):
            return request.with_header('Authorization', 'Bearer async')

        client.add_request_hook(hook)

        payload = await client.get('/echo/places/')

        assert payload['authorization'] == 'Bearer async'

    @pytest.mark.asyncio
    async def test_response_hooks_see_failures(self, client):
        seen = []

        def hook(outcome):
            seen.append(outcome)
            return outcome

        client.add_response_hook(hook)

        await client.get('/echo/places/')
        with pytest.raises(AuthorizationRejected):
            await client.get('/unauthorized/')

        assert isinstance(seen[0], APIResponse)
        assert isinstance(seen[1], AuthorizationRejected)

    @pytest.mark.asyncio
    async def test_response_hook_can_replace_payload(self, client):
        client.add_response_hook(
            lambda outcome: APIResponse(status=outcome.status, payload='replaced')
        )

        assert await client.get('/echo/places/') == 'replaced'

    @pytest.mark.asyncio
    async def test_events(self, client):
        requests, outcomes = [], []
        client.on('request', requests.append).on('response', outcomes.append)

        await client.get('/echo/places/')

        assert isinstance(requests[0], RequestDescriptor)
        assert outcomes[0].status == 200

        client.off('request')
        await client.get('/echo/places/')
        assert len(requests) == 1
        assert len(outcomes) == 2
