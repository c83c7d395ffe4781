"""Tests for the endpoint table."""
import pytest

from placeadmin.core.api import ENDPOINTS, Endpoint, get_endpoint
from placeadmin.core.api.request import MULTIPART_CONTENT_TYPE


class TestEndpoint:
    """Test suite for Endpoint."""

    def test_path_interpolation(self):
        assert get_endpoint('edit_place').path(id=12) == '/base/place/12/edit/'
        assert get_endpoint('add_place_image').path(place_id=7) == '/admin/place/7/images/add/'

    def test_namespace_rewrites_resource_paths(self):
        endpoint = get_endpoint('list_place_social_media')

        assert endpoint.path('base', place_id=3) == '/base/places/3/social/'
        assert endpoint.path('admin', place_id=3) == '/admin/places/3/social/'

    def test_namespace_never_touches_auth(self):
        assert get_endpoint('login').path('admin') == '/auth/login/'
        assert get_endpoint('logout').path('base') == '/auth/logout/'

    def test_build_descriptor(self):
        request = get_endpoint('add_category').build(body={'name': 'Food'})

        assert request.method == 'POST'
        assert request.path == '/base/category/add/'
        assert request.body == {'name': 'Food'}
        assert request.content_type is None

    def test_only_image_upload_is_multipart(self):
        multipart = [name for name, e in ENDPOINTS.items() if e.multipart]

        assert multipart == ['add_place_image']
        assert get_endpoint('add_place_image').build(place_id=1).content_type == MULTIPART_CONTENT_TYPE

    def test_missing_parameter(self):
        with pytest.raises(KeyError):
            get_endpoint('place_details').path()

    def test_unknown_endpoint(self):
        with pytest.raises(KeyError, match='Unknown endpoint'):
            get_endpoint('delete_tag')

    def test_table_size(self):
        assert len(ENDPOINTS) == 26

    def test_verbs(self):
        verbs = {e.method for e in ENDPOINTS.values()}

        assert verbs == {'GET', 'POST', 'PATCH', 'DELETE'}

    def test_endpoint_is_frozen(self):
        endpoint = Endpoint('GET', '/base/places/')

        with pytest.raises(AttributeError):
            endpoint.method = 'POST'
