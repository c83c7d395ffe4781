"""Tests for API configuration."""
import pytest

from placeadmin.core.api import APIConfig, ProxyConfig, SSLConfig

ENV = {
    'VITE_API_BASE_URL': 'http://localhost:8000',
    'VITE_API_BASE_URL_PROD': 'https://api.example.com',
}


class TestAPIConfig:
    """Test suite for APIConfig."""

    def test_production_mode(self):
        config = APIConfig.from_env(mode='production', environ=ENV)

        assert config.base_url == 'https://api.example.com'

    @pytest.mark.parametrize('mode', ['development', 'test', 'staging'])
    def test_other_modes(self, mode):
        config = APIConfig.from_env(mode=mode, environ=ENV)

        assert config.base_url == 'http://localhost:8000'

    def test_mode_from_environment(self):
        config = APIConfig.from_env(environ={**ENV, 'MODE': 'production'})

        assert config.base_url == 'https://api.example.com'

    def test_default_mode_is_development(self):
        assert APIConfig.from_env(environ=ENV).base_url == 'http://localhost:8000'

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv('MODE', 'production')
        monkeypatch.setenv('VITE_API_BASE_URL_PROD', 'https://prod.example.com')

        assert APIConfig.from_env().base_url == 'https://prod.example.com'

    def test_missing_variable(self):
        assert APIConfig.from_env(mode='production', environ={}).base_url is None

    def test_extra_fields(self):
        config = APIConfig.from_env(environ=ENV, namespace='admin', user_agent='ua/1')

        assert config.namespace == 'admin'
        assert config.user_agent == 'ua/1'

    def test_invalid_namespace(self):
        with pytest.raises(ValueError, match='namespace'):
            APIConfig(base_url='http://x', namespace='api')

    def test_session_kwargs(self):
        config = APIConfig(base_url='http://x', extra_headers={'X-Trace': '1'})

        kwargs = config.get_session_kwargs()

        assert kwargs['headers'] == {'User-Agent': 'placeadmin/1.0.0', 'X-Trace': '1'}
        assert kwargs['timeout'].total == config.timeout.total

    def test_insecure(self):
        config = APIConfig.insecure(base_url='http://x')

        assert config.get_connector_kwargs()['ssl'] is False

    def test_with_proxy(self):
        config = APIConfig.with_proxy('http://proxy:8080', base_url='http://x')

        assert config.proxy.to_aiohttp_proxy() == 'http://proxy:8080'


class TestProxyConfig:

    def test_credentials_in_url(self):
        proxy = ProxyConfig(url='http://proxy:8080', username='u', password='p')

        assert proxy.to_aiohttp_proxy() == 'http://u:p@proxy:8080'

    def test_empty(self):
        assert ProxyConfig().to_aiohttp_proxy() is None


class TestSSLConfig:

    def test_verify_creates_context(self):
        context = SSLConfig().create_ssl_context()

        assert context.check_hostname is True
