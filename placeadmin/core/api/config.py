"""
API configuration module.

Provides configuration for the backend API client, including base URL
selection from the build/runtime mode.
"""
import os
import ssl
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Mapping

PRODUCTION_MODE = 'production'
BASE_URL_ENV = 'VITE_API_BASE_URL'
BASE_URL_PROD_ENV = 'VITE_API_BASE_URL_PROD'
MODE_ENV = 'MODE'

NAMESPACES = ('admin', 'base')


@dataclass
class ProxyConfig:
    """
    Proxy configuration.

    Supports HTTP and HTTPS proxies.
    """
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    def to_aiohttp_proxy(self) -> Optional[str]:
        """Convert to aiohttp proxy format."""
        if not self.url:
            return None

        if self.username and self.password:
            if '://' in self.url:
                protocol, rest = self.url.split('://', 1)
                return f"{protocol}://{self.username}:{self.password}@{rest}"

        return self.url


@dataclass
class SSLConfig:
    """SSL/TLS configuration."""
    verify: bool = True
    cert_file: Optional[str] = None
    key_file: Optional[str] = None
    ca_file: Optional[str] = None
    check_hostname: bool = True

    def create_ssl_context(self):
        """Create SSL context from configuration (False disables verification)."""
        if not self.verify:
            return False

        context = ssl.create_default_context()

        if self.ca_file:
            context.load_verify_locations(self.ca_file)

        if self.cert_file:
            context.load_cert_chain(
                self.cert_file,
                keyfile=self.key_file
            )

        context.check_hostname = self.check_hostname

        return context


@dataclass
class TimeoutConfig:
    """
    Timeout configuration.

    Timeout policy belongs to the transport; the mediator adds none.
    """
    total: float = 60.0
    connect: float = 15.0
    sock_read: float = 30.0
    sock_connect: float = 15.0

    def to_aiohttp_timeout(self):
        """Convert to aiohttp ClientTimeout."""
        import aiohttp
        return aiohttp.ClientTimeout(
            total=self.total,
            connect=self.connect,
            sock_read=self.sock_read,
            sock_connect=self.sock_connect
        )


@dataclass
class APIConfig:
    """
    Complete API configuration.

    Attributes:
        base_url: Backend root URL every endpoint path is appended to
        namespace: None keeps the endpoint table as written; 'admin' or
            'base' rewrites the leading segment of every resource path
    """
    base_url: Optional[str] = None
    namespace: Optional[str] = None

    user_agent: str = 'placeadmin/1.0.0'

    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)

    extra_headers: Dict[str, str] = field(default_factory=dict)

    log_level: int = 20  # logging.INFO

    limit_per_host: int = 10
    limit: int = 100

    def __post_init__(self):
        if self.namespace is not None and self.namespace not in NAMESPACES:
            raise ValueError(
                f"Unknown namespace {self.namespace!r}, expected one of {NAMESPACES}"
            )

    @classmethod
    def default(cls) -> 'APIConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def from_env(
        cls,
        mode: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
        **kwargs
    ) -> 'APIConfig':
        """
        Create configuration from environment variables.

        The base URL comes from VITE_API_BASE_URL_PROD when the mode is
        'production' and from VITE_API_BASE_URL otherwise.

        Args:
            mode: Build/runtime mode, read from MODE when not given
            environ: Mapping to read from (defaults to os.environ)
            **kwargs: Extra APIConfig fields

        Returns:
            APIConfig instance
        """
        environ = os.environ if environ is None else environ
        if mode is None:
            mode = environ.get(MODE_ENV, 'development')

        if mode == PRODUCTION_MODE:
            base_url = environ.get(BASE_URL_PROD_ENV)
        else:
            base_url = environ.get(BASE_URL_ENV)

        return cls(base_url=base_url, **kwargs)

    @classmethod
    def with_proxy(cls, proxy_url: str, **kwargs) -> 'APIConfig':
        """Create configuration with proxy."""
        return cls(
            proxy=ProxyConfig(url=proxy_url),
            **kwargs
        )

    @classmethod
    def insecure(cls, **kwargs) -> 'APIConfig':
        """Create configuration with SSL verification disabled."""
        return cls(
            ssl=SSLConfig(verify=False, check_hostname=False),
            **kwargs
        )

    def get_connector_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp TCPConnector."""
        return {
            'limit': self.limit,
            'limit_per_host': self.limit_per_host,
            'ssl': self.ssl.create_ssl_context(),
        }

    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        headers = {
            'User-Agent': self.user_agent,
            **self.extra_headers
        }

        return {
            'headers': headers,
            'timeout': self.timeout.to_aiohttp_timeout(),
        }
