"""Backend API status codes and exceptions."""
from typing import Any, Dict, Optional

UNAUTHORIZED = 401


class HTTPStatusCodes:
    """HTTP status codes the backend is known to answer with."""
    
    MESSAGES: Dict[int, str] = {
        400: 'Bad Request (400): The payload was rejected by the backend.',
        401: 'Unauthorized (401): The credential is missing, invalid or expired. Please log in again.',
        403: 'Forbidden (403): The account is not allowed to perform this operation.',
        404: 'Not Found (404): The requested resource does not exist.',
        405: 'Method Not Allowed (405)',
        409: 'Conflict (409): The resource already exists or was modified concurrently.',
        413: 'Payload Too Large (413): The upload exceeds the size accepted by the backend.',
        415: 'Unsupported Media Type (415)',
        422: 'Unprocessable Entity (422)',
        429: 'Too Many Requests (429)',
        500: 'Internal Server Error (500)',
        502: 'Bad Gateway (502)',
        503: 'Service Unavailable (503)',
        504: 'Gateway Timeout (504)',
    }
    
    @classmethod
    def get_message(cls, status: int) -> str:
        """Gets a readable message for a status code."""
        return cls.MESSAGES.get(status, f"Unexpected HTTP status: {status}")


class APIError(Exception):
    """
    Base exception for every failed backend call.
    
    Attributes:
        status: HTTP status code, None when no response was obtained
        payload: Decoded response body, if any
        request: RequestDescriptor that produced the failure, if known
    """
    
    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        payload: Any = None,
        request: Any = None
    ):
        self.status = status
        self.payload = payload
        self.request = request
        self.message = message
        super().__init__(message)


class TransportError(APIError):
    """No response was obtained (network unreachable, timeout, ...)."""
    
    def __init__(self, message: str, request: Any = None):
        super().__init__(f"Network error: {message}", request=request)


class HTTPError(APIError):
    """A response was obtained carrying a non-success status."""
    
    def __init__(self, status: int, payload: Any = None, request: Any = None):
        super().__init__(
            HTTPStatusCodes.get_message(status),
            status=status,
            payload=payload,
            request=request
        )


class AuthorizationRejected(HTTPError):
    """The backend rejected the presented credential (HTTP 401)."""
    
    def __init__(self, payload: Any = None, request: Any = None):
        super().__init__(UNAUTHORIZED, payload=payload, request=request)


class AuthenticationError(APIError):
    """Login succeeded at HTTP level but no token was returned."""
    pass


class ConfigurationError(Exception):
    """Raised when the client configuration is unusable."""
    pass


def error_for_status(status: int, payload: Any = None, request: Any = None) -> HTTPError:
    """Build the HTTPError variant matching a status code."""
    if status == UNAUTHORIZED:
        return AuthorizationRejected(payload=payload, request=request)
    return HTTPError(status, payload=payload, request=request)
