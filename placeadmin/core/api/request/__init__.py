"""Request descriptors, wire encoding and response decoding."""
from .request_builder import (
    RequestDescriptor,
    RequestBuilder,
    JSON_CONTENT_TYPE,
    MULTIPART_CONTENT_TYPE,
)
from .response_handler import APIResponse, ResponseHandler

__all__ = [
    'RequestDescriptor',
    'RequestBuilder',
    'JSON_CONTENT_TYPE',
    'MULTIPART_CONTENT_TYPE',
    'APIResponse',
    'ResponseHandler',
]
