"""Response handler for API responses."""
import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from ..errors import APIError, error_for_status
from .request_builder import RequestDescriptor


@dataclass
class APIResponse:
    """A successful backend response."""
    status: int
    payload: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)
    request: Any = None


# Typed variant handed to response hooks.
Outcome = Union[APIResponse, APIError]


class ResponseHandler:
    """Decodes responses into outcomes."""
    
    @staticmethod
    def parse_payload(body: bytes) -> Any:
        """Decodes a response body, JSON when possible, text otherwise."""
        if not body:
            return None
        text = body.decode('utf-8', errors='replace')
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return text
    
    @staticmethod
    def is_success(status: int) -> bool:
        return 200 <= status < 300
    
    @classmethod
    def to_outcome(
        cls,
        status: int,
        body: bytes,
        headers: Mapping[str, str],
        request: RequestDescriptor
    ) -> Outcome:
        """Builds the success or failure variant for a received response."""
        payload = cls.parse_payload(body)
        if cls.is_success(status):
            return APIResponse(status=status, payload=payload, headers=dict(headers), request=request)
        return error_for_status(status, payload=payload, request=request)
