"""Request descriptor and builder for API requests."""
import json
import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional

import aiohttp

JSON_CONTENT_TYPE = 'application/json'
MULTIPART_CONTENT_TYPE = 'multipart/form-data'

# Field name for a bare upload body
RAW_FIELD = 'image'


@dataclass(frozen=True)
class RequestDescriptor:
    """
    One outbound call, produced fresh per operation.
    
    Hooks never mutate a descriptor, they return a modified copy.
    
    Attributes:
        method: HTTP verb
        path: Path relative to the base URL, identifiers already interpolated
        body: Payload forwarded as request body (None for no body)
        content_type: Body encoding override; JSON when not set
        headers: Per-request header overrides
    """
    method: str
    path: str
    body: Any = None
    content_type: Optional[str] = None
    headers: Mapping[str, str] = field(default_factory=dict)
    
    @property
    def is_multipart(self) -> bool:
        return self.content_type == MULTIPART_CONTENT_TYPE
    
    def with_header(self, name: str, value: str) -> 'RequestDescriptor':
        """Return a copy carrying an extra header."""
        return replace(self, headers={**self.headers, name: value})
    
    def __str__(self) -> str:
        return f"{self.method} {self.path}"


class RequestBuilder:
    """Turns descriptors into aiohttp request arguments."""
    
    def __init__(self, base_url: str):
        """Initializes request builder."""
        self.base_url = base_url.rstrip('/')
    
    def build_url(self, request: RequestDescriptor) -> str:
        """Joins the base URL and the request path."""
        return f"{self.base_url}/{request.path.lstrip('/')}"
    
    def build_headers(self, request: RequestDescriptor) -> Dict[str, str]:
        """Builds request headers."""
        headers = dict(request.headers)
        if request.body is not None and not request.is_multipart:
            headers.setdefault('Content-Type', request.content_type or JSON_CONTENT_TYPE)
        return headers
    
    def build_data(self, request: RequestDescriptor) -> Any:
        """Builds the request body."""
        if request.body is None:
            return None
        if request.is_multipart:
            return self.build_multipart(request.body)
        if isinstance(request.body, (bytes, str)):
            return request.body
        return json.dumps(request.body)
    
    @staticmethod
    def build_multipart(form: Any) -> aiohttp.MultipartWriter:
        """
        Builds a multipart/form-data body.
        
        A MultipartWriter is sent as it is. FormData fields are copied into
        a form-data writer, so a FormData without files is not sent
        urlencoded. A mapping (or a list of pairs) becomes one part per
        field; a field value may be a (filename, content) or
        (filename, content, content_type) tuple to send a file part. A bare
        bytes, str or file object is sent as a single file part named
        'image'.
        """
        if isinstance(form, aiohttp.MultipartWriter):
            return form
        
        writer = aiohttp.MultipartWriter('form-data')
        if isinstance(form, aiohttp.FormData):
            for options, headers, value in form._fields:
                part = writer.append(value, dict(headers) or None)
                part.set_content_disposition('form-data', **dict(options))
            return writer
        
        if isinstance(form, (bytes, bytearray, str)) or hasattr(form, 'read'):
            filename = os.path.basename(str(getattr(form, 'name', ''))) or RAW_FIELD
            form = {RAW_FIELD: (filename, form)}
        
        items = form.items() if isinstance(form, Mapping) else form
        for name, value in items:
            filename = None
            headers = None
            if isinstance(value, tuple):
                if len(value) == 3:
                    filename, value, content_type = value
                    headers = {'Content-Type': content_type}
                else:
                    filename, value = value
            elif not isinstance(value, (bytes, bytearray, str)) and not hasattr(value, 'read'):
                value = str(value)
            part = writer.append(value, headers)
            if filename is not None:
                part.set_content_disposition('form-data', name=name, filename=filename)
            else:
                part.set_content_disposition('form-data', name=name)
        return writer
