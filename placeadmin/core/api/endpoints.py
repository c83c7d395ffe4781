"""
Backend endpoint table.

Every operation maps to one HTTP verb and one path template; identifiers
are interpolated into the template with str.format.
"""
from dataclasses import dataclass
from typing import Dict, Optional

from .request import RequestDescriptor, MULTIPART_CONTENT_TYPE


@dataclass(frozen=True)
class Endpoint:
    """One fixed HTTP call."""
    method: str
    template: str
    multipart: bool = False

    @property
    def is_resource(self) -> bool:
        """Authentication paths are outside the resource namespaces."""
        return not self.template.startswith('/auth/')

    def path(self, namespace: Optional[str] = None, **params) -> str:
        """
        Render the path.

        Args:
            namespace: 'admin' or 'base' to force the leading segment of a
                resource path, None to keep the template's own
            **params: Identifiers named in the template
        """
        path = self.template.format(**params)
        if namespace and self.is_resource:
            rest = path.split('/', 2)[2]
            path = f"/{namespace}/{rest}"
        return path

    def build(self, namespace: Optional[str] = None, body=None, **params) -> RequestDescriptor:
        """Build the request descriptor for one call."""
        return RequestDescriptor(
            method=self.method,
            path=self.path(namespace, **params),
            body=body,
            content_type=MULTIPART_CONTENT_TYPE if self.multipart else None
        )


ENDPOINTS: Dict[str, Endpoint] = {
    # Accounts
    'login': Endpoint('POST', '/auth/login/'),
    'logout': Endpoint('POST', '/auth/logout/'),

    # Places
    'list_places': Endpoint('GET', '/base/places/'),
    'add_place': Endpoint('POST', '/base/place/add/'),
    'place_details': Endpoint('GET', '/base/place/{id}/'),
    'edit_place': Endpoint('PATCH', '/base/place/{id}/edit/'),
    'delete_place': Endpoint('DELETE', '/base/place/{id}/delete/'),

    # Categories
    'list_categories': Endpoint('GET', '/base/categories/'),
    'add_category': Endpoint('POST', '/base/category/add/'),
    'category_details': Endpoint('GET', '/base/category/{id}/'),
    'edit_category': Endpoint('PATCH', '/base/category/{id}/edit/'),
    'delete_category': Endpoint('DELETE', '/base/category/{id}/delete/'),

    # Tags
    'list_tags': Endpoint('GET', '/base/tags/'),
    'add_tag': Endpoint('POST', '/base/tag/add/'),
    'tag_details': Endpoint('GET', '/base/tag/{id}/'),
    'edit_tag': Endpoint('PATCH', '/base/tag/{id}/edit/'),

    # Place images
    'list_place_images': Endpoint('GET', '/admin/place/{place_id}/images/'),
    'add_place_image': Endpoint('POST', '/admin/place/{place_id}/images/add/', multipart=True),
    'image_details': Endpoint('GET', '/admin/images/{id}/'),
    'edit_image': Endpoint('PATCH', '/admin/images/{id}/edit/'),
    'delete_image': Endpoint('DELETE', '/admin/images/{id}/delete/'),

    # Place social media
    'list_place_social_media': Endpoint('GET', '/admin/places/{place_id}/social/'),
    'add_place_social_media': Endpoint('POST', '/admin/places/{place_id}/social/add/'),
    'social_media_details': Endpoint('GET', '/admin/social/{id}/'),
    'edit_social_media': Endpoint('PATCH', '/admin/social/{id}/edit/'),
    'delete_social_media': Endpoint('DELETE', '/admin/social/{id}/delete/'),
}


def get_endpoint(name: str) -> Endpoint:
    """Look up an endpoint by operation name."""
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise KeyError(f"Unknown endpoint: {name}") from None
