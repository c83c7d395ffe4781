"""Resource services: one method per backend endpoint."""
from .base import ResourceService
from .places import PlaceService
from .categories import CategoryService
from .tags import TagService
from .images import PlaceImageService
from .social import SocialMediaService

__all__ = [
    'ResourceService',
    'PlaceService',
    'CategoryService',
    'TagService',
    'PlaceImageService',
    'SocialMediaService',
]
