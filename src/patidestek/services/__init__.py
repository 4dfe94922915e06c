"""Service layer for PatiDestek business logic."""

from .locations import LocationService, get_location_service
from .taxonomy import NamedEntityService, category_service, tag_service

__all__ = [
    "LocationService",
    "NamedEntityService",
    "category_service",
    "get_location_service",
    "tag_service",
]
