"""API models for the city info service."""

from city_info.models.city import (
    CityWithoutPointsOfInterest,
    CityWithPointsOfInterest,
    PointOfInterestResponse,
)
from city_info.models.pagination import PaginationMetadata

__all__ = [
    # Cities
    "CityWithoutPointsOfInterest",
    "CityWithPointsOfInterest",
    "PointOfInterestResponse",
    # Paging
    "PaginationMetadata",
]
