"""City routes.

Read-only access to cities. The list endpoint is paged; paging counters are
returned in the `X-Pagination` header, not in the body.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from city_info.api.versioning import copy_version_headers
from city_info.config import get_settings
from city_info.database.connection import get_db_session
from city_info.models.city import CityWithoutPointsOfInterest, CityWithPointsOfInterest
from city_info.repositories.city_repository import CityInfoRepository

router = APIRouter()

PAGINATION_HEADER = "X-Pagination"

# Largest row offset a SQL INTEGER can hold
MAX_OFFSET = 2**63 - 1


def get_city_repository(
    db: AsyncSession = Depends(get_db_session),
) -> CityInfoRepository:
    return CityInfoRepository(db)


def clamp_page_size(page_size: int, max_page_size: int) -> int:
    """Limit a requested page size to the range 1..max_page_size."""
    return max(1, min(page_size, max_page_size))


def clamp_page_number(page_number: int, page_size: int) -> int:
    """Limit a requested page number so its row offset stays a valid INTEGER.

    Pages past the bound are empty anyway, so the last representable page is
    served instead of failing in the database driver.
    """
    return max(1, min(page_number, MAX_OFFSET // page_size + 1))


@router.get("", response_model=list[CityWithoutPointsOfInterest])
async def get_cities(
    response: Response,
    name: str | None = Query(default=None),
    search_query: str | None = Query(default=None, alias="searchQuery"),
    page_number: int = Query(default=1, alias="pageNumber"),
    page_size: int | None = Query(default=None, alias="pageSize"),
    repository: CityInfoRepository = Depends(get_city_repository),
) -> list[CityWithoutPointsOfInterest]:
    """List cities, optionally filtered by exact name and/or search text."""
    settings = get_settings()

    if page_size is None:
        page_size = settings.default_cities_page_size
    page_size = clamp_page_size(page_size, settings.max_cities_page_size)
    page_number = clamp_page_number(page_number, page_size)

    cities, pagination = await repository.get_cities(
        name, search_query, page_number, page_size
    )

    response.headers[PAGINATION_HEADER] = pagination.to_header()

    return [CityWithoutPointsOfInterest.from_entity(c) for c in cities]


@router.get(
    "/{city_id}",
    response_model=None,
    responses={
        status.HTTP_200_OK: {"model": CityWithPointsOfInterest},
        status.HTTP_404_NOT_FOUND: {"description": "City not found"},
    },
)
async def get_city(
    city_id: int,
    response: Response,
    include_points_of_interest: bool = Query(default=False, alias="includePointsOfInterest"),
    repository: CityInfoRepository = Depends(get_city_repository),
) -> CityWithPointsOfInterest | CityWithoutPointsOfInterest | Response:
    """Get a city by id, with or without its points of interest."""
    city = await repository.get_city(city_id, include_points_of_interest)
    if city is None:
        return copy_version_headers(
            response, Response(status_code=status.HTTP_404_NOT_FOUND)
        )

    if include_points_of_interest:
        return CityWithPointsOfInterest.from_entity(city)

    return CityWithoutPointsOfInterest.from_entity(city)
