"""City repository.

Translates list queries (exact name filter, free-text search, paging) and
single-city lookups into SQLAlchemy statements.

## Filter semantics

- `name`: trimmed, exact match on the city name. Blank values are ignored.
- `search_query`: trimmed, substring match on name OR description.
  Blank values are ignored.
- Both given: a city must satisfy both.

Results are ordered by id so paging is stable.
"""

from __future__ import annotations

import logging

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from city_info.database.models import City
from city_info.models.pagination import PaginationMetadata

logger = logging.getLogger(__name__)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class CityInfoRepository:
    """Read access to cities and their points of interest."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _filtered(self, name: str | None, search_query: str | None) -> Select:
        statement = select(City)

        name = _clean(name)
        if name is not None:
            statement = statement.where(City.name == name)

        search_query = _clean(search_query)
        if search_query is not None:
            statement = statement.where(
                or_(
                    City.name.contains(search_query, autoescape=True),
                    City.description.contains(search_query, autoescape=True),
                )
            )

        return statement

    async def get_cities(
        self,
        name: str | None = None,
        search_query: str | None = None,
        page_number: int = 1,
        page_size: int = 10,
    ) -> tuple[list[City], PaginationMetadata]:
        """Get one page of cities matching the filters.

        Args:
            name: Exact city name to match
            search_query: Text to find in the name or description
            page_number: 1-based page number
            page_size: Maximum number of cities on the page

        Returns:
            The cities on the requested page and the pagination metadata
        """
        statement = self._filtered(name, search_query)

        total_count = await self.session.scalar(
            select(func.count()).select_from(statement.subquery())
        )
        metadata = PaginationMetadata.for_page(total_count or 0, page_size, page_number)

        result = await self.session.execute(
            statement.order_by(City.id)
            .offset(page_size * (page_number - 1))
            .limit(page_size)
        )
        cities = list(result.scalars().all())

        logger.debug(
            f"Cities query name={name!r} search={search_query!r} "
            f"page={page_number}/{metadata.total_pages} returned {len(cities)}"
        )
        return cities, metadata

    async def get_city(
        self,
        city_id: int,
        include_points_of_interest: bool = False,
    ) -> City | None:
        """Get a city by id, optionally loading its points of interest."""
        statement = select(City).where(City.id == city_id)
        if include_points_of_interest:
            statement = statement.options(selectinload(City.points_of_interest))

        result = await self.session.execute(statement)
        return result.scalar_one_or_none()
