"""Response shapes for cities and their points of interest.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from city_info.database.models import City, PointOfInterest


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PointOfInterestResponse(CamelModel):
    """A point of interest as returned by the API."""

    id: int
    name: str
    description: str | None = None

    @classmethod
    def from_entity(cls, poi: PointOfInterest) -> Self:
        return cls(id=poi.id, name=poi.name, description=poi.description)


class CityWithoutPointsOfInterest(CamelModel):
    """A city without its nested points of interest."""

    id: int
    name: str = Field(..., max_length=50)
    description: str | None = Field(default=None, max_length=200)

    @classmethod
    def from_entity(cls, city: City) -> Self:
        return cls(id=city.id, name=city.name, description=city.description)


class CityWithPointsOfInterest(CityWithoutPointsOfInterest):
    """A city including its points of interest.

    The entity's `points_of_interest` relationship must already be loaded.
    """

    number_of_points_of_interest: int = 0
    points_of_interest: list[PointOfInterestResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, city: City) -> Self:
        points = [PointOfInterestResponse.from_entity(p) for p in city.points_of_interest]
        return cls(
            id=city.id,
            name=city.name,
            description=city.description,
            number_of_points_of_interest=len(points),
            points_of_interest=points,
        )
