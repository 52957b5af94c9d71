"""Seed data for the cities store.

The dataset is built once at import time from frozen dataclasses held in
tuples, so nothing at request time can mutate it. `seed_database` copies it
into the store on startup when the store is still empty.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from city_info.database.models import City, PointOfInterest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedPointOfInterest:
    id: int
    name: str
    description: str | None = None


@dataclass(frozen=True)
class SeedCity:
    id: int
    name: str
    description: str | None = None
    points_of_interest: tuple[SeedPointOfInterest, ...] = ()


DEFAULT_SEED: tuple[SeedCity, ...] = (
    SeedCity(
        id=1,
        name="New York City",
        description="The one with that big park.",
        points_of_interest=(
            SeedPointOfInterest(1, "Central Park", "The most visited urban park in the United States."),
            SeedPointOfInterest(2, "Empire State Building", "A 102-story skyscraper located in Midtown Manhattan."),
        ),
    ),
    SeedCity(
        id=2,
        name="Antwerp",
        description="The one with the cathedral that was never really finished.",
        points_of_interest=(
            SeedPointOfInterest(3, "Cathedral of Our Lady", "A Gothic style cathedral, conceived by architects Jan and Pieter Appelmans."),
            SeedPointOfInterest(4, "Antwerp Central Station", "The finest example of railway architecture in Belgium."),
        ),
    ),
    SeedCity(
        id=3,
        name="Paris",
        description="The one with that big tower.",
        points_of_interest=(
            SeedPointOfInterest(5, "Eiffel Tower", "A wrought iron lattice tower on the Champ de Mars."),
            SeedPointOfInterest(6, "The Louvre", "The world's largest museum."),
        ),
    ),
)


def build_entities(seed: tuple[SeedCity, ...]) -> list[City]:
    """Create fresh ORM entities for a seed dataset."""
    return [
        City(
            id=city.id,
            name=city.name,
            description=city.description,
            points_of_interest=[
                PointOfInterest(id=poi.id, name=poi.name, description=poi.description)
                for poi in city.points_of_interest
            ],
        )
        for city in seed
    ]


async def seed_database(
    session: AsyncSession,
    seed: tuple[SeedCity, ...] = DEFAULT_SEED,
) -> int:
    """Insert the seed dataset if the cities table is empty.

    Returns:
        Number of cities inserted (0 if the store already had data)
    """
    existing = await session.scalar(select(func.count()).select_from(City))
    if existing:
        logger.debug(f"Skipping seed, store already holds {existing} cities")
        return 0

    session.add_all(build_entities(seed))
    await session.commit()

    logger.info(f"Seeded {len(seed)} cities")
    return len(seed)
