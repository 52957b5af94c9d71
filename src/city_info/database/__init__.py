"""Database module for the city info API.

This module provides:
- SQLAlchemy async database connection
- City and point of interest models
- Immutable seed data loaded on startup
"""

from city_info.database.connection import (
    close_db,
    create_tables,
    get_db,
    get_db_session,
    init_db,
)
from city_info.database.models import (
    Base,
    City,
    PointOfInterest,
)
from city_info.database.seed import DEFAULT_SEED, seed_database

__all__ = [
    # Connection
    "get_db",
    "get_db_session",
    "init_db",
    "close_db",
    "create_tables",
    # Models
    "Base",
    "City",
    "PointOfInterest",
    # Seed
    "DEFAULT_SEED",
    "seed_database",
]
