"""Database models for the city info API.

## Schema Overview

```
cities
└── points_of_interest (1:N, cascade delete)
```
"""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all database models."""


class City(Base):
    """A city that owns a collection of points of interest."""

    __tablename__ = "cities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(String(200))

    # Relationships
    points_of_interest: Mapped[list["PointOfInterest"]] = relationship(
        back_populates="city",
        cascade="all, delete-orphan",
        order_by="PointOfInterest.id",
    )

    def __repr__(self) -> str:
        return f"<City {self.id} {self.name}>"


class PointOfInterest(Base):
    """A named location owned by exactly one city."""

    __tablename__ = "points_of_interest"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(String(200))
    city_id: Mapped[int] = mapped_column(
        ForeignKey("cities.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    city: Mapped["City"] = relationship(back_populates="points_of_interest")

    def __repr__(self) -> str:
        return f"<PointOfInterest {self.id} {self.name}>"
