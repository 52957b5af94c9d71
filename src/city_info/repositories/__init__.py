"""Data access for the city info API."""

from city_info.repositories.city_repository import CityInfoRepository

__all__ = ["CityInfoRepository"]
