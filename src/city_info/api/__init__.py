"""FastAPI application and routes.

This module provides the REST API for the city info service.

## API Structure

- /api/authentication - Exchange credentials for a bearer token
- /api/v{version}/cities - Cities and their points of interest
- /api/v{version}/files - Demo file download and PDF upload

## Authentication

Every endpoint except /api/authentication and /health requires a bearer
token in the Authorization header.
"""

from city_info.api.app import create_app

__all__ = ["create_app"]
