"""Authentication routes.

## Flow

1. POST /api/authentication/authenticate with `{"userName": ..., "password": ...}`
2. Receive a signed bearer token (JSON string)
3. Send `Authorization: Bearer <token>` on every other request
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from city_info.auth.credentials import validate_user_credentials
from city_info.auth.tokens import create_access_token

logger = logging.getLogger(__name__)

router = APIRouter()


class AuthenticationRequestBody(BaseModel):
    """Credentials exchanged for a bearer token."""

    model_config = ConfigDict(populate_by_name=True)

    user_name: str | None = Field(default=None, alias="userName")
    password: str | None = None


@router.post("/authenticate", response_model=str)
async def authenticate(body: AuthenticationRequestBody) -> str:
    """Validate credentials and issue a one-hour bearer token."""
    user = validate_user_credentials(body.user_name, body.password)
    if user is None:
        logger.info(f"Rejected credentials for {body.user_name!r}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    token = create_access_token(user)
    logger.info(f"Issued token for user {user.user_id} ({user.user_name!r})")
    return token
