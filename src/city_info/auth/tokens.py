"""Bearer tokens using signed JWTs.

Tokens are signed with HS256 using the application secret key and expire
one hour after issuance (configurable via ACCESS_TOKEN_LIFETIME_SECONDS).

## Token Structure

```json
{
  "sub": "1",
  "given_name": "Kevi",
  "family_name": "Docx",
  "city": "Antwer",
  "iss": "https://localhost:8000",
  "aud": "cityinfoapi",
  "nbf": 1234567890,
  "iat": 1234567890,
  "exp": 1234571490
}
```
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from city_info.auth.credentials import CityInfoUser
from city_info.config import get_settings

logger = logging.getLogger(__name__)

# JWT configuration
ALGORITHM = "HS256"


@dataclass
class TokenClaims:
    """Identity claims carried by a verified bearer token."""

    user_id: str
    given_name: str
    family_name: str
    city: str
    issued_at: datetime
    expires_at: datetime


def create_access_token(
    user: CityInfoUser,
    expires_delta: timedelta | None = None,
    now: datetime | None = None,
) -> str:
    """Create a signed bearer token for a user.

    Args:
        user: The authenticated user
        expires_delta: Custom lifetime (or use default from settings)
        now: Issuance time (defaults to the current UTC time)

    Returns:
        Signed JWT token string
    """
    settings = get_settings()

    if now is None:
        now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(seconds=settings.access_token_lifetime_seconds)

    issued_at = int(now.timestamp())
    payload = {
        "sub": str(user.user_id),
        "given_name": user.first_name,
        "family_name": user.last_name,
        "city": user.city,
        "iss": settings.auth_issuer,
        "aud": settings.auth_audience,
        "nbf": issued_at,
        "iat": issued_at,
        "exp": issued_at + int(expires_delta.total_seconds()),
    }

    return jwt.encode(payload, settings.secret_key, algorithm=ALGORITHM)


def verify_access_token(token: str) -> TokenClaims | None:
    """Verify and decode a bearer token.

    Args:
        token: The JWT token string

    Returns:
        TokenClaims if valid, None if invalid, expired, or issued for
        another issuer/audience
    """
    settings = get_settings()

    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[ALGORITHM],
            audience=settings.auth_audience,
            issuer=settings.auth_issuer,
        )
    except JWTError as e:
        logger.debug(f"Bearer token verification failed: {e}")
        return None

    try:
        return TokenClaims(
            user_id=payload["sub"],
            given_name=payload["given_name"],
            family_name=payload["family_name"],
            city=payload["city"],
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
    except (KeyError, TypeError, ValueError) as e:
        logger.debug(f"Invalid token payload: {e}")
        return None
