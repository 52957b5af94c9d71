"""FastAPI dependencies for authentication.

## Usage

```python
from fastapi import Depends
from city_info.auth import TokenClaims, get_current_user

@router.get("/me")
async def me(user: TokenClaims = Depends(get_current_user)):
    return {"city": user.city}
```
"""

from __future__ import annotations

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from city_info.auth.tokens import TokenClaims, verify_access_token

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user_optional(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> TokenClaims | None:
    """Get the claims of the presented bearer token, or None."""
    if credentials is None:
        return None

    return verify_access_token(credentials.credentials)


async def get_current_user(
    user: TokenClaims | None = Depends(get_current_user_optional),
) -> TokenClaims:
    """Get the current authenticated user.

    Raises 401 if no valid bearer token was presented.
    """
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user
