"""Authentication module for the city info API.

Clients exchange a username/password for a signed bearer token and present
it in the `Authorization: Bearer <token>` header on every other request.

## Security

- Tokens are HS256 JWTs signed with the application secret key
- Tokens are bound to the configured issuer and audience
- Tokens expire one hour after issuance
"""

from city_info.auth.credentials import CityInfoUser, validate_user_credentials
from city_info.auth.dependencies import get_current_user, get_current_user_optional
from city_info.auth.tokens import TokenClaims, create_access_token, verify_access_token

__all__ = [
    "CityInfoUser",
    "validate_user_credentials",
    "TokenClaims",
    "create_access_token",
    "verify_access_token",
    "get_current_user",
    "get_current_user_optional",
]
