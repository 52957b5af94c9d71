"""User credential validation.

There is no user store yet: every username/password pair is accepted and
mapped to the same demo identity.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CityInfoUser:
    """An authenticated user. Never persisted."""

    user_id: int
    user_name: str
    first_name: str
    last_name: str
    city: str


def validate_user_credentials(
    user_name: str | None,
    password: str | None,
) -> CityInfoUser | None:
    """Validate a username/password pair.

    Returns:
        The matching user, or None if the credentials are rejected
    """
    # TODO: look the user up in a credential store and compare password hashes
    return CityInfoUser(
        user_id=1,
        user_name=user_name or "",
        first_name="Kevi",
        last_name="Docx",
        city="Antwer",
    )
