from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class UserRole(str, Enum):
    admin = "ADMIN"
    standard = "USER"


# Accepted spellings when parsing a role typed by a human.
_ROLE_ALIASES = {
    "ADMIN": UserRole.admin,
    "USER": UserRole.standard,
    "STANDARD": UserRole.standard,
}


def parse_role(value: Any) -> UserRole:
    if isinstance(value, UserRole):
        return value
    key = str(value or "").strip().upper()
    if key not in _ROLE_ALIASES:
        raise ValueError("role must be one of ADMIN, USER")
    return _ROLE_ALIASES[key]


class UserInput(BaseModel):
    """Raw user details as collected from a caller (CLI prompt, script).

    Parsing the role and the active flag is a caller-side concern; the
    registry itself trusts whatever it is given.
    """

    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address, original casing preserved")
    role: UserRole = Field(..., description="ADMIN or USER")
    active: bool = Field(default=True)

    @field_validator("role", mode="before")
    @classmethod
    def _parse_role(cls, value: Any) -> UserRole:
        return parse_role(value)
