"""
Domain models for the User Registry.

Responsibilities:
    - Define the stored `User` record (immutable once handed out)
    - Define the caller-supplied payloads: `UserCreate` and `UserUpdate`
    - Provide the camelCase JSON shape the front end expects

Design:
    - Python code uses snake_case names; JSON uses camelCase aliases
      (`firstName`, `createdAt`, ...). Both are accepted on input.
    - `id` and `created_at` only exist on `User`; the payload models forbid
      extra keys, so callers can never supply them.
    - `UserUpdate` tracks which fields were explicitly set, so a field set to
      "" is replaced while an omitted field is left unchanged.

LLM Prompt Example:
    "Show how pydantic's fields_set lets a PATCH payload distinguish an
    omitted field from one explicitly set to an empty string."
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

__all__ = ["User", "UserCreate", "UserUpdate"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class User(_CamelModel):
    """A registered user. Frozen: updates produce a new record."""

    model_config = ConfigDict(frozen=True)

    id: str
    first_name: str
    last_name: str
    email: str
    hobby: str
    created_at: datetime


class UserCreate(_CamelModel):
    """Fields a caller supplies when registering a user."""

    model_config = ConfigDict(extra="forbid")

    first_name: str
    last_name: str
    email: str
    hobby: str


class UserUpdate(_CamelModel):
    """
    Partial update for an existing user.

    Every field is optional. Omitted fields are left untouched; fields that
    are present replace the stored value, even when set to "". An explicit
    null is rejected rather than treated as either.
    """

    model_config = ConfigDict(extra="forbid")

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    hobby: Optional[str] = None

    @field_validator("first_name", "last_name", "email", "hobby")
    @classmethod
    def _reject_null(cls, value: Optional[str]) -> str:
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

    def changes(self) -> Dict[str, Any]:
        """Return only the explicitly set fields, keyed by field name."""
        return self.model_dump(exclude_unset=True)
