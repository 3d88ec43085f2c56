"""
Base storage interface for the User Registry.

Purpose:
    Define a small, stable contract that storage backends implement, so the
    HTTP layer depends on the contract rather than on the in-memory list.

Contract:
    - Lookups never raise: "not found" is `None`, delete reports a bool.
    - `id` and `created_at` are assigned by the store and never change.

Testing & Coverage:
    These are abstract methods and are not executed directly in tests.
    We annotate them with `# pragma: no cover` so coverage tools don't
    penalize the project for un-runnable abstract declarations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import User, UserCreate, UserUpdate


class BaseUserStore(ABC):
    """Abstract base class for user storage backends."""

    @abstractmethod  # pragma: no cover
    def create(self, fields: UserCreate) -> User:
        """
        Register a new user, assigning its id and creation timestamp.

        Returns:
            User: The stored record.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def list_all(self) -> List[User]:
        """
        Return every user in insertion order.

        Returns:
            List[User]: A new list; mutating it does not affect the store.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def get_by_id(self, user_id: str) -> Optional[User]:
        """Return the user with this id, or None."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def update(self, user_id: str, changes: UserUpdate) -> Optional[User]:
        """
        Replace the explicitly set fields of an existing user.

        Returns:
            Optional[User]: The updated record, or None if the id is unknown.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def delete(self, user_id: str) -> bool:
        """
        Remove a user.

        Returns:
            bool: True if a record was removed, False if the id is unknown.
        """
        raise NotImplementedError
