"""
Storage module for the User Registry (in-memory implementation).

Responsibilities:
    - Register users, assigning a unique id and a UTC creation timestamp
    - List, look up, partially update and delete users
    - Keep insertion order stable across updates

Design:
    - Records live in a plain list and are found by linear scan; the registry
      is small and insertion order is part of the contract.
    - Records are frozen pydantic models, so what a caller receives can never
      alias the stored state. Updates swap in a new record at the same index.
    - A lock serializes every operation, since FastAPI runs sync handlers
      on a thread pool.

LLM Prompt Example:
    "Explain how this in-memory store can be swapped for another backend
     without changing the API code, by adhering to the BaseUserStore interface."
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, List, Optional

from ..models import User, UserCreate, UserUpdate
from .base import BaseUserStore
from .id_strategies import BaseIdStrategy, get_strategy_from_config

log = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserStore(BaseUserStore):
    def __init__(
        self,
        id_strategy: Optional[BaseIdStrategy] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        """
        Initialize an empty store.

        Args:
            id_strategy (Optional[BaseIdStrategy]): Id generator; resolved from
                config (USER_REGISTRY_ID_STRATEGY) when omitted.
            clock (Callable[[], datetime]): Source of creation timestamps.
        """
        self.id_strategy = id_strategy or get_strategy_from_config()
        self.clock = clock
        self._users: List[User] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    # ---------------------------------------------------------------------
    # Internal helpers (callers hold the lock)
    # ---------------------------------------------------------------------
    def _index_of(self, user_id: str) -> int:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        return -1

    def _new_id(self) -> str:
        # Regenerate on the rare collision so ids stay unique in this store.
        while True:
            candidate = self.id_strategy.generate()
            if self._index_of(candidate) == -1:
                return candidate
            log.warning("Generated id %s already in use; regenerating", candidate)

    # ---------------------------------------------------------------------
    # Public API
    # ---------------------------------------------------------------------
    def create(self, fields: UserCreate) -> User:
        """
        Register a new user.

        No uniqueness checks are made on names or email; duplicates are fine.

        Returns:
            User: The stored record with its assigned id and created_at.
        """
        with self._lock:
            user = User(id=self._new_id(), created_at=self.clock(), **fields.model_dump())
            self._users.append(user)
        log.debug("Created user %s", user.id)
        return user

    def list_all(self) -> List[User]:
        """Snapshot of all users in insertion order."""
        with self._lock:
            return list(self._users)

    def get_by_id(self, user_id: str) -> Optional[User]:
        with self._lock:
            index = self._index_of(user_id)
            return self._users[index] if index != -1 else None

    def update(self, user_id: str, changes: UserUpdate) -> Optional[User]:
        """
        Merge the explicitly set fields of `changes` onto an existing user.

        Returns:
            Optional[User]: The new record, or None when the id is unknown
            (the store is left untouched).
        """
        with self._lock:
            index = self._index_of(user_id)
            if index == -1:
                return None
            fields = changes.changes()
            updated = self._users[index].model_copy(update=fields)
            self._users[index] = updated
        log.debug("Updated user %s (%s)", user_id, ", ".join(sorted(fields)) or "no fields")
        return updated

    def delete(self, user_id: str) -> bool:
        """Remove the first user with this id; True if one was removed."""
        with self._lock:
            index = self._index_of(user_id)
            if index == -1:
                return False
            del self._users[index]
        log.debug("Deleted user %s", user_id)
        return True
