"""User storage: contract, in-memory backend, id strategies and factory."""

from .base import BaseUserStore
from .storage import UserStore
from .storage_factory import get_store

__all__ = ["BaseUserStore", "UserStore", "get_store"]
