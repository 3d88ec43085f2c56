"""
Storage factory: pick the user store backend from config
=========================================================

This module centralizes selection of the storage backend so the rest of the
app stays ignorant of where users live.

- Reads environment **at call time** to avoid stale values in tests.
- Only the in-memory backend exists; durable backends are out of scope.

Environment variables
---------------------
- USER_REGISTRY_STORAGE_BACKEND: "memory" (default)
"""

import logging
import os
from typing import Optional

from .base import BaseUserStore
from .storage import UserStore

log = logging.getLogger(__name__)


def get_store(backend: Optional[str] = None, **kwargs) -> BaseUserStore:
    """
    Return a user store based on configuration.

    Parameters
    ----------
    backend : str, optional
        "memory" (default). If omitted, reads USER_REGISTRY_STORAGE_BACKEND.
    kwargs : dict
        Extra args passed to the backend constructor (e.g. id_strategy=...).

    Raises
    ------
    ValueError
        If the backend name is unknown.
    """
    be = (backend or os.getenv("USER_REGISTRY_STORAGE_BACKEND", "memory")).strip().lower()
    log.debug("Selected storage backend: %r", be)

    if be == "memory":
        return UserStore(**kwargs)

    raise ValueError(f"Unknown storage backend: {be!r}")
