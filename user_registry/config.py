"""
Runtime configuration for the User Registry
===========================================

Simple settings module that reads from environment variables (only here),
and exposes a stable `settings` object for the rest of the codebase.
Avoid reading env vars anywhere else; import from this module instead.
The storage factory is the one exception: it reads its backend lazily.

Storage
-------
- USER_REGISTRY_STORAGE_BACKEND : "memory" (default)

Identifier generation
---------------------
- USER_REGISTRY_ID_STRATEGY : one of "timestamp" (default), "uuid4", "random"
- USER_REGISTRY_ID_LENGTH   : int length for "random"; default 16; clamped to [8, 64]

Page metadata
-------------
- USER_REGISTRY_APP_TITLE       : default "User Management System"
- USER_REGISTRY_APP_DESCRIPTION : default "A simple user management application"
- USER_REGISTRY_APP_VERSION     : default "1.0.0"

Logging
-------
- USER_REGISTRY_LOG_LEVEL : default "INFO"; unknown level names fall back to it
"""

import logging
import os


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


def _get_log_level(name: str, default: str = "INFO") -> str:
    # Unknown names would make logging.basicConfig raise at app start.
    raw = os.getenv(name, default).strip().upper()
    if isinstance(logging.getLevelName(raw), int):
        return raw
    return default


class _Settings:
    def __init__(self):
        # -------- Storage --------
        self.STORAGE_BACKEND: str = os.getenv("USER_REGISTRY_STORAGE_BACKEND", "memory").strip().lower()

        # -------- Identifier generation --------
        self.ID_STRATEGY: str = os.getenv("USER_REGISTRY_ID_STRATEGY", "timestamp").strip().lower()
        self.ID_LENGTH: int = max(8, min(64, _get_int("USER_REGISTRY_ID_LENGTH", 16)))

        # -------- Page metadata --------
        self.APP_TITLE: str = os.getenv("USER_REGISTRY_APP_TITLE", "User Management System")
        self.APP_DESCRIPTION: str = os.getenv(
            "USER_REGISTRY_APP_DESCRIPTION", "A simple user management application"
        )
        self.APP_VERSION: str = os.getenv("USER_REGISTRY_APP_VERSION", "1.0.0")

        # -------- Logging --------
        self.LOG_LEVEL: str = _get_log_level("USER_REGISTRY_LOG_LEVEL")


settings = _Settings()
