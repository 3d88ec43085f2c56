"""
user_registry package initializer.
"""

from . import page
from . import storage

__all__ = ["page", "storage"]
