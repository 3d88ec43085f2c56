"""
Page-load hook for the User Registry front end.

Returns the static data the landing page renders: app configuration,
initial stats and meta tags. It has no dependency on the user store; the
page is prerendered, so everything here is fixed at build time.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .config import settings

# Rendering options for the landing page.
PAGE_OPTIONS: Dict[str, bool] = {
    "prerender": True,
    "ssr": True,
    "csr": True,
}

FEATURES: List[str] = [
    "Create new users",
    "View existing users",
    "Update existing users",
    "Delete users",
]


def load_page(path: str, build_time: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Build the landing page payload.

    Args:
        path (str): Requested path, used as the canonical URL.
        build_time (Optional[datetime]): Instant the page was built; defaults
            to now (UTC).

    Returns:
        dict: `appConfig`, `initialStats` and `meta` sections, keyed in
        camelCase for the front end.
    """
    built = (build_time or datetime.now(timezone.utc)).isoformat()
    app_config = {
        "title": settings.APP_TITLE,
        "description": settings.APP_DESCRIPTION,
        "version": settings.APP_VERSION,
        "buildTime": built,
        "features": list(FEATURES),
    }
    return {
        "appConfig": app_config,
        "initialStats": {
            "totalUsers": 0,
            "lastUpdated": built,
            "isPrerendered": True,
        },
        "meta": {
            "title": app_config["title"],
            "description": app_config["description"],
            "canonical": path,
        },
    }
