"""
Main API module for the User Registry.

Responsibilities:
    - Expose REST endpoints to create, list, read, update and delete users
    - Serve the landing page payload (app config, initial stats, meta)
    - Provide a liveness endpoint

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - One store per app instance, built by the factory and captured by the
      route handlers; there is no module-level store.
    - The store reports "not found" as None/False; this layer turns that into 404.

LLM Prompt Example:
    "Explain how to structure a FastAPI service with an application factory,
    injected dependencies, and a clean separation between API and storage."
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException, Request, Response, status

from user_registry.config import settings
from user_registry.models import User, UserCreate, UserUpdate
from user_registry.page import PAGE_OPTIONS, load_page
from user_registry.storage.storage_factory import get_store


def create_app() -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Returns:
        FastAPI: A fully configured application instance with its own
                 isolated user store.

    Why an app factory?
        - Enables per-test isolation in pytest.
        - Keeps the store owned by the host process and passed to handlers.
    """
    app = FastAPI(
        title=settings.APP_TITLE,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs",  # Swagger UI endpoint
    )
    log = logging.getLogger("user_registry")

    # basic console logging (optional)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.LOG_LEVEL)

    # ----------------------------------------------------------------
    # Per-app instances (isolated for tests)
    # ----------------------------------------------------------------
    store = get_store()
    build_time = datetime.now(timezone.utc)
    log.info(
        "User store backend: %s (id strategy: %s)",
        settings.STORAGE_BACKEND,
        settings.ID_STRATEGY,
    )

    def _require(user: Any, user_id: str) -> Any:
        if user is None:
            log.info("User %s not found", user_id)
            raise HTTPException(status_code=404, detail="User not found")
        return user

    # Health check
    @app.get("/health")
    def health():
        return {"status": "ok"}

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.get("/")
    def landing_page(request: Request) -> Dict[str, Any]:
        """Prerendered landing page data, fixed at app build time."""
        data = load_page(request.url.path, build_time=build_time)
        data["options"] = dict(PAGE_OPTIONS)
        return data

    @app.get("/users", response_model=List[User])
    def list_users() -> List[User]:
        return store.list_all()

    @app.post("/users", response_model=User, status_code=status.HTTP_201_CREATED)
    def create_user(req: UserCreate) -> User:
        """
        Register a new user.

        Args:
            req (UserCreate): firstName, lastName, email and hobby.

        Returns:
            User: The stored record with its assigned id and createdAt.
        """
        user = store.create(req)
        log.info("User %s created", user.id)
        return user

    @app.get("/users/{user_id}", response_model=User)
    def get_user(user_id: str) -> User:
        return _require(store.get_by_id(user_id), user_id)

    @app.patch("/users/{user_id}", response_model=User)
    def update_user(user_id: str, req: UserUpdate) -> User:
        """
        Replace only the fields present in the body.

        Raises:
            HTTPException: 404 if the user does not exist.
        """
        return _require(store.update(user_id, req), user_id)

    @app.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_user(user_id: str) -> Response:
        if not store.delete(user_id):
            raise HTTPException(status_code=404, detail="User not found")
        log.info("User %s deleted", user_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return app


# `uvicorn main:app --reload` and `from main import app` continue to work.
app = create_app()
