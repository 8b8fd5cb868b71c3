"""
Entrypoint for the wishlist service.

``create_app`` assembles the FastAPI application: logging, middleware,
the central exception handlers and the wishlist router.  ``app`` is built
at import time so uvicorn can find it::

    uvicorn wishlist.main:app --reload

or simply ``python -m wishlist.main``.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, status
from fastapi.responses import JSONResponse

from wishlist.api.deps import get_repository
from wishlist.api.errors import register_exception_handlers
from wishlist.api.routes import wishlist as wishlist_routes
from wishlist.config import settings
from wishlist.core.logging_config import setup_logging
from wishlist.middleware.cors_config import configure_cors
from wishlist.middleware.security_headers import add_security_headers
from wishlist.repositories import WishlistRepository

logger = logging.getLogger("uvicorn.error")

DESCRIPTION = "Microservice for managing customer wishlists in an e-commerce platform"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Prepare the store before serving. A store that is down at startup is
    logged, not fatal: the health endpoint reports it and requests fail
    with INTERNAL_SERVER_ERROR until it comes back.
    """
    provider = app.dependency_overrides.get(get_repository, get_repository)
    try:
        provider().ensure_indexes()
    except Exception as e:
        logger.warning("Could not prepare wishlist storage at startup: %s", e)
    logger.info("Wishlist service started (env=%s, storage=%s)", settings.ENV, settings.STORAGE_BACKEND)
    yield
    logger.info("Shutting down %s", settings.APP_NAME)


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    app = FastAPI(
        title=settings.APP_NAME,
        description=DESCRIPTION,
        version=settings.APP_VERSION,
        contact={"name": "E-commerce Team", "email": "team@ecommerce.com"},
        lifespan=lifespan,
    )
    configure_cors(app)
    add_security_headers(app)
    register_exception_handlers(app)

    app.include_router(wishlist_routes.router)

    @app.get("/", tags=["root"])
    async def root():
        return {"status": "ok", "service": settings.APP_NAME}

    @app.get("/health", tags=["root"])
    def health(repository: WishlistRepository = Depends(get_repository)):
        """Liveness plus a storage reachability check."""
        if repository.ping():
            return {"status": "UP", "storage": "UP"}
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "DOWN", "storage": "DOWN"},
        )

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("wishlist.main:app", host=settings.HOST, port=settings.PORT)
