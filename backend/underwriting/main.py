"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from underwriting.api.v1 import policies, products, profiles
from underwriting.core.config import settings
from underwriting.core.logging import get_logger, setup_logging
from underwriting.db.session import build_engine, build_sessionmaker


def create_app(database_url: str | None = None, **engine_kwargs: Any) -> FastAPI:
    """Build the application; the engine is created in the lifespan, not at import."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown lifecycle hooks."""
        setup_logging("DEBUG" if settings.APP_ENV == "development" else settings.LOG_LEVEL)
        logger = get_logger("startup")

        engine = build_engine(database_url, **engine_kwargs)
        app.state.engine = engine
        app.state.sessionmaker = build_sessionmaker(engine)
        logger.info("Application starting", env=settings.APP_ENV)
        yield
        await engine.dispose()
        logger.info("Application shutting down")

    app = FastAPI(
        title="Policy Underwriting API",
        description="Eligibility, pricing and submission rules for insurance policy applications",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Restrict in production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_prefix = "/api/v1"
    app.include_router(policies.router, prefix=api_prefix)
    app.include_router(products.router, prefix=api_prefix)
    app.include_router(profiles.router, prefix=api_prefix)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        """Public health-check endpoint."""
        return {"status": "ok", "env": settings.APP_ENV}

    return app


app = create_app()
