"""
Main FastAPI application for the Academia backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings as default_settings
from ..events import BroadcastChannel
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..seed import seed_demo_data
from ..store import EntityStore

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    The entity store and broadcast channel are created here and live exactly
    as long as the returned app.
    """
    settings = settings or default_settings
    store = EntityStore()
    channel = BroadcastChannel()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Academia API...", environment=settings.environment)
        if settings.seed_demo_data:
            seed_demo_data(store)
        yield
        logger.info("Shutting down Academia API...", **store.stats().model_dump())

    app = FastAPI(
        title="Academia API",
        description="In-memory academic records exposed over GraphQL",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store = store
    app.state.channel = channel

    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check(request: Request):  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": __version__,
            "stats": request.app.state.store.stats().model_dump(),
        }

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(store, channel, graphiql=settings.graphiql))
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


def get_app() -> FastAPI:
    """App factory for ``uvicorn --factory``.

    Settings are re-read so environment overrides made by the CLI apply.
    """
    app_settings = Settings()
    configure_logging(debug=app_settings.debug)
    return create_app(app_settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "academia.api.app:get_app",
        factory=True,
        host=default_settings.api_host,
        port=default_settings.api_port,
        reload=default_settings.api_reload,
        log_level=default_settings.log_level.lower(),
    )
