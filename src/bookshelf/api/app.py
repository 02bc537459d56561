"""
Main FastAPI application for the Bookshelf service
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings as default_settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import BookStore

logger = get_logger(__name__)


def create_store(app_settings: Settings) -> BookStore:
    """Build the book store an application owns."""
    if app_settings.seed_books:
        return BookStore.seeded(id_policy=app_settings.id_policy)
    return BookStore(id_policy=app_settings.id_policy)


def create_app(settings: Settings | None = None, store: BookStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Each application owns its own book store; pass ``store`` to supply one.
    """
    app_settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(
            "Server ready",
            url=app_settings.server_url,
            books=app.state.book_store.count(),
            id_policy=app.state.book_store.id_policy.value,
        )
        yield
        logger.info("Shutting down Bookshelf API...")

    app = FastAPI(
        title="Bookshelf API",
        description="In-memory book catalogue served over GraphQL",
        version=__version__,
        lifespan=lifespan,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.book_store = store if store is not None else create_store(app_settings)

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
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
            "books": request.app.state.book_store.count(),
        }

    from ..graphql.schema import create_graphql_router, validate_schema

    # Fail fast: the server should not start with a broken schema
    logger.info("Validating GraphQL schema...")
    validate_schema()

    app.include_router(create_graphql_router(graphiql=app_settings.graphiql), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app


def get_app() -> FastAPI:
    """Application factory for ``uvicorn --factory``.

    Settings are re-read from the environment so options set by the CLI apply.
    """
    app_settings = Settings()
    configure_logging(debug=app_settings.debug, log_level=app_settings.log_level)
    return create_app(app_settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookshelf.api.app:get_app",
        factory=True,
        host=default_settings.api_host,
        port=default_settings.api_port,
        reload=default_settings.api_reload,
        log_level=default_settings.log_level.lower(),
    )
