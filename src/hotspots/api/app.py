"""
Main FastAPI application for the Hotspots API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import StoreClients, create_store_clients

# Configure logging before creating logger
configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Hotspots API...", environment=settings.environment)

    owns_stores = getattr(app.state, "stores", None) is None
    if owns_stores:
        try:
            app.state.stores = create_store_clients(settings)
        except ValueError as e:
            # Fail fast: the API is useless without a store
            logger.error("Failed to configure store", error=str(e))
            raise
        logger.info("Store clients initialized", backend=settings.store_backend)

    yield

    logger.info("Shutting down Hotspots API...")
    if owns_stores:
        await app.state.stores.aclose()
        app.state.stores = None


def create_app(stores: StoreClients | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        stores: Pre-built store clients; when omitted they are created from
            settings at startup and closed at shutdown.
    """
    app = FastAPI(
        title="Hotspots API",
        description="GraphQL access to movies, users and video hotspots",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.stores = stores

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": __version__,
            "store_configured": app.state.stores is not None,
        }

    from ..graphql.schema import create_graphql_router, validate_schema

    logger.info("Validating GraphQL schema...")
    validate_schema()
    app.include_router(create_graphql_router(graphiql=settings.graphiql), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app
