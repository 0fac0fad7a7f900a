"""Factory for the reader/store pair used by the GraphQL resolvers."""

from dataclasses import dataclass

from ..config import Settings
from ..logging import get_logger
from .base import DocumentReader, DocumentStore
from .memory import InMemoryDocumentStore

logger = get_logger(__name__)

SUPPORTED_BACKENDS = ("firebase", "memory")


@dataclass
class StoreClients:
    """REST-style reader for collection reads plus the realtime store for everything else."""

    reader: DocumentReader
    store: DocumentStore

    async def aclose(self) -> None:
        await self.reader.aclose()
        if self.store is not self.reader:
            await self.store.aclose()


def create_store_clients(settings: Settings) -> StoreClients:
    """Build store clients for the configured backend.

    Raises:
        ValueError: If the backend is unknown or the database URL is missing
    """
    backend = settings.store_backend.lower()

    if backend == "memory":
        store = InMemoryDocumentStore()
        logger.info("Using in-memory document store")
        return StoreClients(reader=store, store=store)

    if backend != "firebase":
        raise ValueError(
            f"Unknown store backend: {settings.store_backend}. "
            f"Supported: {', '.join(SUPPORTED_BACKENDS)}"
        )

    base_url = settings.base_db_url
    if not base_url:
        env_var = "FB_PROD_DB_URL" if settings.is_production else "FB_DEV_DB_URL"
        raise ValueError(f"{env_var} must be set for the firebase store backend")

    from .firebase import FirebaseRealtimeStore
    from .rest import RestDocumentReader

    reader = RestDocumentReader(
        base_url,
        auth_token=settings.fb_auth_token,
        timeout=settings.http_timeout,
    )
    store = FirebaseRealtimeStore(
        database_url=base_url,
        credentials_path=settings.firebase_credentials_path,
        credentials_json=settings.firebase_credentials_json,
        app_name=settings.firebase_app_name,
    )
    logger.info(
        "Using Firebase Realtime Database",
        environment=settings.environment,
        database_url=base_url,
    )
    return StoreClients(reader=reader, store=store)
