"""Firebase Realtime Database store backed by the firebase-admin SDK."""

import asyncio
import functools
import json
from pathlib import Path
from typing import Any

import firebase_admin
from firebase_admin import credentials, db
from firebase_admin.exceptions import FirebaseError

from ..logging import get_logger
from .base import (
    DocumentStore,
    StoreException,
    TransactionUpdate,
    split_path,
)

logger = get_logger(__name__)


class FirebaseRealtimeStore(DocumentStore):
    """Realtime Database access with lazy app initialisation.

    The SDK is blocking, so every call runs in the event loop's default executor.
    """

    def __init__(
        self,
        database_url: str,
        credentials_path: str | None = None,
        credentials_json: str | None = None,
        app_name: str = "hotspots",
    ):
        self.database_url = database_url
        self.credentials_path = credentials_path
        self.credentials_json = credentials_json
        self.app_name = app_name

        self._app: firebase_admin.App | None = None

    def _load_credentials(self) -> credentials.Base:
        if self.credentials_json:
            return credentials.Certificate(json.loads(self.credentials_json))
        if self.credentials_path:
            credentials_path = Path(self.credentials_path)
            if not credentials_path.exists():
                raise FileNotFoundError(f"Credentials file not found: {self.credentials_path}")
            return credentials.Certificate(str(credentials_path))
        return credentials.ApplicationDefault()

    def _get_app(self) -> firebase_admin.App:
        """Get or create the firebase app bound to this database."""
        if self._app is None:
            try:
                self._app = firebase_admin.get_app(self.app_name)
            except ValueError:
                try:
                    self._app = firebase_admin.initialize_app(
                        self._load_credentials(),
                        {"databaseURL": self.database_url},
                        name=self.app_name,
                    )
                except Exception as e:
                    logger.error("Failed to initialize Firebase app", error=str(e))
                    raise StoreException(f"Firebase initialization failed: {e}") from e
                logger.info("Firebase app initialized", database_url=self.database_url)
        return self._app

    def _reference(self, path: str) -> db.Reference:
        app = self._get_app()
        try:
            return db.reference("/" + "/".join(split_path(path)), app=app)
        except ValueError as e:
            raise StoreException(f"Invalid store path {path!r}: {e}") from e

    async def _run_sync(self, func, *args, **kwargs) -> Any:
        """Run a blocking SDK call in the thread pool."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(func, *args, **kwargs))

    async def _call(self, operation: str, path: str, func, *args) -> Any:
        try:
            return await self._run_sync(func, *args)
        except StoreException:
            # Includes PreconditionFailed from transaction updates
            raise
        except (FirebaseError, ValueError) as e:
            logger.error("Store operation failed", operation=operation, path=path, error=str(e))
            raise StoreException(f"{operation} {path} failed: {e}") from e

    async def get(self, path: str) -> Any:
        ref = self._reference(path)
        return await self._call("get", path, ref.get)

    async def set(self, path: str, value: Any) -> None:
        ref = self._reference(path)
        await self._call("set", path, ref.set, value)

    async def remove(self, path: str) -> None:
        ref = self._reference(path)
        await self._call("remove", path, ref.delete)

    async def push(self, path: str, value: Any) -> str:
        ref = self._reference(path)
        child = await self._call("push", path, ref.push, value)
        return child.key

    async def transaction(self, path: str, update: TransactionUpdate) -> Any:
        ref = self._reference(path)
        return await self._call("transaction", path, ref.transaction, update)
