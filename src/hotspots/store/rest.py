"""Read documents through the Realtime Database REST interface."""

from typing import Any

import httpx

from ..logging import get_logger
from .base import DocumentReader, StoreException, split_path

logger = get_logger(__name__)


class RestDocumentReader(DocumentReader):
    """Fetch ``{base_url}/{path}.json`` with a shared async HTTP client."""

    def __init__(
        self,
        base_url: str,
        auth_token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.auth_token = auth_token
        self._http_client = httpx.AsyncClient(timeout=timeout, transport=transport)

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{'/'.join(split_path(path))}.json"

    async def get(self, path: str) -> Any:
        url = self.url_for(path)
        params = {"auth": self.auth_token} if self.auth_token else None

        try:
            response = await self._http_client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Store read rejected",
                path=path,
                status_code=e.response.status_code,
            )
            raise StoreException(
                f"Read of {path} failed with status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error("Store read failed", path=path, error=str(e))
            raise StoreException(f"Read of {path} failed: {e}") from e
        except ValueError as e:
            logger.error("Store returned invalid JSON", path=path, error=str(e))
            raise StoreException(f"Read of {path} returned invalid JSON") from e

    async def aclose(self) -> None:
        await self._http_client.aclose()
