import logging
from typing import Any, Dict, Optional

import httpx

from .errors import CatalogError
from .settings import Settings
from .signing import RequestSigner

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 12
DEFAULT_OFFSET = 0


class CatalogClient:
    """
    Thin passthrough to the public comic catalog API.
    Every request carries a freshly signed ts/apikey/hash query string;
    responses are returned as decoded JSON without modification.
    """

    def __init__(
        self,
        settings: Settings,
        signer: Optional[RequestSigner] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = settings.api_url
        self._signer = signer or RequestSigner(settings)
        self._client = httpx.AsyncClient(
            timeout=settings.catalog_timeout_seconds,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get(self, path: str, extra_query: str = "") -> Dict[str, Any]:
        url = f"{self._base_url}{path}?{self._signer.query()}{extra_query}"
        r = await self._client.get(url)
        # the signed query string is never logged
        logger.info("catalog GET %s -> %s", path, r.status_code)
        if r.is_error:
            raise CatalogError(r.status_code, path)
        return r.json()

    async def get_comics(self, limit: int = DEFAULT_LIMIT, offset: int = DEFAULT_OFFSET) -> Dict[str, Any]:
        return await self._get("/comics", f"&limit={limit}&offset={offset}")

    async def get_comic(self, comic_id: int) -> Dict[str, Any]:
        return await self._get(f"/comics/{comic_id}")

    async def get_character(self, character_id: int) -> Dict[str, Any]:
        return await self._get(f"/characters/{character_id}")
