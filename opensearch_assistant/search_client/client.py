from __future__ import annotations

import logging
from typing import Any, List, Optional
from urllib.parse import quote

import httpx

from .errors import IndexNameRequiredError, SearchClusterError
from .models import IndexSummary


class AsyncSearchClusterClient:
    """
    Thin async HTTP client for the OpenSearch index metadata APIs.

    Responsibilities:
    - cat_indices
    - index_exists

    Note: the underlying ``httpx.AsyncClient`` is safe for concurrent requests
    from one event loop, so a single instance can serve every capability of a
    tool set.
    """

    def __init__(
        self,
        base_url: str,
        *,
        username: Optional[str] = None,
        password: Optional[str] = None,
        verify: bool = True,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._auth: Optional[httpx.BasicAuth] = httpx.BasicAuth(username, password or "") if username else None
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, verify=verify, follow_redirects=True)
        self._logger = logging.getLogger(__name__)

    def _headers(self) -> dict[str, str]:
        return {"Accept": "application/json"}

    def _path(self, index: str) -> str:
        return quote(index.strip(), safe=",*-_.")

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._client.request(method, url, headers=self._headers(), auth=self._auth, **kwargs)
        except httpx.TransportError as e:
            raise SearchClusterError(f"Search cluster request failed ({type(e).__name__})") from e

    async def cat_indices(self, index: Optional[str] = None) -> List[IndexSummary]:
        """List index metadata rows from ``_cat/indices``.

        Args:
            index: Optional index name, comma separated list or wildcard. Blank means all indices.

        Returns:
            One ``IndexSummary`` per index. Empty when a single index name or pattern
            matches nothing.

        Raises:
            SearchClusterError: On transport failures, a missing index inside a comma
                separated list, any other non-2xx response, or an unexpected payload shape.
        """
        url = f"{self.base_url}/_cat/indices"
        if index and index.strip():
            url = f"{url}/{self._path(index)}"
        self._logger.debug("AsyncSearchClusterClient.cat_indices: GET %s", url)
        r = await self._request("GET", url, params={"format": "json"})
        if r.status_code == 404 and index and index.strip():
            missing = self._missing_index(r)
            if missing is not None and "," not in index:
                self._logger.debug("AsyncSearchClusterClient.cat_indices: no index matches %r", index)
                return []
            if missing is not None:
                raise SearchClusterError(f"cat indices found no such index [{missing}]", status_code=404, details=r.text)
        try:
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise SearchClusterError(
                f"cat indices returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
                details=e.response.text,
            ) from e
        try:
            data = r.json()
        except ValueError as e:
            raise SearchClusterError("cat indices returned a non-JSON body", status_code=r.status_code) from e
        if not isinstance(data, list):
            raise SearchClusterError("Unexpected response shape from cat indices", status_code=r.status_code, details=data)
        rows = [IndexSummary.model_validate(item) for item in data]
        self._logger.debug("AsyncSearchClusterClient.cat_indices: got %d rows", len(rows))
        return rows

    def _missing_index(self, r: httpx.Response) -> Optional[str]:
        """Return the index named by an ``index_not_found_exception`` body, else None."""
        try:
            body = r.json()
        except ValueError:
            return None
        error = body.get("error") if isinstance(body, dict) else None
        if not isinstance(error, dict) or error.get("type") != "index_not_found_exception":
            return None
        return str(error.get("index") or error.get("resource.id") or "")

    async def index_exists(self, index: str) -> bool:
        """Check whether an index, data stream or alias exists.

        Raises:
            IndexNameRequiredError: If ``index`` is blank.
            SearchClusterError: On transport failures or statuses other than 200/404.
        """
        if not index or not index.strip():
            raise IndexNameRequiredError()
        url = f"{self.base_url}/{self._path(index)}"
        self._logger.debug("AsyncSearchClusterClient.index_exists: HEAD %s", url)
        r = await self._request("HEAD", url)
        if r.status_code == 200:
            return True
        if r.status_code == 404:
            return False
        raise SearchClusterError(
            f"index exists check returned HTTP {r.status_code}",
            status_code=r.status_code,
            details=r.text,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncSearchClusterClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
