from __future__ import annotations

import json
from typing import List, Optional

from opensearch_assistant.capabilities.base import Capability
from opensearch_assistant.search_client.client import AsyncSearchClusterClient
from opensearch_assistant.search_client.errors import IndexNameRequiredError

from .base import guard_backing_call

GET_INDICES = "Get OpenSearch indices"
INDEX_CHECK = "OpenSearch Index check"

INDEX_EXISTS_TEXT = "Index exists in the OpenSearch Cluster"
INDEX_MISSING_TEXT = "One or more specified Index do not exist"


class OpenSearchApiToolSet:
    """
    Capabilities answering questions about index metadata of an OpenSearch cluster.

    Both capabilities share one ``AsyncSearchClusterClient`` handed in at
    construction time. Backing failures are returned as ``[Error]`` strings.
    """

    def __init__(self, client: AsyncSearchClusterClient) -> None:
        self._client = client
        self._capabilities: List[Capability] = [
            Capability(
                name=GET_INDICES,
                description=(
                    "use this tool to get high-level information like (health, status, index, uuid, "
                    "primary count, replica count, docs.count, docs.deleted, store.size, "
                    "primary.store.size) about indices in a cluster, including backing indices for "
                    "data streams in the OpenSearch cluster. This tool optionally takes an index name, "
                    "comma separated list or wildcard pattern as input and returns a JSON array."
                ),
                invoke=guard_backing_call("cat indices", self.cat_indices),
            ),
            Capability(
                name=INDEX_CHECK,
                description=(
                    "use this tool to check if a data stream, index, or alias exists in the OpenSearch "
                    "cluster. This tool takes the index name as input"
                ),
                invoke=guard_backing_call("index exists check", self.index_exists),
            ),
        ]

    @property
    def capabilities(self) -> List[Capability]:
        return list(self._capabilities)

    async def cat_indices(self, index_name: Optional[str] = None) -> str:
        rows = await self._client.cat_indices(index_name or None)
        return json.dumps([row.to_cat_row() for row in rows])

    async def index_exists(self, index_name: Optional[str] = None) -> str:
        if not index_name or not index_name.strip():
            raise IndexNameRequiredError()
        exists = await self._client.index_exists(index_name)
        return INDEX_EXISTS_TEXT if exists else INDEX_MISSING_TEXT
