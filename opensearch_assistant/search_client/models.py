"""Pydantic models for search cluster responses.

The ``_cat/indices`` API with ``format=json`` returns one object per index
whose keys contain dots (``docs.count``, ``pri.store.size``). The model maps
those keys to Python attribute names through aliases and dumps them back
with the dotted keys so the serialised summary matches what the cluster
reports.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class IndexSummary(BaseModel):
    """One row of the ``_cat/indices`` response."""

    health: Optional[str] = Field(None, description="Cluster health of the index (green, yellow, red)")
    status: Optional[str] = Field(None, description="Index state (open, close)")
    index: str = Field(..., description="Index name")
    uuid: Optional[str] = Field(None, description="Index UUID")
    pri: Optional[str] = Field(None, description="Number of primary shards")
    rep: Optional[str] = Field(None, description="Number of replica shards")
    docs_count: Optional[str] = Field(None, alias="docs.count", description="Number of documents")
    docs_deleted: Optional[str] = Field(None, alias="docs.deleted", description="Number of deleted documents")
    store_size: Optional[str] = Field(None, alias="store.size", description="Total store size")
    pri_store_size: Optional[str] = Field(None, alias="pri.store.size", description="Primary store size")

    model_config = ConfigDict(populate_by_name=True, extra="allow", coerce_numbers_to_str=True)

    def to_cat_row(self) -> dict:
        """Dump using the cluster's dotted keys, dropping unset columns."""
        return self.model_dump(by_alias=True, exclude_none=True)
