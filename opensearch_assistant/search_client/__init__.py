"""Async client for the search cluster index metadata APIs.

This is the backing dependency of the OpenSearch tool set. It raises typed
``SearchClusterError`` exceptions; converting them into tool output is the
job of the capabilities that use it.
"""

from .client import AsyncSearchClusterClient
from .errors import IndexNameRequiredError, SearchClusterError
from .models import IndexSummary

__all__ = ["AsyncSearchClusterClient", "IndexNameRequiredError", "IndexSummary", "SearchClusterError"]
