"""Error types specific to the search cluster client.

Purpose:
- Provide a typed exception thrown by `AsyncSearchClusterClient`.
- Expose HTTP-oriented context (status code, error body) for diagnosis while
  keeping the message itself short and free of credentials.

Usage:
- Catch `SearchClusterError` and inspect `status_code` or `details`.
"""

from __future__ import annotations

from typing import Any, Optional


class SearchClusterError(Exception):
    """Base error for search cluster failures.

    Args:
        message: Human-readable error description. Safe to show to a language model.
        status_code: Optional HTTP status code associated with the failure.
        details: Optional raw payload from the cluster (e.g., JSON error body). Never
            included in the message.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class IndexNameRequiredError(ValueError):
    """Raised before any request when an operation needs an index name and got a blank one."""

    def __init__(self) -> None:
        super().__init__("an index name is required")
