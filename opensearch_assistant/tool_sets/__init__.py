"""Tool sets: capability bundles sharing one backing dependency."""

from .base import ToolSet, guard_backing_call
from .os_apis import OpenSearchApiToolSet

__all__ = ["OpenSearchApiToolSet", "ToolSet", "guard_backing_call"]
