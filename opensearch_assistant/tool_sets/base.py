from __future__ import annotations

"""Tool set protocol and the capability failure boundary.

A tool set is a small bundle of related capabilities sharing one backing
dependency. It is built with that dependency and creates its capabilities
at construction time; the assembler only needs the ``capabilities`` list.
"""

import asyncio
from typing import Awaitable, Callable, List, Optional, Protocol

from pydantic import ValidationError

from opensearch_assistant.capabilities.base import Capability, InvokeFn, format_error
from opensearch_assistant.core.logging_config import get_logger
from opensearch_assistant.search_client.errors import IndexNameRequiredError, SearchClusterError

logger = get_logger(__name__)


class ToolSet(Protocol):
    """Protocol for capability bundles."""

    @property
    def capabilities(self) -> List[Capability]: ...


def describe_failure(exc: BaseException) -> str:
    """Short, credential-free description of a backing failure.

    Only messages we construct ourselves are echoed; anything else is reduced
    to its exception type.
    """
    if isinstance(exc, ValidationError):
        return "malformed response from the search cluster"
    if isinstance(exc, (SearchClusterError, IndexNameRequiredError)):
        return str(exc)
    return f"unexpected {type(exc).__name__}"


def guard_backing_call(label: str, call: Callable[[Optional[str]], Awaitable[str]]) -> InvokeFn:
    """Wrap a backing call so that it can never raise.

    Args:
        label: Operation name used in the failure string, e.g. ``"cat indices"``.
        call: Coroutine function doing the real work.

    Returns:
        A coroutine function with the same signature whose failures resolve to
        ``"[Error] <label> failed: <detail>"``. Cancellation is re-raised.
    """

    async def _guarded(argument: Optional[str] = None) -> str:
        try:
            return await call(argument)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.warning("%s failed: %s", label, describe_failure(e), exc_info=True)
            return format_error(f"{label} failed", describe_failure(e))

    return _guarded
