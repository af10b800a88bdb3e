from __future__ import annotations

"""Capability registry.

The registry keeps an insertion-ordered mapping of capability names to
capabilities. Orchestrators use ``list`` to discover what is available and
``invoke`` to call a capability by name with a single string argument.

The registry never interprets results: whatever string a capability returns
is handed back unchanged.
"""

import asyncio
from typing import Dict, Iterator, List, Optional

from opensearch_assistant.core.logging_config import get_logger

from .base import Capability, CapabilityInfo, format_error
from .errors import DuplicateNameError, NotFoundError

logger = get_logger(__name__)

DEFAULT_INVOKE_TIMEOUT = 30.0


class CapabilityRegistry:
    """
    Ordered, in-memory collection of named capabilities.

    Notes:
        - ``register`` raises ``DuplicateNameError`` instead of overwriting; the
          first registration is kept.
        - ``invoke`` and ``get`` raise ``NotFoundError`` for unknown names.
        - Each invocation is bounded by ``invoke_timeout`` seconds. A capability
          that misses the deadline is cancelled and an error-marked string is
          returned. ``None`` disables the deadline.
        - No locking: invocations share no mutable state.
    """

    def __init__(self, *, invoke_timeout: Optional[float] = DEFAULT_INVOKE_TIMEOUT) -> None:
        """Initialize an empty capability registry."""
        self._caps: Dict[str, Capability] = {}
        self.invoke_timeout = invoke_timeout

    def register(self, capability: Capability) -> Capability:
        """
        Register a capability.

        Args:
            capability: The capability to add at the end of the ordered collection.

        Returns:
            The registered capability.

        Raises:
            DuplicateNameError: If a capability with the same name is already registered.
        """
        if capability.name in self._caps:
            raise DuplicateNameError(capability.name)
        self._caps[capability.name] = capability
        logger.debug("Registered capability '%s'", capability.name)
        return capability

    def list(self) -> List[CapabilityInfo]:
        """
        List registered capabilities in registration order.

        Returns:
            Name and description of every capability; the invoke functions are not exposed.
        """
        return [cap.info() for cap in self._caps.values()]

    def names(self) -> List[str]:
        return list(self._caps.keys())

    def get(self, name: str) -> Capability:
        """
        Retrieve a registered capability by name.

        Raises:
            NotFoundError: If no capability is registered with the given name.
        """
        try:
            return self._caps[name]
        except KeyError:
            raise NotFoundError(name) from None

    def has(self, name: str) -> bool:
        return name in self._caps

    async def invoke(self, name: str, argument: Optional[str] = None) -> str:
        """
        Invoke a capability by name.

        Args:
            name: The capability name as returned by ``list``.
            argument: Optional single string argument forwarded to the capability.

        Returns:
            The capability's string result, unchanged. A missed deadline yields an
            error-marked string.

        Raises:
            NotFoundError: If no capability is registered with the given name.
        """
        if name not in self._caps:
            logger.warning("Invocation of unknown capability '%s'", name)
            raise NotFoundError(name)
        capability = self._caps[name]

        logger.debug("Invoking capability '%s' argument=%r", name, argument)
        try:
            if self.invoke_timeout is None:
                result = await capability.invoke(argument)
            else:
                result = await asyncio.wait_for(capability.invoke(argument), timeout=self.invoke_timeout)
        except asyncio.TimeoutError:
            logger.warning("Capability '%s' exceeded deadline of %ss", name, self.invoke_timeout)
            return format_error(f"{name} timed out", f"no result within {self.invoke_timeout} seconds")
        logger.debug("Capability '%s' returned %d characters", name, len(result))
        return result

    def __contains__(self, name: object) -> bool:
        return name in self._caps

    def __len__(self) -> int:
        return len(self._caps)

    def __iter__(self) -> Iterator[CapabilityInfo]:
        return iter(self.list())
