from __future__ import annotations

"""Convenience factories for assembling a capability registry.

``build_registry`` concatenates the capabilities of any number of tool sets
into one registry. ``create_default_registry`` wires the OpenSearch tool set
from settings so applications and tests stay concise, while still allowing a
pre-built search client to be injected.
"""

from typing import Optional, Tuple

from .capabilities.registry import DEFAULT_INVOKE_TIMEOUT, CapabilityRegistry
from .core.config import Settings
from .core.config import settings as default_settings
from .core.logging_config import get_logger
from .search_client.client import AsyncSearchClusterClient
from .tool_sets.base import ToolSet
from .tool_sets.os_apis import OpenSearchApiToolSet

logger = get_logger(__name__)


def build_registry(*tool_sets: ToolSet, invoke_timeout: Optional[float] = DEFAULT_INVOKE_TIMEOUT) -> CapabilityRegistry:
    """Build a ``CapabilityRegistry`` from tool sets, in order.

    Raises:
        DuplicateNameError: If two capabilities share a name. Assembly is aborted.
    """
    reg = CapabilityRegistry(invoke_timeout=invoke_timeout)
    for tool_set in tool_sets:
        for capability in tool_set.capabilities:
            reg.register(capability)
    logger.info("Assembled capability registry with %d capabilities from %d tool sets", len(reg), len(tool_sets))
    return reg


def build_search_client(settings: Optional[Settings] = None) -> AsyncSearchClusterClient:
    """Construct the search cluster client from settings."""
    cfg = (settings or default_settings).opensearch
    return AsyncSearchClusterClient(
        cfg.url,
        username=cfg.username,
        password=cfg.password,
        verify=cfg.verify_certs,
        timeout=cfg.request_timeout,
    )


def create_default_registry(
    settings: Optional[Settings] = None,
    *,
    client: Optional[AsyncSearchClusterClient] = None,
) -> Tuple[CapabilityRegistry, AsyncSearchClusterClient]:
    """Build the default registry holding the OpenSearch tool set.

    Returns:
        The registry and the search client backing it. The caller owns the
        client and should ``aclose`` it when the registry is discarded.
    """
    cfg = settings or default_settings
    search_client = client or build_search_client(cfg)
    reg = build_registry(OpenSearchApiToolSet(search_client), invoke_timeout=cfg.tool_timeout)
    return reg, search_client
