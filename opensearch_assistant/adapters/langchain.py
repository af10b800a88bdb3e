"""Expose registry capabilities as LangChain tools.

Agent runtimes built on LangChain / LangGraph expect ``BaseTool`` objects.
Each capability becomes a single-input ``Tool`` whose coroutine routes
through ``CapabilityRegistry.invoke`` so the registry's deadline applies.
Names and descriptions are passed through unchanged.
"""

from __future__ import annotations

from typing import List, Optional

from langchain_core.tools import Tool

from opensearch_assistant.capabilities.registry import CapabilityRegistry


def _make_coroutine(registry: CapabilityRegistry, name: str):
    async def _run(tool_input: Optional[str] = None) -> str:
        return await registry.invoke(name, tool_input or None)

    return _run


def to_langchain_tools(registry: CapabilityRegistry) -> List[Tool]:
    """Convert every registered capability into an async LangChain ``Tool``."""
    return [
        Tool(
            name=info.name,
            description=info.description,
            func=None,
            coroutine=_make_coroutine(registry, info.name),
        )
        for info in registry.list()
    ]
