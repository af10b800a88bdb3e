from __future__ import annotations

"""Capability value type and discovery records.

A capability is a named, described, asynchronous ``str -> str`` callable that
an external orchestrator (an agent loop driving a language model) can discover
and invoke without knowing how it is implemented.

Capabilities should:

- accept at most one string argument and always resolve to a string,
- convert failures of their backing resource into a string starting with
  ``ERROR_MARKER`` instead of raising,
- keep no state between invocations.
"""

from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

InvokeFn = Callable[[Optional[str]], Awaitable[str]]

ERROR_MARKER = "[Error]"


@dataclass(frozen=True)
class CapabilityInfo:
    """Discovery record exposed to orchestrators: name and description only."""

    name: str
    description: str


@dataclass(frozen=True)
class Capability:
    """A named, described, invocable unit of functionality.

    Attributes
    ----------
    name:
        Short human-readable identifier, unique within a registry.
    description:
        Natural-language text describing purpose, input and output shape.
        Consumed by the orchestrator only, never parsed.
    invoke:
        Coroutine function taking an optional string argument and returning
        a string result.
    """

    name: str
    description: str
    invoke: InvokeFn

    def info(self) -> CapabilityInfo:
        return CapabilityInfo(name=self.name, description=self.description)


def format_error(context: str, detail: Optional[str] = None) -> str:
    """Build an error-marked result string.

    Args:
        context: What was being attempted, e.g. ``"cat indices failed"``.
        detail: Optional short, already-sanitised detail.

    Returns:
        ``"[Error] <context>"`` or ``"[Error] <context>: <detail>"``.
    """
    if detail:
        return f"{ERROR_MARKER} {context}: {detail}"
    return f"{ERROR_MARKER} {context}"


def is_error_result(result: str) -> bool:
    """Return True when a capability result reports a failure."""
    return isinstance(result, str) and result.startswith(ERROR_MARKER)
