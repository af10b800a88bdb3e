"""Capability registry and invocation contract.

 A *capability* is a named, described, asynchronous ``str -> str`` callable.

 - Tool sets build capabilities around a shared backing dependency.
 - The assembler registers the capabilities of several tool sets into one
   ``CapabilityRegistry``.
 - An orchestrator discovers capabilities with ``CapabilityRegistry.list`` and
   calls them with ``CapabilityRegistry.invoke``.

 Backing-resource failures never raise past a capability; they come back as
 strings starting with ``ERROR_MARKER``. Only registry misuse raises
 (``DuplicateNameError``, ``NotFoundError``).
 """

from .base import ERROR_MARKER, Capability, CapabilityInfo, format_error, is_error_result
from .errors import CapabilityError, DuplicateNameError, NotFoundError
from .registry import CapabilityRegistry

__all__ = [
    "ERROR_MARKER",
    "Capability",
    "CapabilityError",
    "CapabilityInfo",
    "CapabilityRegistry",
    "DuplicateNameError",
    "NotFoundError",
    "format_error",
    "is_error_result",
]
