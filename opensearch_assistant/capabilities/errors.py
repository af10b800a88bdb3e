"""Error types raised by the capability registry.

Only registry misuse is raised as an exception: registering the same name
twice, or invoking a name that was never registered. Failures of a backing
resource never surface here; capabilities turn them into result strings.
"""

from __future__ import annotations


class CapabilityError(Exception):
    """Base error for capability registry failures."""


class DuplicateNameError(CapabilityError):
    """Raised when a capability name is registered twice.

    Args:
        name: The capability name that is already registered.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Capability already registered: '{name}'")
        self.name = name


class NotFoundError(CapabilityError, KeyError):
    """Raised when no capability is registered under the requested name.

    Args:
        name: The capability name that was requested.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Capability not found: '{name}'")
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])
