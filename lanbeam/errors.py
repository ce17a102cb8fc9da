"""Errors raised while resolving the endpoint to serve on."""

from typing import Any


class ResolutionError(Exception):
    """Base class for everything that aborts endpoint resolution."""


class ParseError(ResolutionError, ValueError):
    """Raised when a selection is not a non-negative integer."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Not a valid number: {text.strip()!r}")


class ChoiceError(ResolutionError):
    """Raised when a numeric selection falls outside the offered range."""

    def __init__(self, low: Any, high: Any) -> None:
        self.low = low
        self.high = high
        super().__init__(f"Not a valid choice. Must be between {low} and {high}")

    def __repr__(self) -> str:
        return f"ChoiceError(low={self.low!r}, high={self.high!r})"


class InterfaceNotFoundError(ResolutionError, LookupError):
    """Raised when a requested network interface is not in the catalog."""

    def __init__(self, interface: str) -> None:
        self.interface = interface
        super().__init__(f"The given network interface doesn't exist: {interface}")

    def __repr__(self) -> str:
        return f"InterfaceNotFoundError(interface={self.interface!r})"
