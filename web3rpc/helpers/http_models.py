"""Type definitions for JSON values crossing the transport boundary."""

from typing import Any, Protocol


# JSON value type; nested members are left as Any
type JsonValue = str | int | float | bool | dict[str, Any] | list[Any] | None


class Transport(Protocol):
    """Synchronous collaborator that exchanges one request for one response."""

    def send(self, payload: bytes) -> JsonValue:
        """Send serialized request bytes and return the parsed JSON reply."""
        ...


__all__ = ["JsonValue", "Transport"]
