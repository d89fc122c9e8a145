"""Local decoding faults raised while marshaling JSON-RPC traffic.

Protocol errors reported by the node are not exceptions; they come back as
``Failure`` outcomes. The classes below cover the cases where a response
cannot be understood at all, so the in-flight call has to abort.
"""


class MalformedQuantity(ValueError):
    """A quantity string lacks the ``0x`` prefix or has no valid hex digits."""


class NumericOverflow(ValueError):
    """A value does not fit the requested native integer width."""


class MalformedEnvelope(ValueError):
    """A response is not a JSON-RPC 2.0 envelope."""


class MalformedResult(ValueError):
    """A result does not match any shape expected for its method."""

    def __init__(self, method: str, detail: str) -> None:
        """Initialize the error.

        Args:
            method: JSON-RPC method whose result failed to decode
            detail: Description of the mismatch
        """
        super().__init__(f"Malformed result for {method}: {detail}")
        self.method = method
        self.detail = detail


__all__ = [
    "MalformedEnvelope",
    "MalformedQuantity",
    "MalformedResult",
    "NumericOverflow",
]
