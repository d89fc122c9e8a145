"""Pydantic models for JSON-RPC requests and responses."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from web3rpc.helpers.constants import JSONRPC_VERSION
from web3rpc.helpers.errors import MalformedEnvelope
from web3rpc.helpers.http_models import JsonValue


class JsonRpcRequest(BaseModel):
    """JSON-RPC 2.0 request model."""

    model_config = ConfigDict(frozen=True)

    jsonrpc: Literal["2.0"] = Field(default="2.0", description="JSON-RPC version")
    id: int = Field(..., description="Request ID")
    method: str = Field(..., description="Method name to call")
    params: list[Any] = Field(
        default_factory=list, description="Positional method parameters"
    )

    def to_bytes(self) -> bytes:
        """Serialize to the compact wire form sent to the transport."""
        return self.model_dump_json().encode()


class ErrorContent(BaseModel):
    """Error object reported by the node."""

    model_config = ConfigDict(frozen=True)

    code: int = Field(..., description="JSON-RPC error code")
    message: str = Field(..., description="Human-readable error message")
    data: Any = Field(default=None, description="Optional server-defined detail")


class JsonRpcResponse(BaseModel):
    """JSON-RPC 2.0 response model.

    ``error`` is authoritative: when it is set, ``result`` carries no meaning
    even if the node populated it.
    """

    model_config = ConfigDict(frozen=True)

    jsonrpc: Literal["2.0"] = Field(..., description="JSON-RPC version")
    id: int | str | None = Field(default=None, description="Request ID echoed back")
    error: ErrorContent | None = Field(default=None, description="Error object")
    result: Any = Field(default=None, description="Raw, undecoded result value")


def build_request(method: str, params: list[Any], request_id: int) -> JsonRpcRequest:
    """Wrap positional parameters in a request envelope.

    Args:
        method: RPC method name (e.g., "eth_blockNumber")
        params: Already JSON-encodable parameters, in protocol order
        request_id: Identifier the transport uses to correlate the reply

    Returns:
        Request envelope
    """
    return JsonRpcRequest(id=request_id, method=method, params=params)


def parse_response(raw: JsonValue) -> JsonRpcResponse:
    """Validate a decoded JSON reply as a response envelope.

    Args:
        raw: JSON value returned by the transport

    Returns:
        Response envelope with the result left undecoded

    Raises:
        MalformedEnvelope: If the value is not an object, the version is not
            "2.0", the error object is malformed, or neither an error nor a
            result member is present
    """
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise MalformedEnvelope(msg)

    version = raw.get("jsonrpc")
    if version != JSONRPC_VERSION:
        msg = f"Unsupported JSON-RPC version: {version!r}"
        raise MalformedEnvelope(msg)

    if raw.get("error") is None and "result" not in raw:
        msg = "Response carries neither an error nor a result"
        raise MalformedEnvelope(msg)

    try:
        return JsonRpcResponse.model_validate(raw)
    except ValidationError as e:
        msg = f"Invalid response envelope: {e}"
        raise MalformedEnvelope(msg) from e


__all__ = [
    "ErrorContent",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "build_request",
    "parse_response",
]
