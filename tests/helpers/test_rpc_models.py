"""Tests for JSON-RPC envelope models."""

import pytest

from pydantic import ValidationError

from web3rpc.helpers.errors import MalformedEnvelope
from web3rpc.helpers.rpc_models import (
    ErrorContent,
    JsonRpcRequest,
    build_request,
    parse_response,
)


class TestJsonRpcRequest:
    """Tests for request envelopes."""

    def test_defaults(self) -> None:
        """Test version and params defaults."""
        request = JsonRpcRequest(id=1, method="eth_blockNumber")
        assert request.jsonrpc == "2.0"
        assert request.params == []

    def test_wire_bytes(self) -> None:
        """Test the serialized request is compact and ordered."""
        request = build_request(
            "eth_getBalance",
            ["0x1f2e3994505ea24642d94d00a4bcf0159ed1a617", "0x17cb01"],
            33,
        )
        assert request.to_bytes() == (
            b'{"jsonrpc":"2.0","id":33,"method":"eth_getBalance",'
            b'"params":["0x1f2e3994505ea24642d94d00a4bcf0159ed1a617","0x17cb01"]}'
        )

    def test_nested_params(self) -> None:
        """Test object, boolean and null params serialize as JSON."""
        request = build_request("eth_getLogs", [{"topics": [None, "0xa"]}, True], 2)
        assert request.to_bytes() == (
            b'{"jsonrpc":"2.0","id":2,"method":"eth_getLogs",'
            b'"params":[{"topics":[null,"0xa"]},true]}'
        )

    def test_frozen(self) -> None:
        """Test requests cannot be mutated."""
        request = JsonRpcRequest(id=1, method="net_version")
        with pytest.raises(ValidationError):
            request.method = "net_listening"  # type: ignore[misc]

    def test_method_required(self) -> None:
        """Test a method name is required."""
        with pytest.raises(ValidationError):
            JsonRpcRequest(id=1)  # type: ignore[call-arg]


class TestParseResponse:
    """Tests for parse_response function."""

    def test_result(self) -> None:
        """Test a success envelope keeps the raw result."""
        response = parse_response({"jsonrpc": "2.0", "id": 33, "result": "0xB"})
        assert response.id == 33
        assert response.error is None
        assert response.result == "0xB"

    def test_null_result(self) -> None:
        """Test an explicit null result is a valid success envelope."""
        response = parse_response({"jsonrpc": "2.0", "id": 1, "result": None})
        assert response.error is None
        assert response.result is None

    def test_error(self) -> None:
        """Test an error envelope exposes its error content."""
        response = parse_response(
            {
                "jsonrpc": "2.0",
                "id": 33,
                "error": {"code": -32602, "message": "invalid argument 0"},
                "result": {},
            }
        )
        assert response.error == ErrorContent(code=-32602, message="invalid argument 0")

    def test_error_data(self) -> None:
        """Test optional error data is kept verbatim."""
        response = parse_response(
            {
                "jsonrpc": "2.0",
                "id": 1,
                "error": {"code": 3, "message": "execution reverted", "data": "0x08c3"},
            }
        )
        assert response.error is not None
        assert response.error.data == "0x08c3"

    @pytest.mark.parametrize("raw", [[], "ok", None, 1])
    def test_not_an_object(self, raw: object) -> None:
        """Test non-object replies are rejected."""
        with pytest.raises(MalformedEnvelope, match="Expected a JSON object"):
            parse_response(raw)  # type: ignore[arg-type]

    @pytest.mark.parametrize("version", ["1.0", None, 2.0])
    def test_wrong_version(self, version: object) -> None:
        """Test anything but version 2.0 is rejected."""
        with pytest.raises(MalformedEnvelope, match="Unsupported JSON-RPC version"):
            parse_response({"jsonrpc": version, "id": 1, "result": "0x1"})

    def test_missing_version(self) -> None:
        """Test a reply without a version is rejected."""
        with pytest.raises(MalformedEnvelope):
            parse_response({"id": 1, "result": "0x1"})

    def test_neither_error_nor_result(self) -> None:
        """Test a reply with no payload is rejected."""
        with pytest.raises(MalformedEnvelope, match="neither an error nor a result"):
            parse_response({"jsonrpc": "2.0", "id": 1})

    def test_malformed_error_object(self) -> None:
        """Test an error without a code is rejected."""
        with pytest.raises(MalformedEnvelope, match="Invalid response envelope"):
            parse_response({"jsonrpc": "2.0", "id": 1, "error": {"message": "boom"}})

    def test_malformed_envelope_is_value_error(self) -> None:
        """Test envelope errors can be handled as ValueError."""
        with pytest.raises(ValueError):
            parse_response({"jsonrpc": "2.0"})
