"""Method-aware decoding of raw JSON-RPC results.

Each method maps to a decoder that turns the raw ``result`` value into its
typed form. Where the protocol returns structurally different payloads for
the same method without tagging them, the decoder inspects the shape first:

- eth_syncing: ``false`` is :class:`NotSyncing`, an object is :class:`Syncing`.
- eth_getBlockBy*: no ``transactions``/``uncles`` members gives
  :class:`BlockWithoutTransactions`; transaction objects give
  :class:`BlockWithTransactions`; hash strings (or an empty list) give
  :class:`BlockWithTransactionHashes`.
- eth_getFilterChanges / eth_getFilterLogs / eth_getLogs: an array of
  strings stays a list of hashes, an array of objects becomes
  :class:`FilterLog` records.

Anything that matches none of the expected shapes raises
:class:`MalformedResult`.
"""

from collections.abc import Callable
from decimal import Decimal

from typing import Any

from pydantic import StrictBool, StrictStr, TypeAdapter

from web3rpc.client.models import (
    BlockWithoutTransactions,
    BlockWithTransactionHashes,
    BlockWithTransactions,
    Failure,
    FilterLog,
    HexBigInt,
    HexInt,
    HexLong,
    NotSyncing,
    ResultOutcome,
    ShhInfo,
    ShhMessage,
    Success,
    Syncing,
    Transaction,
    TransactionReceipt,
)
from web3rpc.helpers.errors import MalformedResult
from web3rpc.helpers.rpc_models import JsonRpcResponse


type Decoder = Callable[[Any], Any]


def _adapter(tp: Any) -> Decoder:
    return TypeAdapter(tp).validate_python


def _nullable(decoder: Decoder) -> Decoder:
    def decode(raw: Any) -> Any:
        return None if raw is None else decoder(raw)

    return decode


def _require_object(raw: Any, what: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        msg = f"expected {what} object, got {type(raw).__name__}"
        raise ValueError(msg)
    return raw


decode_str = _adapter(StrictStr)
decode_bool = _adapter(StrictBool)
decode_int = _adapter(HexInt)
decode_long = _adapter(HexLong)
decode_bigint = _adapter(HexBigInt)
decode_str_list = _adapter(list[StrictStr])
decode_decimal = _adapter(Decimal)


def decode_net_version(raw: Any) -> int:
    """Decode the network id, which nodes send as a decimal string."""
    if not isinstance(raw, str) or not raw.isdecimal():
        msg = f"expected a decimal network id string, got {raw!r}"
        raise ValueError(msg)
    return int(raw)


def decode_sync_status(raw: Any) -> NotSyncing | Syncing:
    """Resolve eth_syncing into NotSyncing or Syncing."""
    if raw is False:
        return NotSyncing()
    return Syncing.model_validate(_require_object(raw, "a sync status"))


def decode_block(
    raw: Any,
) -> BlockWithTransactions | BlockWithTransactionHashes | BlockWithoutTransactions:
    """Resolve a block object into one of the three block shapes."""
    block = _require_object(raw, "a block")

    if "transactions" not in block and "uncles" not in block:
        return BlockWithoutTransactions.model_validate(block)

    transactions = block.get("transactions")
    if not isinstance(transactions, list):
        msg = f"expected a transactions array, got {type(transactions).__name__}"
        raise ValueError(msg)

    if all(isinstance(tx, str) for tx in transactions):
        return BlockWithTransactionHashes.model_validate(block)
    if all(isinstance(tx, dict) for tx in transactions):
        return BlockWithTransactions.model_validate(block)

    msg = "transactions must be all hashes or all transaction objects"
    raise ValueError(msg)


def decode_uncle(raw: Any) -> BlockWithoutTransactions:
    """Decode an uncle header, ignoring any (empty) transaction lists."""
    return BlockWithoutTransactions.model_validate(_require_object(raw, "an uncle"))


def decode_filter_changes(raw: Any) -> list[str] | list[FilterLog]:
    """Resolve a filter poll into a list of hashes or a list of logs."""
    if not isinstance(raw, list):
        msg = f"expected an array, got {type(raw).__name__}"
        raise ValueError(msg)

    if all(isinstance(entry, str) for entry in raw):
        return list(raw)
    if all(isinstance(entry, dict) for entry in raw):
        return [FilterLog.model_validate(entry) for entry in raw]

    msg = "entries must be all hashes or all log objects"
    raise ValueError(msg)


def decode_shh_messages(raw: Any) -> list[ShhMessage]:
    """Decode the messages collected by a whisper filter."""
    if not isinstance(raw, list):
        msg = f"expected an array, got {type(raw).__name__}"
        raise ValueError(msg)
    return [ShhMessage.model_validate(_require_object(entry, "a message")) for entry in raw]


RESULT_DECODERS: dict[str, Decoder] = {
    # web3 / net
    "web3_clientVersion": decode_str,
    "web3_sha3": decode_str,
    "net_version": decode_net_version,
    "net_listening": decode_bool,
    "net_peerCount": decode_int,
    # eth: node state
    "eth_protocolVersion": decode_int,
    "eth_syncing": decode_sync_status,
    "eth_coinbase": decode_str,
    "eth_mining": decode_bool,
    "eth_hashrate": decode_long,
    "eth_gasPrice": decode_bigint,
    "eth_accounts": decode_str_list,
    "eth_blockNumber": decode_long,
    # eth: state
    "eth_getBalance": decode_bigint,
    "eth_getStorageAt": decode_str,
    "eth_getTransactionCount": decode_long,
    "eth_getBlockTransactionCountByHash": decode_int,
    "eth_getBlockTransactionCountByNumber": decode_int,
    "eth_getUncleCountByBlockHash": decode_int,
    "eth_getUncleCountByBlockNumber": decode_int,
    "eth_getCode": decode_str,
    # eth: transactions
    "eth_sign": decode_str,
    "eth_sendTransaction": decode_str,
    "eth_sendRawTransaction": decode_str,
    "eth_call": decode_str,
    "eth_estimateGas": decode_long,
    # eth: blocks, transactions, receipts, uncles
    "eth_getBlockByHash": _nullable(decode_block),
    "eth_getBlockByNumber": _nullable(decode_block),
    "eth_getTransactionByHash": _nullable(Transaction.model_validate),
    "eth_getTransactionByBlockHashAndIndex": _nullable(Transaction.model_validate),
    "eth_getTransactionByBlockNumberAndIndex": _nullable(Transaction.model_validate),
    "eth_getTransactionReceipt": _nullable(TransactionReceipt.model_validate),
    "eth_getUncleByBlockHashAndIndex": _nullable(decode_uncle),
    "eth_getUncleByBlockNumberAndIndex": _nullable(decode_uncle),
    # eth: filters
    "eth_newFilter": decode_str,
    "eth_newBlockFilter": decode_str,
    "eth_newPendingTransactionFilter": decode_str,
    "eth_uninstallFilter": decode_bool,
    "eth_getFilterChanges": decode_filter_changes,
    "eth_getFilterLogs": decode_filter_changes,
    "eth_getLogs": decode_filter_changes,
    # eth: mining
    "eth_getWork": decode_str_list,
    "eth_submitWork": decode_bool,
    "eth_submitHashrate": decode_bool,
    # shh
    "shh_version": decode_decimal,
    "shh_info": ShhInfo.model_validate,
    "shh_setMaxMessageSize": decode_bool,
    "shh_setMinPoW": decode_bool,
    "shh_newKeyPair": decode_str,
    "shh_hasKeyPair": decode_bool,
    "shh_deleteKeyPair": decode_bool,
    "shh_getPublicKey": decode_str,
    "shh_newSymKey": decode_str,
    "shh_hasSymKey": decode_bool,
    "shh_deleteSymKey": decode_bool,
    "shh_newMessageFilter": decode_str,
    "shh_getFilterMessages": decode_shh_messages,
    "shh_deleteMessageFilter": decode_bool,
    "shh_post": decode_bool,
}


def decode_result(method: str, raw: Any) -> Any:
    """Decode a raw result value for the given method.

    Args:
        method: JSON-RPC method name the result answers
        raw: Undecoded ``result`` member of the response

    Returns:
        Typed result for the method

    Raises:
        MalformedResult: If no decoder is registered for the method or the
            value matches none of the shapes the method can return
    """
    decoder = RESULT_DECODERS.get(method)
    if decoder is None:
        raise MalformedResult(method, "no decoder registered for this method")

    try:
        return decoder(raw)
    except ValueError as e:
        # Covers pydantic ValidationError and codec errors alike
        raise MalformedResult(method, str(e)) from e


def decode_response(method: str, response: JsonRpcResponse) -> ResultOutcome[Any]:
    """Turn a parsed response envelope into a Success or Failure outcome.

    An error member short-circuits to Failure without looking at the result.

    Args:
        method: JSON-RPC method name the response answers
        response: Parsed response envelope

    Returns:
        Failure carrying the node's error, or Success carrying the decoded
        result

    Raises:
        MalformedResult: If the result cannot be decoded for the method
    """
    if response.error is not None:
        return Failure(error=response.error)
    return Success(result=decode_result(method, response.result))


__all__ = [
    "RESULT_DECODERS",
    "decode_block",
    "decode_filter_changes",
    "decode_response",
    "decode_result",
    "decode_sync_status",
    "decode_uncle",
]
