"""Typed Ethereum JSON-RPC service."""

from collections.abc import Iterator
from decimal import Decimal
from itertools import count

from typing import Any

from web3rpc.client.decoders import decode_response
from web3rpc.client.models import (
    Block,
    BlockWithoutTransactions,
    FilterLog,
    ResultOutcome,
    ShhInfo,
    ShhMessage,
    SyncStatus,
    Transaction,
    TransactionReceipt,
)
from web3rpc.client.params import (
    BlockSelector,
    EthCallObject,
    EthEstimateGasObject,
    EthNewFilterObject,
    EthSendTransactionObject,
    ShhMessageObject,
    ShhNewMessageFilterObject,
    block_value,
)
from web3rpc.helpers.config import get_eth_rpc_url, get_rpc_timeout
from web3rpc.helpers.http import HttpTransport
from web3rpc.helpers.http_models import Transport
from web3rpc.helpers.logging import get_logger
from web3rpc.helpers.parsers import bigint_to_hex, int_to_hex
from web3rpc.helpers.rpc_models import build_request, parse_response


logger = get_logger(__name__)

type BlockParam = BlockSelector | int | str
type FilterChanges = list[str] | list[FilterLog]


class Service:
    """Ethereum JSON-RPC service with one method per protocol call.

    Every method performs exactly one round trip through the transport and
    returns a ``Success`` or ``Failure`` outcome. Errors reported by the node
    become ``Failure``; malformed replies raise ``MalformedEnvelope`` or
    ``MalformedResult``; transport errors propagate unchanged.

    Example:
        ```python
        from web3rpc.client.params import BlockName
        from web3rpc.client.service import create_service

        service = create_service("http://localhost:8545")
        outcome = service.eth_get_balance(
            "0x1f2e3994505ea24642d94d00a4bcf0159ed1a617", BlockName(name="latest")
        )
        if outcome.is_success:
            print(outcome.result)
        else:
            print(outcome.error.code, outcome.error.message)
        ```
    """

    def __init__(
        self, transport: Transport, request_ids: Iterator[int] | None = None
    ) -> None:
        """Initialize the service.

        Args:
            transport: Collaborator that sends request bytes and returns the
                parsed JSON reply
            request_ids: Source of request ids; defaults to a counter starting
                at 1 owned by this instance
        """
        self.transport = transport
        self.request_ids = request_ids if request_ids is not None else count(1)

    def call(self, method: str, *params: Any) -> ResultOutcome[Any]:
        """Send one request and decode its reply.

        Args:
            method: RPC method name (e.g., "eth_blockNumber")
            *params: JSON-encodable parameters in protocol order

        Returns:
            Success with the decoded result, or Failure with the node's error

        Raises:
            MalformedEnvelope: If the reply is not a JSON-RPC 2.0 response
            MalformedResult: If the result does not fit the method's shapes
        """
        request = build_request(method, list(params), next(self.request_ids))
        logger.debug("Calling %s (id=%d)", method, request.id)

        raw = self.transport.send(request.to_bytes())
        outcome = decode_response(method, parse_response(raw))

        if not outcome.is_success:
            logger.warning(
                "%s returned error %d: %s",
                method,
                outcome.error.code,
                outcome.error.message,
            )
        return outcome

    # web3

    def web3_client_version(self) -> ResultOutcome[str]:
        """`web3_clientVersion`: Returns the current client version."""
        return self.call("web3_clientVersion")

    def web3_sha3(self, data: str) -> ResultOutcome[str]:
        """`web3_sha3`: Returns Keccak-256 of the given hex data."""
        return self.call("web3_sha3", data)

    # net

    def net_version(self) -> ResultOutcome[int]:
        """`net_version`: Returns the current network id."""
        return self.call("net_version")

    def net_listening(self) -> ResultOutcome[bool]:
        """`net_listening`: Returns True if the client listens for peers."""
        return self.call("net_listening")

    def net_peer_count(self) -> ResultOutcome[int]:
        """`net_peerCount`: Returns the number of connected peers."""
        return self.call("net_peerCount")

    # eth: node state

    def eth_protocol_version(self) -> ResultOutcome[int]:
        """`eth_protocolVersion`: Returns the ethereum protocol version."""
        return self.call("eth_protocolVersion")

    def eth_syncing(self) -> ResultOutcome[SyncStatus]:
        """`eth_syncing`: Returns NotSyncing or the current Syncing progress."""
        return self.call("eth_syncing")

    def eth_coinbase(self) -> ResultOutcome[str]:
        """`eth_coinbase`: Returns the client coinbase address."""
        return self.call("eth_coinbase")

    def eth_mining(self) -> ResultOutcome[bool]:
        """`eth_mining`: Returns True if the client is mining."""
        return self.call("eth_mining")

    def eth_hashrate(self) -> ResultOutcome[int]:
        """`eth_hashrate`: Returns hashes per second the node mines with."""
        return self.call("eth_hashrate")

    def eth_gas_price(self) -> ResultOutcome[int]:
        """`eth_gasPrice`: Returns the current price per gas in wei."""
        return self.call("eth_gasPrice")

    def eth_accounts(self) -> ResultOutcome[list[str]]:
        """`eth_accounts`: Returns the addresses owned by the client."""
        return self.call("eth_accounts")

    def eth_block_number(self) -> ResultOutcome[int]:
        """`eth_blockNumber`: Returns the number of the most recent block."""
        return self.call("eth_blockNumber")

    # eth: state

    def eth_get_balance(self, address: str, block: BlockParam) -> ResultOutcome[int]:
        """`eth_getBalance`: Returns the balance in wei of the given address."""
        return self.call("eth_getBalance", address, block_value(block))

    def eth_get_storage_at(
        self, address: str, position: int, block: BlockParam
    ) -> ResultOutcome[str]:
        """`eth_getStorageAt`: Returns the value at a storage position."""
        return self.call(
            "eth_getStorageAt", address, bigint_to_hex(position), block_value(block)
        )

    def eth_get_transaction_count(
        self, address: str, block: BlockParam
    ) -> ResultOutcome[int]:
        """`eth_getTransactionCount`: Returns the number of transactions sent."""
        return self.call("eth_getTransactionCount", address, block_value(block))

    def eth_get_block_transaction_count_by_hash(
        self, block_hash: str
    ) -> ResultOutcome[int]:
        """`eth_getBlockTransactionCountByHash`: Returns a block's tx count."""
        return self.call("eth_getBlockTransactionCountByHash", block_hash)

    def eth_get_block_transaction_count_by_number(
        self, block: BlockParam
    ) -> ResultOutcome[int]:
        """`eth_getBlockTransactionCountByNumber`: Returns a block's tx count."""
        return self.call("eth_getBlockTransactionCountByNumber", block_value(block))

    def eth_get_uncle_count_by_block_hash(self, block_hash: str) -> ResultOutcome[int]:
        """`eth_getUncleCountByBlockHash`: Returns a block's uncle count."""
        return self.call("eth_getUncleCountByBlockHash", block_hash)

    def eth_get_uncle_count_by_block_number(
        self, block: BlockParam
    ) -> ResultOutcome[int]:
        """`eth_getUncleCountByBlockNumber`: Returns a block's uncle count."""
        return self.call("eth_getUncleCountByBlockNumber", block_value(block))

    def eth_get_code(self, address: str, block: BlockParam) -> ResultOutcome[str]:
        """`eth_getCode`: Returns the code at the given address."""
        return self.call("eth_getCode", address, block_value(block))

    # eth: transactions

    def eth_sign(self, address: str, message: str) -> ResultOutcome[str]:
        """`eth_sign`: Returns an Ethereum specific signature of the message."""
        return self.call("eth_sign", address, message)

    def eth_send_transaction(
        self, transaction: EthSendTransactionObject
    ) -> ResultOutcome[str]:
        """`eth_sendTransaction`: Creates a message call or contract creation."""
        return self.call("eth_sendTransaction", transaction.to_param())

    def eth_send_raw_transaction(self, signed_data: str) -> ResultOutcome[str]:
        """`eth_sendRawTransaction`: Submits a signed transaction."""
        return self.call("eth_sendRawTransaction", signed_data)

    def eth_call(self, call: EthCallObject, block: BlockParam) -> ResultOutcome[str]:
        """`eth_call`: Executes a message call without creating a transaction."""
        return self.call("eth_call", call.to_param(), block_value(block))

    def eth_estimate_gas(self, call: EthEstimateGasObject) -> ResultOutcome[int]:
        """`eth_estimateGas`: Returns the gas a call would use."""
        return self.call("eth_estimateGas", call.to_param())

    # eth: blocks, transactions, receipts, uncles

    def eth_get_block_by_hash(
        self, block_hash: str, full_transactions: bool
    ) -> ResultOutcome[Block | None]:
        """`eth_getBlockByHash`: Returns a block, None if it is unknown."""
        return self.call("eth_getBlockByHash", block_hash, full_transactions)

    def eth_get_block_by_number(
        self, block: BlockParam, full_transactions: bool
    ) -> ResultOutcome[Block | None]:
        """`eth_getBlockByNumber`: Returns a block, None if it is unknown."""
        return self.call("eth_getBlockByNumber", block_value(block), full_transactions)

    def eth_get_transaction_by_hash(
        self, transaction_hash: str
    ) -> ResultOutcome[Transaction | None]:
        """`eth_getTransactionByHash`: Returns a transaction by hash."""
        return self.call("eth_getTransactionByHash", transaction_hash)

    def eth_get_transaction_by_block_hash_and_index(
        self, block_hash: str, index: int
    ) -> ResultOutcome[Transaction | None]:
        """`eth_getTransactionByBlockHashAndIndex`: Returns a transaction by position."""
        return self.call(
            "eth_getTransactionByBlockHashAndIndex", block_hash, int_to_hex(index)
        )

    def eth_get_transaction_by_block_number_and_index(
        self, block: BlockParam, index: int
    ) -> ResultOutcome[Transaction | None]:
        """`eth_getTransactionByBlockNumberAndIndex`: Returns a transaction by position."""
        return self.call(
            "eth_getTransactionByBlockNumberAndIndex",
            block_value(block),
            int_to_hex(index),
        )

    def eth_get_transaction_receipt(
        self, transaction_hash: str
    ) -> ResultOutcome[TransactionReceipt | None]:
        """`eth_getTransactionReceipt`: Returns the receipt, None while pending."""
        return self.call("eth_getTransactionReceipt", transaction_hash)

    def eth_get_uncle_by_block_hash_and_index(
        self, block_hash: str, index: int
    ) -> ResultOutcome[BlockWithoutTransactions | None]:
        """`eth_getUncleByBlockHashAndIndex`: Returns an uncle header."""
        return self.call(
            "eth_getUncleByBlockHashAndIndex", block_hash, int_to_hex(index)
        )

    def eth_get_uncle_by_block_number_and_index(
        self, block: BlockParam, index: int
    ) -> ResultOutcome[BlockWithoutTransactions | None]:
        """`eth_getUncleByBlockNumberAndIndex`: Returns an uncle header."""
        return self.call(
            "eth_getUncleByBlockNumberAndIndex", block_value(block), int_to_hex(index)
        )

    # eth: filters

    def eth_new_filter(self, options: EthNewFilterObject) -> ResultOutcome[str]:
        """`eth_newFilter`: Creates a log filter and returns its id."""
        return self.call("eth_newFilter", options.to_param())

    def eth_new_block_filter(self) -> ResultOutcome[str]:
        """`eth_newBlockFilter`: Creates a new-block filter and returns its id."""
        return self.call("eth_newBlockFilter")

    def eth_new_pending_transaction_filter(self) -> ResultOutcome[str]:
        """`eth_newPendingTransactionFilter`: Creates a pending-tx filter."""
        return self.call("eth_newPendingTransactionFilter")

    def eth_uninstall_filter(self, filter_id: str) -> ResultOutcome[bool]:
        """`eth_uninstallFilter`: Removes the filter with the given id."""
        return self.call("eth_uninstallFilter", filter_id)

    def eth_get_filter_changes(self, filter_id: str) -> ResultOutcome[FilterChanges]:
        """`eth_getFilterChanges`: Returns hashes or logs since the last poll."""
        return self.call("eth_getFilterChanges", filter_id)

    def eth_get_filter_logs(self, filter_id: str) -> ResultOutcome[FilterChanges]:
        """`eth_getFilterLogs`: Returns all hashes or logs matching a filter."""
        return self.call("eth_getFilterLogs", filter_id)

    def eth_get_logs(self, options: EthNewFilterObject) -> ResultOutcome[FilterChanges]:
        """`eth_getLogs`: Returns all logs matching the filter options."""
        return self.call("eth_getLogs", options.to_param())

    # eth: mining

    def eth_get_work(self) -> ResultOutcome[list[str]]:
        """`eth_getWork`: Returns block header hash, seed hash and boundary."""
        return self.call("eth_getWork")

    def eth_submit_work(
        self, nonce: str, pow_hash: str, mix_digest: str
    ) -> ResultOutcome[bool]:
        """`eth_submitWork`: Submits a proof-of-work solution."""
        return self.call("eth_submitWork", nonce, pow_hash, mix_digest)

    def eth_submit_hashrate(self, hashrate: str, client_id: str) -> ResultOutcome[bool]:
        """`eth_submitHashrate`: Reports the mining hashrate."""
        return self.call("eth_submitHashrate", hashrate, client_id)

    # shh

    def shh_version(self) -> ResultOutcome[Decimal]:
        """`shh_version`: Returns the whisper protocol version."""
        return self.call("shh_version")

    def shh_info(self) -> ResultOutcome[ShhInfo]:
        """`shh_info`: Returns whisper node diagnostics."""
        return self.call("shh_info")

    def shh_set_max_message_size(self, size: int) -> ResultOutcome[bool]:
        """`shh_setMaxMessageSize`: Sets the maximal accepted message size."""
        return self.call("shh_setMaxMessageSize", size)

    def shh_set_min_pow(self, pow_target: float) -> ResultOutcome[bool]:
        """`shh_setMinPoW`: Sets the minimal PoW required by this node."""
        return self.call("shh_setMinPoW", pow_target)

    def shh_new_key_pair(self) -> ResultOutcome[str]:
        """`shh_newKeyPair`: Generates a key pair and returns its id."""
        return self.call("shh_newKeyPair")

    def shh_has_key_pair(self, key_id: str) -> ResultOutcome[bool]:
        """`shh_hasKeyPair`: Checks whether a key pair is stored."""
        return self.call("shh_hasKeyPair", key_id)

    def shh_delete_key_pair(self, key_id: str) -> ResultOutcome[bool]:
        """`shh_deleteKeyPair`: Deletes a stored key pair."""
        return self.call("shh_deleteKeyPair", key_id)

    def shh_get_public_key(self, key_id: str) -> ResultOutcome[str]:
        """`shh_getPublicKey`: Returns the public key of a key pair."""
        return self.call("shh_getPublicKey", key_id)

    def shh_new_sym_key(self) -> ResultOutcome[str]:
        """`shh_newSymKey`: Generates a symmetric key and returns its id."""
        return self.call("shh_newSymKey")

    def shh_has_sym_key(self, key_id: str) -> ResultOutcome[bool]:
        """`shh_hasSymKey`: Checks whether a symmetric key is stored."""
        return self.call("shh_hasSymKey", key_id)

    def shh_delete_sym_key(self, key_id: str) -> ResultOutcome[bool]:
        """`shh_deleteSymKey`: Deletes a stored symmetric key."""
        return self.call("shh_deleteSymKey", key_id)

    def shh_new_message_filter(
        self, criteria: ShhNewMessageFilterObject
    ) -> ResultOutcome[str]:
        """`shh_newMessageFilter`: Creates a message filter and returns its id."""
        return self.call("shh_newMessageFilter", criteria.to_param())

    def shh_get_filter_messages(self, filter_id: str) -> ResultOutcome[list[ShhMessage]]:
        """`shh_getFilterMessages`: Returns messages received since the last poll."""
        return self.call("shh_getFilterMessages", filter_id)

    def shh_delete_message_filter(self, filter_id: str) -> ResultOutcome[bool]:
        """`shh_deleteMessageFilter`: Removes a message filter."""
        return self.call("shh_deleteMessageFilter", filter_id)

    def shh_post(self, message: ShhMessageObject) -> ResultOutcome[bool]:
        """`shh_post`: Posts a whisper message."""
        return self.call("shh_post", message.to_param())


def create_service(rpc_url: str | None = None, timeout: float | None = None) -> Service:
    """Create a Service talking HTTP to the configured node.

    Args:
        rpc_url: Node URL; falls back to ETH_RPC_URL
        timeout: Request timeout in seconds; falls back to ETH_RPC_TIMEOUT

    Returns:
        Service backed by an HttpTransport

    Raises:
        ValueError: If no URL is configured or the timeout is invalid
    """
    transport = HttpTransport(get_eth_rpc_url(rpc_url), timeout=get_rpc_timeout(timeout))
    return Service(transport)


__all__ = [
    "Service",
    "create_service",
]
