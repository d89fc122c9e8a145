"""Pydantic models for typed method results.

Numeric fields arrive as quantity strings and are decoded on validation
through the codec in ``web3rpc.helpers.parsers``. Field names are snake_case
and map to the node's camelCase keys.
"""

from typing import Annotated, ClassVar, Generic, Literal, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from web3rpc.helpers.parsers import hex_to_bigint, hex_to_int, hex_to_long
from web3rpc.helpers.rpc_models import ErrorContent


HexInt = Annotated[int, BeforeValidator(hex_to_int)]
HexLong = Annotated[int, BeforeValidator(hex_to_long)]
HexBigInt = Annotated[int, BeforeValidator(hex_to_bigint)]

T = TypeVar("T")


class CamelModel(BaseModel):
    """Immutable result model reading camelCase keys."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )


# Outcomes


class Success(BaseModel, Generic[T]):
    """Decoded result of a call the node answered successfully."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    is_success: ClassVar[bool] = True

    result: T


class Failure(BaseModel):
    """Error reported by the node, passed through verbatim."""

    model_config = ConfigDict(frozen=True)

    is_success: ClassVar[bool] = False

    error: ErrorContent


type ResultOutcome[R] = Success[R] | Failure


# Sync status


class NotSyncing(CamelModel):
    """eth_syncing answered ``false``."""

    syncing: Literal[False] = False


class Syncing(CamelModel):
    """Progress of an ongoing chain synchronization."""

    syncing: Literal[True] = True
    starting_block: HexLong
    current_block: HexLong
    highest_block: HexLong
    known_states: HexLong
    pulled_states: HexLong


SyncStatus = NotSyncing | Syncing


# Transactions and logs


class Transaction(CamelModel):
    """Transaction record as returned by the eth_getTransactionBy* family."""

    hash: str
    nonce: HexLong
    block_hash: str | None = None
    block_number: HexLong | None = None
    transaction_index: HexInt | None = None
    from_: str = Field(..., alias="from")
    to: str | None = None
    value: HexBigInt
    gas_price: HexBigInt | None = None
    gas: HexLong
    input: str
    v: str | None = None
    r: str | None = None
    s: str | None = None


class FilterLog(CamelModel):
    """Log entry produced by a filter, a log query or a receipt."""

    removed: bool
    log_index: HexInt
    transaction_index: HexInt
    transaction_hash: str
    block_hash: str
    block_number: HexLong
    address: str
    data: str
    topics: list[str]


class TransactionReceipt(CamelModel):
    """Receipt of a mined transaction.

    ``root`` is populated by pre-Byzantium nodes and ``status`` by later ones.
    """

    transaction_hash: str
    transaction_index: HexInt
    block_hash: str
    block_number: HexLong
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    cumulative_gas_used: HexLong
    gas_used: HexLong
    contract_address: str | None = None
    logs: list[FilterLog]
    logs_bloom: str
    root: str | None = None
    status: HexInt | None = None


# Blocks


class BlockHeader(CamelModel):
    """Header fields shared by every block shape.

    ``number`` and ``hash`` are null for pending blocks.
    """

    number: HexLong | None = None
    hash: str | None = None
    parent_hash: str
    mix_hash: str | None = None
    sha3_uncles: str
    logs_bloom: str | None = None
    transactions_root: str
    state_root: str
    receipts_root: str
    miner: str | None = None
    difficulty: HexBigInt
    total_difficulty: HexBigInt | None = None
    extra_data: str
    size: HexLong | None = None
    gas_limit: HexLong
    gas_used: HexLong
    timestamp: HexLong
    base_fee_per_gas: HexBigInt | None = None


class BlockWithTransactions(BlockHeader):
    """Block fetched with full transaction objects."""

    nonce: HexLong | None = None
    transactions: list[Transaction]
    uncles: list[str]


class BlockWithTransactionHashes(BlockHeader):
    """Block fetched with transaction hashes only."""

    nonce: HexLong | None = None
    transactions: list[str]
    uncles: list[str]


class BlockWithoutTransactions(BlockHeader):
    """Uncle header; carries no transaction or uncle lists."""

    nonce: HexBigInt | None = None


Block = BlockWithTransactions | BlockWithTransactionHashes | BlockWithoutTransactions


# Whisper


class ShhInfo(CamelModel):
    """Whisper node diagnostics."""

    memory: int
    messages: int
    min_pow: float
    max_message_size: int


class ShhMessage(CamelModel):
    """Whisper message delivered to a message filter."""

    sig: str | None = None
    recipient_public_key: str | None = None
    ttl: int
    timestamp: int
    topic: str
    payload: str
    padding: str | None = None
    pow: float
    hash: str


__all__ = [
    "Block",
    "BlockHeader",
    "BlockWithTransactionHashes",
    "BlockWithTransactions",
    "BlockWithoutTransactions",
    "CamelModel",
    "Failure",
    "FilterLog",
    "HexBigInt",
    "HexInt",
    "HexLong",
    "NotSyncing",
    "ResultOutcome",
    "ShhInfo",
    "ShhMessage",
    "Success",
    "SyncStatus",
    "Syncing",
    "Transaction",
    "TransactionReceipt",
]
