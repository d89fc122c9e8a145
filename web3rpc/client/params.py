"""Pydantic models for structured method parameters."""

from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    StrictInt,
    field_serializer,
    field_validator,
)
from pydantic.alias_generators import to_camel

from web3rpc.helpers.constants import BLOCK_TAGS
from web3rpc.helpers.parsers import bigint_to_hex, long_to_hex


# Native integer sent over the wire as a quantity string
Quantity = Annotated[int, PlainSerializer(bigint_to_hex, return_type=str)]


class BlockNumber(BaseModel):
    """Block selected by height."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=0, description="Block height")


class BlockName(BaseModel):
    """Block selected by symbolic tag."""

    model_config = ConfigDict(frozen=True)

    name: Literal["latest", "earliest", "pending"] = Field(
        ..., description="Symbolic block tag"
    )


BlockSelector = BlockNumber | BlockName


def block_value(block: BlockSelector | int | str) -> str:
    """Encode a block selector as the value the node expects.

    Every method taking a block parameter goes through this function so the
    encoding stays in one place.

    Args:
        block: BlockNumber, BlockName, a bare height or a tag string

    Returns:
        str: Quantity string for a height, the literal tag otherwise

    Raises:
        ValueError: If a bare string is not one of the known tags
        TypeError: If the value is not a block selector

    Example:
        >>> block_value(BlockNumber(number=1559297))
        '0x17cb01'
        >>> block_value(BlockName(name="latest"))
        'latest'
    """
    if isinstance(block, BlockNumber):
        return long_to_hex(block.number)
    if isinstance(block, BlockName):
        return block.name
    if isinstance(block, bool):
        msg = "Block selector cannot be a bool"
        raise TypeError(msg)
    if isinstance(block, int):
        return block_value(BlockNumber(number=block))
    if isinstance(block, str):
        if block not in BLOCK_TAGS:
            msg = f"Unknown block tag {block!r}, expected one of {BLOCK_TAGS}"
            raise ValueError(msg)
        return block
    msg = f"Unsupported block selector: {type(block).__name__}"
    raise TypeError(msg)


class ParamObject(BaseModel):
    """Base for object-shaped parameters.

    Fields are declared in snake_case and go on the wire in camelCase. Fields
    left as None are omitted from the wire object.
    """

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    def to_param(self) -> dict[str, Any]:
        """Return the JSON-encodable wire object."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class EthSendTransactionObject(ParamObject):
    """Transaction submitted through eth_sendTransaction."""

    from_: str = Field(..., alias="from", description="Sender address")
    to: str | None = Field(default=None, description="Recipient, None for contract creation")
    gas: Quantity | None = None
    gas_price: Quantity | None = None
    value: Quantity | None = None
    data: str | None = Field(default=None, description="Contract code or call data")
    nonce: Quantity | None = None


class EthCallObject(ParamObject):
    """Message call executed through eth_call."""

    from_: str | None = Field(default=None, alias="from", description="Sender address")
    to: str = Field(..., description="Target address")
    gas: Quantity | None = None
    gas_price: Quantity | None = None
    value: Quantity | None = None
    data: str | None = None


class EthEstimateGasObject(EthCallObject):
    """Call whose gas usage is estimated; ``to`` may be omitted for creation."""

    to: str | None = Field(default=None, description="Target address")  # type: ignore[assignment]


class EthNewFilterObject(ParamObject):
    """Log filter options for eth_newFilter and eth_getLogs.

    Block bounds accept the same values as every other block parameter and
    are checked on construction. A None entry inside ``topics`` is a wildcard
    and is sent as null.
    """

    from_block: BlockSelector | StrictInt | str | None = None
    to_block: BlockSelector | StrictInt | str | None = None
    address: str | list[str] | None = None
    topics: list[str | list[str] | None] | None = None

    @field_validator("from_block", "to_block")
    @classmethod
    def check_block(
        cls, block: BlockSelector | int | str | None
    ) -> BlockSelector | int | str | None:
        if block is not None:
            block_value(block)
        return block

    @field_serializer("from_block", "to_block")
    def serialize_block(self, block: BlockSelector | int | str | None) -> str | None:
        return block_value(block) if block is not None else None


class ShhNewMessageFilterObject(ParamObject):
    """Whisper message filter criteria."""

    sym_key_id: str | None = Field(default=None, alias="symKeyID")
    private_key_id: str | None = Field(default=None, alias="privateKeyID")
    sig: str | None = Field(default=None, description="Public key of the signer")
    min_pow: float | None = None
    topics: list[str] | None = None
    allow_p2p: bool | None = Field(default=None, alias="allowP2P")


class ShhMessageObject(ParamObject):
    """Whisper message posted through shh_post.

    ``topic`` is a single 4-byte topic, not a list: that is the form nodes
    accept in the shh_post message object.
    """

    sym_key_id: str | None = Field(default=None, alias="symKeyID")
    pub_key: str | None = None
    sig: str | None = None
    ttl: int = Field(..., description="Time-to-live in seconds")
    topic: str | None = None
    padding: str | None = None
    payload: str = Field(..., description="Hex-encoded message body")
    pow_time: int = Field(..., description="Seconds spent on proof of work")
    pow_target: float = Field(..., description="Minimal PoW target")
    target_peer: str | None = None


__all__ = [
    "BlockName",
    "BlockNumber",
    "BlockSelector",
    "EthCallObject",
    "EthEstimateGasObject",
    "EthNewFilterObject",
    "EthSendTransactionObject",
    "Quantity",
    "ShhMessageObject",
    "ShhNewMessageFilterObject",
    "block_value",
]
