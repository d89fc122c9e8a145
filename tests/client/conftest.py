"""Shared fixtures for client tests."""

from typing import Any
from unittest.mock import MagicMock

import pytest

from web3rpc.client.service import Service
from web3rpc.helpers.http import HttpTransport


BLOCK_HASH = "0xacf2a4907cfbfc1b181928893c0375714fad20d4e2877b20822d55370d101c01"
EMPTY_BLOOM = "0x" + "0" * 512


@pytest.fixture
def transport() -> MagicMock:
    """Transport double that records request bytes."""
    return MagicMock(spec=HttpTransport)


@pytest.fixture
def service(transport: MagicMock) -> Service:
    """Service wired to the transport double."""
    return Service(transport)


@pytest.fixture
def transaction_json() -> dict[str, Any]:
    """Transaction object as sent by the node."""
    return {
        "s": "0x418b08924f17a5ea30b8433f1cbb08eafc445706936df89135945040258b2ce3",
        "blockHash": BLOCK_HASH,
        "nonce": "0xD334",
        "gasPrice": "0x6C088E200",
        "gas": "0x5209",
        "to": "0x8c3704a8612e7303eacaa5fe135482cef0c52556",
        "v": "0x1C",
        "hash": "0xe16846a4c2a0de9b4fa99b756ac4528bc8706612929dc386a27b75d4e545711e",
        "from": "0x81b7e08f65bdf5648606c89998a9cc8164397647",
        "blockNumber": "0x1919F7",
        "r": "0xab1d1bbd289ba86a8d2debc76389bb8bf8f592b797dbac7b568f72dcd73cdc8",
        "value": "0xDE0B6B3A7640000",
        "input": "0x",
        "transactionIndex": "0x0",
    }


@pytest.fixture
def block_json(transaction_json: dict[str, Any]) -> dict[str, Any]:
    """Block fetched with full transaction objects."""
    second = {
        **transaction_json,
        "nonce": "0xD335",
        "hash": "0x0c86abbe3f4d3d1ecc5d3ef7b1acce2c780dfc923d1d0c34f95de16679d1e679",
        "transactionIndex": "0x1",
    }
    return {
        "number": "0x1919F7",
        "hash": BLOCK_HASH,
        "parentHash": "0xdb7697788ed0a25a883f3384592df414ae55602f9fa9dad4ae6c27f10f86e5b3",
        "mixHash": "0x3c5eef4d518b2ce65a37e2a7f6139335b4f4e0cefa01ef1bebf58106ee3ba338",
        "nonce": "0x4547a918a1c230a1",
        "transactionsRoot": "0x76aa6e6f9bc8963459ee3ff346553e2ac1ab1d91777d97d988b8cc174dc9b862",
        "stateRoot": "0xfcacbf5a391a32687f89511abc35b70c9419ec1aed21009f90a18f6f9301a6b7",
        "receiptsRoot": "0x823be7358d1284d6e12609cb364afb4bdab653f9ca510774a556aae232bf4d73",
        "sha3Uncles": "0xbfc0f819d3ed8cbf350e18f92a8a444cba78e9dd1c1073a83399237cf464f772",
        "logsBloom": EMPTY_BLOOM,
        "miner": "0xc56",
        "difficulty": "0x1035EDAA0",
        "totalDifficulty": "0x6364D76BE9D7B",
        "extraData": "0xd883010607846765746887676f312e382e338664617277696e",
        "size": "0xC56",
        "gasLimit": "0x47E7C4",
        "gasUsed": "0xBE611",
        "timestamp": "0x59B4A81A",
        "transactions": [transaction_json, second],
        "uncles": [
            "0x7a77093b82b5dff8af33954b16b51a93543d88cba8c814ad29c29f38f09e49f7",
            "0x7a28ae12786ff6cac0eb55feda9897c85a14d1fd9ad9a7c41fd1071bbc162de9",
        ],
    }


@pytest.fixture
def uncle_json() -> dict[str, Any]:
    """Uncle header as returned by eth_getUncleBy* methods."""
    return {
        "number": "0x1919F6",
        "hash": "0x7a77093b82b5dff8af33954b16b51a93543d88cba8c814ad29c29f38f09e49f7",
        "parentHash": "0x5cc0d59d11bb64090ad3e1c832526c9640702d5a896d15627a2a5361f3a1218f",
        "mixHash": "0x7846d296cc5d3cd42279dc427f3d69fb0804d9a04857d47fc4522695e931cf52",
        "nonce": "0x9f7aaa9401bf786f",
        "transactionsRoot": "0x4278e6ec961c8d890a4edc11242d15378be7d92e67970f324ebea02319e50420",
        "stateRoot": "0x2dfcddf3c2b07bfa9f68b76b520472e44a4c50d67d84092e916441c6b51a7d3d",
        "receiptsRoot": "0xa3c41dbb018f8a7dc8206cc9ea52cfebc03e84eb41d9323baddc074fe700c170",
        "sha3Uncles": "0x1dcc4de8dec75d7aab85b567b6ccd41ad312451b948a7413f0a142fd40d49347",
        "logsBloom": EMPTY_BLOOM,
        "miner": "0x213",
        "difficulty": "0x1037F0A81",
        "totalDifficulty": "0x6364C735FC2DB",
        "extraData": "0x526f707374656e20506f6f6c",
        "size": "0x213",
        "gasLimit": "0x47E7C4",
        "gasUsed": "0x2D716",
        "timestamp": "0x59B4A7FF",
        "transactions": [],
        "uncles": [],
    }


@pytest.fixture
def filter_log_json() -> dict[str, Any]:
    """Log entry as returned by filters and receipts."""
    return {
        "removed": False,
        "logIndex": "0x0",
        "transactionIndex": "0x1",
        "transactionHash": "0x2fdc8135dd455a8d9b29cb36d6fe7306801ea5872de941c69110c4f471fab430",
        "blockHash": "0x82af86626cae6ca7ebe2dabbb2a60c8c09af985dc39dd868ded261e0ab775554",
        "blockNumber": "0x19CCFC",
        "address": "0x5f81dc51bdc05f4341afbfa318af5d82c607acad",
        "data": "0x0000000000000000000000000000000000000000000000000000000000000060",
        "topics": [
            "0x662fd29da6ea3246128acda274b24aed94859deaafb7b415fdfa765f69f5dd83"
        ],
    }


@pytest.fixture
def receipt_json(filter_log_json: dict[str, Any]) -> dict[str, Any]:
    """Pre-Byzantium receipt carrying a state root."""
    return {
        "transactionHash": "0x2fdc8135dd455a8d9b29cb36d6fe7306801ea5872de941c69110c4f471fab430",
        "transactionIndex": "0x1",
        "blockHash": "0x82af86626cae6ca7ebe2dabbb2a60c8c09af985dc39dd868ded261e0ab775554",
        "blockNumber": "0x19CCFC",
        "root": "0x03e4ffd9ca5df14409457d82ddf14733424a487361d32409922a6d110cc5f403",
        "logsBloom": EMPTY_BLOOM,
        "from": "0x1a5d20e3957fd0b89eabf1bb95c76ab71d846ab3",
        "to": "0x5f81dc51bdc05f4341afbfa318af5d82c607acad",
        "cumulativeGasUsed": "0x1D6E7",
        "gasUsed": "0x132FA",
        "contractAddress": None,
        "logs": [filter_log_json],
    }
