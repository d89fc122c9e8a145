"""Tests for configuration and environment variable helpers."""

import os

from collections.abc import Generator

import pytest

from web3rpc.helpers.config import get_eth_rpc_url, get_rpc_timeout
from web3rpc.helpers.constants import DEFAULT_TIMEOUT


@pytest.fixture
def clean_env() -> Generator[None]:
    """Clean environment variables before and after test."""
    saved_env = {
        "ETH_RPC_URL": os.environ.get("ETH_RPC_URL"),
        "ETH_RPC_TIMEOUT": os.environ.get("ETH_RPC_TIMEOUT"),
    }

    for key in saved_env:
        if key in os.environ:
            del os.environ[key]

    yield

    for key, value in saved_env.items():
        if value is not None:
            os.environ[key] = value
        elif key in os.environ:
            del os.environ[key]


@pytest.mark.usefixtures("clean_env")
class TestGetEthRpcUrl:
    """Tests for get_eth_rpc_url function."""

    def test_returns_provided_url(self) -> None:
        """Test that an explicit URL wins over the environment."""
        os.environ["ETH_RPC_URL"] = "http://env:8545"
        assert get_eth_rpc_url("http://local:8545") == "http://local:8545"

    def test_returns_env_url(self) -> None:
        """Test that ETH_RPC_URL is used when no URL is given."""
        os.environ["ETH_RPC_URL"] = "http://env:8545"
        assert get_eth_rpc_url() == "http://env:8545"

    def test_raises_when_missing(self) -> None:
        """Test that a missing URL raises ValueError."""
        with pytest.raises(ValueError, match="ETH_RPC_URL must be provided"):
            get_eth_rpc_url()

    def test_raises_when_empty(self) -> None:
        """Test that an empty ETH_RPC_URL counts as missing."""
        os.environ["ETH_RPC_URL"] = ""
        with pytest.raises(ValueError, match="ETH_RPC_URL must be provided"):
            get_eth_rpc_url("")


@pytest.mark.usefixtures("clean_env")
class TestGetRpcTimeout:
    """Tests for get_rpc_timeout function."""

    def test_returns_provided_timeout(self) -> None:
        """Test that an explicit timeout wins over the environment."""
        os.environ["ETH_RPC_TIMEOUT"] = "5"
        assert get_rpc_timeout(12.5) == 12.5

    def test_returns_default_when_unset(self) -> None:
        """Test the default applies without ETH_RPC_TIMEOUT."""
        assert get_rpc_timeout() == DEFAULT_TIMEOUT

    def test_reads_env_timeout(self) -> None:
        """Test ETH_RPC_TIMEOUT is parsed as seconds."""
        os.environ["ETH_RPC_TIMEOUT"] = "7.5"
        assert get_rpc_timeout() == 7.5

    def test_rejects_non_numeric(self) -> None:
        """Test a non-numeric ETH_RPC_TIMEOUT raises ValueError."""
        os.environ["ETH_RPC_TIMEOUT"] = "soon"
        with pytest.raises(ValueError, match="must be a number"):
            get_rpc_timeout()

    def test_rejects_non_positive(self) -> None:
        """Test a zero or negative ETH_RPC_TIMEOUT raises ValueError."""
        os.environ["ETH_RPC_TIMEOUT"] = "0"
        with pytest.raises(ValueError, match="must be positive"):
            get_rpc_timeout()
