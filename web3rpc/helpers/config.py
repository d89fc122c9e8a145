"""Configuration management and environment variable utilities."""

import os

from dotenv import load_dotenv

from web3rpc.helpers.constants import DEFAULT_TIMEOUT


# Load environment variables from .env file
load_dotenv()


def get_eth_rpc_url(rpc_url: str | None = None) -> str:
    """Get Ethereum RPC URL from parameter or environment.

    Args:
        rpc_url: Optional RPC URL to use directly

    Returns:
        Ethereum RPC URL

    Raises:
        ValueError: If RPC URL is not provided and ETH_RPC_URL env var is not set

    Example:
        ```python
        from web3rpc.helpers.config import get_eth_rpc_url

        # Get from environment
        rpc_url = get_eth_rpc_url()

        # Or provide explicitly
        rpc_url = get_eth_rpc_url("http://localhost:8545")
        ```
    """
    if rpc_url:
        return rpc_url

    env_rpc_url = os.getenv("ETH_RPC_URL")
    if not env_rpc_url:
        msg = "ETH_RPC_URL must be provided or set in environment variables"
        raise ValueError(msg)

    return env_rpc_url


def get_rpc_timeout(timeout: float | None = None) -> float:
    """Get the transport timeout from parameter or environment.

    Args:
        timeout: Optional timeout in seconds to use directly

    Returns:
        Timeout in seconds, DEFAULT_TIMEOUT when ETH_RPC_TIMEOUT is unset

    Raises:
        ValueError: If ETH_RPC_TIMEOUT is not a positive number
    """
    if timeout is not None:
        return timeout

    raw = os.getenv("ETH_RPC_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT

    try:
        value = float(raw)
    except ValueError as e:
        msg = f"ETH_RPC_TIMEOUT must be a number, got {raw!r}"
        raise ValueError(msg) from e

    if value <= 0:
        msg = f"ETH_RPC_TIMEOUT must be positive, got {value}"
        raise ValueError(msg)
    return value


__all__ = [
    "get_eth_rpc_url",
    "get_rpc_timeout",
]
