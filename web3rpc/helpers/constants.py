"""Protocol and client constants shared across the package."""

# JSON-RPC Protocol
JSONRPC_VERSION = "2.0"
"""Version literal carried by every request and response envelope"""

HEX_PREFIX = "0x"
"""Prefix required on every quantity string"""

BLOCK_TAGS = ("latest", "earliest", "pending")
"""Symbolic block names accepted wherever a block parameter is expected"""

# Native Integer Bounds
INT32_MIN = -(2**31)
"""Smallest signed 32-bit integer"""

INT32_MAX = 2**31 - 1
"""Largest signed 32-bit integer"""

INT64_MIN = -(2**63)
"""Smallest signed 64-bit integer"""

INT64_MAX = 2**63 - 1
"""Largest signed 64-bit integer"""

# HTTP and Network Constants
DEFAULT_TIMEOUT = 30.0
"""Default HTTP request timeout in seconds"""

CONNECTION_TIMEOUT = 3.0
"""Timeout for establishing connections"""

# HTTP Connection Pooling
MAX_KEEPALIVE_CONNECTIONS = 5
"""Maximum number of keepalive connections in pool"""

MAX_CONNECTIONS = 10
"""Maximum total number of connections"""


__all__ = [
    "BLOCK_TAGS",
    "CONNECTION_TIMEOUT",
    "DEFAULT_TIMEOUT",
    "HEX_PREFIX",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "JSONRPC_VERSION",
    "MAX_CONNECTIONS",
    "MAX_KEEPALIVE_CONNECTIONS",
]
