"""
redis_ops - Redis Connection Management Package

A connection-management layer for Redis (and protocol compatible stores such
as Valkey) that presents one command-execution surface over standalone and
cluster deployments, with an optional connection-pooling mode.

Typical usage:
    from redis_ops import ConnectionManager

    manager = ConnectionManager(is_cluster_connection=False, pooling_enabled=True)
    manager.init("127.0.0.1:6379", "", {"database": -1, "connectionTimeoutMs": -1})
    manager.get_string_command_executor().set("k", "v")
    manager.close()
"""

__version__ = "0.1.0"

from .redis_ops_exceptions import RedisOpsError, ConfigurationError, CommandExecutionError
from .config import RedisSettings, ConnectionOptions, PoolSettings, load_settings
from .connection_management import (
    ConnectionManager,
    CommandHandle,
    RedisCodec,
    STRING_CODEC,
    BYTES_CODEC,
    Topology,
)
from .command_executors import CommandCategory

__all__ = [
    'ConnectionManager',
    'CommandHandle',
    'CommandCategory',
    'RedisCodec',
    'STRING_CODEC',
    'BYTES_CODEC',
    'Topology',
    'RedisSettings',
    'ConnectionOptions',
    'PoolSettings',
    'load_settings',
    'RedisOpsError',
    'ConfigurationError',
    'CommandExecutionError',
]
