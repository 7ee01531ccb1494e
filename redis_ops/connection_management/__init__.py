"""
Connection Management Module

This module provides connection management for Redis standalone servers and
Redis Cluster deployments behind one command-execution surface.

Key capabilities:
- Host specification parsing (``host[:port](,host[:port])*``, default port 6379)
- Transport configuration (TLS, peer verification, timeout, database, client name, password)
- Standalone and cluster client construction on top of redis-py
- Optional thread-safe connection pooling with borrow/return per command
- Lazily created per-category command executors
- Typed exceptions carrying the offending input for diagnosis
"""

from .connection_exceptions import (
    RedisConnectionError,
    InvalidAddressError,
    UnsupportedTopologyError,
    ConnectionInitializationError,
    ConnectionAcquisitionError,
    PoolExhaustedError,
    PoolClosedError,
)
from .address_resolver import ServerAddress, resolve_server_addresses, DEFAULT_PORT
from .codec import RedisCodec, STRING_CODEC, BYTES_CODEC
from .transport_config import TransportConfig, build_transport_config
from .topology import Topology, TopologyClientFactory, DirectClient, ClientSupplier
from .connection_pool import RedisConnectionPool
from .command_facade import CommandFacade, CommandHandle
from .connection_manager import ConnectionManager

__all__ = [
    'ConnectionManager',
    'RedisConnectionPool',
    'CommandFacade',
    'CommandHandle',
    'Topology',
    'TopologyClientFactory',
    'DirectClient',
    'ClientSupplier',
    'TransportConfig',
    'build_transport_config',
    'ServerAddress',
    'resolve_server_addresses',
    'DEFAULT_PORT',
    'RedisCodec',
    'STRING_CODEC',
    'BYTES_CODEC',
    'RedisConnectionError',
    'InvalidAddressError',
    'UnsupportedTopologyError',
    'ConnectionInitializationError',
    'ConnectionAcquisitionError',
    'PoolExhaustedError',
    'PoolClosedError',
]
