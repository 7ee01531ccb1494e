"""
Redis Connection Manager

This module provides a high-level interface for managing Redis connections,
presenting one command-execution surface over standalone and cluster
deployments, with or without connection pooling.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional
from contextlib import contextmanager

from redis_ops.config.settings import PoolSettings, RedisSettings
from redis_ops.command_executors import (
    EXECUTOR_TYPES,
    CommandCategory,
    CommandExecutor,
    ConnectionCommandExecutor,
    HashCommandExecutor,
    KeyCommandExecutor,
    ListCommandExecutor,
    SetCommandExecutor,
    SortedSetCommandExecutor,
    StringCommandExecutor,
)
from .address_resolver import resolve_server_addresses
from .codec import RedisCodec, STRING_CODEC
from .command_facade import CommandFacade, CommandHandle
from .connection_exceptions import ConnectionInitializationError, UnsupportedTopologyError
from .connection_pool import RedisConnectionPool
from .topology import ClientSupplier, DirectClient, Topology, TopologyClientFactory
from .transport_config import OptionsLike

# Logger setup
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _ManagerState:
    """Everything ``init`` establishes; exactly one of client/pool is set."""
    facade: CommandFacade
    client: Any = None
    pool: Optional[RedisConnectionPool] = None


class ConnectionManager:
    """
    High-level manager for Redis connections.

    The topology (standalone vs cluster), the pooling mode and the codec are
    fixed at construction. ``init`` is called once with the host
    specification, password and transport options; afterwards callers obtain
    per-category command executors, each of which fetches a command handle
    for every individual command and releases it right after.

    Key properties:
    - Address parsing with default port and per-token error reporting
    - Standalone managers reject multiple hosts; cluster managers seed the
      cluster client with every host
    - Pooled mode borrows one physical connection per command and returns it
      afterwards, so no connection is held across unrelated calls
    - Executors are created lazily, one per category, and cached
    - State built by ``init`` is immutable and shared by all threads

    Example:
        >>> manager = ConnectionManager(pooling_enabled=True)
        >>> manager.init("127.0.0.1:6379", "", {"database": -1, "connectionTimeoutMs": -1})
        >>> manager.get_string_command_executor().set("k", "v")
        >>> manager.close()
    """

    def __init__(
        self,
        codec: Optional[RedisCodec] = None,
        is_cluster_connection: bool = False,
        pooling_enabled: bool = False,
        pool_config: Optional[PoolSettings] = None,
    ):
        """
        Initialize the connection manager.

        Args:
            codec: Key/value codec applied to every connection; UTF-8 strings by default
            is_cluster_connection: Whether the hosts form a Redis Cluster
            pooling_enabled: Whether to borrow a pooled connection per command
            pool_config: Pool sizing settings, used only when pooling is enabled
        """
        self._codec = codec or STRING_CODEC
        self._is_cluster_connection = is_cluster_connection
        self._pooling_enabled = pooling_enabled
        self._pool_config = pool_config if pool_config is not None else PoolSettings()
        self._topology = Topology.CLUSTER if is_cluster_connection else Topology.STANDALONE

        self._state: Optional[_ManagerState] = None
        self._closed = False
        self._init_lock = threading.Lock()
        self._executors: Dict[CommandCategory, CommandExecutor] = {}
        self._executor_lock = threading.Lock()

        logger.info(
            f"ConnectionManager created (topology={self._topology.value}, "
            f"pooling={'enabled' if pooling_enabled else 'disabled'}, codec={self._codec.name})"
        )

    @classmethod
    def from_settings(cls, settings: Optional[RedisSettings] = None) -> "ConnectionManager":
        """
        Build and initialize a manager from the configuration layer.

        Args:
            settings: RedisSettings instance; loaded from the environment if None

        Returns:
            An initialized ConnectionManager
        """
        settings = settings if settings is not None else RedisSettings()
        connection = settings.connection
        manager = cls(
            codec=RedisCodec.for_type(settings.codec),
            is_cluster_connection=connection.cluster,
            pooling_enabled=connection.pooling,
            pool_config=settings.pool,
        )
        manager.init(connection.hosts, connection.password, connection.to_connection_options())
        return manager

    @property
    def codec(self) -> RedisCodec:
        return self._codec

    @property
    def topology(self) -> Topology:
        return self._topology

    @property
    def is_cluster_connection(self) -> bool:
        """Whether this manager talks to a Redis Cluster."""
        return self._is_cluster_connection

    @property
    def is_pooling_enabled(self) -> bool:
        """Whether commands run on connections borrowed from a pool."""
        return self._pooling_enabled

    @property
    def is_initialized(self) -> bool:
        return self._state is not None

    @property
    def connection_pool(self) -> Optional[RedisConnectionPool]:
        """The pool created by ``init`` (pooled mode only)."""
        return self._state.pool if self._state is not None else None

    def init(self, hosts: str, password: Optional[str] = "", options: OptionsLike = None) -> None:
        """
        Establish connectivity to the configured topology.

        The state is assembled locally and published only when every step
        succeeded, so a failed ``init`` leaves the manager untouched and may
        be retried.

        Args:
            hosts: ``host[:port](,host[:port])*`` specification
            password: AUTH password; blank means no authentication
            options: Transport options mapping (``clientName``,
                ``connectionTimeoutMs``, ``database``, ``sslEnabled``,
                ``startTlsEnabled``, ``verifyPeerEnabled``) or a ConnectionOptions model

        Raises:
            InvalidAddressError: If a host token is malformed
            UnsupportedTopologyError: If several hosts are given for a standalone connection
            ConnectionInitializationError: If the manager is already initialized
                or closed
            ConnectionAcquisitionError: If a cluster client or the pool's
                ``min_idle`` connections cannot connect
        """
        with self._init_lock:
            if self._closed:
                raise ConnectionInitializationError("ConnectionManager has been closed")
            if self._state is not None:
                raise ConnectionInitializationError(
                    "ConnectionManager is already initialized; init may only succeed once"
                )

            addresses = resolve_server_addresses(hosts)
            factory = TopologyClientFactory(self._codec, pooling_enabled=self._pooling_enabled)

            if self._is_cluster_connection:
                source = factory.create_cluster(addresses, password, options)
            else:
                if len(addresses) > 1:
                    raise UnsupportedTopologyError(
                        f"Multiple hosts are not supported for standalone connections: {hosts}",
                        hosts=hosts,
                    )
                source = factory.create_standalone(addresses[0], password, options)

            self._state = self._build_state(source)

        logger.info(
            f"ConnectionManager initialized with {len(addresses)} host(s) "
            f"(topology={self._topology.value}, pooling={self._pooling_enabled})"
        )

    def _build_state(self, source) -> _ManagerState:
        if self._pooling_enabled:
            if not isinstance(source, ClientSupplier):
                raise ConnectionInitializationError("Pooling requires a connection supplier")
            pool = RedisConnectionPool(
                source.connect, self._pool_config, name=f"redis-{self._topology.value}-pool"
            )
            return _ManagerState(facade=CommandFacade(self._topology, pool=pool), pool=pool)

        if not isinstance(source, DirectClient):
            raise ConnectionInitializationError("Direct mode requires a ready client")
        return _ManagerState(
            facade=CommandFacade(self._topology, client=source.client), client=source.client
        )

    def _require_state(self) -> _ManagerState:
        state = self._state
        if state is None:
            raise ConnectionInitializationError(
                "ConnectionManager is not initialized; call init() first"
            )
        # Pooled managers report teardown through the pool (PoolClosedError).
        if self._closed and state.pool is None:
            raise ConnectionInitializationError("ConnectionManager has been closed")
        return state

    def get_command_handle(self) -> CommandHandle:
        """
        Obtain the command interface for one command.

        Without pooling this is always the same long-lived handle. With
        pooling a connection is borrowed and the caller must pass the handle
        to ``release`` once done.

        Raises:
            ConnectionInitializationError: If ``init`` has not succeeded
            ConnectionAcquisitionError: If a pooled connection cannot be borrowed
            PoolClosedError: If the pool was closed
        """
        return self._require_state().facade.get_command_handle()

    def release(self, handle: Optional[CommandHandle]) -> None:
        """
        Release a handle obtained from ``get_command_handle``.

        A no-op without pooling or for ``None``; in pooled mode the connection
        goes back to the pool. Releasing the same handle twice is ignored.
        """
        if not self._pooling_enabled or handle is None or self._state is None:
            return
        self._state.facade.release(handle)

    @contextmanager
    def command_handle(self) -> Iterator[CommandHandle]:
        """
        Context manager pairing ``get_command_handle`` with ``release``.

        Example:
            >>> with manager.command_handle() as handle:
            ...     handle.commands.set("key", "value")
        """
        handle = self.get_command_handle()
        try:
            yield handle
        finally:
            self.release(handle)

    def get_command_executor(self, category: CommandCategory) -> CommandExecutor:
        """
        Return the cached executor for ``category``, creating it on first use.

        Args:
            category: CommandCategory or its string value (e.g. ``"sorted_set"``)
        """
        category = CommandCategory(category)
        executor = self._executors.get(category)
        if executor is None:
            with self._executor_lock:
                executor = self._executors.get(category)
                if executor is None:
                    executor = EXECUTOR_TYPES[category](self)
                    self._executors[category] = executor
        return executor

    def get_connection_command_executor(self) -> ConnectionCommandExecutor:
        return self.get_command_executor(CommandCategory.CONNECTION)

    def get_string_command_executor(self) -> StringCommandExecutor:
        return self.get_command_executor(CommandCategory.STRING)

    def get_key_command_executor(self) -> KeyCommandExecutor:
        return self.get_command_executor(CommandCategory.KEY)

    def get_hash_command_executor(self) -> HashCommandExecutor:
        return self.get_command_executor(CommandCategory.HASH)

    def get_set_command_executor(self) -> SetCommandExecutor:
        return self.get_command_executor(CommandCategory.SET)

    def get_list_command_executor(self) -> ListCommandExecutor:
        return self.get_command_executor(CommandCategory.LIST)

    def get_sorted_set_command_executor(self) -> SortedSetCommandExecutor:
        return self.get_command_executor(CommandCategory.SORTED_SET)

    def get_pool_stats(self) -> Optional[Dict[str, Any]]:
        """
        Get connection pool statistics for monitoring.

        Returns:
            Dict with idle/active counts, or None when pooling is disabled or
            the manager is not initialized
        """
        pool = self.connection_pool
        return pool.get_stats() if pool is not None else None

    def close_connection_pool(self) -> None:
        """
        Close the connection pool.

        Must be called once when a pooled manager is discarded. Connections
        still borrowed by other threads are not revoked. Without pooling this
        is a no-op.
        """
        pool = self.connection_pool
        if pool is None:
            logger.debug("close_connection_pool() called without an active pool; nothing to close")
            return
        pool.close()

    def close(self) -> None:
        """
        Close the connection manager and release all resources.

        In pooled mode the pool is closed; in direct mode the long-lived
        client is closed. Further ``init`` calls are rejected and commands
        fail. The method is idempotent.
        """
        with self._init_lock:
            if self._closed:
                return
            self._closed = True
            state = self._state

        if state is None:
            logger.info("ConnectionManager closed (was never initialized)")
            return

        if state.pool is not None:
            state.pool.close()
        else:
            try:
                state.client.close()
            except Exception as e:
                logger.warning(f"Error closing Redis client: {e}")
        logger.info("ConnectionManager closed")

    def __enter__(self) -> "ConnectionManager":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
