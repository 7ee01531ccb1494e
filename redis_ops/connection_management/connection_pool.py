"""
Redis Connection Pool

This module provides a thread-safe object pool of physical Redis connections,
designed to isolate concurrent callers onto distinct connections.
"""

import time
import logging
import threading
from collections import deque
from typing import Any, Callable, Deque, Dict, Optional, Set
from contextlib import contextmanager

from redis_ops.config.settings import PoolSettings
from .connection_exceptions import (
    ConnectionAcquisitionError,
    PoolClosedError,
    PoolExhaustedError,
)

# Logger setup
logger = logging.getLogger(__name__)


class RedisConnectionPool:
    """
    Thread-safe pool of stateful Redis connections.

    Connections are created lazily through a zero-argument supplier, which
    captures the transport configuration and codec so that every physical
    connection is configured identically. Callers borrow a connection, issue
    commands on it and return it; the pool never hands the same connection to
    two callers at once.

    Sizing follows ``PoolSettings``:
    - ``max_total`` caps idle + borrowed connections (negative = unbounded)
    - ``max_idle`` caps how many returned connections are kept for reuse
    - ``min_idle`` connections are opened when the pool starts
    - ``max_wait_ms`` bounds how long ``borrow`` blocks when exhausted

    Idle connections are reused last-in first-out so that the most recently
    used (and therefore most likely healthy) socket is handed out first.
    """

    def __init__(
        self,
        supplier: Callable[[], Any],
        config: Optional[PoolSettings] = None,
        name: str = "redis-pool",
    ):
        """
        Initialize the pool.

        Args:
            supplier: Zero-argument callable that opens one new connection
            config: Pool sizing and validation settings; defaults apply if None
            name: Label used in log messages

        Raises:
            ConnectionAcquisitionError: If ``min_idle`` connections cannot be created
        """
        self.config = config if config is not None else PoolSettings()
        self.name = name
        self._supplier = supplier
        self._condition = threading.Condition(threading.Lock())
        self._idle: Deque[Any] = deque()
        self._in_use: Dict[int, Any] = {}
        self._returning: Set[int] = set()
        self._creating = 0
        self._closed = False

        self._initialize_pool()

        logger.info(
            f"Redis connection pool '{self.name}' initialized "
            f"(max_total={self.config.max_total}, max_idle={self.config.max_idle}, "
            f"min_idle={self.config.min_idle})"
        )

    def _initialize_pool(self):
        """
        Pre-create ``min_idle`` connections.

        Raises:
            ConnectionAcquisitionError: If connection creation fails, so the
                application fails fast instead of at the first command
        """
        try:
            for _ in range(self.config.min_idle):
                self._idle.append(self._create_connection())
        except ConnectionAcquisitionError as e:
            logger.error(f"Failed to initialize connection pool '{self.name}': {e}")
            for connection in self._idle:
                self._destroy_connection(connection)
            self._idle.clear()
            raise

    def _create_connection(self) -> Any:
        try:
            connection = self._supplier()
        except Exception as e:
            raise ConnectionAcquisitionError(
                f"Error occurred while obtaining connection from the pool: {e}"
            ) from e
        logger.debug(f"Created new Redis connection for pool '{self.name}'")
        return connection

    def _destroy_connection(self, connection: Any):
        try:
            connection.close()
        except Exception as e:
            logger.warning(f"Error closing pooled connection: {e}")

    def _is_connection_healthy(self, connection: Any) -> bool:
        """
        Check that a connection still answers PING.

        Used for ``test_on_borrow`` / ``test_on_return`` validation so that
        stale sockets left behind by server restarts are not handed out.
        """
        try:
            return bool(connection.ping())
        except Exception:
            return False

    def _total(self) -> int:
        return len(self._idle) + len(self._in_use) + self._creating

    def _has_capacity(self) -> bool:
        return self.config.max_total < 0 or self._total() < self.config.max_total

    def borrow(self, timeout: Optional[float] = None) -> Any:
        """
        Borrow a connection from the pool.

        An idle connection is reused when available; otherwise a new one is
        created if the pool is below ``max_total``; otherwise the call blocks
        until a connection is returned.

        Args:
            timeout: Maximum time to wait (seconds) when the pool is exhausted.
                    If None, uses ``max_wait_ms`` from the configuration
                    (negative = wait forever).

        Returns:
            A connection that is exclusively owned by the caller until returned

        Raises:
            PoolExhaustedError: If no connection became available in time
            ConnectionAcquisitionError: If creating a new connection failed
            PoolClosedError: If the pool has been closed
        """
        if timeout is None and self.config.max_wait_ms >= 0:
            timeout = self.config.max_wait_ms / 1000.0
        deadline = None if timeout is None else time.monotonic() + timeout

        while True:
            connection = None
            with self._condition:
                while True:
                    if self._closed:
                        raise PoolClosedError(f"Connection pool '{self.name}' is closed")
                    if self._idle:
                        # Counted as in use while it is validated outside the lock
                        connection = self._idle.pop()
                        self._in_use[id(connection)] = connection
                        break
                    if self._has_capacity():
                        self._creating += 1
                        break
                    if not self.config.block_when_exhausted:
                        raise PoolExhaustedError(
                            f"Connection pool '{self.name}' exhausted "
                            f"(max_total={self.config.max_total})",
                            max_total=self.config.max_total,
                        )
                    remaining = None if deadline is None else deadline - time.monotonic()
                    if remaining is not None and remaining <= 0:
                        raise PoolExhaustedError(
                            f"No connections available in pool '{self.name}' within {timeout} seconds "
                            f"(max_total={self.config.max_total})",
                            max_total=self.config.max_total,
                        )
                    self._condition.wait(remaining)

            if connection is None:
                return self._borrow_new()

            if self.config.test_on_borrow and not self._is_connection_healthy(connection):
                logger.warning(f"Stale connection detected in pool '{self.name}', discarding it")
                with self._condition:
                    self._in_use.pop(id(connection), None)
                    self._condition.notify()
                self._destroy_connection(connection)
                continue

            logger.debug(
                f"Connection acquired from pool '{self.name}'. "
                f"Active: {self.num_active}, Idle: {self.num_idle}"
            )
            return connection

    def _borrow_new(self) -> Any:
        # The supplier may block on the network, so it runs outside the lock
        # with a reserved slot counted in ``_creating``.
        try:
            connection = self._create_connection()
        except ConnectionAcquisitionError:
            with self._condition:
                self._creating -= 1
                self._condition.notify()
            raise

        with self._condition:
            self._creating -= 1
            if self._closed:
                self._condition.notify_all()
                closed = True
            else:
                self._in_use[id(connection)] = connection
                closed = False
        if closed:
            self._destroy_connection(connection)
            raise PoolClosedError(f"Connection pool '{self.name}' is closed")
        logger.debug(
            f"New connection acquired from pool '{self.name}'. "
            f"Active: {self.num_active}, Idle: {self.num_idle}"
        )
        return connection

    def return_connection(self, connection: Any) -> None:
        """
        Return a borrowed connection to the idle set.

        The connection is closed instead of kept when the pool is closed, when
        the idle set is already at ``max_idle``, or when ``test_on_return``
        finds it broken.

        Returning a connection that is not currently borrowed from this pool
        (for example a second release of the same handle) is ignored and
        leaves the pool accounting untouched.

        Args:
            connection: A connection previously obtained from ``borrow``
        """
        key = id(connection)
        with self._condition:
            if self._in_use.get(key) is not connection or key in self._returning:
                logger.warning(
                    f"Ignoring return of a connection that is not borrowed from pool '{self.name}' "
                    "(already returned or foreign object)"
                )
                return
            # Stays in _in_use until it is back in the idle set or destroyed
            self._returning.add(key)
            closed = self._closed

        keep = not closed
        if keep and self.config.test_on_return and not self._is_connection_healthy(connection):
            logger.warning(f"Connection returned to pool '{self.name}' is unhealthy, discarding it")
            keep = False

        with self._condition:
            self._returning.discard(key)
            del self._in_use[key]
            if keep and (self._closed or
                         (self.config.max_idle >= 0 and len(self._idle) >= self.config.max_idle)):
                keep = False
            if keep:
                self._idle.append(connection)
            self._condition.notify()

        if not keep:
            self._destroy_connection(connection)
            if closed:
                logger.info(f"Connection closed (pool '{self.name}' is shutting down)")
        logger.debug(
            f"Connection returned to pool '{self.name}'. "
            f"Active: {self.num_active}, Idle: {self.num_idle}"
        )

    @contextmanager
    def get_connection(self, timeout: Optional[float] = None):
        """
        Borrow a connection as a context manager.

        Example:
            >>> with pool.get_connection() as connection:
            ...     connection.set("key", "value")  # returned to the pool afterwards
        """
        connection = self.borrow(timeout=timeout)
        try:
            yield connection
        finally:
            self.return_connection(connection)

    @property
    def num_idle(self) -> int:
        """Number of connections waiting in the pool."""
        with self._condition:
            return len(self._idle)

    @property
    def num_active(self) -> int:
        """Number of connections currently borrowed."""
        with self._condition:
            return len(self._in_use)

    @property
    def is_closed(self) -> bool:
        return self._closed

    def get_stats(self) -> Dict[str, Any]:
        """Snapshot of the pool accounting for monitoring."""
        with self._condition:
            return {
                "name": self.name,
                "idle": len(self._idle),
                "active": len(self._in_use),
                "creating": self._creating,
                "max_total": self.config.max_total,
                "max_idle": self.config.max_idle,
                "closed": self._closed,
            }

    def close(self):
        """
        Close all idle connections and mark the pool unusable.

        Threads blocked in ``borrow`` are woken up and receive
        ``PoolClosedError``. Connections still borrowed are not revoked; they
        are closed when their holders return them.

        The method is idempotent.
        """
        with self._condition:
            if self._closed:
                return
            self._closed = True
            idle = list(self._idle)
            self._idle.clear()
            in_use = len(self._in_use)
            self._condition.notify_all()

        for connection in idle:
            self._destroy_connection(connection)

        if in_use:
            logger.warning(
                f"{in_use} connection(s) still in use during shutdown of pool '{self.name}'"
            )
        logger.info(f"Redis connection pool '{self.name}' closed")
