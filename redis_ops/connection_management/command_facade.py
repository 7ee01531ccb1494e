"""
Command Facade

Decides, on every call, which command interface a caller gets:

- pooling disabled: the single long-lived client created at ``init`` time
- pooling enabled: a freshly borrowed pooled connection, which the caller
  must hand back through ``release`` once the command has run

The handle is tagged with the manager's topology so that callers needing a
cluster-only capability can check it, and so that release never has to
inspect the runtime type of the client.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from .connection_exceptions import ConnectionInitializationError
from .connection_pool import RedisConnectionPool
from .topology import Topology

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandHandle:
    """
    Capability-bearing object through which commands are issued.

    Attributes:
        topology: Topology the handle was obtained under
        commands: ``redis.Redis`` (standalone) or ``redis.cluster.RedisCluster``
            (cluster); exposes connection, string, key, hash, set, list and
            sorted-set commands. For pooled handles this is also the physical
            connection that goes back to the pool.
        pooled: Whether the handle was borrowed from a pool
    """
    topology: Topology
    commands: Any
    pooled: bool = False

    @property
    def is_cluster(self) -> bool:
        return self.topology is Topology.CLUSTER


class CommandFacade:
    """
    Hands out command handles for one initialized connection manager.

    Exactly one of ``client`` or ``pool`` must be given.
    """

    def __init__(
        self,
        topology: Topology,
        client: Any = None,
        pool: Optional[RedisConnectionPool] = None,
    ):
        if (client is None) == (pool is None):
            raise ConnectionInitializationError(
                "CommandFacade requires exactly one of a direct client or a connection pool"
            )
        self.topology = topology
        self._pool = pool
        self._direct_handle = (
            CommandHandle(topology=topology, commands=client) if client is not None else None
        )

    @property
    def pooling_enabled(self) -> bool:
        return self._pool is not None

    @property
    def pool(self) -> Optional[RedisConnectionPool]:
        return self._pool

    @property
    def direct_handle(self) -> Optional[CommandHandle]:
        return self._direct_handle

    def get_command_handle(self) -> CommandHandle:
        """
        Return a handle for issuing one command.

        Raises:
            ConnectionAcquisitionError: If a pooled connection cannot be borrowed
            PoolClosedError: If the pool was closed
        """
        if self._pool is None:
            return self._direct_handle
        connection = self._pool.borrow()
        return CommandHandle(topology=self.topology, commands=connection, pooled=True)

    def release(self, handle: Optional[CommandHandle]) -> None:
        """
        Give a handle back after use.

        A no-op without pooling or for ``None``. Pooled handles have their
        connection returned to the pool, never closed; releasing the same
        handle twice is ignored by the pool.
        """
        if self._pool is None or handle is None:
            return
        self._pool.return_connection(handle.commands)

    @contextmanager
    def command_handle(self) -> Iterator[CommandHandle]:
        """Context manager pairing ``get_command_handle`` with ``release``."""
        handle = self.get_command_handle()
        try:
            yield handle
        finally:
            self.release(handle)
