"""
Command Executor Base

Every per-category executor forwards each call to the underlying redis-py
client through the owning ConnectionManager. One command is executed per
handle: with pooling enabled a connection is borrowed for the command and
returned right after it, so no connection is held across unrelated calls.
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from redis.exceptions import (
    ConnectionError as RedisConnectionFailure,
    RedisClusterException,
    RedisError,
    TimeoutError as RedisTimeoutError,
)

from redis_ops.redis_ops_exceptions import CommandExecutionError
from redis_ops.connection_management.connection_exceptions import ConnectionAcquisitionError

if TYPE_CHECKING:
    from redis_ops.connection_management.connection_manager import ConnectionManager

logger = logging.getLogger(__name__)


class CommandCategory(str, Enum):
    """Command groups exposed by the connection manager."""
    CONNECTION = "connection"
    STRING = "string"
    KEY = "key"
    HASH = "hash"
    SET = "set"
    LIST = "list"
    SORTED_SET = "sorted_set"


class CommandExecutor:
    """
    Base class for per-category command executors.

    Executors hold no state of their own besides a back-reference to the
    connection manager that created them.
    """

    category: Optional[CommandCategory] = None

    def __init__(self, connection_manager: "ConnectionManager"):
        self._connection_manager = connection_manager

    @property
    def connection_manager(self) -> "ConnectionManager":
        return self._connection_manager

    def _execute(self, command: str, *args: Any, **kwargs: Any) -> Any:
        """
        Run a single redis-py command on a freshly obtained handle.

        Args:
            command: Name of the redis-py client method
            *args, **kwargs: Arguments forwarded to the method

        Returns:
            The command reply as decoded by the manager's codec

        Raises:
            ConnectionAcquisitionError: If the server cannot be reached, the
                connection times out or authentication fails
            CommandExecutionError: If the server rejects the command
        """
        with self._connection_manager.command_handle() as handle:
            try:
                return getattr(handle.commands, command)(*args, **kwargs)
            except (RedisConnectionFailure, RedisTimeoutError) as e:
                logger.error(f"Connection failure while executing '{command}': {e}")
                raise ConnectionAcquisitionError(
                    f"Failed to execute '{command}' due to a connection failure: {e}"
                ) from e
            except (RedisError, RedisClusterException) as e:
                raise CommandExecutionError(
                    f"Error occurred while executing '{command}': {e}", command=command
                ) from e
