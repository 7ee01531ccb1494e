"""
Connection Management Exceptions

This module defines specialized exceptions for Redis connection management,
providing detailed error reporting for address parsing, topology selection,
connection acquisition and pool lifecycle problems.

Every exception carries the offending input (address token, host
specification, pool limits) so that callers can diagnose failures without
digging through logs.
"""

from typing import Optional

from redis_ops.redis_ops_exceptions import RedisOpsError


class RedisConnectionError(RedisOpsError):
    """
    Base exception for all connection-related errors.

    Applications can catch this to handle every connection management
    failure uniformly while still having access to the specific subtype.
    """
    pass


class InvalidAddressError(RedisConnectionError):
    """
    Raised when a ``host[:port]`` token cannot be parsed.

    Attributes:
        address: The offending token exactly as it appeared in the host specification
    """
    def __init__(self, message: str, address: Optional[str] = None):
        super().__init__(message)
        self.address = address


class UnsupportedTopologyError(RedisConnectionError):
    """
    Raised when the resolved addresses do not fit the configured topology,
    i.e. more than one host was given for a standalone connection.

    Attributes:
        hosts: The host specification that was rejected
    """
    def __init__(self, message: str, hosts: Optional[str] = None):
        super().__init__(message)
        self.hosts = hosts


class ConnectionInitializationError(RedisConnectionError):
    """
    Raised when ``init`` is called on an already initialized or closed
    manager, or when commands are requested before ``init`` succeeded or
    after the manager was closed.
    """
    pass


class ConnectionAcquisitionError(RedisConnectionError):
    """
    Raised when a physical connection cannot be obtained.

    Covers network refusal, authentication failure and timeouts reported by
    the underlying client as well as failures to borrow from the pool.
    """
    pass


class PoolExhaustedError(ConnectionAcquisitionError):
    """
    Raised when the pool has no idle connection, cannot create another one
    and the wait budget ran out (or blocking is disabled).

    Attributes:
        max_total: The pool's configured connection limit
    """
    def __init__(self, message: str, max_total: Optional[int] = None):
        super().__init__(message)
        self.max_total = max_total


class PoolClosedError(RedisConnectionError):
    """
    Raised when attempting to borrow from a pool that has been closed.

    This is a programming error: the manager was torn down while callers
    were still issuing commands.
    """
    pass
