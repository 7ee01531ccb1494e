"""
Redis Operations Exceptions

This module defines custom exceptions for the redis_ops package
to provide clear error handling and reporting.
"""


class RedisOpsError(Exception):
    """Base exception for all redis_ops errors"""
    pass


class ConfigurationError(RedisOpsError):
    """Raised when configuration is invalid or missing"""
    pass


class CommandExecutionError(RedisOpsError):
    """
    Raised when the server rejects a command or the command fails for a
    reason other than connectivity.

    Attributes:
        command: Name of the command that failed
    """
    def __init__(self, message: str, command: str = None):
        super().__init__(message)
        self.command = command
