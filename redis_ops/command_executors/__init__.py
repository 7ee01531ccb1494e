"""
Command Executors Module

Per-category command executors handed out by the ConnectionManager:
- Connection commands (PING, ECHO, AUTH, CLIENT name/id)
- String, key, hash, set, list and sorted-set commands

Each executor is a thin pass-through to the redis-py client; every call
obtains its own command handle and releases it afterwards.
"""

from .base import CommandCategory, CommandExecutor
from .connection_commands import ConnectionCommandExecutor
from .string_commands import StringCommandExecutor
from .key_commands import KeyCommandExecutor
from .hash_commands import HashCommandExecutor
from .set_commands import SetCommandExecutor
from .list_commands import ListCommandExecutor
from .sorted_set_commands import SortedSetCommandExecutor

EXECUTOR_TYPES = {
    CommandCategory.CONNECTION: ConnectionCommandExecutor,
    CommandCategory.STRING: StringCommandExecutor,
    CommandCategory.KEY: KeyCommandExecutor,
    CommandCategory.HASH: HashCommandExecutor,
    CommandCategory.SET: SetCommandExecutor,
    CommandCategory.LIST: ListCommandExecutor,
    CommandCategory.SORTED_SET: SortedSetCommandExecutor,
}

__all__ = [
    'CommandCategory',
    'CommandExecutor',
    'ConnectionCommandExecutor',
    'StringCommandExecutor',
    'KeyCommandExecutor',
    'HashCommandExecutor',
    'SetCommandExecutor',
    'ListCommandExecutor',
    'SortedSetCommandExecutor',
    'EXECUTOR_TYPES',
]
