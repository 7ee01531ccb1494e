"""List commands."""

from typing import Any, List, Optional

from .base import CommandCategory, CommandExecutor


class ListCommandExecutor(CommandExecutor):
    category = CommandCategory.LIST

    def blpop(self, keys: List[str], timeout: int = 0) -> Any:
        """
        Pop from the first non-empty list, blocking up to ``timeout`` seconds.

        With pooling enabled the borrowed connection stays out of the pool
        for the whole wait.
        """
        return self._execute("blpop", keys, timeout)

    def brpop(self, keys: List[str], timeout: int = 0) -> Any:
        return self._execute("brpop", keys, timeout)

    def lindex(self, key: str, index: int) -> Any:
        return self._execute("lindex", key, index)

    def linsert(self, key: str, where: str, pivot: Any, value: Any) -> int:
        """Insert ``value`` ``BEFORE`` or ``AFTER`` ``pivot``."""
        return self._execute("linsert", key, where, pivot, value)

    def llen(self, key: str) -> int:
        return self._execute("llen", key)

    def lpop(self, key: str, count: Optional[int] = None) -> Any:
        return self._execute("lpop", key, count)

    def lpush(self, key: str, *values: Any) -> int:
        return self._execute("lpush", key, *values)

    def lpushx(self, key: str, *values: Any) -> int:
        return self._execute("lpushx", key, *values)

    def lrange(self, key: str, start: int, end: int) -> List[Any]:
        return self._execute("lrange", key, start, end)

    def lrem(self, key: str, count: int, value: Any) -> int:
        return self._execute("lrem", key, count, value)

    def lset(self, key: str, index: int, value: Any) -> bool:
        return self._execute("lset", key, index, value)

    def ltrim(self, key: str, start: int, end: int) -> bool:
        return self._execute("ltrim", key, start, end)

    def rpop(self, key: str, count: Optional[int] = None) -> Any:
        return self._execute("rpop", key, count)

    def rpush(self, key: str, *values: Any) -> int:
        return self._execute("rpush", key, *values)

    def rpushx(self, key: str, *values: Any) -> int:
        return self._execute("rpushx", key, *values)
