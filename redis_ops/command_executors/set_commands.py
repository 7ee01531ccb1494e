"""Set commands."""

from typing import Any, List, Optional, Set

from .base import CommandCategory, CommandExecutor


class SetCommandExecutor(CommandExecutor):
    """
    Commands on unordered sets.

    Multi-key commands (``sdiff``, ``sinter``, ``sunion`` and their ``*store``
    variants) require all keys to hash to the same slot in cluster mode.
    """

    category = CommandCategory.SET

    def sadd(self, key: str, *members: Any) -> int:
        return self._execute("sadd", key, *members)

    def scard(self, key: str) -> int:
        return self._execute("scard", key)

    def sdiff(self, keys: List[str]) -> Set[Any]:
        return self._execute("sdiff", keys)

    def sdiffstore(self, destination: str, keys: List[str]) -> int:
        return self._execute("sdiffstore", destination, keys)

    def sinter(self, keys: List[str]) -> Set[Any]:
        return self._execute("sinter", keys)

    def sinterstore(self, destination: str, keys: List[str]) -> int:
        return self._execute("sinterstore", destination, keys)

    def sismember(self, key: str, member: Any) -> bool:
        return self._execute("sismember", key, member)

    def smembers(self, key: str) -> Set[Any]:
        return self._execute("smembers", key)

    def smove(self, source: str, destination: str, member: Any) -> bool:
        return self._execute("smove", source, destination, member)

    def spop(self, key: str, count: Optional[int] = None) -> Any:
        return self._execute("spop", key, count)

    def srandmember(self, key: str, number: Optional[int] = None) -> Any:
        return self._execute("srandmember", key, number)

    def srem(self, key: str, *members: Any) -> int:
        return self._execute("srem", key, *members)

    def sunion(self, keys: List[str]) -> Set[Any]:
        return self._execute("sunion", keys)

    def sunionstore(self, destination: str, keys: List[str]) -> int:
        return self._execute("sunionstore", destination, keys)
