"""Hash commands."""

from typing import Any, Dict, List, Optional

from .base import CommandCategory, CommandExecutor


class HashCommandExecutor(CommandExecutor):
    category = CommandCategory.HASH

    def hdel(self, key: str, *fields: str) -> int:
        return self._execute("hdel", key, *fields)

    def hexists(self, key: str, field: str) -> bool:
        return self._execute("hexists", key, field)

    def hget(self, key: str, field: str) -> Any:
        return self._execute("hget", key, field)

    def hgetall(self, key: str) -> Dict[Any, Any]:
        return self._execute("hgetall", key)

    def hincrby(self, key: str, field: str, amount: int = 1) -> int:
        return self._execute("hincrby", key, field, amount)

    def hincrbyfloat(self, key: str, field: str, amount: float = 1.0) -> float:
        return self._execute("hincrbyfloat", key, field, amount)

    def hkeys(self, key: str) -> List[Any]:
        return self._execute("hkeys", key)

    def hlen(self, key: str) -> int:
        return self._execute("hlen", key)

    def hmget(self, key: str, fields: List[str]) -> List[Any]:
        return self._execute("hmget", key, fields)

    def hset(
        self,
        key: str,
        field: Optional[str] = None,
        value: Any = None,
        mapping: Optional[Dict[str, Any]] = None,
    ) -> int:
        """
        Set one field, or every field of ``mapping``.

        Returns:
            Number of fields that were added (updated fields are not counted)
        """
        return self._execute("hset", key, field, value, mapping=mapping)

    def hsetnx(self, key: str, field: str, value: Any) -> bool:
        return self._execute("hsetnx", key, field, value)

    def hstrlen(self, key: str, field: str) -> int:
        return self._execute("hstrlen", key, field)

    def hvals(self, key: str) -> List[Any]:
        return self._execute("hvals", key)
