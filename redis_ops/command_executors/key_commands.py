"""Generic key commands."""

from datetime import datetime, timedelta
from typing import Any, List, Optional, Union

from .base import CommandCategory, CommandExecutor

ExpiryT = Union[int, timedelta]
AbsExpiryT = Union[int, datetime]


class KeyCommandExecutor(CommandExecutor):
    """Commands that operate on keys regardless of their value type."""

    category = CommandCategory.KEY

    def delete(self, *keys: str) -> int:
        return self._execute("delete", *keys)

    def exists(self, *keys: str) -> int:
        return self._execute("exists", *keys)

    def expire(self, key: str, seconds: ExpiryT) -> bool:
        return self._execute("expire", key, seconds)

    def expireat(self, key: str, when: AbsExpiryT) -> bool:
        return self._execute("expireat", key, when)

    def keys(self, pattern: str = "*") -> List[Any]:
        """
        Return keys matching ``pattern``.

        Cluster clients run KEYS on every primary and merge the replies.
        """
        return self._execute("keys", pattern)

    def move(self, key: str, db: int) -> bool:
        return self._execute("move", key, db)

    def persist(self, key: str) -> bool:
        return self._execute("persist", key)

    def pexpire(self, key: str, milliseconds: ExpiryT) -> bool:
        return self._execute("pexpire", key, milliseconds)

    def pexpireat(self, key: str, when: AbsExpiryT) -> bool:
        return self._execute("pexpireat", key, when)

    def pttl(self, key: str) -> int:
        return self._execute("pttl", key)

    def randomkey(self) -> Any:
        return self._execute("randomkey")

    def rename(self, src: str, dst: str) -> bool:
        return self._execute("rename", src, dst)

    def renamenx(self, src: str, dst: str) -> bool:
        return self._execute("renamenx", src, dst)

    def sort(
        self,
        key: str,
        start: Optional[int] = None,
        num: Optional[int] = None,
        by: Optional[str] = None,
        get: Optional[List[str]] = None,
        desc: bool = False,
        alpha: bool = False,
        store: Optional[str] = None,
    ) -> Any:
        return self._execute(
            "sort", key, start=start, num=num, by=by, get=get, desc=desc, alpha=alpha, store=store
        )

    def ttl(self, key: str) -> int:
        return self._execute("ttl", key)

    def type(self, key: str) -> Any:
        return self._execute("type", key)

    def touch(self, *keys: str) -> int:
        return self._execute("touch", *keys)

    def unlink(self, *keys: str) -> int:
        return self._execute("unlink", *keys)
