"""String commands."""

from typing import Any, Dict, List, Optional, Union

from .base import CommandCategory, CommandExecutor

Number = Union[int, float]


class StringCommandExecutor(CommandExecutor):
    """
    Commands on string values.

    Example:
        >>> strings = manager.get_string_command_executor()
        >>> strings.set("greeting", "hello")
        True
        >>> strings.get("greeting")
        'hello'
    """

    category = CommandCategory.STRING

    def get(self, key: str) -> Any:
        return self._execute("get", key)

    def set(
        self,
        key: str,
        value: Any,
        ex: Optional[int] = None,
        px: Optional[int] = None,
        nx: bool = False,
        xx: bool = False,
        keepttl: bool = False,
        get: bool = False,
    ) -> Any:
        """
        Set ``key`` to ``value``.

        Args:
            ex: Expiry in seconds
            px: Expiry in milliseconds
            nx: Only set if the key does not exist
            xx: Only set if the key exists
            keepttl: Retain the existing time to live
            get: Return the previous value instead of OK

        Returns:
            True on success, None when an ``nx``/``xx`` condition was not met,
            or the previous value when ``get`` is set
        """
        return self._execute(
            "set", key, value, ex=ex, px=px, nx=nx, xx=xx, keepttl=keepttl, get=get
        )

    def append(self, key: str, value: Any) -> int:
        return self._execute("append", key, value)

    def bitcount(self, key: str, start: Optional[int] = None, end: Optional[int] = None) -> int:
        return self._execute("bitcount", key, start, end)

    def decr(self, key: str) -> int:
        return self._execute("decr", key)

    def decrby(self, key: str, amount: int = 1) -> int:
        return self._execute("decrby", key, amount)

    def getrange(self, key: str, start: int, end: int) -> Any:
        return self._execute("getrange", key, start, end)

    def getset(self, key: str, value: Any) -> Any:
        return self._execute("getset", key, value)

    def getdel(self, key: str) -> Any:
        return self._execute("getdel", key)

    def incr(self, key: str) -> int:
        return self._execute("incr", key)

    def incrby(self, key: str, amount: int = 1) -> int:
        return self._execute("incrby", key, amount)

    def incrbyfloat(self, key: str, amount: float = 1.0) -> float:
        return self._execute("incrbyfloat", key, amount)

    def mget(self, keys: List[str]) -> List[Any]:
        """
        Get several values at once.

        In cluster mode the keys may live on different nodes; the cluster
        client splits the request per slot.
        """
        return self._execute("mget", keys)

    def mset(self, mapping: Dict[str, Any]) -> bool:
        return self._execute("mset", mapping)

    def msetnx(self, mapping: Dict[str, Any]) -> bool:
        return self._execute("msetnx", mapping)

    def psetex(self, key: str, milliseconds: int, value: Any) -> bool:
        return self._execute("psetex", key, milliseconds, value)

    def setex(self, key: str, seconds: int, value: Any) -> bool:
        return self._execute("setex", key, seconds, value)

    def setnx(self, key: str, value: Any) -> bool:
        return self._execute("setnx", key, value)

    def setrange(self, key: str, offset: int, value: Any) -> int:
        return self._execute("setrange", key, offset, value)

    def strlen(self, key: str) -> int:
        return self._execute("strlen", key)
