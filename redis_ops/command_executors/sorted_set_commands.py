"""Sorted set commands."""

from typing import Any, Dict, List, Optional, Union

from .base import CommandCategory, CommandExecutor

Score = Union[int, float, str]


class SortedSetCommandExecutor(CommandExecutor):
    """
    Commands on sorted sets.

    Score bounds accept numbers or the usual string forms (``"-inf"``,
    ``"(1.5"``); lexicographical bounds use ``"[a"``, ``"(a"``, ``"-"``, ``"+"``.
    """

    category = CommandCategory.SORTED_SET

    def zadd(
        self,
        key: str,
        mapping: Dict[Any, float],
        nx: bool = False,
        xx: bool = False,
        ch: bool = False,
        incr: bool = False,
    ) -> Any:
        return self._execute("zadd", key, mapping, nx=nx, xx=xx, ch=ch, incr=incr)

    def zcard(self, key: str) -> int:
        return self._execute("zcard", key)

    def zcount(self, key: str, min: Score, max: Score) -> int:
        return self._execute("zcount", key, min, max)

    def zincrby(self, key: str, amount: float, member: Any) -> float:
        return self._execute("zincrby", key, amount, member)

    def zinterstore(self, destination: str, keys: List[str], aggregate: Optional[str] = None) -> int:
        return self._execute("zinterstore", destination, keys, aggregate)

    def zlexcount(self, key: str, min: str, max: str) -> int:
        return self._execute("zlexcount", key, min, max)

    def zrange(self, key: str, start: int, end: int, desc: bool = False,
               withscores: bool = False) -> List[Any]:
        return self._execute("zrange", key, start, end, desc=desc, withscores=withscores)

    def zrangebylex(self, key: str, min: str, max: str, start: Optional[int] = None,
                    num: Optional[int] = None) -> List[Any]:
        return self._execute("zrangebylex", key, min, max, start, num)

    def zrangebyscore(self, key: str, min: Score, max: Score, start: Optional[int] = None,
                      num: Optional[int] = None, withscores: bool = False) -> List[Any]:
        return self._execute("zrangebyscore", key, min, max, start, num, withscores=withscores)

    def zrank(self, key: str, member: Any) -> Optional[int]:
        return self._execute("zrank", key, member)

    def zrem(self, key: str, *members: Any) -> int:
        return self._execute("zrem", key, *members)

    def zremrangebylex(self, key: str, min: str, max: str) -> int:
        return self._execute("zremrangebylex", key, min, max)

    def zremrangebyrank(self, key: str, start: int, end: int) -> int:
        return self._execute("zremrangebyrank", key, start, end)

    def zremrangebyscore(self, key: str, min: Score, max: Score) -> int:
        return self._execute("zremrangebyscore", key, min, max)

    def zrevrange(self, key: str, start: int, end: int, withscores: bool = False) -> List[Any]:
        return self._execute("zrevrange", key, start, end, withscores=withscores)

    def zrevrangebyscore(self, key: str, max: Score, min: Score, start: Optional[int] = None,
                         num: Optional[int] = None, withscores: bool = False) -> List[Any]:
        return self._execute("zrevrangebyscore", key, max, min, start, num, withscores=withscores)

    def zrevrank(self, key: str, member: Any) -> Optional[int]:
        return self._execute("zrevrank", key, member)

    def zscore(self, key: str, member: Any) -> Optional[float]:
        return self._execute("zscore", key, member)

    def zunionstore(self, destination: str, keys: List[str], aggregate: Optional[str] = None) -> int:
        return self._execute("zunionstore", destination, keys, aggregate)
