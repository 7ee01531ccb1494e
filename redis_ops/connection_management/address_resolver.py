"""
Server Address Resolution

Parses a ``host[:port](,host[:port])*`` specification into an ordered list of
server addresses. The resolver knows nothing about topologies; deciding
whether several addresses are acceptable is the connection manager's job.
"""

import logging
import re
from dataclasses import dataclass
from typing import List

from .connection_exceptions import InvalidAddressError

logger = logging.getLogger(__name__)

HOSTS_SEPARATOR = ","
HOST_PORT_SEPARATOR = ":"
DEFAULT_PORT = 6379
MAX_PORT = 65535

_PORT_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class ServerAddress:
    """A single Redis server endpoint."""
    host: str
    port: int = DEFAULT_PORT

    def __str__(self) -> str:
        return f"{self.host}{HOST_PORT_SEPARATOR}{self.port}"


def parse_server_address(token: str) -> ServerAddress:
    """
    Parse one ``host[:port]`` token.

    Args:
        token: The token as it appeared in the host specification

    Returns:
        ServerAddress with the given port, or 6379 when the port is omitted

    Raises:
        InvalidAddressError: If the token has more than one port separator,
            the port is not a plain decimal integer or it is above 65535
    """
    parts = token.split(HOST_PORT_SEPARATOR)
    if len(parts) > 2:
        raise InvalidAddressError(
            f"host string must have the form host[:port]: {token}", address=token
        )
    host = parts[0]
    if len(parts) == 1:
        return ServerAddress(host, DEFAULT_PORT)
    # int() alone would also take surrounding whitespace, signs and underscores
    if not _PORT_PATTERN.fullmatch(parts[1]):
        raise InvalidAddressError(
            f"port of the host string must be an integer: {token}", address=token
        )
    port = int(parts[1])
    if port > MAX_PORT:
        raise InvalidAddressError(
            f"port of the host string must be between 0 and {MAX_PORT}: {token}", address=token
        )
    return ServerAddress(host, port)


def resolve_server_addresses(hosts_spec: str) -> List[ServerAddress]:
    """
    Resolve a comma separated host specification.

    Order is preserved; duplicates and empty tokens are passed through as-is.

    Args:
        hosts_spec: e.g. ``"10.0.0.1:7000,10.0.0.2:7001,10.0.0.3"``

    Returns:
        List of ServerAddress in left-to-right order

    Raises:
        InvalidAddressError: If any token is malformed
    """
    addresses = [parse_server_address(token) for token in hosts_spec.split(HOSTS_SEPARATOR)]
    logger.debug(f"Resolved {len(addresses)} server address(es) from '{hosts_spec}'")
    return addresses
