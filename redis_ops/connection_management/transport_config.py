"""
Transport Configuration

Translates the generic options mapping given to ``ConnectionManager.init``
into a concrete, immutable transport configuration for one server endpoint,
and renders that configuration as redis-py client keyword arguments.

Option handling rules:
- Boolean flags (TLS, STARTTLS, peer verification) are enabled only by a real ``True``
- ``database`` of -1 means "server default"; any other integer, including 0, is applied
- ``connectionTimeoutMs`` of -1 (or any negative value) means "client default"
- The client name is applied only when it is non-blank after trimming
- The password is applied only when it is non-blank

Building a configuration never fails: missing or malformed options fall back
to "disabled" / "unset".
"""

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel

from redis_ops.config.settings import ConnectionOptions
from .codec import RedisCodec

logger = logging.getLogger(__name__)

UNSET = -1

# Accepted spellings for every option, first match wins.
_OPTION_KEYS = {
    "client_name": ("clientName", "client_name"),
    "connection_timeout": ("connectionTimeoutMs", "connectionTimeout", "connection_timeout_ms"),
    "database": ("database",),
    "ssl_enabled": ("sslEnabled", "ssl_enabled"),
    "start_tls_enabled": ("startTlsEnabled", "start_tls_enabled"),
    "verify_peer_enabled": ("verifyPeerEnabled", "verify_peer_enabled"),
}

OptionsLike = Union[Mapping[str, Any], ConnectionOptions, None]


@dataclass(frozen=True)
class TransportConfig:
    """Immutable transport settings for a single server endpoint."""
    host: str
    port: int
    tls_enabled: bool = False
    start_tls_enabled: bool = False
    verify_peer_enabled: bool = False
    database: Optional[int] = None
    connection_timeout: Optional[timedelta] = None
    client_name: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)

    def client_kwargs(self, codec: RedisCodec) -> Dict[str, Any]:
        """
        Keyword arguments shared by standalone and cluster clients.

        The endpoint and database index are left out; see ``to_connection_kwargs``.
        """
        kwargs: Dict[str, Any] = {}
        if self.password is not None:
            kwargs["password"] = self.password
        if self.tls_enabled:
            kwargs["ssl"] = True
            kwargs["ssl_cert_reqs"] = "required" if self.verify_peer_enabled else "none"
            kwargs["ssl_check_hostname"] = self.verify_peer_enabled
        if self.connection_timeout is not None:
            seconds = self.connection_timeout.total_seconds()
            kwargs["socket_connect_timeout"] = seconds
            kwargs["socket_timeout"] = seconds
        if self.client_name is not None:
            kwargs["client_name"] = self.client_name
        kwargs.update(codec.to_connection_kwargs())
        return kwargs

    def to_connection_kwargs(self, codec: RedisCodec) -> Dict[str, Any]:
        """Full keyword arguments for a standalone ``redis.Redis`` client."""
        kwargs: Dict[str, Any] = {"host": self.host, "port": self.port}
        if self.database is not None:
            kwargs["db"] = self.database
        kwargs.update(self.client_kwargs(codec))
        return kwargs


def _lookup(options: Mapping[str, Any], option: str) -> Any:
    for key in _OPTION_KEYS[option]:
        if key in options:
            return options[key]
    return None


def _as_int(value: Any) -> Optional[int]:
    # bool is an int subclass; a flag is never a valid index or timeout
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _normalize_options(options: OptionsLike) -> Mapping[str, Any]:
    if options is None:
        return {}
    if isinstance(options, BaseModel):
        return options.model_dump(by_alias=True)
    return options


def build_transport_config(
    host: str,
    port: int,
    password: Optional[str],
    options: OptionsLike = None,
) -> TransportConfig:
    """
    Build the transport configuration for one endpoint.

    Args:
        host: Server host name or IP address
        port: Server port
        password: AUTH password; None or blank means no authentication
        options: Options mapping (camelCase or snake_case keys) or a ConnectionOptions model

    Returns:
        TransportConfig ready to be rendered into client keyword arguments
    """
    opts = _normalize_options(options)

    tls_enabled = _lookup(opts, "ssl_enabled") is True
    start_tls_enabled = _lookup(opts, "start_tls_enabled") is True
    verify_peer_enabled = _lookup(opts, "verify_peer_enabled") is True

    database = _as_int(_lookup(opts, "database"))
    if database == UNSET:
        database = None

    timeout_ms = _as_int(_lookup(opts, "connection_timeout"))
    connection_timeout = None
    if timeout_ms is not None and timeout_ms >= 0:
        connection_timeout = timedelta(milliseconds=timeout_ms)

    client_name = _lookup(opts, "client_name")
    if not isinstance(client_name, str) or not client_name.strip():
        client_name = None

    if not isinstance(password, str) or not password.strip():
        password = None

    if start_tls_enabled:
        logger.warning(
            "STARTTLS was requested but redis-py negotiates TLS when the socket is opened; "
            "enable sslEnabled to encrypt the connection"
        )

    return TransportConfig(
        host=host,
        port=port,
        tls_enabled=tls_enabled,
        start_tls_enabled=start_tls_enabled,
        verify_peer_enabled=verify_peer_enabled,
        database=database,
        connection_timeout=connection_timeout,
        client_name=client_name,
        password=password,
    )
