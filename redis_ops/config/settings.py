"""
Pydantic Settings for Redis Operations

This module provides strongly-typed configuration settings using Pydantic,
with support for environment variables and YAML configuration files.
"""

from typing import Dict, Any, Optional, Union
from enum import Enum
from pathlib import Path
import os

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_yaml import to_yaml_str


class CodecType(str, Enum):
    """
    Serialization strategy for keys and values exchanged with the server.

    - STRING: keys and values are UTF-8 encoded on the way out and decoded to ``str`` on the way in
    - BYTES: replies are returned as raw ``bytes``; suitable for binary payloads
    """
    STRING = "string"
    BYTES = "bytes"


class ConnectionOptions(BaseModel):
    """
    Transport options accepted by ``ConnectionManager.init``.

    Field aliases use the camelCase option names of the connector's
    configuration record so that a plain options mapping and this model are
    interchangeable. ``-1`` means "not set" for the integer options.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    client_name: str = Field("", alias="clientName",
                             description="Name announced with CLIENT SETNAME; blank means unset")
    connection_timeout_ms: int = Field(-1, alias="connectionTimeoutMs",
                                       description="Connect/socket timeout in milliseconds (-1 = client default)")
    database: int = Field(-1, alias="database",
                          description="Logical database index (-1 = server default)")
    ssl_enabled: bool = Field(False, alias="sslEnabled",
                              description="Whether to use TLS for the connection")
    start_tls_enabled: bool = Field(False, alias="startTlsEnabled",
                                    description="Whether to upgrade a plain connection with STARTTLS")
    verify_peer_enabled: bool = Field(False, alias="verifyPeerEnabled",
                                      description="Whether to verify the server certificate and hostname")

    def to_options(self) -> Dict[str, Any]:
        """Render the options mapping keyed by the camelCase option names."""
        return self.model_dump(by_alias=True)


class ConnectionSettings(BaseSettings):
    """
    Connection settings for reaching a Redis standalone server or cluster.

    These settings control:
    - Server location (one or more ``host[:port]`` entries) and authentication
    - Transport security and timeout behavior
    - Topology (standalone vs cluster) and whether connections are pooled
    """
    model_config = SettingsConfigDict(env_prefix="REDIS_", case_sensitive=False)

    hosts: str = Field("localhost:6379",
                       description="Comma separated host[:port] list; port defaults to 6379")
    password: str = Field("", description="Password for AUTH (blank = no authentication)")
    client_name: str = Field("", description="Client name announced to the server")
    connection_timeout_ms: int = Field(-1, description="Connection timeout in milliseconds (-1 = client default)")
    database: int = Field(-1, description="Logical database index (-1 = server default)")
    ssl_enabled: bool = Field(False, description="Whether to use TLS/SSL")
    start_tls_enabled: bool = Field(False, description="Whether to use STARTTLS")
    verify_peer_enabled: bool = Field(False, description="Whether to verify the server certificate")
    cluster: bool = Field(False, description="Whether the hosts form a Redis Cluster")
    pooling: bool = Field(False, description="Whether to borrow a pooled connection per command")

    def to_connection_options(self) -> ConnectionOptions:
        """Extract the transport options used by ``ConnectionManager.init``."""
        return ConnectionOptions(
            client_name=self.client_name,
            connection_timeout_ms=self.connection_timeout_ms,
            database=self.database,
            ssl_enabled=self.ssl_enabled,
            start_tls_enabled=self.start_tls_enabled,
            verify_peer_enabled=self.verify_peer_enabled,
        )


class PoolSettings(BaseSettings):
    """
    Connection pool sizing and validation settings.

    Defaults mirror a general purpose object pool: at most 8 connections,
    no idle floor, unbounded wait when the pool is exhausted.
    A negative ``max_total``/``max_idle`` means "no limit" and a negative
    ``max_wait_ms`` means "wait forever".
    """
    model_config = SettingsConfigDict(env_prefix="REDIS_POOL_", case_sensitive=False)

    max_total: int = Field(8, description="Maximum number of connections (idle + borrowed)")
    max_idle: int = Field(8, description="Maximum number of idle connections kept for reuse")
    min_idle: int = Field(0, ge=0, description="Connections created up front when the pool starts")
    max_wait_ms: int = Field(-1, description="How long borrow blocks when the pool is exhausted")
    block_when_exhausted: bool = Field(True, description="Whether borrow waits for a returned connection")
    test_on_borrow: bool = Field(False, description="PING idle connections before handing them out")
    test_on_return: bool = Field(False, description="PING connections before putting them back")

    @model_validator(mode="after")
    def _check_idle_bounds(self) -> "PoolSettings":
        if self.max_idle >= 0 and self.min_idle > self.max_idle:
            raise ValueError(
                f"min_idle ({self.min_idle}) cannot exceed max_idle ({self.max_idle})"
            )
        if self.max_total >= 0 and self.min_idle > self.max_total:
            raise ValueError(
                f"min_idle ({self.min_idle}) cannot exceed max_total ({self.max_total})"
            )
        return self


class RedisSettings(BaseSettings):
    """
    Main settings class that consolidates all configuration categories.

    Usage:
        # Load from environment variables and defaults
        settings = RedisSettings()

        # Load from YAML file
        settings = RedisSettings.from_yaml('config.yaml')

        # Access nested settings
        hosts = settings.connection.hosts
        max_total = settings.pool.max_total
    """
    model_config = SettingsConfigDict(env_prefix="REDIS_", case_sensitive=False,
                                      env_nested_delimiter="__")

    connection: ConnectionSettings = Field(default_factory=ConnectionSettings,
                                           description="Server location, transport and topology")
    pool: PoolSettings = Field(default_factory=PoolSettings,
                               description="Connection pool configuration (pooled mode only)")
    codec: CodecType = Field(CodecType.STRING, description="Key/value serialization strategy")

    @classmethod
    def from_yaml(cls, yaml_file: Union[str, Path]) -> "RedisSettings":
        """Load settings from YAML file"""
        with open(yaml_file, 'r') as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self) -> str:
        """Serialize the settings to a YAML document (password masked)."""
        masked = self.model_copy(deep=True)
        if masked.connection.password:
            masked.connection.password = "***"
        return to_yaml_str(masked)


def load_settings(config_path: Optional[str] = None) -> RedisSettings:
    """
    Load settings from file and/or environment variables.

    - If config_path is provided and exists, loads settings from the YAML file
    - Otherwise, creates a new settings instance with values from environment variables

    Args:
        config_path: Path to YAML configuration file. If None or file doesn't exist,
                    falls back to environment variables and default values.

    Returns:
        RedisSettings object with loaded configuration

    Example:
        # Load from specific config file
        settings = load_settings("/path/to/config.yaml")

        # Load from environment variables and defaults
        settings = load_settings()
    """
    if config_path and os.path.exists(config_path):
        return RedisSettings.from_yaml(config_path)
    return RedisSettings()
