"""
Configuration Module

This module provides centralized configuration management for Redis connections:
- Server location, authentication and transport options
- Topology (standalone / cluster) and pooling selection
- Connection pool sizing and validation
- Key/value codec selection
- Configuration loading from environment variables and YAML files

Implements a flexible, environment-aware configuration system
with sensible defaults and validation using Pydantic.
"""

from .settings import (
    RedisSettings,
    ConnectionSettings,
    PoolSettings,
    ConnectionOptions,
    CodecType,
    load_settings,
)

__all__ = [
    'RedisSettings',
    'ConnectionSettings',
    'PoolSettings',
    'ConnectionOptions',
    'CodecType',
    'load_settings',
]
