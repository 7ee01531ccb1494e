"""
Shared fixtures for the redis_ops test suite.

The redis-py client classes used by the topology factory are replaced with
small in-memory fakes so the tests run without a Redis server.
"""

import os

import pytest
from redis.exceptions import ConnectionError as RedisConnectionFailure

from redis_ops.connection_management import topology


class FakeRedisClient:
    """In-memory stand-in for ``redis.Redis`` / ``RedisCluster``."""

    def __init__(self, server, kwargs, startup_nodes=None):
        self.server = server
        self.kwargs = kwargs
        self.startup_nodes = startup_nodes
        self.closed = False
        self.healthy = True

    def ping(self):
        if not self.healthy:
            raise RedisConnectionFailure("Connection reset by peer")
        return True

    def set(self, name, value, ex=None, px=None, nx=False, xx=False, keepttl=False, get=False):
        self.server.data[name] = value
        return True

    def get(self, name):
        return self.server.data.get(name)

    def delete(self, *names):
        return sum(1 for name in names if self.server.data.pop(name, None) is not None)

    def close(self):
        self.closed = True


class FakeRedisServer:
    """Records every client the factory opens and shares one keyspace."""

    def __init__(self):
        self.data = {}
        self.clients = []
        self.cluster_clients = []
        self.refuse_connections = False

    def _check_available(self):
        if self.refuse_connections:
            raise RedisConnectionFailure("Error 111 connecting to 127.0.0.1:6379. Connection refused.")

    def redis(self, **kwargs):
        self._check_available()
        client = FakeRedisClient(self, kwargs)
        self.clients.append(client)
        return client

    def cluster(self, startup_nodes=None, **kwargs):
        self._check_available()
        client = FakeRedisClient(self, kwargs, startup_nodes=startup_nodes)
        self.cluster_clients.append(client)
        return client


@pytest.fixture
def fake_server(monkeypatch):
    """Patch the redis-py client classes with an in-memory fake server."""
    server = FakeRedisServer()
    monkeypatch.setattr(topology, "Redis", server.redis)
    monkeypatch.setattr(topology, "RedisCluster", server.cluster)
    return server


@pytest.fixture
def default_options():
    return {
        "sslEnabled": False,
        "database": -1,
        "connectionTimeoutMs": -1,
        "clientName": "",
    }


@pytest.fixture(autouse=True)
def clean_redis_env(monkeypatch):
    """Keep REDIS_* variables from the host environment out of the settings tests."""
    for name in list(os.environ):
        if name.upper().startswith("REDIS_"):
            monkeypatch.delenv(name, raising=False)
