"""
Tests for per-category command executors.

The redis-py client is replaced with a MagicMock so the tests check what is
forwarded rather than server behavior.
"""

from unittest.mock import MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionFailure
from redis.exceptions import ResponseError, TimeoutError as RedisTimeoutError

from redis_ops import CommandExecutionError
from redis_ops.connection_management import (
    ConnectionAcquisitionError,
    ConnectionManager,
    topology,
)


@pytest.fixture
def mock_client(monkeypatch):
    client = MagicMock(name="redis-client")
    monkeypatch.setattr(topology, "Redis", lambda **kwargs: client)
    return client


@pytest.fixture
def manager(mock_client, default_options):
    manager = ConnectionManager(pooling_enabled=False)
    manager.init("127.0.0.1:6379", "", default_options)
    return manager


@pytest.fixture
def pooled_manager(mock_client, default_options):
    manager = ConnectionManager(pooling_enabled=True)
    manager.init("127.0.0.1:6379", "", default_options)
    return manager


class TestForwarding:
    """Test that executor methods forward to the matching client method."""

    def test_string_set_forwards_options(self, manager, mock_client):
        mock_client.set.return_value = True
        assert manager.get_string_command_executor().set("k", "v", ex=10, nx=True) is True
        mock_client.set.assert_called_once_with(
            "k", "v", ex=10, px=None, nx=True, xx=False, keepttl=False, get=False
        )

    def test_string_get_returns_reply(self, manager, mock_client):
        mock_client.get.return_value = "v"
        assert manager.get_string_command_executor().get("k") == "v"
        mock_client.get.assert_called_once_with("k")

    def test_hash_hset_single_field(self, manager, mock_client):
        mock_client.hset.return_value = 1
        assert manager.get_hash_command_executor().hset("h", "f", "v") == 1
        mock_client.hset.assert_called_once_with("h", "f", "v", mapping=None)

    def test_hash_hset_mapping(self, manager, mock_client):
        manager.get_hash_command_executor().hset("h", mapping={"a": 1, "b": 2})
        mock_client.hset.assert_called_once_with("h", None, None, mapping={"a": 1, "b": 2})

    def test_key_delete_with_several_keys(self, manager, mock_client):
        mock_client.delete.return_value = 2
        assert manager.get_key_command_executor().delete("a", "b") == 2
        mock_client.delete.assert_called_once_with("a", "b")

    def test_list_push(self, manager, mock_client):
        manager.get_list_command_executor().rpush("l", "x", "y")
        mock_client.rpush.assert_called_once_with("l", "x", "y")

    def test_set_members(self, manager, mock_client):
        mock_client.smembers.return_value = {"a"}
        assert manager.get_set_command_executor().smembers("s") == {"a"}

    def test_sorted_set_range_with_scores(self, manager, mock_client):
        manager.get_sorted_set_command_executor().zrange("z", 0, -1, withscores=True)
        mock_client.zrange.assert_called_once_with("z", 0, -1, desc=False, withscores=True)

    def test_sorted_set_add(self, manager, mock_client):
        manager.get_sorted_set_command_executor().zadd("z", {"m": 1.0}, nx=True)
        mock_client.zadd.assert_called_once_with("z", {"m": 1.0}, nx=True, xx=False, ch=False, incr=False)

    def test_connection_ping(self, manager, mock_client):
        mock_client.ping.return_value = True
        assert manager.get_connection_command_executor().ping() is True


class TestErrorMapping:
    """Test translation of redis-py errors."""

    def test_connection_failure_maps_to_acquisition_error(self, manager, mock_client):
        mock_client.get.side_effect = RedisConnectionFailure("Connection reset by peer")
        with pytest.raises(ConnectionAcquisitionError) as exc_info:
            manager.get_string_command_executor().get("k")
        assert isinstance(exc_info.value.__cause__, RedisConnectionFailure)

    def test_timeout_maps_to_acquisition_error(self, manager, mock_client):
        mock_client.get.side_effect = RedisTimeoutError("Timeout reading from socket")
        with pytest.raises(ConnectionAcquisitionError):
            manager.get_string_command_executor().get("k")

    def test_server_error_maps_to_command_error(self, manager, mock_client):
        mock_client.incr.side_effect = ResponseError("value is not an integer or out of range")
        with pytest.raises(CommandExecutionError) as exc_info:
            manager.get_string_command_executor().incr("k")
        assert exc_info.value.command == "incr"
        assert "not an integer" in str(exc_info.value)

    def test_other_exceptions_propagate_unchanged(self, manager, mock_client):
        mock_client.get.side_effect = KeyError("k")
        with pytest.raises(KeyError):
            manager.get_string_command_executor().get("k")


class TestPooledExecution:
    """Test that each command borrows and releases exactly one connection."""

    def test_connection_is_returned_after_each_command(self, pooled_manager, mock_client):
        mock_client.get.return_value = "v"
        strings = pooled_manager.get_string_command_executor()

        assert strings.get("k") == "v"
        assert strings.get("k") == "v"

        pool = pooled_manager.connection_pool
        assert pool.num_active == 0
        assert pool.num_idle == 1

    def test_connection_is_returned_after_failure(self, pooled_manager, mock_client):
        mock_client.get.side_effect = RedisConnectionFailure("Connection reset by peer")
        with pytest.raises(ConnectionAcquisitionError):
            pooled_manager.get_string_command_executor().get("k")

        pool = pooled_manager.connection_pool
        assert pool.num_active == 0
        assert pool.num_idle == 1
