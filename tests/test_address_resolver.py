"""
Tests for host specification parsing.
"""

import pytest

from redis_ops.connection_management import (
    DEFAULT_PORT,
    InvalidAddressError,
    ServerAddress,
    resolve_server_addresses,
)


class TestResolveServerAddresses:
    """Test resolution of host[:port](,host[:port])* specifications."""

    def test_single_host_with_port(self):
        assert resolve_server_addresses("127.0.0.1:6380") == [ServerAddress("127.0.0.1", 6380)]

    def test_missing_port_defaults_to_6379(self):
        addresses = resolve_server_addresses("redis.internal")
        assert addresses == [ServerAddress("redis.internal", 6379)]
        assert DEFAULT_PORT == 6379

    def test_order_is_preserved(self):
        addresses = resolve_server_addresses("c:7002,a:7000,b")
        assert [(a.host, a.port) for a in addresses] == [("c", 7002), ("a", 7000), ("b", 6379)]

    def test_duplicates_are_passed_through(self):
        addresses = resolve_server_addresses("a:1,a:1")
        assert addresses == [ServerAddress("a", 1), ServerAddress("a", 1)]

    def test_empty_tokens_are_passed_through(self):
        addresses = resolve_server_addresses("a:7000,,b:7001")
        assert len(addresses) == 3
        assert addresses[1] == ServerAddress("", DEFAULT_PORT)

    def test_non_numeric_port_is_rejected(self):
        with pytest.raises(InvalidAddressError) as exc_info:
            resolve_server_addresses("a:notanumber")
        assert exc_info.value.address == "a:notanumber"
        assert "a:notanumber" in str(exc_info.value)

    @pytest.mark.parametrize("token", ["a: 6379", "a:6379 ", "a:+6379", "a:-1", "a:6_379", "a:"])
    def test_port_must_be_plain_digits(self, token):
        with pytest.raises(InvalidAddressError) as exc_info:
            resolve_server_addresses(token)
        assert exc_info.value.address == token

    def test_port_above_range_is_rejected(self):
        with pytest.raises(InvalidAddressError) as exc_info:
            resolve_server_addresses("a:65536")
        assert exc_info.value.address == "a:65536"
        assert resolve_server_addresses("a:65535") == [ServerAddress("a", 65535)]

    def test_error_reports_offending_token_only(self):
        with pytest.raises(InvalidAddressError) as exc_info:
            resolve_server_addresses("good:6379,bad:port")
        assert exc_info.value.address == "bad:port"

    def test_more_than_one_colon_is_rejected(self):
        with pytest.raises(InvalidAddressError) as exc_info:
            resolve_server_addresses("a:1:2")
        assert exc_info.value.address == "a:1:2"

    def test_server_address_is_immutable(self):
        address = ServerAddress("a", 1)
        with pytest.raises(AttributeError):
            address.port = 2
        assert str(address) == "a:1"
