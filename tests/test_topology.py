"""
Tests for standalone/cluster client construction.
"""

import pytest

from redis_ops.connection_management import (
    BYTES_CODEC,
    ClientSupplier,
    ConnectionAcquisitionError,
    DirectClient,
    ServerAddress,
    TopologyClientFactory,
)


class TestStandaloneFactory:
    """Test creation of standalone clients and suppliers."""

    def test_direct_client_is_created_once(self, fake_server):
        factory = TopologyClientFactory(pooling_enabled=False)
        source = factory.create_standalone(ServerAddress("127.0.0.1", 6379), "", {"database": 2})

        assert isinstance(source, DirectClient)
        assert fake_server.clients == [source.client]
        assert source.client.kwargs["host"] == "127.0.0.1"
        assert source.client.kwargs["db"] == 2
        assert "single_connection_client" not in source.client.kwargs

    def test_supplier_opens_a_new_single_connection_client_per_call(self, fake_server):
        factory = TopologyClientFactory(codec=BYTES_CODEC, pooling_enabled=True)
        source = factory.create_standalone(ServerAddress("10.1.1.1", 6380), "pw", {})

        assert isinstance(source, ClientSupplier)
        assert fake_server.clients == []

        first = source.connect()
        second = source.connect()
        assert first is not second
        for client in (first, second):
            assert client.kwargs["single_connection_client"] is True
            assert client.kwargs["port"] == 6380
            assert client.kwargs["password"] == "pw"
            assert client.kwargs["decode_responses"] is False


class TestClusterFactory:
    """Test creation of cluster clients and suppliers."""

    def test_every_address_becomes_a_startup_node(self, fake_server):
        factory = TopologyClientFactory(pooling_enabled=False)
        addresses = [ServerAddress("10.0.0.1", 6379), ServerAddress("10.0.0.2", 7000)]
        source = factory.create_cluster(addresses, "pw", {"clientName": "svc"})

        assert isinstance(source, DirectClient)
        nodes = source.client.startup_nodes
        assert [(node.host, node.port) for node in nodes] == [("10.0.0.1", 6379), ("10.0.0.2", 7000)]
        assert source.client.kwargs["password"] == "pw"
        assert source.client.kwargs["client_name"] == "svc"

    def test_database_index_is_not_passed_to_cluster(self, fake_server):
        factory = TopologyClientFactory(pooling_enabled=False)
        source = factory.create_cluster([ServerAddress("10.0.0.1", 6379)], "", {"database": 5})
        assert "db" not in source.client.kwargs

    def test_supplier_builds_fresh_startup_nodes(self, fake_server):
        factory = TopologyClientFactory(pooling_enabled=True)
        source = factory.create_cluster([ServerAddress("10.0.0.1", 6379)], "", {})

        assert isinstance(source, ClientSupplier)
        first = source.connect()
        second = source.connect()
        assert first.startup_nodes[0] is not second.startup_nodes[0]
        assert len(fake_server.cluster_clients) == 2

    def test_unreachable_cluster_raises_acquisition_error(self, fake_server):
        fake_server.refuse_connections = True
        factory = TopologyClientFactory(pooling_enabled=False)
        with pytest.raises(ConnectionAcquisitionError) as exc_info:
            factory.create_cluster([ServerAddress("10.0.0.1", 6379)], "", {})
        assert "10.0.0.1:6379" in str(exc_info.value)
