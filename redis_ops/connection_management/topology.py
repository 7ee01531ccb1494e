"""
Topology Client Factory

Builds redis-py clients for the two supported server topologies:

- STANDALONE: a single node reached through ``redis.Redis``
- CLUSTER: a partitioned deployment reached through ``redis.cluster.RedisCluster``,
  seeded with every resolved address; node discovery and slot routing are
  handled by the cluster client itself

Depending on whether pooling is enabled the factory hands back either a ready
to use long-lived client (``DirectClient``) or a zero-argument connect
function (``ClientSupplier``) that opens one new, identically configured
physical connection each time the pool needs one.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Union

from redis import Redis
from redis.cluster import ClusterNode, RedisCluster
from redis.exceptions import RedisClusterException, RedisError

from .address_resolver import ServerAddress
from .codec import RedisCodec, STRING_CODEC
from .connection_exceptions import ConnectionAcquisitionError
from .transport_config import OptionsLike, build_transport_config

logger = logging.getLogger(__name__)


class Topology(str, Enum):
    """Server deployment shape a connection manager talks to."""
    STANDALONE = "standalone"
    CLUSTER = "cluster"


@dataclass(frozen=True)
class DirectClient:
    """A long-lived client shared by every caller (pooling disabled)."""
    client: Any


@dataclass(frozen=True)
class ClientSupplier:
    """Opens a new physical connection on every call (pooling enabled)."""
    connect: Callable[[], Any]


ConnectionHandleSource = Union[DirectClient, ClientSupplier]


class TopologyClientFactory:
    """
    Creates standalone or cluster clients bound to one codec.

    Args:
        codec: Key/value codec applied to every client
        pooling_enabled: Whether to return suppliers for a pool instead of direct clients
    """

    def __init__(self, codec: Optional[RedisCodec] = None, pooling_enabled: bool = False):
        self.codec = codec or STRING_CODEC
        self.pooling_enabled = pooling_enabled

    def create_standalone(
        self,
        address: ServerAddress,
        password: Optional[str],
        options: OptionsLike = None,
    ) -> ConnectionHandleSource:
        """
        Build the handle source for a single-node server.

        Pooled connections are opened with ``single_connection_client=True`` so
        that each pooled object owns exactly one socket.
        """
        transport = build_transport_config(address.host, address.port, password, options)
        kwargs = transport.to_connection_kwargs(self.codec)
        logger.debug(f"Standalone transport configuration: {transport}")

        if self.pooling_enabled:
            def connect() -> Redis:
                return Redis(single_connection_client=True, **kwargs)
            return ClientSupplier(connect)

        client = Redis(**kwargs)
        logger.info(f"Created standalone Redis client for {address}")
        return DirectClient(client)

    def create_cluster(
        self,
        addresses: List[ServerAddress],
        password: Optional[str],
        options: OptionsLike = None,
    ) -> ConnectionHandleSource:
        """
        Build the handle source for a Redis Cluster.

        A transport configuration is built per address with the same password
        and options; every address becomes a startup node of the cluster client.

        Raises:
            ConnectionAcquisitionError: If the direct cluster client cannot
                reach any startup node to discover the cluster layout
        """
        transports = [
            build_transport_config(address.host, address.port, password, options)
            for address in addresses
        ]
        if transports[0].database not in (None, 0):
            logger.warning(
                f"Database index {transports[0].database} is ignored for cluster connections; "
                "Redis Cluster only serves database 0"
            )
        endpoints = [(transport.host, transport.port) for transport in transports]
        kwargs = transports[0].client_kwargs(self.codec)

        def connect() -> RedisCluster:
            # ClusterNode instances cache their node connection, so every
            # cluster client needs its own set.
            startup_nodes = [ClusterNode(host, port) for host, port in endpoints]
            return RedisCluster(startup_nodes=startup_nodes, **kwargs)

        if self.pooling_enabled:
            return ClientSupplier(connect)

        try:
            client = connect()
        except (RedisError, RedisClusterException) as e:
            seeds = ",".join(f"{host}:{port}" for host, port in endpoints)
            logger.error(f"Failed to connect to Redis Cluster via {seeds}: {e}")
            raise ConnectionAcquisitionError(
                f"Failed to connect to Redis Cluster via {seeds}: {e}"
            ) from e
        logger.info(f"Created Redis Cluster client with {len(endpoints)} startup node(s)")
        return DirectClient(client)
