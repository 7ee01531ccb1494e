"""
Connection Pool Example

Runs commands from several threads against a pooled manager and prints
the pool accounting before and after, showing that every command borrows
a connection and returns it right after.
"""

import sys
import os
import logging
from concurrent.futures import ThreadPoolExecutor

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from utils import print_section, print_step, print_success, print_info, print_error

from redis_ops import ConnectionManager, PoolSettings, RedisOpsError

HOSTS = os.environ.get("REDIS_HOSTS", "127.0.0.1:6379")
WORKERS = 16
COMMANDS_PER_WORKER = 50


def worker(manager: ConnectionManager, worker_id: int) -> int:
    strings = manager.get_string_command_executor()
    key = f"example:pool:{worker_id}"
    for _ in range(COMMANDS_PER_WORKER):
        strings.incr(key)
    value = int(strings.get(key))
    manager.get_key_command_executor().delete(key)
    return value


def main():
    logging.basicConfig(level=logging.INFO)
    print_section("Redis Connection Pool Example")

    print_step(1, "Initialize Pooled Connection Manager")
    manager = ConnectionManager(
        pooling_enabled=True,
        pool_config=PoolSettings(max_total=4, max_idle=4, max_wait_ms=5000),
    )
    try:
        manager.init(HOSTS, "", {"database": -1, "connectionTimeoutMs": 2000})
    except RedisOpsError as e:
        print_error(f"Failed to initialize: {e}")
        return
    print_info("Pool", manager.get_pool_stats())

    print_step(2, f"Run {WORKERS} workers on at most 4 connections")
    try:
        with ThreadPoolExecutor(max_workers=WORKERS) as executor:
            results = list(executor.map(lambda i: worker(manager, i), range(WORKERS)))
        print_info("Counters", results)
        print_success("All workers finished")
    except RedisOpsError as e:
        print_error(f"Worker failed: {e}")

    print_step(3, "Inspect And Close Pool")
    print_info("Pool", manager.get_pool_stats())
    manager.close_connection_pool()
    print_success("Connection pool closed")


if __name__ == "__main__":
    main()
