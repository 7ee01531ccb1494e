"""
Basic Connection Example

Demonstrates how to connect to a standalone Redis server, run a few
commands through the per-category executors, and close the connection.

Configuration is read from REDIS_* environment variables (for example
REDIS_HOSTS=127.0.0.1:6379) or from a YAML file passed as first argument.
"""

import sys
import os
import logging

# Add parent directory to path for the example helpers
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from utils import print_section, print_step, print_success, print_info, print_error

from redis_ops import ConnectionManager, RedisOpsError, load_settings


def main():
    """Main function to demonstrate a basic connection."""
    logging.basicConfig(level=logging.INFO)
    print_section("Redis Basic Connection Example")

    # Step 1: Initialize Connection Manager
    print_step(1, "Initialize Connection Manager")
    try:
        settings = load_settings(sys.argv[1] if len(sys.argv) > 1 else None)
        print_info("Hosts", settings.connection.hosts)
        print_info("Cluster", settings.connection.cluster)
        print_info("Pooling", settings.connection.pooling)

        manager = ConnectionManager.from_settings(settings)
        print_success("Connection Manager initialized")
    except RedisOpsError as e:
        print_error(f"Failed to initialize: {e}")
        return

    with manager:
        # Step 2: Check Server Status
        print_step(2, "Check Redis Server Status")
        try:
            manager.get_connection_command_executor().ping()
            print_success("Redis server is available and responsive")
        except RedisOpsError as e:
            print_error(f"Status check failed: {e}")
            return

        # Step 3: Run Commands
        print_step(3, "Execute String And Hash Commands")
        try:
            strings = manager.get_string_command_executor()
            strings.set("example:greeting", "hello", ex=60)
            print_info("example:greeting", strings.get("example:greeting"))

            hashes = manager.get_hash_command_executor()
            hashes.hset("example:user:1", mapping={"name": "ada", "role": "admin"})
            print_info("example:user:1", hashes.hgetall("example:user:1"))

            manager.get_key_command_executor().delete("example:greeting", "example:user:1")
            print_success("Commands completed successfully")
        except RedisOpsError as e:
            print_error(f"Command failed: {e}")

    # Step 4: Close Connection
    print_step(4, "Close Connection")
    print_success("Connection closed when leaving the manager context")

    print_section("Example Completed")
    print("\nKey Takeaways:")
    print("  - ConnectionManager.init may succeed only once")
    print("  - Executors are created lazily and cached per category")
    print("  - Always close the manager (or use it as a context manager)")


if __name__ == "__main__":
    main()
