"""Connection-level commands."""

from typing import Any, Optional

from .base import CommandCategory, CommandExecutor


class ConnectionCommandExecutor(CommandExecutor):
    """PING, ECHO, AUTH and CLIENT name/id commands."""

    category = CommandCategory.CONNECTION

    def ping(self) -> bool:
        """Check that the server (every primary, in cluster mode) answers."""
        return self._execute("ping")

    def echo(self, message: Any) -> Any:
        return self._execute("echo", message)

    def auth(self, password: str, username: Optional[str] = None) -> bool:
        return self._execute("auth", password, username)

    def client_getname(self) -> Optional[str]:
        return self._execute("client_getname")

    def client_setname(self, name: str) -> bool:
        return self._execute("client_setname", name)

    def client_id(self) -> int:
        return self._execute("client_id")
