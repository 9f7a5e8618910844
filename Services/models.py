"""
Data model for the nodes inventory.
Raw role/status codes coming from the admin API are kept on Node as-is and
decoded exactly once into Role / NodeStatus when a DisplayRow is built.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class Role(Enum):
    """Closed set of node roles"""
    SENSEI = "Sensei"
    CHILD = "Child"

    @classmethod
    def from_code(cls, code: int) -> "Role":
        return cls.SENSEI if code == 0 else cls.CHILD

    @property
    def label(self) -> str:
        return self.value


class NodeStatus(Enum):
    """Closed set of node run states"""
    STOPPED = "Stopped"
    RUNNING = "Running"

    @classmethod
    def from_code(cls, code: int) -> "NodeStatus":
        return cls.STOPPED if code == 0 else cls.RUNNING

    @property
    def label(self) -> str:
        return self.value


def _pick(raw: Dict[str, Any], camel: str, snake: str, default=None):
    if camel in raw:
        return raw[camel]
    return raw.get(snake, default)


@dataclass(frozen=True)
class Node:
    """A managed node as returned by the admin API"""
    pubkey: str
    alias: str
    username: str
    role: int
    listen_addr: str
    listen_port: int
    status: int

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Node":
        """Build a Node from an API record (camelCase or snake_case keys)"""
        return cls(
            pubkey=str(raw["pubkey"]),
            alias=str(raw.get("alias") or ""),
            username=str(raw.get("username") or ""),
            role=int(raw.get("role", 1)),
            listen_addr=str(_pick(raw, "listenAddr", "listen_addr", "")),
            listen_port=int(_pick(raw, "listenPort", "listen_port", 0)),
            status=int(raw.get("status", 0)),
        )


@dataclass(frozen=True)
class DisplayRow:
    """Display-ready projection of a Node, rebuilt on every fetch"""
    pubkey: str
    alias: str
    username: str
    listen_addr: str
    listen_port: int
    role: Role
    status: NodeStatus
    connection_info: str
    actions: str = "Action"

    @property
    def full_connection_string(self) -> str:
        return f"{self.pubkey}@{self.listen_addr}:{self.listen_port}"

    def value_for(self, key: str) -> Any:
        """Return the display value for a table column key"""
        values = {
            "pubkey": self.pubkey,
            "alias": self.alias,
            "username": self.username,
            "role": self.role.label,
            "status": self.status.label,
            "connectionInfo": self.connection_info,
            "actions": self.actions,
        }
        return values.get(key, "")


@dataclass(frozen=True)
class PageResult:
    """One page of results plus pagination metadata"""
    results: Tuple[Any, ...] = ()
    has_more: bool = False
    total: int = 0

    @property
    def is_empty(self) -> bool:
        return len(self.results) == 0


@dataclass(frozen=True)
class NodeListing:
    """Raw response of the list-nodes query"""
    nodes: Tuple[Node, ...]
    has_more: bool
    total: int


@dataclass(frozen=True)
class CommandResult:
    """Outcome of an asynchronous command, handed to a completion callback"""
    success: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "CommandResult":
        return cls(success=True)

    @classmethod
    def failure(cls, error: str) -> "CommandResult":
        return cls(success=False, error=error)
