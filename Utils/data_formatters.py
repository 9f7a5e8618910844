"""
Data Formatters for the nodes inventory
Maps raw node records into display-ready rows. Everything here is pure.
"""

from typing import Iterable, List

from Services.models import DisplayRow, Node, NodeStatus, Role
from Utils.ui_config import PUBKEY_TRUNCATE_KEEP, TRUNCATE_MARKER


class NodeFormatters:
    """Pure formatters used to build DisplayRow objects"""

    @staticmethod
    def truncate_middle(text: str, keep: int = PUBKEY_TRUNCATE_KEEP, marker: str = TRUNCATE_MARKER) -> str:
        """Keep `keep` leading and trailing characters around `marker`

        Strings already short enough (including previously truncated ones)
        are returned unchanged, so the function is idempotent.
        """
        if keep < 0:
            raise ValueError("keep must not be negative")
        if not text or len(text) <= 2 * keep + len(marker):
            return text
        tail = text[-keep:] if keep else ""
        return f"{text[:keep]}{marker}{tail}"

    @staticmethod
    def format_connection_info(pubkey: str, host: str, port: int) -> str:
        """Short connection string for display (pubkey truncated)"""
        return f"{NodeFormatters.truncate_middle(pubkey)}@{host}:{port}"

    @staticmethod
    def transform_node(node: Node) -> DisplayRow:
        """Node -> DisplayRow; role and status codes are decoded here and nowhere else"""
        return DisplayRow(
            pubkey=node.pubkey,
            alias=node.alias,
            username=node.username,
            listen_addr=node.listen_addr,
            listen_port=node.listen_port,
            role=Role.from_code(node.role),
            status=NodeStatus.from_code(node.status),
            connection_info=NodeFormatters.format_connection_info(
                node.pubkey, node.listen_addr, node.listen_port
            ),
        )

    @staticmethod
    def format_items_count(total: int, noun: str = "node") -> str:
        return f"{total} {noun}" if total == 1 else f"{total} {noun}s"


_formatter_instance = NodeFormatters()


def truncate_middle(text: str, keep: int = PUBKEY_TRUNCATE_KEEP, marker: str = TRUNCATE_MARKER) -> str:
    """Truncate the middle of a string, idempotently"""
    return _formatter_instance.truncate_middle(text, keep, marker)


def format_connection_info(pubkey: str, host: str, port: int) -> str:
    """Format truncated pubkey@host:port"""
    return _formatter_instance.format_connection_info(pubkey, host, port)


def transform_node(node: Node) -> DisplayRow:
    """Build the display row for one node"""
    return _formatter_instance.transform_node(node)


def transform_results(nodes: Iterable[Node]) -> List[DisplayRow]:
    """Build display rows for a fetched page, in order"""
    return [transform_node(node) for node in nodes]


def format_items_count(total: int, noun: str = "node") -> str:
    return _formatter_instance.format_items_count(total, noun)
