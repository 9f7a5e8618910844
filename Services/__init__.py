"""
Sensei Admin Services Package
Admin API client, node data model and background command workers.
"""

from .errors import AdminError, FetchError, CommandError, ClipboardError
from .models import Role, NodeStatus, Node, DisplayRow, PageResult, NodeListing, CommandResult
from .sensei_admin_client import SenseiAdminClient
from .node_workers import StartNodeWorker, StopNodeWorker

__all__ = [
    # Client
    'SenseiAdminClient',

    # Data model
    'Role',
    'NodeStatus',
    'Node',
    'DisplayRow',
    'PageResult',
    'NodeListing',
    'CommandResult',

    # Workers
    'StartNodeWorker',
    'StopNodeWorker',

    # Errors
    'AdminError',
    'FetchError',
    'CommandError',
    'ClipboardError',
]
