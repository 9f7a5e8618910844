"""
Error taxonomy for the admin console.
Errors are raised at the client boundary and surfaced by the smallest
enclosing component (list for fetches, row/dialog for commands).
"""

from typing import Optional


class AdminError(Exception):
    """Base class for all admin console errors"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self):
        return self.message


class FetchError(AdminError):
    """Listing nodes failed; the list shows a failure state and can be retried"""


class CommandError(AdminError):
    """A lifecycle command (start/stop) failed; must never invalidate the cache"""

    def __init__(self, command: str, pubkey: str, message: str, status_code: Optional[int] = None):
        super().__init__(message, status_code)
        self.command = command
        self.pubkey = pubkey


class ClipboardError(AdminError):
    """The system clipboard is not available"""
