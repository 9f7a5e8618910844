"""
UI Configuration - Centralized timing and display constants
"""

# Clipboard feedback
COPY_FEEDBACK_MS = 1000  # "Copied!" label is shown for this long after the latest click
COPIED_LABEL = "Copied!"

# Search
SEARCH_DEBOUNCE_MS = 300

# Listing
DEFAULT_ITEMS_PER_PAGE = 5
NODES_QUERY_KIND = "nodes"

# Connection info formatting
PUBKEY_TRUNCATE_KEEP = 10
TRUNCATE_MARKER = "..."
LOOPBACK_HOST = "127.0.0.1"

# Routes
OPEN_CHANNEL_ROUTE = "/admin/channels/open"
NODES_ROUTE = "/admin/nodes"

# Thread Management
MAX_CONCURRENT_WORKERS = 4
WORKER_TIMEOUT_SECONDS = 60
