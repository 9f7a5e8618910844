"""
Background workers for node lifecycle commands.
Each worker runs one admin API call on the thread pool and reports back
through its signals on the UI thread.
"""

from Utils.enhanced_worker import EnhancedBaseWorker


class StopNodeWorker(EnhancedBaseWorker):
    """Stops a node; finished(pubkey) on success, error(CommandError) on failure"""

    def __init__(self, client, pubkey: str):
        super().__init__(f"stop_node_{pubkey}")
        self.client = client
        self.pubkey = pubkey

    def execute(self):
        self.client.stop_node(self.pubkey)
        return self.pubkey


class StartNodeWorker(EnhancedBaseWorker):
    """Starts a node with its passphrase"""

    def __init__(self, client, pubkey: str, passphrase: str):
        super().__init__(f"start_node_{pubkey}")
        self.client = client
        self.pubkey = pubkey
        self._passphrase = passphrase

    def execute(self):
        self.client.start_node(self.pubkey, self._passphrase)
        return self.pubkey
