import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from Services.errors import CommandError, FetchError
from Services.models import Node, NodeListing


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


# ----------------------------------------------------------------------
# Deterministic workers
# ----------------------------------------------------------------------
class ManualRunner:
    """Thread manager stand-in: workers are queued and run on demand, in any order"""

    def __init__(self):
        self.pending = []
        self.submitted = []

    def submit_worker(self, worker_id, worker):
        self.pending.append(worker)
        self.submitted.append(worker)
        return True

    def run(self, worker):
        self.pending.remove(worker)
        worker.run()

    def run_next(self):
        self.run(self.pending[0])

    def run_all(self):
        while self.pending:
            self.run_next()

    def dispose(self):
        self.pending.clear()


@pytest.fixture
def runner():
    return ManualRunner()


# ----------------------------------------------------------------------
# Deterministic timers
# ----------------------------------------------------------------------
class _FakeSignal:
    def __init__(self):
        self._slots = []

    def connect(self, slot):
        self._slots.append(slot)

    def emit(self):
        for slot in list(self._slots):
            slot()


class FakeTimer:
    """The subset of QTimer used by the application, driven by a FakeClock"""

    def __init__(self, clock):
        self.clock = clock
        self.timeout = _FakeSignal()
        self.single_shot = False
        self.deadline = None
        self.interval = 0

    def setSingleShot(self, single_shot):
        self.single_shot = single_shot

    def start(self, ms=None):
        if ms is not None:
            self.interval = ms
        self.deadline = self.clock.now + self.interval

    def stop(self):
        self.deadline = None

    def isActive(self):
        return self.deadline is not None


class FakeClock:
    def __init__(self):
        self.now = 0
        self.timers = []

    def timer_factory(self, _parent=None):
        timer = FakeTimer(self)
        self.timers.append(timer)
        return timer

    def advance(self, ms):
        target = self.now + ms
        while True:
            due = [t for t in self.timers if t.isActive() and t.deadline <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.deadline)
            self.now = timer.deadline
            if timer.single_shot:
                timer.stop()
            else:
                timer.start()
            timer.timeout.emit()
        self.now = target


@pytest.fixture
def clock():
    return FakeClock()


# ----------------------------------------------------------------------
# Admin API stand-in
# ----------------------------------------------------------------------
def make_pubkey(prefix):
    return (prefix * 66)[:66]


def make_node(pubkey, alias="node", username="user", role=1, status=0,
              listen_addr="10.0.0.5", listen_port=9735):
    return Node(pubkey=pubkey, alias=alias, username=username, role=role,
                listen_addr=listen_addr, listen_port=listen_port, status=status)


class FakeAdminClient:
    """In-memory admin API with the same interface as SenseiAdminClient"""

    def __init__(self, nodes=()):
        self.nodes = list(nodes)
        self.list_calls = []
        self.stop_calls = []
        self.start_calls = []
        self.fail_listing = None
        self.fail_command = None

    def list_nodes(self, page, search_term, take):
        self.list_calls.append((page, search_term, take))
        if self.fail_listing:
            raise FetchError(self.fail_listing)
        term = search_term.lower()
        matching = [n for n in self.nodes
                    if not term or term in n.alias.lower() or term in n.username.lower()]
        start = page * take
        window = matching[start:start + take]
        return NodeListing(nodes=tuple(window), has_more=start + take < len(matching), total=len(matching))

    def stop_node(self, pubkey):
        self.stop_calls.append(pubkey)
        if self.fail_command:
            raise CommandError("stop", pubkey, self.fail_command)
        self._set_status(pubkey, 0)

    def start_node(self, pubkey, passphrase):
        self.start_calls.append((pubkey, passphrase))
        if self.fail_command:
            raise CommandError("start", pubkey, self.fail_command)
        self._set_status(pubkey, 1)

    def _set_status(self, pubkey, status):
        self.nodes = [
            Node(n.pubkey, n.alias, n.username, n.role, n.listen_addr, n.listen_port, status)
            if n.pubkey == pubkey else n
            for n in self.nodes
        ]


@pytest.fixture
def two_nodes():
    return [
        make_node(make_pubkey("a"), alias="alpha", username="alice", role=0, status=0),
        make_node(make_pubkey("b"), alias="bravo", username="bob", role=1, status=1, listen_port=9736),
    ]


@pytest.fixture
def fake_client(two_nodes):
    return FakeAdminClient(two_nodes)
