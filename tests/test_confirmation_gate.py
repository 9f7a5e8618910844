from unittest.mock import MagicMock

from Base_Components.confirmation_gate import ConfirmationGate, ConfirmationRequest, GateState
from Services.models import CommandResult


class DeferredCallback:
    """Callback that keeps its completion function so a test decides when it finishes"""

    def __init__(self):
        self.calls = 0
        self.done = None

    def __call__(self, done):
        self.calls += 1
        self.done = done


def make_request(callback, title="Stop?"):
    return ConfirmationRequest(title=title, description="desc", cta_text="Yes", callback=callback)


def test_show_opens_gate():
    gate = ConfirmationGate()
    opened = MagicMock()
    gate.opened.connect(opened)
    request = make_request(DeferredCallback())

    gate.show_confirm(request)

    assert gate.state is GateState.OPEN
    assert gate.request is request
    opened.assert_called_once_with(request)


def test_dismiss_never_invokes_callback():
    gate = ConfirmationGate()
    callback = DeferredCallback()
    gate.show_confirm(make_request(callback))

    gate.dismiss()

    assert callback.calls == 0
    assert gate.state is GateState.CLOSED
    assert gate.request is None


def test_accept_invokes_callback_once_and_closes_on_success():
    gate = ConfirmationGate()
    callback = DeferredCallback()
    closed = MagicMock()
    gate.closed.connect(closed)
    gate.show_confirm(make_request(callback))

    gate.accept()
    gate.accept()

    assert callback.calls == 1
    assert gate.state is GateState.PENDING

    callback.done(CommandResult.ok())

    assert gate.state is GateState.CLOSED
    closed.assert_called_once()


def test_failure_returns_to_open_with_error():
    gate = ConfirmationGate()
    callback = DeferredCallback()
    failed = MagicMock()
    gate.failed.connect(failed)
    request = make_request(callback)
    gate.show_confirm(request)

    gate.accept()
    callback.done(CommandResult.failure("node busy"))

    assert gate.state is GateState.OPEN
    assert gate.error == "node busy"
    failed.assert_called_once_with(request, "node busy")

    gate.accept()
    assert callback.calls == 2


def test_callback_raising_is_a_failure():
    gate = ConfirmationGate()
    gate.show_confirm(make_request(MagicMock(side_effect=RuntimeError("boom"))))

    gate.accept()

    assert gate.state is GateState.OPEN
    assert gate.error == "boom"


def test_pending_changed_signals():
    gate = ConfirmationGate()
    callback = DeferredCallback()
    pending = []
    gate.pending_changed.connect(pending.append)
    gate.show_confirm(make_request(callback))

    gate.accept()
    callback.done(CommandResult.ok())

    assert pending == [True, False]


def test_last_request_wins():
    gate = ConfirmationGate()
    first = DeferredCallback()
    second = DeferredCallback()
    gate.show_confirm(make_request(first, "first"))
    second_request = make_request(second, "second")

    gate.show_confirm(second_request)
    gate.accept()

    assert gate.request is second_request
    assert first.calls == 0
    assert second.calls == 1


def test_late_completion_of_discarded_request_is_ignored():
    gate = ConfirmationGate()
    first = DeferredCallback()
    gate.show_confirm(make_request(first, "first"))
    gate.accept()
    second_request = make_request(DeferredCallback(), "second")
    gate.show_confirm(second_request)

    first.done(CommandResult.ok())

    assert gate.state is GateState.OPEN
    assert gate.request is second_request


def test_dismiss_while_pending_ignores_late_completion():
    gate = ConfirmationGate()
    callback = DeferredCallback()
    gate.show_confirm(make_request(callback))
    gate.accept()

    gate.dismiss()
    callback.done(CommandResult.failure("late"))

    assert gate.state is GateState.CLOSED
    assert gate.error is None


def test_accept_when_closed_is_ignored():
    gate = ConfirmationGate()

    gate.accept()

    assert gate.state is GateState.CLOSED
