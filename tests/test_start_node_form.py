from unittest.mock import MagicMock

import pytest

from conftest import make_pubkey
from Pages.StartNodeForm import StartNodeForm


@pytest.fixture
def callbacks():
    return MagicMock(name="callback"), MagicMock(name="on_cancel")


@pytest.fixture
def form(fake_client, runner, callbacks):
    callback, on_cancel = callbacks
    return StartNodeForm(fake_client, runner, make_pubkey("a"), callback=callback, on_cancel=on_cancel)


def test_passphrase_is_required(form, runner):
    form.submit()

    assert runner.pending == []
    assert form.error_label.text() == "Passphrase is required"


def test_submit_starts_node_and_reports_success(form, runner, fake_client, callbacks):
    callback, _ = callbacks
    form.passphrase_input.setText("hunter2")

    form.submit()
    assert form.is_submitting
    assert not form.start_button.isEnabled()
    form.submit()
    assert len(runner.pending) == 1

    runner.run_all()

    assert fake_client.start_calls == [(make_pubkey("a"), "hunter2")]
    callback.assert_called_once_with()
    assert not form.is_submitting


def test_start_failure_shows_inline_error(form, runner, fake_client, callbacks):
    callback, _ = callbacks
    fake_client.fail_command = "wrong passphrase"
    form.passphrase_input.setText("nope")

    form.submit()
    runner.run_all()

    callback.assert_not_called()
    assert form.error_label.text() == "wrong passphrase"
    assert form.start_button.isEnabled()


def test_cancel_calls_on_cancel(form, callbacks):
    _, on_cancel = callbacks

    form.cancel_button.click()

    on_cancel.assert_called_once_with()


def test_start_failure_is_passed_to_on_failed(fake_client, runner, callbacks):
    callback, on_cancel = callbacks
    on_failed = MagicMock(name="on_failed")
    form = StartNodeForm(fake_client, runner, make_pubkey("a"),
                         callback=callback, on_cancel=on_cancel, on_failed=on_failed)
    fake_client.fail_command = "wrong passphrase"
    form.passphrase_input.setText("nope")

    form.submit()
    runner.run_all()

    assert str(on_failed.call_args.args[0]) == "wrong passphrase"
    callback.assert_not_called()
