from unittest.mock import MagicMock

import pytest

from Utils.debounced_updater import DebouncedUpdater


@pytest.fixture
def updater(clock):
    return DebouncedUpdater(300, timer_factory=clock.timer_factory)


def test_runs_once_after_quiet_period(updater, clock):
    callback = MagicMock()

    updater.schedule_update("search", callback, None, "a")
    clock.advance(200)
    updater.schedule_update("search", callback, None, "ab")
    clock.advance(299)
    callback.assert_not_called()

    clock.advance(1)
    callback.assert_called_once_with("ab")
    assert not updater.has_pending("search")


def test_cancel_drops_update(updater, clock):
    callback = MagicMock()
    updater.schedule_update("search", callback)

    updater.cancel_update("search")
    clock.advance(1000)

    callback.assert_not_called()


def test_flush_runs_immediately(updater, clock):
    callback = MagicMock()
    updater.schedule_update("search", callback)

    updater.flush_update("search")
    clock.advance(1000)

    callback.assert_called_once_with()


def test_failing_callback_is_logged_not_raised(updater, clock):
    updater.schedule_update("search", MagicMock(side_effect=RuntimeError("boom")))

    clock.advance(300)

    assert not updater.has_pending("search")
