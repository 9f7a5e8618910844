from unittest.mock import MagicMock

from Base_Components.modal_host import ModalHost


def test_show_and_hide():
    host = ModalHost()
    shown, hidden = MagicMock(), MagicMock()
    host.shown.connect(shown)
    host.hidden.connect(hidden)
    form = object()

    host.show_modal(form)
    assert host.is_showing
    assert host.component is form
    shown.assert_called_once_with(form)

    host.hide_modal()
    assert not host.is_showing
    hidden.assert_called_once()


def test_show_replaces_without_stacking():
    host = ModalHost()
    replaced = MagicMock()
    host.replaced.connect(replaced)
    first, second = object(), object()

    host.show_modal(first)
    host.show_modal(second)

    assert host.component is second
    replaced.assert_called_once_with(first)

    host.hide_modal()
    assert host.component is None


def test_hide_when_empty_is_noop():
    host = ModalHost()
    hidden = MagicMock()
    host.hidden.connect(hidden)

    host.hide_modal()

    hidden.assert_not_called()
