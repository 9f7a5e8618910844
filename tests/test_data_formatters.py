import pytest

from conftest import make_node, make_pubkey
from Services.models import NodeStatus, Role
from Utils.data_formatters import (
    format_connection_info, format_items_count, transform_node, transform_results, truncate_middle
)


def test_truncate_middle_keeps_both_ends():
    pubkey = "02" + "c" * 60 + "beef"

    result = truncate_middle(pubkey, 10)

    assert result == pubkey[:10] + "..." + pubkey[-10:]
    assert len(result) == 23


def test_truncate_middle_short_strings_unchanged():
    assert truncate_middle("short", 10) == "short"
    assert truncate_middle("x" * 23, 10) == "x" * 23
    assert truncate_middle("", 10) == ""


def test_truncate_middle_is_idempotent():
    once = truncate_middle(make_pubkey("f"), 10)

    assert truncate_middle(once, 10) == once


def test_truncate_middle_rejects_negative_keep():
    with pytest.raises(ValueError):
        truncate_middle("abcdef", -1)


def test_format_connection_info_truncates_only_pubkey():
    pubkey = make_pubkey("a")

    assert format_connection_info(pubkey, "10.0.0.5", 9735) == f"{'a' * 10}...{'a' * 10}@10.0.0.5:9735"


def test_transform_node_decodes_role_and_status():
    sensei = transform_node(make_node(make_pubkey("a"), role=0, status=0))
    child = transform_node(make_node(make_pubkey("b"), role=1, status=1))
    odd = transform_node(make_node(make_pubkey("c"), role=7, status=3))

    assert (sensei.role, sensei.status) == (Role.SENSEI, NodeStatus.STOPPED)
    assert (child.role, child.status) == (Role.CHILD, NodeStatus.RUNNING)
    assert (odd.role, odd.status) == (Role.CHILD, NodeStatus.RUNNING)


def test_transform_node_builds_display_row():
    pubkey = make_pubkey("d")
    node = make_node(pubkey, alias="delta", username="dan", listen_addr="192.168.1.2", listen_port=10001)

    row = transform_node(node)

    assert row.pubkey == pubkey
    assert row.alias == "delta"
    assert row.username == "dan"
    assert row.connection_info == f"{truncate_middle(pubkey)}@192.168.1.2:10001"
    assert row.full_connection_string == f"{pubkey}@192.168.1.2:10001"
    assert row.actions == "Action"


def test_transform_is_pure():
    node = make_node(make_pubkey("e"))

    assert transform_node(node) == transform_node(node)


def test_transform_results_preserves_order(two_nodes):
    rows = transform_results(two_nodes)

    assert [row.alias for row in rows] == ["alpha", "bravo"]


def test_format_items_count():
    assert format_items_count(1) == "1 node"
    assert format_items_count(0) == "0 nodes"
    assert format_items_count(12, "item") == "12 items"
