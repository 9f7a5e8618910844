import pytest

from Services.models import CommandResult, DisplayRow, Node, NodeStatus, PageResult, Role


def test_role_from_code():
    assert Role.from_code(0) is Role.SENSEI
    assert Role.from_code(1) is Role.CHILD
    assert Role.from_code(5) is Role.CHILD
    assert Role.SENSEI.label == "Sensei"


def test_status_from_code():
    assert NodeStatus.from_code(0) is NodeStatus.STOPPED
    assert NodeStatus.from_code(1) is NodeStatus.RUNNING
    assert NodeStatus.RUNNING.label == "Running"


def test_node_from_dict_camel_case():
    node = Node.from_dict({
        "pubkey": "abc", "alias": "a", "username": "u", "role": 0,
        "listenAddr": "127.0.0.1", "listenPort": 9735, "status": 1,
    })

    assert node.listen_addr == "127.0.0.1"
    assert node.listen_port == 9735
    assert node.status == 1


def test_node_from_dict_snake_case():
    node = Node.from_dict({"pubkey": "abc", "listen_addr": "host", "listen_port": "9000"})

    assert node.listen_addr == "host"
    assert node.listen_port == 9000
    assert node.alias == ""


def test_node_from_dict_requires_pubkey():
    with pytest.raises(KeyError):
        Node.from_dict({"alias": "nobody"})


def test_display_row_values_for_columns():
    row = DisplayRow(
        pubkey="pk", alias="al", username="us", listen_addr="h", listen_port=1,
        role=Role.CHILD, status=NodeStatus.STOPPED, connection_info="pk@h:1",
    )

    assert row.value_for("role") == "Child"
    assert row.value_for("status") == "Stopped"
    assert row.value_for("connectionInfo") == "pk@h:1"
    assert row.value_for("actions") == "Action"
    assert row.value_for("unknown") == ""


def test_page_result_empty():
    assert PageResult().is_empty
    assert not PageResult(results=("row",), total=1).is_empty


def test_command_result_constructors():
    assert CommandResult.ok() == CommandResult(success=True, error=None)
    assert CommandResult.failure("boom").error == "boom"
    assert not CommandResult.failure("boom").success
