"""
Pytest configuration and fixtures for i3-snapshot tests.

Trees are built from Mock nodes carrying the same attributes as i3ipc Con
objects (type, name, id, window, app_id, nodes, floating_nodes).
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock, Mock

import pytest

# Make i3_snapshot importable without installing the package
package_root = Path(__file__).parent.parent
if str(package_root) not in sys.path:
    sys.path.insert(0, str(package_root))


def _make_node(node_type, name=None, node_id=0, window=None, app_id=None,
               nodes=None, floating_nodes=None):
    node = Mock()
    node.type = node_type
    node.name = name
    node.id = node_id
    node.window = window
    node.app_id = app_id
    node.nodes = list(nodes or [])
    node.floating_nodes = list(floating_nodes or [])
    return node


@pytest.fixture
def make_node():
    """Factory for fake i3 containers."""
    return _make_node


@pytest.fixture
def make_window():
    """Factory for X11 window containers."""
    def factory(node_id, title, window=None):
        return _make_node("con", name=title, node_id=node_id, window=window or 0x1400000 + node_id)
    return factory


@pytest.fixture
def simple_tree(make_window):
    """One output "eDP-1", workspace "1" (id 7), window 42 "term"."""
    window = make_window(42, "term")
    workspace = _make_node("workspace", name="1", node_id=7, nodes=[window])
    content = _make_node("con", name="content", node_id=3, nodes=[workspace])
    output = _make_node("output", name="eDP-1", node_id=2, nodes=[content])
    return _make_node("root", name="root", node_id=1, nodes=[output])


@pytest.fixture
def two_output_tree(make_window):
    """
    Two outputs, three workspaces, a bar window in a dock area.

    DP-1
      topdock -> bar (31)
      content
        workspace "1" (10) -> splith -> a (100), b (101)
        workspace "2" (20) -> c (200)
    HDMI-A-1
      content
        workspace "3" (30) -> d (300)
    """
    dock = _make_node("dockarea", name="topdock", node_id=5, nodes=[make_window(31, "bar")])
    split = _make_node("con", node_id=11, nodes=[make_window(100, "a"), make_window(101, "b")])
    ws1 = _make_node("workspace", name="1", node_id=10, nodes=[split])
    ws2 = _make_node("workspace", name="2", node_id=20, nodes=[make_window(200, "c")])
    dp1 = _make_node("output", name="DP-1", node_id=2, nodes=[
        dock,
        _make_node("con", name="content", node_id=6, nodes=[ws1, ws2]),
    ])

    ws3 = _make_node("workspace", name="3", node_id=30, nodes=[make_window(300, "d")])
    hdmi = _make_node("output", name="HDMI-A-1", node_id=3, nodes=[
        _make_node("con", name="content", node_id=7, nodes=[ws3]),
    ])

    return _make_node("root", name="root", node_id=1, nodes=[dp1, hdmi])


@pytest.fixture
def mock_connection():
    """Mock i3 connection that accepts every command."""
    conn = MagicMock()
    conn.send_command = MagicMock(return_value=True)
    conn.get_tree = MagicMock()
    return conn


def sent_commands(conn):
    return [c.args[0] for c in conn.send_command.call_args_list]


@pytest.fixture
def commands_of():
    """Return the commands sent through a mock connection, in order."""
    return sent_commands
