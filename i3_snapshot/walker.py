"""
Tree Walker

Walks the i3 container tree depth-first and yields one Record per window,
tagged with the nearest enclosing output and workspace.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from .errors import InvalidTreeStateError
from .models import NodeKind, Record, classify

logger = logging.getLogger(__name__)


@dataclass
class TraversalState:
    """Output and workspace most recently seen during the walk."""
    output_name: str = ""
    workspace_name: str = ""
    workspace_id: Optional[int] = None

    def is_complete(self) -> bool:
        return bool(self.output_name) and bool(self.workspace_name) and self.workspace_id is not None


def _children(node):
    """Tiled children first, then floating ones."""
    yield from getattr(node, 'nodes', None) or []
    yield from getattr(node, 'floating_nodes', None) or []


def _visit(node, state: TraversalState) -> Iterator[Record]:
    kind = classify(node)

    if kind is NodeKind.OUTPUT:
        state.output_name = node.name or ""
    elif kind is NodeKind.WORKSPACE:
        state.workspace_name = node.name or ""
        state.workspace_id = node.id
    elif kind is NodeKind.WINDOW:
        title = node.name or ""
        if not state.is_complete():
            logger.debug(f"Window {node.id} ({title}) has no output/workspace ancestor: {state}")
            raise InvalidTreeStateError(node.id, title)

        yield Record(
            output_name=state.output_name,
            workspace_name=state.workspace_name,
            workspace_id=state.workspace_id,
            window_id=node.id,
            window_title=title,
        )

    # Dock areas only hold bars; internal outputs/workspaces hold the scratchpad
    if kind in (NodeKind.DOCKAREA, NodeKind.INTERNAL):
        return

    for child in _children(node):
        yield from _visit(child, state)


def walk(root, state: Optional[TraversalState] = None) -> Iterator[Record]:
    """
    Yield a Record for every window under root, in depth-first pre-order.

    The state is shared across the whole walk, so an output or workspace
    applies to every window visited after it until the next one replaces it.

    Args:
        root: Root container, usually from i3ipc Connection.get_tree()
        state: Traversal state to thread through (a fresh one by default)

    Yields:
        Record per window

    Raises:
        InvalidTreeStateError: A window appears before any output/workspace
    """
    if state is None:
        state = TraversalState()
    yield from _visit(root, state)
