"""
Data models for i3-snapshot

Node classification for the i3 container tree and the Record exchanged
on the snapshot line protocol.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class NodeKind(str, Enum):
    """Kinds of container the tree walker distinguishes"""
    OUTPUT = "output"
    WORKSPACE = "workspace"
    INTERNAL = "internal"
    DOCKAREA = "dockarea"
    WINDOW = "window"
    CONTAINER = "container"


# i3 keeps the scratchpad on the "__i3" output / "__i3_scratch" workspace
INTERNAL_PREFIX = "__"


def classify(node) -> NodeKind:
    """Classify an i3ipc container.

    A plain "con" only counts as a window when it wraps a real client: an
    X11 window handle on i3, or an app_id for native Wayland clients on sway.
    Outputs and workspaces named "__..." are i3's own (scratchpad) and are
    INTERNAL; i3 refuses to move windows into them.

    Args:
        node: i3ipc Con (or anything with the same attributes)

    Returns:
        NodeKind for the container
    """
    node_type = getattr(node, 'type', None)

    if node_type in ("output", "workspace"):
        if (getattr(node, 'name', None) or "").startswith(INTERNAL_PREFIX):
            return NodeKind.INTERNAL
        return NodeKind.OUTPUT if node_type == "output" else NodeKind.WORKSPACE
    if node_type == "dockarea":
        return NodeKind.DOCKAREA
    if node_type == "con":
        if getattr(node, 'window', None) or getattr(node, 'app_id', None):
            return NodeKind.WINDOW
    return NodeKind.CONTAINER


class Record(BaseModel):
    """Placement of one window: which output and workspace it lives on"""
    model_config = ConfigDict(frozen=True)

    output_name: str
    workspace_name: str
    workspace_id: int = Field(..., ge=0)
    window_id: int = Field(..., ge=0)
    window_title: str = ""
