# core/snapshot.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from scenebrowser.core.constants import (
    COLOR_ACTIVE,
    COLOR_DESTROYED,
    COLOR_INACTIVE,
    INDENT_UNIT,
    LINE_FORMAT,
    LINE_GAP,
)
from scenebrowser.core.scene import SceneGraphProvider

__all__ = [
    "AliveHandle",
    "DESTROYED",
    "NodeState",
    "NodeSnapshot",
    "STATE_COLORS",
]


@dataclass(slots=True, frozen=True)
class AliveHandle:
    """Reference to a live node by its arena id."""
    node_id: int


class _Destroyed:
    __slots__ = ()

    def __repr__(self) -> str:
        return "DESTROYED"

    def __bool__(self) -> bool:
        return False


DESTROYED = _Destroyed()

Handle = Union[AliveHandle, _Destroyed]


class NodeState(Enum):
    DESTROYED = "destroyed"
    ACTIVE = "active"
    INACTIVE = "inactive"


STATE_COLORS = {
    NodeState.DESTROYED: COLOR_DESTROYED,
    NodeState.ACTIVE: COLOR_ACTIVE,
    NodeState.INACTIVE: COLOR_INACTIVE,
}


class NodeSnapshot:
    """
    Point-in-time record of one scene node, created fresh on every list build.

    - index, name and depth are fixed at construction.
    - The handle is alive until the node is destroyed; after that it stays
      DESTROYED for good. A node that disappears from the graph by other
      means (e.g. an ancestor was destroyed) is observed as destroyed too.
    - text is recomputed on every read so state changes show without a rebuild.
    """

    __slots__ = ("index", "name", "depth", "_graph", "_handle")

    def __init__(self, index: int, graph: SceneGraphProvider, node_id: int):
        self.index = index
        self._graph = graph
        self._handle: Handle = AliveHandle(node_id)
        self.name = graph.name_of(node_id)
        self.depth = self._count_ancestors(graph, node_id)

    @staticmethod
    def _count_ancestors(graph: SceneGraphProvider, node_id: int) -> int:
        depth = 0
        parent_id = graph.parent_of(node_id)
        while parent_id is not None:
            depth += 1
            parent_id = graph.parent_of(parent_id)
        return depth

    @property
    def handle(self) -> Handle:
        if isinstance(self._handle, AliveHandle) and not self._graph.exists(self._handle.node_id):
            self._handle = DESTROYED
        return self._handle

    @property
    def node_id(self) -> Optional[int]:
        """Arena id of the live node, or None once destroyed."""
        handle = self.handle
        return handle.node_id if handle else None

    @property
    def is_destroyed(self) -> bool:
        return self.handle is DESTROYED

    def mark_destroyed(self) -> None:
        self._handle = DESTROYED

    @property
    def state(self) -> NodeState:
        node_id = self.node_id
        if node_id is None:
            return NodeState.DESTROYED
        if self._graph.is_active_self(node_id) and self._graph.is_active_in_hierarchy(node_id):
            return NodeState.ACTIVE
        return NodeState.INACTIVE

    @property
    def text(self) -> str:
        line = LINE_FORMAT.format(self.index + 1)
        indent = INDENT_UNIT * self.depth
        color = STATE_COLORS[self.state]
        return f"<color={color}>{line}{LINE_GAP}{indent}{self.name}</color>"

    def __repr__(self) -> str:
        return f"NodeSnapshot(index={self.index}, name={self.name!r}, depth={self.depth}, handle={self._handle!r})"
