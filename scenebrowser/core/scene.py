'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence

__all__ = [
    "Component",
    "SceneNode",
    "SceneGraph",
    "SceneGraphProvider",
]


@dataclass
class Component:
    """A behaviour attached to a node; fields must be JSON-compatible."""
    type_name: str
    fields: Dict[str, Any] = field(default_factory=dict)


@dataclass
class SceneNode:
    """
    One node in the scene arena.

    • node_id    – arena id, never reused after destroy
    • parent_id  – None for roots
    • children   – child ids in sibling order
    """
    node_id: int
    name: str
    parent_id: Optional[int] = None
    active: bool = True
    children: List[int] = field(default_factory=list)
    components: List[Component] = field(default_factory=list)


class SceneGraphProvider(Protocol):
    """What the object browser needs from a live scene graph."""

    def list_roots(self) -> Sequence[int]: ...
    def children_of(self, node_id: int) -> Sequence[int]: ...
    def parent_of(self, node_id: int) -> Optional[int]: ...
    def name_of(self, node_id: int) -> str: ...
    def exists(self, node_id: int) -> bool: ...
    def is_active_self(self, node_id: int) -> bool: ...
    def is_active_in_hierarchy(self, node_id: int) -> bool: ...
    def set_active(self, node_id: int, active: bool) -> None: ...
    def destroy(self, node_id: int) -> None: ...
    def components_of(self, node_id: int) -> Sequence[Any]: ...


class SceneGraph:
    """
    In-memory scene hierarchy addressed by integer ids.

    Roots keep insertion order in `root_ids`; every other node is listed in its
    parent's `children`. Destroying a node removes its whole subtree.
    """

    def __init__(self):
        self._nodes: Dict[int, SceneNode] = {}
        self.root_ids: List[int] = []
        self._next_id = 1

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #

    def create_node(
            self,
            name: str,
            parent_id: Optional[int] = None,
            active: bool = True,
            components: Optional[List[Component]] = None,
            insert_index: Optional[int] = None,
    ) -> int:
        """
        Create a node under parent_id (or as a root) and return its id.
        insert_index places it among its siblings; None or out of range appends.
        """
        siblings = self.root_ids if parent_id is None else self._node(parent_id).children

        node_id = self._next_id
        self._next_id += 1
        self._nodes[node_id] = SceneNode(
            node_id=node_id,
            name=name,
            parent_id=parent_id,
            active=active,
            components=list(components or []),
        )

        if insert_index is None or insert_index < 0 or insert_index > len(siblings):
            siblings.append(node_id)
        else:
            siblings.insert(insert_index, node_id)
        return node_id

    def add_component(self, node_id: int, component: Component) -> None:
        self._node(node_id).components.append(component)

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def _node(self, node_id: int) -> SceneNode:
        node = self._nodes.get(node_id)
        if node is None:
            raise ValueError(f"scene node id={node_id} not found")
        return node

    def exists(self, node_id: int) -> bool:
        return node_id in self._nodes

    def node_count(self) -> int:
        return len(self._nodes)

    def list_roots(self) -> List[int]:
        return list(self.root_ids)

    def children_of(self, node_id: int) -> List[int]:
        return list(self._node(node_id).children)

    def parent_of(self, node_id: int) -> Optional[int]:
        return self._node(node_id).parent_id

    def name_of(self, node_id: int) -> str:
        return self._node(node_id).name

    def rename(self, node_id: int, name: str) -> None:
        self._node(node_id).name = name

    def components_of(self, node_id: int) -> List[Component]:
        return list(self._node(node_id).components)

    def get_ancestors(self, node_id: int) -> List[int]:
        """Ancestor ids from the parent up to the root (excluding node_id itself)."""
        ancestors = []
        parent_id = self._node(node_id).parent_id
        while parent_id is not None:
            ancestors.append(parent_id)
            parent_id = self._node(parent_id).parent_id
        return ancestors  # [parent, grandparent, ...]

    def find_by_name(self, name: str) -> Optional[int]:
        """First node with this name in depth-first order, or None."""
        stack = list(reversed(self.root_ids))
        while stack:
            node = self._nodes[stack.pop()]
            if node.name == name:
                return node.node_id
            stack.extend(reversed(node.children))
        return None

    # ------------------------------------------------------------------ #
    # Activation
    # ------------------------------------------------------------------ #

    def is_active_self(self, node_id: int) -> bool:
        return self._node(node_id).active

    def is_active_in_hierarchy(self, node_id: int) -> bool:
        """True only if the node and every ancestor are active."""
        if not self.is_active_self(node_id):
            return False
        return all(self._nodes[a].active for a in self.get_ancestors(node_id))

    def set_active(self, node_id: int, active: bool) -> None:
        self._node(node_id).active = bool(active)

    # ------------------------------------------------------------------ #
    # Structural changes
    # ------------------------------------------------------------------ #

    def _siblings_of(self, node: SceneNode) -> List[int]:
        if node.parent_id is None:
            return self.root_ids
        return self._nodes[node.parent_id].children

    def reparent(self, node_id: int, new_parent_id: Optional[int]) -> bool:
        """Move node_id (with its subtree) under new_parent_id; False if that would form a cycle."""
        node = self._node(node_id)
        if new_parent_id is not None:
            if new_parent_id == node_id or node_id in self.get_ancestors(new_parent_id):
                return False

        self._siblings_of(node).remove(node_id)
        node.parent_id = new_parent_id
        self._siblings_of(node).append(node_id)
        return True

    def destroy(self, node_id: int) -> None:
        """Remove node_id and all its descendants. Unknown ids are ignored."""
        node = self._nodes.get(node_id)
        if node is None:
            return

        siblings = self._siblings_of(node)
        if node_id in siblings:
            siblings.remove(node_id)

        to_delete = [node_id]
        while to_delete:
            doomed = self._nodes.pop(to_delete.pop(), None)
            if doomed is not None:
                to_delete.extend(doomed.children)
