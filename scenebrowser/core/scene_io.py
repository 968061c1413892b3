'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from scenebrowser.core.list_builder import walk_scene
from scenebrowser.core.log import Log
from scenebrowser.core.scene import Component, SceneGraph
from scenebrowser.utils.fs_atomic import atomic_write_json

__all__ = ["load_scene", "save_scene", "scene_from_dict", "scene_to_dict"]

Pathish = Union[str, Path]


def _read_json(p: Path) -> Any:
    try:
        return json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Malformed JSON in {p}: {e}") from e

# ---------- record validation ----------

def _list_field(record: Dict[str, Any], key: str) -> List[Any]:
    value = record.get(key, [])
    if not isinstance(value, list):
        raise ValueError(f"Scene node '{key}' must be a list: {record!r}")
    return value


def _components_of(record: Dict[str, Any]) -> List[Component]:
    components = []
    for item in _list_field(record, "components"):
        if not isinstance(item, dict) or not isinstance(item.get("type"), str):
            raise ValueError(f"Component record needs a string 'type': {item!r}")
        fields = item.get("fields", {})
        if not isinstance(fields, dict):
            raise ValueError(f"Component 'fields' must be an object: {item!r}")
        components.append(Component(type_name=item["type"], fields=dict(fields)))
    return components


def _create_from_record(graph: SceneGraph, record: Any, parent_id: Optional[int]) -> int:
    if not isinstance(record, dict) or not isinstance(record.get("name"), str):
        raise ValueError(f"Scene node record needs a string 'name': {record!r}")
    return graph.create_node(
        record["name"],
        parent_id=parent_id,
        active=bool(record.get("active", True)),
        components=_components_of(record),
    )

# ---------- dict -> graph ----------

def _load_nested(graph: SceneGraph, roots: List[Any]) -> None:
    """{'roots': [{..., 'children': [...]}]}, walked with an explicit stack."""
    stack = [(record, None) for record in reversed(roots)]
    while stack:
        record, parent_id = stack.pop()
        node_id = _create_from_record(graph, record, parent_id)
        children = _list_field(record, "children")
        stack.extend((child, node_id) for child in reversed(children))


def _load_flat(graph: SceneGraph, nodes: List[Any]) -> None:
    """{'nodes': [{..., 'parent': index or null}]}; a parent always precedes its children."""
    ids: List[int] = []
    for index, record in enumerate(nodes):
        parent = record.get("parent") if isinstance(record, dict) else None
        if parent is None:
            parent_id = None
        elif isinstance(parent, int) and not isinstance(parent, bool) and 0 <= parent < index:
            parent_id = ids[parent]
        else:
            raise ValueError(f"Scene node 'parent' must index an earlier node: {record!r}")
        ids.append(_create_from_record(graph, record, parent_id))


def scene_from_dict(data: Any) -> SceneGraph:
    """Build a SceneGraph from either the flat {'nodes': [...]} or nested {'roots': [...]} layout."""
    if not isinstance(data, dict):
        raise ValueError("Scene data must be an object")

    graph = SceneGraph()
    if "nodes" in data:
        if not isinstance(data["nodes"], list):
            raise ValueError("Scene 'nodes' must be a list")
        _load_flat(graph, data["nodes"])
    else:
        roots = data.get("roots", [])
        if not isinstance(roots, list):
            raise ValueError("Scene data needs a 'roots' list")
        _load_nested(graph, roots)
    return graph

# ---------- graph -> dict ----------

def scene_to_dict(graph: SceneGraph) -> Dict[str, List[Dict[str, Any]]]:
    """Flat layout in depth-first order, each node naming its parent's position."""
    position: Dict[int, int] = {}
    nodes = []
    for node_id in walk_scene(graph):
        parent_id = graph.parent_of(node_id)
        position[node_id] = len(nodes)
        nodes.append({
            "name": graph.name_of(node_id),
            "active": graph.is_active_self(node_id),
            "parent": None if parent_id is None else position[parent_id],
            "components": [
                {"type": c.type_name, "fields": c.fields} for c in graph.components_of(node_id)
            ],
        })
    return {"nodes": nodes}

# ---------- files ----------

def load_scene(path: Pathish) -> SceneGraph:
    p = Path(path).expanduser()
    graph = scene_from_dict(_read_json(p))
    Log.debug(f"Loaded scene {p} ({graph.node_count()} nodes)", 1)
    return graph


def save_scene(path: Pathish, graph: SceneGraph) -> None:
    p = Path(path).expanduser()
    atomic_write_json(p, scene_to_dict(graph))
    Log.debug(f"Saved scene {p} ({graph.node_count()} nodes)", 1)
