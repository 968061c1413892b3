'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import json
from typing import Any, Callable

from scenebrowser.core.scene import Component, SceneGraphProvider

__all__ = ["serialize_component", "describe_node"]

Serializer = Callable[[Any], str]


def serialize_component(component: Any) -> str:
    """Pretty-printed JSON of a component's fields."""
    if isinstance(component, Component):
        fields = component.fields
    elif isinstance(component, dict):
        fields = component
    else:
        fields = {k: v for k, v in vars(component).items() if not k.startswith("_")}
    return json.dumps(fields, indent=2, default=str)


def describe_node(graph: SceneGraphProvider, node_id: int,
                  serializer: Serializer = serialize_component) -> str:
    """Every attached component of node_id, serialized in attachment order, one per block."""
    return "\n".join(serializer(c) for c in graph.components_of(node_id))
