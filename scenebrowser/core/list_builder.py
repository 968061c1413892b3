# core/list_builder.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

from scenebrowser.core.log import Log
from scenebrowser.core.scene import SceneGraphProvider
from scenebrowser.core.snapshot import NodeSnapshot

__all__ = ["ListCreateData", "ListBuilder", "walk_scene"]

TextPredicate = Callable[[str], bool]


@dataclass(frozen=True)
class ListCreateData:
    """
    Filter and ordering for one list build; handed back unchanged on refresh.

    • filter_text – substring the rendered row text must contain ("" keeps all)
    • reverse     – reverse the filtered rows
    • predicate   – replaces the substring test when given
    """
    filter_text: str = ""
    reverse: bool = False
    predicate: Optional[TextPredicate] = None

    def is_match(self, text: str) -> bool:
        if self.predicate is not None:
            return bool(self.predicate(text))
        return self.filter_text in text


def walk_scene(graph: SceneGraphProvider) -> Iterator[int]:
    """
    Yield every node id depth-first, pre-order: a node, then each child's
    whole subtree in sibling order, roots in provider order.
    """
    stack = list(reversed(graph.list_roots()))
    while stack:
        node_id = stack.pop()
        yield node_id
        stack.extend(reversed(graph.children_of(node_id)))


class ListBuilder:
    """Flattens a live scene into numbered, filtered snapshots."""

    def __init__(self, graph: SceneGraphProvider):
        self.graph = graph

    def snapshot_all(self) -> List[NodeSnapshot]:
        """One snapshot per reachable node, indexed in traversal order."""
        return [
            NodeSnapshot(index, self.graph, node_id)
            for index, node_id in enumerate(walk_scene(self.graph))
        ]

    def build(self, predicate: TextPredicate, reverse: bool = False) -> List[NodeSnapshot]:
        """
        Number every node first, then filter on rendered text, then reverse.
        Indices are never renumbered by filtering or reversing.
        """
        snapshots = self.snapshot_all()
        kept = [s for s in snapshots if predicate(s.text)]
        if reverse:
            kept.reverse()
        Log.debug(f"Built object list: {len(kept)} of {len(snapshots)} nodes (reverse={reverse})", 2)
        return kept

    def build_from(self, data: ListCreateData) -> List[NodeSnapshot]:
        return self.build(data.is_match, data.reverse)
