'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import List, Optional

from scenebrowser.core.actions import ActionBinder
from scenebrowser.core.list_base import DisplayItem, ListControllerBase, OpenViewFn
from scenebrowser.core.list_builder import ListBuilder, ListCreateData
from scenebrowser.core.scene import SceneGraphProvider
from scenebrowser.core.serialize import Serializer, serialize_component

__all__ = ["ObjectListController"]


class ObjectListController(ListControllerBase):
    """
    The object browser list: every scene node as a numbered, indented row
    with Details / Delete / Toggle Active actions.

    Items handed out before a refresh() are stale afterwards; the host must
    re-fetch with item_at().
    """

    def __init__(
            self,
            graph: SceneGraphProvider,
            serializer: Serializer = serialize_component,
            open_view: Optional[OpenViewFn] = None,
    ):
        super().__init__(open_view)
        self.graph = graph
        self.builder = ListBuilder(graph)
        self.binder = ActionBinder(graph, serializer)
        self._items: List[DisplayItem] = []

    def _do_create(self, data: ListCreateData) -> None:
        snapshots = self.builder.build_from(data)
        self._items = [self.binder.bind(s, self) for s in snapshots]

    def _do_get(self, index: int) -> DisplayItem:
        return self._items[index]

    def count(self) -> int:
        return len(self._items)
