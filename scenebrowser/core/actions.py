# core/actions.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from scenebrowser.core.constants import LABEL_DESTROY, LABEL_INSPECT, LABEL_TOGGLE_ACTIVE
from scenebrowser.core.decorators import requires_alive
from scenebrowser.core.info_list import TextInfoController
from scenebrowser.core.list_base import ActionData, DisplayItem
from scenebrowser.core.log import Log
from scenebrowser.core.scene import SceneGraphProvider
from scenebrowser.core.serialize import Serializer, describe_node, serialize_component
from scenebrowser.core.snapshot import NodeSnapshot

if TYPE_CHECKING:
    from scenebrowser.core.list_controller import ObjectListController

__all__ = ["ItemContext", "ActionBinder"]


@dataclass(frozen=True)
class ItemContext:
    """The row an action was invoked on and the controller that owns it."""
    snapshot: NodeSnapshot
    controller: "ObjectListController"


class ActionBinder:
    """
    Turns snapshots into host rows carrying Details / Delete / Toggle Active.

    Delete and Toggle Active change the live scene first and refresh the
    controller afterwards, so the rebuild sees the new state. Every action is
    a silent no-op once the row's node is gone.
    """

    def __init__(self, graph: SceneGraphProvider, serializer: Serializer = serialize_component):
        self.graph = graph
        self.serializer = serializer

    def bind(self, snapshot: NodeSnapshot, controller: "ObjectListController") -> DisplayItem:
        ctx = ItemContext(snapshot=snapshot, controller=controller)
        return DisplayItem(
            lambda: ctx.snapshot.text,
            actions=(
                ActionData(LABEL_INSPECT, partial(self.inspect, ctx)),
                ActionData(LABEL_DESTROY, partial(self.destroy, ctx)),
                ActionData(LABEL_TOGGLE_ACTIVE, partial(self.toggle_active, ctx)),
            ),
            is_left=True,
        )

    @requires_alive
    def inspect(self, ctx: ItemContext) -> None:
        info_text = describe_node(self.graph, ctx.snapshot.node_id, self.serializer)
        info = TextInfoController(info_text)
        info.create()
        Log.debug(f"Inspect '{ctx.snapshot.name}' ({info.count()} lines)", 1)
        ctx.controller.open_text_view(ctx.snapshot.name, info)

    @requires_alive
    def destroy(self, ctx: ItemContext) -> None:
        node_id = ctx.snapshot.node_id
        self.graph.destroy(node_id)
        ctx.snapshot.mark_destroyed()
        Log.debug(f"Destroyed '{ctx.snapshot.name}' (id={node_id})", 1)
        ctx.controller.refresh()

    @requires_alive
    def toggle_active(self, ctx: ItemContext) -> None:
        node_id = ctx.snapshot.node_id
        active = not self.graph.is_active_self(node_id)
        self.graph.set_active(node_id, active)
        Log.debug(f"Set '{ctx.snapshot.name}' active={active}", 1)
        ctx.controller.refresh()
