import json

from scenebrowser.core.constants import LABEL_DESTROY, LABEL_INSPECT, LABEL_TOGGLE_ACTIVE
from scenebrowser.core.list_builder import ListCreateData
from scenebrowser.core.list_controller import ObjectListController


def _names(controller):
    return [controller.item_at(i).text for i in range(controller.count())]


def _invoke(item, label):
    item.action(label).invoke()


class OpenedViews:
    def __init__(self):
        self.views = []

    def __call__(self, title, controller):
        self.views.append((title, controller))


def _controller(graph, data=None, open_view=None):
    controller = ObjectListController(graph, open_view=open_view)
    controller.create(data)
    return controller


def test_count_and_item_at(abcd):
    graph, _ = abcd
    controller = _controller(graph)
    assert controller.count() == 4
    assert _names(controller) == [
        "<color=white>0001  A</color>",
        "<color=white>0002    B</color>",
        "<color=white>0003      D</color>",
        "<color=white>0004    C</color>",
    ]


def test_out_of_range_item_is_none(abcd):
    graph, _ = abcd
    controller = _controller(graph)
    assert controller.item_at(-1) is None
    assert controller.item_at(controller.count()) is None

    empty = _controller(graph, ListCreateData(filter_text="nothing"))
    assert empty.count() == 0
    assert empty.item_at(0) is None


def test_actions_offered_in_order(abcd):
    graph, _ = abcd
    item = _controller(graph).item_at(0)
    assert [a.label for a in item.actions] == [LABEL_INSPECT, LABEL_DESTROY, LABEL_TOGGLE_ACTIVE]


def test_toggle_twice_restores_text(abcd):
    graph, ids = abcd
    controller = _controller(graph)
    before = controller.item_at(1).text

    _invoke(controller.item_at(1), LABEL_TOGGLE_ACTIVE)
    assert not graph.is_active_self(ids["B"])
    assert controller.item_at(1).text == "<color=silver>0002    B</color>"
    assert controller.item_at(2).text == "<color=silver>0003      D</color>"

    _invoke(controller.item_at(1), LABEL_TOGGLE_ACTIVE)
    assert controller.item_at(1).text == before
    assert graph.is_active_self(ids["B"])


def test_toggle_flips_only_own_flag(abcd):
    graph, ids = abcd
    controller = _controller(graph)
    _invoke(controller.item_at(2), LABEL_TOGGLE_ACTIVE)
    assert not graph.is_active_self(ids["D"])
    assert graph.is_active_self(ids["B"])
    assert graph.is_active_self(ids["A"])


def test_destroy_then_refresh_renumbers(abcd):
    graph, ids = abcd
    controller = _controller(graph)
    b_item = controller.item_at(1)

    _invoke(b_item, LABEL_DESTROY)

    assert not graph.exists(ids["B"])
    assert not graph.exists(ids["D"])
    assert _names(controller) == [
        "<color=white>0001  A</color>",
        "<color=white>0002    C</color>",
    ]
    # The stale item keeps its old numbering and shows as destroyed.
    assert b_item.text == "<color=red>0002    B</color>"


def test_destroy_is_terminal_and_silent(abcd):
    graph, _ = abcd
    controller = _controller(graph)
    b_item = controller.item_at(1)
    _invoke(b_item, LABEL_DESTROY)

    refreshes = []
    original_refresh = controller.refresh

    def counting_refresh():
        refreshes.append(1)
        original_refresh()

    controller.refresh = counting_refresh

    _invoke(b_item, LABEL_DESTROY)
    _invoke(b_item, LABEL_TOGGLE_ACTIVE)
    _invoke(b_item, LABEL_INSPECT)

    assert refreshes == []
    assert controller.count() == 2
    assert graph.node_count() == 2


def test_child_of_destroyed_node_is_inert(abcd):
    graph, _ = abcd
    controller = _controller(graph)
    d_item = controller.item_at(2)
    _invoke(controller.item_at(1), LABEL_DESTROY)

    assert d_item.text == "<color=red>0003      D</color>"
    _invoke(d_item, LABEL_TOGGLE_ACTIVE)
    _invoke(d_item, LABEL_DESTROY)
    assert graph.node_count() == 2


def test_mutation_happens_before_refresh(abcd):
    graph, ids = abcd
    controller = _controller(graph)
    seen = []
    original_refresh = controller.refresh

    def recording_refresh():
        seen.append((graph.exists(ids["C"]), graph.is_active_self(ids["A"]) if graph.exists(ids["A"]) else None))
        original_refresh()

    controller.refresh = recording_refresh

    _invoke(controller.item_at(0), LABEL_TOGGLE_ACTIVE)
    assert seen[-1] == (True, False)

    _invoke(controller.item_at(3), LABEL_DESTROY)
    assert seen[-1] == (False, False)


def test_refresh_reuses_filter_and_reverse(abcd):
    graph, ids = abcd
    data = ListCreateData(filter_text="  ", reverse=True)
    controller = _controller(graph, data)
    # Every row has the two-space gap after the line number.
    assert [controller.item_at(i).text for i in range(controller.count())][0].startswith("<color=white>0004")

    graph.create_node("E", parent_id=ids["C"])
    controller.refresh()
    assert controller.data is data
    assert controller.count() == 5
    assert controller.item_at(0).text == "<color=white>0005      E</color>"


def test_refresh_before_create_matches_everything(abcd):
    graph, _ = abcd
    controller = ObjectListController(graph)
    assert controller.count() == 0
    controller.refresh()
    assert controller.count() == 4


def test_refresh_replaces_items(abcd):
    graph, _ = abcd
    controller = _controller(graph)
    old = controller.item_at(0)
    controller.refresh()
    assert controller.item_at(0) is not old
    assert controller.item_at(0).text == old.text


def test_inspect_opens_serialized_components(abcd):
    graph, ids = abcd
    opened = OpenedViews()
    controller = _controller(graph, open_view=opened)

    _invoke(controller.item_at(1), LABEL_INSPECT)

    assert len(opened.views) == 1
    title, info = opened.views[0]
    assert title == "B"
    expected = json.dumps({"max": 100, "current": 40}, indent=2) + "\n" + json.dumps({"speed": 2.5}, indent=2)
    assert info.source_text == expected
    assert info.count() == len(expected.split("\n"))
    assert info.item_at(0).text == "{"
    # Inspect does not touch the graph or the list.
    assert graph.node_count() == 4
    assert controller.count() == 4


def test_inspect_node_without_components(abcd):
    graph, _ = abcd
    opened = OpenedViews()
    controller = _controller(graph, open_view=opened)
    _invoke(controller.item_at(3), LABEL_INSPECT)
    title, info = opened.views[0]
    assert title == "C"
    assert info.source_text == ""
    info.create()
    assert info.count() == 0


def test_inspect_without_host_view_is_silent(abcd):
    graph, _ = abcd
    controller = _controller(graph)
    _invoke(controller.item_at(0), LABEL_INSPECT)
    assert controller.count() == 4


def test_custom_serializer(abcd):
    graph, _ = abcd
    opened = OpenedViews()
    controller = ObjectListController(graph, serializer=lambda c: c.type_name, open_view=opened)
    controller.create()
    _invoke(controller.item_at(1), LABEL_INSPECT)
    assert opened.views[0][1].source_text == "Health\nPatrol"
