import json

import pytest

from scenebrowser.core.list_builder import walk_scene
from scenebrowser.core.scene import SceneGraph
from scenebrowser.core.scene_io import load_scene, save_scene, scene_from_dict, scene_to_dict


def test_save_then_load_keeps_structure(tmp_path, abcd):
    graph, ids = abcd
    graph.set_active(ids["C"], False)
    path = tmp_path / "scene.json"

    save_scene(path, graph)
    loaded = load_scene(path)

    assert scene_to_dict(loaded) == scene_to_dict(graph)
    c = loaded.find_by_name("C")
    assert not loaded.is_active_self(c)
    b = loaded.find_by_name("B")
    assert [comp.fields for comp in loaded.components_of(b)] == [{"max": 100, "current": 40}, {"speed": 2.5}]
    # No temp files left behind.
    assert [p.name for p in tmp_path.iterdir()] == ["scene.json"]


def test_scene_from_dict_defaults():
    graph = scene_from_dict({"roots": [{"name": "Root", "children": [{"name": "Leaf"}]}]})
    root = graph.find_by_name("Root")
    leaf = graph.find_by_name("Leaf")
    assert graph.is_active_self(leaf)
    assert graph.parent_of(leaf) == root
    assert graph.components_of(leaf) == []


def test_malformed_json_raises_value_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{ not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_scene(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_scene(tmp_path / "missing.json")


@pytest.mark.parametrize("data", [
    [],
    {"roots": "A"},
    {"roots": [{"active": True}]},
    {"roots": [{"name": "A", "components": [{"fields": {}}]}]},
    {"roots": [{"name": "A", "children": 5}]},
    {"roots": [{"name": "A", "components": 5}]},
    {"roots": [{"name": "A", "components": [{"type": "Health", "fields": 5}]}]},
    {"nodes": "A"},
    {"nodes": [{"name": "A", "parent": 0}]},
    {"nodes": [{"name": "A"}, {"name": "B", "parent": True}]},
    {"nodes": [{"name": "A"}, {"name": "B", "parent": "0"}]},
])
def test_bad_records_raise_value_error(data):
    with pytest.raises(ValueError):
        scene_from_dict(data)


def test_nested_layout_keeps_sibling_order():
    graph = scene_from_dict({"roots": [
        {"name": "A", "children": [{"name": "B", "children": [{"name": "D"}]}, {"name": "C"}]},
        {"name": "E"},
    ]})
    assert [graph.name_of(n) for n in walk_scene(graph)] == ["A", "B", "D", "C", "E"]
    assert graph.parent_of(graph.find_by_name("D")) == graph.find_by_name("B")


def test_saved_file_layout(tmp_path, abcd):
    graph, _ = abcd
    path = tmp_path / "scene.json"
    save_scene(path, graph)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert [(r["name"], r["parent"]) for r in data["nodes"]] == [
        ("A", None), ("B", 0), ("D", 1), ("C", 0),
    ]
    assert data["nodes"][0]["components"] == [{"type": "Transform", "fields": {"position": [0, 1, 2]}}]


def test_deep_scene_round_trip(tmp_path):
    graph = SceneGraph()
    parent = None
    for i in range(3000):
        parent = graph.create_node(f"n{i}", parent_id=parent)
    path = tmp_path / "deep.json"

    save_scene(path, graph)
    loaded = load_scene(path)

    assert loaded.node_count() == 3000
    assert [loaded.name_of(n) for n in walk_scene(loaded)] == [f"n{i}" for i in range(3000)]
    assert len(loaded.get_ancestors(loaded.find_by_name("n2999"))) == 2999


def test_deep_nested_records_load_without_recursion():
    record = {"name": "leaf"}
    for i in range(3000):
        record = {"name": f"n{i}", "children": [record]}
    graph = scene_from_dict({"roots": [record]})
    assert graph.node_count() == 3001
