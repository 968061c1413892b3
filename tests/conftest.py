import pytest

from scenebrowser.core.log import Log
from scenebrowser.core.scene import Component, SceneGraph


@pytest.fixture(autouse=True)
def _quiet_log():
    """Reset the shared log and verbosity around each test."""
    Log.set_verbosity(0)
    Log.clear()
    yield
    Log.set_verbosity(0)


@pytest.fixture
def abcd():
    """Roots [A]; A -> [B, C]; B -> [D]. Returns (graph, {name: id})."""
    graph = SceneGraph()
    a = graph.create_node("A", components=[Component("Transform", {"position": [0, 1, 2]})])
    b = graph.create_node("B", parent_id=a, components=[
        Component("Health", {"max": 100, "current": 40}),
        Component("Patrol", {"speed": 2.5}),
    ])
    c = graph.create_node("C", parent_id=a)
    d = graph.create_node("D", parent_id=b)
    return graph, {"A": a, "B": b, "C": c, "D": d}


@pytest.fixture
def forest():
    """Two root trees: R1 -> [X -> [Y]], R2 -> [Z]."""
    graph = SceneGraph()
    r1 = graph.create_node("R1")
    x = graph.create_node("X", parent_id=r1)
    y = graph.create_node("Y", parent_id=x)
    r2 = graph.create_node("R2")
    z = graph.create_node("Z", parent_id=r2)
    return graph, {"R1": r1, "X": x, "Y": y, "R2": r2, "Z": z}
