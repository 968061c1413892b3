'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import sys
import os
import random

from scenebrowser.core.scene import Component, SceneGraph
from scenebrowser.core.scene_io import load_scene, save_scene

NODE_NAMES = [
    "Main Camera", "Directional Light", "Player", "Enemy", "Canvas", "EventSystem",
    "Terrain", "Tree", "Rock", "Spawner", "Pickup", "Door", "Trigger", "AudioSource",
    "Particles", "Weapon", "HealthBar", "Minimap", "Checkpoint", "Waypoint",
]

COMPONENT_TYPES = ["Transform", "Rigidbody", "Collider", "Health", "Patrol", "Spin"]

def random_component():
    type_name = random.choice(COMPONENT_TYPES)
    if type_name == "Transform":
        fields = {"position": [round(random.uniform(-50, 50), 2) for _ in range(3)],
                  "scale": [1.0, 1.0, 1.0]}
    elif type_name == "Health":
        fields = {"max": 100, "current": random.randint(0, 100)}
    elif type_name == "Patrol":
        fields = {"speed": round(random.uniform(0.5, 5.0), 2), "loop": random.choice([True, False])}
    else:
        fields = {"enabled": random.random() > 0.1}
    return Component(type_name=type_name, fields=fields)

def add_random_nodes(graph, count):
    """Attach count new nodes under random existing parents (or as roots)."""
    ids = [rid for rid in graph.list_roots()]
    stack = list(ids)
    while stack:
        children = graph.children_of(stack.pop())
        ids.extend(children)
        stack.extend(children)

    for i in range(count):
        parent_id = random.choice(ids) if ids and random.random() > 0.1 else None
        name = f"{random.choice(NODE_NAMES)} ({i})"
        components = [random_component() for _ in range(random.randint(0, 3))]
        new_id = graph.create_node(name, parent_id=parent_id,
                                   active=random.random() > 0.15, components=components)
        ids.append(new_id)
        if (i + 1) % 100 == 0:
            print(f"Created {i+1} nodes...")

def main():
    if len(sys.argv) != 3:
        print(f"Usage: {sys.argv[0]} /path/to/scene.json N")
        print("Appends N random nodes to the scene, creating the file if needed.")
        sys.exit(1)

    scene_path = sys.argv[1]
    count = int(sys.argv[2])

    if os.path.exists(scene_path):
        graph = load_scene(scene_path)
        print(f"Loaded {graph.node_count()} existing nodes")
    else:
        graph = SceneGraph()
        print("No existing scene found; creating a new one")

    add_random_nodes(graph, count)
    save_scene(scene_path, graph)
    print(f"Done: {graph.node_count()} nodes written to {scene_path}")

if __name__ == '__main__':
    main()
