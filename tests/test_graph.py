from graph import Edge, Graph, Node, NodeColor


def test_node_ids_are_never_reused():
    g = Graph()
    a, b, c = g.add_node(), g.add_node(), g.add_node()
    g.remove_node(c)
    d = g.add_node()
    assert [a.id, b.id, d.id] == [0, 1, 3]
    assert g.node_ids() == [0, 1, 3]


def test_duplicate_edge_returns_existing(triangle):
    a, b = triangle.get_node(0), triangle.get_node(1)
    again = triangle.add_edge(b, a, 99)
    assert again is triangle.edge_between(a, b)
    assert again.weight == 1
    assert triangle.edge_count() == 3


def test_remove_node_drops_incident_edges(triangle):
    triangle.remove_node(triangle.get_node(0))
    assert triangle.edge_count() == 1
    assert triangle.neighbours(triangle.get_node(1)) == [
        (triangle.get_node(2), triangle.edge_between(triangle.get_node(1), triangle.get_node(2)))
    ]


def test_neighbours_follow_edge_insertion_order(triangle):
    ids = [n.id for n, _ in triangle.neighbours(triangle.get_node(2))]
    assert ids == [1, 0]


def test_self_loop_is_listed_once():
    g = Graph()
    a = g.add_node()
    loop = g.add_edge(a, a)
    assert a.edges == [loop]
    assert loop.other_end(a) is a


def test_renderer_hears_every_change(spy):
    g = Graph(renderer=spy)
    a, b = g.add_node(), g.add_node()
    edge = g.add_edge(a, b)
    g.highlight(a, NodeColor.PATH)
    g.remove_node(a)
    assert spy.calls == [
        ("create", 0),
        ("create", 1),
        ("create", edge.id),
        ("highlight", 0, NodeColor.PATH),
        ("remove", edge.id),
        ("remove", 0),
    ]


def test_reset_traversal_state(triangle):
    for node in triangle.nodes.values():
        node.visited = True
        node.color = NodeColor.PATH
    triangle.reset_traversal_state()
    assert all(not n.visited and n.color == NodeColor.UNVISITED for n in triangle.nodes.values())
    assert triangle.edge_count() == 3


def test_clear(triangle):
    triangle.clear()
    assert triangle.node_count() == 0
    assert triangle.edge_count() == 0


def test_generate_random_shape():
    g = Graph.generate_random(seed=3)
    assert g.node_count() == 10
    for node in g.nodes.values():
        assert all(-100 <= v <= 100 for v in node.position)
    for edge in g.edges.values():
        assert 1 <= edge.weight <= 10
        assert edge.node1 is not edge.node2


def test_generate_grid_shape():
    g = Graph.generate_grid(grid_size=2, spacing=10, seed=0)
    assert g.node_count() == 9
    assert g.edge_count() == 12
    assert {n.y for n in g.nodes.values()} == {0.0}
    corner = g.get_node(0)
    assert (corner.x, corner.z) == (-10, -10)
    assert g.degree(g.get_node(4)) == 4


def test_to_dict(triangle):
    data = triangle.to_dict()
    assert data["nodes"][0] == {
        "id": 0, "x": 0, "y": 0, "z": 0, "visited": False, "color": "#ffffff",
    }
    assert data["edges"][0] == {"id": "0-1", "node1": 0, "node2": 1, "weight": 1}


def test_node_and_edge_basics():
    a, b = Node(0, 0, 0, 0), Node(1, 3, 4, 0)
    assert a.distance_to(b) == 5
    e = Edge(a, b, 2)
    assert e.connects(b, a)
    assert e.other_end(b) is a
    assert e.id == "0-1"
