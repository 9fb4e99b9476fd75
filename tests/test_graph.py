from metro_router.graph.store import GraphStore

from .helpers import BOTANICAL, NOIDA, RAJIV, YAMUNA, build_store


def test_add_vertex_is_idempotent_and_keeps_edges():
    store = build_store([("A", "B", 3)])

    store.add_vertex("A")

    assert store.num_vertex() == 2
    assert store.contains_edge("A", "B")
    assert store.weight("A", "B") == 3


def test_add_edge_is_symmetric():
    store = build_store([("A", "B", 4)])

    assert store.contains_edge("A", "B")
    assert store.contains_edge("B", "A")
    assert store.weight("B", "A") == 4
    assert store.num_edges() == 1


def test_add_edge_ignores_duplicates_missing_endpoints_and_self_loops():
    store = build_store([("A", "B", 4)])

    store.add_edge("A", "B", 99)
    store.add_edge("B", "A", 99)
    store.add_edge("A", "Z", 1)
    store.add_edge("A", "A", 0)

    assert store.weight("A", "B") == 4
    assert not store.contains_vertex("Z")
    assert not store.contains_edge("A", "A")
    assert store.num_edges() == 1


def test_remove_edge_deletes_both_directions():
    store = build_store([("A", "B", 1), ("B", "C", 1)])

    store.remove_edge("B", "A")

    assert not store.contains_edge("A", "B")
    assert not store.contains_edge("B", "A")
    assert store.num_edges() == 1
    # Missing edge and missing endpoint are no-ops.
    store.remove_edge("A", "C")
    store.remove_edge("A", "Z")
    assert store.num_edges() == 1


def test_remove_vertex_drops_every_reference(metro):
    edges_before = metro.num_edges()
    degree = len(metro.neighbors(RAJIV))

    metro.remove_vertex(RAJIV)

    assert not metro.contains_vertex(RAJIV)
    assert metro.station(RAJIV) is None
    assert metro.num_edges() == edges_before - degree
    for name in metro.vertices():
        assert RAJIV not in dict(metro.neighbors(name))


def test_remove_unknown_vertex_is_noop():
    store = build_store([("A", "B", 1)])
    store.remove_vertex("Z")
    assert store.num_vertex() == 2
    assert store.num_edges() == 1


def test_contains_edge_with_unknown_vertex():
    store = build_store([("A", "B", 1)])
    assert not store.contains_edge("A", "Z")
    assert not store.contains_edge("Z", "A")


def test_reference_network_counts(metro):
    assert metro.num_vertex() == 20
    assert metro.num_edges() == 19
    assert len(metro) == 20
    assert NOIDA in metro
    assert metro.vertices()[:2] == [NOIDA, BOTANICAL]


def test_stations_are_parsed_once_on_insert(metro):
    station = metro.station(RAJIV)
    assert station.label == "Rajiv Chowk"
    assert station.line_code == "BY"
    assert station.lines == ("B", "Y")
    assert station.is_interchange_candidate


def test_has_path_direct_and_indirect(metro):
    assert metro.has_path(NOIDA, BOTANICAL)
    assert metro.has_path(NOIDA, "IGI Airport~O")
    assert metro.has_path(YAMUNA, YAMUNA)


def test_has_path_disconnected_and_unknown():
    store = build_store([("A", "B", 1), ("C", "D", 1)], vertices=["E"])

    assert not store.has_path("A", "C")
    assert not store.has_path("A", "Z")
    assert not store.has_path("Z", "A")
    assert store.has_path("E", "E")


def test_has_path_accumulates_caller_visited_set():
    store = build_store([("A", "B", 1), ("B", "C", 1), ("X", "Y", 1)])
    visited = set()

    assert not store.has_path("A", "X", visited)

    assert visited == {"A", "B", "C"}


def test_has_path_expands_start_already_in_visited_set():
    store = build_store([("A", "B", 1), ("B", "C", 1), ("C", "D", 1)])

    assert store.has_path("A", "C", {"A"}) is True
    assert store.has_path("A", "D", {"A"}) is True
    assert store.has_path("A", "D", {"C"}) is False


def test_has_path_handles_long_chains():
    store = GraphStore()
    names = [f"S{i}" for i in range(5000)]
    for name in names:
        store.add_vertex(name)
    for u, v in zip(names, names[1:]):
        store.add_edge(u, v, 1)

    assert store.has_path(names[0], names[-1])


def test_describe_lists_each_station_and_weight():
    store = build_store([("A~X", "B~X", 7)])
    text = store.describe()

    assert "A~X =>" in text
    assert "B~X =>" in text
    assert "7" in text
