import pytest

from geofigure.ast import UNNAMED, Point, PointRegistry, Segment, SegmentGraph
from geofigure.numbers import EPSILON


def test_point_equality_ignores_name():
    assert Point(1.0, 2.0, 'A') == Point(1.0, 2.0, 'B')
    assert hash(Point(1.0, 2.0, 'A')) == hash(Point(1.0, 2.0, 'B'))
    assert Point(1.0, 2.0) != Point(1.0, 2.5)


def test_point_defaults_to_unnamed_and_float_coordinates():
    point = Point(3, 4)

    assert point.name == UNNAMED
    assert isinstance(point.x, float)
    assert str(point) == '__UNNAMED(3.0, 4.0)'


def test_registry_deduplicates_points_within_epsilon():
    registry = PointRegistry()
    registry.insert(Point(0.0, 0.0, 'A'))
    registry.insert(Point(EPSILON / 100, 0.0, 'B'))

    assert len(registry) == 1
    assert registry.names() == ['A']


def test_registry_keeps_points_further_than_epsilon():
    registry = PointRegistry([Point(0.0, 0.0, 'A'), Point(1e-3, 0.0, 'B')])

    assert len(registry) == 2
    assert [p.name for p in registry] == ['A', 'B']


def test_registry_lookups():
    a = Point(0.0, 0.0, 'A')
    b = Point(1.0, 0.0, 'B')
    registry = PointRegistry([a, b])

    assert registry.lookup_by_name('B') is b
    assert registry.lookup_by_name('Z') is None
    assert registry.lookup_by_coords(1.0 + EPSILON / 100, 0.0) is b
    assert registry.lookup_by_coords(5.0, 5.0) is None
    assert registry.contains(Point(0.0, 0.0, 'other'))
    assert Point(2.0, 2.0) not in registry


def test_frozen_registry_rejects_insert():
    registry = PointRegistry([Point(0.0, 0.0, 'A')])
    registry.freeze()

    with pytest.raises(ValueError):
        registry.insert(Point(1.0, 1.0, 'B'))


def test_segment_equality_ignores_direction():
    a, b = Point(0.0, 0.0, 'A'), Point(1.0, 0.0, 'B')

    assert Segment(a, b) == Segment(b, a)
    assert hash(Segment(a, b)) == hash(Segment(b, a))
    assert Segment(a, b).other(a) == b


@pytest.fixture
def abc():
    return Point(0.0, 0.0, 'A'), Point(1.0, 0.0, 'B'), Point(0.0, 1.0, 'C')


def test_undirected_edge_is_counted_once_and_idempotent(abc):
    a, b, _ = abc
    graph = SegmentGraph()

    graph.add_undirected_edge(a, b)
    assert graph.edge_count() == 1

    graph.add_undirected_edge(a, b)
    graph.add_undirected_edge(b, a)
    assert graph.edge_count() == 1


def test_edges_are_symmetric(abc):
    a, b, c = abc
    graph = SegmentGraph()
    graph.add_adjacency_list(a, [b, c])

    assert graph.has_edge(a, b) and graph.has_edge(b, a)
    assert graph.has_edge(c, a)
    assert not graph.has_edge(b, c)
    assert graph.neighbors(a) == [b, c]
    assert len(graph) == 3


def test_all_directed_pairs_lists_both_directions(abc):
    a, b, _ = abc
    graph = SegmentGraph()
    graph.add_undirected_edge(a, b)

    assert list(graph.all_directed_pairs()) == [(a, b), (b, a)]


def test_unique_pairs_keep_one_direction_per_edge(abc):
    a, b, c = abc
    graph = SegmentGraph()
    graph.add_undirected_edge(a, b)
    graph.add_undirected_edge(b, c)
    graph.add_undirected_edge(c, a)

    pairs = list(graph.unique_undirected_pairs())

    assert len(pairs) == graph.edge_count() == 3
    assert {frozenset(pair) for pair in pairs} == {
        frozenset((a, b)),
        frozenset((b, c)),
        frozenset((c, a)),
    }


def test_unique_direction_follows_insertion_order(abc):
    a, b, _ = abc
    forward = SegmentGraph()
    forward.add_undirected_edge(a, b)
    backward = SegmentGraph()
    backward.add_undirected_edge(b, a)

    assert list(forward.unique_undirected_pairs()) == [(a, b)]
    assert list(backward.unique_undirected_pairs()) == [(b, a)]


def test_unique_adjacency_groups_by_source(abc):
    a, b, c = abc
    graph = SegmentGraph()
    graph.add_adjacency_list(a, [b, c])
    graph.add_undirected_edge(b, c)

    unique = graph.unique_adjacency()

    assert list(unique) == [a, b]
    assert list(unique[a]) == [b, c]
    assert list(unique[b]) == [c]
    assert set(graph.segments()) == {Segment(a, b), Segment(a, c), Segment(b, c)}


def test_frozen_graph_rejects_edges(abc):
    a, b, _ = abc
    graph = SegmentGraph()
    graph.freeze()

    with pytest.raises(ValueError):
        graph.add_undirected_edge(a, b)


def test_point_rejects_coordinates_off_the_grid():
    with pytest.raises(ValueError):
        Point(1e303, 0.0)
    with pytest.raises(ValueError):
        Point(0.0, float('inf'))
