"""Tests for Dijkstra's shortest path on Graph."""

import pytest

from pathgraph.domain.errors import InvalidVertexError, NoPathError
from pathgraph.domain.models import Direction, Weighting
from pathgraph.graph.dijkstra import shortest_path
from pathgraph.graph.graph import Graph
from pathgraph.graph.vertex import Vertex


def test_directed_cities_route_through_seattle():
    g = Graph(Direction.DIRECTED, Weighting.WEIGHTED)
    seattle = g.insert_new_vertex("Seattle")
    chicago = g.insert_new_vertex("Chicago")
    los_angeles = g.insert_new_vertex("LosAngeles")
    g.insert_edge(seattle, chicago, 2072)
    g.insert_edge(los_angeles, seattle, 1151)

    result = g.shortest_path(los_angeles, chicago)

    assert result.payloads == ("LosAngeles", "Seattle", "Chicago")
    assert result.vertices == (los_angeles, seattle, chicago)
    assert result.total_weight == 3223


def test_seven_city_line():
    g = Graph()
    names = ["A", "B", "C", "D", "E", "F", "G"]
    cities = [g.insert_new_vertex(name) for name in names]
    for left, right in zip(cities, cities[1:]):
        g.insert_edge(left, right, 1)

    result = g.shortest_path(cities[0], cities[-1])

    assert list(result.payloads) == names
    assert result.total_weight == 6
    assert result.num_stops == 7

    backwards = g.shortest_path(cities[-1], cities[0])
    assert list(backwards.payloads) == names[::-1]


def test_source_equals_target():
    g = Graph()
    v = g.insert_new_vertex("Solo")

    result = g.shortest_path(v, v)

    assert result.vertices == (v,)
    assert result.total_weight == 0
    assert len(result) == 1


def test_prefers_cheaper_indirect_route():
    g = Graph(Direction.DIRECTED, Weighting.WEIGHTED)
    a = g.insert_new_vertex("A")
    b = g.insert_new_vertex("B")
    c = g.insert_new_vertex("C")
    g.insert_edge(a, c, 10)
    g.insert_edge(a, b, 3)
    g.insert_edge(b, c, 4)

    result = g.shortest_path(a, c)

    assert result.payloads == ("A", "B", "C")
    assert result.total_weight == 7


def test_disconnected_components_raise_no_path():
    g = Graph()
    a = g.insert_new_vertex("A")
    b = g.insert_new_vertex("B")
    c = g.insert_new_vertex("C")
    d = g.insert_new_vertex("D")
    g.insert_edge(a, b)
    g.insert_edge(c, d)

    with pytest.raises(NoPathError) as excinfo:
        g.shortest_path(a, d)

    assert excinfo.value.source == "A"
    assert excinfo.value.target == "D"


def test_directed_edge_does_not_lead_back():
    g = Graph(Direction.DIRECTED)
    a = g.insert_new_vertex("A")
    b = g.insert_new_vertex("B")
    g.insert_edge(a, b)

    with pytest.raises(NoPathError):
        g.shortest_path(b, a)


def test_parallel_arcs_use_cheapest():
    g = Graph(Direction.DIRECTED, Weighting.WEIGHTED)
    a = g.insert_new_vertex("A")
    b = g.insert_new_vertex("B")
    g.insert_edge(a, b, 5)
    g.insert_edge(a, b, 2)

    assert g.shortest_path(a, b).total_weight == 2


def test_zero_weight_arcs():
    g = Graph(Direction.DIRECTED, Weighting.WEIGHTED)
    a = g.insert_new_vertex("A")
    b = g.insert_new_vertex("B")
    c = g.insert_new_vertex("C")
    g.insert_edge(a, b, 0)
    g.insert_edge(b, c, 0)

    result = g.shortest_path(a, c)

    assert result.payloads == ("A", "B", "C")
    assert result.total_weight == 0


@pytest.mark.parametrize(
    "order, expected",
    [
        (["A", "B", "C", "D"], ("A", "B", "D")),
        (["A", "C", "B", "D"], ("A", "C", "D")),
    ],
)
def test_ties_follow_insertion_order(order, expected):
    g = Graph()
    vertices = {name: g.insert_new_vertex(name) for name in order}
    g.insert_edge(vertices["A"], vertices["B"], 1)
    g.insert_edge(vertices["A"], vertices["C"], 1)
    g.insert_edge(vertices["B"], vertices["D"], 1)
    g.insert_edge(vertices["C"], vertices["D"], 1)

    result = g.shortest_path(vertices["A"], vertices["D"])

    assert result.payloads == expected
    assert result.total_weight == 2


def test_unowned_endpoints_rejected():
    g = Graph()
    a = g.insert_new_vertex("A")

    with pytest.raises(InvalidVertexError):
        g.shortest_path(a, Vertex("B"))
    with pytest.raises(InvalidVertexError):
        g.shortest_path(Vertex("B"), a)


class TestEndpointOwnership:
    """The module-level function checks endpoints itself."""

    @pytest.fixture
    def graph(self):
        g = Graph(Direction.DIRECTED)
        a = g.insert_new_vertex("A")
        b = g.insert_new_vertex("B")
        g.insert_edge(a, b, 3)
        return g

    def test_foreign_target(self, graph):
        a = graph.find(lambda name: name == "A")

        with pytest.raises(InvalidVertexError) as excinfo:
            shortest_path(graph, a, Vertex("B"))

        assert excinfo.value.vertex == "B"

    def test_foreign_source(self, graph):
        b = graph.find(lambda name: name == "B")

        with pytest.raises(InvalidVertexError) as excinfo:
            shortest_path(graph, Vertex("A"), b)

        assert excinfo.value.vertex == "A"

    def test_foreign_vertex_to_itself(self, graph):
        stranger = Vertex("C")

        with pytest.raises(InvalidVertexError):
            shortest_path(graph, stranger, stranger)

    def test_deleted_target(self, graph):
        a = graph.find(lambda name: name == "A")
        b = graph.find(lambda name: name == "B")
        graph.delete_vertex(b)

        with pytest.raises(InvalidVertexError):
            shortest_path(graph, a, b)

    def test_vertex_of_another_graph(self, graph):
        other = graph.copy()
        a = graph.find(lambda name: name == "A")
        b_elsewhere = other.find(lambda name: name == "B")

        with pytest.raises(InvalidVertexError):
            shortest_path(graph, a, b_elsewhere)


def test_arc_out_of_graph_rejected():
    g = Graph(Direction.DIRECTED)
    a = g.insert_new_vertex("A")
    b = g.insert_new_vertex("B")
    # Bypasses the graph: the arc points at a vertex it does not own.
    a.create_neighbor(Vertex("Ghost"))

    with pytest.raises(InvalidVertexError) as excinfo:
        shortest_path(g, a, b)

    assert excinfo.value.vertex == "Ghost"


def test_deleted_vertex_no_longer_on_route():
    g = Graph()
    a = g.insert_new_vertex("A")
    b = g.insert_new_vertex("B")
    c = g.insert_new_vertex("C")
    g.insert_edge(a, b, 1)
    g.insert_edge(b, c, 1)
    g.insert_edge(a, c, 5)

    g.delete_vertex(b)
    result = g.shortest_path(a, c)

    assert result.payloads == ("A", "C")
    assert result.total_weight == 5
