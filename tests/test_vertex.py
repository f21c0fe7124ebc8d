"""Tests for Vertex: adjacency management, identity and text output."""

import io

import pytest

from pathgraph.domain.errors import EdgeNotFoundError, InvalidWeightError
from pathgraph.graph.vertex import Vertex


def test_get_and_set_payload():
    v = Vertex("Fargo")
    assert v.get() == "Fargo"

    v.set("Moorhead")
    assert v.get() == "Moorhead"
    assert v.data == "Moorhead"

    v.data = "Fargo"
    assert v.get() == "Fargo"


def test_create_neighbor_defaults_to_unit_weight():
    a = Vertex("A")
    b = Vertex("B")

    a.create_neighbor(b)

    assert a.neighbors() == [b]
    assert a.get_weight(b) == 1
    assert b.neighbors() == []


def test_parallel_arcs_accumulate():
    a = Vertex("A")
    b = Vertex("B")

    a.create_neighbor(b, 5)
    a.create_neighbor(b, 2)

    assert a.neighbors() == [b, b]
    assert a.neighborhood() == [(b, 5), (b, 2)]
    # First arc in adjacency order wins
    assert a.get_weight(b) == 5


def test_delete_neighbor_removes_all_parallel_arcs():
    a = Vertex("A")
    b = Vertex("B")
    c = Vertex("C")
    a.create_neighbor(b, 1)
    a.create_neighbor(c, 2)
    a.create_neighbor(b, 3)

    removed = a.delete_neighbor(b)

    assert [arc.weight for arc in removed] == [1, 3]
    assert a.neighbors() == [c]
    assert not a.has_neighbor(b)


def test_delete_missing_neighbor_is_empty():
    a = Vertex("A")
    assert a.delete_neighbor(Vertex("B")) == []


def test_get_weight_missing_arc_raises():
    a = Vertex("A")
    b = Vertex("B")

    with pytest.raises(EdgeNotFoundError) as excinfo:
        a.get_weight(b)

    assert excinfo.value.source == "A"
    assert excinfo.value.target == "B"


def test_negative_weight_rejected_without_mutation():
    a = Vertex("A")
    b = Vertex("B")

    with pytest.raises(InvalidWeightError):
        a.create_neighbor(b, -1)

    assert a.neighbors() == []


@pytest.mark.parametrize("weight", [1.5, float("inf"), "2", None, False])
def test_non_integer_weight_rejected(weight):
    a = Vertex("A")
    b = Vertex("B")

    with pytest.raises(InvalidWeightError):
        a.create_neighbor(b, weight)

    assert a.arcs() == []


def test_zero_weight_allowed():
    a = Vertex("A")
    b = Vertex("B")

    a.create_neighbor(b, 0)

    assert a.get_weight(b) == 0


def test_created_arcs_are_never_counted():
    a = Vertex("A")
    b = Vertex("B")

    arc = a.create_neighbor(b, 3)

    assert arc.counted is False
    with pytest.raises(TypeError):
        a.create_neighbor(b, 3, counted=True)


def test_neighbors_is_a_snapshot():
    a = Vertex("A")
    b = Vertex("B")
    a.create_neighbor(b)

    snapshot = a.neighbors()
    snapshot.clear()

    assert a.neighbors() == [b]


def test_identity_not_payload_equality():
    first = Vertex("same")
    second = Vertex("same")

    assert first == first
    assert first != second
    assert len({first, second}) == 2


def test_ordering_follows_creation():
    first = Vertex("z")
    second = Vertex("a")

    assert first < second
    assert second > first
    assert first <= first
    assert sorted([second, first]) == [first, second]


def test_copy_gets_new_identity_and_same_arcs():
    a = Vertex("A")
    b = Vertex("B")
    a.create_neighbor(b, 7)

    twin = a.copy()

    assert twin != a
    assert twin.get() == "A"
    assert twin.neighborhood() == [(b, 7)]

    twin.delete_neighbor(b)
    assert a.neighborhood() == [(b, 7)]


def test_dump_format():
    seattle = Vertex("Seattle")
    chicago = Vertex("Chicago")
    denver = Vertex("Denver")
    seattle.create_neighbor(chicago, 2072)
    seattle.create_neighbor(denver, 1307)

    out = io.StringIO()
    seattle.dump(out)

    assert out.getvalue() == "Seattle -> Chicago:2072 -> Denver:1307"
    assert str(seattle) == out.getvalue()
    assert str(chicago) == "Chicago"
