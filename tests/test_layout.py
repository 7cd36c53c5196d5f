"""Tests for the circular layout and edge derivation."""
import math

import pytest

from conceptmap.config import NODE_PALETTE
from conceptmap.model.concepts import Concept
from conceptmap.model.layout import Edge, circle_angles, layout, node_index

CENTER = (400.0, 200.0)


def test_empty_input_yields_nothing():
    nodes, edges = layout([])
    assert nodes == []
    assert edges == []


def test_single_concept_sits_at_angle_zero():
    nodes, _ = layout([Concept(id="a", label="A")])
    assert len(nodes) == 1
    assert nodes[0].x == pytest.approx(550.0)
    assert nodes[0].y == pytest.approx(200.0)


@pytest.mark.parametrize("n", [1, 2, 3, 5, 6, 7, 13])
def test_nodes_sit_on_the_orbit_at_even_angles(make_concepts, n):
    nodes, _ = layout(make_concepts(n))

    assert len(nodes) == n
    for i, node in enumerate(nodes):
        dx, dy = node.x - CENTER[0], node.y - CENTER[1]
        assert math.hypot(dx, dy) == pytest.approx(150.0)
        expected = 2 * math.pi * i / n
        assert math.atan2(dy, dx) % (2 * math.pi) == pytest.approx(expected % (2 * math.pi), abs=1e-9)
        assert node.radius == 40.0


def test_node_carries_concept_fields():
    nodes, _ = layout([Concept(id="x", label="Rent", description="Income from land")])
    assert nodes[0].id == "x"
    assert nodes[0].label == "Rent"
    assert nodes[0].description == "Income from land"


def test_palette_cycles_by_index(make_concepts):
    nodes, _ = layout(make_concepts(8))
    assert [n.color for n in nodes[:6]] == list(NODE_PALETTE)
    assert nodes[6].color == NODE_PALETTE[0]
    assert nodes[7].color == NODE_PALETTE[1]


def test_layout_is_idempotent(make_concepts):
    concepts = make_concepts(5)
    assert layout(concepts) == layout(concepts)


def test_edges_follow_concept_then_connection_order():
    concepts = [
        Concept(id="a", label="A", connections=["b", "c"]),
        Concept(id="b", label="B", connections=[]),
        Concept(id="c", label="C", connections=["a"]),
    ]
    _, edges = layout(concepts)
    assert edges == [Edge("a", "b"), Edge("a", "c"), Edge("c", "a")]


def test_duplicate_self_and_dangling_edges_are_kept():
    concepts = [
        Concept(id="a", label="A", connections=["b", "b", "a", "ghost"]),
        Concept(id="b", label="B", connections=["a"]),
    ]
    _, edges = layout(concepts)
    assert len(edges) == sum(len(c.connections) for c in concepts)
    assert edges.count(Edge("a", "b")) == 2
    assert Edge("a", "a") in edges
    assert Edge("a", "ghost") in edges


def test_two_concept_example(class_capital):
    nodes, edges = layout(class_capital)

    assert [n.id for n in nodes] == ["c1", "c2"]
    assert (nodes[0].x, nodes[0].y) == pytest.approx((550.0, 200.0))
    assert (nodes[1].x, nodes[1].y) == pytest.approx((250.0, 200.0))
    assert edges == [Edge(source="c1", target="c2")]


def test_circle_angles_handles_zero():
    assert circle_angles(0).size == 0
    assert list(circle_angles(4)) == pytest.approx([0, math.pi / 2, math.pi, 3 * math.pi / 2])


def test_node_index_keeps_first_duplicate():
    nodes, _ = layout([Concept(id="a", label="first"), Concept(id="a", label="second")])
    assert node_index(nodes)["a"].label == "first"

