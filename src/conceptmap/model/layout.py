"""
Layout Engine
=============
Derives on-screen positions and styles for a sequence of concepts.

The layout is a pure function of the concept sequence: nodes are spread
evenly around a fixed circle in logical coordinates, edges are read straight
off every concept's `connections`. Re-run it whenever the concept sequence
changes; nothing is patched in place.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TYPE_CHECKING

import numpy as np

from conceptmap.config import LAYOUT_CENTER, LAYOUT_ORBIT_RADIUS, NODE_RADIUS, NODE_PALETTE

if TYPE_CHECKING:
    import numpy.typing as npt
    from conceptmap.model.concepts import Concept


@dataclass(frozen=True)
class PositionedNode:
    """The derived circular representation of a concept."""
    id: str
    label: str
    description: str
    x: float
    y: float
    radius: float
    color: str


@dataclass(frozen=True)
class Edge:
    """A directed connection between two concept ids."""
    source: str
    target: str


def circle_angles(n: int) -> npt.NDArray[np.float64]:
    """Angles (radians) of `n` points evenly spaced on a circle, starting at 0."""
    if n <= 0:
        return np.empty(0, dtype=np.float64)
    return 2.0 * np.pi * np.arange(n, dtype=np.float64) / n


def layout_nodes(
    concepts: Sequence[Concept],
    center: tuple[float, float] = LAYOUT_CENTER,
    orbit_radius: float = LAYOUT_ORBIT_RADIUS,
    node_radius: float = NODE_RADIUS,
    palette: Sequence[str] = NODE_PALETTE,
) -> list[PositionedNode]:
    """Place concepts evenly on a circle; node i sits at angle 2*pi*i/n."""
    angles = circle_angles(len(concepts))
    cx, cy = center
    xs = cx + orbit_radius * np.cos(angles)
    ys = cy + orbit_radius * np.sin(angles)

    return [
        PositionedNode(
            id=concept.id,
            label=concept.label,
            description=concept.description,
            x=float(x),
            y=float(y),
            radius=node_radius,
            color=palette[i % len(palette)],
        )
        for i, (concept, x, y) in enumerate(zip(concepts, xs, ys))
    ]


def derive_edges(concepts: Sequence[Concept]) -> list[Edge]:
    """One edge per connection entry, in concept order then connection order."""
    return [
        Edge(source=concept.id, target=target_id)
        for concept in concepts
        for target_id in concept.connections
    ]


def layout(concepts: Sequence[Concept]) -> tuple[list[PositionedNode], list[Edge]]:
    """
    Derive positioned nodes and edges from the current concepts.

    Args:
        concepts: The full, ordered concept sequence. May be empty.

    Returns:
        (nodes, edges). Both lists are empty for an empty input.
    """
    return layout_nodes(concepts), derive_edges(concepts)


def node_index(nodes: Sequence[PositionedNode]) -> dict[str, PositionedNode]:
    """Map node ids to nodes. With duplicate ids the first node wins."""
    index: dict[str, PositionedNode] = {}
    for node in nodes:
        index.setdefault(node.id, node)
    return index
