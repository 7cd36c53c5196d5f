"""
Interaction Controller
======================
Translates pointer input on the mind-map surface into selection changes and
connection commands.

The connect gesture is a two-state machine:

    Idle --request_connect()--> Connecting(source)
    Connecting(source) --click other node--> Idle   (emits on_connect_concepts)
    Connecting(source) --cancel_connecting()--> Idle

Selection is tracked separately from the mode. All operations run
synchronously and never raise; invalid requests are ignored.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Optional, Sequence, Union

import numpy as np

from conceptmap.model.layout import Edge, PositionedNode, node_index

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    """No connection in progress."""


@dataclass(frozen=True)
class Connecting:
    """A connection is being drawn from `source_id`."""
    source_id: str


ConnectMode = Union[Idle, Connecting]


@dataclass(frozen=True)
class InteractionState:
    mode: ConnectMode = field(default_factory=Idle)
    selected_node_id: Optional[str] = None

    @property
    def connecting(self) -> bool:
        return isinstance(self.mode, Connecting)

    @property
    def connecting_source_id(self) -> Optional[str]:
        if isinstance(self.mode, Connecting):
            return self.mode.source_id
        return None


def hit_test(nodes: Sequence[PositionedNode], x: float, y: float) -> Optional[PositionedNode]:
    """
    Return the node whose circle contains (x, y), or None.

    A point exactly on the rim counts as a hit. When circles overlap, the
    first node in layout order wins.
    """
    if not nodes:
        return None
    xs = np.fromiter((n.x for n in nodes), dtype=np.float64, count=len(nodes))
    ys = np.fromiter((n.y for n in nodes), dtype=np.float64, count=len(nodes))
    radii = np.fromiter((n.radius for n in nodes), dtype=np.float64, count=len(nodes))

    hits = np.flatnonzero(np.hypot(xs - x, ys - y) <= radii)
    if hits.size == 0:
        return None
    return nodes[int(hits[0])]


class InteractionController:
    """
    Owns selection and connect mode for one mind-map surface.

    Args:
        on_connect_concepts: Called with (source_id, target_id) exactly once per
            completed connect gesture. The host persists the edge.
    """
    def __init__(self, on_connect_concepts: Callable[[str, str], None]) -> None:
        self._on_connect_concepts = on_connect_concepts
        self._nodes: list[PositionedNode] = []
        self._edges: list[Edge] = []
        self._state = InteractionState()
        self._hovered_node_id: Optional[str] = None

    # ------------------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------------------

    @property
    def nodes(self) -> list[PositionedNode]:
        return list(self._nodes)

    @property
    def edges(self) -> list[Edge]:
        return list(self._edges)

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def hovered_node_id(self) -> Optional[str]:
        return self._hovered_node_id

    @property
    def can_connect(self) -> bool:
        """True when request_connect() would start a connection."""
        return not self._state.connecting and self.selected_node() is not None

    @property
    def preview_target_id(self) -> Optional[str]:
        """The hovered node while connecting, unless it is the source itself."""
        source_id = self._state.connecting_source_id
        if source_id is None or self._hovered_node_id == source_id:
            return None
        return self._hovered_node_id

    def selected_node(self) -> Optional[PositionedNode]:
        """The selected node, or None when nothing (or a vanished id) is selected."""
        selected = self._state.selected_node_id
        if selected is None:
            return None
        return node_index(self._nodes).get(selected)

    # ------------------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------------------

    def set_nodes(self, nodes: Sequence[PositionedNode], edges: Sequence[Edge]) -> None:
        """
        Replace the displayed graph with a fresh layout.

        Optimistic edges are dropped; the host's concepts are authoritative.
        A selection that no longer matches a node stays stored but is not shown.
        A pending connection whose source vanished falls back to Idle.
        """
        self._nodes = list(nodes)
        self._edges = list(edges)
        index = node_index(self._nodes)
        if self._hovered_node_id is not None and self._hovered_node_id not in index:
            self._hovered_node_id = None
        source_id = self._state.connecting_source_id
        if source_id is not None and source_id not in index:
            self._state = replace(self._state, mode=Idle())
            logger.debug(f"Connecting source '{source_id}' is gone; back to idle.")

    def pointer_click(self, x: float, y: float) -> bool:
        """
        Handle a click at surface-local (x, y).

        Returns:
            True if the interaction state or edge set changed.
        """
        hit = hit_test(self._nodes, x, y)
        state = self._state

        if hit is None:
            # empty space clears the selection but keeps a pending connection
            if state.selected_node_id is None:
                return False
            self._state = replace(state, selected_node_id=None)
            logger.debug("Selection cleared.")
            return True

        if not state.connecting:
            if state.selected_node_id == hit.id:
                return False
            self._state = replace(state, selected_node_id=hit.id)
            logger.debug(f"Selected node '{hit.id}'.")
            return True

        source_id = state.connecting_source_id
        if hit.id == source_id:
            logger.debug(f"Ignoring click on connecting source '{source_id}'.")
            return False

        # local update first: the host may push a fresh layout from inside the callback
        self._edges.append(Edge(source=source_id, target=hit.id))
        self._state = InteractionState()
        logger.info(f"Connected '{source_id}' -> '{hit.id}'.")
        self._on_connect_concepts(source_id, hit.id)
        return True

    def pointer_move(self, x: float, y: float) -> bool:
        """Track the node under the pointer. Returns True if it changed."""
        hit = hit_test(self._nodes, x, y)
        hovered = hit.id if hit is not None else None
        if hovered == self._hovered_node_id:
            return False
        self._hovered_node_id = hovered
        return True

    def pointer_leave(self) -> bool:
        if self._hovered_node_id is None:
            return False
        self._hovered_node_id = None
        return True

    def request_connect(self) -> bool:
        """
        Start connecting from the current selection.

        Ignored without a visible selection or while already connecting.
        """
        if self._state.connecting:
            logger.debug("Connect request ignored: already connecting.")
            return False
        selected = self.selected_node()
        if selected is None:
            logger.debug("Connect request ignored: nothing selected.")
            return False
        self._state = replace(self._state, mode=Connecting(source_id=selected.id))
        logger.debug(f"Connecting from '{selected.id}'.")
        return True

    def cancel_connecting(self) -> bool:
        """Abandon a pending connection. The selection is kept."""
        if not self._state.connecting:
            return False
        self._state = replace(self._state, mode=Idle())
        logger.debug("Connecting cancelled.")
        return True
