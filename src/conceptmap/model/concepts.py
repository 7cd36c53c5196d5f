"""Concept records supplied by the host application."""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field


def new_concept_id() -> str:
    """Return a fresh, unique concept id."""
    return f"c-{uuid.uuid4().hex[:12]}"


@dataclass
class Concept:
    """
    A labeled idea with outgoing links to other concepts.

    `connections` holds target ids in insertion order. Links are directed and
    may be recorded on one or both endpoints; duplicates and self links are
    kept as-is.
    """
    id: str
    label: str
    description: str = ""
    connections: list[str] = field(default_factory=list)

    def connection_count(self) -> int:
        return len(self.connections)
