from __future__ import annotations

import logging
from typing import Iterable, Optional

from PySide6.QtCore import QObject, Signal

from conceptmap.model.concepts import Concept, new_concept_id

logger = logging.getLogger(__name__)


class ConceptStore(QObject):
    """
    Central concept store with signals for view sync.

    Holds the authoritative, ordered concept list. Every mutation emits
    `concepts_changed` with a fresh list so listeners can re-run the layout.
    """
    concepts_changed = Signal(object)

    def __init__(self, concepts: Iterable[Concept] | None = None) -> None:
        super().__init__()
        self._concepts: list[Concept] = list(concepts or [])

    def concepts(self) -> list[Concept]:
        return list(self._concepts)

    def get(self, concept_id: str) -> Optional[Concept]:
        for concept in self._concepts:
            if concept.id == concept_id:
                return concept
        return None

    def _emit(self) -> None:
        self.concepts_changed.emit(self.concepts())

    def set_concepts(self, concepts: Iterable[Concept]) -> None:
        self._concepts = list(concepts)
        logger.debug(f"Concept list replaced ({len(self._concepts)} concepts).")
        self._emit()

    def add_concept(self, label: str, description: str = "", concept_id: str | None = None) -> Concept:
        label = label.strip()
        if not label:
            raise ValueError("Concept label must not be empty.")
        concept_id = concept_id or new_concept_id()
        if self.get(concept_id) is not None:
            raise ValueError(f"Concept with id '{concept_id}' already exists.")

        concept = Concept(id=concept_id, label=label, description=description.strip())
        self._concepts.append(concept)
        logger.info(f"Added concept '{label}' ({concept_id}).")
        self._emit()
        return concept

    def remove_concept(self, concept_id: str) -> None:
        for i, concept in enumerate(self._concepts):
            if concept.id == concept_id:
                del self._concepts[i]
                logger.info(f"Removed concept '{concept.label}' ({concept_id}).")
                self._emit()
                return
        raise KeyError(f"Concept with id '{concept_id}' not found.")

    def connect_concepts(self, source_id: str, target_id: str) -> None:
        source = self.get(source_id)
        if source is None:
            raise KeyError(f"Concept with id '{source_id}' not found.")
        source.connections.append(target_id)
        logger.info(f"Connected concept '{source_id}' -> '{target_id}'.")
        self._emit()
