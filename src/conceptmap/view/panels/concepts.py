from __future__ import annotations

import logging

from PySide6.QtCore import Signal, Slot
from PySide6.QtWidgets import (
    QGridLayout, QGroupBox, QLabel, QLineEdit, QListWidget, QListWidgetItem, QPushButton,
    QVBoxLayout, QWidget,
)

from conceptmap.app.state import ConceptStore
from conceptmap.model.concepts import Concept
from conceptmap.view.panels.base import BasePanel

logger = logging.getLogger(__name__)


class ConceptPanel(BasePanel):
    """
    Panel for adding concepts and listing the existing ones.

    Top: label/description form with an "Add Concept" button.
    Below: every concept with its outgoing connection count. Mirrors the Store.
    """
    status_message = Signal(str)

    def __init__(self, store: ConceptStore, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)

        self.group_add = QGroupBox(self.tr("New Concept"), self)
        root.addWidget(self.group_add, 0)
        grid = QGridLayout(self.group_add)

        grid.addWidget(QLabel(self.tr("Label:"), self.group_add), 0, 0)
        self.edit_label = QLineEdit(self.group_add)
        self.edit_label.returnPressed.connect(self.add_concept)
        grid.addWidget(self.edit_label, 0, 1)

        grid.addWidget(QLabel(self.tr("Description:"), self.group_add), 1, 0)
        self.edit_description = QLineEdit(self.group_add)
        self.edit_description.returnPressed.connect(self.add_concept)
        grid.addWidget(self.edit_description, 1, 1)

        self.btn_add = QPushButton(self.tr("Add Concept"), self.group_add)
        self.btn_add.clicked.connect(self.add_concept)
        grid.addWidget(self.btn_add, 2, 1)

        self.label_status = QLabel("", self)
        self.label_status.setWordWrap(True)
        root.addWidget(self.label_status, 0)

        self.group_list = QGroupBox(self.tr("Concepts"), self)
        root.addWidget(self.group_list, 1)
        list_layout = QVBoxLayout(self.group_list)
        self.list_concepts = QListWidget(self.group_list)
        list_layout.addWidget(self.list_concepts)

        self.store.concepts_changed.connect(self._on_concepts_changed)
        self._on_concepts_changed(self.store.concepts())

    @Slot()
    def add_concept(self) -> None:
        label = self.edit_label.text()
        description = self.edit_description.text()
        try:
            concept = self.store.add_concept(label, description)
        except ValueError as e:
            logger.warning(f"Concept not added: {e}")
            self._set_status(str(e))
            return

        self.edit_label.clear()
        self.edit_description.clear()
        self._set_status(self.tr("Added '{0}'.").format(concept.label))

    def _set_status(self, text: str) -> None:
        self.label_status.setText(text)
        self.status_message.emit(text)

    @Slot(object)
    def _on_concepts_changed(self, concepts: list[Concept]) -> None:
        self.list_concepts.clear()
        for concept in concepts:
            n = concept.connection_count()
            item = QListWidgetItem(f"{concept.label}  ({n} {'link' if n == 1 else 'links'})")
            item.setToolTip(concept.description)
            self.list_concepts.addItem(item)
