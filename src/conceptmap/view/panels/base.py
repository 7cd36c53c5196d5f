from __future__ import annotations

from PySide6.QtWidgets import QWidget

from conceptmap.app.state import ConceptStore


class BasePanel(QWidget):
    """Base class for left-side panels. Holds a reference to the concept store."""
    def __init__(self, store: ConceptStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
