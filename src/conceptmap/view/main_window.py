"""
Main Application Window
=======================
The primary GUI container: concept panel on the left, mind-map on the right.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the mind-map's connect requests to the Store and
   reports outcomes in the status bar.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import QMainWindow, QSplitter

from conceptmap.app.state import ConceptStore
from conceptmap.config import VISIBLE_APP_NAME
from conceptmap.view.mindmap_view import MindMapView
from conceptmap.view.panels.concepts import ConceptPanel

logger = logging.getLogger(__name__)

STATUS_TIMEOUT_MS = 4000


class MainWindow(QMainWindow):
    def __init__(self, store: ConceptStore) -> None:
        super().__init__()
        self.store = store
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1200, 700)

        splitter = QSplitter(Qt.Orientation.Horizontal, self)
        splitter.setChildrenCollapsible(False)
        self.setCentralWidget(splitter)

        # --- LEFT SIDE: concept panel ---
        self.concept_panel = ConceptPanel(self.store, splitter)
        splitter.addWidget(self.concept_panel)

        # --- RIGHT SIDE: mind-map ---
        self.mindmap = MindMapView(splitter)
        splitter.addWidget(self.mindmap)

        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        splitter.setSizes([300, 900])

        # --- SIGNAL CONNECTIONS ---
        self.mindmap.bind_store(self.store)
        self.mindmap.connect_concepts_requested.connect(self.on_concepts_connected)
        self.concept_panel.status_message.connect(self.show_status)

        self.statusBar()

    @Slot(str, str)
    def on_concepts_connected(self, source_id: str, target_id: str) -> None:
        source = self.store.get(source_id)
        target = self.store.get(target_id)
        if source is None or target is None:
            return
        self.show_status(self.tr("Connected '{0}' to '{1}'.").format(source.label, target.label))

    @Slot(str)
    def show_status(self, text: str) -> None:
        self.statusBar().showMessage(text, STATUS_TIMEOUT_MS)
