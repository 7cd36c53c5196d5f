"""
Mind-Map View
=============
Hosts the drawing surface for the concept graph and the small header with the
selected concept and the connect controls.

Why is this file needed?
------------------------
1. Surface ownership: `MindMapCanvas` re-measures itself and paints a freshly
   sized surface on every pass; no painter or image outlives a paint event.
2. Input routing: pointer and key events go to the InteractionController.
3. Empty state: with no concepts, a placeholder replaces the canvas.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence, TYPE_CHECKING

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtGui import QKeyEvent, QMouseEvent, QPaintEvent
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QStackedWidget, QVBoxLayout, QWidget

from conceptmap import config
from conceptmap.model.interaction import InteractionController
from conceptmap.model.layout import layout as compute_layout
from conceptmap.view.widgets.renderer import PaintCommand, acquire_surface, painter_on, render

if TYPE_CHECKING:
    from conceptmap.app.state import ConceptStore
    from conceptmap.model.concepts import Concept

logger = logging.getLogger(__name__)

PLACEHOLDER_PAGE = 0
CANVAS_PAGE = 1


class MindMapCanvas(QWidget):
    """The drawing surface. Paints only while the controller has nodes."""
    state_changed = Signal()

    def __init__(self, controller: InteractionController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.last_commands: list[PaintCommand] = []
        self.last_surface_size: tuple[int, int] | None = None

        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.ClickFocus)
        self.setMinimumHeight(config.MIN_SURFACE_HEIGHT)

    def paintEvent(self, event: QPaintEvent) -> None:
        if not self.controller.nodes:
            self.last_commands = []
            return

        # sized from the current geometry on every pass, never cached
        surface = acquire_surface(self.width(), self.height())
        self.last_surface_size = (surface.width(), surface.height())
        self.last_commands = render(
            surface,
            self.controller.nodes,
            self.controller.edges,
            self.controller.state,
            self.controller.preview_target_id,
        )
        with painter_on(self) as painter:
            painter.drawImage(0, 0, surface)

    # ---- pointer / keys ----

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        pos = event.position()
        self._apply(self.controller.pointer_click(pos.x(), pos.y()))

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        self._apply(self.controller.pointer_move(pos.x(), pos.y()))

    def leaveEvent(self, event) -> None:
        self._apply(self.controller.pointer_leave())
        super().leaveEvent(event)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() == Qt.Key.Key_Escape:
            self._apply(self.controller.cancel_connecting())
            return
        super().keyPressEvent(event)

    def _apply(self, changed: bool) -> None:
        if changed:
            self.update()
            self.state_changed.emit()


class MindMapView(QWidget):
    """
    Concept mind-map with header controls.

    Feed it concepts with `set_concepts` (or `bind_store`). Completed connect
    gestures are reported through `connect_concepts_requested(source, target)`;
    the host is responsible for storing them.
    """
    connect_concepts_requested = Signal(str, str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = InteractionController(on_connect_concepts=self._on_connect_concepts)

        root = QVBoxLayout(self)

        # header row
        header = QHBoxLayout()
        root.addLayout(header, 0)
        self.caption = QLabel("", self)
        self.caption.setWordWrap(True)
        header.addWidget(self.caption, 1)

        self.btn_connect = QPushButton(self.tr(config.CONNECT_BUTTON_TEXT), self)
        self.btn_connect.clicked.connect(self.request_connect)
        header.addWidget(self.btn_connect, 0)

        self.btn_cancel = QPushButton(self.tr("Cancel"), self)
        self.btn_cancel.clicked.connect(self.cancel_connecting)
        header.addWidget(self.btn_cancel, 0)

        # placeholder / canvas
        self.stack = QStackedWidget(self)
        root.addWidget(self.stack, 1)

        self.placeholder = QLabel(self.tr(config.PLACEHOLDER_TEXT), self.stack)
        self.placeholder.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.stack.addWidget(self.placeholder)

        self.canvas = MindMapCanvas(self.controller, self.stack)
        self.canvas.state_changed.connect(self._refresh_chrome)
        self.stack.addWidget(self.canvas)

        self.resize(*config.DEFAULT_SURFACE_SIZE)
        self._refresh()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def set_concepts(self, concepts: Sequence[Concept]) -> None:
        """Re-run the layout for a new concept sequence and repaint."""
        nodes, edges = compute_layout(concepts)
        self.controller.set_nodes(nodes, edges)
        logger.debug(f"Layout updated: {len(nodes)} nodes, {len(edges)} edges.")
        self._refresh()

    def bind_store(self, store: ConceptStore) -> None:
        """Follow `store` and route completed connections back into it."""
        store.concepts_changed.connect(self.set_concepts)
        self.connect_concepts_requested.connect(store.connect_concepts)
        self.set_concepts(store.concepts())

    def is_showing_placeholder(self) -> bool:
        return self.stack.currentIndex() == PLACEHOLDER_PAGE

    @Slot()
    def request_connect(self) -> None:
        if self.controller.request_connect():
            self._refresh()

    @Slot()
    def cancel_connecting(self) -> None:
        if self.controller.cancel_connecting():
            self._refresh()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _on_connect_concepts(self, source_id: str, target_id: str) -> None:
        self.connect_concepts_requested.emit(source_id, target_id)

    def _refresh(self) -> None:
        has_nodes = bool(self.controller.nodes)
        self.stack.setCurrentIndex(CANVAS_PAGE if has_nodes else PLACEHOLDER_PAGE)
        self._refresh_chrome()
        self.canvas.update()

    @Slot()
    def _refresh_chrome(self) -> None:
        selected = self.controller.selected_node()
        connecting = self.controller.state.connecting

        self.caption.setText(self._caption_for(selected.label, selected.description) if selected else "")

        self.btn_connect.setVisible(selected is not None or connecting)
        self.btn_connect.setEnabled(self.controller.can_connect)
        self.btn_connect.setText(
            self.tr(config.CONNECTING_BUTTON_TEXT if connecting else config.CONNECT_BUTTON_TEXT)
        )
        self.btn_cancel.setVisible(connecting)

    @staticmethod
    def _caption_for(label: str, description: Optional[str]) -> str:
        return f"{label}: {description}" if description else label
