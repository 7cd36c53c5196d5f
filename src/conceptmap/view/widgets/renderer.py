"""
Graph Renderer
==============
Turns positioned nodes, edges and interaction state into pixels.

Why two stages?
---------------
1. `build_paint_commands` is a pure function producing an ordered list of
   drawing primitives. Stacking order is decided here: edges, then nodes with
   their labels, then the connection preview on top.
2. `paint` replays those primitives on a QPainter. `render` owns the painter
   for exactly one pass over a freshly sized surface.
"""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Optional, Sequence, Union

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QFontMetricsF, QImage, QPaintDevice, QPainter, QPen

from conceptmap import config
from conceptmap.model.interaction import InteractionState
from conceptmap.model.layout import Edge, PositionedNode, node_index


class Rgba(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255

    def to_qcolor(self) -> QColor:
        return QColor(self.r, self.g, self.b, self.a)


def parse_color(value: Union[str, Sequence[int]]) -> Rgba:
    """
    Convert '#RRGGBB', '#RRGGBBAA' or an (r, g, b[, a]) sequence into Rgba.

    Raises:
        ValueError: If a hex string has the wrong length.
    """
    if isinstance(value, str):
        digits = value.lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Expected #RRGGBB or #RRGGBBAA, got '{value}'.")
        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        return Rgba(*channels)
    return Rgba(*value)


# -------------------------------------------------------------------------------
# Paint commands
# -------------------------------------------------------------------------------

@dataclass(frozen=True)
class LineCommand:
    x1: float
    y1: float
    x2: float
    y2: float
    color: Rgba
    width: float
    dash: Optional[tuple[float, ...]] = None


@dataclass(frozen=True)
class CircleCommand:
    node_id: str
    x: float
    y: float
    radius: float
    fill: Rgba
    border: Rgba
    border_width: float


@dataclass(frozen=True)
class TextCommand:
    x: float
    y: float
    text: str
    color: Rgba
    font_px: int = config.LABEL_FONT_PX
    bold: bool = True


PaintCommand = Union[LineCommand, CircleCommand, TextCommand]


def build_paint_commands(
    nodes: Sequence[PositionedNode],
    edges: Sequence[Edge],
    state: InteractionState,
    preview_target_id: Optional[str] = None,
) -> list[PaintCommand]:
    """
    Describe one frame of the mind-map.

    Edges naming an unknown node are skipped. A stale selection highlights
    nothing. The preview line is emitted only while connecting and only when
    both the source and the tentative target are present.
    """
    by_id = node_index(nodes)
    commands: list[PaintCommand] = []

    edge_color = Rgba(*config.EDGE_COLOR)
    for edge in edges:
        source = by_id.get(edge.source)
        target = by_id.get(edge.target)
        if source is None or target is None:
            continue
        commands.append(LineCommand(source.x, source.y, target.x, target.y, edge_color, config.EDGE_WIDTH))

    for node in nodes:
        selected = node.id == state.selected_node_id
        commands.append(CircleCommand(
            node_id=node.id,
            x=node.x,
            y=node.y,
            radius=node.radius,
            fill=parse_color(node.color),
            border=Rgba(*(config.SELECTED_BORDER_COLOR if selected else config.NODE_BORDER_COLOR)),
            border_width=config.SELECTED_BORDER_WIDTH if selected else config.NODE_BORDER_WIDTH,
        ))
        commands.append(TextCommand(node.x, node.y, node.label, Rgba(*config.LABEL_COLOR)))

    if state.connecting and preview_target_id is not None:
        source = by_id.get(state.connecting_source_id)
        target = by_id.get(preview_target_id)
        if source is not None and target is not None:
            commands.append(LineCommand(
                source.x, source.y, target.x, target.y,
                Rgba(*config.PREVIEW_COLOR), config.PREVIEW_WIDTH, dash=config.PREVIEW_DASH,
            ))

    return commands


# -------------------------------------------------------------------------------
# Qt painting
# -------------------------------------------------------------------------------

def _pen(color: Rgba, width: float, dash: Optional[tuple[float, ...]] = None) -> QPen:
    pen = QPen(color.to_qcolor())
    pen.setWidthF(width)
    if dash:
        # QPen dash lengths are in units of the pen width
        pen.setDashPattern([d / width for d in dash])
    return pen


def paint(painter: QPainter, commands: Sequence[PaintCommand]) -> None:
    """Replay paint commands in order."""
    for cmd in commands:
        if isinstance(cmd, LineCommand):
            painter.setPen(_pen(cmd.color, cmd.width, cmd.dash))
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawLine(QPointF(cmd.x1, cmd.y1), QPointF(cmd.x2, cmd.y2))

        elif isinstance(cmd, CircleCommand):
            painter.setPen(_pen(cmd.border, cmd.border_width))
            painter.setBrush(QBrush(cmd.fill.to_qcolor()))
            painter.drawEllipse(QPointF(cmd.x, cmd.y), cmd.radius, cmd.radius)

        elif isinstance(cmd, TextCommand):
            font = QFont(config.LABEL_FONT_FAMILY)
            font.setStyleHint(QFont.StyleHint.SansSerif)
            font.setPixelSize(cmd.font_px)
            font.setBold(cmd.bold)
            painter.setFont(font)
            painter.setPen(cmd.color.to_qcolor())
            # baseline placed so the text box is centered on the anchor; no clipping
            metrics = QFontMetricsF(font)
            baseline = QPointF(
                cmd.x - metrics.horizontalAdvance(cmd.text) / 2.0,
                cmd.y + (metrics.ascent() - metrics.descent()) / 2.0,
            )
            painter.drawText(baseline, cmd.text)


@contextmanager
def painter_on(surface: QPaintDevice) -> Iterator[QPainter]:
    """Hold a QPainter on `surface` for the duration of one paint pass."""
    painter = QPainter(surface)
    try:
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        yield painter
    finally:
        painter.end()


def acquire_surface(width: int, height: int) -> QImage:
    """A transparent raster surface of exactly width x height pixels."""
    image = QImage(max(1, int(width)), max(1, int(height)), QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(Qt.GlobalColor.transparent)
    return image


def render(
    surface: QPaintDevice,
    nodes: Sequence[PositionedNode],
    edges: Sequence[Edge],
    state: InteractionState,
    preview_target_id: Optional[str] = None,
) -> list[PaintCommand]:
    """Clear `surface` and paint one frame on it. Returns the commands painted."""
    commands = build_paint_commands(nodes, edges, state, preview_target_id)
    with painter_on(surface) as painter:
        painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Source)
        painter.fillRect(QRectF(0, 0, surface.width(), surface.height()), Qt.GlobalColor.transparent)
        painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_SourceOver)
        paint(painter, commands)
    return commands

