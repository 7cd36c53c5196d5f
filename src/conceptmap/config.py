"""
Configuration & Global Constants
================================
This module serves as the central registry for layout geometry, colors and
other global constants of the mind-map.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (center point, radii, palette)
   scattered throughout the layout and painting code.
2. Environment: It resolves the log level override used by the entry point.

Exports:
    LAYOUT_CENTER (tuple): Logical center of the concept circle.
    LAYOUT_ORBIT_RADIUS (float): Radius of the circle the nodes sit on.
    NODE_RADIUS (float): Radius of every node.
    NODE_PALETTE (tuple): Fill colors, indexed by node position.
"""
import logging
import os

VISIBLE_APP_NAME: str = "Reading Companion: Mind Map"
ORG_ID: str = "reading-companion"
APP_ID: str = "conceptmap"

# ---- layout (logical units, independent of the surface pixel size) ----
LAYOUT_CENTER: tuple[float, float] = (400.0, 200.0)
LAYOUT_ORBIT_RADIUS: float = 150.0
NODE_RADIUS: float = 40.0

NODE_PALETTE: tuple[str, ...] = (
    "#8B5CF6",  # purple
    "#EC4899",  # pink
    "#3B82F6",  # blue
    "#10B981",  # green
    "#F59E0B",  # amber
    "#EF4444",  # red
)

# ---- strokes (RGBA, alpha 0..255) ----
EDGE_COLOR: tuple[int, int, int, int] = (139, 92, 246, 128)
EDGE_WIDTH: float = 2.0

NODE_BORDER_COLOR: tuple[int, int, int, int] = (255, 255, 255, 179)
NODE_BORDER_WIDTH: float = 2.0
SELECTED_BORDER_COLOR: tuple[int, int, int, int] = (255, 255, 255, 255)
SELECTED_BORDER_WIDTH: float = 3.0

LABEL_COLOR: tuple[int, int, int, int] = (255, 255, 255, 255)
LABEL_FONT_FAMILY: str = "sans-serif"
LABEL_FONT_PX: int = 14

PREVIEW_COLOR: tuple[int, int, int, int] = (139, 92, 246, 204)
PREVIEW_WIDTH: float = 2.0
PREVIEW_DASH: tuple[float, float] = (5.0, 3.0)

# ---- surface ----
DEFAULT_SURFACE_SIZE: tuple[int, int] = (800, 500)
MIN_SURFACE_HEIGHT: int = 300

PLACEHOLDER_TEXT: str = "Add concepts to visualize relationships between key ideas"
CONNECT_BUTTON_TEXT: str = "Connect to another concept"
CONNECTING_BUTTON_TEXT: str = "Click on target node"

LOG_LEVEL_ENV: str = "CONCEPTMAP_LOG_LEVEL"


def log_level_from_env(default: int = logging.INFO) -> int:
    """
    Resolve the logging level from the CONCEPTMAP_LOG_LEVEL environment variable.

    Accepts level names ("DEBUG", "warning") or numeric values. Unknown values
    fall back to `default`.
    """
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default
