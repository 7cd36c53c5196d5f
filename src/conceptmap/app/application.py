from __future__ import annotations

import os
import sys

from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from conceptmap.config import APP_ID, ORG_ID, VISIBLE_APP_NAME


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance, or return the running one."""
    existing = QApplication.instance()
    if existing is not None:
        return existing

    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(sys.argv if argv is None else argv)

    # Set the visible, translatable display name
    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
