"""
Application Initialization
==========================
This module wires the Store and the Main Window together and starts the Qt
event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Instantiates the ConceptStore (optionally seeded with demo concepts).
3. Instantiates the Main Window and passes the Store into it.
"""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from conceptmap.app.application import create_app
from conceptmap.app.state import ConceptStore
from conceptmap.config import log_level_from_env
from conceptmap.logging_config import setup_logging
from conceptmap.model.concepts import Concept
from conceptmap.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def demo_concepts() -> list[Concept]:
    """A small concept set from 'The Wealth of Nations' for trying the view out."""
    return [
        Concept(id="c1", label="Class", description="Social strata shaped by economic roles", connections=["c2"]),
        Concept(id="c2", label="Capital", description="Accumulated stock used to produce more"),
        Concept(id="c3", label="Invisible Hand",
                description="Self-interest in free markets promoting the common welfare", connections=["c4"]),
        Concept(id="c4", label="Free Market", description="Exchange with minimal state intervention"),
        Concept(id="c5", label="Division of Labour",
                description="Specialisation that raises productivity", connections=["c2"]),
    ]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="conceptmap", description="Concept mind-map viewer.")
    parser.add_argument("--demo", action="store_true", help="start with a few sample concepts")
    parser.add_argument("--log-file", default=None, help="also write logs to this file")
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    args, _qt_args = parser.parse_known_args(argv)
    return args


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    level = logging.DEBUG if args.debug else log_level_from_env()
    setup_logging(level=level, log_file=args.log_file)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model
    store = ConceptStore(demo_concepts() if args.demo else None)
    logger.info(f"Starting with {len(store.concepts())} concepts.")

    # 4. Initialize the Main Window, passing the store
    window = MainWindow(store)
    window.show()

    # 5. Start Event Loop
    return app.exec()
