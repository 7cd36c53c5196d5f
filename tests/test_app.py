"""Tests for the main window, the concept panel and the application wiring."""
import logging

import pytest

from conceptmap.app.state import ConceptStore
from conceptmap.config import LOG_LEVEL_ENV, VISIBLE_APP_NAME, log_level_from_env
from conceptmap.logging_config import setup_logging
from conceptmap.main import demo_concepts, parse_args
from conceptmap.model.layout import layout
from conceptmap.view.main_window import MainWindow


@pytest.fixture
def window(qapp, class_capital):
    win = MainWindow(ConceptStore(class_capital))
    yield win
    win.close()


def test_window_shows_store_concepts(window):
    assert window.windowTitle() == VISIBLE_APP_NAME
    assert window.concept_panel.list_concepts.count() == 2
    assert window.concept_panel.list_concepts.item(0).text() == "Class  (1 link)"
    assert [n.id for n in window.mindmap.controller.nodes] == ["c1", "c2"]


def test_panel_adds_concept_to_store_and_map(window):
    panel = window.concept_panel
    panel.edit_label.setText("Rent")
    panel.edit_description.setText("Income from land")
    panel.btn_add.click()

    assert [c.label for c in window.store.concepts()] == ["Class", "Capital", "Rent"]
    assert len(window.mindmap.controller.nodes) == 3
    assert panel.edit_label.text() == ""
    assert panel.list_concepts.count() == 3
    assert "Rent" in panel.label_status.text()


def test_panel_reports_blank_label(window, caplog):
    panel = window.concept_panel
    panel.edit_label.setText("   ")
    with caplog.at_level(logging.WARNING, logger="conceptmap"):
        panel.add_concept()

    assert len(window.store.concepts()) == 2
    assert panel.label_status.text() == "Concept label must not be empty."
    assert "Concept not added" in caplog.text


def test_connection_updates_panel_and_status(window):
    window.mindmap.connect_concepts_requested.emit("c2", "c1")

    assert window.store.get("c2").connections == ["c1"]
    assert window.concept_panel.list_concepts.item(1).text() == "Capital  (1 link)"
    assert window.statusBar().currentMessage() == "Connected 'Capital' to 'Class'."


def test_parse_args():
    args = parse_args(["--demo", "--debug"])
    assert args.demo and args.debug
    assert args.log_file is None
    assert not parse_args([]).demo


def test_demo_concepts_lay_out_cleanly():
    concepts = demo_concepts()
    nodes, edges = layout(concepts)
    ids = {n.id for n in nodes}
    assert len(nodes) == len(concepts)
    assert all(e.source in ids and e.target in ids for e in edges)


@pytest.mark.parametrize("raw, expected", [
    ("", logging.INFO),
    ("debug", logging.DEBUG),
    ("WARNING", logging.WARNING),
    ("10", 10),
    ("nonsense", logging.INFO),
])
def test_log_level_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv(LOG_LEVEL_ENV, raw)
    assert log_level_from_env() == expected


def test_setup_logging_does_not_stack_handlers(tmp_path):
    log_file = tmp_path / "app.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    setup_logging(level=logging.DEBUG, log_file=str(log_file))

    logger = logging.getLogger("conceptmap")
    assert len(logger.handlers) == 2
    assert "Logging initialized." in log_file.read_text(encoding="utf-8")

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
