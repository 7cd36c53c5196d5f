import os

import pytest

# Qt widgets render without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from conceptmap.model.concepts import Concept  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    from conceptmap.app.application import create_app
    app = create_app([])
    yield app


@pytest.fixture
def class_capital() -> list[Concept]:
    return [
        Concept(id="c1", label="Class", description="Social strata", connections=["c2"]),
        Concept(id="c2", label="Capital", description="Accumulated stock"),
    ]


@pytest.fixture
def make_concepts():
    def _make(n: int) -> list[Concept]:
        return [Concept(id=f"n{i}", label=f"Concept {i}") for i in range(n)]
    return _make
