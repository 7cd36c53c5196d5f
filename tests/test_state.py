"""Tests for the ConceptStore."""
import pytest

from conceptmap.app.state import ConceptStore
from conceptmap.model.concepts import Concept


@pytest.fixture
def store(class_capital):
    return ConceptStore(class_capital)


@pytest.fixture
def emitted(store):
    received = []
    store.concepts_changed.connect(received.append)
    return received


def test_concepts_returns_a_copy(store):
    listing = store.concepts()
    listing.clear()
    assert len(store.concepts()) == 2


def test_add_concept_appends_and_emits(store, emitted):
    concept = store.add_concept("  Rent ", " Income from land ")

    assert concept.label == "Rent"
    assert concept.description == "Income from land"
    assert concept.id.startswith("c-")
    assert [c.id for c in store.concepts()] == ["c1", "c2", concept.id]
    assert len(emitted) == 1
    assert emitted[0][-1] is concept


def test_add_concept_rejects_blank_label(store, emitted):
    with pytest.raises(ValueError):
        store.add_concept("   ")
    assert emitted == []


def test_add_concept_rejects_duplicate_id(store):
    with pytest.raises(ValueError):
        store.add_concept("Again", concept_id="c1")


def test_connect_concepts_appends_target(store, emitted):
    store.connect_concepts("c2", "c1")
    assert store.get("c2").connections == ["c1"]
    assert len(emitted) == 1


def test_connect_concepts_allows_duplicates_and_dangling(store):
    store.connect_concepts("c1", "c2")
    store.connect_concepts("c1", "nowhere")
    assert store.get("c1").connections == ["c2", "c2", "nowhere"]


def test_connect_unknown_source_raises(store):
    with pytest.raises(KeyError):
        store.connect_concepts("ghost", "c1")


def test_remove_concept_leaves_dangling_links(store, emitted):
    store.remove_concept("c2")
    assert [c.id for c in store.concepts()] == ["c1"]
    assert store.get("c1").connections == ["c2"]
    assert len(emitted) == 1

    with pytest.raises(KeyError):
        store.remove_concept("c2")


def test_set_concepts_replaces_wholesale(store, emitted):
    store.set_concepts([Concept(id="z", label="Z")])
    assert [c.id for c in store.concepts()] == ["z"]
    assert [c.id for c in emitted[0]] == ["z"]


def test_each_emission_is_a_new_list(store, emitted):
    store.connect_concepts("c1", "c2")
    store.connect_concepts("c1", "c2")
    assert emitted[0] is not emitted[1]
