"""Shared pytest fixtures."""

import os
import tempfile

# Keep the global config away from the real home directory
os.environ.setdefault("FLASHDECK_HOME", tempfile.mkdtemp(prefix="flashdeck-test-"))

import pytest

from flashdeck.engine.db import CardStore
from flashdeck.engine.session import FlashcardSession

CAPITALS = [
    ("Capital of Czechia?", "Prague"),
    ("Capital of France?", "Paris"),
]


@pytest.fixture
def store():
    store = CardStore(":memory:")
    yield store
    store.close()


@pytest.fixture
def file_store(tmp_path):
    store = CardStore(str(tmp_path / "data" / "cards.sqlite"))
    yield store
    store.close()


@pytest.fixture
def session(store):
    return FlashcardSession(store)


@pytest.fixture
def capitals_session(store):
    for question, answer in CAPITALS:
        store.add(question, answer, (10, 20, 30))
    return FlashcardSession(store)
