import pytest
from leitner.models import Flashcard


@pytest.fixture
def cards():
    """Three distinct flashcards."""
    return [
        Flashcard("Q1", "A1", "Hint1"),
        Flashcard("Q2", "A2", "Hint2"),
        Flashcard("Q3", "A3", "Hint3"),
    ]


@pytest.fixture
def tmp_config(tmp_path):
    """Provide a temporary settings file path for tests."""
    return str(tmp_path / "config.yaml")
