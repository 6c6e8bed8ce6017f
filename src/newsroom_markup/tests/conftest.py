"""Shared test fixtures and configuration for newsroom markup tests."""

import random
import shutil
import tempfile
from pathlib import Path
from typing import List

import pytest

from newsroom_markup.core.markup.grammar import Tag


@pytest.fixture
def temp_directory():
    """Provide a temporary directory for testing."""
    temp_dir = tempfile.mkdtemp()
    temp_path = Path(temp_dir)

    yield temp_path

    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def clean_environment(monkeypatch):
    """
    Remove every NEWSROOM_MARKUP_* variable for the duration of a test.

    Each variable is set before being deleted so that monkeypatch restores
    the original state on teardown, including values a .env file loaded.
    """
    for name in (
        "NEWSROOM_MARKUP_LOG_LEVEL",
        "NEWSROOM_MARKUP_LOG_FORMAT",
        "NEWSROOM_MARKUP_CONTENT_BUDGET",
        "NEWSROOM_MARKUP_EXCERPT_LENGTH",
    ):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def sample_article() -> str:
    """A realistic article body using every tag."""
    return (
        "[HEADING]City council approves [BOLD]budget[/BOLD][/HEADING]\n"
        "\n"
        "The council voted [BOLD]7-2[/BOLD] on Tuesday night.\n"
        "Debate lasted [ITALIC]four hours[/ITALIC].\n"
        "\n"
        "[QUOTE]This is a [HIGHLIGHT]historic[/HIGHLIGHT] day for the city.[/QUOTE]\n"
        "\n"
        "[TIMELINE]\n"
        "March 1\n"
        "Draft budget published\n"
        "March 15\n"
        "Public hearing held\n"
        "[/TIMELINE]\n"
        "\n"
        "[TRANSCRIPT]\n"
        "What changes next year?\n"
        "Road repairs get twice the funding.\n"
        "[/TRANSCRIPT]\n"
        "\n"
        "Final paragraph."
    )


_FRAGMENTS: List[str] = (
    [tag.open_delimiter for tag in Tag]
    + [tag.close_delimiter for tag in Tag]
    + ["[", "]", "/", "[/", "BOLD", "HEADING", "LD]", "[BO"]
    + ["a", "word", "Jan 1", " ", "  ", "\n", "\n\n", "\t", " \n ", "é", "&", "<b>"]
)


def generate_markup_corpus(seed: int = 20240115, size: int = 300) -> List[str]:
    """Deterministic corpus of random, mostly malformed, markup strings."""
    rng = random.Random(seed)
    corpus = []
    for _ in range(size):
        length = rng.randint(0, 25)
        corpus.append("".join(rng.choice(_FRAGMENTS) for _ in range(length)))
    return corpus


@pytest.fixture(scope="session")
def markup_corpus() -> List[str]:
    """Seeded random markup strings for property tests."""
    return generate_markup_corpus()
