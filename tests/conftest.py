"""Shared pytest fixtures for Bloggify Utils tests."""

import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so 'bloggify' is importable.
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

_ENV_VARS = (
    "BLOGGIFY_WORDS_PER_MINUTE",
    "BLOGGIFY_EXCERPT_LENGTH",
    "BLOGGIFY_EXCERPT_SUFFIX",
    "BLOGGIFY_SLUG_MAX_LENGTH",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Autouse fixture: drop BLOGGIFY_* overrides so tests see the defaults."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture()
def sample_content():
    """Four plain-text sentences, 238 characters in total."""
    return (
        "This is a sample blog post content. "
        "It contains multiple sentences to test the excerpt generation. "
        "The excerpt should be properly truncated at word boundaries. "
        "This ensures that the excerpt looks professional and readable."
    )


@pytest.fixture()
def html_content():
    """Two short HTML paragraphs."""
    return (
        "<p>This is <strong>HTML</strong> content.</p>"
        "<p>It should be stripped properly.</p>"
    )


@pytest.fixture()
def blog_post_html():
    """A realistic post body with headings and paragraphs."""
    return (
        "<h1>Introduction</h1>"
        "<p>Web development has evolved significantly over the years. "
        "In this comprehensive guide, we'll explore the latest trends, "
        "best practices, and essential tools that every web developer "
        "should know in 2024.</p>"
        "<p>From modern JavaScript frameworks to cutting-edge CSS techniques, "
        "we've got you covered with practical examples.</p>"
    )


@pytest.fixture()
def make_words():
    """Return a factory producing ``n`` space-separated words."""
    def _make(n: int, word: str = "word") -> str:
        return " ".join([word] * n)
    return _make
