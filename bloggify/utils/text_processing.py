"""Text processing utilities for blog content: tag stripping, entity decoding, splitting."""

import re
from typing import Optional

_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+")
_PARAGRAPH_BOUNDARY_RE = re.compile(r"\n\n|\r\n\r\n")

_HTML_ENTITIES = {
    "&nbsp;": " ",
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
}
_ENTITY_RE = re.compile("|".join(re.escape(entity) for entity in _HTML_ENTITIES))


def remove_tags(text: str) -> str:
    """Replace every HTML tag with a single space, leaving entities alone."""
    return _TAG_RE.sub(" ", text)


def decode_entities(text: str) -> str:
    """Decode the fixed entity table in a single pass.

    Each match is replaced independently against the original string, so
    ``&amp;lt;`` becomes ``&lt;`` and is not decoded a second time.
    """
    return _ENTITY_RE.sub(lambda match: _HTML_ENTITIES[match.group(0)], text)


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def strip_html_tags(text: Optional[str]) -> Optional[str]:
    """Strip tags, decode common entities and normalise whitespace.

    Args:
        text: Raw HTML or plain text.  ``None`` is passed through.

    Returns:
        Clean single-line text, or ``None`` when *text* is ``None``.
    """
    if text is None:
        return None
    return collapse_whitespace(decode_entities(remove_tags(text)))


def sanitize(text: Optional[str]) -> str:
    """Like :func:`strip_html_tags` but always returns a string.

    Examples:
        >>> sanitize("<p>Hello&nbsp;<b>World</b></p>")
        'Hello World'
        >>> sanitize(None)
        ''
    """
    if not text:
        return ""
    return strip_html_tags(text)


def is_blank(text: Optional[str]) -> bool:
    """True for ``None``, empty, or whitespace-only text."""
    return text is None or not text.strip()


def split_words(text: str) -> list[str]:
    """Split text on whitespace runs, dropping empty tokens."""
    return text.split()


def split_sentences(text: str) -> list[str]:
    """Split text after ``.``, ``!`` or ``?`` followed by whitespace.

    Terminal punctuation stays with the preceding sentence.
    """
    sentences = _SENTENCE_BOUNDARY_RE.split(text.strip())
    return [s for s in sentences if s]


def split_paragraphs(text: str) -> list[str]:
    """Split raw text on blank-line boundaries (``\\n\\n`` or ``\\r\\n\\r\\n``)."""
    return _PARAGRAPH_BOUNDARY_RE.split(text)
