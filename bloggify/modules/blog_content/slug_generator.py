"""Slug Generator: SEO-friendly URL slugs from blog post titles.

Titles are lowercased, stripped of accents, and reduced to ``a-z0-9``
segments joined by single hyphens.  Helpers cover length limits, uniqueness
against existing slugs, date prefixes, validation and the reverse
slug-to-title conversion.
"""

import logging
import re
import unicodedata
from typing import Iterable, Optional

from bloggify.utils.helpers import truncate_at_boundary
from bloggify.utils.text_processing import is_blank
from bloggify.utils.validators import require_positive, validate_slug

logger = logging.getLogger(__name__)

_NON_SLUG_CHARS_RE = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE_RE = re.compile(r"\s+")
_MULTI_DASH_RE = re.compile(r"-{2,}")


def _strip_accents(text: str) -> str:
    """Decompose to NFD and drop every mark character (é -> e, ñ -> n)."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.category(ch).startswith("M"))


def generate_slug(title: Optional[str], max_length: Optional[int] = None) -> str:
    """Convert a title to a URL-safe slug.

    Args:
        title: Blog post title.
        max_length: Optional maximum slug length.  Longer slugs are cut back
            to the last hyphen so no word is split.

    Returns:
        Lowercase hyphen-separated slug, or ``""`` for an empty title.

    Raises:
        InvalidArgumentError: If *max_length* is given and not positive.

    Examples:
        >>> generate_slug("Hello, World!")
        'hello-world'
        >>> generate_slug("Café au Lait")
        'cafe-au-lait'
    """
    if max_length is not None:
        require_positive(max_length, "Max length")
    if is_blank(title):
        return ""

    slug = _strip_accents(title.lower())
    slug = slug.replace("_", "-")
    slug = _NON_SLUG_CHARS_RE.sub(" ", slug)
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _MULTI_DASH_RE.sub("-", slug)
    slug = slug.strip("-")

    if max_length is not None and len(slug) > max_length:
        slug = truncate_at_boundary(slug, max_length, "-")
        logger.debug("Slug truncated to %d chars: %s", max_length, slug)
    return slug


def generate_unique_slug(
    title: Optional[str], existing_slugs: Optional[Iterable[str]] = None
) -> str:
    """Generate a slug that does not collide with *existing_slugs*.

    Appends ``-1``, ``-2``, ... to the base slug until an unused candidate is
    found.  The search is unbounded, so callers passing untrusted lists should
    cap their size.

    Args:
        title: Blog post title.
        existing_slugs: Slugs already in use.

    Returns:
        A slug not present in *existing_slugs*.
    """
    taken = set(existing_slugs or ())
    base_slug = generate_slug(title)
    slug = base_slug
    counter = 1
    while slug in taken:
        slug = f"{base_slug}-{counter}"
        counter += 1
    if slug != base_slug:
        logger.debug("Slug %r taken, using %r", base_slug, slug)
    return slug


def generate_dated_slug(title: Optional[str], year: int, month: int, day: int) -> str:
    """Prefix the slug with a ``YYYY-MM-DD`` date.

    The date parts are formatted as given; no calendar validation is done.

    Examples:
        >>> generate_dated_slug("My Post", 2024, 10, 22)
        '2024-10-22-my-post'
    """
    return f"{year:04d}-{month:02d}-{day:02d}-{generate_slug(title)}"


def is_valid_slug(slug: Optional[str]) -> bool:
    """Return True if *slug* is lowercase alphanumeric segments joined by hyphens."""
    ok, _ = validate_slug(slug)
    return ok


def slug_to_title(slug: Optional[str]) -> str:
    """Convert a slug back to a readable title.

    Only the first character of each word is upper-cased; the rest of the
    word keeps its casing.

    Examples:
        >>> slug_to_title("hello-world-2024")
        'Hello World 2024'
    """
    if not slug:
        return ""
    words = slug.replace("-", " ").split()
    return " ".join(word[:1].upper() + word[1:] for word in words)
