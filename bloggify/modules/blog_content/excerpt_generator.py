"""Excerpt Generator: readable summaries of blog post bodies.

Every generator sanitises the content first (tags stripped, common entities
decoded, whitespace collapsed) and truncates on word boundaries.  The SEO and
social presets never append a truncation marker.
"""

import logging
from typing import Optional

from bloggify.utils.helpers import truncate_at_boundary
from bloggify.utils.text_processing import (
    is_blank,
    sanitize,
    split_paragraphs,
    split_sentences,
    split_words,
)
from bloggify.utils.validators import require_positive

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DEFAULT_EXCERPT_LENGTH = 150
DEFAULT_SUFFIX = "..."
META_DESCRIPTION_LENGTH = 155
TWITTER_DESCRIPTION_LENGTH = 200


def generate_excerpt(
    content: Optional[str],
    max_length: int = DEFAULT_EXCERPT_LENGTH,
    suffix: Optional[str] = DEFAULT_SUFFIX,
) -> str:
    """Truncate content to *max_length* characters at a word boundary.

    Args:
        content: Post body, plain text or HTML.
        max_length: Maximum excerpt length before the suffix.
        suffix: Appended only when the content was shortened.

    Returns:
        The sanitised content if it fits, otherwise the truncated excerpt
        followed by *suffix*.

    Raises:
        InvalidArgumentError: If *max_length* is not positive.
    """
    if is_blank(content):
        return ""
    require_positive(max_length, "Max length")

    clean = sanitize(content)
    if len(clean) <= max_length:
        return clean

    excerpt = truncate_at_boundary(clean, max_length).strip()
    logger.debug("Excerpt truncated from %d to %d chars", len(clean), len(excerpt))
    return excerpt + (suffix or "")


def generate_excerpt_by_words(
    content: Optional[str], word_count: int, suffix: Optional[str] = DEFAULT_SUFFIX
) -> str:
    """Keep the first *word_count* words of the content.

    Raises:
        InvalidArgumentError: If *word_count* is not positive.
    """
    if is_blank(content):
        return ""
    require_positive(word_count, "Word count")

    words = split_words(sanitize(content))
    if len(words) <= word_count:
        return " ".join(words)
    return " ".join(words[:word_count]) + (suffix or "")


def generate_excerpt_from_first_paragraph(content: Optional[str]) -> str:
    """Return the first paragraph, split on blank lines before tags are removed."""
    if is_blank(content):
        return ""
    paragraphs = split_paragraphs(content)
    return sanitize(paragraphs[0])


def generate_excerpt_by_sentence(content: Optional[str], sentence_count: int = 1) -> str:
    """Keep the first *sentence_count* sentences of the content.

    Raises:
        InvalidArgumentError: If *sentence_count* is not positive.
    """
    if is_blank(content):
        return ""
    require_positive(sentence_count, "Sentence count")

    clean = sanitize(content)
    sentences = split_sentences(clean)
    if len(sentences) <= sentence_count:
        return clean
    return " ".join(s.strip() for s in sentences[:sentence_count])


def generate_meta_description(content: Optional[str]) -> str:
    """SEO meta description: up to 155 characters, no ellipsis."""
    return generate_excerpt(content, META_DESCRIPTION_LENGTH, "")


def generate_twitter_description(content: Optional[str]) -> str:
    """Twitter card description: up to 200 characters, no ellipsis."""
    return generate_excerpt(content, TWITTER_DESCRIPTION_LENGTH, "")
