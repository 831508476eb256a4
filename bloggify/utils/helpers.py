"""General-purpose helper utilities shared by the blog content modules."""

from typing import Optional


def truncate_at_boundary(text: str, max_length: int, separator: str = " ") -> str:
    """Cut text to *max_length* characters without splitting a word.

    The cut prefix is backed up to the last *separator* it contains.  When the
    separator only appears at index 0, or not at all, the raw character cut is
    kept.

    Args:
        text: Input text.
        max_length: Maximum number of characters to keep.
        separator: Word separator (``" "`` for prose, ``"-"`` for slugs).

    Returns:
        The text unchanged if it already fits, otherwise the truncated prefix.

    Examples:
        >>> truncate_at_boundary("hello-big-world", 12, "-")
        'hello-big'
        >>> truncate_at_boundary("unbreakable", 5)
        'unbre'
    """
    if len(text) <= max_length:
        return text
    truncated = text[:max_length]
    last_separator = truncated.rfind(separator)
    if last_separator > 0:
        truncated = truncated[:last_separator]
    return truncated


def format_reading_time(minutes: int, words: Optional[int] = None) -> str:
    """Format minutes as ``"N min read"``, optionally with a word count.

    Examples:
        >>> format_reading_time(5)
        '5 min read'
        >>> format_reading_time(5, 1000)
        '5 min read (1000 words)'
    """
    text = f"{minutes} min read"
    if words is not None:
        text += f" ({words} words)"
    return text
