"""Input validation utilities for numeric arguments and slugs."""

import re

_SLUG_RE = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")


class InvalidArgumentError(ValueError):
    """Raised when a length, count, or speed argument is not positive."""


def validate_positive(value: int, name: str) -> tuple[bool, str]:
    """Validate that an integer argument is greater than zero.

    Args:
        value: The value to check.
        name: Human-readable argument name used in the error message.

    Returns:
        Tuple of (is_valid, error_message).  error_message is empty on success.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False, f"{name} must be an integer, got {type(value).__name__}."
    if value <= 0:
        return False, f"{name} must be greater than 0."
    return True, ""


def require_positive(value: int, name: str) -> None:
    """Raise :class:`InvalidArgumentError` unless *value* is a positive integer."""
    ok, error = validate_positive(value, name)
    if not ok:
        raise InvalidArgumentError(error)


def validate_slug(slug: str) -> tuple[bool, str]:
    """Validate a URL slug.

    A valid slug is one or more lowercase alphanumeric segments joined by
    single hyphens, with no leading or trailing hyphen.

    Args:
        slug: The slug to validate.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if not slug or not isinstance(slug, str):
        return False, "Slug is empty or not a string."
    if slug != slug.lower():
        return False, "Slug must be lowercase."
    if slug.startswith("-") or slug.endswith("-"):
        return False, "Slug must not start or end with a hyphen."
    if "--" in slug:
        return False, "Slug contains an empty segment (double hyphen)."
    if not _SLUG_RE.fullmatch(slug):
        return False, "Slug may only contain a-z, 0-9 and single hyphens."
    return True, ""
