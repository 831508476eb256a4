"""Reading Time Estimator: word counts and minutes-to-read for blog posts.

Word counting strips tags but does not decode entities.  Minutes are
``ceil(words / words_per_minute)`` with a floor of one minute for any
non-empty post; empty content reads in zero minutes.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from bloggify.utils.helpers import format_reading_time
from bloggify.utils.text_processing import is_blank, remove_tags, split_words
from bloggify.utils.validators import require_positive

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DEFAULT_WORDS_PER_MINUTE = 200
SLOW_READER_WPM = 150
FAST_READER_WPM = 250


@dataclass(frozen=True)
class ReadingTimeEstimate:
    """Reading time in minutes for slow, average and fast readers."""
    slow_minutes: int
    average_minutes: int
    fast_minutes: int

    def __str__(self) -> str:
        return (
            f"Reading Time: {self.fast_minutes}-{self.slow_minutes} min "
            f"(avg: {self.average_minutes} min)"
        )


def count_words(content: Optional[str]) -> int:
    """Count words in content after removing HTML tags.

    Args:
        content: Post body, plain text or HTML.

    Returns:
        Number of whitespace-separated tokens (0 for empty input).
    """
    if is_blank(content):
        return 0
    return len(split_words(remove_tags(content)))


def calculate_reading_time(
    content: Optional[str], words_per_minute: int = DEFAULT_WORDS_PER_MINUTE
) -> int:
    """Estimated reading time in whole minutes.

    Args:
        content: Post body, plain text or HTML.
        words_per_minute: Reading speed.

    Returns:
        Minutes, at least 1 when the content has any words, 0 otherwise.

    Raises:
        InvalidArgumentError: If *words_per_minute* is not positive.
    """
    require_positive(words_per_minute, "Words per minute")
    words = count_words(content)
    if words == 0:
        return 0
    return max(1, math.ceil(words / words_per_minute))


def get_reading_time_text(
    content: Optional[str], words_per_minute: int = DEFAULT_WORDS_PER_MINUTE
) -> str:
    """Reading time as ``"N min read"``."""
    return format_reading_time(calculate_reading_time(content, words_per_minute))


def get_detailed_reading_time(
    content: Optional[str], words_per_minute: int = DEFAULT_WORDS_PER_MINUTE
) -> str:
    """Reading time with word count, e.g. ``"5 min read (1000 words)"``."""
    minutes = calculate_reading_time(content, words_per_minute)
    return format_reading_time(minutes, count_words(content))


def get_reading_time_estimate(content: Optional[str]) -> ReadingTimeEstimate:
    """Reading times at the slow, average and fast preset speeds."""
    estimate = ReadingTimeEstimate(
        slow_minutes=calculate_reading_time(content, SLOW_READER_WPM),
        average_minutes=calculate_reading_time(content, DEFAULT_WORDS_PER_MINUTE),
        fast_minutes=calculate_reading_time(content, FAST_READER_WPM),
    )
    logger.debug("Reading time estimate: %s", estimate)
    return estimate
