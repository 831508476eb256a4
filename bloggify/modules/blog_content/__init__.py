"""Blog Content utilities: reading time, slugs, and excerpts."""

from bloggify.modules.blog_content.excerpt_generator import (
    generate_excerpt,
    generate_excerpt_by_sentence,
    generate_excerpt_by_words,
    generate_excerpt_from_first_paragraph,
    generate_meta_description,
    generate_twitter_description,
)
from bloggify.modules.blog_content.reading_time import (
    ReadingTimeEstimate,
    calculate_reading_time,
    count_words,
    get_detailed_reading_time,
    get_reading_time_estimate,
    get_reading_time_text,
)
from bloggify.modules.blog_content.slug_generator import (
    generate_dated_slug,
    generate_slug,
    generate_unique_slug,
    is_valid_slug,
    slug_to_title,
)

__all__ = [
    "ReadingTimeEstimate",
    "calculate_reading_time",
    "count_words",
    "generate_dated_slug",
    "generate_excerpt",
    "generate_excerpt_by_sentence",
    "generate_excerpt_by_words",
    "generate_excerpt_from_first_paragraph",
    "generate_meta_description",
    "generate_slug",
    "generate_twitter_description",
    "generate_unique_slug",
    "get_detailed_reading_time",
    "get_reading_time_estimate",
    "get_reading_time_text",
    "is_valid_slug",
    "slug_to_title",
]
