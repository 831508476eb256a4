"""Typer CLI application for Bloggify Utils.

Provides commands for slugs, excerpts and reading time.  Text arguments can
be passed inline, read from a file with ``--file``, or piped on stdin by
passing ``-`` (or nothing at all).
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bloggify.app import load_settings
from bloggify.modules.blog_content import excerpt_generator, reading_time, slug_generator
from bloggify.utils.text_processing import strip_html_tags
from bloggify.utils.validators import InvalidArgumentError, validate_slug

console = Console()
err_console = Console(stderr=True)
app = typer.Typer(
    name="bloggify",
    help="Bloggify Utils -- reading time, slugs and excerpts for blog content.",
    add_completion=False,
    no_args_is_help=True,
)


class ExcerptMode(str, Enum):
    length = "length"
    words = "words"
    sentences = "sentences"
    paragraph = "paragraph"
    meta = "meta"
    twitter = "twitter"


def _setup_logging(verbose: bool = False) -> None:
    """Configure logging level and format."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _read_input(text: Optional[str], file: Optional[Path]) -> str:
    """Resolve the text argument, a --file path, or stdin."""
    if file is not None:
        return file.read_text(encoding="utf-8")
    if text is None or text == "-":
        return sys.stdin.read()
    return text


def _fail(exc: Exception) -> typer.Exit:
    """Print an error and return the exit-status-1 exception to raise."""
    err_console.print(f"[red]✘ {escape(str(exc))}[/red]")
    return typer.Exit(code=1)


def _parse_date(value: str) -> tuple[int, int, int]:
    """Split ``YYYY-MM-DD`` into integers; the calendar is not checked."""
    parts = value.split("-")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise typer.BadParameter("Date must look like YYYY-MM-DD.", param_hint="--date")
    year, month, day = (int(p) for p in parts)
    return year, month, day


# ------------------------------------------------------------------
# slug
# ------------------------------------------------------------------
@app.command()
def slug(
    title: str = typer.Argument(..., help="Blog post title."),
    max_length: Optional[int] = typer.Option(None, "--max-length", "-m", help="Maximum slug length."),
    date: Optional[str] = typer.Option(None, "--date", "-d", help="Prefix with a YYYY-MM-DD date."),
    existing: Optional[list[str]] = typer.Option(
        None, "--existing", "-e", help="Slug already in use (repeatable)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Generate a URL slug from a title."""
    _setup_logging(verbose)
    settings = load_settings()
    if max_length is None:
        max_length = settings["slug"].get("max_length")

    try:
        result = slug_generator.generate_slug(title, max_length)
    except InvalidArgumentError as exc:
        raise _fail(exc) from exc
    if date:
        result = slug_generator.generate_dated_slug(result, *_parse_date(date))
    if existing:
        # Collisions are checked against the final, dated form.
        result = slug_generator.generate_unique_slug(result, existing)
    console.print(result, markup=False, highlight=False, soft_wrap=True)


# ------------------------------------------------------------------
# title
# ------------------------------------------------------------------
@app.command()
def title(slug_text: str = typer.Argument(..., metavar="SLUG", help="Slug to convert.")) -> None:
    """Convert a slug back to a readable title."""
    console.print(slug_generator.slug_to_title(slug_text), markup=False, highlight=False, soft_wrap=True)


# ------------------------------------------------------------------
# validate
# ------------------------------------------------------------------
@app.command()
def validate(slug_text: str = typer.Argument(..., metavar="SLUG", help="Slug to check.")) -> None:
    """Check whether a string is a valid slug."""
    ok, error = validate_slug(slug_text)
    if ok:
        console.print(f"[green]✔[/green] {escape(slug_text)} is a valid slug.")
        return
    console.print(f"[red]✘[/red] {escape(repr(slug_text))}: {error}")
    raise typer.Exit(code=1)


# ------------------------------------------------------------------
# reading-time
# ------------------------------------------------------------------
@app.command("reading-time")
def reading_time_cmd(
    text: Optional[str] = typer.Argument(None, help="Post body, or - for stdin."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, dir_okay=False, help="Read the post body from a file."),
    wpm: Optional[int] = typer.Option(None, "--wpm", help="Reading speed in words per minute."),
    detailed: bool = typer.Option(False, "--detailed", help="Show the slow/average/fast breakdown."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Estimate how long a post takes to read."""
    _setup_logging(verbose)
    content = _read_input(text, file)
    if wpm is None:
        wpm = load_settings()["reading_time"]["words_per_minute"]

    try:
        summary = reading_time.get_detailed_reading_time(content, wpm)
    except InvalidArgumentError as exc:
        raise _fail(exc) from exc
    console.print(summary, highlight=False, soft_wrap=True)

    if detailed:
        estimate = reading_time.get_reading_time_estimate(content)
        table = Table(title="Reading Time", show_header=True, header_style="bold magenta")
        table.add_column("Reader", style="cyan")
        table.add_column("WPM", justify="right")
        table.add_column("Minutes", justify="right")
        table.add_row("Slow", str(reading_time.SLOW_READER_WPM), str(estimate.slow_minutes))
        table.add_row("Average", str(reading_time.DEFAULT_WORDS_PER_MINUTE), str(estimate.average_minutes))
        table.add_row("Fast", str(reading_time.FAST_READER_WPM), str(estimate.fast_minutes))
        console.print(table)


# ------------------------------------------------------------------
# excerpt
# ------------------------------------------------------------------
@app.command()
def excerpt(
    text: Optional[str] = typer.Argument(None, help="Post body, or - for stdin."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, dir_okay=False, help="Read the post body from a file."),
    mode: ExcerptMode = typer.Option(ExcerptMode.length, "--mode", help="How to cut the excerpt."),
    length: Optional[int] = typer.Option(
        None, "--length", "-n", help="Characters, words or sentences depending on --mode."
    ),
    suffix: Optional[str] = typer.Option(None, "--suffix", help="Truncation marker."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Generate an excerpt from a post body."""
    _setup_logging(verbose)
    content = _read_input(text, file)
    settings = load_settings()
    if suffix is None:
        suffix = settings["excerpt"]["suffix"]

    try:
        if mode is ExcerptMode.length:
            n = length if length is not None else settings["excerpt"]["length"]
            result = excerpt_generator.generate_excerpt(content, n, suffix)
        elif mode is ExcerptMode.words:
            n = length if length is not None else settings["excerpt"]["word_count"]
            result = excerpt_generator.generate_excerpt_by_words(content, n, suffix)
        elif mode is ExcerptMode.sentences:
            n = length if length is not None else 1
            result = excerpt_generator.generate_excerpt_by_sentence(content, n)
        elif mode is ExcerptMode.paragraph:
            result = excerpt_generator.generate_excerpt_from_first_paragraph(content)
        elif mode is ExcerptMode.meta:
            result = excerpt_generator.generate_meta_description(content)
        else:
            result = excerpt_generator.generate_twitter_description(content)
    except InvalidArgumentError as exc:
        raise _fail(exc) from exc
    console.print(result, markup=False, highlight=False, soft_wrap=True)


# ------------------------------------------------------------------
# strip
# ------------------------------------------------------------------
@app.command()
def strip(
    text: Optional[str] = typer.Argument(None, help="HTML text, or - for stdin."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, dir_okay=False, help="Read the HTML from a file."),
) -> None:
    """Strip tags and decode common entities."""
    console.print(strip_html_tags(_read_input(text, file)), markup=False, highlight=False, soft_wrap=True)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
