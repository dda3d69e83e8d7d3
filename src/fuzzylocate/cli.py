"""CLI entry point for fuzzylocate."""

from pathlib import Path

import click

from .config import settings
from .matcher import StreamingFuzzyMatcher
from .schemas.match import Match
from .snapshot import TextSnapshot
from .utils.levenshtein import fuzzy_eq, normalized_similarity
from .utils.logging_setup import get_logger, setup_logging


def _chunks(text: str, chunk_size: int | None) -> list[str]:
    """Split text into fixed-size pieces (whole text when chunk_size is unset)."""
    if not chunk_size:
        return [text]
    return [text[i : i + chunk_size] for i in range(0, len(text), chunk_size)]


def _describe(match: Match) -> str:
    return f"rows {match.start_row + 1}-{match.end_row}  bytes {match.start}..{match.end}  cost {match.cost}"


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
def main(verbose: bool):
    """Fuzzylocate - find where a streamed, imperfect excerpt sits in a document."""
    if verbose:
        settings.log_level = "DEBUG"
    setup_logging()


@main.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("query", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--hint", type=int, default=None, help="Approximate document row (0-based)")
@click.option(
    "--chunk-size",
    type=click.IntRange(min=1),
    default=None,
    help="Stream the query this many characters at a time",
)
@click.option("--show", is_flag=True, help="Print the matched document text")
def locate(document: Path, query: Path, hint: int | None, chunk_size: int | None, show: bool):
    """Locate the region of DOCUMENT that QUERY reproduces."""
    logger = get_logger(__name__)

    snapshot = TextSnapshot.from_path(document)
    matcher = StreamingFuzzyMatcher(snapshot)

    query_text = query.read_text(encoding="utf-8")
    for chunk in _chunks(query_text, chunk_size):
        matcher.push(chunk, hint)
    matches = matcher.finish()

    logger.info(
        "Located query",
        document=document.name,
        query_lines=len(matcher.query_lines()),
        candidates=len(matches),
    )

    if not matches:
        click.echo("Error: No match found", err=True)
        raise SystemExit(1)

    click.echo(f"Candidates: {len(matches)}")
    for match in matches:
        click.echo(f"  {_describe(match)}")

    best = matcher.select_best_match()
    if best is None:
        click.echo("Selected: none (ambiguous)")
        return

    click.echo(f"Selected: {_describe(best)}")
    if show:
        click.echo(snapshot.text_for(best))


@main.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("query", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--hint", type=int, default=None, help="Approximate document row (0-based)")
@click.option(
    "--chunk-size",
    type=click.IntRange(min=1),
    default=16,
    show_default=True,
    help="Characters per push",
)
def replay(document: Path, query: Path, hint: int | None, chunk_size: int):
    """Show the best-so-far answer after every pushed chunk of QUERY."""
    snapshot = TextSnapshot.from_path(document)
    matcher = StreamingFuzzyMatcher(snapshot)

    query_text = query.read_text(encoding="utf-8")
    for step, chunk in enumerate(_chunks(query_text, chunk_size), start=1):
        best = matcher.push(chunk, hint)
        status = _describe(best) if best else "no match yet"
        click.echo(f"[{step:03d}] {chunk!r} -> {status}")

    matches = matcher.finish()
    click.echo(f"Final candidates: {len(matches)}")
    for match in matches:
        click.echo(f"  {_describe(match)}")


@main.command()
@click.argument("left")
@click.argument("right")
def similarity(left: str, right: str):
    """Show how similar two lines are after trimming."""
    left, right = left.strip(), right.strip()
    score = normalized_similarity(left, right)
    equal = fuzzy_eq(left, right, settings.fuzzy_threshold)

    click.echo(f"Similarity: {score:.3f}")
    click.echo(f"Fuzzy equal: {'yes' if equal else 'no'} (threshold {settings.fuzzy_threshold})")


if __name__ == "__main__":
    main()
