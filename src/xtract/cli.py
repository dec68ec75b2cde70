"""
Command line for xtract.

Entry point: xtract
"""
from __future__ import annotations

import logging
from pathlib import Path

import click

from ._config import XtractConfig
from ._corpus import SentenceIndex
from ._errors import XtractError
from ._extractor import Deadline, Xtract
from ._format import (
    format_candidates,
    format_histogram,
    format_result,
    format_table4,
)
from ._table import AnchorMatch

EXAMPLE = "Example: xtract -source ep-00-en.txt -word European"


@click.command(
    context_settings={"help_option_names": ["-h", "-help", "--help"]},
    epilog=EXAMPLE,
)
@click.option("-source", "--source", "source",
              type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="The corpus file, one sentence per line. Must be English.")
@click.option("-word", "--word", "word", type=str, default=None,
              help="The word used to search for collocations.")
@click.option("-printfrequencies", "--print-frequencies", "print_frequencies",
              is_flag=True, default=False,
              help="Print the most frequent words of the corpus instead.")
@click.option("-minfrequency", "--min-frequency", "min_frequency",
              type=click.IntRange(min=1), default=None,
              help="Lower frequency bound for -printfrequencies (default: 1000).")
@click.option("--k0", type=float, default=None,
              help="Minimum strength for Stage 1 (default: 1).")
@click.option("--k1", type=float, default=None,
              help="Peak height for interesting distances (default: 1).")
@click.option("--u0", type=float, default=None,
              help="Minimum spread for Stage 1 (default: 10).")
@click.option("--threshold", type=float, default=None,
              help="Stage 2 consensus threshold (default: 0.75).")
@click.option("--anchor-match",
              type=click.Choice([m.value for m in AnchorMatch]), default=None,
              help="Anchor occurrence used when a sentence repeats it (default: last).")
@click.option("--workers", type=click.IntRange(min=1), default=None,
              help="Threads for Stage 2 (default: 1).")
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), default=None,
              help="Give up on the word after this many seconds.")
@click.option("--skip-empty-tokens", is_flag=True, default=False,
              help="Do not count empty tokens left by runs of spaces.")
@click.option("--encoding", type=str, default=None,
              help="Corpus file encoding (default: utf-8).")
@click.option("--show-tables", is_flag=True, default=False,
              help="Also print the Stage 1 histogram (Table 2), Table 4 "
                   "and the Stage 1 candidates.")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log progress to stderr.")
@click.pass_context
def cli(ctx, source, word, print_frequencies, min_frequency, k0, k1, u0,
        threshold, anchor_match, workers, timeout, skip_empty_tokens, encoding,
        show_tables, verbose):
    """JXtract-style collocation extractor (Smadja's Xtract)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if source is None:
        raise click.UsageError("-source is required.", ctx=ctx)
    if not print_frequencies and not word:
        raise click.UsageError("give -word or -printfrequencies.", ctx=ctx)

    try:
        config = XtractConfig.from_overrides(
            k0=k0, k1=k1, u0=u0, threshold=threshold,
            anchor_match=anchor_match, workers=workers, timeout=timeout,
            skip_empty_tokens=skip_empty_tokens,
            encoding=encoding, min_frequency=min_frequency,
        )
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx) from e

    index = SentenceIndex(source, encoding=config.encoding)
    try:
        if print_frequencies:
            for w in sorted(index.word_frequencies(config.min_frequency)):
                click.echo(w)
        else:
            _collocations(Xtract(index, config), word, show_tables)
    except XtractError as e:
        raise click.ClickException(str(e)) from e


def _collocations(xtract: Xtract, word: str, show_tables: bool) -> None:
    click.echo(f"Finding collocations containing the word {word}")
    cfg = xtract.config
    deadline = Deadline(cfg.timeout) if cfg.timeout is not None else None

    table, candidates = xtract.stage_one(word)
    if show_tables:
        click.echo(format_histogram(table))
        click.echo(format_table4(table))
        click.echo(format_candidates(candidates))
    if deadline is not None:
        deadline.check(f"stage 1 for {word!r}")

    for result in xtract.run_stage_two(candidates, deadline):
        click.echo(format_result(result))


def main() -> None:
    cli()
