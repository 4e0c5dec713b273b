"""Typer-based command line interface for the paragraph formatter.

``paragrapher format`` reads a plain-text file, regroups it into paragraphs
and writes the result to ``--out`` (or stdout).  Ranges come from the packaged
defaults, an optional YAML file given with ``--config`` and finally the
individual ``--min-*``/``--max-*`` flags.  The merged values are validated
before any text is touched.  ``paragrapher defaults`` prints the built-in
configuration as YAML.

Exit codes
----------
0 success
3 I/O error (missing file, unsupported extension, decode failure)
4 configuration error (invalid YAML, unknown keys, negative or inverted ranges)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .formatter import format_text_into_paragraphs
from .io import read_file, write_file
from .stats import compute_stats
from .utils.errors import ConfigError, UnsupportedFormatError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="paragrapher",
    help="Regroup prose into paragraphs. Use 'paragrapher format' to format a file.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _describe_error(exc: Exception) -> str:
    """Return a one-line description of a configuration failure."""

    if isinstance(exc, ValidationError):
        err = exc.errors()[0]
        loc = ".".join(str(part) for part in err["loc"])
        return f"{loc}: {err['msg']}" if loc else err["msg"]
    text = str(exc).strip()
    return text.splitlines()[0] if text else type(exc).__name__


def _apply_overrides(cfg: ConfigModel, **overrides: int | None) -> ConfigModel:
    """Return a re-validated copy of ``cfg`` with non-``None`` overrides set.

    Keys are field names of either the ``paragraphs`` or the ``noise`` block.
    """

    data = cfg.model_dump()
    for key, value in overrides.items():
        if value is None:
            continue
        section = "paragraphs" if key in data["paragraphs"] else "noise"
        data[section][key] = value
    return ConfigModel.model_validate(data)


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


@app.callback()
def main() -> None:
    """Entry point for the paragrapher command group."""


@app.command("format")
def format_command(  # noqa: PLR0913
    in_path: Path = typer.Option(..., "--in", "--input", help="Input text file"),  # noqa: B008
    out_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out", help="Output file; stdout when omitted"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    min_sentences: Optional[int] = typer.Option(  # noqa: B008
        None, "--min-sentences", help="Minimum sentences per paragraph"
    ),
    max_sentences: Optional[int] = typer.Option(  # noqa: B008
        None, "--max-sentences", help="Maximum target sentences per paragraph"
    ),
    min_words: Optional[int] = typer.Option(  # noqa: B008
        None, "--min-words", help="Lower clamp of the word target"
    ),
    max_words: Optional[int] = typer.Option(  # noqa: B008
        None, "--max-words", help="Upper clamp of the word target"
    ),
    line_breaks: Optional[int] = typer.Option(  # noqa: B008
        None, "--line-breaks", help="Extra newlines between paragraphs"
    ),
    sentence_variation: Optional[int] = typer.Option(  # noqa: B008
        None, "--sentence-variation", help="Noise amplitude for the sentence target"
    ),
    word_variation: Optional[int] = typer.Option(  # noqa: B008
        None, "--word-variation", help="Noise amplitude for the word target"
    ),
    encoding_in: str = typer.Option("utf-8-sig", help="Input file encoding"),  # noqa: B008
    encoding_out: str = typer.Option("utf-8", help="Output file encoding"),  # noqa: B008
    show_stats: bool = typer.Option(  # noqa: B008
        False, "--stats", help="Print before/after statistics to stderr"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Format ``in_path`` into paragraphs."""

    if verbose:
        configure_logging(verbose=True)

    # Load configuration
    try:
        cfg = load_config(config_path)
        cfg = _apply_overrides(
            cfg,
            min_sentences=min_sentences,
            max_sentences=max_sentences,
            min_words=min_words,
            max_words=max_words,
            line_breaks=line_breaks,
            sentence_variation=sentence_variation,
            word_variation=word_variation,
        )
    except (ValidationError, ConfigError, OSError) as exc:
        _safe_exit(4, _describe_error(exc))
    if verbose:
        typer.echo("Loaded config", err=True)

    # Read input
    try:
        text = read_file(in_path, encoding=encoding_in)
    except (UnsupportedFormatError, UnicodeDecodeError, OSError) as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo(f"Read {len(text)} chars", err=True)

    with Timing() as t_fmt:
        formatted = format_text_into_paragraphs(text, cfg.to_options())
    if verbose:
        typer.echo(f"Formatted in {t_fmt.ms:.1f} ms", err=True)

    if show_stats:
        typer.echo(f"before: {compute_stats(text).describe()}", err=True)
        typer.echo(f"after:  {compute_stats(formatted).describe()}", err=True)

    # Write output
    if out_path is None:
        typer.echo(formatted)
        return
    try:
        write_file(out_path, formatted, encoding=encoding_out)
    except (UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo(f"Wrote {out_path}", err=True)


@app.command()
def defaults() -> None:
    """Print the built-in configuration as YAML."""

    cfg = load_config()
    typer.echo(yaml.safe_dump(cfg.model_dump(), sort_keys=False).rstrip())
