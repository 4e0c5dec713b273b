"""Lightweight profiling harness for the formatting pipeline.

``profile_pipeline``
    Time the segment, group and render stages for a single piece of text
    using the same wiring as :func:`paragrapher.format_text_into_paragraphs`.

``profile_fixtures``
    Load prose fixtures, synthesise larger documents by repeating their
    contents and return per-stage timings for each.

Neither function prints or logs; results are returned to the caller.
"""

from __future__ import annotations

import os
from time import perf_counter
from typing import Dict, List

from evaluation.fixtures import loader as fixtures_loader
from paragrapher.formatter import FormatOptions, resolve_options
from paragrapher.layout.grouper import group_into_paragraphs
from paragrapher.layout.render import render_paragraphs
from paragrapher.preprocess.segmenter import parse_sentences

__all__ = ["STAGES", "profile_pipeline", "profile_fixtures"]

STAGES = ("segment", "group", "render", "total")


def profile_pipeline(text: str, options: FormatOptions | None = None) -> Dict[str, float]:
    """Return per-stage timings in seconds for formatting ``text``."""

    timings: Dict[str, float] = {}
    total_start = perf_counter()
    config, noise = resolve_options(options)

    t0 = perf_counter()
    sentences = parse_sentences(text)
    timings["segment"] = perf_counter() - t0

    t0 = perf_counter()
    paragraphs = group_into_paragraphs(sentences, config, noise)
    timings["group"] = perf_counter() - t0

    t0 = perf_counter()
    render_paragraphs(paragraphs, config.line_breaks)
    timings["render"] = perf_counter() - t0

    timings["total"] = perf_counter() - total_start
    return timings


def profile_fixtures(
    names: List[str] | None = None,
    *,
    repeat: int | None = None,
) -> List[Dict[str, object]]:
    """Return timing bundles for fixture texts.

    ``repeat`` defaults to the ``PARAGRAPHER_PERF_REPEAT`` environment variable
    or ``10``.
    """

    all_names = fixtures_loader.list_fixtures()
    selected = all_names if names is None else [n for n in all_names if n in set(names)]

    if repeat is None:
        try:
            repeat = int(os.getenv("PARAGRAPHER_PERF_REPEAT", "10"))
        except ValueError:
            repeat = 10

    results: List[Dict[str, object]] = []
    for name in selected:
        text, _expected = fixtures_loader.load_fixture(name)
        synthetic = "\n\n".join(text for _ in range(repeat))
        results.append(
            {
                "name": name,
                "chars": len(synthetic),
                "stages": profile_pipeline(synthetic),
                "repeat": repeat,
            }
        )
    return results


if __name__ == "__main__":  # pragma: no cover - convenience wrapper
    import argparse

    parser = argparse.ArgumentParser(description="Profile prose fixtures")
    parser.add_argument("--names", type=str, default=None, help="Comma separated fixture names")
    parser.add_argument("--repeat", type=int, default=None, help="Repeat count")
    args = parser.parse_args()

    names_arg = args.names.split(",") if args.names else None
    out = profile_fixtures(names_arg, repeat=args.repeat)

    header = f"{'name':<20} {'chars':>8} {'repeat':>6} {'total_ms':>9}"
    print(header)
    print("-" * len(header))
    for item in out:
        total_ms = item["stages"]["total"] * 1000.0  # type: ignore[index]
        print(f"{item['name']:<20} {item['chars']:>8} {item['repeat']:>6} {total_ms:>9.1f}")
