from __future__ import annotations

from pathlib import Path

import yaml
from typer.testing import CliRunner

from paragrapher.cli import app

ONE_PER_PARAGRAPH = [
    "--min-sentences",
    "1",
    "--max-sentences",
    "1",
    "--sentence-variation",
    "0",
    "--word-variation",
    "0",
]


def _write(tmp_path: Path, text: str, name: str = "in.txt") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_format_to_file(tmp_path: Path) -> None:
    in_txt = _write(tmp_path, "Dr. Smith went home.\nHe left at 5 p.m.\n  yesterday.\n")
    out_txt = tmp_path / "out" / "out.txt"
    runner = CliRunner()
    result = runner.invoke(app, ["format", "--in", str(in_txt), "--out", str(out_txt)])
    assert result.exit_code == 0
    assert out_txt.read_text(encoding="utf-8") == (
        "Dr. Smith went home. He left at 5 p.m. yesterday."
    )


def test_format_to_stdout(tmp_path: Path) -> None:
    in_txt = _write(tmp_path, "First one. Second one.")
    runner = CliRunner()
    result = runner.invoke(app, ["format", "--in", str(in_txt), *ONE_PER_PARAGRAPH])
    assert result.exit_code == 0
    assert result.stdout == "First one.\n\nSecond one.\n"


def test_line_breaks_override(tmp_path: Path) -> None:
    in_txt = _write(tmp_path, "First one. Second one.")
    runner = CliRunner()
    result = runner.invoke(
        app, ["format", "--in", str(in_txt), *ONE_PER_PARAGRAPH, "--line-breaks", "2"]
    )
    assert result.exit_code == 0
    assert result.stdout == "First one.\n\n\nSecond one.\n"


def test_config_file_then_flags(tmp_path: Path) -> None:
    in_txt = _write(tmp_path, "First one. Second one.")
    cfg = tmp_path / "cfg.yml"
    cfg.write_text(
        "paragraphs:\n  min_sentences: 1\n  max_sentences: 1\n  line_breaks: 3\n"
        "noise:\n  sentence_variation: 0\n  word_variation: 0\n",
        encoding="utf-8",
    )
    runner = CliRunner()
    result = runner.invoke(app, ["format", "--in", str(in_txt), "--config", str(cfg)])
    assert result.stdout == "First one.\n\n\n\nSecond one.\n"
    result = runner.invoke(
        app, ["format", "--in", str(in_txt), "--config", str(cfg), "--line-breaks", "0"]
    )
    assert result.stdout == "First one.\nSecond one.\n"


def test_empty_input_passes_through(tmp_path: Path) -> None:
    in_txt = _write(tmp_path, "")
    out_txt = tmp_path / "out.txt"
    runner = CliRunner()
    result = runner.invoke(app, ["format", "--in", str(in_txt), "--out", str(out_txt)])
    assert result.exit_code == 0
    assert out_txt.read_text(encoding="utf-8") == ""


def test_stats_and_verbose(tmp_path: Path) -> None:
    in_txt = _write(tmp_path, "First one. Second one.")
    out_txt = tmp_path / "out.txt"
    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "format",
            "--in",
            str(in_txt),
            "--out",
            str(out_txt),
            *ONE_PER_PARAGRAPH,
            "--stats",
            "--verbose",
        ],
    )
    assert result.exit_code == 0
    assert "Loaded config" in result.stderr
    assert "before: 22 chars, 4 words, 2 sentences, 1 paragraphs" in result.stderr
    assert "after:  23 chars, 4 words, 2 sentences, 2 paragraphs" in result.stderr
    assert "paragrapher.formatter" in result.stderr


def test_defaults_command() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["defaults"])
    assert result.exit_code == 0
    data = yaml.safe_load(result.stdout)
    assert data["paragraphs"]["min_sentences"] == 2
    assert data["paragraphs"]["line_breaks"] == 1
    assert data["noise"] == {"sentence_variation": 4, "word_variation": 10}
