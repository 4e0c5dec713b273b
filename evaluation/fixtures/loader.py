"""Access to the prose fixtures stored next to this module.

Each fixture is a ``<name>.txt`` file.  An optional ``<name>.expected.json``
records the sentence count the segmenter must produce for it.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

_ROOT = Path(__file__).resolve().parent


def list_fixtures(root: Path | str = _ROOT) -> list[str]:
    """Return sorted fixture basenames found in ``root``."""
    return sorted(txt.stem for txt in Path(root).glob("*.txt"))


def load_fixture(name: str) -> tuple[str, dict[str, Any]]:
    """Return ``(text, expectations)`` for fixture ``name``.

    ``expectations`` is empty when no ``.expected.json`` file exists.
    """
    txt_path = _ROOT / f"{name}.txt"
    exp_path = _ROOT / f"{name}.expected.json"
    text = txt_path.read_text(encoding="utf-8")
    expected: dict[str, Any] = {}
    if exp_path.exists():
        expected = json.loads(exp_path.read_text(encoding="utf-8"))
        if expected.get("doc") != txt_path.name:
            raise ValueError(f"expectation doc mismatch: {expected.get('doc')} != {txt_path.name}")
    return text, expected
