"""Typed configuration schema and loader for the paragraph formatter.

The formatting core accepts any integers.  This layer is where user input is
validated before it reaches the core: sentence counts must be at least one,
the other counts non-negative, and each ``min_*`` must not exceed its ``max_*``.
"""

from __future__ import annotations

import os
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, conint, model_validator

from ..formatter import FormatOptions
from ..utils.errors import ConfigError

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class ParagraphSettings(BaseModel):
    """Sentence and word ranges per paragraph plus paragraph spacing."""

    min_sentences: conint(ge=1)
    max_sentences: conint(ge=1)
    min_words: conint(ge=0)
    max_words: conint(ge=0)
    line_breaks: conint(ge=0)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def check_ranges(self) -> "ParagraphSettings":
        if self.min_sentences > self.max_sentences:
            raise ValueError(
                f"min_sentences ({self.min_sentences}) exceeds "
                f"max_sentences ({self.max_sentences})"
            )
        if self.min_words > self.max_words:
            raise ValueError(
                f"min_words ({self.min_words}) exceeds max_words ({self.max_words})"
            )
        return self


class NoiseSettings(BaseModel):
    """Maximum random deviation of the per-paragraph targets."""

    sentence_variation: conint(ge=0)
    word_variation: conint(ge=0)

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    paragraphs: ParagraphSettings
    noise: NoiseSettings

    model_config = ConfigDict(extra="forbid")

    def to_options(self) -> FormatOptions:
        """Return fully populated :class:`FormatOptions` for the core."""

        return FormatOptions(
            min_sentences=self.paragraphs.min_sentences,
            max_sentences=self.paragraphs.max_sentences,
            min_words=self.paragraphs.min_words,
            max_words=self.paragraphs.max_words,
            line_breaks=self.paragraphs.line_breaks,
            sentence_variation=self.noise.sentence_variation,
            word_variation=self.noise.word_variation,
        )


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def _load_mapping(text: str, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"{source}: invalid YAML ({exc})") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: expected a mapping at the top level")
    return data


def load_defaults() -> dict[str, Any]:
    """Return the packaged ``defaults.yml`` as a plain dict."""

    text = (
        importlib_resources.files("paragrapher.config")
        .joinpath("defaults.yml")
        .read_text(encoding="utf-8")
    )
    return _load_mapping(text, "defaults.yml")


def load_config(path: str | os.PathLike[str] | None = None) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Raises
    ------
    ConfigError
        If the user file is not UTF-8, not valid YAML or not a mapping.
    pydantic.ValidationError
        If the merged configuration violates the schema.
    """

    merged = load_defaults()
    if path is not None:
        try:
            user_text = Path(path).read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ConfigError(f"{path}: not valid UTF-8 ({exc.reason})") from exc
        merged = deep_merge_dicts(merged, _load_mapping(user_text, str(path)))
    return ConfigModel.model_validate(merged)


__all__ = [
    "ConfigModel",
    "ParagraphSettings",
    "NoiseSettings",
    "deep_merge_dicts",
    "load_defaults",
    "load_config",
]
