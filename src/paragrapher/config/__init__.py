"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. Command line overrides applied by :mod:`paragrapher.cli`
"""

from .schema import ConfigModel, NoiseSettings, ParagraphSettings, load_config

__all__ = ["ConfigModel", "NoiseSettings", "ParagraphSettings", "load_config"]
