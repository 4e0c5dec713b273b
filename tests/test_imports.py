"""Smoke tests for package import and version."""

import paragrapher


def test_import_package() -> None:
    assert isinstance(paragrapher, object)


def test_version() -> None:
    assert paragrapher.__version__ == "0.1.0"
