"""Smoke tests for package import and version."""

import combinable


def test_import_package() -> None:
    assert isinstance(combinable, object)


def test_version() -> None:
    assert combinable.__version__ == "0.1.0"


def test_public_factories_exported() -> None:
    for name in ("integers", "bytes_", "shorts", "longs", "characters", "strings", "constant"):
        assert callable(getattr(combinable, name))
