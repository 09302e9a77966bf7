"""Shared pytest fixtures for the full safetext test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from safetext.text.normalizer import ByteRangeNormalizer


@pytest.fixture
def normalizer() -> ByteRangeNormalizer:
    """Provide a fresh normalizer with the default tables."""

    return ByteRangeNormalizer()


@pytest.fixture
def legacy_file(tmp_path: Path) -> Callable[[bytes, str], Path]:
    """Provide a factory writing raw legacy bytes to a temporary file."""

    def _write(data: bytes, name: str = "export.txt") -> Path:
        """Write `data` under `tmp_path` and return its path."""

        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write
