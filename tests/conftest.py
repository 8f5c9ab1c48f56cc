"""Shared fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def read_testdata() -> Callable[[str], str]:
    """Return a function reading a file from tests/data."""

    def _read(name: str) -> str:
        return (DATA_DIR / name).read_text()

    return _read
