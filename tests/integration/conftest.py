"""Fixtures for integration tests."""

import stat
from pathlib import Path
from typing import Protocol

import pytest


class FakeCargoFn(Protocol):
    """Protocol for fake cargo creation function."""

    def __call__(
        self, *, stdout: str = "", stderr: str = "", exit_code: int = 0
    ) -> Path:
        """Create a fake cargo executable and return its path."""


@pytest.fixture
def fake_cargo(tmp_path: Path) -> FakeCargoFn:
    """Return a function creating a script that replays cargo output.

    The script records its arguments and CARGO_TERM_COLOR in ``args.txt``
    and ``color.txt`` next to itself.
    """

    def _create(*, stdout: str = "", stderr: str = "", exit_code: int = 0) -> Path:
        (tmp_path / "stdout.txt").write_text(stdout)
        (tmp_path / "stderr.txt").write_text(stderr)
        script = tmp_path / "cargo"
        script.write_text(
            "#!/bin/sh\n"
            f'dir="{tmp_path}"\n'
            'printf "%s\\n" "$@" > "$dir/args.txt"\n'
            'printf "%s" "$CARGO_TERM_COLOR" > "$dir/color.txt"\n'
            'cat "$dir/stdout.txt"\n'
            'cat "$dir/stderr.txt" >&2\n'
            f"exit {exit_code}\n"
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR)
        return script

    return _create
