"""Run ``cargo test`` and parse what it prints."""

import asyncio
import logging
import os
from collections.abc import Sequence

from cargo_testdox.config import TestdoxConfig
from cargo_testdox.invocation import extract_error
from cargo_testdox.models.result import RunReport
from cargo_testdox.parser import parse_test_results

log = logging.getLogger(__name__)


class RunnerLaunchError(Exception):
    """Raised when the test runner process cannot be started."""


async def run_cargo_test(
    extra_args: Sequence[str], config: TestdoxConfig, *, color: bool = False
) -> RunReport:
    """Run ``cargo test`` with extra arguments and build a report.

    Args:
        extra_args: Arguments forwarded verbatim after ``cargo test``
        config: Tool configuration (selects the cargo executable)
        color: Let cargo colorize its own diagnostics

    Returns:
        Parsed outcomes, plus the invocation error when cargo failed

    Raises:
        RunnerLaunchError: If the cargo process cannot be started

    """
    command = [config.cargo, "test", *extra_args]
    log.info("Running %s", " ".join(command))

    try:
        process = await asyncio.create_subprocess_exec(
            *command,
            env={**os.environ, "CARGO_TERM_COLOR": "always" if color else "never"},
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise RunnerLaunchError(f"Failed to run {command[0]!r}: {e}") from e

    stdout, stderr = await process.communicate()
    log.info("%s exited with code %s", command[0], process.returncode)

    success = process.returncode == 0
    outcomes = parse_test_results(stdout.decode(errors="replace"))
    error = None if success else extract_error(stderr.decode(errors="replace"))
    return RunReport(outcomes=outcomes, error=error, success=success)
