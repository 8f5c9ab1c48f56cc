"""CLI entry point for cargo-testdox."""

import asyncio
import logging
import os
import sys
from collections.abc import Sequence

from colorama import just_fix_windows_console

from cargo_testdox.config import TestdoxConfig
from cargo_testdox.models.result import RunReport
from cargo_testdox.render import render_report
from cargo_testdox.runner import RunnerLaunchError, run_cargo_test

# cargo runs `cargo-testdox testdox <args>` for `cargo testdox <args>`
SUBCOMMAND = "testdox"
LAUNCH_FAILURE_EXIT_CODE = 2


def cargo_args(argv: Sequence[str]) -> Sequence[str]:
    """Return the arguments to forward to ``cargo test``."""
    args = list(argv[1:])
    if args and args[0] == SUBCOMMAND:
        args.pop(0)
    return args


def log_results_summary(log: logging.Logger, report: RunReport) -> None:
    """Log test counts for the run."""
    counts = {"pass": 0, "fail": 0, "ignored": 0}
    for outcome in report.outcomes:
        counts[outcome.status] += 1
    log.info(
        "%d passed, %d failed, %d ignored (process %s)",
        counts["pass"],
        counts["fail"],
        counts["ignored"],
        "succeeded" if report.success else "failed",
    )


async def run(extra_args: Sequence[str], config: TestdoxConfig) -> int:
    """Run the tests, print the report and return the exit code."""
    log = logging.getLogger("cargo_testdox")
    color = config.use_color(sys.stdout.isatty())

    try:
        report = await run_cargo_test(extra_args, config, color=color)
    except RunnerLaunchError as e:
        log.error("%s", e)
        return LAUNCH_FAILURE_EXIT_CODE

    out, err = render_report(report, color=color)
    print(out, end="")
    print(err, end="", file=sys.stderr)

    log_results_summary(log, report)
    return 1 if report.failed else 0


def main() -> None:
    """CLI entry point."""
    config = TestdoxConfig.from_env(os.environ)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    just_fix_windows_console()

    exit_code = asyncio.run(run(cargo_args(sys.argv), config))
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
