"""Format test outcomes and runner errors for the terminal."""

from collections.abc import Mapping

from colorama import Fore, Style

from cargo_testdox.models.result import (
    FailureDetail,
    InvocationError,
    RunReport,
    Status,
    TestOutcome,
)

STATUS_SYMBOLS: Mapping[Status, str] = {
    "pass": "✔",
    "fail": "x",
    "ignored": "?",
}

STATUS_COLORS: Mapping[Status, str] = {
    "pass": Fore.LIGHTGREEN_EX,
    "fail": Fore.LIGHTRED_EX,
    "ignored": Fore.LIGHTYELLOW_EX,
}

MODULE_COLOR = Fore.LIGHTBLUE_EX
MODULE_SEPARATOR = " – "


def paint(text: str, color: str, *, enabled: bool) -> str:
    if not enabled:
        return text
    return f"{color}{text}{Style.RESET_ALL}"


def format_status(status: Status, *, color: bool = False) -> str:
    return paint(STATUS_SYMBOLS[status], STATUS_COLORS[status], enabled=color)


def format_failure(failure: FailureDetail) -> str:
    return str(failure)


def format_outcome(outcome: TestOutcome, *, color: bool = False) -> str:
    """Format one outcome as ``<symbol> [<module> – ]<name>``.

    Failure details, when present, follow on the next lines.
    """
    line = format_status(outcome.status, color=color)
    if outcome.module:
        line += " " + paint(outcome.module, MODULE_COLOR, enabled=color)
        line += MODULE_SEPARATOR + outcome.name
    else:
        line += " " + outcome.name
    if outcome.failure:
        line += "\n" + format_failure(outcome.failure)
    return line


def format_error(error: InvocationError) -> str:
    return str(error)


def render_report(report: RunReport, *, color: bool = False) -> tuple[str, str]:
    """Render a report as ``(stdout, stderr)`` text.

    Outcomes go to stdout, one per line. The invocation error goes to
    stderr, preceded by a blank line on stdout when outcomes were printed.
    """
    out = "".join(
        format_outcome(outcome, color=color) + "\n" for outcome in report.outcomes
    )
    err = ""
    if report.error:
        if report.outcomes:
            out += "\n"
        err = format_error(report.error) + "\n"
    return out, err
