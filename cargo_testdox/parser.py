"""Parse the human-readable output of ``cargo test``.

libtest prints free-form text with no schema or version, so every structural
marker below is a plain substring. A change to libtest's wording breaks the
parser; there is nothing to negotiate.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import replace

from cargo_testdox.humanize import humanize
from cargo_testdox.models.result import FailureDetail, Status, TestOutcome

log = logging.getLogger(__name__)

RESULT_PREFIX = "test "
SUMMARY_PREFIX = "result"
DOCTEST_MARKER = "(line "
STATUS_SEPARATOR = " ... "
PATH_SEPARATOR = "::"
TEST_MODULE_NAMES = frozenset({"tests", "test"})

PANIC_PREFIX = "thread"
PANIC_MARKER = "panicked at"
PANIC_NAME_PREFIX = "thread '"
PANIC_LOCATION_SEPARATOR = "' panicked at "

STATUS_TOKENS: Mapping[str, Status] = {
    "ok": "pass",
    "FAILED": "fail",
    "ignored": "ignored",
}


class ParseError(Exception):
    """Raised when runner output cannot be parsed."""


class UnrecognizedStatusError(ParseError):
    """Raised when a result line carries an unknown status word."""


def parse_status(token: str) -> Status:
    """Map a libtest status word to a status.

    Raises:
        UnrecognizedStatusError: If the token is not ``ok``, ``FAILED`` or
            ``ignored``

    """
    try:
        return STATUS_TOKENS[token]
    except KeyError:
        raise UnrecognizedStatusError(f"unhandled test status {token!r}") from None


def parse_line(line: str) -> TestOutcome | None:
    """Parse a single line of ``cargo test`` output.

    Args:
        line: One line of standard output

    Returns:
        The test outcome if the line reports a test result, otherwise None
        (build progress, the summary line, doc-tests).

    Raises:
        UnrecognizedStatusError: If the line is shaped like a result but its
            status word is unknown

    """
    if not line.startswith(RESULT_PREFIX):
        return None
    line = line.removeprefix(RESULT_PREFIX)
    if line.startswith(SUMMARY_PREFIX) or DOCTEST_MARKER in line:
        return None

    identifier, separator, token = line.partition(STATUS_SEPARATOR)
    if not separator:
        return None

    module_path, separator, raw_name = identifier.rpartition(PATH_SEPARATOR)
    if separator:
        module = prettify_module(module_path)
    else:
        module, raw_name = None, identifier

    return TestOutcome(
        identifier=identifier,
        module=module,
        name=humanize(raw_name),
        status=parse_status(token),
    )


def prettify_module(module_path: str) -> str | None:
    """Drop one trailing ``tests``/``test`` segment from a module path."""
    parts = module_path.split(PATH_SEPARATOR)
    if parts[-1] in TEST_MODULE_NAMES:
        parts.pop()
    return PATH_SEPARATOR.join(parts) or None


def extract_failures(output: str) -> dict[str, FailureDetail]:
    """Collect panic blocks from test output, keyed by test identifier.

    A block starts at a ``thread '<test>' panicked at <location>`` line and
    its message runs up to the next blank line or the end of the output.
    Malformed header lines are skipped.
    """
    failures: dict[str, FailureDetail] = {}
    lines = output.splitlines()

    for i, line in enumerate(lines):
        if not (line.startswith(PANIC_PREFIX) and PANIC_MARKER in line):
            continue
        if not line.startswith(PANIC_NAME_PREFIX):
            log.debug("Skipping panic line without test name: %r", line)
            continue
        test, separator, location = line.removeprefix(
            PANIC_NAME_PREFIX
        ).partition(PANIC_LOCATION_SEPARATOR)
        if not separator:
            log.debug("Skipping panic line without location: %r", line)
            continue

        message_lines: list[str] = []
        for next_line in lines[i + 1 :]:
            if not next_line:
                break
            message_lines.append(next_line)

        failures[test] = FailureDetail(
            message="\n".join(message_lines), location=location
        )

    return failures


def parse_test_results(output: str) -> Sequence[TestOutcome]:
    """Parse the standard output of ``cargo test`` into test outcomes.

    Failing tests get the details of their panic block attached, matched by
    exact identifier. Outcomes are sorted by identifier so the report does
    not depend on the order tests happened to finish in. Result lines with
    an unrecognized status are skipped.
    """
    failures = extract_failures(output)
    outcomes: dict[str, TestOutcome] = {}

    for line in output.splitlines():
        try:
            outcome = parse_line(line)
        except UnrecognizedStatusError as e:
            log.debug("Skipping result line: %s", e)
            continue
        if outcome is None:
            continue
        if outcome.status == "fail" and outcome.identifier in failures:
            outcome = replace(outcome, failure=failures[outcome.identifier])
        outcomes[outcome.identifier] = outcome

    return [outcomes[identifier] for identifier in sorted(outcomes)]
