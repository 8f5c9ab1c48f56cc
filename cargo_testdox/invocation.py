"""Extract the actionable part of a runner error from stderr."""

from cargo_testdox.models.result import InvocationError

ERROR_MARKER = "error"
TIP_MARKER = "tip:"
BLOCK_TERMINATORS = ("error:", "warning:", "Usage:")


def extract_error(stderr: str) -> InvocationError:
    """Find the first error message in ``stderr`` and its tip, if any.

    Lines after the error are searched for a ``tip:`` up to the next
    diagnostic or the usage banner, whichever comes first. If no line
    mentions an error, the whole trimmed text becomes the message.
    """
    lines = stderr.splitlines()

    for i, line in enumerate(lines):
        if ERROR_MARKER not in line:
            continue

        tip = None
        for next_line in lines[i + 1 :]:
            if any(terminator in next_line for terminator in BLOCK_TERMINATORS):
                break
            if TIP_MARKER in next_line:
                tip = next_line.strip()

        return InvocationError(message=line.strip(), tip=tip)

    return InvocationError(message=stderr.strip())
