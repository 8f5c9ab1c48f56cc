"""Turn test function names into sentences."""

FN_SEPARATOR = "_fn_"


def humanize(identifier: str) -> str:
    """Format the name of a test function as a sentence.

    Underscores become spaces. To keep the underscores of a function name,
    put ``_fn_`` after it::

        parse_line_fn_parses_a_line  ->  parse_line parses a line

    """
    prefix, separator, rest = identifier.partition(FN_SEPARATOR)
    if separator:
        return f"{prefix} {spacify(rest)}"
    return spacify(identifier)


def spacify(text: str) -> str:
    """Replace underscores with single spaces, trimming both ends."""
    return " ".join(text.replace("_", " ").split())
