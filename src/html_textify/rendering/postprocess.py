"""Final whitespace normalization of a rendered buffer."""

import re

NEWLINE_RUN_RE = re.compile(r"\n\n+")


def normalize_output(text: str) -> str:
    """
    Clean up a fully rendered buffer.

    Drops the space following each newline, collapses runs of blank lines to
    a single blank line and trims the result.

    Args:
        text: Raw buffer contents

    Returns:
        Normalized text
    """
    text = text.replace("\n ", "\n")
    text = NEWLINE_RUN_RE.sub("\n\n", text)
    return text.strip()
