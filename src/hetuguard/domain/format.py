"""
Textual format of the HETU code.

Pure functions with no I/O: normalization, the fixed positional pattern,
tokenizing into fields, and the checksum arithmetic.
"""

import re

from hetuguard.domain.constants import CHECK_CHARS, SEPARATOR_CENTURIES
from hetuguard.domain.models import HetuFields

_SEPARATOR_CLASS = "".join(re.escape(sep) for sep in SEPARATOR_CENTURIES)

HETU_PATTERN = re.compile(
    r"(?P<day>[0-9]{2})"
    r"(?P<month>[0-9]{2})"
    r"(?P<year>[0-9]{2})"
    rf"(?P<separator>[{_SEPARATOR_CLASS}])"
    r"(?P<individual>[0-9]{3})"
    rf"(?P<check_char>[{CHECK_CHARS}])"
)


def normalize(code: str, trim: bool = True) -> str:
    """Strip surrounding whitespace (when asked) and uppercase."""
    if trim:
        code = code.strip()
    return code.upper()


def tokenize(normalized: str) -> HetuFields | None:
    """
    Slice a normalized code into its six fields.

    Returns:
        HetuFields if the whole string matches the pattern, otherwise None
    """
    match = HETU_PATTERN.fullmatch(normalized)
    if match is None:
        return None
    return HetuFields(**match.groupdict())


def compute_check_char(checksum_digits: str) -> str:
    """Map the DDMMYYNNN digits to their check symbol."""
    return CHECK_CHARS[int(checksum_digits) % len(CHECK_CHARS)]
