"""
Value classification and rendering for the text output formats.

Property values are stored raw; each format decides here whether a value
is written as a bare number, a link or a quoted string.
"""

__all__ = [
    "is_number",
    "is_url",
    "render_cypher_value",
    "render_cvme_value",
    "render_json_value",
    "format_float",
]

import json
import re
from urllib.parse import urlsplit

import numpy as np

from sdfeater.text.strings import escape_literal

_NUMBER_PATTERN = re.compile(r"-?\d+(\.\d+)?", re.ASCII)
# JSON forbids leading zeros in the integer part
_LEADING_ZERO = re.compile(r"-?0\d", re.ASCII)

# Schemes with a registered URL handler
_URL_SCHEMES = frozenset({"http", "https", "ftp", "file", "jar", "mailto"})
# RFC 3986 reserved, unreserved and percent characters
_URI_CHARS = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*")
_BAD_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")


def is_number(value: str) -> bool:
    """
    Check whether a value is a plain decimal number.

    Example:
        >>> is_number("152.23340")
        True
        >>> is_number("4695-62-9")
        False
        >>> is_number("1e5")
        False
    """
    return _NUMBER_PATTERN.fullmatch(value) is not None


def is_url(value: str) -> bool:
    """
    Check whether a value is an absolute URL that is also a valid URI.

    Example:
        >>> is_url("https://www.ebi.ac.uk/chebi/searchId.do?chebiId=1")
        True
        >>> is_url("CHEBI:1")
        False
        >>> is_url("http://example.com/a b")
        False
    """
    scheme, sep, _ = value.partition(":")
    if not sep or scheme.lower() not in _URL_SCHEMES:
        return False
    if _URI_CHARS.fullmatch(value) is None or _BAD_PERCENT.search(value):
        return False
    try:
        urlsplit(value)
    except ValueError:
        return False
    return True


def render_cypher_value(value: str) -> str:
    """Number as is, anything else as an escaped single-quoted string."""
    if is_number(value):
        return value
    return f"'{escape_literal(value)}'"


def render_cvme_value(value: str) -> str:
    """Number as is, URL in angle brackets, else an escaped quoted string."""
    if is_number(value):
        return value
    if is_url(value):
        return f"<{value}>"
    return f"'{escape_literal(value)}'"


def render_json_value(value: str) -> str:
    """
    Number as is, anything else as a JSON string.

    Numbers keep their source text, so ``152.23340`` is not rewritten
    to ``152.2334``. Zero padded values such as ``007`` stay strings.
    """
    if is_number(value) and not _LEADING_ZERO.match(value):
        return value
    return json.dumps(value, ensure_ascii=False)


def format_float(value: float) -> str:
    """
    Shortest text of a single precision float, Java style.

    Plain notation between 1e-3 and 1e7, computerized scientific notation
    outside of it.

    Example:
        >>> format_float(1.5)
        '1.5'
        >>> format_float(0.0)
        '0.0'
        >>> format_float(0.0001)
        '1.0E-4'
    """
    single = np.float32(value)
    magnitude = abs(float(single))
    if magnitude == 0.0 or 1e-3 <= magnitude < 1e7:
        return np.format_float_positional(single, trim="0")
    text = np.format_float_scientific(single, trim="0", exp_digits=1)
    mantissa, exponent = text.split("e")
    return f"{mantissa}E{int(exponent)}"
