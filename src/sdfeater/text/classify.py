"""
Line classification for SDF / molfile V2000 text.

Pure functions: a trimmed line plus the current section go in, a LineKind
comes out. Token conversion to atoms and bonds lives here too so the
parser only deals with already-typed values.
"""

__all__ = [
    "LineKind",
    "classify_line",
    "tokenize",
    "parse_atom",
    "parse_bond",
    "extract_property_name",
    "is_int",
]

import re
from enum import Enum
from typing import List

from sdfeater.core.config import CONFIG
from sdfeater.core.exceptions import MalformedFieldError
from sdfeater.core.models import Atom, Bond


class LineKind(Enum):
    HEADER_END = "header_end"
    ATOM = "atom"
    BOND = "bond"
    DIRECTIVE = "directive"
    PROPERTY_TAG = "property_tag"
    TERMINATOR = "terminator"
    VALUE = "value"
    BLANK = "blank"
    NOISE = "noise"


_DIRECTIVE_PATTERN = re.compile(r"M\s+\w+.*", re.ASCII)
_TAG_NAME_PATTERN = re.compile(r"<([^>]*)>")
_INT_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_PATTERN = re.compile(
    r"[+-]?(NaN|Infinity|(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?)[fFdD]?", re.ASCII
)

_INT_RANGE = (-(2**31), 2**31 - 1)
_BYTE_RANGE = (-128, 127)


def tokenize(line: str) -> List[str]:
    """Split a trimmed line on runs of whitespace."""
    return line.split()


def is_int(token: str) -> bool:
    """
    Check whether a token is a signed 32-bit integer.

    Example:
        >>> is_int("12")
        True
        >>> is_int("+3")
        True
        >>> is_int("V2000")
        False
    """
    if _INT_PATTERN.fullmatch(token) is None:
        return False
    return _INT_RANGE[0] <= int(token) <= _INT_RANGE[1]


def _is_header_end(line: str) -> bool:
    offset = CONFIG["header_end_offset"]
    return line.startswith(CONFIG["header_end_token"], offset)


def _is_bond_line(tokens: List[str]) -> bool:
    if len(tokens) == 7:
        return not tokens[6].startswith(CONFIG["version_tag"]) and is_int(tokens[0])
    return len(tokens) == 6 and is_int(tokens[0])


def classify_line(line: str, in_properties: bool) -> LineKind:
    """
    Classify one trimmed line.

    Any line carrying ``END`` at offset 3 ends the header, which covers
    ``M  END`` but also other lines with the same three characters at
    that position.

    Args:
        line: Input line with surrounding whitespace removed
        in_properties: True once the molfile header of the record ended

    Returns:
        The kind of the line

    Example:
        >>> classify_line("M  END", False)
        <LineKind.HEADER_END: 'header_end'>
        >>> classify_line("> <ChEBI ID>", True)
        <LineKind.PROPERTY_TAG: 'property_tag'>
        >>> classify_line("1 2 1 0 0 0", False)
        <LineKind.BOND: 'bond'>
    """
    if _is_header_end(line):
        return LineKind.HEADER_END
    if _DIRECTIVE_PATTERN.fullmatch(line):
        return LineKind.DIRECTIVE
    if not line:
        return LineKind.BLANK

    if not in_properties:
        tokens = tokenize(line)
        if len(tokens) == CONFIG["atom_line_tokens"]:
            return LineKind.ATOM
        if _is_bond_line(tokens):
            return LineKind.BOND
        return LineKind.NOISE

    if "".join(line.split()).startswith("><"):
        return LineKind.PROPERTY_TAG
    if line.startswith(CONFIG["terminator"]):
        return LineKind.TERMINATOR
    return LineKind.VALUE


def _parse_float(token: str, field: str) -> float:
    if _FLOAT_PATTERN.fullmatch(token) is None:
        raise MalformedFieldError(
            f"Invalid {field} coordinate: {token!r}", field=field, token=token
        )
    return float(token.rstrip("fFdD"))


def _parse_int(token: str, field: str, bounds=_INT_RANGE) -> int:
    if _INT_PATTERN.fullmatch(token) is None:
        raise MalformedFieldError(
            f"Invalid bond {field}: {token!r}", field=field, token=token
        )
    value = int(token)
    if not bounds[0] <= value <= bounds[1]:
        raise MalformedFieldError(
            f"Bond {field} out of range: {token!r}", field=field, token=token
        )
    return value


def parse_atom(tokens: List[str]) -> Atom:
    """
    Build an Atom from the 16 tokens of an atom line.

    Raises:
        MalformedFieldError: If a coordinate is not a number
    """
    return Atom(
        symbol=tokens[3],
        x=_parse_float(tokens[0], "x"),
        y=_parse_float(tokens[1], "y"),
        z=_parse_float(tokens[2], "z"),
    )


def parse_bond(tokens: List[str]) -> Bond:
    """
    Build a Bond from the tokens of a bond line.

    Atom indices are 32-bit integers, type and stereo are single bytes.

    Raises:
        MalformedFieldError: If a field is not an integer in range
    """
    return Bond(
        atom1=_parse_int(tokens[0], "atom1"),
        atom2=_parse_int(tokens[1], "atom2"),
        type=_parse_int(tokens[2], "type", _BYTE_RANGE),
        stereo=_parse_int(tokens[3], "stereo", _BYTE_RANGE),
    )


def extract_property_name(line: str) -> str:
    """
    Name of a property tag line: the first ``<...>`` group.

    Example:
        >>> extract_property_name("> <ChEBI Name>")
        'ChEBI Name'
        >>> extract_property_name(">  <Mass>  (1)")
        'Mass'
    """
    match = _TAG_NAME_PATTERN.search(line)
    if match:
        return match.group(1)
    return line.split("<", 1)[1] if "<" in line else ""
