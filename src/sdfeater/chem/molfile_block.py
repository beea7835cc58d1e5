"""
Molfile V2000 block writer for the CVME skos:example literal.

Rebuilds a compact molfile from the parsed atoms and bonds: a counts
line, fixed-column atom and bond lines, and the ``M  END`` marker.
"""

__all__ = [
    "format_general",
    "counts_line",
    "atom_line",
    "bond_line",
    "molfile_block",
]

from decimal import ROUND_HALF_UP, Decimal
from typing import List

from sdfeater.core.config import CONFIG
from sdfeater.core.models import Atom, Bond, Molecule

_ATOM_SUFFIX = "  ".join(["0"] * 12)
_BOND_SUFFIX = "  0  0  0"


def format_general(value: float, digits: int = CONFIG["coordinate_digits"]) -> str:
    """
    Format a number in general notation with a fixed count of significant digits.

    The shortest decimal form of the value is rounded half up. Values whose
    rounded magnitude is in ``[1e-4, 10**digits)`` use plain notation,
    others use scientific notation with a two digit exponent. Trailing
    zeros are kept.

    Args:
        value: Number to format
        digits: Significant digits

    Returns:
        Formatted number

    Example:
        >>> format_general(1.5)
        '1.500'
        >>> format_general(-0.7145)
        '-0.7145'
        >>> format_general(0.0)
        '0.000'
        >>> format_general(0.00001)
        '1.000e-05'
    """
    number = Decimal(repr(float(value)))
    if number.is_zero():
        sign = "-" if number.is_signed() else ""
        return sign + format(Decimal(0).quantize(Decimal(1).scaleb(1 - digits)), "f")

    quantum = Decimal(1).scaleb(number.adjusted() - digits + 1)
    rounded = number.quantize(quantum, rounding=ROUND_HALF_UP)
    exponent = rounded.adjusted()

    if Decimal("1e-4") <= abs(rounded) < Decimal(10) ** digits:
        decimals = max(digits - 1 - exponent, 0)
        return format(rounded.quantize(Decimal(1).scaleb(-decimals)), "f")

    mantissa = rounded.scaleb(-exponent).quantize(Decimal(1).scaleb(1 - digits))
    sign = "-" if exponent < 0 else "+"
    return f"{format(mantissa, 'f')}e{sign}{abs(exponent):02d}"


def _right_align(number: int) -> str:
    # Up to three columns; wider numbers overflow to the left
    if number <= 9:
        return f"  {number}"
    if number <= 99:
        return f" {number}"
    return str(number)


def counts_line(atom_count: int, bond_count: int) -> str:
    """
    Counts line of the block.

    Example:
        >>> counts_line(3, 2)
        '  3  2  0  0  0  0            999 V2000'
    """
    return _right_align(atom_count) + _right_align(bond_count) + CONFIG["counts_suffix"]


def _coordinate_field(value: float) -> str:
    text = format_general(value)
    if value < 0:
        if len(text) == 6:
            text += "0"
        elif len(text) == 5:
            text += "00"
        return "   " + text
    if len(text) == 5:
        text += "0"
    elif len(text) == 4:
        text += "00"
    return "    " + text


def atom_line(atom: Atom) -> str:
    """
    Fixed-column atom line.

    Example:
        >>> atom_line(Atom("C", 1.5, -0.25, 0.0))
        '    1.5000   -0.2500    0.0000 C   0  0  0  0  0  0  0  0  0  0  0  0'
    """
    line = "".join(_coordinate_field(v) for v in (atom.x, atom.y, atom.z))
    symbol = f" {atom.symbol}   " if len(atom.symbol) == 1 else f" {atom.symbol}  "
    line += symbol + _ATOM_SUFFIX
    return line.replace(",", ".")


def bond_line(bond: Bond) -> str:
    """
    Fixed-column bond line.

    Example:
        >>> bond_line(Bond(1, 2, 1, 0))
        '  1  2  1  0  0  0  0'
    """
    return (
        _right_align(bond.atom1)
        + _right_align(bond.atom2)
        + f"  {bond.type}"
        + f"  {bond.stereo}"
        + _BOND_SUFFIX
    )


def molfile_block(molecule: Molecule) -> str:
    """
    Molfile text of a molecule, without a trailing newline.

    The block opens with an empty name line, a ``  CT`` program line and
    an empty comment line.
    """
    lines: List[str] = ["", "", "  CT", ""]
    lines.append(counts_line(len(molecule.atoms), len(molecule.bonds)))
    lines.extend(atom_line(atom) for atom in molecule.atoms)
    lines.extend(bond_line(bond) for bond in molecule.bonds)
    lines.append("M  END")
    return "\n".join(lines)
