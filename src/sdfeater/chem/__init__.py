"""
Chemistry subpackage - bond vocabulary, periodic table and molfile writer.
"""

from sdfeater.chem.bonds import (
    UNSUPPORTED,
    bond_type_label,
    bond_stereo_label,
)
from sdfeater.chem.molfile_block import (
    format_general,
    counts_line,
    atom_line,
    bond_line,
    molfile_block,
)
from sdfeater.chem.periodic import PeriodicTable

__all__ = [
    # bonds
    "UNSUPPORTED",
    "bond_type_label",
    "bond_stereo_label",
    # molfile_block
    "format_general",
    "counts_line",
    "atom_line",
    "bond_line",
    "molfile_block",
    # periodic
    "PeriodicTable",
]
