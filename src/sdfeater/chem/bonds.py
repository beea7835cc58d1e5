"""
Bond type and stereo vocabulary of the molfile V2000 bond block.

Unsupported codes map to the ``"0"`` sentinel, which callers treat as
"omit this field".
"""

__all__ = ["UNSUPPORTED", "bond_type_label", "bond_stereo_label"]

from types import MappingProxyType

UNSUPPORTED = "0"

# Types 4 to 8 are query types in the V2000 format
BOND_TYPES = MappingProxyType(
    {
        1: "single",
        2: "double",
        3: "triple",
        4: "aromatic",
        5: "single or double",
        6: "single or aromatic",
        7: "double or aromatic",
        8: "any",
    }
)

# Stereo labels per bond type, already in Cypher literal form
BOND_STEREO = MappingProxyType(
    {
        1: MappingProxyType({0: "false", 1: '"up"', 4: '"either"', 6: '"down"'}),
        2: MappingProxyType(
            {0: '"not determined"', 3: '"cis or trans (either) double bond"'}
        ),
    }
)


def bond_type_label(bond_type: int) -> str:
    """
    Name of a bond type code.

    Example:
        >>> bond_type_label(2)
        'double'
        >>> bond_type_label(9)
        '0'
    """
    return BOND_TYPES.get(bond_type, UNSUPPORTED)


def bond_stereo_label(stereo: int, bond_type: int) -> str:
    """
    Stereo label of a bond; its meaning depends on the bond type.

    Example:
        >>> bond_stereo_label(1, 1)
        '"up"'
        >>> bond_stereo_label(0, 1)
        'false'
        >>> bond_stereo_label(1, 2)
        '0'
    """
    return BOND_STEREO.get(bond_type, {}).get(stereo, UNSUPPORTED)
