"""
Data models for SDF records.

Atoms and bonds are immutable values; a Molecule accumulates one SDF
record at a time and is reset between records.
"""

from uuid import UUID, uuid4
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

__all__ = ["Atom", "Bond", "Molecule"]


@dataclass(frozen=True)
class Atom:
    """Atom from a molfile atom block, coordinates at single precision."""

    symbol: str
    x: float
    y: float
    z: float

    def __post_init__(self):
        for axis in ("x", "y", "z"):
            object.__setattr__(self, axis, float(np.float32(getattr(self, axis))))


@dataclass(frozen=True)
class Bond:
    """Bond between two 1-based atom indices (kept verbatim, not validated)."""

    atom1: int
    atom2: int
    type: int
    stereo: int


@dataclass
class Molecule:
    """
    Record accumulator for a single SDF entry.

    Properties keep their first-insertion order. A property only exists
    once it has at least one value, unless ``set_property`` is called
    directly.
    """

    atoms: List[Atom] = field(default_factory=list)
    bonds: List[Bond] = field(default_factory=list)
    properties: Dict[str, List[str]] = field(default_factory=dict)
    uuid: UUID = field(default_factory=uuid4)

    def add_atom(self, atom: Atom) -> None:
        self.atoms.append(atom)

    def add_bond(self, bond: Bond) -> None:
        self.bonds.append(bond)

    def set_property(self, name: str) -> None:
        """Create (or replace) the value list of a property with an empty one."""
        self.properties[name] = []

    def append_property_value(self, name: str, value: str) -> None:
        """
        Append a value to a property, creating it on first use.

        Args:
            name: Property name (may be empty for values before any tag)
            value: Raw property value

        Example:
            >>> m = Molecule()
            >>> m.append_property_value("Synonyms", "fenchone")
            >>> m.append_property_value("Synonyms", "2-fenchanone")
            >>> m.get_property("Synonyms")
            ['fenchone', '2-fenchanone']
        """
        self.properties.setdefault(name, []).append(value)

    def get_property(self, name: str) -> Optional[List[str]]:
        return self.properties.get(name)

    def first_value(self, name: str) -> Optional[str]:
        """First value of a property, or None if absent."""
        values = self.properties.get(name)
        return values[0] if values else None

    def reset(self) -> None:
        """Clear all data and draw a fresh identity for the next record."""
        self.atoms.clear()
        self.bonds.clear()
        self.properties.clear()
        self.uuid = uuid4()

    def uuid_token(self, underscored: bool = False) -> str:
        """
        Record identity as text.

        Args:
            underscored: Cypher-safe variant with a leading underscore
                and dashes replaced by underscores

        Returns:
            ``xxxxxxxx-xxxx-...`` or ``_xxxxxxxx_xxxx_...``
        """
        text = str(self.uuid)
        if underscored:
            return "_" + text.replace("-", "_")
        return text

    @property
    def is_empty(self) -> bool:
        return not (self.atoms or self.bonds or self.properties)
