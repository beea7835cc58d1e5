"""
Debug projector: a readable dump of the parsed record.
"""

__all__ = ["DebugProjector"]

from loguru import logger

from sdfeater.core.config import OutputFormat
from sdfeater.core.models import Molecule
from sdfeater.projectors.base import Projector
from sdfeater.projectors.context import ProjectionContext
from sdfeater.text.values import format_float


class DebugProjector(Projector):
    formats = (OutputFormat.DEBUG,)

    def project(self, molecule: Molecule, context: ProjectionContext) -> str:
        lines = []
        for name, values in molecule.properties.items():
            lines.append(f"Key = {name}")
            lines.append(f"Values = [{', '.join(values)}]")
        for atom in molecule.atoms:
            coords = ",".join(format_float(v) for v in (atom.x, atom.y, atom.z))
            lines.append(f"{atom.symbol} ({coords})")
        for bond in molecule.bonds:
            # Bond indices are not validated against the atom block
            if not (
                1 <= bond.atom1 <= len(molecule.atoms)
                and 1 <= bond.atom2 <= len(molecule.atoms)
            ):
                logger.warning(
                    f"Bond {bond.atom1}-{bond.atom2} refers to a missing atom"
                )
                continue
            first = molecule.atoms[bond.atom1 - 1].symbol
            second = molecule.atoms[bond.atom2 - 1].symbol
            lines.append(
                f"({first}[{bond.atom1}])--{bond.type}--({second}[{bond.atom2}])"
            )
        return "".join(line + "\n" for line in lines)
