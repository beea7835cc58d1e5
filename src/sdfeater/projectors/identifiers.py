"""
Line-per-record identifier projectors (SMILES and InChI).
"""

__all__ = ["IdentifierProjector", "SmilesProjector", "InchiProjector"]

from sdfeater.core.config import OutputFormat
from sdfeater.core.models import Molecule
from sdfeater.projectors.base import Projector
from sdfeater.projectors.context import ProjectionContext


class IdentifierProjector(Projector):
    """Write the first value of one property; an empty line when absent."""

    property_name = ""

    def project(self, molecule: Molecule, context: ProjectionContext) -> str:
        return (molecule.first_value(self.property_name) or "") + "\n"


class SmilesProjector(IdentifierProjector):
    formats = (OutputFormat.SMILES,)
    property_name = "SMILES"


class InchiProjector(IdentifierProjector):
    formats = (OutputFormat.INCHI,)
    property_name = "InChI"
