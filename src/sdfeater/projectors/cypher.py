"""
Cypher projector.

Each record becomes a Molecule node, one Atom node per atom, RELATED
edges from the molecule to its atoms and BOND_WITH edges between atoms.
Node variables carry the record UUID so records never collide.
"""

__all__ = ["CypherProjector", "cypher_key"]

import re
from typing import List

from loguru import logger

from sdfeater.chem.bonds import UNSUPPORTED, bond_stereo_label, bond_type_label
from sdfeater.core.config import OutputFormat
from sdfeater.core.models import Atom, Bond, Molecule
from sdfeater.projectors.base import Projector
from sdfeater.projectors.context import ProjectionContext
from sdfeater.text.strings import escape_literal
from sdfeater.text.values import format_float, render_cypher_value

_CAS_NAMES = re.compile(r"CAS Registry Numbers|CAS_NUMBER")
_KEY_NOISE = re.compile(r"\s+|-")


def cypher_key(name: str) -> str:
    """
    Property name as a Cypher map key.

    Example:
        >>> cypher_key("ChEBI ID")
        'ChEBIID'
        >>> cypher_key("CAS Registry Numbers")
        'CASNumber'
        >>> cypher_key("UM-BBD compID Database Links")
        'UMBBDcompIDDatabaseLinks'
    """
    return _KEY_NOISE.sub("", _CAS_NAMES.sub("CASNumber", name))


class CypherProjector(Projector):
    formats = (
        OutputFormat.CYPHER,
        OutputFormat.CYPHER_URLS,
        OutputFormat.CYPHER_PERIODIC,
        OutputFormat.CYPHER_URLS_PERIODIC,
    )

    def project(self, molecule: Molecule, context: ProjectionContext) -> str:
        token = molecule.uuid_token(underscored=True)
        lines = [self._molecule_node(molecule, token)]
        if molecule.atoms:
            lines.extend(
                self._atom_node(index, atom, token, context)
                for index, atom in enumerate(molecule.atoms, start=1)
            )
            lines.append(self._relations(len(molecule.atoms), token))
        if molecule.bonds:
            lines.append(self._bonds(molecule.bonds, token))
        lines.append(";")
        return "\n".join(lines) + "\n"

    def _molecule_node(self, molecule: Molecule, token: str) -> str:
        entries = []
        for name, values in molecule.properties.items():
            key = cypher_key(name)
            if not values or not key:
                continue
            if len(values) > 1:
                rendered = "[" + ", ".join(render_cypher_value(v) for v in values) + "]"
            else:
                rendered = render_cypher_value(values[0])
            entries.append(f"{key}: {rendered}")
        return f"CREATE (c{token}:Molecule {{{', '.join(entries)}}})"

    def _atom_node(
        self, index: int, atom: Atom, token: str, context: ProjectionContext
    ) -> str:
        fields = [
            f"symbol: '{escape_literal(atom.symbol)}'",
            f"x: {format_float(atom.x)}",
            f"y: {format_float(atom.y)}",
            f"z: {format_float(atom.z)}",
        ]
        if context.periodic_table is not None:
            fields.extend(self._periodic_fields(atom, context))
        return f"CREATE (a{index}{token}:Atom {{{', '.join(fields)}}})"

    def _periodic_fields(self, atom: Atom, context: ProjectionContext) -> List[str]:
        element = context.periodic_table.lookup(atom.symbol)
        if element is None:
            logger.debug(f"No periodic table data for {atom.symbol!r}")
            return []
        fields = []
        for key, value in element.items():
            # symbol is already the first field of the node
            if key == "symbol" or value is None:
                continue
            fields.append(f"{key}: {render_cypher_value(str(value))}")
        return fields

    def _relations(self, atom_count: int, token: str) -> str:
        edges = ",\n".join(
            f"(c{token})-[:RELATED]->(a{index}{token})"
            for index in range(1, atom_count + 1)
        )
        return f"CREATE\n{edges}"

    def _bonds(self, bonds: List[Bond], token: str) -> str:
        edges = []
        for bond in bonds:
            fields = []
            bond_type = bond_type_label(bond.type)
            if bond_type != UNSUPPORTED:
                fields.append(f'type: "{bond_type}"')
            stereo = bond_stereo_label(bond.stereo, bond.type)
            if stereo != UNSUPPORTED:
                fields.append(f"stereo: {stereo}")
            edges.append(
                f"(a{bond.atom1}{token})-[:BOND_WITH {{{', '.join(fields)}}}]"
                f"->(a{bond.atom2}{token})"
            )
        return "CREATE\n" + ",\n".join(edges)
