"""
CVME projector: Turtle-style ChemSKOS statements.

Known properties become SKOS, DBpedia or rdfs:seeAlso statements about
``<urn:uuid:...>``; the structure itself is embedded as a molfile block
in a ``skos:example`` literal. Only the ChEBI property names are
recognized here, not their alternate spellings.
"""

__all__ = ["CvmeProjector", "CVME_PREDICATES"]

from types import MappingProxyType

from sdfeater.chem.molfile_block import molfile_block
from sdfeater.core.config import OutputFormat
from sdfeater.core.models import Molecule
from sdfeater.core.properties import CANONICAL_NAMES, PropertyKind
from sdfeater.projectors.base import Projector
from sdfeater.projectors.context import ProjectionContext
from sdfeater.text.values import render_cvme_value

# kind -> (predicate, value suffix, all values or first only)
CVME_PREDICATES = MappingProxyType(
    {
        PropertyKind.SMILES: ("skos:notation", "^^chemskos:SMILES", False),
        PropertyKind.FORMULA: ("skos:hiddenLabel", "@en", False),
        PropertyKind.DEFINITION: ("skos:definition", "@en", False),
        PropertyKind.INCHI_KEY: ("dbp:inchikey", "@en", False),
        PropertyKind.INCHI: ("dbo:inchi", "@en", False),
        PropertyKind.MASS: ("dbo:molecularWeight", "@en", False),
        PropertyKind.IUPAC_NAME: ("skos:prefLabel", "@en", False),
        PropertyKind.CAS_NUMBER: ("dbo:casNumber", "@en", False),
        PropertyKind.SYNONYMS: ("skos:altLabel", "@en", True),
        PropertyKind.PUBMED: ("rdfs:seeAlso", "", True),
        PropertyKind.KNAPSACK: ("rdfs:seeAlso", "", True),
        PropertyKind.LIPID_MAPS: ("rdfs:seeAlso", "", True),
        PropertyKind.UNIPROT: ("rdfs:seeAlso", "", True),
        PropertyKind.RHEA: ("rdfs:seeAlso", "", True),
        PropertyKind.KEGG_COMPOUND: ("rdfs:seeAlso", "", False),
        PropertyKind.PATENT: ("cvme:patent", "", False),
        PropertyKind.PUBCHEM_MOLECULE: ("rdfs:seeAlso", "", False),
        PropertyKind.PUBCHEM_SUBSTANCE: ("rdfs:seeAlso", "", False),
    }
)


class CvmeProjector(Projector):
    formats = (OutputFormat.CVME,)

    def project(self, molecule: Molecule, context: ProjectionContext) -> str:
        subject = f"<urn:uuid:{molecule.uuid_token()}>"
        statements = []
        for name, values in molecule.properties.items():
            kind = CANONICAL_NAMES.get(name)
            if kind not in CVME_PREDICATES or not values:
                continue
            predicate, suffix, multi = CVME_PREDICATES[kind]
            objects = ", ".join(
                render_cvme_value(value) + suffix
                for value in (values if multi else values[:1])
            )
            statements.append(f"{subject} {predicate} {objects} .\n")

        example = f'{subject} skos:example """{molfile_block(molecule)}""" .\n'
        return "".join(statements) + "\n" + example
