"""
Recognized SDF property names.

ChEBI and DrugBank exports spell the same data differently (``Formulae``
vs ``FORMULA``); both spellings resolve to one PropertyKind. Names not in
the table resolve to None and are ignored by the schema.org formats.
"""

from enum import Enum
from types import MappingProxyType
from typing import Optional

__all__ = ["PropertyKind", "SCHEMA_TERMS", "CANONICAL_NAMES"]


class PropertyKind(Enum):
    CHEBI_ID = "ChEBI ID"
    DRUGBANK_ID = "DATABASE_ID"
    SMILES = "SMILES"
    FORMULA = "Formulae"
    DEFINITION = "Definition"
    INCHI_KEY = "InChIKey"
    INCHI = "InChI"
    MASS = "Mass"
    IUPAC_NAME = "IUPAC Names"
    CAS_NUMBER = "CAS Registry Numbers"
    SYNONYMS = "Synonyms"
    COMMON_NAME = "COMMON_NAME"
    # Cross-references (link enriched names)
    PUBMED = "PubMed Citation Links"
    KNAPSACK = "KNApSAcK Database Links"
    LIPID_MAPS = "LIPID MAPS instance Database Links"
    UNIPROT = "UniProt Database Links"
    RHEA = "Rhea Database Links"
    KEGG_COMPOUND = "KEGG COMPOUND Database Links"
    PATENT = "Patent Database Links"
    PUBCHEM_MOLECULE = "PubChem Database Molecule Links"
    PUBCHEM_SUBSTANCE = "PubChem Database Substance Links"

    @classmethod
    def from_name(cls, name: str) -> Optional["PropertyKind"]:
        """
        Resolve a property name, including alternate spellings.

        Example:
            >>> PropertyKind.from_name("INCHI_KEY")
            <PropertyKind.INCHI_KEY: 'InChIKey'>
            >>> PropertyKind.from_name("Star") is None
            True
        """
        return _BY_NAME.get(name)


_ALIASES = {
    "DRUGBANK_ID": PropertyKind.DRUGBANK_ID,
    "FORMULA": PropertyKind.FORMULA,
    "INCHI_KEY": PropertyKind.INCHI_KEY,
    "INCHI_IDENTIFIER": PropertyKind.INCHI,
    "MOLECULAR_WEIGHT": PropertyKind.MASS,
    "JCHEM_IUPAC": PropertyKind.IUPAC_NAME,
    "CAS_NUMBER": PropertyKind.CAS_NUMBER,
    "SYNONYMS": PropertyKind.SYNONYMS,
    "GENERIC_NAME": PropertyKind.COMMON_NAME,
}

_BY_NAME = MappingProxyType(
    {**{kind.value: kind for kind in PropertyKind}, **_ALIASES}
)

# Names matched by the CVME format, which ignores alternate spellings
CANONICAL_NAMES = MappingProxyType({kind.value: kind for kind in PropertyKind})

# schema.org term per kind for the structured data formats
SCHEMA_TERMS = MappingProxyType(
    {
        PropertyKind.CHEBI_ID: "url",
        PropertyKind.DRUGBANK_ID: "url",
        PropertyKind.SMILES: "smiles",
        PropertyKind.FORMULA: "molecularFormula",
        PropertyKind.DEFINITION: "description",
        PropertyKind.INCHI_KEY: "inChIKey",
        PropertyKind.INCHI: "inChI",
        PropertyKind.MASS: "molecularWeight",
        PropertyKind.IUPAC_NAME: "iupacName",
        PropertyKind.CAS_NUMBER: "identifier",
        PropertyKind.SYNONYMS: "alternateName",
        PropertyKind.COMMON_NAME: "name",
    }
)
