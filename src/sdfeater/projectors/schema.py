"""
schema.org statements of a record.

Shared by the RDF graph, JSON-LD, RDFa and Microdata formats: each
recognized property contributes its first value under one schema.org
term. Identifier properties become database URLs.
"""

__all__ = ["schema_statements"]

from typing import List, Tuple

from sdfeater.core.constants import CHEBI_SEARCH_URL, DRUGBANK_DRUG_URL
from sdfeater.core.models import Molecule
from sdfeater.core.properties import SCHEMA_TERMS, PropertyKind

_URL_PREFIXES = {
    PropertyKind.CHEBI_ID: CHEBI_SEARCH_URL,
    PropertyKind.DRUGBANK_ID: DRUGBANK_DRUG_URL,
}


def schema_statements(molecule: Molecule) -> List[Tuple[str, str]]:
    """
    List ``(term, value)`` pairs of a record in property order.

    Example:
        >>> m = Molecule()
        >>> m.append_property_value("ChEBI ID", "CHEBI:15365")
        >>> m.append_property_value("FORMULA", "C9H8O4")
        >>> schema_statements(m)
        [('url', 'https://www.ebi.ac.uk/chebi/searchId.do?chebiId=CHEBI:15365'), ('molecularFormula', 'C9H8O4')]
    """
    statements = []
    for name, values in molecule.properties.items():
        kind = PropertyKind.from_name(name)
        term = SCHEMA_TERMS.get(kind) if kind is not None else None
        if term is None or not values:
            continue
        value = values[0]
        if kind in _URL_PREFIXES:
            value = _URL_PREFIXES[kind] + value
        statements.append((term, value))
    return statements
