"""
Constants: RDF namespaces, vocabulary terms and other immutable values.
"""

from rdflib import Namespace
from rdflib.namespace import RDF

__all__ = [
    "SCHEMA",
    "RDF",
    "GRAPH_NAMESPACES",
    "MOLECULAR_ENTITY",
    "CHEBI_SEARCH_URL",
    "DRUGBANK_DRUG_URL",
    "JSONLD_CONTEXT_TERMS",
]

# ====================================================================
# RDF NAMESPACES
# ====================================================================

SCHEMA = Namespace("http://schema.org/")

GRAPH_NAMESPACES = {
    "schema": "http://schema.org/",
    "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
}

MOLECULAR_ENTITY = SCHEMA["MolecularEntity"]

# ====================================================================
# URLS
# ====================================================================

# Used by the schema.org formats for identifier properties
CHEBI_SEARCH_URL = "https://www.ebi.ac.uk/chebi/searchId.do?chebiId="
DRUGBANK_DRUG_URL = "https://go.drugbank.com/drugs/"

# ====================================================================
# JSON-LD
# ====================================================================

# Terms declared in the JSON-LD @context, in output order
JSONLD_CONTEXT_TERMS = (
    "identifier",
    "name",
    "inChIKey",
    "inChI",
    "smiles",
    "url",
    "iupacName",
    "molecularFormula",
    "molecularWeight",
    "monoisotopicMolecularWeight",
    "description",
    "disambiguatingDescription",
    "image",
    "alternateName",
    "sameAs",
)
