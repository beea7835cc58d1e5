"""
Projectors subpackage - one projector per output family.

- cypher:      Cypher CREATE statements (with link/periodic variants)
- cvme:        ChemSKOS statements with an embedded molfile block
- identifiers: SMILES and InChI, one line per record
- graph:       rdflib Graph sink (turtle, ntriples, rdfxml, n3, trig)
- jsonld:      JSON-LD document, plain or inside HTML
- markup:      RDFa and Microdata HTML documents
- debug:       raw record dump
"""

from sdfeater.core.config import OutputFormat
from sdfeater.core.exceptions import UnsupportedFormatError
from sdfeater.projectors.base import Projector
from sdfeater.projectors.context import ProjectionContext, Subject
from sdfeater.projectors.cvme import CvmeProjector
from sdfeater.projectors.cypher import CypherProjector
from sdfeater.projectors.debug import DebugProjector
from sdfeater.projectors.graph import GraphProjector
from sdfeater.projectors.identifiers import InchiProjector, SmilesProjector
from sdfeater.projectors.jsonld import JsonLdProjector
from sdfeater.projectors.markup import MicrodataProjector, RdfaProjector

__all__ = [
    "Projector",
    "ProjectionContext",
    "Subject",
    "CypherProjector",
    "CvmeProjector",
    "SmilesProjector",
    "InchiProjector",
    "GraphProjector",
    "JsonLdProjector",
    "RdfaProjector",
    "MicrodataProjector",
    "DebugProjector",
    "PROJECTORS",
    "get_projector",
]

PROJECTORS = {
    fmt: cls
    for cls in (
        CypherProjector,
        CvmeProjector,
        SmilesProjector,
        InchiProjector,
        GraphProjector,
        JsonLdProjector,
        RdfaProjector,
        MicrodataProjector,
        DebugProjector,
    )
    for fmt in cls.formats
}


def get_projector(output_format: OutputFormat) -> Projector:
    """
    Create the projector of an output format.

    Raises:
        UnsupportedFormatError: If no projector handles the format
    """
    try:
        return PROJECTORS[output_format]()
    except KeyError:
        raise UnsupportedFormatError(
            f"No projector for format: {output_format}",
            details={"format": str(output_format)},
        ) from None
