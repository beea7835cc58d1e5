"""
Converter configuration and settings.

Named defaults, the closed set of output formats and subject modes, and
the policy applied to records with malformed numeric fields.
"""

from enum import Enum
from typing import Any, Dict

from .exceptions import UnsupportedFormatError, UnsupportedSubjectError

__all__ = [
    "CONFIG",
    "DATASET",
    "OutputFormat",
    "SubjectMode",
    "ErrorPolicy",
    "resolve_format",
    "resolve_subject",
]

# ====================================================================
# CONVERTER CONFIGURATION
# ====================================================================

CONFIG: Dict[str, Any] = {
    "app_name": "SDFEater",
    "app_url": "https://github.com/lszeremeta/SDFEater",
    # Base of sequential subject IRIs; the record number is appended
    "subject_base": "https://example.com/molecule#entity",
    "default_subject": "iri",
    "input_encoding": "utf-8",
    # Undecodable bytes become U+FFFD instead of failing the run
    "input_errors": "replace",
    # Molfile markers
    "header_end_token": "END",
    "header_end_offset": 3,
    "terminator": "$$$$",
    "version_tag": "V",
    "atom_line_tokens": 16,
    # Fixed tail of the molfile counts line
    "counts_suffix": "  0  0  0  0            999 V2000",
    "coordinate_digits": 4,
}

# Schema.org Dataset description emitted by the document formats
DATASET: Dict[str, Any] = {
    "name": "Molecules",
    "description": "This is a dataset of molecules generated by SDFEater.",
    "keywords": ["molecules", "cheminformatics", "chemical compounds"],
    "license": "http://opendatacommons.org/licenses/pddl/1.0/",
    "creator_name": CONFIG["app_name"],
    "url": CONFIG["app_url"],
}


class OutputFormat(str, Enum):
    """Closed set of output modes."""

    CYPHER = "cypher"
    CYPHER_URLS = "cypheru"
    CYPHER_PERIODIC = "cypherp"
    CYPHER_URLS_PERIODIC = "cypherup"
    CVME = "cvme"
    SMILES = "smiles"
    INCHI = "inchi"
    TURTLE = "turtle"
    NTRIPLES = "ntriples"
    RDFXML = "rdfxml"
    N3 = "n3"
    TRIG = "trig"
    JSONLD = "jsonld"
    JSONLD_HTML = "jsonldhtml"
    RDFA = "rdfa"
    MICRODATA = "microdata"
    DEBUG = "debug"

    @property
    def enriches_links(self) -> bool:
        """Whether property values are rewritten into database URLs."""
        return self in (
            OutputFormat.CYPHER_URLS,
            OutputFormat.CYPHER_URLS_PERIODIC,
            OutputFormat.CVME,
        )

    @property
    def needs_periodic_table(self) -> bool:
        return self in (
            OutputFormat.CYPHER_PERIODIC,
            OutputFormat.CYPHER_URLS_PERIODIC,
        )

    @property
    def uses_graph(self) -> bool:
        """Whether output goes through the shared RDF graph."""
        return self in (
            OutputFormat.TURTLE,
            OutputFormat.NTRIPLES,
            OutputFormat.RDFXML,
            OutputFormat.N3,
            OutputFormat.TRIG,
        )


class SubjectMode(str, Enum):
    """How a record is named in identity-bearing formats."""

    IRI = "iri"
    UUID = "uuid"
    BNODE = "bnode"


class ErrorPolicy(str, Enum):
    """What to do with a record whose numeric fields fail to parse."""

    ABORT = "abort"
    SKIP_RECORD = "skip"


def resolve_format(
    name: str,
    urls: bool = False,
    periodic: bool = False,
) -> OutputFormat:
    """
    Resolve a format name and the Cypher flags into an OutputFormat.

    The ``urls`` and ``periodic`` flags only refine ``cypher``; every
    other format ignores them.

    Args:
        name: Format name (case-insensitive)
        urls: Rewrite database identifiers into full URLs
        periodic: Add periodic table attributes to atoms

    Returns:
        The selected output format

    Raises:
        UnsupportedFormatError: If the name is not a known format

    Example:
        >>> resolve_format("cypher", urls=True)
        <OutputFormat.CYPHER_URLS: 'cypheru'>
    """
    key = (name or "").strip().lower()
    if key == OutputFormat.CYPHER.value:
        if urls and periodic:
            return OutputFormat.CYPHER_URLS_PERIODIC
        if urls:
            return OutputFormat.CYPHER_URLS
        if periodic:
            return OutputFormat.CYPHER_PERIODIC
        return OutputFormat.CYPHER
    try:
        return OutputFormat(key)
    except ValueError:
        raise UnsupportedFormatError(
            f"The selected format is not supported: {name}",
            details={"format": name},
        ) from None


def resolve_subject(name: str) -> SubjectMode:
    """Resolve a subject mode name (iri, uuid, bnode)."""
    try:
        return SubjectMode((name or "").strip().lower())
    except ValueError:
        raise UnsupportedSubjectError(
            f"Incorrect subject type selected: {name}",
            details={"subject": name},
        ) from None
