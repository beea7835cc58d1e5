"""
sdfeater - Streaming SDF/molfile converter.

This package is organized into focused subpackages:

- core/        Configuration, constants, models and exceptions
               - config: CONFIG, OutputFormat, SubjectMode, resolve_format
               - models: Atom, Bond, Molecule

- text/        Pure text utilities (no dependencies)
               - classify: classify_line, parse_atom, parse_bond
               - values: is_number, is_url, render_*_value

- chem/        Chemistry helpers
               - bonds: bond_type_label, bond_stereo_label
               - molfile_block: molfile_block, format_general
               - periodic: PeriodicTable

- links/       Database cross-reference URLs
- rdf/         RDF graph utilities (requires rdflib)
- html/        Document envelopes (requires jinja2)
- projectors/  One projector per output family

Usage:
    from sdfeater import SDFParser, resolve_format

    parser = SDFParser(resolve_format("cypher", urls=True))
    parser.parse_file("chebi.sdf")
"""

__version__ = "0.1.0"

from sdfeater.core import (
    CONFIG,
    OutputFormat,
    SubjectMode,
    ErrorPolicy,
    resolve_format,
    resolve_subject,
    Atom,
    Bond,
    Molecule,
    PropertyKind,
    SDFEaterError,
    MalformedFieldError,
    SDFParseError,
    UnsupportedFormatError,
    UnsupportedSubjectError,
)
from sdfeater.projectors import ProjectionContext, get_projector
from sdfeater.parser import SDFParser, ParseStats

__all__ = [
    "__version__",
    # core
    "CONFIG",
    "OutputFormat",
    "SubjectMode",
    "ErrorPolicy",
    "resolve_format",
    "resolve_subject",
    "Atom",
    "Bond",
    "Molecule",
    "PropertyKind",
    "SDFEaterError",
    "MalformedFieldError",
    "SDFParseError",
    "UnsupportedFormatError",
    "UnsupportedSubjectError",
    # projectors
    "ProjectionContext",
    "get_projector",
    # parser
    "SDFParser",
    "ParseStats",
]
