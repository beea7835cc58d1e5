"""
Core subpackage - configuration, constants, models and exceptions.
"""

from sdfeater.core.config import (
    CONFIG,
    DATASET,
    OutputFormat,
    SubjectMode,
    ErrorPolicy,
    resolve_format,
    resolve_subject,
)
from sdfeater.core.exceptions import (
    ErrorCode,
    SDFEaterError,
    MalformedFieldError,
    SDFParseError,
    UnsupportedFormatError,
    UnsupportedSubjectError,
)
from sdfeater.core.models import Atom, Bond, Molecule
from sdfeater.core.properties import PropertyKind

__all__ = [
    # config
    "CONFIG",
    "DATASET",
    "OutputFormat",
    "SubjectMode",
    "ErrorPolicy",
    "resolve_format",
    "resolve_subject",
    # exceptions
    "ErrorCode",
    "SDFEaterError",
    "MalformedFieldError",
    "SDFParseError",
    "UnsupportedFormatError",
    "UnsupportedSubjectError",
    # models
    "Atom",
    "Bond",
    "Molecule",
    "PropertyKind",
]
