"""
Converter exceptions.

Fatal conditions are exceptions; lookup misses (periodic table, bond
vocabulary) are plain absent values and never raise.
"""

from enum import Enum
from typing import Optional

__all__ = [
    "ErrorCode",
    "SDFEaterError",
    "MalformedFieldError",
    "SDFParseError",
    "UnsupportedFormatError",
    "UnsupportedSubjectError",
]


class ErrorCode(str, Enum):
    """Error codes for the converter."""

    MALFORMED_FIELD = "MALFORMED_FIELD"
    PARSE_FAILED = "PARSE_FAILED"
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    UNSUPPORTED_SUBJECT = "UNSUPPORTED_SUBJECT"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class SDFEaterError(Exception):
    """Base exception for the converter."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class MalformedFieldError(SDFEaterError):
    """Raised when an atom or bond field is not a valid number."""

    def __init__(self, message: str, field: str, token: str):
        super().__init__(
            message,
            code=ErrorCode.MALFORMED_FIELD,
            details={"field": field, "token": token},
        )
        self.field = field
        self.token = token


class SDFParseError(SDFEaterError):
    """Raised when the input stream cannot be converted."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(
            message,
            code=ErrorCode.PARSE_FAILED,
            details={"line": line_number},
        )
        self.line_number = line_number


class UnsupportedFormatError(SDFEaterError):
    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message, code=ErrorCode.UNSUPPORTED_FORMAT, details=details)


class UnsupportedSubjectError(SDFEaterError):
    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message, code=ErrorCode.UNSUPPORTED_SUBJECT, details=details)
