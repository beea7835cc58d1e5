"""
Projector interface.

A projector turns one finished record into output text. ``begin`` and
``end`` frame the whole stream for formats that produce one document.
"""

__all__ = ["Projector"]

from typing import Tuple

from sdfeater.core.config import OutputFormat
from sdfeater.core.models import Molecule
from sdfeater.projectors.context import ProjectionContext


class Projector:
    """Base class for output projectors."""

    formats: Tuple[OutputFormat, ...] = ()

    def begin(self, context: ProjectionContext) -> str:
        """Text written before the first record."""
        return ""

    def project(self, molecule: Molecule, context: ProjectionContext) -> str:
        """Text for one record; may be empty."""
        raise NotImplementedError

    def end(self, context: ProjectionContext) -> str:
        """Text written after the last record."""
        return ""
