"""
Streaming SDF parser and projection dispatcher.

Reads an SDF stream line by line in a single pass. Each record is
accumulated in one Molecule; at every ``$$$$`` terminator the selected
projector renders it and the accumulator is reset.
"""

__all__ = ["ParseState", "ParseStats", "SDFParser"]

import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Optional, TextIO, Union

from loguru import logger

from sdfeater.core.config import CONFIG, ErrorPolicy, OutputFormat
from sdfeater.core.exceptions import MalformedFieldError, SDFParseError
from sdfeater.core.models import Molecule
from sdfeater.links.table import enrich
from sdfeater.projectors import ProjectionContext, Projector, get_projector
from sdfeater.text.classify import (
    LineKind,
    classify_line,
    extract_property_name,
    parse_atom,
    parse_bond,
    tokenize,
)


class ParseState(Enum):
    IN_HEADER = "in_header"
    IN_PROPERTIES = "in_properties"


@dataclass
class ParseStats:
    """Counters of one run."""

    lines: int = 0
    records: int = 0
    skipped: int = 0


class SDFParser:
    """
    Single-pass SDF to output format converter.

    Args:
        output_format: Selected output format
        context: Shared projection state; a default one when omitted
        echo: Called with header lines that are neither atoms nor bonds
            (title, program and counts lines)
        on_error: What to do with a record holding a malformed number

    Example:
        >>> parser = SDFParser(OutputFormat.SMILES)
        >>> stats = parser.parse_lines(["", "M  END", "> <SMILES>", "CCO", "$$$$"])
        CCO
        >>> stats.records
        1
    """

    def __init__(
        self,
        output_format: OutputFormat,
        context: Optional[ProjectionContext] = None,
        echo: Optional[Callable[[str], None]] = None,
        on_error: ErrorPolicy = ErrorPolicy.ABORT,
    ):
        self.output_format = output_format
        self.context = context or ProjectionContext(output_format)
        self.projector: Projector = get_projector(output_format)
        self.echo = echo
        self.on_error = on_error

        self.molecule = Molecule()
        self.state = ParseState.IN_HEADER
        self.property_name = ""
        self._skipping = False

    def parse_file(
        self, path: Union[str, Path], out: Optional[TextIO] = None
    ) -> ParseStats:
        """
        Convert an SDF file.

        Raises:
            OSError: If the file cannot be read
            SDFParseError: If a record is malformed and the policy aborts
        """
        logger.debug(f"Reading {path}")
        with open(
            path, encoding=CONFIG["input_encoding"], errors=CONFIG["input_errors"]
        ) as handle:
            return self.parse_lines(handle, out)

    def parse_lines(
        self, lines: Iterable[str], out: Optional[TextIO] = None
    ) -> ParseStats:
        """
        Convert SDF text given as an iterable of lines.

        Args:
            lines: Input lines, with or without line terminators
            out: Output stream (stdout when omitted)

        Returns:
            Run statistics
        """
        out = out if out is not None else sys.stdout
        stats = ParseStats()

        out.write(self.projector.begin(self.context))
        for number, raw in enumerate(lines, start=1):
            stats.lines += 1
            self._feed(raw.strip(), number, out, stats)
        out.write(self.projector.end(self.context))

        if not self.molecule.is_empty or self._skipping:
            logger.warning("Input ended inside a record; the record was discarded")
        self._restart()

        logger.info(
            f"Converted {stats.records} records from {stats.lines} lines"
            f" ({stats.skipped} skipped)"
        )
        return stats

    def _restart(self) -> None:
        self.molecule.reset()
        self.state = ParseState.IN_HEADER
        self.property_name = ""
        self._skipping = False

    def _feed(self, line: str, number: int, out: TextIO, stats: ParseStats) -> None:
        if self._skipping:
            if line.startswith(CONFIG["terminator"]):
                stats.skipped += 1
                self._restart()
            return

        kind = classify_line(line, self.state is ParseState.IN_PROPERTIES)

        if kind is LineKind.HEADER_END:
            self.state = ParseState.IN_PROPERTIES
        elif kind is LineKind.DIRECTIVE:
            return
        elif self.state is ParseState.IN_HEADER:
            self._feed_header(kind, line, number)
        else:
            self._feed_properties(kind, line, out, stats)

    def _feed_header(self, kind: LineKind, line: str, number: int) -> None:
        try:
            if kind is LineKind.ATOM:
                self.molecule.add_atom(parse_atom(tokenize(line)))
            elif kind is LineKind.BOND:
                self.molecule.add_bond(parse_bond(tokenize(line)))
            elif self.echo is not None:
                self.echo(line)
        except MalformedFieldError as exc:
            if self.on_error is ErrorPolicy.ABORT:
                raise SDFParseError(
                    f"Error while parsing line {number}: {exc.message}",
                    line_number=number,
                ) from exc
            logger.warning(f"Skipping record at line {number}: {exc.message}")
            self.molecule.reset()
            self._skipping = True

    def _feed_properties(
        self, kind: LineKind, line: str, out: TextIO, stats: ParseStats
    ) -> None:
        if kind is LineKind.PROPERTY_TAG:
            self.property_name = extract_property_name(line)
        elif kind is LineKind.TERMINATOR:
            out.write(self.projector.project(self.molecule, self.context))
            stats.records += 1
            logger.debug(f"Projected record {stats.records}")
            self._restart()
        elif kind is LineKind.VALUE:
            if self.output_format.enriches_links:
                for name, value in enrich(self.property_name, line):
                    self.molecule.append_property_value(name, value)
            else:
                self.molecule.append_property_value(self.property_name, line)
