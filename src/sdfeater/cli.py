"""
Command-line entry point.

Converts an SDF file to one of the supported formats on stdout;
diagnostics go to stderr through loguru.

Usage:
    sdfeater --input molecules.sdf --format cypher --urls
    sdfeater --input molecules.sdf --format jsonld --subject uuid
"""

__all__ = ["convert", "configure_logging", "main"]

import functools
import sys
from typing import Optional

import fire
from loguru import logger

from sdfeater.core.config import (
    CONFIG,
    ErrorPolicy,
    resolve_format,
    resolve_subject,
)
from sdfeater.core.exceptions import SDFEaterError, SDFParseError
from sdfeater.parser import SDFParser
from sdfeater.projectors import ProjectionContext

EXIT_OK = 0
EXIT_INVALID_OPTION = 1
EXIT_PARSE_FAILURE = 3


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr, WARNING and up unless verbose."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def _echo_header(line: str) -> None:
    sys.stderr.write(line + "\n")


def convert(
    input: str,
    format: str,
    subject: str = CONFIG["default_subject"],
    urls: bool = False,
    periodic: bool = False,
    subject_base: str = CONFIG["subject_base"],
    skip_malformed: bool = False,
    echo_header: bool = False,
    verbose: bool = False,
) -> int:
    """Convert an SDF file and print the result.

    Args:
        input: Input file path
        format: Output format (cypher, cvme, smiles, inchi, turtle, ntriples,
            rdfxml, n3, trig, jsonld, jsonldhtml, rdfa, microdata, debug)
        subject: Subject type for identity-bearing formats (iri, uuid, bnode)
        urls: Generate full database URLs instead of IDs (cypher; always on in cvme)
        periodic: Add periodic table data to atoms (cypher)
        subject_base: Base IRI of sequential subjects
        skip_malformed: Skip records with malformed numbers instead of stopping
        echo_header: Echo molfile header lines to stderr
        verbose: Log debug messages

    Returns:
        Process exit code
    """
    configure_logging(verbose)

    try:
        output_format = resolve_format(str(format), urls=urls, periodic=periodic)
        subject_mode = resolve_subject(str(subject))
    except SDFEaterError as exc:
        logger.error(exc.message)
        return EXIT_INVALID_OPTION

    context = ProjectionContext(
        output_format,
        subject_mode=subject_mode,
        subject_base=subject_base,
    )

    parser = SDFParser(
        output_format,
        context,
        echo=_echo_header if echo_header else None,
        on_error=ErrorPolicy.SKIP_RECORD if skip_malformed else ErrorPolicy.ABORT,
    )
    logger.debug(f"Converting {input} to {output_format.value}")

    try:
        parser.parse_file(str(input), sys.stdout)
    except OSError as exc:
        logger.error(f"Error while reading file: {exc}")
        return EXIT_PARSE_FAILURE
    except SDFParseError as exc:
        logger.error(exc.message)
        return EXIT_PARSE_FAILURE
    except ValueError as exc:
        logger.error(f"Error while decoding file: {exc}")
        return EXIT_PARSE_FAILURE
    sys.stdout.flush()
    return EXIT_OK


def _exit_with_code(func):
    @functools.wraps(func)
    def run(*args, **kwargs):
        sys.exit(func(*args, **kwargs))

    return run


def main(argv: Optional[list] = None) -> None:
    """Console script entry point; exits with the conversion exit code."""
    fire.Fire(_exit_with_code(convert), command=argv, name="sdfeater")


if __name__ == "__main__":
    main()
