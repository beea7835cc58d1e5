"""
Document envelopes for the structured data formats - requires jinja2.

The JSON-LD, RDFa and Microdata outputs are single documents: a head
with the schema.org Dataset description is written before the first
record and a tail closes the document after the last one.
"""

__all__ = ["render_template", "document_head", "document_tail"]

from datetime import date
from functools import lru_cache
from typing import Optional

import jinja2

from sdfeater.core.config import DATASET, OutputFormat
from sdfeater.core.constants import JSONLD_CONTEXT_TERMS, SCHEMA

_HEAD_TEMPLATES = {
    OutputFormat.JSONLD: "jsonld_head.json.j2",
    OutputFormat.JSONLD_HTML: "jsonld_head.html.j2",
    OutputFormat.RDFA: "rdfa_head.html.j2",
    OutputFormat.MICRODATA: "microdata_head.html.j2",
}

_TAIL_TEMPLATES = {
    OutputFormat.JSONLD: "jsonld_tail.json.j2",
    OutputFormat.JSONLD_HTML: "jsonld_tail.html.j2",
    OutputFormat.RDFA: "html_tail.html.j2",
    OutputFormat.MICRODATA: "html_tail.html.j2",
}


@lru_cache(maxsize=1)
def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.PackageLoader("sdfeater", "templates"),
        autoescape=jinja2.select_autoescape(["html.j2", "xml.j2"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_template(name: str, **context) -> str:
    """
    Render one of the bundled templates.

    Args:
        name: Template file name under ``sdfeater/templates``
        **context: Template variables

    Returns:
        Rendered text

    Raises:
        jinja2.TemplateNotFound: If no such template is bundled
    """
    return _environment().get_template(name).render(**context)


def document_head(output_format: OutputFormat, year: Optional[int] = None) -> str:
    """
    Opening part of a document, up to and including the Dataset node.

    Args:
        output_format: Selected output format
        year: Year for ``schema:temporal``; current year when omitted

    Returns:
        Head text, empty for formats without an envelope
    """
    name = _HEAD_TEMPLATES.get(output_format)
    if name is None:
        return ""
    return render_template(
        name,
        dataset=DATASET,
        year=year if year is not None else date.today().year,
    )


def document_tail(output_format: OutputFormat) -> str:
    """Closing part of a document, empty for formats without an envelope."""
    name = _TAIL_TEMPLATES.get(output_format)
    if name is None:
        return ""
    return render_template(
        name,
        context_terms=JSONLD_CONTEXT_TERMS,
        schema_base=str(SCHEMA),
    )
