"""
HTML markup projectors: RDFa and Microdata.

Both write one ``<div>`` per record with a schema.org MolecularEntity
and one child element per recognized property. URL valued properties
are links, everything else is element text.
"""

__all__ = ["MarkupProjector", "RdfaProjector", "MicrodataProjector"]

from sdfeater.core.config import OutputFormat, SubjectMode
from sdfeater.core.models import Molecule
from sdfeater.html.document import document_head, document_tail
from sdfeater.projectors.base import Projector
from sdfeater.projectors.context import ProjectionContext, Subject
from sdfeater.projectors.schema import schema_statements
from sdfeater.text.strings import html_escape


class MarkupProjector(Projector):
    """Common row layout; subclasses supply the attribute patterns."""

    # Opening tag up to the subject attribute value
    open_pattern = ""
    link_pattern = ""
    text_pattern = ""

    def begin(self, context: ProjectionContext) -> str:
        return document_head(context.output_format, context.year)

    def project(self, molecule: Molecule, context: ProjectionContext) -> str:
        rows = []
        for term, value in schema_statements(molecule):
            if term == "url":
                rows.append(
                    self.link_pattern.format(
                        href=html_escape(value, quote=True),
                        text=html_escape(value),
                    )
                )
            else:
                rows.append(self.text_pattern.format(term=term, text=html_escape(value)))
        if not rows:
            return ""

        subject = context.subject_for(molecule)
        lines = [self._open_tag(subject)]
        lines.extend(rows)
        lines.append("    </div>")
        return "\n".join(lines) + "\n"

    def _open_tag(self, subject: Subject) -> str:
        if subject.mode is not SubjectMode.IRI:
            return self.open_pattern.format(subject=subject.value) + ">"
        tag = self.open_pattern.format(subject=html_escape(subject.value, quote=True))
        if subject.element_id is not None:
            tag += f" id='{subject.element_id}'"
        return tag + ">"

    def end(self, context: ProjectionContext) -> str:
        return document_tail(context.output_format)


class RdfaProjector(MarkupProjector):
    formats = (OutputFormat.RDFA,)
    open_pattern = "    <div typeof='schema:MolecularEntity' about='{subject}'"
    link_pattern = "      <a href='{href}' rel='schema:url'>{text}</a>"
    text_pattern = "      <div property='schema:{term}'>{text}</div>"


class MicrodataProjector(MarkupProjector):
    formats = (OutputFormat.MICRODATA,)
    open_pattern = (
        "    <div itemscope itemtype='http://schema.org/MolecularEntity'"
        " itemid='{subject}'"
    )
    link_pattern = "      <a href='{href}' itemprop='url'>{text}</a>"
    text_pattern = "      <div itemprop='{term}'>{text}</div>"
