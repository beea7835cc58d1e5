"""
JSON-LD projector, plain or embedded in an HTML page.

The document is streamed: the head with the Dataset node is written
first, each record appends one node to ``@graph``, and the tail closes
the array and adds the ``@context``.
"""

__all__ = ["JsonLdProjector"]

import json
from typing import Dict, List

from sdfeater.core.config import OutputFormat
from sdfeater.core.constants import MOLECULAR_ENTITY
from sdfeater.core.models import Molecule
from sdfeater.html.document import document_head, document_tail
from sdfeater.projectors.base import Projector
from sdfeater.projectors.context import ProjectionContext
from sdfeater.projectors.schema import schema_statements
from sdfeater.text.values import render_json_value

_INDENT = "      "


class JsonLdProjector(Projector):
    formats = (OutputFormat.JSONLD, OutputFormat.JSONLD_HTML)

    def begin(self, context: ProjectionContext) -> str:
        return document_head(context.output_format, context.year)

    def project(self, molecule: Molecule, context: ProjectionContext) -> str:
        terms: Dict[str, List[str]] = {}
        for term, value in schema_statements(molecule):
            terms.setdefault(term, []).append(value)
        if not terms:
            return ""

        subject = context.subject_for(molecule)
        members = [
            f'{_INDENT}"@id" : {json.dumps(subject.value, ensure_ascii=False)}',
            f'{_INDENT}"@type" : "{MOLECULAR_ENTITY}"',
        ]
        for term, values in terms.items():
            rendered = [render_json_value(value) for value in values]
            if len(rendered) == 1:
                members.append(f'{_INDENT}"{term}" : {rendered[0]}')
            else:
                members.append(f'{_INDENT}"{term}" : [{", ".join(rendered)}]')
        return ",\n    {\n" + ",\n".join(members) + "\n    }"

    def end(self, context: ProjectionContext) -> str:
        return document_tail(context.output_format)
