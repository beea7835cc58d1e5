"""
HTML subpackage - document envelopes (requires jinja2).
"""

from sdfeater.html.document import (
    render_template,
    document_head,
    document_tail,
)

__all__ = [
    "render_template",
    "document_head",
    "document_tail",
]
