"""
Text utilities subpackage.

Line classification, string escaping and value rendering.
"""

from sdfeater.text.classify import (
    LineKind,
    classify_line,
    tokenize,
    parse_atom,
    parse_bond,
    extract_property_name,
    is_int,
)

from sdfeater.text.strings import (
    escape_backslashes,
    escape_single_quotes,
    escape_literal,
    html_escape,
)

from sdfeater.text.values import (
    is_number,
    is_url,
    render_cypher_value,
    render_cvme_value,
    render_json_value,
    format_float,
)

__all__ = [
    # classify
    "LineKind",
    "classify_line",
    "tokenize",
    "parse_atom",
    "parse_bond",
    "extract_property_name",
    "is_int",
    # strings
    "escape_backslashes",
    "escape_single_quotes",
    "escape_literal",
    "html_escape",
    # values
    "is_number",
    "is_url",
    "render_cypher_value",
    "render_cvme_value",
    "render_json_value",
    "format_float",
]
