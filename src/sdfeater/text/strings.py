"""
String escaping utilities - no external dependencies.
"""

__all__ = [
    "escape_backslashes",
    "escape_single_quotes",
    "escape_literal",
    "html_escape",
]


def escape_backslashes(text: str) -> str:
    """Escape backslashes from string."""
    return text.replace("\\", "\\\\")


def escape_single_quotes(text: str) -> str:
    """Escape single quotes with a backslash."""
    return text.replace("'", "\\'")


def escape_literal(text: str) -> str:
    """
    Escape a value for use inside a single-quoted Cypher or CVME literal.

    Backslashes are escaped first so the quote escapes stay intact.
    """
    return escape_single_quotes(escape_backslashes(text))


def html_escape(value: str, quote: bool = False) -> str:
    """
    Escape HTML special characters.

    Args:
        value: Text to escape
        quote: Also escape double and single quotes (for attribute values)

    Returns:
        Escaped text

    Example:
        >>> html_escape("a<b & c")
        'a&lt;b &amp; c'
        >>> html_escape("it's", quote=True)
        'it&#x27;s'
    """
    escaped = value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
    if quote:
        escaped = escaped.replace('"', "&quot;").replace("'", "&#x27;")
    return escaped
