"""
Link subpackage - database cross-reference URLs.
"""

from sdfeater.links.table import (
    LinkRule,
    LINK_RULES,
    PUBCHEM_RULES,
    PUBCHEM_PROPERTY,
    enrich,
)

__all__ = [
    "LinkRule",
    "LINK_RULES",
    "PUBCHEM_RULES",
    "PUBCHEM_PROPERTY",
    "enrich",
]
