"""
RDF subpackage (requires rdflib).
"""

from sdfeater.rdf.graph import (
    GRAPH_SYNTAX,
    new_graph,
    add_literal,
    add_resource,
    bind_namespaces,
    serialize_graph,
)

__all__ = [
    "GRAPH_SYNTAX",
    "new_graph",
    "add_literal",
    "add_resource",
    "bind_namespaces",
    "serialize_graph",
]
