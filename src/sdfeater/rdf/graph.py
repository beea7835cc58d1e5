"""
RDF graph sink - requires rdflib.

One graph per run collects the triples of every record; it is serialized
once at the end of the stream.
"""

__all__ = [
    "GRAPH_SYNTAX",
    "new_graph",
    "add_literal",
    "add_resource",
    "bind_namespaces",
    "serialize_graph",
]

from typing import Any, Dict, Optional, Union

from rdflib import BNode, Graph, Literal, Namespace, URIRef

from sdfeater.core.config import OutputFormat
from sdfeater.core.constants import GRAPH_NAMESPACES
from sdfeater.core.exceptions import UnsupportedFormatError

Node = Union[URIRef, BNode]

# Output format to rdflib serializer name
GRAPH_SYNTAX = {
    OutputFormat.TURTLE: "turtle",
    OutputFormat.NTRIPLES: "nt",
    OutputFormat.RDFXML: "xml",
    OutputFormat.N3: "n3",
    OutputFormat.TRIG: "trig",
}


def bind_namespaces(
    graph: Graph,
    namespaces: Dict[str, Any],
) -> None:
    """
    Bind namespace prefixes to graph.

    Args:
        graph: RDF graph (mutated in place)
        namespaces: Dict mapping prefix to namespace URI

    Example:
        >>> g = Graph()
        >>> bind_namespaces(g, {"schema": "http://schema.org/"})
    """
    for prefix, uri in namespaces.items():
        graph.bind(prefix, Namespace(str(uri)), override=True, replace=True)


def new_graph() -> Graph:
    """Empty graph with the ``schema`` and ``rdf`` prefixes bound."""
    graph = Graph()
    bind_namespaces(graph, GRAPH_NAMESPACES)
    return graph


def add_literal(
    graph: Graph,
    subject: Node,
    predicate: URIRef,
    value: Any,
    datatype: Optional[URIRef] = None,
    skip_empty: bool = True,
) -> None:
    """
    Add a literal triple to graph if value is non-empty.

    Args:
        graph: RDF graph to add to (mutated in place)
        subject: Subject node
        predicate: Predicate URI
        value: Value to add
        datatype: Optional datatype; plain literal when omitted
        skip_empty: If True, skip None and empty string values
    """
    if skip_empty and (value is None or value == ""):
        return
    graph.add((subject, predicate, Literal(value, datatype=datatype)))


def add_resource(
    graph: Graph,
    subject: Node,
    predicate: URIRef,
    obj: Node,
) -> None:
    """Add a resource triple to graph."""
    graph.add((subject, predicate, obj))


def serialize_graph(graph: Graph, output_format: OutputFormat) -> str:
    """
    Serialize the graph in the syntax of an RDF output format.

    Raises:
        UnsupportedFormatError: If the format is not an RDF syntax
    """
    syntax = GRAPH_SYNTAX.get(output_format)
    if syntax is None:
        raise UnsupportedFormatError(
            f"Not an RDF output format: {output_format.value}",
            details={"format": output_format.value},
        )
    return graph.serialize(format=syntax)
