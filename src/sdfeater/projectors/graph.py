"""
RDF graph projector (turtle, ntriples, rdfxml, n3, trig).

Records are added to the run-wide rdflib Graph as they arrive; the graph
is serialized once at the end of the stream.
"""

__all__ = ["GraphProjector"]

from loguru import logger

from sdfeater.core.config import OutputFormat
from sdfeater.core.constants import MOLECULAR_ENTITY, RDF, SCHEMA
from sdfeater.core.models import Molecule
from sdfeater.projectors.base import Projector
from sdfeater.projectors.context import ProjectionContext
from sdfeater.projectors.schema import schema_statements
from sdfeater.rdf.graph import add_literal, add_resource, new_graph, serialize_graph


class GraphProjector(Projector):
    formats = (
        OutputFormat.TURTLE,
        OutputFormat.NTRIPLES,
        OutputFormat.RDFXML,
        OutputFormat.N3,
        OutputFormat.TRIG,
    )

    def begin(self, context: ProjectionContext) -> str:
        if context.graph is None:
            context.graph = new_graph()
        return ""

    def project(self, molecule: Molecule, context: ProjectionContext) -> str:
        node = context.graph_node_for(molecule)
        # The type triple is only added for records with properties
        if molecule.properties:
            add_resource(context.graph, node, RDF.type, MOLECULAR_ENTITY)
        for term, value in schema_statements(molecule):
            add_literal(context.graph, node, SCHEMA[term], value, skip_empty=False)
        return ""

    def end(self, context: ProjectionContext) -> str:
        logger.debug(f"Serializing graph with {len(context.graph)} triples")
        return serialize_graph(context.graph, context.output_format)
