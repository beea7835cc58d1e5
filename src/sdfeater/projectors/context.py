"""
Shared state of one conversion run.

The context is created once by the caller and handed to every projector
call. It owns the sequential id counter used for IRI and blank node
subjects, so ids keep increasing across the whole input.
"""

__all__ = ["Subject", "ProjectionContext"]

import itertools
from dataclasses import dataclass, field
from datetime import date
from typing import Iterator, Optional, Union

from rdflib import BNode, Graph, URIRef

from sdfeater.chem.periodic import PeriodicTable
from sdfeater.core.config import CONFIG, OutputFormat, SubjectMode
from sdfeater.core.models import Molecule
from sdfeater.rdf.graph import new_graph


@dataclass(frozen=True)
class Subject:
    """Identity of one record in an output document."""

    mode: SubjectMode
    value: str
    # HTML id attribute derived from the fragment of the subject base
    element_id: Optional[str] = None

    def to_node(self) -> Union[URIRef, BNode]:
        if self.mode is SubjectMode.BNODE:
            return BNode(self.value[2:])
        return URIRef(self.value)


@dataclass
class ProjectionContext:
    output_format: OutputFormat
    subject_mode: SubjectMode = SubjectMode.IRI
    subject_base: str = CONFIG["subject_base"]
    periodic_table: Optional[PeriodicTable] = None
    graph: Optional[Graph] = None
    year: int = field(default_factory=lambda: date.today().year)
    _ids: Iterator[int] = field(default_factory=itertools.count, repr=False)

    def __post_init__(self):
        if self.output_format.needs_periodic_table and self.periodic_table is None:
            self.periodic_table = PeriodicTable.load()
        if self.output_format.uses_graph and self.graph is None:
            self.graph = new_graph()

    def next_id(self) -> int:
        """Next value of the run-wide counter, starting at 0."""
        return next(self._ids)

    def subject_for(self, molecule: Molecule) -> Subject:
        """
        Mint the subject of a record for the text formats.

        IRI and blank node subjects consume one id from the counter, so
        call this once per emitted record.

        Example:
            >>> ctx = ProjectionContext(OutputFormat.JSONLD)
            >>> ctx.subject_for(Molecule()).value
            'https://example.com/molecule#entity0'
        """
        if self.subject_mode is SubjectMode.UUID:
            return Subject(self.subject_mode, f"urn:uuid:{molecule.uuid_token()}")
        ident = self.next_id()
        if self.subject_mode is SubjectMode.BNODE:
            return Subject(self.subject_mode, f"_:b{ident}")
        element_id = None
        if "#" in self.subject_base:
            element_id = self.subject_base.rsplit("#", 1)[1] + str(ident)
        return Subject(self.subject_mode, f"{self.subject_base}{ident}", element_id)

    def graph_node_for(self, molecule: Molecule) -> Union[URIRef, BNode]:
        """
        Subject node of a record in the RDF graph.

        Blank nodes are fresh rdflib nodes and leave the counter alone.
        """
        if self.subject_mode is SubjectMode.BNODE:
            return BNode()
        return self.subject_for(molecule).to_node()
