"""Shared pytest fixtures."""

import io
from pathlib import Path
from uuid import UUID

import pytest
from loguru import logger

from sdfeater.core.config import OutputFormat
from sdfeater.core.models import Atom, Bond, Molecule
from sdfeater.parser import SDFParser
from sdfeater.projectors import ProjectionContext

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def chebi_sdf() -> Path:
    """Two ChEBI records: (+)-fenchone and (-)-epicatechin."""
    return DATA_DIR / "chebi_test.sdf"


@pytest.fixture
def drugbank_sdf() -> Path:
    """One DrugBank record using the upper-case property names."""
    return DATA_DIR / "drugbank_test.sdf"


@pytest.fixture
def malformed_sdf() -> Path:
    """A record with a bad coordinate followed by a valid record."""
    return DATA_DIR / "malformed_test.sdf"


@pytest.fixture
def molecule() -> Molecule:
    """Formaldehyde-like record with a fixed identity."""
    m = Molecule(uuid=UUID("12345678-1234-5678-1234-567812345678"))
    m.add_atom(Atom("C", 0.0, 0.0, 0.0))
    m.add_atom(Atom("O", 1.5, -0.25, 0.0))
    m.add_bond(Bond(1, 2, 2, 0))
    m.append_property_value("ChEBI ID", "CHEBI:16842")
    m.append_property_value("SMILES", "C=O")
    m.append_property_value("Mass", "30.02600")
    m.append_property_value("Synonyms", "methanal")
    m.append_property_value("Synonyms", "formalin's base")
    return m


@pytest.fixture
def convert():
    """Run the parser over a file and return the produced text."""

    def run(path, output_format: OutputFormat, **context_options) -> str:
        out = io.StringIO()
        context = ProjectionContext(output_format, **context_options)
        SDFParser(output_format, context).parse_file(path, out)
        return out.getvalue()

    return run


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
