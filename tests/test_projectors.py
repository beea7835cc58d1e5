"""Tests for the line oriented projectors: Cypher, CVME, SMILES, InChI and debug."""

import pytest

from sdfeater.chem.periodic import PeriodicTable
from sdfeater.core.config import OutputFormat
from sdfeater.core.exceptions import UnsupportedFormatError
from sdfeater.core.models import Atom, Bond, Molecule
from sdfeater.projectors import (
    CvmeProjector,
    CypherProjector,
    DebugProjector,
    InchiProjector,
    ProjectionContext,
    SmilesProjector,
    get_projector,
)
from sdfeater.projectors.cypher import cypher_key

TOKEN = "_12345678_1234_5678_1234_567812345678"
SUBJECT = "<urn:uuid:12345678-1234-5678-1234-567812345678>"


class TestRegistry:
    @pytest.mark.parametrize("output_format", list(OutputFormat))
    def test_every_format_has_a_projector(self, output_format):
        assert output_format in get_projector(output_format).formats

    def test_unknown_format(self):
        with pytest.raises(UnsupportedFormatError):
            get_projector("thrift")


class TestCypherKey:
    @pytest.mark.parametrize(
        "name,key",
        [
            ("ChEBI ID", "ChEBIID"),
            ("CAS Registry Numbers", "CASNumber"),
            ("CAS_NUMBER", "CASNumber"),
            ("KEGG COMPOUND Database Links", "KEGGCOMPOUNDDatabaseLinks"),
            ("UM-BBD compID Database Links", "UMBBDcompIDDatabaseLinks"),
        ],
    )
    def test_keys(self, name, key):
        assert cypher_key(name) == key


class TestCypherProjector:
    def test_full_record(self, molecule):
        output = CypherProjector().project(
            molecule, ProjectionContext(OutputFormat.CYPHER)
        )
        assert output == (
            f"CREATE (c{TOKEN}:Molecule {{ChEBIID: 'CHEBI:16842', SMILES: 'C=O', "
            f"Mass: 30.02600, Synonyms: ['methanal', 'formalin\\'s base']}})\n"
            f"CREATE (a1{TOKEN}:Atom {{symbol: 'C', x: 0.0, y: 0.0, z: 0.0}})\n"
            f"CREATE (a2{TOKEN}:Atom {{symbol: 'O', x: 1.5, y: -0.25, z: 0.0}})\n"
            f"CREATE\n"
            f"(c{TOKEN})-[:RELATED]->(a1{TOKEN}),\n"
            f"(c{TOKEN})-[:RELATED]->(a2{TOKEN})\n"
            f"CREATE\n"
            f'(a1{TOKEN})-[:BOND_WITH {{type: "double", stereo: "not determined"}}]'
            f"->(a2{TOKEN})\n"
            f";\n"
        )

    def test_record_without_structure(self):
        m = Molecule()
        m.append_property_value("Star", "3")
        output = CypherProjector().project(m, ProjectionContext(OutputFormat.CYPHER))
        lines = output.splitlines()
        assert lines[0].endswith(":Molecule {Star: 3})")
        assert lines[1:] == [";"]

    def test_empty_record(self):
        output = CypherProjector().project(
            Molecule(), ProjectionContext(OutputFormat.CYPHER)
        )
        assert output.splitlines()[0].endswith(":Molecule {})")

    def test_values_before_any_tag_are_skipped(self):
        m = Molecule()
        m.append_property_value("", "orphan")
        m.append_property_value("Star", "3")
        output = CypherProjector().project(m, ProjectionContext(OutputFormat.CYPHER))
        assert output.splitlines()[0].endswith(":Molecule {Star: 3})")
        assert "orphan" not in output

    def test_unsupported_bond_fields_are_omitted(self):
        m = Molecule()
        m.add_atom(Atom("C", 0.0, 0.0, 0.0))
        m.add_atom(Atom("C", 1.0, 0.0, 0.0))
        m.add_bond(Bond(1, 2, 9, 5))
        output = CypherProjector().project(m, ProjectionContext(OutputFormat.CYPHER))
        assert "[:BOND_WITH {}]" in output

    def test_single_bond_stereo_is_bare_false(self):
        m = Molecule()
        m.add_bond(Bond(1, 2, 1, 0))
        output = CypherProjector().project(m, ProjectionContext(OutputFormat.CYPHER))
        assert '{type: "single", stereo: false}' in output

    def test_periodic_attributes(self, molecule):
        context = ProjectionContext(
            OutputFormat.CYPHER_PERIODIC, periodic_table=PeriodicTable.load()
        )
        output = CypherProjector().project(molecule, context)
        carbon = output.splitlines()[1]
        assert carbon.startswith(f"CREATE (a1{TOKEN}:Atom {{symbol: 'C', x: 0.0")
        assert "atomicNumber: 6" in carbon
        assert "name: 'Carbon'" in carbon
        assert "atomicMass: '12.0107(8)'" in carbon
        assert "electronegativity: 2.55" in carbon
        assert "bondingType: 'covalent network'" in carbon
        assert "yearDiscovered: 'Ancient'" in carbon
        assert carbon.count("symbol:") == 1

    def test_periodic_null_values_are_skipped(self):
        m = Molecule()
        m.add_atom(Atom("Ne", 0.0, 0.0, 0.0))
        context = ProjectionContext(
            OutputFormat.CYPHER_PERIODIC, periodic_table=PeriodicTable.load()
        )
        output = CypherProjector().project(m, context)
        assert "electronegativity" not in output
        assert "name: 'Neon'" in output
        assert "yearDiscovered: 1898" in output

    def test_periodic_unknown_symbol(self):
        m = Molecule()
        m.add_atom(Atom("R#", 0.0, 0.0, 0.0))
        context = ProjectionContext(
            OutputFormat.CYPHER_PERIODIC, periodic_table=PeriodicTable.load()
        )
        output = CypherProjector().project(m, context)
        assert "{symbol: 'R#', x: 0.0, y: 0.0, z: 0.0})" in output


class TestCvmeProjector:
    def test_statements_and_example(self, molecule):
        output = CvmeProjector().project(molecule, ProjectionContext(OutputFormat.CVME))
        statements, example = output.split("\n\n", 1)
        assert statements.split("\n") == [
            f"{SUBJECT} skos:notation 'C=O'^^chemskos:SMILES .",
            f"{SUBJECT} dbo:molecularWeight 30.02600@en .",
            f"{SUBJECT} skos:altLabel 'methanal'@en, 'formalin\\'s base'@en .",
        ]
        assert example.startswith(f'{SUBJECT} skos:example """\n\n  CT\n\n')
        assert example.endswith('M  END""" .\n')

    def test_link_values_are_resources(self):
        m = Molecule()
        m.append_property_value(
            "KEGG COMPOUND Database Links",
            "http://www.genome.jp/dbget-bin/www_bget?cpd:C09869",
        )
        m.append_property_value(
            "KEGG COMPOUND Database Links",
            "http://www.genome.jp/dbget-bin/www_bget?cpd:C00002",
        )
        output = CvmeProjector().project(m, ProjectionContext(OutputFormat.CVME))
        assert (
            "rdfs:seeAlso <http://www.genome.jp/dbget-bin/www_bget?cpd:C09869> .\n"
            in output
        )
        assert "C00002" not in output

    def test_alternate_spellings_are_ignored(self):
        m = Molecule()
        m.append_property_value("FORMULA", "C2H6O")
        output = CvmeProjector().project(m, ProjectionContext(OutputFormat.CVME))
        assert output.startswith("\n<urn:uuid:")
        assert "C2H6O" not in output


class TestIdentifierProjectors:
    def test_smiles(self, molecule):
        context = ProjectionContext(OutputFormat.SMILES)
        assert SmilesProjector().project(molecule, context) == "C=O\n"

    def test_first_value_only(self):
        m = Molecule()
        m.append_property_value("InChI", "InChI=1S/CH4/h1H4")
        m.append_property_value("InChI", "InChI=1S/H2O/h1H2")
        context = ProjectionContext(OutputFormat.INCHI)
        assert InchiProjector().project(m, context) == "InChI=1S/CH4/h1H4\n"

    def test_missing_property_gives_empty_line(self, molecule):
        context = ProjectionContext(OutputFormat.INCHI)
        assert InchiProjector().project(molecule, context) == "\n"


class TestDebugProjector:
    def test_dump(self, molecule):
        output = DebugProjector().project(molecule, ProjectionContext(OutputFormat.DEBUG))
        assert output == (
            "Key = ChEBI ID\n"
            "Values = [CHEBI:16842]\n"
            "Key = SMILES\n"
            "Values = [C=O]\n"
            "Key = Mass\n"
            "Values = [30.02600]\n"
            "Key = Synonyms\n"
            "Values = [methanal, formalin's base]\n"
            "C (0.0,0.0,0.0)\n"
            "O (1.5,-0.25,0.0)\n"
            "(C[1])--2--(O[2])\n"
        )

    def test_dangling_bond_is_skipped(self, log_messages):
        m = Molecule()
        m.add_atom(Atom("C", 0.0, 0.0, 0.0))
        m.add_bond(Bond(1, 5, 1, 0))
        output = DebugProjector().project(m, ProjectionContext(OutputFormat.DEBUG))
        assert output == "C (0.0,0.0,0.0)\n"
        assert any("refers to a missing atom" in message for message in log_messages)
