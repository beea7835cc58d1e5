# tests/test_cli.py
"""Tests for the command-line entry point."""

import json
import sys

import pytest
from loguru import logger

from sdfeater.cli import EXIT_INVALID_OPTION, EXIT_OK, EXIT_PARSE_FAILURE, main


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    logger.remove()
    logger.add(sys.stderr)


def run(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


class TestConvert:
    def test_smiles(self, chebi_sdf, capsys):
        assert run(["--input", str(chebi_sdf), "--format", "smiles"]) == EXIT_OK
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "CC1(C)[C@@H]2CC[C@@](C)(C2)C1=O",
            "[H][C@@]1(Oc2cc(O)cc(O)c2C[C@H]1O)c1ccc(O)c(O)c1",
        ]

    def test_cypher_flags(self, chebi_sdf, capsys):
        code = run(["--input", str(chebi_sdf), "--format", "cypher", "--urls", "--periodic"])
        assert code == EXIT_OK
        out = capsys.readouterr().out
        assert "chebiId=15406'" in out
        assert "name: 'Carbon'" in out

    def test_jsonld_uuid_subjects(self, chebi_sdf, capsys):
        argv = ["--input", str(chebi_sdf), "--format", "jsonld", "--subject", "uuid"]
        assert run(argv) == EXIT_OK
        document = json.loads(capsys.readouterr().out)
        assert all(
            node["@id"].startswith("urn:uuid:") for node in document["@graph"][2:]
        )

    def test_subject_base(self, chebi_sdf, capsys):
        argv = [
            "--input",
            str(chebi_sdf),
            "--format",
            "rdfa",
            "--subject_base",
            "https://example.org/chebi#m",
        ]
        assert run(argv) == EXIT_OK
        out = capsys.readouterr().out
        assert "about='https://example.org/chebi#m1' id='m1'" in out

    def test_echo_header_goes_to_stderr(self, chebi_sdf, capsys):
        argv = ["--input", str(chebi_sdf), "--format", "inchi", "--echo_header"]
        assert run(argv) == EXIT_OK
        captured = capsys.readouterr()
        assert "Marvin  02030815452D" in captured.err
        assert "Marvin" not in captured.out


class TestExitCodes:
    def test_unknown_format(self, chebi_sdf, capsys):
        assert run(["--input", str(chebi_sdf), "--format", "thrift"]) == EXIT_INVALID_OPTION
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "not supported: thrift" in captured.err

    def test_unknown_subject(self, chebi_sdf, capsys):
        argv = ["--input", str(chebi_sdf), "--format", "turtle", "--subject", "literal"]
        assert run(argv) == EXIT_INVALID_OPTION
        assert "Incorrect subject type" in capsys.readouterr().err

    def test_latin1_input(self, tmp_path, capsys):
        path = tmp_path / "latin1.sdf"
        path.write_bytes(b"\nM  END\n> <Name>\ncaf\xe9\n\n> <SMILES>\nCCO\n\n$$$$\n")
        assert run(["--input", str(path), "--format", "smiles"]) == EXIT_OK
        assert capsys.readouterr().out == "CCO\n"

    def test_missing_file(self, tmp_path, capsys):
        argv = ["--input", str(tmp_path / "missing.sdf"), "--format", "smiles"]
        assert run(argv) == EXIT_PARSE_FAILURE
        assert "Error while reading file" in capsys.readouterr().err

    def test_malformed_input(self, malformed_sdf, capsys):
        argv = ["--input", str(malformed_sdf), "--format", "smiles"]
        assert run(argv) == EXIT_PARSE_FAILURE
        assert "line 5" in capsys.readouterr().err

    def test_skip_malformed(self, malformed_sdf, capsys):
        argv = ["--input", str(malformed_sdf), "--format", "smiles", "--skip_malformed"]
        assert run(argv) == EXIT_OK
        captured = capsys.readouterr()
        assert captured.out == "CO\n"
        assert "Skipping record at line 5" in captured.err

    def test_missing_required_option(self, capsys):
        assert run(["--format", "smiles"]) == 2
