"""Tests for format and subject resolution."""

import pytest

from sdfeater.core.config import (
    OutputFormat,
    SubjectMode,
    resolve_format,
    resolve_subject,
)
from sdfeater.core.exceptions import (
    ErrorCode,
    UnsupportedFormatError,
    UnsupportedSubjectError,
)


class TestResolveFormat:
    @pytest.mark.parametrize(
        "urls,periodic,expected",
        [
            (False, False, OutputFormat.CYPHER),
            (True, False, OutputFormat.CYPHER_URLS),
            (False, True, OutputFormat.CYPHER_PERIODIC),
            (True, True, OutputFormat.CYPHER_URLS_PERIODIC),
        ],
    )
    def test_cypher_flags(self, urls, periodic, expected):
        assert resolve_format("cypher", urls=urls, periodic=periodic) is expected

    def test_flags_ignored_outside_cypher(self):
        assert resolve_format("smiles", urls=True, periodic=True) is OutputFormat.SMILES

    def test_case_insensitive(self):
        assert resolve_format("TURTLE") is OutputFormat.TURTLE
        assert resolve_format(" JsonLdHtml ") is OutputFormat.JSONLD_HTML

    def test_unknown_format(self):
        with pytest.raises(UnsupportedFormatError) as excinfo:
            resolve_format("rdfthrift")
        assert excinfo.value.code is ErrorCode.UNSUPPORTED_FORMAT
        assert excinfo.value.details == {"format": "rdfthrift"}


class TestFormatTraits:
    def test_cvme_always_enriches_links(self):
        assert OutputFormat.CVME.enriches_links

    def test_plain_cypher_keeps_raw_values(self):
        assert not OutputFormat.CYPHER.enriches_links
        assert not OutputFormat.CYPHER.needs_periodic_table

    def test_periodic_variants(self):
        assert OutputFormat.CYPHER_PERIODIC.needs_periodic_table
        assert OutputFormat.CYPHER_URLS_PERIODIC.needs_periodic_table
        assert OutputFormat.CYPHER_URLS_PERIODIC.enriches_links

    def test_graph_formats(self):
        graph_formats = {f for f in OutputFormat if f.uses_graph}
        assert graph_formats == {
            OutputFormat.TURTLE,
            OutputFormat.NTRIPLES,
            OutputFormat.RDFXML,
            OutputFormat.N3,
            OutputFormat.TRIG,
        }


class TestResolveSubject:
    @pytest.mark.parametrize("mode", list(SubjectMode))
    def test_known_modes(self, mode):
        assert resolve_subject(mode.value.upper()) is mode

    def test_unknown_mode(self):
        with pytest.raises(UnsupportedSubjectError) as excinfo:
            resolve_subject("literal")
        assert excinfo.value.code is ErrorCode.UNSUPPORTED_SUBJECT
