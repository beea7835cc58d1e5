"""Tests for value rendering and string escaping."""

import pytest

from sdfeater.text.strings import (
    escape_backslashes,
    escape_literal,
    escape_single_quotes,
    html_escape,
)
from sdfeater.text.values import (
    format_float,
    is_number,
    is_url,
    render_cvme_value,
    render_cypher_value,
    render_json_value,
)


class TestEscaping:
    def test_escape_backslashes(self):
        assert escape_backslashes("a\\b") == "a\\\\b"

    def test_escape_single_quotes(self):
        assert escape_single_quotes("it's") == "it\\'s"

    def test_escape_literal_escapes_backslash_first(self):
        assert escape_literal("\\'") == "\\\\\\'"

    def test_html_escape_text(self):
        assert html_escape("<b> & 'x'") == "&lt;b&gt; &amp; 'x'"

    def test_html_escape_attribute(self):
        assert html_escape("\"it's\"", quote=True) == "&quot;it&#x27;s&quot;"


class TestIsNumber:
    @pytest.mark.parametrize("value", ["0", "152.23340", "-3", "-0.5"])
    def test_numbers(self, value):
        assert is_number(value)

    @pytest.mark.parametrize("value", ["", "1.", ".5", "+1", "1e5", "4695-62-9", "C10H16O"])
    def test_not_numbers(self, value):
        assert not is_number(value)


class TestIsUrl:
    @pytest.mark.parametrize(
        "value",
        [
            "https://www.ebi.ac.uk/chebi/searchId.do?chebiId=15406",
            "http://www.genome.jp/dbget-bin/www_bget?cpd:C09869",
            "ftp://example.org/file%20name",
        ],
    )
    def test_urls(self, value):
        assert is_url(value)

    @pytest.mark.parametrize(
        "value",
        [
            "CHEBI:15406",
            "Fenchone",
            "http://example.com/a b",
            "http://example.com/%zz",
            "urn:uuid:12345678-1234-5678-1234-567812345678",
        ],
    )
    def test_not_urls(self, value):
        assert not is_url(value)


class TestRenderValue:
    def test_cypher_number_is_bare(self):
        assert render_cypher_value("152.23340") == "152.23340"

    def test_cypher_string_is_quoted_and_escaped(self):
        assert render_cypher_value("formalin's") == "'formalin\\'s'"

    def test_cypher_url_is_a_string(self):
        assert render_cypher_value("https://example.org/x") == "'https://example.org/x'"

    def test_cvme_url_in_angle_brackets(self):
        assert render_cvme_value("https://example.org/x") == "<https://example.org/x>"

    def test_cvme_string(self):
        assert render_cvme_value("4695-62-9") == "'4695-62-9'"

    def test_json_number_keeps_source_text(self):
        assert render_json_value("290.26810") == "290.26810"

    def test_json_string(self):
        assert render_json_value('say "hi"') == '"say \\"hi\\""'

    def test_json_keeps_non_ascii(self):
        assert render_json_value("α-pinene") == '"α-pinene"'

    @pytest.mark.parametrize("value", ["007", "-01.5", "00"])
    def test_json_zero_padded_is_a_string(self, value):
        assert render_json_value(value) == f'"{value}"'

    @pytest.mark.parametrize("value", ["0", "0.5", "-0.5", "10"])
    def test_json_plain_numbers_stay_bare(self, value):
        assert render_json_value(value) == value


class TestFormatFloat:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (0.0, "0.0"),
            (1.5, "1.5"),
            (-0.825, "-0.825"),
            (0.7145, "0.7145"),
            (12.0, "12.0"),
            (0.0001, "1.0E-4"),
            (12345678.0, "1.2345678E7"),
        ],
    )
    def test_java_style(self, value, expected):
        assert format_float(value) == expected
