"""Tests for frontmatter parsing."""

from pathlib import Path

import pytest

from portfolio_content.frontmatter import load_frontmatter, parse_frontmatter, parse_value

FIXTURES = Path(__file__).parent / "fixtures"


class TestDelimiters:
    def test_returns_input_unchanged_without_frontmatter(self):
        text = "# Just a heading\n\nSome text.\n"

        result = parse_frontmatter(text)

        assert result.metadata == {}
        assert result.content == text

    def test_requires_closing_fence(self):
        text = "---\ntitle: Unclosed\nBody"

        result = parse_frontmatter(text)

        assert result.metadata == {}
        assert result.content == text

    def test_fence_must_open_the_document(self):
        text = "Intro\n---\ntitle: Late\n---\nBody"

        result = parse_frontmatter(text)

        assert result.metadata == {}
        assert result.content == text

    def test_parses_title_and_inline_array(self):
        result = parse_frontmatter("---\ntitle: Hello\ntags: [a, b, c]\n---\nBody text")

        assert result.metadata == {"title": "Hello", "tags": ["a", "b", "c"]}
        assert result.content == "Body text"

    def test_body_is_stripped(self):
        result = parse_frontmatter("---\ntitle: x\n---\n\n\n  Body  \n\n")

        assert result.content == "Body"

    def test_empty_frontmatter_block(self):
        result = parse_frontmatter("---\n---\nBody")

        assert result.metadata == {}
        assert result.content == "Body"

    def test_closing_fence_at_end_of_file(self):
        result = parse_frontmatter("---\ntitle: Only metadata\n---")

        assert result.metadata == {"title": "Only metadata"}
        assert result.content == ""

    def test_handles_windows_line_endings(self):
        result = parse_frontmatter("---\r\ntitle: Hello\r\nyear: 2020\r\n---\r\nBody")

        assert result.metadata == {"title": "Hello", "year": 2020}
        assert result.content == "Body"


class TestBlockArrays:
    def test_collects_list_items(self):
        result = parse_frontmatter("---\ntags:\n  - python\n  - yaml\n---\n")

        assert result.metadata["tags"] == ["python", "yaml"]

    def test_items_are_kept_verbatim(self):
        result = parse_frontmatter("---\nvalues:\n  - 42\n  - true\n  - 'quoted'\n---\n")

        assert result.metadata["values"] == ["42", "true", "'quoted'"]

    def test_blank_lines_inside_array_are_ignored(self):
        result = parse_frontmatter("---\ntags:\n  - a\n\n  - b\ntitle: After\n---\n")

        assert result.metadata == {"tags": ["a", "b"], "title": "After"}

    def test_key_after_array_is_parsed(self):
        result = parse_frontmatter("---\ntags:\n- a\n- b\nyear: 2021\n---\n")

        assert result.metadata == {"tags": ["a", "b"], "year": 2021}

    def test_empty_value_without_list_is_null(self):
        result = parse_frontmatter("---\ncover:\ntitle: x\n---\n")

        assert result.metadata == {"cover": None, "title": "x"}


class TestBlockScalars:
    def test_literal_block_keeps_newlines(self):
        result = parse_frontmatter("---\ndesc: |\n  line one\n  line two\n---\n")

        assert result.metadata["desc"] == "line one\nline two"

    def test_folded_block_joins_with_spaces(self):
        result = parse_frontmatter("---\ndesc: >\n  line one\n  line two\n---\n")

        assert result.metadata["desc"] == "line one line two"

    def test_literal_block_keeps_relative_indentation(self):
        text = "---\ncode: |\n  def f():\n      return 1\n---\n"

        result = parse_frontmatter(text)

        assert result.metadata["code"] == "def f():\n    return 1"

    def test_block_values_are_not_coerced(self):
        result = parse_frontmatter("---\nyear: |\n  2020\n---\n")

        assert result.metadata["year"] == "2020"

    def test_block_ends_at_unindented_key(self):
        result = parse_frontmatter("---\nabstract: >\n  First\n  second.\ntitle: Paper\n---\n")

        assert result.metadata == {"abstract": "First second.", "title": "Paper"}

    def test_tab_indented_lines_continue_block(self):
        result = parse_frontmatter("---\nnote: >\n\tone\n\ttwo\n---\n")

        assert result.metadata["note"] == "one two"


class TestScalars:
    def test_multiline_plain_scalar_is_joined(self):
        result = parse_frontmatter("---\ndescription: first\n  continued\n---\n")

        assert result.metadata["description"] == "first\n  continued"

    def test_last_assignment_wins(self):
        result = parse_frontmatter("---\ntitle: One\ntitle: Two\n---\n")

        assert result.metadata == {"title": "Two"}

    def test_preserves_key_order(self):
        result = parse_frontmatter("---\nb: 1\na: 2\nc: 3\n---\n")

        assert list(result.metadata) == ["b", "a", "c"]

    def test_ignores_lines_without_a_key(self):
        result = parse_frontmatter("---\n# comment\ntitle: x\n---\n")

        assert result.metadata == {"title": "x"}

    def test_hyphenated_keys_are_not_keys(self):
        result = parse_frontmatter("---\ntitle: x\nallowed-tools: a\n---\n")

        assert result.metadata == {"title": "x\nallowed-tools: a"}

    def test_url_value_keeps_colons(self):
        result = parse_frontmatter("---\nrepo: https://github.com/example/repo\n---\n")

        assert result.metadata["repo"] == "https://github.com/example/repo"

    def test_oversized_integer_does_not_break_document(self):
        digits = "9" * 5000

        result = parse_frontmatter(f"---\nyear: {digits}\n---\nBody")

        assert result.metadata == {"year": digits}
        assert result.content == "Body"


class TestParseValue:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("", None),
            ("   ", None),
            ("42", 42),
            ("-7", -7),
            ("3.14", 3.14),
            ("-0.5", -0.5),
            ("true", True),
            ("True", True),
            ("TRUE", True),
            ("false", False),
            ("False", False),
            ("FALSE", False),
            ("null", None),
            ("~", None),
            ("Null", None),
            ("NULL", None),
            ("tRuE", "tRuE"),
            ("1.", "1."),
            ("2024-01-15", "2024-01-15"),
            ("plain text", "plain text"),
        ],
    )
    def test_scalar_inference(self, raw, expected):
        assert parse_value(raw) == expected

    def test_integer_is_int(self):
        assert type(parse_value("10")) is int

    def test_float_is_float(self):
        assert type(parse_value("10.0")) is float

    def test_double_quoted_string(self):
        assert parse_value('"42"') == "42"

    def test_single_quoted_string(self):
        assert parse_value("'true'") == "true"

    def test_quoted_string_has_no_escape_processing(self):
        assert parse_value(r'"a\nb"') == r"a\nb"

    def test_json_array(self):
        assert parse_value('["a", "b"]') == ["a", "b"]

    def test_single_quoted_array(self):
        assert parse_value("['a', 'b']") == ["a", "b"]

    def test_json_array_keeps_json_types(self):
        assert parse_value("[1, 2.5, true]") == [1, 2.5, True]

    def test_bare_array_falls_back_to_split(self):
        assert parse_value("[React, 3, Node.js]") == ["React", 3, "Node.js"]

    def test_bare_array_drops_nulls(self):
        assert parse_value("[a, , null, b]") == ["a", "b"]

    def test_empty_array(self):
        assert parse_value("[]") == []

    def test_comma_list_without_colon(self):
        assert parse_value("python, yaml, ,markdown") == ["python", "yaml", "markdown"]

    def test_comma_with_colon_stays_string(self):
        assert parse_value("Note: a, b") == "Note: a, b"

    @pytest.mark.parametrize("raw", ["[", "]", "[[", '"', "'", "[a, [b]", "{x: 1}", ":", ","])
    def test_never_raises(self, raw):
        parse_value(raw)

    def test_oversized_integer_stays_string(self):
        digits = "1" * 5000

        assert parse_value(digits) == digits

    def test_oversized_integer_in_array_stays_string(self):
        digits = "1" * 5000

        assert parse_value(f"[{digits}, x]") == [digits, "x"]

    def test_non_standard_json_constants_stay_strings(self):
        assert parse_value("[NaN, Infinity]") == ["NaN", "Infinity"]
        assert parse_value("[-Infinity]") == ["-Infinity"]


class TestLoadFrontmatter:
    def test_reads_fixture_file(self):
        result = load_frontmatter(FIXTURES / "content/projects/project-1.md")

        assert result.metadata["name"] == "Realtime Dashboard"
        assert result.metadata["tech"] == ["React", "TypeScript", "WebSocket"]
        assert result.metadata["features"] == ["Sub-second updates", "Role based access"]
        assert result.content.startswith("# Realtime Dashboard")

    def test_raises_on_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_frontmatter(tmp_path / "nonexistent.md")
