# pipetable/tests/test_formatter.py
"""End-to-end tests for format_table()."""

import pytest

from pipetable import format_table
from pipetable.analyzer import NO_DELIMITER_WARNING, analyze
from pipetable.parser import parse_rows


MESSY_TABLE = """
|  Fruit|Qty |   Origin  | Notes
|:--|--:|:-:|---|
|Apple|7|Spain|crisp|
| Kiwi |  120 | New Zealand|  |
|Fig|3|
"""


class TestScenarios:
    """Concrete input/output pairs."""

    def test_simple_table(self):
        result = format_table("|Name|Age|\n|---|---|\n|Bob|30|\n")

        assert result.output == (
            "| Name | Age |\n"
            "| ---- | --- |\n"
            "| Bob  | 30  |\n"
        )
        assert result.warnings == ()

    def test_left_right_center_delimiters(self):
        result = format_table("|Fruit|Qt|Origin|\n|:--|--:|:-:|\n|Apple|7|Spain|")

        assert result.output == (
            "| Fruit |  Qt | Origin |\n"
            "| ----- | --: | :----: |\n"
            "| Apple |   7 | Spain  |\n"
        )
        assert result.warnings == ()

    def test_ragged_rows(self):
        result = format_table("|a|b|c|\n|---|---|---|\n|x|\n|1|2|")

        assert result.output == (
            "| a   | b   | c   |\n"
            "| --- | --- | --- |\n"
            "| x   |\n"
            "| 1   | 2   |\n"
        )
        assert result.warnings == ("Row 3 has 1 columns but header has 3 columns.",)

    def test_short_delimiter_row(self):
        result = format_table("|a|b|\n|---|\n|1|2|")

        assert result.output == "| a   | b |\n| --- |\n| 1   | 2 |\n"
        assert result.warnings == ("Header row has 2 columns but delimiter row has 1 columns.",)

    def test_delimiter_like_first_row(self):
        """A delimiter-like first row is not canonical but still rebuilt."""
        result = format_table("|---|---|\n|a|b|")

        assert result.output == "| --- | --- |\n| a   | b   |\n"
        assert result.warnings == (NO_DELIMITER_WARNING,)

    def test_blank_lines_are_dropped(self):
        result = format_table("\n\n|a|\n\n|-|\n\n|b|\n\n")

        assert result.output == "| a |\n| - |\n| b |\n"

    def test_line_separator_inside_cell(self):
        """Only newlines end a row."""
        result = format_table("|a\u2028b|\n|---|\n|c|")

        assert result.output == "| a\u2028b |\n| --- |\n| c   |\n"

    def test_form_feed_inside_cell(self):
        result = format_table("|a\x0cb|c|\n|---|---|\n|d|e|")

        assert result.output == (
            "| a\x0cb | c   |\n"
            "| --- | --- |\n"
            "| d   | e   |\n"
        )

    def test_non_breaking_space_counts_toward_width(self):
        result = format_table("|\u00a0a|\n|-|")

        assert result.output == "| \u00a0a |\n| -- |\n"


class TestNoDelimiterFallback:
    """Tables without any delimiter row."""

    def test_left_aligned_with_single_warning(self):
        result = format_table("|a|bb|\n|ccc|d|\n|e|")

        assert result.output == (
            "| a   | bb |\n"
            "| ccc | d  |\n"
            "| e   |\n"
        )
        assert result.warnings == (NO_DELIMITER_WARNING,)

    def test_empty_input_renders_nothing(self):
        result = format_table("   \n\n")

        assert result.output == ""
        assert result.warnings == (NO_DELIMITER_WARNING,)


class TestProperties:
    """Invariants of the formatter."""

    @pytest.mark.parametrize(
        "text",
        [
            "|Name|Age|\n|---|---|\n|Bob|30|",
            MESSY_TABLE,
            "|a|b|\n|---|:-:|\n|x|y|\n|--|--|",
            "|a|bb|\n|ccc|d|",
            "|x|y|z|\n|:---:|---:|---|\n|1|22|333|\n|4444|",
        ],
    )
    def test_idempotent(self, text):
        once = format_table(text).output
        twice = format_table(once).output

        assert twice == once

    def test_width_invariant(self):
        output = format_table(MESSY_TABLE).output
        widths = analyze(parse_rows(MESSY_TABLE)).widths

        for line in output.splitlines():
            assert line.startswith("| ") and line.endswith(" |")
            cells = line[2:-2].split(" | ")
            for index, cell in enumerate(cells):
                assert len(cell) == widths[index]

    def test_messy_table(self):
        result = format_table(MESSY_TABLE)

        assert result.output == (
            "| Fruit | Qty |   Origin    | Notes |\n"
            "| ----- | --: | :---------: | ----- |\n"
            "| Apple |   7 |    Spain    | crisp |\n"
            "| Kiwi  | 120 | New Zealand |       |\n"
            "| Fig   |   3 |\n"
        )
        assert result.warnings == ("Row 5 has 2 columns but header has 4 columns.",)
