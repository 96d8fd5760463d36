"""
Generator Tests
===============
Markup produced by tablegen.generator for the supported border/font/header combinations.
"""
import random

import pytest

from tablegen.generator import (
    PREVIEW_MAX_COLUMNS,
    PREVIEW_MAX_ROWS,
    apply_font_style,
    column_spec,
    generate,
    random_value,
)
from tablegen.models import BorderStyle, FontStyle, InvalidConfigError, TableConfig


class SequenceRandom:
    """Replays fixed values from random(), cycling when exhausted."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


def body_lines(markup):
    """Rows of a generated table, without open/close directives and rules."""
    lines = markup.split("\n")[1:-1]
    return [line for line in lines if line != "\\hline"]


def cells(line):
    assert line.endswith(" \\\\")
    return line[: -len(" \\\\")].split(" & ")


# ============================================================================
# EXACT OUTPUT
# ============================================================================

class TestExactMarkup:

    def test_plain_two_by_two_with_header(self):
        config = TableConfig(rows=2, columns=2, has_header=True)
        markup = generate(config)
        assert markup.full == (
            "\\begin{tabular}{c c}\n"
            "Header 1 & Header 2 \\\\\n"
            "Column1 & Column2 \\\\\n"
            "Column1 & Column2 \\\\\n"
            "\\end{tabular}"
        )
        assert markup.preview == markup.full.replace("tabular", "array")

    def test_full_border_single_cell(self):
        config = TableConfig(rows=1, columns=1, border_style=BorderStyle.FULL)
        markup = generate(config)
        assert markup.full == (
            "\\begin{tabular}{|c|}\n"
            "\\hline\n"
            "Column1 \\\\\n"
            "\\hline\n"
            "\\end{tabular}"
        )

    def test_horizontal_with_row_numbers(self):
        config = TableConfig(
            rows=2,
            columns=1,
            border_style=BorderStyle.HORIZONTAL,
            has_header=True,
            auto_number_rows=True,
        )
        assert generate(config).full == (
            "\\begin{tabular}{c|c}\n"
            "Row number & Header 1 \\\\\n"
            "\\hline\n"
            "1 & Column1 \\\\\n"
            "\\hline\n"
            "2 & Column1 \\\\\n"
            "\\end{tabular}"
        )

    def test_full_border_with_header(self):
        config = TableConfig(rows=2, columns=2, border_style=BorderStyle.FULL, has_header=True)
        assert generate(config).full == (
            "\\begin{tabular}{|c|c|}\n"
            "\\hline\n"
            "Header 1 & Header 2 \\\\\n"
            "\\hline\n"
            "Column1 & Column2 \\\\\n"
            "\\hline\n"
            "Column1 & Column2 \\\\\n"
            "\\hline\n"
            "\\end{tabular}"
        )

    def test_bold_wraps_every_cell(self):
        config = TableConfig(
            rows=1, columns=2, font_style=FontStyle.BOLD, has_header=True, auto_number_rows=True
        )
        assert generate(config).full == (
            "\\begin{tabular}{c c c}\n"
            "\\textbf{Row number} & \\textbf{Header 1} & \\textbf{Header 2} \\\\\n"
            "\\textbf{1} & \\textbf{Column1} & \\textbf{Column2} \\\\\n"
            "\\end{tabular}"
        )


# ============================================================================
# COLUMN SPEC
# ============================================================================

@pytest.mark.parametrize(
    "border, total, numbered, expected",
    [
        (BorderStyle.NONE, 3, False, "c c c"),
        (BorderStyle.NONE, 3, True, "c c c"),
        (BorderStyle.HORIZONTAL, 3, False, "c c c"),
        (BorderStyle.HORIZONTAL, 3, True, "c|c c"),
        (BorderStyle.FULL, 3, False, "|c|c|c|"),
        (BorderStyle.FULL, 3, True, "|c|c|c|"),
    ],
)
def test_column_spec(border, total, numbered, expected):
    assert column_spec(border, total, numbered) == expected


@pytest.mark.parametrize("border", list(BorderStyle))
def test_open_and_close_directives(border):
    config = TableConfig(rows=3, columns=4, border_style=border, has_header=True)
    markup = generate(config)
    spec = column_spec(border, 4, False)
    assert markup.full.startswith(f"\\begin{{tabular}}{{{spec}}}\n")
    assert markup.full.endswith("\\end{tabular}")
    assert markup.preview.startswith(f"\\begin{{array}}{{{spec}}}\n")
    assert markup.preview.endswith("\\end{array}")


# ============================================================================
# STRUCTURE
# ============================================================================

@pytest.mark.parametrize("rows, columns", [(1, 1), (3, 7), (8, 2), (12, 12)])
@pytest.mark.parametrize("has_header", [True, False])
@pytest.mark.parametrize("auto_number", [True, False])
def test_row_and_cell_counts(rows, columns, has_header, auto_number):
    config = TableConfig(
        rows=rows,
        columns=columns,
        border_style=BorderStyle.FULL,
        has_header=has_header,
        auto_number_rows=auto_number,
    )
    markup = generate(config)
    extra = 1 if auto_number else 0

    assert markup.full.count(" \\\\\n") == rows + (1 if has_header else 0)
    full_lines = body_lines(markup.full)
    assert all(len(cells(line)) == columns + extra for line in full_lines)

    preview_lines = body_lines(markup.preview)
    assert len(preview_lines) == min(rows, PREVIEW_MAX_ROWS) + (1 if has_header else 0)
    assert all(len(cells(line)) == min(columns, PREVIEW_MAX_COLUMNS) + extra for line in preview_lines)


def test_preview_cells_match_full_cells():
    config = TableConfig(
        rows=9, columns=8, has_header=True, auto_number_rows=True, numeric_cells=True
    )
    markup = generate(config, rng=random.Random(7))
    full_lines = body_lines(markup.full)
    for preview_line, full_line in zip(body_lines(markup.preview), full_lines):
        preview_cells = cells(preview_line)
        assert cells(full_line)[: len(preview_cells)] == preview_cells


@pytest.mark.parametrize(
    "border, preview_rules",
    [
        (BorderStyle.NONE, 0),
        # header rule + 4 rules between the 5 preview rows
        (BorderStyle.HORIZONTAL, 5),
        # leading + header + 4 between rows + closing
        (BorderStyle.FULL, 7),
    ],
)
def test_preview_rules_stay_within_preview_rows(border, preview_rules):
    config = TableConfig(rows=20, columns=2, border_style=border, has_header=True)
    markup = generate(config)
    assert markup.preview.count("\\hline\n") == preview_rules


def test_horizontal_has_no_closing_rule():
    config = TableConfig(rows=3, columns=2, border_style=BorderStyle.HORIZONTAL)
    full = generate(config).full
    assert full.count("\\hline\n") == 2
    assert full.endswith("Column1 & Column2 \\\\\n\\end{tabular}")


def test_placeholder_cells_name_each_column():
    config = TableConfig(rows=2, columns=4)
    for line in body_lines(generate(config).full):
        assert cells(line) == ["Column1", "Column2", "Column3", "Column4"]


# ============================================================================
# NUMERIC CELLS
# ============================================================================

def test_numeric_cells_are_four_decimal_fractions():
    config = TableConfig(rows=6, columns=6, numeric_cells=True)
    for line in body_lines(generate(config, rng=random.Random(1234)).full):
        for cell in cells(line):
            value = float(cell)
            assert 0 <= value < 1
            if "." in cell:
                assert len(cell.split(".")[1]) <= 4


def test_numeric_cells_draw_in_row_order():
    rng = SequenceRandom([0.5, 0.25, 0.125, 0.0])
    config = TableConfig(rows=2, columns=2, numeric_cells=True, auto_number_rows=True)
    lines = body_lines(generate(config, rng=rng).full)
    assert cells(lines[0]) == ["1", "0.5", "0.25"]
    assert cells(lines[1]) == ["2", "0.125", "0"]
    assert rng.calls == 4


def test_same_seed_same_markup():
    config = TableConfig(rows=4, columns=3, numeric_cells=True)
    assert generate(config, rng=random.Random(99)) == generate(config, rng=random.Random(99))


@pytest.mark.parametrize(
    "drawn, expected",
    [
        (0.0, "0"),
        (0.5, "0.5"),
        (0.25, "0.25"),
        (0.12345, "0.1234"),
        (0.99999, "0.9999"),
    ],
)
def test_random_value_formatting(drawn, expected):
    assert random_value(SequenceRandom([drawn])) == expected


def test_apply_font_style():
    assert apply_font_style("x", FontStyle.BOLD) == "\\textbf{x}"
    assert apply_font_style("x", FontStyle.NORMAL) == "x"


# ============================================================================
# VALIDATION
# ============================================================================

@pytest.mark.parametrize(
    "rows, columns",
    [(0, 3), (3, 0), (-1, 2), ("3", 2), (2, 1.5), (None, 2), (True, 2)],
)
def test_invalid_counts_raise(rows, columns):
    with pytest.raises(InvalidConfigError):
        generate(TableConfig(rows=rows, columns=columns))
