# tablegen/generator.py
import logging
import math
import random
from typing import List, Optional, Tuple

from tablegen.models import (
    BorderStyle,
    FontStyle,
    GeneratedMarkup,
    InvalidConfigError,
    TableConfig,
)

logger = logging.getLogger(__name__)

PREVIEW_MAX_ROWS = 5
PREVIEW_MAX_COLUMNS = 5

ROW_NUMBER_LABEL = "Row number"
CELL_SEPARATOR = " & "
ROW_END = " \\\\\n"
RULE = "\\hline\n"

FULL_ENVIRONMENT = "tabular"
PREVIEW_ENVIRONMENT = "array"  # MathJax/KaTeX only understand array in math mode


def apply_font_style(text: str, font_style: FontStyle) -> str:
    """Wrap text in the LaTeX directive for the chosen font style."""
    if font_style == FontStyle.BOLD:
        return f"\\textbf{{{text}}}"
    return text


def random_value(rng) -> str:
    """
    Draw a value in [0, 1) cut to 4 decimal places.
    Trailing zeros are dropped, so 0.5 renders as "0.5" and 0 as "0".
    """
    ticks = math.floor(rng.random() * 10_000)
    return f"{ticks / 10_000:.4f}".rstrip("0").rstrip(".")


def column_spec(border_style: BorderStyle, total_columns: int, numbered: bool) -> str:
    if border_style == BorderStyle.FULL:
        return "|" + "c|" * total_columns
    if border_style == BorderStyle.HORIZONTAL and numbered:
        return "c|" + " ".join(["c"] * (total_columns - 1))
    return " ".join(["c"] * total_columns)


def validate_config(config: TableConfig) -> None:
    for name in ("rows", "columns"):
        value = getattr(config, name)
        # bool is an int subclass; a checkbox value is never a count
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidConfigError(f"{name} must be an integer, got {value!r}")
        if value <= 0:
            raise InvalidConfigError(f"{name} must be greater than 0, got {value}")


def _build_cells(config: TableConfig, rng) -> Tuple[List[str], List[List[str]]]:
    """Styled header cells and body rows for the whole table, row numbers included."""
    style = config.font_style

    header = []
    if config.auto_number_rows:
        header.append(apply_font_style(ROW_NUMBER_LABEL, style))
    header.extend(apply_font_style(f"Header {i}", style) for i in range(1, config.columns + 1))

    body = []
    for i in range(1, config.rows + 1):
        row = [apply_font_style(str(i), style)] if config.auto_number_rows else []
        for j in range(config.columns):
            value = random_value(rng) if config.numeric_cells else f"Column{j + 1}"
            row.append(apply_font_style(value, style))
        body.append(row)
    return header, body


def _render(
    environment: str,
    config: TableConfig,
    header: List[str],
    body: List[List[str]],
    max_rows: int,
    max_columns: int,
) -> str:
    """
    Render one tabular environment over the first max_rows x max_columns data cells.
    Both the full table and the preview go through here, only the bounds differ.
    """
    border = config.border_style
    width = max_columns + (1 if config.auto_number_rows else 0)

    parts = [f"\\begin{{{environment}}}{{{column_spec(border, width, config.auto_number_rows)}}}\n"]
    if border == BorderStyle.FULL:
        parts.append(RULE)

    if config.has_header:
        parts.append(CELL_SEPARATOR.join(header[:width]) + ROW_END)
        if border != BorderStyle.NONE:
            parts.append(RULE)

    rows = body[:max_rows]
    for index, cells in enumerate(rows, start=1):
        parts.append(CELL_SEPARATOR.join(cells[:width]) + ROW_END)
        if index < len(rows) and border in (BorderStyle.HORIZONTAL, BorderStyle.FULL):
            parts.append(RULE)

    if border == BorderStyle.FULL:
        parts.append(RULE)
    parts.append(f"\\end{{{environment}}}")
    return "".join(parts)


def generate(config: TableConfig, rng: Optional[random.Random] = None) -> GeneratedMarkup:
    """
    Build the LaTeX markup for a table and its bounded preview.

    - config: validated here; InvalidConfigError if rows/columns is not a positive int
    - rng: anything with a random() method, used for numeric cells
    Cells are drawn once, so every preview cell matches the full table byte for byte.
    """
    validate_config(config)
    if rng is None:
        rng = random.Random()

    header, body = _build_cells(config, rng)
    full = _render(FULL_ENVIRONMENT, config, header, body, config.rows, config.columns)
    preview = _render(
        PREVIEW_ENVIRONMENT,
        config,
        header,
        body,
        min(config.rows, PREVIEW_MAX_ROWS),
        min(config.columns, PREVIEW_MAX_COLUMNS),
    )
    logger.debug(
        "Generated %dx%d table (border=%s, font=%s)",
        config.rows, config.columns, config.border_style, config.font_style,
    )
    return GeneratedMarkup(full=full, preview=preview)
