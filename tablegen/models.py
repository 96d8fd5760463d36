# tablegen/models.py
from dataclasses import dataclass
from enum import Enum


class BorderStyle(str, Enum):
    NONE = "none"
    HORIZONTAL = "horizontal"
    FULL = "full"


class FontStyle(str, Enum):
    NORMAL = "normal"
    BOLD = "bold"


class InvalidConfigError(ValueError):
    """Row or column count is missing, non-numeric or not positive."""


@dataclass(frozen=True)
class TableConfig:
    """Everything the generator needs to know about the table to emit."""

    rows: int
    columns: int
    border_style: BorderStyle = BorderStyle.NONE
    font_style: FontStyle = FontStyle.NORMAL
    has_header: bool = False
    auto_number_rows: bool = False
    numeric_cells: bool = False


@dataclass(frozen=True)
class GeneratedMarkup:
    full: str  # \begin{tabular} ... \end{tabular}
    preview: str  # \begin{array} ... \end{array}, at most 5x5 data cells
