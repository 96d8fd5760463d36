# tablegen/forms.py
import re
from typing import Any, Dict, Mapping, Optional

from tablegen.models import BorderStyle, FontStyle, InvalidConfigError, TableConfig

INVALID_COUNT_MESSAGE = "Please enter a valid number of rows and columns."

# Reset values of the form, same field names as the saved settings
DEFAULT_FORM: Dict[str, Any] = {
    "rows": "3",
    "columns": "3",
    "style": BorderStyle.NONE.value,
    "has_header": True,
    "auto_number": False,
    "font_style": FontStyle.NORMAL.value,
    "is_numeric": False,
}

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_count(value: Any) -> Optional[int]:
    """
    Read an integer the lenient way a browser form does:
    " 4" -> 4, "3abc" -> 3, 2.7 -> 2, "abc" -> None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value and abs(value) != float("inf") else None
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def _choice(enum_cls, value, default):
    try:
        return enum_cls(value)
    except ValueError:
        return default


def config_from_form(fields: Mapping[str, Any]) -> TableConfig:
    """
    Build a TableConfig from raw form fields.
    Raises InvalidConfigError when rows/columns are missing, non-numeric or not positive.
    """
    rows = parse_count(fields.get("rows"))
    columns = parse_count(fields.get("columns"))
    if rows is None or columns is None or rows <= 0 or columns <= 0:
        raise InvalidConfigError(INVALID_COUNT_MESSAGE)

    return TableConfig(
        rows=rows,
        columns=columns,
        border_style=_choice(BorderStyle, fields.get("style"), BorderStyle.NONE),
        font_style=_choice(FontStyle, fields.get("font_style"), FontStyle.NORMAL),
        has_header=bool(fields.get("has_header", False)),
        auto_number_rows=bool(fields.get("auto_number", False)),
        numeric_cells=bool(fields.get("is_numeric", False)),
    )
