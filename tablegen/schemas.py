# tablegen/schemas.py
from pydantic import BaseModel, Field
from typing import Optional, Union

from tablegen.forms import DEFAULT_FORM

# rows/columns stay loosely typed here: coercion and validation belong to tablegen.forms
Count = Optional[Union[int, float, str]]


class TableForm(BaseModel):
    rows: Count = DEFAULT_FORM["rows"]
    columns: Count = DEFAULT_FORM["columns"]
    style: str = DEFAULT_FORM["style"]  # none | horizontal | full
    has_header: bool = DEFAULT_FORM["has_header"]
    auto_number: bool = DEFAULT_FORM["auto_number"]
    font_style: str = DEFAULT_FORM["font_style"]  # normal | bold
    is_numeric: bool = DEFAULT_FORM["is_numeric"]


class MarkupResponse(BaseModel):
    full: str
    preview: str


class SettingsResponse(BaseModel):
    saved: bool = Field(..., description="False when no settings were stored and defaults are returned")
    settings: TableForm
