"""DFM value types."""
from __future__ import annotations

from html import escape
from typing import Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from dfm.backend import HtmlLabel

_TABLE_OPEN = '<table border="0" cellborder="1" cellspacing="0" cellpadding="20">'
_HEADER_CELL = '<td bgcolor="lightblue">'


class Fact(BaseModel):
    """Central measure table of a star schema."""

    model_config = ConfigDict(frozen=True)

    name: str
    attributes: Tuple[str, ...] = ()

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("fact name must not be empty")
        return value

    def html_label(self) -> HtmlLabel:
        """HTML-like table: highlighted header with the fact name, then one row per attribute."""
        rows = [f"<tr> {_HEADER_CELL}{escape(self.name, quote=False)}</td> </tr>"]
        rows.extend(f"<tr> <td>{escape(att, quote=False)}</td> </tr>" for att in self.attributes)
        return HtmlLabel("<" + _TABLE_OPEN + " " + "".join(rows) + "</table>>")
