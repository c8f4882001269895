"""
Delimited Text Parsing
----------------------

A small, forgiving CSV reader for spreadsheet exports, and its companion
writer.

Reader rules:
  - separator inside a quoted field is literal
  - "" inside a quoted field is a literal quote
  - line breaks inside a quoted field are kept and never end the row
  - unquoted \\n, \\r\\n or \\r ends a row; blank lines produce no row
  - a final row without terminator is still emitted
  - an unterminated quote consumes the rest of the input (never raises)

API:
  parse(text, sep=",") -> list[list[str]]
  serialize(rows, sep=",") -> str
"""

from __future__ import annotations
from typing import Iterable, List, Sequence

QUOTE = '"'


def parse(text: str, sep: str = ",") -> List[List[str]]:
    """Split delimited text into rows of string cells.

    Args:
        text: Raw delimited text
        sep: Single-character field separator

    Returns:
        List of rows, each a list of cell strings

    Examples:
        >>> parse('Name,Remark\\nFrance,"Line1\\nLine2"')
        [['Name', 'Remark'], ['France', 'Line1\\nLine2']]

        >>> parse('a,"say ""hi"" twice"')
        [['a', 'say "hi" twice']]

        >>> parse("")
        []
    """
    rows: List[List[str]] = []
    row: List[str] = []
    value: List[str] = []
    in_quotes = False
    # A quoted empty field ("") is content even though value is empty.
    quoted = False

    i = 0
    n = len(text or "")
    while i < n:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < n else ""

        if ch == QUOTE:
            if in_quotes and nxt == QUOTE:
                value.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
                quoted = True
        elif ch == sep and not in_quotes:
            row.append("".join(value))
            value = []
            quoted = False
        elif ch in "\r\n" and not in_quotes:
            if ch == "\r" and nxt == "\n":
                i += 1
            if value or row or quoted:
                row.append("".join(value))
                rows.append(row)
            row = []
            value = []
            quoted = False
        else:
            value.append(ch)
        i += 1

    if value or row or quoted:
        row.append("".join(value))
        rows.append(row)

    return rows


def _quote_cell(cell: str, sep: str) -> str:
    if cell == "" or any(c in cell for c in (sep, QUOTE, "\n", "\r")):
        return QUOTE + cell.replace(QUOTE, QUOTE * 2) + QUOTE
    return cell


def serialize(rows: Iterable[Sequence[str]], sep: str = ",") -> str:
    """Write rows as delimited text readable by parse().

    Cells containing the separator, a quote or a line break are quoted, and
    empty cells are written as "" so a row holding one empty cell survives.
    Rows with no cells are skipped, since parse() reads an empty line as no
    row.

    Examples:
        >>> serialize([["Name", "Remark"], ["France", "Line1\\nLine2"]])
        'Name,Remark\\nFrance,"Line1\\nLine2"'

        >>> serialize([["a"], [], ["b"]])
        'a\\nb'
    """
    lines = []
    for row in rows:
        cells = [_quote_cell(str(cell), sep) for cell in row]
        if cells:
            lines.append(sep.join(cells))
    return "\n".join(lines)


__all__ = [
    "parse",
    "serialize",
]
