# logic/csv_parser.py
"""
Parser for the CSV export of the published D7 sheet.

The sheet export is read with a deliberately simple dialect:
  - lines are split on \\r?\\n before any quote handling (no embedded newlines)
  - every double quote toggles the "inside quotes" state and is dropped
  - a comma separates fields only outside quotes
  - each field is stripped of surrounding whitespace
Doubled quotes ("") are NOT unescaped. Do not swap this for the csv module,
it parses some rows of the live sheet differently.
"""
from __future__ import annotations

import re
from typing import List

_LINE_SPLIT = re.compile(r"\r?\n")


def parse_csv_line(line: str) -> List[str]:
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields


def parse_csv_text(text: str) -> List[List[str]]:
    """
    Turn raw CSV text into rows of trimmed string fields.
    Blank lines are skipped. The header row is returned like any other row.
    """
    rows: List[List[str]] = []
    for line in _LINE_SPLIT.split(text or ""):
        if not line.strip():
            continue
        rows.append(parse_csv_line(line))
    return rows
