"""Split free-form model output around its first markdown table.

The input is whatever the LLM returned, so nothing here raises on malformed
tables: a broken table simply is not recognised and the text comes back as
prose.
"""
from __future__ import annotations

import re

from app.parsing.models import ParsedResult, ParsedTable

_LINE_SPLIT = re.compile(r"\r?\n")
_SEPARATOR_ROW = re.compile(r"^\s*\|?[-:\s|]+\|?\s*$")


def parse_table_row(line: str) -> list[str]:
    row = line.strip()
    if row.startswith("|"):
        row = row[1:]
    if row.endswith("|"):
        row = row[:-1]
    return [cell.strip() for cell in row.split("|")]


def is_separator_row(line: str) -> bool:
    return bool(_SEPARATOR_ROW.match(line))


def _fit_to_width(row: list[str], width: int) -> list[str]:
    if len(row) >= width:
        return row[:width]
    return row + [""] * (width - len(row))


def find_first_table(lines: list[str]) -> tuple[int, int, ParsedTable] | None:
    """Return ``(start, end, table)`` for the first table in ``lines``.

    ``start`` is the header line index, ``end`` the index of the first line
    after the last consumed row.
    """
    for i in range(len(lines) - 1):
        header_line = lines[i]
        separator_line = lines[i + 1]
        if "|" not in header_line or not separator_line:
            continue
        if not is_separator_row(separator_line):
            continue
        headers = parse_table_row(header_line)
        if len(headers) < 2:
            continue

        rows: list[list[str]] = []
        j = i + 2
        while j < len(lines):
            row_line = lines[j]
            if "|" not in row_line:
                break
            row = parse_table_row(row_line)
            if not any(row):
                break
            rows.append(_fit_to_width(row, len(headers)))
            j += 1
        return i, j, ParsedTable(headers=headers, rows=rows)
    return None


def segment_response(text: str) -> ParsedResult:
    lines = _LINE_SPLIT.split(text)
    match = find_first_table(lines)
    if match is None:
        return ParsedResult(before=text, table=None, after="")

    start, end, table = match
    before = "\n".join(lines[:start]).rstrip()
    after = "\n".join(lines[end:]).lstrip()
    return ParsedResult(before=before, table=table, after=after)
