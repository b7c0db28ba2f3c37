from __future__ import annotations

import re
from typing import List, Sequence

from .inline import tokenize
from .model import Alignment, TableBlock

SEPARATOR_RE = re.compile(r"^\|[\s\-:|]+\|$")


def is_table_line(line: str) -> bool:
    stripped = line.strip()
    return "|" in line and stripped.startswith("|") and stripped.endswith("|")


def is_table_separator(line: str) -> bool:
    return SEPARATOR_RE.match(line.strip()) is not None


def split_row(line: str) -> list[str]:
    """Cell texts between the outer pipes, each trimmed."""
    return [cell.strip() for cell in line.strip().split("|")[1:-1]]


def parse_alignment(segment: str) -> Alignment:
    segment = segment.strip()
    if segment.startswith(":") and segment.endswith(":"):
        return Alignment.CENTER
    if segment.endswith(":"):
        return Alignment.RIGHT
    return Alignment.LEFT


def parse_table(lines: Sequence[str], header_index: int) -> tuple[TableBlock, int]:
    """Parse header, separator and the contiguous data rows after them.

    Returns the table and the number of lines it occupies. Rows are not
    checked against the header width.
    """
    headers = [tokenize(cell) for cell in split_row(lines[header_index])]
    alignments = [parse_alignment(segment) for segment in split_row(lines[header_index + 1])]

    rows: List[list] = []
    i = header_index + 2
    while i < len(lines) and is_table_line(lines[i]):
        rows.append([tokenize(cell) for cell in split_row(lines[i])])
        i += 1

    return TableBlock(headers=headers, alignments=alignments, rows=rows), 2 + len(rows)
