from __future__ import annotations

import logging
import re
from typing import Callable, List, Sequence

from .inline import tokenize
from .model import (
    Blank,
    Block,
    BlockQuote,
    BulletList,
    CodeBlock,
    Document,
    Heading,
    OrderedList,
    Paragraph,
)
from .tables import is_table_line, is_table_separator, parse_table

logger = logging.getLogger(__name__)

FENCE = "```"
HEADING_PREFIXES = {"# ": 1, "## ": 2, "### ": 3, "#### ": 4}
QUOTE_PREFIX = "> "
BULLET_PREFIXES = ("- ", "* ")
ORDERED_RE = re.compile(r"^[0-9]+\.\s")

# Quote lines are joined into one logical line before tokenizing.
QUOTE_JOINER = " "


def split_lines(text: str) -> list[str]:
    return text.split("\n")


def parse_markdown(text: str) -> Document:
    lines = split_lines(text)
    blocks = segment(lines)
    logger.debug("Segmented %d lines into %d blocks", len(lines), len(blocks))
    return Document(blocks=blocks)


def segment(lines: Sequence[str]) -> List[Block]:
    """Partition lines into blocks in a single forward pass.

    Every branch consumes at least one line, so every input line ends up in
    exactly one block and block order follows line order.
    """
    blocks: List[Block] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if line.startswith(FENCE):
            block, i = _parse_code_block(lines, i)
        elif is_table_line(line) and i + 1 < len(lines) and is_table_separator(lines[i + 1]):
            block, consumed = parse_table(lines, i)
            i += consumed
        elif _heading_level(line):
            level = _heading_level(line)
            block = Heading(level=level, inline=tokenize(line[level + 1 :]))
            i += 1
        elif line.startswith(QUOTE_PREFIX):
            quoted, i = _take_while(lines, i, lambda ln: ln.startswith(QUOTE_PREFIX))
            block = BlockQuote(inline=tokenize(QUOTE_JOINER.join(ln[2:] for ln in quoted)))
        elif line.startswith(BULLET_PREFIXES):
            items, i = _take_while(lines, i, lambda ln: ln.startswith(BULLET_PREFIXES))
            block = BulletList(items=[tokenize(item[2:]) for item in items])
        elif ORDERED_RE.match(line):
            items, i = _take_while(lines, i, lambda ln: ORDERED_RE.match(ln) is not None)
            block = OrderedList(items=[tokenize(ORDERED_RE.sub("", item, count=1)) for item in items])
        elif line == "":
            block = Blank()
            i += 1
        else:
            block = Paragraph(inline=tokenize(line))
            i += 1
        blocks.append(block)
    return blocks


def _heading_level(line: str) -> int | None:
    for prefix, level in HEADING_PREFIXES.items():
        if line.startswith(prefix):
            return level
    return None


def _parse_code_block(lines: Sequence[str], index: int) -> tuple[CodeBlock, int]:
    language = lines[index][len(FENCE) :].strip()
    body, i = _take_while(lines, index + 1, lambda ln: not ln.startswith(FENCE))
    if i < len(lines):
        i += 1  # closing fence
    return CodeBlock(language=language, lines=body), i


def _take_while(lines: Sequence[str], index: int, predicate: Callable[[str], bool]) -> tuple[list[str], int]:
    taken: list[str] = []
    i = index
    while i < len(lines) and predicate(lines[i]):
        taken.append(lines[i])
        i += 1
    return taken, i
