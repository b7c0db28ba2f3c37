from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class SpanKind(str, Enum):
    PLAIN = "plain"
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"


class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass
class InlineSpan:
    """One run of text carrying a single formatting kind."""

    kind: SpanKind
    text: str


@dataclass
class Block:
    """Base class for block-level nodes."""


@dataclass
class Document:
    blocks: List[Block] = field(default_factory=list)


@dataclass
class Heading(Block):
    level: int
    inline: List[InlineSpan]


@dataclass
class Paragraph(Block):
    inline: List[InlineSpan]


@dataclass
class BlockQuote(Block):
    inline: List[InlineSpan]


@dataclass
class CodeBlock(Block):
    language: str
    lines: List[str]


@dataclass
class ListBlock(Block):
    items: List[List[InlineSpan]]

    @property
    def ordered(self) -> bool:
        return isinstance(self, OrderedList)


@dataclass
class BulletList(ListBlock):
    pass


@dataclass
class OrderedList(ListBlock):
    pass


@dataclass
class TableBlock(Block):
    headers: List[List[InlineSpan]]
    alignments: List[Alignment]
    rows: List[List[List[InlineSpan]]]


@dataclass
class Blank(Block):
    """Paragraph break marker, one per empty input line."""
