from __future__ import annotations

from typing import List

from .model import InlineSpan, SpanKind

# Checked in this order at every position; "**" must win over "*".
MARKERS = (
    ("**", SpanKind.BOLD),
    ("*", SpanKind.ITALIC),
    ("`", SpanKind.CODE),
)


def tokenize(text: str) -> List[InlineSpan]:
    """Split one line (or a joined quote) into plain/bold/italic/code spans.

    Markers do not nest. A marker with no closing partner swallows the rest
    of the text: nothing after it is emitted.
    """
    spans: List[InlineSpan] = []
    pending: list[str] = []
    i = 0
    while i < len(text):
        opened = _match_marker(text, i)
        if opened is None:
            pending.append(text[i])
            i += 1
            continue

        marker, kind = opened
        if pending:
            spans.append(InlineSpan(SpanKind.PLAIN, "".join(pending)))
            pending = []

        start = i + len(marker)
        end = text.find(marker, start)
        if end == -1:
            return spans
        spans.append(InlineSpan(kind, text[start:end]))
        i = end + len(marker)

    if pending:
        spans.append(InlineSpan(SpanKind.PLAIN, "".join(pending)))
    return spans


def _match_marker(text: str, index: int) -> tuple[str, SpanKind] | None:
    for marker, kind in MARKERS:
        if text.startswith(marker, index):
            return marker, kind
    return None


def spans_to_text(spans: List[InlineSpan]) -> str:
    """Concatenate span text without markup."""
    return "".join(span.text for span in spans)
