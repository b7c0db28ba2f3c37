"""Screen preview: blocks -> markdown-it display tokens -> HTML.

Only markdown-it's token model and HTML renderer are used here; the Markdown
source is never handed to markdown-it's own parser, so the preview follows
exactly the same grammar as the DOCX output.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml
from markdown_it.token import Token
from markdown_it.tree import SyntaxTreeNode

from .inline import spans_to_text
from .model import (
    Alignment,
    Blank,
    Block,
    BlockQuote,
    CodeBlock,
    Document,
    Heading,
    InlineSpan,
    ListBlock,
    Paragraph,
    SpanKind,
    TableBlock,
)

PREVIEW_CLASS = "markdoc-preview"

STYLESHEET = """\
.markdoc-preview { max-width: 56rem; margin: 0 auto; font-family: sans-serif; color: #374151; line-height: 1.6; }
.markdoc-preview h1 { font-size: 1.875rem; border-bottom: 2px solid #e5e7eb; padding-bottom: .5rem; color: #111827; }
.markdoc-preview h2 { font-size: 1.5rem; color: #111827; }
.markdoc-preview h3 { font-size: 1.25rem; color: #1f2937; }
.markdoc-preview h4 { font-size: 1.125rem; color: #1f2937; }
.markdoc-preview blockquote { border-left: 4px solid #3b82f6; background: #eff6ff; margin: 1rem 0; padding: .5rem 1rem; font-style: italic; }
.markdoc-preview code { background: #dbeafe; color: #1e40af; border: 1px solid #bfdbfe; border-radius: 4px; padding: 0 .4rem; }
.markdoc-preview .code-block { margin: 1rem 0; }
.markdoc-preview .code-label { background: #1f2937; color: #d1d5db; font-family: monospace; font-size: .75rem; padding: .5rem 1rem; border-radius: 8px 8px 0 0; }
.markdoc-preview pre { background: #111827; color: #f3f4f6; margin: 0; padding: 1rem; border-radius: 0 0 8px 8px; overflow-x: auto; }
.markdoc-preview pre code { background: none; border: 0; color: inherit; padding: 0; }
.markdoc-preview table { border-collapse: collapse; min-width: 100%; margin: 1.5rem 0; }
.markdoc-preview th { background: #2563eb; color: #fff; padding: .75rem 1.5rem; }
.markdoc-preview td { padding: .75rem 1.5rem; border-bottom: 1px solid #e5e7eb; }
.markdoc-preview tbody tr:nth-child(odd) { background: #f9fafb; }
.markdoc-preview .spacer { height: 1rem; }
"""

PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
{stylesheet}</style>
</head>
<body>
{body}</body>
</html>
"""

_SPAN_TAGS = {SpanKind.BOLD: ("strong", "strong"), SpanKind.ITALIC: ("em", "em")}

_md = MarkdownIt("commonmark")


def to_tokens(doc: Document) -> List[Token]:
    """Flat, properly nested display-token stream for the whole document."""
    tokens: List[Token] = []
    for block in doc.blocks:
        tokens.extend(_block_tokens(block))
    return tokens


def to_tree(doc: Document) -> SyntaxTreeNode:
    return SyntaxTreeNode(to_tokens(doc))


def render_html(doc: Document) -> str:
    body = _md.renderer.render(to_tokens(doc), _md.options, {})
    return f'<div class="{PREVIEW_CLASS}">\n{body}</div>\n'


def render_page(doc: Document, title: str = "Preview") -> str:
    return PAGE_TEMPLATE.format(title=escapeHtml(title), stylesheet=STYLESHEET, body=render_html(doc))


def _block_tokens(block: Block) -> List[Token]:
    if isinstance(block, Heading):
        return _wrap("heading", f"h{block.level}", [_inline(block.inline)])
    if isinstance(block, Paragraph):
        return _wrap("paragraph", "p", [_inline(block.inline)])
    if isinstance(block, BlockQuote):
        return _wrap("blockquote", "blockquote", _wrap("paragraph", "p", [_inline(block.inline)]))
    if isinstance(block, ListBlock):
        return _list_tokens(block)
    if isinstance(block, CodeBlock):
        return _code_tokens(block)
    if isinstance(block, TableBlock):
        return _table_tokens(block)
    if isinstance(block, Blank):
        return _wrap("spacer", "div", [], attrs={"class": "spacer"})
    return []


def _list_tokens(block: ListBlock) -> List[Token]:
    name, tag = ("ordered_list", "ol") if block.ordered else ("bullet_list", "ul")
    items: List[Token] = []
    for item in block.items:
        items.extend(_wrap("list_item", "li", [_inline(item)]))
    return _wrap(name, tag, items)


def _code_tokens(block: CodeBlock) -> List[Token]:
    label = _inline([InlineSpan(SpanKind.PLAIN, block.language or "code")])
    fence = Token(
        "fence",
        "code",
        0,
        content="".join(f"{line}\n" for line in block.lines),
        info=block.language,
        markup="```",
        block=True,
    )
    inner = _wrap("code_label", "div", [label], attrs={"class": "code-label"}) + [fence]
    return _wrap("code_container", "div", inner, attrs={"class": "code-block"})


def _table_tokens(block: TableBlock) -> List[Token]:
    head = _wrap("tr", "tr", _cell_tokens("th", block.headers, block.alignments))
    parts = _wrap("thead", "thead", head)
    if block.rows:
        body: List[Token] = []
        for row in block.rows:
            body.extend(_wrap("tr", "tr", _cell_tokens("td", row, block.alignments)))
        parts += _wrap("tbody", "tbody", body)
    return _wrap("table", "table", parts)


def _cell_tokens(tag: str, cells: Sequence[List[InlineSpan]], alignments: Sequence[Alignment]) -> List[Token]:
    tokens: List[Token] = []
    for idx, spans in enumerate(cells):
        # Cells beyond the separator's columns fall back to left alignment.
        alignment = alignments[idx] if idx < len(alignments) else Alignment.LEFT
        tokens.extend(_wrap(tag, tag, [_inline(spans)], attrs={"style": f"text-align:{alignment.value}"}))
    return tokens


def _inline(spans: Iterable[InlineSpan]) -> Token:
    spans = list(spans)
    children: List[Token] = []
    for span in spans:
        if span.kind is SpanKind.CODE:
            children.append(Token("code_inline", "code", 0, content=span.text, markup="`"))
        elif span.kind in _SPAN_TAGS:
            name, tag = _SPAN_TAGS[span.kind]
            children.append(Token(f"{name}_open", tag, 1))
            children.append(Token("text", "", 0, content=span.text))
            children.append(Token(f"{name}_close", tag, -1))
        else:
            children.append(Token("text", "", 0, content=span.text))
    return Token("inline", "", 0, content=spans_to_text(spans), children=children)


def _wrap(name: str, tag: str, inner: List[Token], attrs: dict | None = None) -> List[Token]:
    opening = Token(f"{name}_open", tag, 1, attrs=attrs or {}, block=True)
    closing = Token(f"{name}_close", tag, -1, block=True)
    return [opening, *inner, closing]
