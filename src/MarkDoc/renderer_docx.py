from __future__ import annotations

from pathlib import Path
from typing import IO, Iterable, Sequence

from docx import Document as DocxDocument
from docx.shared import Pt, RGBColor

from . import docx_format
from .config import ConversionOptions
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

BULLET_PREFIX = "• "


def build_document(doc: Document, options: ConversionOptions | None = None):
    """Map the block sequence onto a fresh python-docx document."""
    options = options or ConversionOptions()
    docx = DocxDocument()
    docx.core_properties.author = options.author
    docx.core_properties.title = options.title

    for block in doc.blocks:
        _dispatch_block(docx, block)
    return docx


def render_document(
    doc: Document,
    output: str | Path | IO[bytes],
    options: ConversionOptions | None = None,
) -> None:
    docx = build_document(doc, options)
    if isinstance(output, (str, Path)):
        output = Path(output)
        output.parent.mkdir(parents=True, exist_ok=True)
    docx.save(output)


def _dispatch_block(docx, block: Block) -> None:
    if isinstance(block, Heading):
        _render_heading(docx, block)
    elif isinstance(block, Paragraph):
        _render_paragraph(docx, block.inline)
    elif isinstance(block, BlockQuote):
        _render_quote(docx, block)
    elif isinstance(block, ListBlock):
        _render_list(docx, block)
    elif isinstance(block, CodeBlock):
        _render_code_block(docx, block)
    elif isinstance(block, TableBlock):
        _render_table_block(docx, block)
    elif isinstance(block, Blank):
        docx.add_paragraph()


def _render_heading(docx, heading: Heading) -> None:
    paragraph = docx.add_heading("", level=heading.level)
    _add_runs(paragraph, heading.inline)
    docx_format.apply_heading_format(paragraph, heading.level)


def _render_paragraph(docx, inline: Iterable[InlineSpan]) -> None:
    paragraph = docx.add_paragraph()
    _add_runs(paragraph, inline)
    docx_format.apply_body_paragraph_format(paragraph)


def _render_quote(docx, block: BlockQuote) -> None:
    paragraph = docx.add_paragraph()
    docx_format.apply_quote_format(paragraph)
    _add_runs(paragraph, block.inline)


def _render_list(docx, block: ListBlock) -> None:
    # Numbering always restarts at 1; source digits are not kept.
    for idx, item in enumerate(block.items, start=1):
        paragraph = docx.add_paragraph()
        paragraph.add_run(f"{idx}. " if block.ordered else BULLET_PREFIX)
        _add_runs(paragraph, item)
        docx_format.apply_list_item_format(paragraph)


def _render_code_block(docx, block: CodeBlock) -> None:
    label = docx.add_paragraph()
    docx_format.apply_code_format(label, docx_format.CODE_LABEL_SHADING)
    label.paragraph_format.space_before = Pt(docx_format.CODE_SPACING_PT)
    docx_format.set_code_line_font(label.add_run(block.language or "code"))

    for idx, line in enumerate(block.lines):
        paragraph = docx.add_paragraph()
        docx_format.apply_code_format(paragraph, docx_format.CODE_BODY_SHADING)
        if idx == len(block.lines) - 1:
            paragraph.paragraph_format.space_after = Pt(docx_format.CODE_SPACING_PT)
        docx_format.set_code_line_font(paragraph.add_run(line))


def _render_table_block(docx, block: TableBlock) -> None:
    col_count = max(len(block.headers), 1)
    table = docx.add_table(rows=1 + len(block.rows), cols=col_count)
    table.style = "Table Grid"
    docx_format.set_table_full_width(table)
    docx_format.set_table_borders(table)

    for c_idx, cell in enumerate(table.rows[0].cells):
        docx_format.shade_cell(cell, docx_format.TABLE_HEADER_SHADING)
        docx_format.set_cell_margins(cell, *docx_format.TABLE_HEADER_CELL_MARGINS)
        spans = block.headers[c_idx] if c_idx < len(block.headers) else []
        paragraph = _fill_cell(cell, spans, _column_alignment(block.alignments, c_idx))
        for run in paragraph.runs:
            run.bold = True
            run.font.color.rgb = RGBColor.from_string(docx_format.TABLE_HEADER_COLOR)

    for r_idx, row in enumerate(block.rows):
        shading = docx_format.TABLE_ROW_SHADINGS[r_idx % 2]
        for c_idx, cell in enumerate(table.rows[r_idx + 1].cells):
            docx_format.shade_cell(cell, shading)
            docx_format.set_cell_margins(cell, *docx_format.TABLE_BODY_CELL_MARGINS)
            # Short rows leave trailing cells empty; extra cells are dropped.
            spans = row[c_idx] if c_idx < len(row) else []
            _fill_cell(cell, spans, _column_alignment(block.alignments, c_idx))


def _fill_cell(cell, spans: Sequence[InlineSpan], alignment: Alignment | None):
    paragraph = cell.paragraphs[0]
    paragraph.alignment = docx_format.paragraph_alignment(alignment)
    _add_runs(paragraph, spans)
    return paragraph


def _column_alignment(alignments: Sequence[Alignment], index: int) -> Alignment | None:
    return alignments[index] if index < len(alignments) else None


def _add_runs(paragraph, spans: Iterable[InlineSpan]) -> None:
    for span in spans:
        run = paragraph.add_run(span.text)
        docx_format.set_run_font(
            run,
            bold=span.kind is SpanKind.BOLD,
            italic=span.kind is SpanKind.ITALIC,
            code=span.kind is SpanKind.CODE,
        )
