from __future__ import annotations

from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Inches, Pt, RGBColor

from .model import Alignment

CODE_FONT_NAME = "Courier New"
CODE_FONT_SIZE_PT = 10

CODE_LABEL_SHADING = "E0E0E0"
CODE_BODY_SHADING = "F5F5F5"
QUOTE_SHADING = "E3F2FD"
INLINE_CODE_COLOR = "1E3A8A"
INLINE_CODE_SHADING = "DBEAFE"
TABLE_HEADER_SHADING = "2563EB"
TABLE_HEADER_COLOR = "FFFFFF"
TABLE_ROW_SHADINGS = ("F9FAFB", "FFFFFF")
TABLE_OUTER_BORDER_COLOR = "CCCCCC"
TABLE_INNER_BORDER_COLOR = "E5E7EB"
# eighths of a point; 2 is the thinnest line Word accepts
TABLE_BORDER_SIZE = 2
# fiftieths of a percent
TABLE_FULL_WIDTH_PCT = 5000
# (top/bottom, left/right) in twips
TABLE_HEADER_CELL_MARGINS = (100, 100)
TABLE_BODY_CELL_MARGINS = (80, 100)

QUOTE_INDENT_IN = 0.5
LIST_INDENT_IN = 0.25

# (space_before, space_after) in points
HEADING_SPACING_PT = {1: (12, 6), 2: (10, 5), 3: (8, 4), 4: (6, 3)}
BODY_SPACING_PT = (3, 3)
QUOTE_SPACING_PT = (6, 6)
CODE_SPACING_PT = 6

ALIGNMENTS = {
    Alignment.LEFT: WD_ALIGN_PARAGRAPH.LEFT,
    Alignment.CENTER: WD_ALIGN_PARAGRAPH.CENTER,
    Alignment.RIGHT: WD_ALIGN_PARAGRAPH.RIGHT,
}


def set_spacing(paragraph, before: float, after: float) -> None:
    paragraph.paragraph_format.space_before = Pt(before)
    paragraph.paragraph_format.space_after = Pt(after)


def apply_body_paragraph_format(paragraph) -> None:
    set_spacing(paragraph, *BODY_SPACING_PT)


def apply_heading_format(paragraph, level: int) -> None:
    set_spacing(paragraph, *HEADING_SPACING_PT.get(level, BODY_SPACING_PT))


def apply_quote_format(paragraph) -> None:
    set_spacing(paragraph, *QUOTE_SPACING_PT)
    paragraph.paragraph_format.left_indent = Inches(QUOTE_INDENT_IN)
    shade_paragraph(paragraph, QUOTE_SHADING)


def apply_list_item_format(paragraph) -> None:
    apply_body_paragraph_format(paragraph)
    paragraph.paragraph_format.left_indent = Inches(LIST_INDENT_IN)


def apply_code_format(paragraph, shading: str) -> None:
    set_spacing(paragraph, 0, 0)
    paragraph.paragraph_format.line_spacing = 1.0
    shade_paragraph(paragraph, shading)


def set_run_font(run, bold: bool = False, italic: bool = False, code: bool = False) -> None:
    # Only switch formatting on, so paragraph styles (e.g. headings) still apply.
    if bold:
        run.bold = True
    if italic:
        run.italic = True
    if code:
        run.font.name = CODE_FONT_NAME
        run.font.color.rgb = RGBColor.from_string(INLINE_CODE_COLOR)
        shade_run(run, INLINE_CODE_SHADING)


def set_code_line_font(run) -> None:
    run.font.name = CODE_FONT_NAME
    run.font.size = Pt(CODE_FONT_SIZE_PT)


def paragraph_alignment(alignment: Alignment | None):
    return ALIGNMENTS.get(alignment, WD_ALIGN_PARAGRAPH.LEFT)


def _shading_element(fill: str):
    shd = OxmlElement("w:shd")
    shd.set(qn("w:val"), "clear")
    shd.set(qn("w:color"), "auto")
    shd.set(qn("w:fill"), fill)
    return shd


# Elements that must follow w:shd inside each properties element.
_PPR_AFTER_SHD = (
    "w:tabs", "w:suppressAutoHyphens", "w:kinsoku", "w:wordWrap", "w:overflowPunct",
    "w:topLinePunct", "w:autoSpaceDE", "w:autoSpaceDN", "w:bidi", "w:adjustRightInd",
    "w:snapToGrid", "w:spacing", "w:ind", "w:contextualSpacing", "w:mirrorIndents",
    "w:suppressOverlap", "w:jc", "w:textDirection", "w:textAlignment", "w:textboxTightWrap",
    "w:outlineLvl", "w:divId", "w:cnfStyle", "w:rPr", "w:sectPr", "w:pPrChange",
)
_RPR_AFTER_SHD = (
    "w:fitText", "w:vertAlign", "w:rtl", "w:cs", "w:em", "w:lang",
    "w:eastAsianLayout", "w:specVanish", "w:oMath",
)
_TCPR_AFTER_SHD = (
    "w:noWrap", "w:tcMar", "w:textDirection", "w:tcFitText", "w:vAlign",
    "w:hideMark", "w:headers", "w:cellIns", "w:cellDel", "w:cellMerge", "w:tcPrChange",
)


_TBLPR_AFTER_TBLW = (
    "w:jc", "w:tblCellSpacing", "w:tblInd", "w:tblBorders", "w:shd", "w:tblLayout",
    "w:tblCellMar", "w:tblLook", "w:tblCaption", "w:tblDescription", "w:tblPrChange",
)
_TBLPR_AFTER_BORDERS = _TBLPR_AFTER_TBLW[4:]
_TCPR_AFTER_TCMAR = _TCPR_AFTER_SHD[2:]


def _replace_child(properties, element, successors: tuple[str, ...]) -> None:
    for child in list(properties):
        if child.tag == element.tag:
            properties.remove(child)
    properties.insert_element_before(element, *successors)


def _replace_shading(properties, fill: str, successors: tuple[str, ...]) -> None:
    _replace_child(properties, _shading_element(fill), successors)


def shade_paragraph(paragraph, fill: str) -> None:
    _replace_shading(paragraph._p.get_or_add_pPr(), fill, _PPR_AFTER_SHD)


def shade_run(run, fill: str) -> None:
    _replace_shading(run._r.get_or_add_rPr(), fill, _RPR_AFTER_SHD)


def shade_cell(cell, fill: str) -> None:
    _replace_shading(cell._tc.get_or_add_tcPr(), fill, _TCPR_AFTER_SHD)


def set_table_full_width(table) -> None:
    tbl_w = OxmlElement("w:tblW")
    tbl_w.set(qn("w:type"), "pct")
    tbl_w.set(qn("w:w"), str(TABLE_FULL_WIDTH_PCT))
    _replace_child(table._tbl.tblPr, tbl_w, _TBLPR_AFTER_TBLW)


def set_table_borders(table) -> None:
    borders = OxmlElement("w:tblBorders")
    for edge in ("top", "left", "bottom", "right", "insideH", "insideV"):
        color = TABLE_INNER_BORDER_COLOR if edge.startswith("inside") else TABLE_OUTER_BORDER_COLOR
        border = OxmlElement(f"w:{edge}")
        border.set(qn("w:val"), "single")
        border.set(qn("w:sz"), str(TABLE_BORDER_SIZE))
        border.set(qn("w:space"), "0")
        border.set(qn("w:color"), color)
        borders.append(border)
    _replace_child(table._tbl.tblPr, borders, _TBLPR_AFTER_BORDERS)


def set_cell_margins(cell, vertical: int, horizontal: int) -> None:
    margins = OxmlElement("w:tcMar")
    for edge, width in (("top", vertical), ("left", horizontal), ("bottom", vertical), ("right", horizontal)):
        side = OxmlElement(f"w:{edge}")
        side.set(qn("w:w"), str(width))
        side.set(qn("w:type"), "dxa")
        margins.append(side)
    _replace_child(cell._tc.get_or_add_tcPr(), margins, _TCPR_AFTER_TCMAR)
