from __future__ import annotations

import io
import logging
import time
from dataclasses import dataclass

from . import markdown_parser, renderer_docx, renderer_html
from .config import ConversionOptions
from .model import Document

logger = logging.getLogger(__name__)


class ConversionFailed(Exception):
    """Building or serializing the DOCX output failed; no file was produced."""


@dataclass
class Conversion:
    document: Document
    html: str
    docx: bytes


def to_html(text: str) -> str:
    return renderer_html.render_html(markdown_parser.parse_markdown(text))


def to_docx_bytes(text: str, options: ConversionOptions | None = None) -> bytes:
    return _serialize(markdown_parser.parse_markdown(text), options)


def convert(text: str, options: ConversionOptions | None = None) -> Conversion:
    """Parse once and feed the same block sequence to both renderers."""
    document = markdown_parser.parse_markdown(text)
    return Conversion(
        document=document,
        html=renderer_html.render_html(document),
        docx=_serialize(document, options),
    )


def default_filename(now: float | None = None) -> str:
    stamp = int((time.time() if now is None else now) * 1000)
    return f"document-{stamp}.docx"


def _serialize(document: Document, options: ConversionOptions | None) -> bytes:
    buffer = io.BytesIO()
    try:
        renderer_docx.render_document(document, buffer, options)
    except Exception as e:
        raise ConversionFailed(f"Failed to convert document: {e}") from e
    logger.debug("Serialized %d blocks into %d bytes", len(document.blocks), buffer.tell())
    return buffer.getvalue()
