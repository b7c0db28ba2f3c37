from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from .converter import default_filename

STDIN = "-"


def configure_logging(verbose: bool = False) -> None:
    """Configure a simple console logger."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(message)s",
    )


def resolve_output_path(input_name: str, output: Optional[str]) -> Path:
    default_name = default_filename() if input_name == STDIN else f"{Path(input_name).stem}.docx"
    if output:
        out_path = Path(output)
        if out_path.is_dir():
            out_path = out_path / default_name
        return out_path
    if input_name == STDIN:
        return Path(default_name)
    return Path(input_name).with_suffix(".docx")


def read_markdown(input_name: str) -> str:
    if input_name == STDIN:
        return sys.stdin.read()
    return Path(input_name).read_text(encoding="utf-8")
