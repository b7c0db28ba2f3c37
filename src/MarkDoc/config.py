"""Conversion options: defaults, options.yaml file, MARKDOC_* env vars, overrides"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "MARKDOC_"
DEFAULT_AUTHOR = "Markdown to DOC Converter"
DEFAULT_TITLE = "Converted Document"


class ConversionOptions(BaseModel):
    """Document-level metadata for the word-processor output. Never affects parsing."""
    model_config = ConfigDict(frozen=True)

    author: str = Field(default=DEFAULT_AUTHOR, description="DOCX core property: creator")
    title:  str = Field(default=DEFAULT_TITLE,  description="DOCX core property: title")


def load_options(path: str | Path | None = None, overrides: dict[str, Any] | None = None) -> ConversionOptions:
    """Build options from defaults, then a YAML file, then env vars, then non-None overrides."""
    data: dict[str, Any] = {}
    source = "overrides"

    if path is not None:
        source = str(path)
        data.update(_read_yaml(Path(path)))

    for name in ConversionOptions.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ConversionOptions(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid options in {source}: {e}") from e


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except OSError as e:
        raise ValueError(f"Cannot read options file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid options file {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"Options file {path} must contain a mapping.")

    for key in raw.keys() - ConversionOptions.model_fields.keys():
        logger.warning("Ignoring unknown option %r in %s", key, path)
    return {k: v for k, v in raw.items() if k in ConversionOptions.model_fields and v is not None}
