"""Markdown file reader: returns the plain text of a file on disk."""
from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from src.convert.pipeline import MarkdownConverter
from src.shared.config import ConverterOptions


def parse_markdown(
    path: str | Path,
    options: ConverterOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Read a markdown file and return plain text (markup stripped)."""
    raw = Path(path).read_text(encoding="utf-8", errors="replace")
    return MarkdownConverter(options, **overrides).convert(raw)
