"""MarkdownConverter runs the ordered stages over one document.

Usage:
    converter = MarkdownConverter({"preserveHTML": True})
    text = converter.convert(markdown)

    result = MarkdownConverter(debug=True).run(markdown)
    for step in result.steps:
        print(step.stage, len(step.text))
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import structlog

from src.convert.stages import Stage, build_stages
from src.shared.config import MAX_INPUT_CHARS, ConverterOptions, load_options
from src.shared.errors import SizeLimitExceeded

log = structlog.get_logger()


@dataclass(frozen=True)
class StageSnapshot:
    stage: str
    text: str


@dataclass(frozen=True)
class ConversionResult:
    text: str
    steps: tuple[StageSnapshot, ...] = ()


class MarkdownConverter:
    """Markdown to plain text converter.

    Options are fixed at construction.  ``run`` returns the debug snapshots
    with the result, so one instance can be shared between threads;
    ``last_debug_log`` mirrors the most recent call for single-threaded use.
    """

    def __init__(
        self,
        options: ConverterOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> None:
        self.options = load_options(options, **overrides)
        self.stages: tuple[Stage, ...] = build_stages(self.options)
        self.last_debug_log: list[StageSnapshot] = []

    def run(self, markdown: Any) -> ConversionResult:
        """Convert *markdown*, returning the text and any stage snapshots.

        Raises:
            SizeLimitExceeded: input is longer than MAX_INPUT_CHARS.
        """
        self.last_debug_log = []
        if not markdown:
            return ConversionResult("")

        if isinstance(markdown, bytes):
            text = markdown.decode("utf-8", errors="replace")
        else:
            text = str(markdown)
        if len(text) > MAX_INPUT_CHARS:
            log.warning("input_size_limit_exceeded", size=len(text), limit=MAX_INPUT_CHARS)
            raise SizeLimitExceeded(len(text), MAX_INPUT_CHARS)

        steps: list[StageSnapshot] = []
        for stage in self.stages:
            text = stage.run(text)
            if self.options.debug:
                steps.append(StageSnapshot(stage.name, text))
                log.debug("stage_complete", stage=stage.name, chars=len(text))

        result = ConversionResult(text, tuple(steps))
        self.last_debug_log = list(result.steps)
        return result

    def convert(self, markdown: Any) -> str:
        """Return *markdown* converted to plain text."""
        return self.run(markdown).text


def convert(
    markdown: Any,
    options: ConverterOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """One-shot conversion with a throwaway converter."""
    return MarkdownConverter(options, **overrides).convert(markdown)
