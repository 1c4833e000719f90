"""Converter options: one immutable settings object per converter instance.

Callers pass a mapping (camelCase or snake_case keys), an existing
ConverterOptions, or keyword overrides.  Unknown keys are ignored and invalid
values fall back to defaults, so building a converter never fails.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

log = structlog.get_logger()

# 10 MiB of characters; checked before any stage runs.
MAX_INPUT_CHARS = 10 * 1024 * 1024

# Safety cap for the blockquote/list fixed-point loop.
MAX_NESTING_PASSES = 100


class ConverterOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    preserve_html: bool = Field(False, alias="preserveHTML")
    preserve_line_breaks: bool = Field(True, alias="preserveLineBreaks")
    debug: bool = False


def load_options(
    options: ConverterOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> ConverterOptions:
    """Build ConverterOptions from a mapping/instance plus overrides."""
    if isinstance(options, ConverterOptions):
        if not overrides:
            return options
        raw: dict[str, Any] = options.model_dump()
    else:
        raw = dict(options or {})
    raw.update(overrides)

    try:
        return ConverterOptions.model_validate(raw)
    except ValidationError as exc:
        bad = {str(err["loc"][0]) for err in exc.errors() if err["loc"]}
        # Error locations may report the alias even when the name was passed.
        for name, field in ConverterOptions.model_fields.items():
            if name in bad or field.alias in bad:
                bad.update({name, field.alias or name})
        log.warning("converter_options_invalid", fields=sorted(bad), using="defaults")
        return ConverterOptions.model_validate(
            {k: v for k, v in raw.items() if k not in bad}
        )
