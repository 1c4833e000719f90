"""Command-line driver. Converts markdown files (or stdin) to plain text.

Usage:
    python -m src.convert.main README.md notes.md
    cat README.md | python -m src.convert.main --no-line-breaks
    python -m src.convert.main docs/*.md --out-dir build/text
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

import structlog

from src.convert.pipeline import ConversionResult, MarkdownConverter
from src.shared.errors import SizeLimitExceeded

log = structlog.get_logger()

STDIN = "-"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2text", description="Convert markdown to clean plain text."
    )
    parser.add_argument("paths", nargs="*", help="markdown files ('-' or none for stdin)")
    parser.add_argument("--out-dir", help="write <stem>.txt files here instead of stdout")
    parser.add_argument("--preserve-html", action="store_true", help="keep HTML tags")
    parser.add_argument(
        "--no-line-breaks", action="store_true", help="join soft-wrapped lines with spaces"
    )
    parser.add_argument(
        "--debug", action="store_true", help="report text size after each stage on stderr"
    )
    return parser


def _emit(source: str, result: ConversionResult, out_dir: str | None) -> None:
    if out_dir is None:
        sys.stdout.write(result.text + "\n")
        return
    stem = "stdin" if source == STDIN else Path(source).stem
    target = Path(out_dir) / f"{stem}.txt"
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(result.text + "\n", encoding="utf-8")
    log.info("converted", source=source, target=str(target), chars=len(result.text))


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, os.getenv("LOG_LEVEL", "WARNING"))
        ),
        # stdout carries the converted text
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )

    converter = MarkdownConverter(
        preserve_html=args.preserve_html,
        preserve_line_breaks=not args.no_line_breaks,
        debug=args.debug,
    )

    status = 0
    for source in args.paths or [STDIN]:
        try:
            if source == STDIN:
                raw = sys.stdin.read()
            else:
                raw = Path(source).read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            log.error("input_read_failed", source=source, error=str(exc))
            status = 1
            continue

        try:
            result = converter.run(raw)
        except SizeLimitExceeded as exc:
            log.error("input_rejected", source=source, size=exc.size, limit=exc.limit)
            status = 1
            continue

        if args.debug:
            for step in result.steps:
                print(f"[{source}] {step.stage}: {len(step.text)} chars", file=sys.stderr)
        _emit(source, result, args.out_dir)

    return status


if __name__ == "__main__":
    sys.exit(main())
