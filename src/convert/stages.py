"""The ten ordered conversion stages.

Every stage is a pure ``str -> str`` function over the whole document.  The
line-oriented stages (nested structures, tables, lists) leave fenced code
regions untouched so code lines keep their markers until the block stage
unwraps the fence.
"""
from __future__ import annotations

import functools
import textwrap
from collections.abc import Callable
from dataclasses import dataclass

import structlog

from src.convert import rules
from src.shared.config import MAX_NESTING_PASSES, ConverterOptions

log = structlog.get_logger()


@dataclass(frozen=True)
class Stage:
    name: str
    run: Callable[[str], str]


def _map_outside_fences(text: str, fn: Callable[[str], str]) -> str:
    """Apply *fn* to every line that is not inside a fenced code block."""
    out: list[str] = []
    in_fence = False
    for line in text.split("\n"):
        if rules.FENCE.match(line):
            in_fence = not in_fence
            out.append(line)
        elif in_fence:
            out.append(line)
        else:
            out.append(fn(line))
    return "\n".join(out)


# ── 1. Normalizer ───────────────────────────────────────────────────────────

def normalize(text: str) -> str:
    """Unify line endings, protect escaped characters, pre-decode entities."""
    return rules.apply_rules(text, rules.NORMALIZE)


# ── 2. Frontmatter & nested structures ──────────────────────────────────────

def _flatten_line(line: str) -> str:
    if rules.HR_LINE.match(line):
        return line
    return rules.apply_rules(line, rules.NESTED)


def reduce_nested_structures(text: str) -> str:
    """Drop leading YAML frontmatter, then flatten blockquote prefixes and
    stacked list markers until a pass changes nothing.
    """
    text = rules.FRONTMATTER.apply(text)

    previous = None
    passes = 0
    while text != previous:
        if passes >= MAX_NESTING_PASSES:
            log.warning("nesting_pass_limit_reached", passes=passes)
            break
        previous = text
        text = _map_outside_fences(text, _flatten_line)
        passes += 1
    return text


# ── 3. Tables ───────────────────────────────────────────────────────────────

def _join_cells(row: str) -> str:
    cells = row.strip().strip("|").split("|")
    return "  ".join(cell.strip() for cell in cells)


def reduce_tables(text: str) -> str:
    """Turn pipe tables into rows of cells separated by two spaces.

    The row right above a separator line is the header; the separator itself
    is dropped.  The table ends at the first line not starting with ``|``.
    """
    result: list[str] = []
    in_table = False
    in_fence = False

    for line in text.split("\n"):
        if rules.FENCE.match(line):
            in_fence = not in_fence
            in_table = False
            result.append(line)
            continue
        if in_fence:
            result.append(line)
            continue

        if rules.TABLE_SEPARATOR.match(line):
            if not in_table and result and "|" in result[-1]:
                result[-1] = _join_cells(result[-1])
            in_table = True
            continue

        if in_table and line.strip().startswith("|"):
            result.append(_join_cells(line))
            continue

        in_table = False
        result.append(line)

    return "\n".join(result)


# ── 4. Lists ────────────────────────────────────────────────────────────────

def list_item_text(content: str) -> str | None:
    """Return the item text of a stripped list line, or None if not an item."""
    m = rules.TASK_ITEM.match(content)
    if m:
        return f"{rules.checkbox(m.group(1))} {m.group(2)}"
    m = rules.ORDERED_ITEM.match(content) or rules.UNORDERED_ITEM.match(content)
    if m:
        return m.group(1)
    return None


def reduce_lists(text: str) -> str:
    """Strip list markers, indenting items two spaces per open nesting level."""
    stack: list[int] = []
    out: list[str] = []
    in_fence = False

    for line in text.split("\n"):
        if rules.FENCE.match(line):
            in_fence = not in_fence
            out.append(line)
            continue
        if in_fence or not line.strip():
            out.append(line)
            continue
        if rules.HR_LINE.match(line):
            stack.clear()
            out.append(line)
            continue

        stripped = line.lstrip(" \t")
        indent = len(line[: len(line) - len(stripped)].expandtabs(4))
        while stack and stack[-1] >= indent:
            stack.pop()

        item = list_item_text(stripped.rstrip())
        if item is None:
            out.append(line)
            continue

        stack.append(indent)
        out.append("  " * (len(stack) - 1) + item)

    return "\n".join(out)


# ── 5. HTML ─────────────────────────────────────────────────────────────────

def strip_html(text: str) -> str:
    return rules.apply_rules(text, rules.HTML)


# ── 6–9. Inline, blocks, links, math ────────────────────────────────────────

def reduce_inline_formatting(text: str) -> str:
    return rules.apply_rules(text, rules.INLINE)


def reduce_blocks(text: str) -> str:
    return rules.apply_rules(text, rules.BLOCKS)


def reduce_links(text: str) -> str:
    return rules.apply_rules(text, rules.LINKS)


def reduce_math(text: str) -> str:
    return rules.apply_rules(text, rules.MATH)


# ── 10. Final cleanup ───────────────────────────────────────────────────────

def _dedent_paragraphs(text: str) -> str:
    # Only whitespace shared by a whole paragraph goes, so nested list
    # items keep their indent relative to their parent.
    return "\n\n".join(textwrap.dedent(block) for block in text.split("\n\n"))


def final_cleanup(text: str, preserve_line_breaks: bool = True) -> str:
    """Decode entities, normalise whitespace and apply the line-break policy."""
    text = rules.CLEANUP_ENTITIES.apply(text)
    text = rules.apply_rules(text, rules.REMNANTS)
    text = rules.TRAILING_WHITESPACE.apply(text)
    text = rules.EXCESS_BLANK_LINES.apply(text)
    text = _dedent_paragraphs(text)
    text = rules.restore(text).strip()

    if preserve_line_breaks:
        return rules.SOFT_BREAK.sub(rules.HARD_BREAK, text)
    return rules.SOFT_WRAP.sub(" ", text)


def build_stages(options: ConverterOptions) -> tuple[Stage, ...]:
    """Return the pipeline for *options*, in execution order."""
    stages = [
        Stage("normalize", normalize),
        Stage("nested_structures", reduce_nested_structures),
        Stage("tables", reduce_tables),
        Stage("lists", reduce_lists),
    ]
    if not options.preserve_html:
        stages.append(Stage("html", strip_html))
    stages += [
        Stage("inline_formatting", reduce_inline_formatting),
        Stage("blocks", reduce_blocks),
        Stage("links", reduce_links),
        Stage("math", reduce_math),
        Stage(
            "cleanup",
            functools.partial(
                final_cleanup, preserve_line_breaks=options.preserve_line_breaks
            ),
        ),
    ]
    return tuple(stages)
