"""Rewrite rules: one compiled pattern plus one replacement per construct.

Each stage in ``stages.py`` applies its rule tuple in order.  Rules are plain
frozen dataclasses so any single construct can be exercised on its own.

Escaped characters are swapped for private-use placeholders by the
normaliser (see ``protect``) and only turned back into literal characters by
the final cleanup, which keeps every rule in between from reading them as
syntax.
"""
from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from src.convert.tables import EMOJI, ENTITIES

Replacement = str | Callable[[re.Match[str]], str]


@dataclass(frozen=True)
class Rule:
    name: str
    pattern: re.Pattern[str]
    replace: Replacement

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replace, text)


def apply_rules(text: str, rules: Iterable[Rule]) -> str:
    for rule in rules:
        text = rule.apply(text)
    return text


# ── Escapes & placeholders ──────────────────────────────────────────────────

ESCAPABLE = "\\`*_{}[]()#+-.!$"
_PLACEHOLDER_BASE = 0xE000


def protect(char: str) -> str:
    """Return the placeholder standing in for a literal *char*."""
    return chr(_PLACEHOLDER_BASE + ord(char))


PLACEHOLDERS = re.compile("[" + "".join(re.escape(protect(c)) for c in ESCAPABLE) + "]")


def restore(text: str) -> str:
    """Turn placeholders back into the literal characters they protect."""
    return PLACEHOLDERS.sub(lambda m: chr(ord(m.group()) - _PLACEHOLDER_BASE), text)


# ── Entities ────────────────────────────────────────────────────────────────

ENTITY = re.compile(r"&(?:#(\d+)|#[xX]([0-9a-fA-F]+)|([A-Za-z][A-Za-z0-9]*));")

# Left for the final pass so literal angle brackets never look like tags.
_MARKUP_CHARS = frozenset("&<>\"'")


def entity_char(match: re.Match[str]) -> str | None:
    """Decode one entity match, or None when it is unknown or invalid."""
    decimal, hexadecimal, name = match.groups()
    if name is not None:
        return ENTITIES.get(name)
    try:
        codepoint = int(decimal) if decimal is not None else int(hexadecimal, 16)
        if codepoint == 0 or 0xD800 <= codepoint <= 0xDFFF:
            return None
        return chr(codepoint)
    except (ValueError, OverflowError):
        return None


def _pre_decode(match: re.Match[str]) -> str:
    char = entity_char(match)
    if char is None or char in _MARKUP_CHARS:
        return match.group(0)
    if char in ESCAPABLE:
        return protect(char)
    return char


def _final_decode(match: re.Match[str]) -> str:
    char = entity_char(match)
    return match.group(0) if char is None else char


# ── Shared shapes ───────────────────────────────────────────────────────────

_ORDERED_MARKER = r"(?:\d+[.)]|\[(?:\d+|(?![xX]\])[a-zA-Z])\]|\(?(?:\d+|[a-zA-Z])\))"
_INNER_MARKER = r"(?:[-*+]|\d+[.)]|\(?(?:\d+|[a-zA-Z])\))[ \t]+\S"

FENCE = re.compile(r"^[ \t]{0,3}(?:```|~~~)")
HR_LINE = re.compile(r"^[ \t]*([-*_])(?:[ \t]*\1){2,}[ \t]*$")
TABLE_SEPARATOR = re.compile(
    r"^[ \t]*\|?(?:[ \t]*:?-+:?[ \t]*\|)+(?:[ \t]*:?-+:?)?[ \t]*$"
)

TASK_ITEM = re.compile(r"^[-*+][ \t]+\[([ xX])\][ \t]+(.*)$")
ORDERED_ITEM = re.compile(r"^" + _ORDERED_MARKER + r"[ \t]+(.*)$")
UNORDERED_ITEM = re.compile(r"^[-*+][ \t]+(.*)$")


def checkbox(mark: str) -> str:
    return "[✓]" if mark.lower() == "x" else "[ ]"


def _emoji(match: re.Match[str]) -> str:
    return EMOJI.get(match.group(1), match.group(0))


def _blockquote(match: re.Match[str]) -> str:
    lead, markers, content = match.groups()
    return lead + "  " * (markers.count(">") - 1) + content.strip()


def _atx_text(match: re.Match[str]) -> str:
    text = match.group(1).rstrip(" \t")
    # A closing run of hashes counts only when whitespace separates it.
    bare = text.rstrip("#")
    if bare != text and bare[-1:] in (" ", "\t"):
        text = bare.rstrip(" \t")
    return text + "\n\n"


def _unwrap_code(match: re.Match[str]) -> str:
    return match.group(2).strip() + "\n\n"


def _unindent_code(match: re.Match[str]) -> str:
    return re.sub(r"^(?: {4}|\t)", "", match.group(0), flags=re.MULTILINE) + "\n"


# ── Stage rule tables ───────────────────────────────────────────────────────

NORMALIZE = (
    Rule("line_endings", re.compile(r"\r\n?"), "\n"),
    Rule("escapes", re.compile(r"\\([\\`*_{}\[\]()#+\-.!$])"), lambda m: protect(m.group(1))),
    Rule("entities", ENTITY, _pre_decode),
)

FRONTMATTER = Rule(
    "frontmatter",
    re.compile(r"\A---[ \t]*\n(?![ \t]*\n).*?\n---[ \t]*(?:\n|\Z)", re.DOTALL),
    "",
)

# Applied one line at a time by the nested-structure reducer.
NESTED = (
    Rule("blockquote", re.compile(r"^([ \t]*)((?:>[ \t]?)+)(.*)$"), _blockquote),
    Rule(
        "stacked_list_marker",
        re.compile(
            r"^([ \t]*)(?:[-*+]|" + _ORDERED_MARKER + r")[ \t]+(?=" + _INNER_MARKER + r"|>)"
        ),
        lambda m: " " * (len(m.group(1)) + 2),
    ),
)

# Delimited bodies stop at the next opener so an unclosed opener costs one
# scan up to the following one, not one to the end of the document.
_COMMENT = re.compile(r"<!--(?:(?!<!--).)*?-->", re.DOTALL)
_CDATA = re.compile(r"<!\[CDATA\[(?:(?!<!\[CDATA\[).)*?\]\]>", re.DOTALL)

HTML = (
    Rule("comments", _COMMENT, ""),
    Rule("cdata", _CDATA, ""),
    Rule(
        "tags",
        re.compile(
            r"<(?:/?[A-Za-z][A-Za-z0-9-]*(?:\s[^<>]*)?/?|![A-Za-z][^<>]*|\?[^<>]*\?)>"
        ),
        "",
    ),
)

INLINE = (
    Rule("bold_asterisk", re.compile(r"\*\*(?=\S)((?:(?!\*\*)[^\n])+?)(?<=\S)\*\*"), r"\1"),
    Rule("bold_underscore", re.compile(r"(?<!\w)__(?=\S)((?:(?!__)[^\n])+?)(?<=\S)__(?!\w)"), r"\1"),
    Rule("italic_asterisk", re.compile(r"\*(?=[^\s*])([^*\n]+?)(?<=[^\s*])\*"), r"\1"),
    Rule("italic_underscore", re.compile(r"(?<!\w)_(?=[^\s_])([^_\n]+?)(?<=[^\s_])_(?!\w)"), r"\1"),
    Rule("strikethrough", re.compile(r"~~(?=\S)((?:(?!~~)[^\n])+?)(?<=\S)~~"), r"\1"),
    Rule("inline_code", re.compile(r"(?<!`)`([^`\n]+)`(?!`)"), r"\1"),
    Rule("subscript", re.compile(r"(?<!~)~([^~\s]+)~(?!~)"), r"\1"),
    Rule("superscript", re.compile(r"(?<!\[)\^([^\^\s]+)\^"), r"\1"),
    Rule("highlight", re.compile(r"==(?=\S)([^=\n]+?)(?<=\S)=="), r"\1"),
    Rule("checkbox", re.compile(r"(?<![\w\]])\[([ xX])\](?![(\[:])"), lambda m: checkbox(m.group(1))),
    Rule("emoji", re.compile(r":([\w+-]+):"), _emoji),
)

BLOCKS = (
    Rule(
        "atx_header",
        re.compile(r"^[ \t]{0,3}#{1,6}[ \t]+(.*)$", re.MULTILINE),
        _atx_text,
    ),
    Rule(
        "fenced_code",
        re.compile(r"(```|``|`|~~~)(?:[\w+#.-]*[ \t]*\n)?(.*?)\1", re.DOTALL),
        _unwrap_code,
    ),
    Rule(
        "indented_code",
        re.compile(r"(?:\A|(?<=\n\n))(?:(?: {4}|\t)[^\n]*(?:\n|\Z))+"),
        _unindent_code,
    ),
    Rule(
        "setext_header",
        re.compile(r"^(?![ \t]*$)([^\n]+)\n[ \t]{0,3}(?:=+|-{2,})[ \t]*$", re.MULTILINE),
        lambda m: m.group(1).strip() + "\n\n",
    ),
    Rule("horizontal_rule", re.compile(r"^[ \t]*([-*_])(?:[ \t]*\1){2,}[ \t]*$", re.MULTILINE), ""),
)

_URL_TARGET = r"\((?:[^()\n]|\([^()\n]*\))*\)(?:\{[^}\n]*\})?"
_LABEL = r"\[([^\[\]]*)\]"
_LABEL_IMAGE = "!" + _LABEL

LINKS = (
    Rule(
        "reference_definition",
        re.compile(
            r"^[ \t]{0,3}\[(?!\^)[^\]\n]+\]:[ \t]*\S+"
            r"(?:[ \t]+(?:\"[^\"\n]*\"|'[^'\n]*'|\([^)\n]*\)))?[ \t]*$\n?",
            re.MULTILINE,
        ),
        "",
    ),
    Rule("comment_marker", re.compile(r"\[//\]:[ \t]*#[ \t]*(?:\([^()\n]*\)|\"[^\"\n]*\")"), ""),
    Rule("inline_image", re.compile(_LABEL_IMAGE + _URL_TARGET), r"\1"),
    Rule("reference_image", re.compile(_LABEL_IMAGE + r"\[[^\]]*\]"), r"\1"),
    Rule("inline_link", re.compile(_LABEL + _URL_TARGET), r"\1"),
    Rule("reference_link", re.compile(_LABEL + r"\[[^\]]*\]"), r"\1"),
    Rule(
        "autolink",
        re.compile(
            r"<((?:[A-Za-z][A-Za-z0-9+.-]{1,31}:|www\.)[^<>\s]*"
            r"|[^<>\s@]+@[^<>\s@.]+(?:\.[^<>\s@.]+)+)>"
        ),
        r"\1",
    ),
    Rule("footnote_reference", re.compile(r"\[\^[^\[\]\n]+\](?!:)"), ""),
    Rule(
        "footnote_definition",
        re.compile(r"^\[\^[^\]\n]+\]:.*(?:\n(?:[ \t]{2,}|\t).*)*\n?", re.MULTILINE),
        "",
    ),
    Rule("empty_brackets", re.compile(r"\[\]"), ""),
    Rule("residual_brackets", re.compile(r"\[(?![✓ ]\])([^\[\]\n]+)\]"), r"\1"),
)

MATH = (
    Rule("block_math", re.compile(r"\$\$(.+?)\$\$", re.DOTALL), lambda m: m.group(1).strip()),
    Rule("inline_math", re.compile(r"\$(?=\S)([^$\n]+?)(?<=\S)\$(?!\d)"), r"\1"),
    Rule(
        "latex_inline",
        re.compile(f"{protect('(')}([^{protect('(')}]+?){protect(')')}"),
        r"\1",
    ),
    Rule(
        "latex_display",
        re.compile(f"{protect('[')}([^{protect('[')}]+?){protect(']')}"),
        r"\1",
    ),
)

CLEANUP_ENTITIES = Rule("entities", ENTITY, _final_decode)

REMNANTS = (
    Rule("footnote_marker", re.compile(r"\[\^[\w-]+\]"), ""),
    Rule("cdata", _CDATA, ""),
    Rule("comment_marker_line", re.compile(r"^[ \t]*\[//\]:.*$", re.MULTILINE), ""),
)

TRAILING_WHITESPACE = Rule(
    "trailing_whitespace", re.compile(r"(?<![^\S\n])[^\S\n]+$", re.MULTILINE), ""
)
EXCESS_BLANK_LINES = Rule("excess_blank_lines", re.compile(r"\n{3,}"), "\n\n")

# A newline that is not part of a paragraph break.
SOFT_BREAK = re.compile(r"(?<!\n)\n(?!\n)")
SOFT_WRAP = re.compile(r"(?<!\n)\n(?!\n)[ \t]*")
HARD_BREAK = " \n"
