"""Single-line classification into block-level tokens"""

import re
from typing import Iterable

from mdhtml.core.inline import transform
from mdhtml.core.models import (
    CodeFence,
    Empty,
    Header,
    HorizontalRule,
    LineBreak,
    OrderedListItem,
    Paragraph,
    Quote,
    Token,
    UnorderedListItem,
)


ORDERED_ITEM_RE = re.compile(r'^\d+\.\s')
BULLETS = ('-', '*', '+')
FENCE = '```'
RULE = '---'
QUOTE_PREFIX = '> '
# Text of a quote whose nested content is not a plain paragraph.
QUOTE_PLACEHOLDER = '[DEBUG]'


def _header(line: str) -> Header | None:
    """Return a Header when the # run is followed by a single space, else None."""
    level = len(line) - len(line.lstrip('#'))
    rest = line[level:]
    if not rest.startswith(' '):
        return None
    return Header(level=level, text=transform(rest[1:]))


def _quote(line: str) -> Quote:
    nested = classify(transform(line[len(QUOTE_PREFIX):]))
    if isinstance(nested, Paragraph):
        return Quote(text=nested.text, nested=Empty())
    return Quote(text=QUOTE_PLACEHOLDER, nested=nested)


def classify(line: str) -> Token:
    """Map one line to its block token; first matching rule wins, Paragraph otherwise."""
    if line.startswith('#') and (header := _header(line)):
        return header

    if line.startswith(QUOTE_PREFIX):
        return _quote(line)

    if line.strip() == RULE:
        return HorizontalRule()

    if len(line) > 1 and line[0] in BULLETS and line[1] == ' ':
        return UnorderedListItem(text=transform(line[2:]))

    if line.startswith(FENCE):
        return CodeFence()

    if m := ORDERED_ITEM_RE.match(line):
        return OrderedListItem(text=transform(line[m.end():]))

    if not line.strip():
        return LineBreak()

    return Paragraph(text=transform(line))


def classify_all(lines: Iterable[str]) -> list[Token]:
    """Classify each line independently; one token per line, input order kept."""
    return [classify(line) for line in lines]
