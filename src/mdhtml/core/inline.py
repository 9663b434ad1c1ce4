"""Inline span rewriting: bold, italic, links, and inline code within one line"""

import logging
import re
from typing import Callable


logger = logging.getLogger(__name__)

BOLD_RE = re.compile(r'\*\*(.+?)\*\*')
ITALIC_RE = re.compile(r'\*(.+?)\*')
# Link text may hold one level of nested [] pairs; the url holds no parentheses.
LINK_RE = re.compile(r'\[([^\[\]]*(?:\[[^\[\]]*\][^\[\]]*)*)\]\(([^()]*)\)')
CODE_RE = re.compile(r'(`+)([^`]*)(`+)')


def _rewrite(pattern: re.Pattern, line: str, replace: Callable[[re.Match], str]) -> str:
    """Replace every match left to right, never rescanning emitted output."""
    parts = []
    rest = line
    while m := pattern.search(rest):
        parts.append(rest[:m.start()])
        parts.append(replace(m))
        rest = rest[m.end():]
    parts.append(rest)
    return ''.join(parts)


def convert_bold(line: str) -> str:
    """Convert **text** spans to <strong>text</strong>."""
    return _rewrite(BOLD_RE, line, lambda m: f"<strong>{m.group(1)}</strong>")


def convert_italic(line: str) -> str:
    """Convert *text* spans to <i>text</i>. Must run after convert_bold."""
    return _rewrite(ITALIC_RE, line, lambda m: f"<i>{m.group(1)}</i>")


def _link(m: re.Match) -> str:
    text, url = m.group(1), m.group(2)
    logger.debug("Found link %r -> %r", text, url)
    return f'<a href="{url}">{text}</a>'


def convert_links(line: str) -> str:
    """Convert [text](url) spans to anchors; text and url are copied verbatim."""
    return _rewrite(LINK_RE, line, _link)


def convert_inline_code(line: str) -> str:
    """Convert the first backtick-delimited span on the line to <code>.

    When the opening and closing backtick runs differ in length, the shorter
    run is the delimiter and the surplus backticks become part of the code:
    appended when the closing run is longer, prepended when the opening run is.
    An empty span leaves the whole line untouched.
    """
    m = CODE_RE.search(line)
    if m is None or not m.group(2):
        return line

    opening, code, closing = m.groups()
    surplus = abs(len(opening) - len(closing))
    if len(opening) < len(closing):
        code = code + closing[:surplus]
    elif len(opening) > len(closing):
        code = opening[:surplus] + code
    return f"{line[:m.start()]}<code>{code}</code>{line[m.end():]}"


def transform(line: str) -> str:
    """Apply bold, italic, link, and inline-code rewrites in that order."""
    line = convert_bold(line)
    line = convert_italic(line)
    line = convert_links(line)
    return convert_inline_code(line)
