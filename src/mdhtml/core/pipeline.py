"""Conversion entry points: lines -> tokens -> markup lines, and file orchestration"""

import logging
from collections import Counter
from pathlib import Path
from typing import Iterable

from mdhtml.core.classify import classify_all
from mdhtml.core.group import group
from mdhtml.core.models import Token
from mdhtml.core.render import render
from mdhtml.util.fs import read_lines, write_lines


logger = logging.getLogger(__name__)


def tokenize(lines: Iterable[str]) -> list[Token]:
    """Classify and group a document's lines without rendering them."""
    raw_lines = list(lines)
    tokens = group(classify_all(raw_lines), raw_lines)
    if logger.isEnabledFor(logging.DEBUG):
        kinds = Counter(t.kind.value for t in tokens)
        logger.debug("Tokenized %d line(s) into %d token(s): %s", len(raw_lines), len(tokens), dict(kinds))
    return tokens


def convert(lines: Iterable[str]) -> list[str]:
    """Convert one document's source lines into output markup lines."""
    return [render(token) for token in tokenize(lines)]


def run_convert(src: Path, dest: Path, encoding: str = "utf-8") -> int:
    """Read src, convert it, and write the markup to dest. Returns bytes written."""
    logger.info("Starting conversion of %s", src)
    try:
        lines = read_lines(src, encoding)
    except (OSError, LookupError, UnicodeDecodeError) as e:
        raise RuntimeError(f"Failed to read {src}: {e}") from e

    html_lines = convert(lines)

    try:
        written = write_lines(dest, html_lines, encoding)
    except (OSError, LookupError, UnicodeEncodeError) as e:
        raise RuntimeError(f"Failed to write {dest}: {e}") from e
    logger.info("Wrote %d line(s), %d bytes to %s", len(html_lines), written, dest)
    return written
