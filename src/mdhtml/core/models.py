"""Token data model: one classified unit of document structure per variant"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union


class TokenKind(str, Enum):
    """Restrict token variants to the block constructs the classifier knows"""
    header = "header"
    paragraph = "paragraph"
    unordered_list_item = "unordered_list_item"
    ordered_list_start = "ordered_list_start"
    ordered_list_end = "ordered_list_end"
    ordered_list_item = "ordered_list_item"
    simple_text = "simple_text"
    quote = "quote"
    code_fence = "code_fence"             # ambiguous delimiter, resolved by the grouper
    code_fence_start = "code_fence_start"
    code_fence_end = "code_fence_end"
    horizontal_rule = "horizontal_rule"
    line_break = "line_break"
    empty = "empty"


@dataclass(frozen=True)
class Header:
    kind: ClassVar[TokenKind] = TokenKind.header
    level: int
    text: str


@dataclass(frozen=True)
class Paragraph:
    kind: ClassVar[TokenKind] = TokenKind.paragraph
    text: str


@dataclass(frozen=True)
class UnorderedListItem:
    kind: ClassVar[TokenKind] = TokenKind.unordered_list_item
    text: str


@dataclass(frozen=True)
class OrderedListStart:
    kind: ClassVar[TokenKind] = TokenKind.ordered_list_start


@dataclass(frozen=True)
class OrderedListEnd:
    kind: ClassVar[TokenKind] = TokenKind.ordered_list_end


@dataclass(frozen=True)
class OrderedListItem:
    kind: ClassVar[TokenKind] = TokenKind.ordered_list_item
    text: str


@dataclass(frozen=True)
class SimpleText:
    """Raw line content, never inline-transformed (fenced code interiors)."""
    kind: ClassVar[TokenKind] = TokenKind.simple_text
    text: str


@dataclass(frozen=True)
class CodeFence:
    """A ``` line; whether it opens or closes is decided by the grouper."""
    kind: ClassVar[TokenKind] = TokenKind.code_fence


@dataclass(frozen=True)
class CodeFenceStart:
    kind: ClassVar[TokenKind] = TokenKind.code_fence_start


@dataclass(frozen=True)
class CodeFenceEnd:
    kind: ClassVar[TokenKind] = TokenKind.code_fence_end


@dataclass(frozen=True)
class HorizontalRule:
    kind: ClassVar[TokenKind] = TokenKind.horizontal_rule


@dataclass(frozen=True)
class LineBreak:
    kind: ClassVar[TokenKind] = TokenKind.line_break


@dataclass(frozen=True)
class Empty:
    """Sentinel: initial grouper state and the nested slot of a plain quote."""
    kind: ClassVar[TokenKind] = TokenKind.empty


@dataclass(frozen=True)
class Quote:
    """Block quote; nested holds the sub-classification of the quoted text."""
    kind: ClassVar[TokenKind] = TokenKind.quote
    text: str
    nested: "Token" = field(default_factory=Empty)


Token = Union[
    Header, Paragraph, UnorderedListItem, OrderedListStart, OrderedListEnd,
    OrderedListItem, SimpleText, Quote, CodeFence, CodeFenceStart, CodeFenceEnd,
    HorizontalRule, LineBreak, Empty,
]
