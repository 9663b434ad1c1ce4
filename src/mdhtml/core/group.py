"""Multi-line grouping: ordered-list brackets and fenced code interiors"""

from enum import Enum
from typing import Sequence

from mdhtml.core.models import (
    CodeFence,
    CodeFenceEnd,
    CodeFenceStart,
    OrderedListEnd,
    OrderedListStart,
    SimpleText,
    Token,
    TokenKind,
)


class FenceState(Enum):
    normal = "normal"
    in_code_fence = "in_code_fence"


def group(tokens: Sequence[Token], raw_lines: Sequence[str]) -> list[Token]:
    """Bracket ordered-list runs and fenced code in one forward pass.

    Tokens are never reordered or dropped: OrderedListStart/End are inserted
    around each run of ordered items, fence delimiters become CodeFenceStart or
    CodeFenceEnd by parity, and every line inside a fence is replaced with
    SimpleText carrying its raw, untransformed source line. A list still open
    at end of input is closed; a fence still open is left open.
    """
    if len(tokens) != len(raw_lines):
        raise ValueError(f"Expected one raw line per token, got {len(raw_lines)} lines for {len(tokens)} tokens")

    grouped: list[Token] = []
    state = FenceState.normal
    previous = TokenKind.empty

    for token, raw in zip(tokens, raw_lines):
        if isinstance(token, CodeFence):
            current: Token = CodeFenceStart() if state is FenceState.normal else CodeFenceEnd()
            state = FenceState.in_code_fence if state is FenceState.normal else FenceState.normal
        elif state is FenceState.in_code_fence:
            current = SimpleText(text=raw)
        else:
            current = token

        is_item = current.kind is TokenKind.ordered_list_item
        if is_item and previous is not TokenKind.ordered_list_item:
            grouped.append(OrderedListStart())
        elif not is_item and previous is TokenKind.ordered_list_item:
            grouped.append(OrderedListEnd())

        grouped.append(current)
        previous = current.kind

    if previous is TokenKind.ordered_list_item:
        grouped.append(OrderedListEnd())
    return grouped
