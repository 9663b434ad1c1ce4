"""Unit tests for core/group.py"""

import pytest

from mdhtml.core.classify import classify_all
from mdhtml.core.group import group
from mdhtml.core.models import (
    CodeFenceEnd,
    CodeFenceStart,
    LineBreak,
    OrderedListEnd,
    OrderedListItem,
    OrderedListStart,
    Paragraph,
    SimpleText,
    UnorderedListItem,
)


def _group(lines: list[str]):
    return group(classify_all(lines), lines)


def test_code_fence_sequence():
    """A fence pair becomes start/end markers around raw interior lines."""
    assert _group(["```", "code line 1", "code line 2", "```"]) == [
        CodeFenceStart(),
        SimpleText(text="code line 1"),
        SimpleText(text="code line 2"),
        CodeFenceEnd(),
    ]


def test_fence_interior_keeps_raw_text():
    """Lines inside a fence are never inline-transformed or classified."""
    lines = ["```", "**not bold**", "# not a header", "- not an item", "```"]
    grouped = _group(lines)
    assert grouped[1:4] == [SimpleText(text=line) for line in lines[1:4]]


def test_unclosed_fence_is_not_closed():
    """An open fence at end of input gets no synthesized end marker."""
    grouped = _group(["```", "code but never ends"])
    assert grouped == [CodeFenceStart(), SimpleText(text="code but never ends")]
    assert not isinstance(grouped[-1], CodeFenceEnd)


def test_fence_parity_across_blocks():
    """Delimiters alternate between opening and closing."""
    grouped = _group(["```", "a", "```", "b", "```", "c", "```"])
    assert grouped == [
        CodeFenceStart(), SimpleText(text="a"), CodeFenceEnd(),
        Paragraph(text="b"),
        CodeFenceStart(), SimpleText(text="c"), CodeFenceEnd(),
    ]


def test_blank_line_inside_fence():
    assert _group(["```", "", "```"]) == [CodeFenceStart(), SimpleText(text=""), CodeFenceEnd()]


def test_ordered_list_closed_at_end_of_input():
    """A trailing run of ordered items is still bracketed."""
    assert _group(["1. a", "2. b"]) == [
        OrderedListStart(),
        OrderedListItem(text="a"),
        OrderedListItem(text="b"),
        OrderedListEnd(),
    ]


def test_ordered_list_end_precedes_next_token():
    """The end marker is inserted before the first non-item token."""
    assert _group(["1. a", "after"]) == [
        OrderedListStart(),
        OrderedListItem(text="a"),
        OrderedListEnd(),
        Paragraph(text="after"),
    ]


def test_separate_ordered_runs():
    """A blank line splits ordered items into two lists."""
    assert _group(["1. a", "", "2. b"]) == [
        OrderedListStart(), OrderedListItem(text="a"), OrderedListEnd(),
        LineBreak(),
        OrderedListStart(), OrderedListItem(text="b"), OrderedListEnd(),
    ]


def test_ordered_list_closed_before_fence():
    assert _group(["1. a", "```", "x", "```"]) == [
        OrderedListStart(), OrderedListItem(text="a"), OrderedListEnd(),
        CodeFenceStart(), SimpleText(text="x"), CodeFenceEnd(),
    ]


def test_ordered_items_inside_fence_are_raw():
    """Numbered lines inside a fence open no list."""
    assert _group(["```", "1. x", "```"]) == [CodeFenceStart(), SimpleText(text="1. x"), CodeFenceEnd()]


def test_unordered_items_are_not_bracketed():
    assert _group(["- a", "- b"]) == [UnorderedListItem(text="a"), UnorderedListItem(text="b")]


def test_group_only_inserts_markers():
    """Apart from inserted markers, output length equals input length."""
    lines = ["# T", "1. a", "2. b", "text", "3. c"]
    grouped = _group(lines)
    markers = [t for t in grouped if isinstance(t, (OrderedListStart, OrderedListEnd))]
    assert len(grouped) - len(markers) == len(lines)


def test_group_empty_input():
    assert group([], []) == []


def test_group_length_mismatch():
    """tokens and raw_lines must line up one to one."""
    with pytest.raises(ValueError):
        group([Paragraph(text="a")], [])
