"""Token-to-markup rendering"""

from mdhtml.core.models import (
    CodeFence,
    CodeFenceEnd,
    CodeFenceStart,
    Empty,
    Header,
    HorizontalRule,
    LineBreak,
    OrderedListEnd,
    OrderedListItem,
    OrderedListStart,
    Paragraph,
    Quote,
    SimpleText,
    Token,
    UnorderedListItem,
)


def render(token: Token) -> str:
    """Return the output markup line for a single token."""
    match token:
        case Header(level=level, text=text):
            return f"<h{level}>{text}</h{level}>"
        case Paragraph(text=text):
            return f"<p>{text}</p>"
        case UnorderedListItem(text=text) | OrderedListItem(text=text):
            return f"<li>{text}</li>"
        case OrderedListStart():
            return "<ol>"
        case OrderedListEnd():
            return "</ol>"
        case Quote(text=text, nested=nested):
            return f"<q>{text}{render(nested)}</q>"
        case CodeFenceStart():
            return "<pre><code>"
        case CodeFenceEnd():
            return "</code></pre>"
        case SimpleText(text=text):
            return text
        case HorizontalRule():
            return "<hr>"
        case LineBreak():
            return "<br/>"
        case Empty() | CodeFence():
            return ""
    raise TypeError(f"Cannot render {token!r}")
