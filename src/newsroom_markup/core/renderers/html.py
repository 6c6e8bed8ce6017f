"""
HTML Serializer

Serializes a preview tree into an HTML fragment. Every text value and
attribute is escaped with ``html.escape``; author text is never spliced
into markup verbatim.
"""

from html import escape
from typing import Dict, List

from .preview import PreviewElement, PreviewKind, PreviewTree

_ELEMENT_TAGS: Dict[PreviewKind, str] = {
    PreviewKind.PLACEHOLDER: "p",
    PreviewKind.PARAGRAPH: "p",
    PreviewKind.HEADING: "div",
    PreviewKind.BLOCKQUOTE: "blockquote",
    PreviewKind.STRONG: "strong",
    PreviewKind.EMPHASIS: "em",
    PreviewKind.HIGHLIGHT: "span",
    PreviewKind.TIMELINE: "div",
    PreviewKind.TIMELINE_HEADER: "div",
    PreviewKind.TIMELINE_EVENT: "div",
    PreviewKind.TIMELINE_DATE: "div",
    PreviewKind.TIMELINE_DESCRIPTION: "div",
    PreviewKind.TRANSCRIPT: "div",
    PreviewKind.TRANSCRIPT_HEADER: "div",
    PreviewKind.TRANSCRIPT_PAIR: "div",
    PreviewKind.QUESTION: "div",
    PreviewKind.ANSWER: "div",
}

_LABELS = {
    PreviewKind.QUESTION: "Q:",
    PreviewKind.ANSWER: "A:",
}


def _element_content(element: PreviewElement) -> str:
    text = escape(element.text) if element.text is not None else ""

    if element.kind is PreviewKind.TIMELINE_DATE:
        text = f"<strong>{text}</strong>"
    elif element.kind in _LABELS:
        text = f"<strong>{_LABELS[element.kind]}</strong> {text}"

    return text + "".join(_render(child) for child in element.children)


def _render(element: PreviewElement) -> str:
    if element.kind is PreviewKind.TEXT:
        return escape(element.text or "")
    if element.kind is PreviewKind.LINE_BREAK:
        return "<br />"
    if element.kind is PreviewKind.DOCUMENT:
        return "\n".join(_render(child) for child in element.children)

    tag = _ELEMENT_TAGS[element.kind]
    attributes = f' class="{escape(element.css_class)}"' if element.css_class else ""
    return f"<{tag}{attributes}>{_element_content(element)}</{tag}>"


def render_html(tree: PreviewTree) -> str:
    """
    Serialize a preview tree to an HTML fragment.

    Top-level elements are separated by newlines.
    """
    return _render(tree)


def render_html_lines(tree: PreviewTree) -> List[str]:
    """Serialize each top-level element separately."""
    return [_render(child) for child in tree.children]
