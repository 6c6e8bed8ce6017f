"""
Renderers consuming a parsed Document.

- preview: structured display tree for the editor's live preview
- plain_text: lossy prose projection for excerpts and metadata prompts
- html: escaped HTML serialization of a preview tree
"""

from .preview import (
    PreviewElement,
    PreviewKind,
    PreviewOptions,
    PreviewTree,
    render_node,
    render_preview,
)
from .plain_text import collapse_whitespace, project_plain_text
from .html import render_html, render_html_lines

__all__ = [
    "PreviewElement",
    "PreviewKind",
    "PreviewOptions",
    "PreviewTree",
    "render_node",
    "render_preview",
    "collapse_whitespace",
    "project_plain_text",
    "render_html",
    "render_html_lines",
]
