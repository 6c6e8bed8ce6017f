"""
Core engine for the newsroom markup language.

raw author text -> tokenizer -> resolver -> document builder
                -> {preview renderer | plain-text projector}
"""

from .markup import Document, parse
from .renderers import project_plain_text, render_html, render_preview

__all__ = [
    "Document",
    "parse",
    "project_plain_text",
    "render_html",
    "render_preview",
]
