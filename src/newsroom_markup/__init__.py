"""
Newsroom Markup

Grammar engine for the bracket-tag markup used in article bodies and
excerpts ([BOLD], [ITALIC], [HIGHLIGHT], [HEADING], [QUOTE], [TIMELINE],
[TRANSCRIPT]).

The surrounding CMS uses three pure functions:

    >>> doc = parse("[HEADING]Results[/HEADING]\\nTurnout was [BOLD]high[/BOLD].")
    >>> tree = render_preview(doc)
    >>> project_plain_text(doc)
    'Results Turnout was high.'
"""

from .core.markup import (
    Document,
    InlineKind,
    InlineRun,
    Match,
    ResolvedSpan,
    Tag,
    TagClass,
    parse,
    resolve,
    resolve_inline,
    tokenize,
    tokenize_inline,
)
from .core.renderers import (
    PreviewElement,
    PreviewKind,
    PreviewOptions,
    PreviewTree,
    project_plain_text,
    render_html,
    render_preview,
)

__version__ = "0.1.0"

__all__ = [
    "Document",
    "InlineKind",
    "InlineRun",
    "Match",
    "ResolvedSpan",
    "Tag",
    "TagClass",
    "parse",
    "resolve",
    "resolve_inline",
    "tokenize",
    "tokenize_inline",
    "PreviewElement",
    "PreviewKind",
    "PreviewOptions",
    "PreviewTree",
    "project_plain_text",
    "render_html",
    "render_preview",
    "__version__",
]
