"""
SEO Metadata Prompt Module

Builds the prompt sent to an external text-generation service to suggest
tags, a meta description and SEO keywords for an article, and parses the
JSON the service answers with. The request itself is made by the caller.

Usage:
    >>> prompt = build_metadata_prompt("Budget passed", "[HEADING]Vote[/HEADING] The bill...")
    >>> metadata = parse_metadata_response(service_reply)
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..exceptions.markup_exceptions import MetadataResponseError
from .markup.builder import parse
from .renderers.plain_text import project_plain_text

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_BUDGET = 2000
TRUNCATION_MARKER = "... (truncated)"
MISSING_EXCERPT = "Not provided"

METADATA_FIELDS = ("tags", "meta_description", "seo_keywords")

PROMPT_TEMPLATE = """You are an SEO expert. Based on this article, generate SEO metadata in JSON format only.

Article Title: {title}
Article Excerpt: {excerpt}
Article Content: {content}

Generate:
1. tags: 5-10 relevant tags (comma-separated)
2. meta_description: 150-160 character SEO description
3. seo_keywords: 8-12 relevant keywords (comma-separated)

Respond ONLY with JSON in this exact format:
{{
  "tags": "tag1, tag2, tag3",
  "meta_description": "description here",
  "seo_keywords": "keyword1, keyword2, keyword3"
}}"""

_CODE_FENCE = re.compile(r"```(?:json)?\s*")


@dataclass(frozen=True)
class SeoMetadata:
    """Metadata suggested for an article."""
    tags: str
    meta_description: str
    seo_keywords: str

    def tag_list(self) -> list:
        return [tag.strip() for tag in self.tags.split(",") if tag.strip()]

    def keyword_list(self) -> list:
        return [kw.strip() for kw in self.seo_keywords.split(",") if kw.strip()]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tags": self.tags,
            "meta_description": self.meta_description,
            "seo_keywords": self.seo_keywords,
        }


def prompt_content(content: str, budget: int = DEFAULT_CONTENT_BUDGET) -> str:
    """Project article markup and cut it to ``budget`` characters."""
    if budget < 0:
        raise ValueError(f"budget must be non-negative, got {budget}")

    projected = project_plain_text(parse(content))
    if len(projected) > budget:
        return projected[:budget] + TRUNCATION_MARKER
    return projected


def build_metadata_prompt(
    title: str,
    content: str,
    excerpt: Optional[str] = None,
    budget: int = DEFAULT_CONTENT_BUDGET
) -> str:
    """
    Build the SEO-metadata generation prompt.

    Args:
        title: Article title
        content: Raw article body markup
        excerpt: Raw excerpt markup, if any
        budget: Maximum number of projected content characters to include

    Returns:
        Prompt text ready to send to the generation service
    """
    projected_excerpt = project_plain_text(parse(excerpt or ""))
    prompt = PROMPT_TEMPLATE.format(
        title=title,
        excerpt=projected_excerpt or MISSING_EXCERPT,
        content=prompt_content(content, budget),
    )
    logger.debug(f"Built metadata prompt of {len(prompt)} characters")
    return prompt


def parse_metadata_response(text: str) -> SeoMetadata:
    """
    Parse the generation service's reply.

    Markdown code fences around the JSON are tolerated.

    Raises:
        MetadataResponseError: If the reply is not a JSON object with the
            three expected string fields
    """
    cleaned = _CODE_FENCE.sub("", text or "").strip()

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise MetadataResponseError(
            f"Metadata response is not valid JSON: {e}",
            raw_response=text
        ) from e

    if not isinstance(data, dict):
        raise MetadataResponseError(
            f"Metadata response must be a JSON object, got {type(data).__name__}",
            raw_response=text
        )

    missing = [name for name in METADATA_FIELDS if not isinstance(data.get(name), str)]
    if missing:
        raise MetadataResponseError(
            "Metadata response is missing required string fields",
            raw_response=text,
            missing_fields=missing
        )

    return SeoMetadata(**{name: data[name].strip() for name in METADATA_FIELDS})
