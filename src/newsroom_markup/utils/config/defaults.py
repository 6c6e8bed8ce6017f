"""Built-in configuration defaults, used when no configuration file exists."""

from typing import Any, Dict

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "0.1.0",
    "preview": {
        "placeholder": "Start typing to see preview...",
        "timeline_header": "📅 Timeline",
        "transcript_header": "💬 Interview Transcript",
    },
    "excerpt": {
        "max_length": 200,
        "max_words": 200,
    },
    "metadata": {
        "content_budget": 2000,
    },
    "logging": {
        "level": "INFO",
        "format": "rich",
    },
}
