"""
Safe Markdown renderer for portfolio content (about text, articles, legal pages).

The markdown parser builds the HTML with raw HTML input disabled, then the
output is sanitized against a whitelist so only known-safe tags remain.
"""
from __future__ import annotations

import re

import bleach
from markdown_it import MarkdownIt
from markupsafe import Markup


_ALLOWED_TAGS = [
    "p",
    "br",
    "hr",
    "strong",
    "em",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "table",
    "thead",
    "tbody",
    "tr",
    "th",
    "td",
    "ul",
    "ol",
    "li",
    "code",
    "pre",
    "blockquote",
    "a",
    "img",
]

_ALLOWED_ATTRIBUTES = {
    "a": ["href", "title"],
    "img": ["src", "alt", "title"],
    "code": ["class"],
}

_ALLOWED_PROTOCOLS = ["http", "https", "mailto"]

_MD = MarkdownIt(
    "commonmark",
    {
        "html": False,
        "linkify": False,
        "typographer": False,
        "breaks": False,
    },
).enable("table")

_WORD_RE = re.compile(r"\w+")


def render_markdown_safe(src: str) -> Markup:
    """Render markdown to sanitized HTML.

    Parameters:
        src: Raw markdown string (may be empty).
    Returns:
        Markup limited to a small whitelist of tags. Raw HTML in the source is
        treated as text.
    """
    if not src:
        return Markup("")

    html = _MD.render(str(src))
    cleaned = bleach.clean(
        html,
        tags=_ALLOWED_TAGS,
        attributes=_ALLOWED_ATTRIBUTES,
        protocols=_ALLOWED_PROTOCOLS,
        strip=False,
    )
    return Markup(cleaned.strip())


def reading_time(src: str, words_per_minute: int = 200) -> int:
    """Estimated reading time in whole minutes, never less than one."""
    words = len(_WORD_RE.findall(src or ""))
    return max(1, -(-words // words_per_minute))
