"""Rendering of mixed-content JATS elements to sanitized HTML."""

import html
from typing import Callable

from lxml import etree

from .document import local_name

# JATS inline tag -> HTML tag. Anything else is unwrapped.
INLINE_TAGS = {
    "italic": "em",
    "sub": "sub",
    "sup": "sup",
    "p": "p",
}


def render_text_content(node: etree._Element, transform: Callable[[str, str], str]) -> str:
    """Render the text content of ``node`` depth-first.

    ``transform(tag, content)`` is applied to every element, ``node`` included,
    with the element's local name and its already rendered content. Text is
    HTML-escaped; comments and processing instructions contribute only their
    tail text.
    """
    parts = [html.escape(node.text or "", quote=False)]
    for child in node:
        if isinstance(child.tag, str):
            parts.append(render_text_content(child, transform))
        if child.tail:
            parts.append(html.escape(child.tail, quote=False))
    return transform(local_name(node), "".join(parts))


def whitelist_transform(tag: str, content: str) -> str:
    """Wrap content of whitelisted tags in their HTML equivalent."""
    html_tag = INLINE_TAGS.get(tag)
    if html_tag is None:
        return content
    return f"<{html_tag}>{content}</{html_tag}>"


def sanitize(node: etree._Element) -> str:
    """Render ``node`` keeping only whitelisted inline markup, trimmed."""
    return render_text_content(node, whitelist_transform).strip()
