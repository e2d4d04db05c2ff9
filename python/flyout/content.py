"""Build nested <ul> markup from menu content."""

import logging
import re

from flyout.entries import Node, entries, text_and_value
from flyout.errors import MenuContentError
from flyout.html import Markup, escape_html, is_trusted, safe

__all__ = ["build", "is_passthrough"]

logger = logging.getLogger(__name__)

_PASSTHROUGH_PATTERN = re.compile(r"<ul", re.IGNORECASE)


def is_passthrough(content) -> bool:
    """Return True if content is prebuilt menu markup to emit unchanged."""
    if is_trusted(content):
        return True
    return isinstance(content, str) and _PASSTHROUGH_PATTERN.match(content) is not None


def build(content) -> Markup:
    """Render menu content as nested list markup.

    Content is either prebuilt markup (a string starting with '<ul', or any
    trusted Markup) which is returned unchanged, or a sequence of entries.
    Each entry becomes <li><a href="#" value="...">text</a></li>, with the
    submenu of a Node rendered recursively after the anchor.

    Example:
        >>> build(["Category", ["Status", "st"]])
        Markup('<ul><li><a href="#" value="Category">Category</a></li>\\n<li><a href="#" value="st">Status</a></li></ul>')
    """
    if is_passthrough(content):
        logger.debug("Using prebuilt menu markup")
        return safe(content)
    if isinstance(content, (str, bytes)):
        raise MenuContentError(content)

    items = [_render_item(item) for item in entries(content)]
    logger.debug("Built menu list with %d items", len(items))
    return Markup("<ul>" + "\n".join(items) + "</ul>")


def _attr_value(value) -> Markup:
    # Attribute values are always plain text, even for trusted labels
    if is_trusted(value):
        value = Markup(value.__html__()).striptags()
    return escape_html(str(value))


def _render_item(item) -> str:
    text, value = text_and_value(item)
    submenu = build(item.children) if isinstance(item, Node) and item.children else ""
    return f'<li><a href="#" value="{_attr_value(value)}">{escape_html(text)}</a>{submenu}</li>'
