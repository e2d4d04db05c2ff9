"""HTML escaping and rendering helpers for menu markup.

Every value interpolated into generated markup goes through these helpers.
Values that are already trusted markup (``markupsafe.Markup`` or anything
with an ``__html__`` method) are emitted as-is.
"""

import json

from markupsafe import Markup, escape

__all__ = [
    'Markup',
    'safe',
    'is_trusted',
    'escape_html',
    'render_attr',
    'render_style',
    'js_literal',
]

# Characters that would let a JSON string literal break out of a <script> element
_SCRIPT_ESCAPES = {
    ord('<'): '\\u003c',
    ord('>'): '\\u003e',
    ord('&'): '\\u0026',
}


def safe(value) -> Markup:
    """Mark a value as trusted HTML that should not be escaped.

    Args:
        value: The value to mark as trusted. Can be a string, an object
               with __html__ method, or None.

    Returns:
        A Markup string that won't be escaped when rendered.

    Example:
        >>> safe("<b>bold</b>")
        Markup('<b>bold</b>')
        >>> safe(None)
        Markup('')
    """
    if value is None:
        return Markup('')
    if hasattr(value, '__html__'):
        return Markup(value.__html__())
    return Markup(str(value))


def is_trusted(value) -> bool:
    """Return True if value carries its own HTML representation."""
    return hasattr(value, '__html__')


def escape_html(value) -> Markup:
    """Escape a value for safe HTML output.

    Replaces &, <, >, " and ' with entity references. Trusted values are
    returned unchanged.

    Example:
        >>> escape_html("<script>alert('XSS')</script>")
        Markup('&lt;script&gt;alert(&#39;XSS&#39;)&lt;/script&gt;')
        >>> escape_html(safe("<b>bold</b>"))
        Markup('<b>bold</b>')
    """
    if value is None:
        return Markup('')
    return escape(value)


def render_attr(name: str, value) -> str:
    """Render a single HTML attribute, or nothing when value is None.

    Example:
        >>> render_attr("tabindex", 0)
        ' tabindex="0"'
        >>> render_attr("style", None)
        ''
    """
    if value is None:
        return ''
    return f' {name}="{escape_html(value)}"'


def render_style(value) -> str:
    """Render a style attribute value.

    Accepts a CSS string (passed through), a dict rendered as
    "key:value;key:value", or None.

    Example:
        >>> render_style({"width": "12em", "display": "inline-block"})
        'width:12em;display:inline-block'
        >>> render_style("width: 12em")
        'width: 12em'
    """
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return ';'.join(f'{k}:{v}' for k, v in value.items() if v is not None)
    return str(value) if value else ''


def js_literal(value) -> str:
    """Serialize value as a JavaScript literal for use inside a <script> block.

    Example:
        >>> js_literal("#sort-selector")
        '"#sort-selector"'
        >>> js_literal("</script>")
        '"\\\\u003c/script\\\\u003e"'
    """
    return json.dumps(value).translate(_SCRIPT_ESCAPES)
