"""Decorators for markup components.

The @component decorator turns a generator function that yields markup
chunks into a component usable in two ways:

- Yield mode: `"".join(Dropdown(field="sort", ...))` or `yield from Dropdown(...)`
- String mode: `str(Dropdown(field="sort", ...))`

Rendered components carry __html__, so they are trusted markup when placed
inside other markup (e.g. as passthrough menu content or in a Markup.format).

    @component
    def Badge(*, text="", color="blue"):
        yield f'<span class="badge" style="color: {color}">{escape_html(text)}</span>'

    html = str(Badge(text="New", color="red"))
"""

import inspect

from flyout.html import Markup

__all__ = ["component"]


def component(fn):
    """Wrap a generator function of markup chunks as a component class.

    Args:
        fn: A generator function taking keyword-only props.

    Returns:
        A wrapper class; instances are iterable, and render to a string via
        str() or __html__().

    Raises:
        TypeError: If fn is not a generator function.
    """
    if not inspect.isgeneratorfunction(fn):
        raise TypeError(f"@component requires a generator function, got {fn!r}")

    class ComponentWrapper:
        __slots__ = ("_props",)

        def __init__(self, **props):
            self._props = props

        # Yield mode - make it iterable
        def __iter__(self):
            return iter(fn(**self._props))

        # String mode - render to string
        def __str__(self):
            return "".join(fn(**self._props))

        def __html__(self):
            return Markup(str(self))

        def __repr__(self):
            props = ", ".join(f"{k}={v!r}" for k, v in self._props.items())
            return f"<{fn.__name__}({props})>"

    ComponentWrapper.__name__ = fn.__name__
    ComponentWrapper.__qualname__ = fn.__qualname__
    ComponentWrapper.__doc__ = fn.__doc__
    ComponentWrapper.__wrapped__ = fn

    return ComponentWrapper
