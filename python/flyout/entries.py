"""Menu entries: the tagged union describing one menu item.

Caller data arrives as scalars, pairs or triples:

    ["Category", "Status"]                          # Leaf entries
    [["B1", 1], ["B2", 2]]                          # Pair entries
    [["Fruits", "fruits", [["Apple", "a"]]]]        # Node with a submenu

entry() turns each raw item into a Leaf, Pair or Node once, so rendering
never has to guess the shape of an item.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

from flyout.errors import MenuContentError
from flyout.html import is_trusted

__all__ = [
    "Leaf",
    "Pair",
    "Node",
    "MenuEntry",
    "entry",
    "entries",
    "text_and_value",
]


@dataclass(frozen=True)
class Leaf:
    """A scalar entry; its text is also its value."""

    value: Any


@dataclass(frozen=True)
class Pair:
    """An entry with separate display text and value."""

    text: Any
    value: Any = None


@dataclass(frozen=True)
class Node:
    """An entry with a submenu.

    children is menu content: a '<ul' markup string or a sequence of entries.
    """

    text: Any
    value: Any
    children: Any


MenuEntry = Union[Leaf, Pair, Node]


def entry(raw) -> MenuEntry:
    """Coerce one caller-supplied item into a menu entry.

    Strings and other scalars become a Leaf. Sequences become a Pair or,
    when the third element is truthy, a Node. A falsy third element means
    no submenu.

    Example:
        >>> entry("Status")
        Leaf(value='Status')
        >>> entry(["B1", 1])
        Pair(text='B1', value=1)
        >>> entry(["B1", 1, None])
        Pair(text='B1', value=1)
    """
    if isinstance(raw, (Leaf, Pair, Node)):
        return raw
    if isinstance(raw, (str, bytes)) or is_trusted(raw) or not isinstance(raw, Sequence):
        return Leaf(raw)

    if len(raw) == 0:
        return Leaf(raw)
    if len(raw) == 1:
        return Leaf(raw[0])
    if len(raw) == 2 or not raw[2]:
        return Pair(raw[0], raw[1])
    return Node(raw[0], raw[1], _children(raw[2]))


def entries(content) -> tuple[MenuEntry, ...]:
    """Coerce a sequence of caller-supplied items into menu entries.

    A mapping is read as (text, value) pairs, in insertion order.
    """
    if isinstance(content, Mapping):
        content = content.items()
    try:
        items = iter(content)
    except TypeError as e:
        raise MenuContentError(content, original_error=e) from e
    return tuple(entry(item) for item in items)


def _children(raw):
    # Submenu markup is kept as-is; the builder decides if it is trusted
    if isinstance(raw, str) or is_trusted(raw):
        return raw
    return entries(raw)


def text_and_value(item: MenuEntry) -> tuple[Any, Any]:
    """Return the (text, value) pair an entry renders with.

    A missing or empty value defaults to the text.

    Example:
        >>> text_and_value(Leaf(3))
        ('3', '3')
        >>> text_and_value(Pair("Apple", None))
        ('Apple', 'Apple')
    """
    match item:
        case Leaf(value=value):
            text = value if is_trusted(value) else str(value)
            return text, text
        case Pair(text=text, value=value) | Node(text=text, value=value):
            if value is None or value == "":
                value = text
            return text, value
        case _:
            raise MenuContentError(item)
