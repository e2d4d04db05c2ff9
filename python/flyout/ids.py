"""Element identifiers for a dropdown and its items container."""

import re
from typing import NamedTuple

__all__ = ["MenuIds", "sanitize", "resolve_ids"]

_UNSAFE_ID_CHARS = re.compile(r"[\[\]\s]")


class MenuIds(NamedTuple):
    trigger_id: str
    items_id: str


def sanitize(field: str) -> str:
    """Replace whitespace, '[' and ']' in a field name with '-'.

    Example:
        >>> sanitize("user[role] id")
        'user-role--id'
    """
    return _UNSAFE_ID_CHARS.sub("-", field)


def resolve_ids(field: str, override: str | None = None) -> MenuIds:
    """Derive the trigger and items container ids for a field.

    An override is used verbatim as the trigger id; otherwise the id is the
    sanitized field name with a "-selector" suffix. The items container id
    is always the trigger id plus "-items".

    Example:
        >>> resolve_ids("sort")
        MenuIds(trigger_id='sort-selector', items_id='sort-selector-items')
        >>> resolve_ids("sort", "custom-id")
        MenuIds(trigger_id='custom-id', items_id='custom-id-items')
    """
    trigger_id = override if override is not None else f"{sanitize(field)}-selector"
    return MenuIds(trigger_id, f"{trigger_id}-items")
