"""Dropdown menu markup: trigger, hidden items container and widget script.

Usage:
    <input type="hidden" id="budget_main" name="budget_main" value="1">
    {{ assemble("budget_main", "B1", [["B1", 1], ["B2", 2]], select="onBudgetSelect") }}

Choosing an item shows its text on the trigger, stores its value in the
budget_main field and calls onBudgetSelect(value).
"""

import logging

from flyout.content import build
from flyout.decorators import component
from flyout.html import Markup, escape_html, render_attr, render_style
from flyout.ids import MenuIds, resolve_ids
from flyout.options import DropdownOptions
from flyout.script import INDICATOR_ICON, render_script

__all__ = ["Dropdown", "assemble", "render_trigger", "render_items"]

logger = logging.getLogger(__name__)

TRIGGER_CLASS = "fg-button fg-button-icon-right ui-widget ui-corner-all ui-state-default"


def _style_attr(style) -> str:
    return render_attr("style", render_style(style) or None)


def render_trigger(ids: MenuIds, name, style=None) -> Markup:
    """Render the clickable trigger showing the indicator icon and name."""
    return Markup(
        f'<a{render_attr("id", ids.trigger_id)} class="{TRIGGER_CLASS}"'
        f'{render_attr("href", "#" + ids.items_id)} tabindex="0"{_style_attr(style)}>\n'
        f"{INDICATOR_ICON}{escape_html(name)}</a>"
    )


def render_items(ids: MenuIds, items: Markup, style=None) -> Markup:
    """Render the hidden container holding the menu list markup."""
    return Markup(f'<div{render_attr("id", ids.items_id)} class="hidden"{_style_attr(style)}>{items}</div>')


@component
def Dropdown(*, field: str, name, content, options=None):
    """Yield the trigger, the items container and the widget script."""
    opts = DropdownOptions.coerce(options)
    ids = resolve_ids(field, opts.id)
    logger.debug("Rendering dropdown %s for field %r", ids.trigger_id, field)

    items = build(content)

    yield render_trigger(ids, name, opts.style) + "\n"
    yield render_items(ids, items, opts.style) + "\n"
    yield render_script(ids, field, opts.select)


def assemble(field: str, name, content, options=None, **kwargs) -> Markup:
    """Render a complete dropdown menu bound to a form field.

    Args:
        field: Id of the form field that receives the chosen value.
        name: Initial text shown on the trigger, e.g. "Select Criteria".
        content: Menu content: a sequence of entries, or prebuilt markup
            starting with '<ul'.
        options: DropdownOptions, a mapping with id/style/select, or None.
        **kwargs: id, style or select, applied over options.

    Returns:
        Markup with the trigger, the hidden items container and the script.

    Raises:
        OptionsError: If an option is unknown or invalid.
        MenuContentError: If content is neither markup nor a sequence.

    Example:
        >>> html = assemble("sort", "Select Criteria", ["Category", "Status"])
        >>> 'id="sort-selector"' in html
        True
    """
    opts = DropdownOptions.coerce(options, **kwargs)
    return Markup(str(Dropdown(field=field, name=name, content=content, options=opts)))
