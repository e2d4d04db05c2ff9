"""Inline script that binds the menu widget to a dropdown trigger."""

from flyout.html import Markup, js_literal
from flyout.ids import MenuIds
from flyout.options import WIDGET_CONFIG, WidgetConfig

__all__ = ["INDICATOR_ICON", "NOOP_CALLBACK", "render_script", "render_callback"]

INDICATOR_ICON = '<span class="ui-icon ui-icon-triangle-1-s"></span>'

# Called in place of a select callback when none was given
NOOP_CALLBACK = "(function (value) {})"


def _element(element_id: str) -> str:
    return f"jQuery(document.getElementById({js_literal(element_id)}))"


def render_callback(select: str | None) -> str:
    """Return the JavaScript callee that receives the chosen value."""
    if select:
        return select
    return NOOP_CALLBACK


def render_script(
    ids: MenuIds,
    field: str,
    select: str | None = None,
    config: WidgetConfig = WIDGET_CONFIG,
) -> Markup:
    """Render the <script> block configuring the menu widget.

    The chooseItem handler puts the chosen item's text into the trigger
    (after the indicator icon), writes the item's value attribute into the
    element whose id is field, and calls select with that value.

    select is a JavaScript function name; it is validated by DropdownOptions
    and emitted as-is.
    """
    trigger = _element(ids.trigger_id)

    _parts = []
    _parts.append('<script type="text/javascript">')
    _parts.append(f"{trigger}.menu({{")
    _parts.append(f"\tcontent: {_element(ids.items_id)}.html(),")
    for key, value in config.runtime_settings().items():
        _parts.append(f"\t{key}: {js_literal(value)},")
    _parts.append("\tchooseItem: function(selection) {")
    _parts.append(
        f"\t\t{trigger}.html({js_literal(INDICATOR_ICON)})"
        f".append(document.createTextNode(jQuery(selection).text()));"
    )
    _parts.append('\t\tvar vid = jQuery(selection).attr("value");')
    _parts.append(f"\t\t{_element(field)}.val(vid);")
    _parts.append(f"\t\t{render_callback(select)}(vid);")
    _parts.append("\t}")
    _parts.append("});")
    _parts.append("</script>")
    return Markup("\n".join(_parts))
