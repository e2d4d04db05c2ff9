"""Dropdown options and the fixed menu widget configuration."""

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from flyout.errors import OptionsError

__all__ = ["DropdownOptions", "WidgetConfig", "WIDGET_CONFIG", "MenuDocument"]

# A global function name or a dotted path to one, e.g. app.menus.onPick
JS_CALLABLE_PATTERN = r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*$"


class DropdownOptions(BaseModel):
    """Per-dropdown options.

    id overrides the trigger id, style is applied to the trigger and the
    items container, and select names the function called with the chosen
    value.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str | None = None
    style: str | dict[str, str | int | float] | None = None
    select: str | None = Field(default=None, pattern=JS_CALLABLE_PATTERN)

    @field_validator("select", mode="before")
    @classmethod
    def empty_select_is_absent(cls, v):
        if v == "":
            return None
        return v

    @classmethod
    def coerce(cls, options: "DropdownOptions | Mapping[str, Any] | None" = None, **overrides) -> "DropdownOptions":
        """Validate options given as a model, a mapping or None, with keyword overrides.

        Raises:
            OptionsError: If an option is unknown or has an invalid value.
        """
        if isinstance(options, cls) and not overrides:
            return options

        if isinstance(options, cls):
            data = options.model_dump(exclude_unset=True)
        else:
            data = dict(options or {})
        data.update(overrides)

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise OptionsError("Invalid dropdown options", original_error=e) from e


class WidgetConfig(BaseModel):
    """Settings handed to the browser-side menu widget.

    Field order and serialization aliases match the keys the widget expects.
    """

    model_config = ConfigDict(frozen=True)

    fly_out: bool = Field(default=True, serialization_alias="flyOut")
    pos_x: Literal["left", "center", "right"] = Field(default="left", serialization_alias="posX")
    pos_y: Literal["top", "center", "bottom"] = Field(default="bottom", serialization_alias="posY")
    direction_v: Literal["up", "down"] = Field(default="down", serialization_alias="directionV")
    max_height: int = Field(default=400, serialization_alias="maxHeight")
    detect_v: bool = Field(default=False, serialization_alias="detectV")
    show_speed: int = Field(default=350, serialization_alias="showSpeed")

    def runtime_settings(self) -> dict[str, Any]:
        """Return settings keyed by the widget's own option names."""
        return self.model_dump(by_alias=True)


WIDGET_CONFIG = WidgetConfig()


class MenuDocument(BaseModel):
    """A complete dropdown description, as read from JSON."""

    model_config = ConfigDict(extra="forbid")

    field: str
    name: str
    content: str | list[Any]
    options: DropdownOptions = Field(default_factory=DropdownOptions)
