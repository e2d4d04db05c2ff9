"""Menu rendering exceptions with contextual error messages."""


class MenuError(Exception):
    """Base exception for all menu rendering errors."""

    def __init__(self, message: str, original_error: Exception | None = None):
        self.original_error = original_error

        full_message = message
        if original_error:
            full_message += f"\n\n  Original error: {type(original_error).__name__}: {original_error}"

        super().__init__(full_message)


class MenuContentError(MenuError, TypeError):
    """Menu content is neither trusted markup nor a sequence of entries."""

    def __init__(self, content, original_error: Exception | None = None):
        self.content = content
        preview = repr(content)
        if len(preview) > 60:
            preview = preview[:57] + "..."
        super().__init__(
            f"Menu content must be a '<ul' markup string or a sequence of entries, "
            f"got {type(content).__name__}: {preview}",
            original_error=original_error,
        )


class OptionsError(MenuError, ValueError):
    """Dropdown options failed validation."""
