"""Exception hierarchy for fontscope."""


class FontScopeError(Exception):
    """Base exception for all fontscope errors."""

    pass


class FontError(FontScopeError):
    """Errors related to locating, reading or parsing a font."""

    pass


class FontNotFoundError(FontError):
    """No font matches the requested name."""

    def __init__(self, font_name: str) -> None:
        self.font_name = font_name
        super().__init__(f"Font '{font_name}' not found")


class FontUnavailableAsFileError(FontError):
    """Font is only available as in-memory data but a file path is required."""

    def __init__(self, font_name: str) -> None:
        self.font_name = font_name
        super().__init__(f"Font '{font_name}' is not backed by a file")


class FontReadError(FontError):
    """Error reading font bytes from disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read font '{path}': {reason}")


class FontParseError(FontError):
    """Font bytes are not a valid or supported font."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid font data '{source}': {reason}")


class ShapingError(FontScopeError):
    """Errors raised by the text shaping layer."""

    pass


class ShapingInitError(ShapingError):
    """Shaping context could not be built from the font bytes."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Could not initialize text shaping: {reason}")
