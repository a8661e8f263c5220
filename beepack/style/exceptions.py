"""Style subsystem exceptions."""


class StyleError(Exception):
    """Base class for style errors."""


class StyleConfigError(StyleError):
    """Invalid style option value."""
