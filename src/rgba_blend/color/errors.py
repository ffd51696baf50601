"""Color construction errors."""


class ColorError(ValueError):
    """Base class for invalid color input."""


class InvalidColorComponent(ColorError):
    """A channel or alpha value is outside its valid range."""


class MalformedHexString(ColorError):
    """A string cannot be read as 6 hexadecimal RGB digits."""
