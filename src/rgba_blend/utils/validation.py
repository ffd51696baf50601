"""Input validation utilities."""

from __future__ import annotations
import numbers
import string

from ..color.errors import InvalidColorComponent, MalformedHexString


CHANNEL_MIN = 0
CHANNEL_MAX = 255
ALPHA_MIN = 0.0
ALPHA_MAX = 1.0
PACKED_RGB_MAX = 0xFFFFFF
HEX_RGB_LENGTH = 6

_HEX_DIGITS = frozenset(string.hexdigits)


def _format_value(value) -> str:
    try:
        return str(value)
    except ValueError:
        # int too long for str() conversion
        return f"<oversized {type(value).__name__}>"


def validate_channel(name: str, value) -> int:
    """
    Validate a single color channel.
    
    Args:
        name: Channel name used in the error message ('r', 'g' or 'b')
        value: Channel value, any integral number
    
    Returns:
        The channel as a plain int
    
    Raises:
        InvalidColorComponent: If value is not integral or outside [0, 255]
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidColorComponent(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    
    value = int(value)
    if not CHANNEL_MIN <= value <= CHANNEL_MAX:
        raise InvalidColorComponent(
            f"{name} must be in [{CHANNEL_MIN}, {CHANNEL_MAX}], got {_format_value(value)}"
        )
    return value


def validate_alpha(value) -> float:
    """
    Validate an alpha value.
    
    Args:
        value: Alpha, any real number
    
    Returns:
        The alpha as a plain float
    
    Raises:
        InvalidColorComponent: If value is not real, NaN, or outside [0, 1]
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidColorComponent(
            f"a must be a real number, got {type(value).__name__}"
        )
    
    # Range check runs on the original value; float() overflows on huge ints.
    # NaN fails both comparisons
    if not ALPHA_MIN <= value <= ALPHA_MAX:
        raise InvalidColorComponent(
            f"a must be in [{ALPHA_MIN}, {ALPHA_MAX}], got {_format_value(value)}"
        )
    return float(value)


def validate_hex_string(value) -> str:
    """
    Validate the leading RGB digits of a hexadecimal color string.
    
    Args:
        value: Candidate string, e.g. 'FF8000' or 'ff8000cc'
    
    Returns:
        The first 6 characters of value
    
    Raises:
        MalformedHexString: If value is not a string, is too short, or has
            a non-hex character in its first 6 positions
    """
    if not isinstance(value, str):
        raise MalformedHexString(
            f"hex color must be a string, got {type(value).__name__}"
        )
    
    if len(value) < HEX_RGB_LENGTH:
        raise MalformedHexString(
            f"hex color needs at least {HEX_RGB_LENGTH} digits, got {value!r}"
        )
    
    digits = value[:HEX_RGB_LENGTH]
    if not all(ch in _HEX_DIGITS for ch in digits):
        raise MalformedHexString(f"invalid hex digits in {digits!r}")
    return digits


def validate_packed_rgb(value) -> int:
    """
    Validate a 24-bit packed RGB integer.
    
    Raises:
        InvalidColorComponent: If value is not integral or outside
            [0, 0xFFFFFF]
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidColorComponent(
            f"packed rgb must be an integer, got {type(value).__name__}"
        )
    
    value = int(value)
    if not 0 <= value <= PACKED_RGB_MAX:
        raise InvalidColorComponent(
            f"packed rgb must be in [0, 0x{PACKED_RGB_MAX:06X}], got {_format_value(value)}"
        )
    return value
