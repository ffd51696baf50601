"""Hexadecimal and packed-integer color parsing."""

from __future__ import annotations
from typing import Tuple

from ..utils.validation import validate_hex_string, validate_packed_rgb


def parse_hex_rgb(value: str) -> Tuple[int, int, int]:
    """
    Read r, g, b from the first 6 characters of a hex string.
    
    Args:
        value: Hex string, case-insensitive. Characters after the 6th
            (e.g. an alpha byte in 'FF000080') are ignored.
    
    Returns:
        (r, g, b) each in [0, 255]
    
    Raises:
        MalformedHexString: If the leading 6 characters are not hex digits
    
    Example:
        >>> parse_hex_rgb("ff8000")
        (255, 128, 0)
    """
    digits = validate_hex_string(value)
    return (
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
    )


def packed_to_hex(value: int) -> str:
    """
    Format a 24-bit packed RGB integer as 6 upper-case hex digits.
    
    Raises:
        InvalidColorComponent: If value is outside [0, 0xFFFFFF]
    """
    return f"{validate_packed_rgb(value):06X}"


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format channels as 6 upper-case hex digits."""
    return f"{r:02X}{g:02X}{b:02X}"
