"""Common utilities for color handling."""

from .validation import (
    validate_channel,
    validate_alpha,
    validate_hex_string,
    validate_packed_rgb,
)
from .debug import (
    is_debug_enabled,
    debug_print,
    debug_color_info,
)

__all__ = [
    # Validation
    "validate_channel",
    "validate_alpha",
    "validate_hex_string",
    "validate_packed_rgb",
    
    # Debug
    "is_debug_enabled",
    "debug_print",
    "debug_color_info",
]
