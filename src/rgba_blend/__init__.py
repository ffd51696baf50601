"""
rgba_blend - RGBA Color Compositing

Immutable RGBA colors with 8-bit channels and a floating-point alpha,
composited with the standard "over" operator.

Components:
    - Color: Validated color value type and constructors
    - Blend: Over operator with half-up rounding and clamping
    - Utils: Validation and debug helpers

Example:
    >>> from rgba_blend import Color
    >>> 
    >>> background = Color.from_components(255, 0, 0, 0.2)
    >>> foreground = Color.from_hex("FF0000", 0.9)
    >>> 
    >>> result = background.blend(foreground)
    >>> result.to_hex()
    'FF0000'
"""

__version__ = "1.0.0"

# Color
from .color import (
    Color,
    blend,
    blend_over,
    parse_hex_rgb,
    ColorError,
    InvalidColorComponent,
    MalformedHexString,
)

# Utils
from .utils import (
    debug_print,
    is_debug_enabled,
)

__all__ = [
    "__version__",
    
    # Color
    "Color",
    "blend",
    "blend_over",
    "parse_hex_rgb",
    "ColorError",
    "InvalidColorComponent",
    "MalformedHexString",
    
    # Utils
    "debug_print",
    "is_debug_enabled",
]
