"""RGBA color value type and compositing."""

from .errors import (
    ColorError,
    InvalidColorComponent,
    MalformedHexString,
)
from .model import Color
from .parsing import (
    parse_hex_rgb,
    packed_to_hex,
    rgb_to_hex,
)
from .blend import blend, blend_over, round_half_up

__all__ = [
    # Errors
    "ColorError",
    "InvalidColorComponent",
    "MalformedHexString",
    
    # Model
    "Color",
    
    # Parsing
    "parse_hex_rgb",
    "packed_to_hex",
    "rgb_to_hex",
    
    # Blending
    "blend",
    "blend_over",
    "round_half_up",
]
