"""RGBA color value type."""

from __future__ import annotations
from dataclasses import dataclass
import numpy as np

from ..utils.validation import validate_channel, validate_alpha
from .parsing import parse_hex_rgb, packed_to_hex, rgb_to_hex


@dataclass(frozen=True)
class Color:
    """
    Immutable RGBA color with straight (non-premultiplied) alpha.
    
    Attributes:
        r: Red channel [0, 255]
        g: Green channel [0, 255]
        b: Blue channel [0, 255]
        a: Alpha [0.0, 1.0], 0 is fully transparent
    
    Every constructor validates its input; out-of-range values raise
    InvalidColorComponent instead of being clamped.
    
    Example:
        >>> bg = Color.from_components(255, 0, 0, 0.2)
        >>> fg = Color.from_hex("FF0000", 0.9)
        >>> bg.blend(fg).to_hex()
        'FF0000'
    """
    r: int
    g: int
    b: int
    a: float = 1.0
    
    def __post_init__(self):
        """Validate and normalise components."""
        # frozen dataclass: normalised values go through object.__setattr__
        object.__setattr__(self, 'r', validate_channel('r', self.r))
        object.__setattr__(self, 'g', validate_channel('g', self.g))
        object.__setattr__(self, 'b', validate_channel('b', self.b))
        object.__setattr__(self, 'a', validate_alpha(self.a))
    
    @classmethod
    def from_components(cls, r: int, g: int, b: int, a: float) -> 'Color':
        """Create a color from explicit channel and alpha values."""
        return cls(r, g, b, a)
    
    @classmethod
    def from_hex(cls, value: str, a: float = 1.0) -> 'Color':
        """
        Create a color from a hex string such as 'FF8000'.
        
        Args:
            value: At least 6 hex digits (r, g, b); extra characters ignored
            a: Alpha [0, 1]
        
        Raises:
            MalformedHexString: If the leading 6 characters are not hex
            InvalidColorComponent: If a is out of range
        """
        r, g, b = parse_hex_rgb(value)
        return cls(r, g, b, a)
    
    @classmethod
    def from_packed_int(cls, rgb: int, a: float = 1.0) -> 'Color':
        """
        Create a color from a packed 0xRRGGBB integer.
        
        Raises:
            InvalidColorComponent: If rgb is outside [0, 0xFFFFFF] or a is
                out of range
        """
        return cls.from_hex(packed_to_hex(rgb), a)
    
    def blend(self, foreground: 'Color') -> 'Color':
        """Composite foreground over this color (see blend.blend_over)."""
        from .blend import blend_over
        
        return blend_over(self, foreground)
    
    def to_hex(self) -> str:
        """Return r, g, b as 6 upper-case hex digits."""
        return rgb_to_hex(self.r, self.g, self.b)
    
    def to_packed_int(self) -> int:
        return (self.r << 16) | (self.g << 8) | self.b
    
    def to_numpy(self) -> np.ndarray:
        """Return [r, g, b] as a float64 array."""
        return np.array([self.r, self.g, self.b], dtype=np.float64)
    
    def __str__(self) -> str:
        return f"({self.r},{self.g},{self.b},{self.a})"
