"""Alpha blending of two colors."""

from __future__ import annotations
import numpy as np

from ..utils.debug import debug_print, debug_color_info
from ..utils.validation import CHANNEL_MIN, CHANNEL_MAX, ALPHA_MIN, ALPHA_MAX
from .model import Color


def round_half_up(values: np.ndarray) -> np.ndarray:
    """
    Round to the nearest integer, ties toward +inf.
    
    np.round would round ties to even.
    """
    return np.floor(values + 0.5)


def blend_over(background: Color, foreground: Color) -> Color:
    """
    Standard "over" compositing of straight-alpha colors.
    
    Formula:
        a' = a_fg + a_bg * (1 - a_fg)
        c' = round((c_fg * a_fg + c_bg * a_bg * (1 - a_fg)) / a')
    
    Args:
        background: Base layer
        foreground: Layer painted on top of background
    
    Returns:
        New Color; neither operand is modified
    
    Notes:
        - Channels are 0 when a' == 0 (both layers fully transparent)
        - Channels are clamped to [0, 255] and alpha to [0, 1] before the
          result is built through the validating constructor
    """
    debug_color_info("Blend/bg", background)
    debug_color_info("Blend/fg", foreground)
    
    fg_a = foreground.a
    bg_a = background.a
    bg_weight = bg_a * (1.0 - fg_a)
    
    out_a = fg_a + bg_weight
    
    if out_a > 0:
        premultiplied = foreground.to_numpy() * fg_a + background.to_numpy() * bg_weight
        rgb = round_half_up(premultiplied / out_a)
    else:
        rgb = np.zeros(3, dtype=np.float64)
    
    debug_print(f"[Blend] a'={out_a} rgb'={rgb.tolist()}")
    
    rgb = np.clip(rgb, CHANNEL_MIN, CHANNEL_MAX).astype(np.int64)
    out_a = float(np.clip(out_a, ALPHA_MIN, ALPHA_MAX))
    
    return Color.from_components(int(rgb[0]), int(rgb[1]), int(rgb[2]), out_a)


blend = blend_over
