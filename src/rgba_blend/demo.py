"""
Demonstration program for RGBA color blending

Builds a background and a foreground color, composites the foreground over
the background, and prints all three colors.

Usage:
    python run.py
    python run.py --config configs/demo_config.yaml
    python run.py --background 00FF00 --background-alpha 0.5
"""

from __future__ import annotations
import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from omegaconf import DictConfig, OmegaConf

from .color import Color
from .utils.debug import debug_print


DEFAULT_TITLE = "RGBA-Color blending calculation"

DEFAULT_CONFIG: Dict[str, Any] = {
    "demo": {"title": DEFAULT_TITLE},
    "background": {"rgb": [255, 0, 0], "alpha": 0.2},
    "foreground": {"rgb": [255, 0, 0], "alpha": 0.9},
}


# ============================================================================
# Configuration & Setup
# ============================================================================

def color_from_config(section: Mapping[str, Any]) -> Color:
    """
    Build a Color from a config section.
    
    Args:
        section: Mapping with 'alpha' (default 1.0) and one of
            'hex' (str), 'packed' (int) or 'rgb' ([r, g, b])
    
    Returns:
        Validated Color
    
    Raises:
        ValueError: If the section is not a mapping, names no color, or the
            color is invalid
    """
    if not isinstance(section, Mapping):
        raise ValueError(
            f"color section must be a mapping, got {type(section).__name__}"
        )
    
    alpha = section.get("alpha", 1.0)
    
    if section.get("hex") is not None:
        return Color.from_hex(section["hex"], alpha)
    if section.get("packed") is not None:
        return Color.from_packed_int(section["packed"], alpha)
    if section.get("rgb") is not None:
        rgb = section["rgb"]
        if not isinstance(rgb, (list, tuple)):
            raise ValueError(f"rgb must be a list, got {type(rgb).__name__}")
        if len(rgb) != 3:
            raise ValueError(f"rgb must have 3 values, got {len(rgb)}")
        return Color.from_components(rgb[0], rgb[1], rgb[2], alpha)
    
    raise ValueError("color section needs one of 'hex', 'packed' or 'rgb'")


@dataclass
class DemoConfig:
    """
    Demo configuration.
    
    Attributes:
        title: Banner line printed first
        background: Base layer color
        foreground: Layer composited on top
    """
    title: str = DEFAULT_TITLE
    background: Color = field(default_factory=lambda: Color(255, 0, 0, 0.2))
    foreground: Color = field(default_factory=lambda: Color(255, 0, 0, 0.9))
    
    @classmethod
    def from_dict(cls, cfg: Mapping[str, Any]) -> 'DemoConfig':
        """Create DemoConfig from dictionary."""
        demo_cfg = cfg.get("demo") or {}
        if not isinstance(demo_cfg, Mapping):
            raise ValueError(f"demo section must be a mapping, got {type(demo_cfg).__name__}")
        return cls(
            title=str(demo_cfg.get("title", DEFAULT_TITLE)),
            background=color_from_config(cfg.get("background", DEFAULT_CONFIG["background"])),
            foreground=color_from_config(cfg.get("foreground", DEFAULT_CONFIG["foreground"])),
        )


def parse_args(argv: Optional[list] = None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="RGBA color blending demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py
  python run.py --config configs/demo_config.yaml
  python run.py --foreground 0000FF --foreground-alpha 0.5
        """
    )
    
    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file"
    )
    
    parser.add_argument(
        "--background", "-b",
        type=str,
        default=None,
        help="Override background color (hex RRGGBB)"
    )
    
    parser.add_argument(
        "--background-alpha",
        type=float,
        default=None,
        help="Override background alpha"
    )
    
    parser.add_argument(
        "--foreground", "-f",
        type=str,
        default=None,
        help="Override foreground color (hex RRGGBB)"
    )
    
    parser.add_argument(
        "--foreground-alpha",
        type=float,
        default=None,
        help="Override foreground alpha"
    )
    
    return parser.parse_args(argv)


def load_config(config_path: Optional[str] = None) -> DictConfig:
    """
    Load YAML configuration merged over the built-in defaults
    
    Args:
        config_path: Path to YAML config file, or None for defaults only
    
    Returns:
        OmegaConf configuration object
    """
    config = OmegaConf.create(DEFAULT_CONFIG)
    
    if config_path is None:
        return config
    
    if not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    config = OmegaConf.merge(config, OmegaConf.load(config_path))
    debug_print(f"[Config] Loaded configuration from: {config_path}")
    
    return config


def _override_color(config: DictConfig, key: str, hex_value, alpha) -> None:
    section = config[key]
    if not isinstance(section, DictConfig):
        raise ValueError(f"{key} section must be a mapping, got {type(section).__name__}")
    if hex_value is not None:
        # Replace the whole section so an rgb/packed entry can't linger
        config[key] = {"hex": hex_value, "alpha": section.get("alpha", 1.0)}
        debug_print(f"[Config] Override {key}: {hex_value}")
    if alpha is not None:
        config[key].alpha = alpha
        debug_print(f"[Config] Override {key} alpha: {alpha}")


def apply_cli_overrides(config: DictConfig, args) -> DictConfig:
    """
    Apply command-line argument overrides to config
    
    Args:
        config: Base configuration
        args: Parsed command-line arguments
    
    Returns:
        Modified configuration
    """
    _override_color(config, "background", args.background, args.background_alpha)
    _override_color(config, "foreground", args.foreground, args.foreground_alpha)
    return config


# ============================================================================
# Main
# ============================================================================

def run_demo(demo_cfg: DemoConfig) -> Color:
    """Blend the configured colors and print the report."""
    result = demo_cfg.background.blend(demo_cfg.foreground)
    
    print(demo_cfg.title)
    print(f"Background: {demo_cfg.background}")
    print(f"Foreground: {demo_cfg.foreground}")
    print(f"Result: {result}")
    
    return result


def main(argv: Optional[list] = None):
    """Main entry point"""
    args = parse_args(argv)
    
    try:
        config = load_config(args.config)
        config = apply_cli_overrides(config, args)
        demo_cfg = DemoConfig.from_dict(OmegaConf.to_container(config, resolve=True))
        run_demo(demo_cfg)
    except (ValueError, FileNotFoundError) as e:
        print(f"[Error] {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
