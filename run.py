"""
Main Entry Point for the RGBA Color Blending Demo

Composites a foreground color over a background color and prints the
background, foreground and result.

Usage:
    python run.py
    python run.py --config configs/demo_config.yaml
    python run.py --background 00FF00 --background-alpha 0.5
"""

import sys
from pathlib import Path

# Add project paths
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from rgba_blend.demo import main


if __name__ == "__main__":
    main()
