"""
Watermark Manager Package
=========================
An interactive command-line tool that adjusts an image and adds a text or
image watermark to it.

Modules:
    - core: Pure image logic (adjustments, compositing, naming)
    - cli: Terminal prompts
    - controller: Session flow and the command-line entry point

Usage:
    from watermark_manager.core import WatermarkCompositor, apply_invert
    from watermark_manager.controller import WatermarkController
"""

__version__ = "1.0.0"
__author__ = "Watermark Manager"
__app_name__ = "Watermark manager"

from .config import WatermarkConfig
from .core import (
    Adjustment,
    AdjustmentKind,
    WatermarkCompositor,
    prepare_output_filename,
)
from .cli import Prompter, ClickPrompter

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__app_name__",

    # Config
    "WatermarkConfig",

    # Core
    "Adjustment",
    "AdjustmentKind",
    "WatermarkCompositor",
    "prepare_output_filename",

    # CLI
    "Prompter",
    "ClickPrompter",
]
