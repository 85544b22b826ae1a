"""
Core Module - Pure Image Logic
==============================
This module contains no terminal or prompt dependencies.
Adjustment, compositing and naming logic is implemented here.
"""

from .adjust import (
    Adjustment, AdjustmentKind, adjust_interactively, apply_adjustment,
    apply_brightness, apply_contrast, apply_greyscale, apply_invert
)
from .codec import load_image, save_image
from .compositor import WatermarkCompositor, compute_center_position
from .errors import WatermarkError, MissingInputFileError
from .naming import prepare_output_filename

__all__ = [
    "Adjustment",
    "AdjustmentKind",
    "adjust_interactively",
    "apply_adjustment",
    "apply_brightness",
    "apply_contrast",
    "apply_greyscale",
    "apply_invert",
    "load_image",
    "save_image",
    "WatermarkCompositor",
    "compute_center_position",
    "WatermarkError",
    "MissingInputFileError",
    "prepare_output_filename",
]
