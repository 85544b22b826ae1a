"""
Image Adjustment Engine
=======================
Pointwise colour adjustments applied to an image before watermarking.

Technical Notes:
- Every operation mutates the image in place and returns the same object
- Pixel maths runs on a float32 numpy copy, then is rounded, clamped to
  0-255 and pasted back, so the image size never changes
- The alpha channel is never touched
- Brightness and contrast amounts are in [-1.0, 1.0]; the interactive
  loop collects integers in [-10, 10] and divides by 10
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Tuple

import numpy as np
from PIL import Image

if TYPE_CHECKING:
    from ..cli.prompts import Prompter

logger = logging.getLogger(__name__)

# ITU-R BT.709 luma weights
LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float32)


class AdjustmentKind(Enum):
    """Adjustment menu entries. Values are the labels shown to the user."""
    BRIGHTNESS = "Adjust brightness"
    CONTRAST = "Adjust contrast"
    GREYSCALE = "Black & white"
    INVERT = "Invert image"
    DONE = "Done adjusting"

    @property
    def takes_amount(self) -> bool:
        return self in (AdjustmentKind.BRIGHTNESS, AdjustmentKind.CONTRAST)


@dataclass(frozen=True)
class Adjustment:
    """One adjustment step. ``amount`` is only used by brightness and contrast."""
    kind: AdjustmentKind
    amount: float = 0.0


def _pixels(image: Image.Image) -> np.ndarray:
    return np.array(image.convert("RGBA"), dtype=np.float32)


def _commit(image: Image.Image, pixels: np.ndarray) -> Image.Image:
    data = np.clip(np.rint(pixels), 0, 255).astype(np.uint8)
    image.paste(Image.fromarray(data))
    return image


def apply_brightness(image: Image.Image, factor: float) -> Image.Image:
    """
    Brighten (factor > 0) or darken (factor < 0) the RGB channels.

    Positive factors move each channel towards 255 by that fraction of the
    remaining headroom; negative factors scale the channel down.
    """
    pixels = _pixels(image)
    rgb = pixels[..., :3]
    if factor < 0:
        rgb *= 1.0 + factor
    else:
        rgb += (255.0 - rgb) * factor
    return _commit(image, pixels)


def apply_contrast(image: Image.Image, factor: float) -> Image.Image:
    """
    Stretch (factor > 0) or flatten (factor < 0) the RGB channels around 128.

    The slope is ``tan((factor + 1) * pi / 4)``: 1 at factor 0, 0 at -1
    (flat grey) and effectively a hard threshold at +1.
    """
    slope = math.tan((factor + 1.0) * math.pi / 4.0)
    pixels = _pixels(image)
    pixels[..., :3] = (pixels[..., :3] - 128.0) * slope + 128.0
    return _commit(image, pixels)


def apply_greyscale(image: Image.Image) -> Image.Image:
    """Replace R, G and B with the pixel's luma."""
    pixels = _pixels(image)
    luma = np.rint(pixels[..., :3] @ LUMA_WEIGHTS)
    pixels[..., 0] = luma
    pixels[..., 1] = luma
    pixels[..., 2] = luma
    return _commit(image, pixels)


def apply_invert(image: Image.Image) -> Image.Image:
    """Replace each RGB value ``v`` with ``255 - v``."""
    data = np.array(image.convert("RGBA"), dtype=np.uint8)
    data[..., :3] = 255 - data[..., :3]
    image.paste(Image.fromarray(data))
    return image


def apply_adjustment(image: Image.Image, adjustment: Adjustment) -> Image.Image:
    """
    Apply a single adjustment step.

    Raises:
        ValueError: If the adjustment is the terminal ``DONE`` entry.
    """
    kind = adjustment.kind
    if kind is AdjustmentKind.BRIGHTNESS:
        return apply_brightness(image, adjustment.amount)
    if kind is AdjustmentKind.CONTRAST:
        return apply_contrast(image, adjustment.amount)
    if kind is AdjustmentKind.GREYSCALE:
        return apply_greyscale(image)
    if kind is AdjustmentKind.INVERT:
        return apply_invert(image)
    raise ValueError(f"Not an applicable adjustment: {kind.name}")


def adjust_interactively(
        image: Image.Image,
        prompter: "Prompter",
        amount_range: Tuple[int, int] = (-10, 10)
) -> Tuple[Image.Image, List[Adjustment]]:
    """
    Run the adjustment menu until the user picks "Done adjusting".

    Each other choice is applied immediately, with brightness and contrast
    asking for an integer amount first.

    Args:
        image: Image to adjust in place.
        prompter: Answer source for the menu and the amount questions.
        amount_range: Inclusive bounds of the raw integer amount.

    Returns:
        Tuple of (the same image, adjustments in the order applied).
    """
    applied: List[Adjustment] = []
    minimum, maximum = amount_range

    while True:
        kind = prompter.choose(
            "What adjustment would you like to make?",
            list(AdjustmentKind)
        )
        if kind is AdjustmentKind.DONE:
            break

        amount = 0.0
        if kind.takes_amount:
            label = kind.name.lower()
            raw = prompter.integer(
                f"Enter {label} value between {minimum} and {maximum}",
                default=0,
                minimum=minimum,
                maximum=maximum
            )
            amount = raw / 10

        adjustment = Adjustment(kind, amount)
        apply_adjustment(image, adjustment)
        applied.append(adjustment)
        logger.info("Applied: %s%s", kind.value,
                    f" ({amount:+.1f})" if kind.takes_amount else "")

    return image, applied
