"""
Watermark Compositor
====================
Draws a text watermark or blends an image watermark onto the work image,
then encodes the result at maximum quality.

Technical Notes:
- Text is laid out in a box the size of the image whose origin sits at
  ``config.text_origin``; lines are word-wrapped to the box width and the
  block is centred inside the box
- Image watermarks are centred on the base image. Placement is not clamped,
  so an oversized watermark is clipped at the canvas edges
- Both kinds are drawn on a transparent full-size layer which is merged
  with ``Image.alpha_composite`` (source-over)
- Failures are logged and reported through the boolean return value
"""

import logging
import math
from pathlib import Path
from typing import List, Optional, Tuple, Union

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from ..config import WatermarkConfig
from .codec import load_image, save_image

logger = logging.getLogger(__name__)

FALLBACK_FONTS = (
    "DejaVuSans.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "arial.ttf",
    "/System/Library/Fonts/Helvetica.ttc",
)


def compute_center_position(
        base_size: Tuple[int, int],
        mark_size: Tuple[int, int]
) -> Tuple[float, float]:
    """
    Top-left position that centres a watermark over the base image.

    The result may be fractional, and negative when the watermark is larger
    than the base.
    """
    base_w, base_h = base_size
    mark_w, mark_h = mark_size
    return base_w / 2 - mark_w / 2, base_h / 2 - mark_h / 2


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class WatermarkCompositor:
    """
    Applies exactly one watermark to an image and writes the result.

    Fonts are loaded once per size and cached.
    """

    def __init__(self, config: Optional[WatermarkConfig] = None):
        self.config = config or WatermarkConfig()
        self._cached_fonts: dict[int, ImageFont.ImageFont] = {}

    def _get_font(self, size: int):
        """
        Get or create a cached font object for the given size.

        Tries the configured font, then common system fonts, then Pillow's
        built-in default.
        """
        if size not in self._cached_fonts:
            candidates = list(FALLBACK_FONTS)
            font_path = self.config.font_path
            if font_path and Path(font_path).exists():
                candidates.insert(0, str(font_path))

            font = None
            for candidate in candidates:
                try:
                    font = ImageFont.truetype(candidate, size)
                    break
                except OSError:
                    continue
            if font is None:
                logger.debug("No TrueType font found; using Pillow default")
                font = ImageFont.load_default(size=size)

            self._cached_fonts[size] = font

        return self._cached_fonts[size]

    @staticmethod
    def _line_height(font) -> int:
        if hasattr(font, "getmetrics"):
            ascent, descent = font.getmetrics()
            return ascent + descent
        return font.getbbox("Ag")[3]

    @staticmethod
    def _wrap_text(
            draw: ImageDraw.ImageDraw,
            text: str,
            font,
            max_width: float
    ) -> List[str]:
        """
        Greedy word wrap. A word wider than ``max_width`` gets a line of its own.
        """
        lines: List[str] = []
        for paragraph in text.splitlines() or [""]:
            current = ""
            for word in paragraph.split():
                candidate = f"{current} {word}" if current else word
                if current and draw.textlength(candidate, font=font) > max_width:
                    lines.append(current)
                    current = word
                else:
                    current = candidate
            lines.append(current)
        return lines

    def render_text(self, image: Image.Image, text: str) -> Image.Image:
        """
        Draw ``text`` onto ``image`` in place.

        Raises:
            ValueError: If the text is empty.
        """
        if not text or not text.strip():
            raise ValueError("Watermark text cannot be empty")

        cfg = self.config
        font = self._get_font(cfg.font_size)
        box_x, box_y = cfg.text_origin
        box_w, box_h = image.size

        layer = Image.new("RGBA", image.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(layer)

        lines = self._wrap_text(draw, text.strip(), font, box_w)
        line_height = self._line_height(font)
        block_h = line_height * len(lines)
        top = box_y + (box_h - block_h) / 2

        for index, line in enumerate(lines):
            line_w = draw.textlength(line, font=font)
            x = box_x + (box_w - line_w) / 2
            y = top + index * line_height
            draw.text((x, y), line, font=font, fill=cfg.font_color)

        self._merge(image, layer)
        return image

    def blend_overlay(
            self,
            image: Image.Image,
            watermark: Image.Image
    ) -> Tuple[float, float]:
        """
        Blend ``watermark`` centred over ``image`` in place.

        The watermark's alpha is scaled by ``config.overlay_opacity``.

        Returns:
            The unrounded placement computed for the watermark.
        """
        position = compute_center_position(image.size, watermark.size)
        x, y = (_round_half_up(v) for v in position)

        layer = Image.new("RGBA", image.size, (0, 0, 0, 0))
        layer.paste(watermark.convert("RGBA"), (x, y))

        pixels = np.array(layer, dtype=np.float32)
        pixels[..., 3] *= self.config.overlay_opacity
        layer = Image.fromarray(np.clip(np.rint(pixels), 0, 255).astype(np.uint8))

        self._merge(image, layer)
        return position

    @staticmethod
    def _merge(image: Image.Image, layer: Image.Image):
        base = image if image.mode == "RGBA" else image.convert("RGBA")
        image.paste(Image.alpha_composite(base, layer))

    def add_text_watermark(
            self,
            image: Image.Image,
            output_path: Union[str, Path],
            text: str
    ) -> bool:
        """
        Draw a text watermark and save the result to ``output_path``.

        Returns:
            True on success, False if drawing or encoding failed.
        """
        try:
            self.render_text(image, text)
            save_image(image, output_path, quality=self.config.quality)
        except (OSError, ValueError) as e:
            logger.error("Error adding text watermark: %s", e)
            return False

        logger.info("Text watermark added successfully!")
        return True

    def add_image_watermark(
            self,
            image: Image.Image,
            output_path: Union[str, Path],
            watermark_path: Union[str, Path]
    ) -> bool:
        """
        Blend the image at ``watermark_path`` over ``image`` and save the result.

        Returns:
            True on success, False if decoding, blending or encoding failed.
        """
        watermark = None
        try:
            watermark = load_image(watermark_path)
            x, y = self.blend_overlay(image, watermark)
            logger.debug("Watermark placed at (%s, %s)", x, y)
            save_image(image, output_path, quality=self.config.quality)
        except (OSError, ValueError) as e:
            logger.error("Error adding image watermark: %s", e)
            return False
        finally:
            if watermark is not None:
                watermark.close()

        logger.info("Image watermark added successfully!")
        return True
