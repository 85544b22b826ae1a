"""
Session configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


@dataclass
class WatermarkConfig:
    """Defaults and constants for one watermarking session."""
    image_dir: Path = Path("img")

    # Prompt defaults
    default_input: str = "test.jpg"
    default_text: str = "All rights reserved"
    default_logo: str = "logo.png"

    # Text watermark
    font_path: Optional[Path] = None
    font_size: int = 32
    font_color: Tuple[int, int, int, int] = (0, 0, 0, 255)
    text_origin: Tuple[int, int] = (10, 10)

    # Image watermark
    overlay_opacity: float = 0.5

    # Encoding quality (JPEG)
    quality: int = 100

    # Raw brightness/contrast input range; divided by 10 before use
    adjust_range: Tuple[int, int] = (-10, 10)

    def image_path(self, name: str) -> Path:
        """Resolve a user-supplied filename inside the image directory."""
        return Path(self.image_dir) / name
