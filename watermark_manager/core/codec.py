"""
Image loading and saving helpers built on Pillow.
"""

from pathlib import Path
from typing import Union

from PIL import Image, ImageOps


def _is_jpeg(path: Path) -> bool:
    return Image.registered_extensions().get(path.suffix.lower()) == "JPEG"


def load_image(path: Union[str, Path]) -> Image.Image:
    """
    Decode an image file into a detached RGBA image.

    EXIF orientation is applied so the pixels match what viewers show.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be decoded.
    """
    with Image.open(path) as src:
        src.load()
        oriented = ImageOps.exif_transpose(src)
        return oriented.convert("RGBA")


def save_image(image: Image.Image, path: Union[str, Path], quality: int = 100) -> Path:
    """
    Encode ``image`` to ``path`` at the given quality.

    JPEG has no alpha channel, so RGBA input is flattened onto white first.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if _is_jpeg(path):
        rgb = Image.new("RGB", image.size, (255, 255, 255))
        if image.mode == "RGBA":
            rgb.paste(image, mask=image.getchannel("A"))
        else:
            rgb.paste(image.convert("RGB"))
        rgb.save(path, quality=quality)
        rgb.close()
    else:
        image.save(path)

    return path
