"""
Output filename derivation.
"""

OUTPUT_SUFFIX = "-with-watermark"


def prepare_output_filename(filename: str, suffix: str = OUTPUT_SUFFIX) -> str:
    """
    Derive the output filename for a watermarked image.

    The name is split on its last dot, so ``photo.jpg`` becomes
    ``photo-with-watermark.jpg`` and ``archive.tar.gz`` becomes
    ``archive.tar-with-watermark.gz``. Only the last path component can
    hold the extension, so ``shots.v1/photo`` is rejected rather than split
    inside the directory name.

    Args:
        filename: Input filename, optionally with directory components.
        suffix: Text inserted between the base name and the extension.

    Returns:
        The derived filename.

    Raises:
        ValueError: If the filename has no extension.
    """
    base, sep, ext = filename.rpartition(".")
    if not sep or "/" in ext or "\\" in ext:
        raise ValueError(f"Filename has no extension: {filename!r}")
    return f"{base}{suffix}.{ext}"
