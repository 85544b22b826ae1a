"""
Error types shared by the core and the controller.
"""


class WatermarkError(RuntimeError):
    """Raised when a watermark operation cannot be completed."""


class MissingInputFileError(WatermarkError, FileNotFoundError):
    """Raised when an input or watermark image is not present on disk."""

    def __init__(self, path, message: str):
        super().__init__(message)
        self.path = path
