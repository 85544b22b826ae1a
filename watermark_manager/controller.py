"""
Watermark Manager - Session Controller
======================================
Runs one interactive watermarking session.

Workflow:
1. Confirm the user is ready
2. Ask for the input file and the watermark type
3. Load the image and optionally run the adjustment menu
4. Apply the text or image watermark and write
   ``<name>-with-watermark.<ext>`` next to the input

Every handled outcome ends the session normally; failures are logged.
"""

import logging
import traceback
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

import click
from PIL import Image

from . import __app_name__, __version__
from .cli.prompts import ClickPrompter, Prompter
from .config import WatermarkConfig
from .core.adjust import Adjustment, adjust_interactively
from .core.codec import load_image
from .core.compositor import WatermarkCompositor
from .core.errors import MissingInputFileError
from .core.naming import prepare_output_filename

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = (
    f'Hi! Welcome to "{__app_name__}". Copy your image files to the `{{image_dir}}` '
    "folder. Then you'll be able to use them in the app. Are you ready?"
)


class WatermarkKind(Enum):
    """Watermark menu entries. Values are the labels shown to the user."""
    TEXT = "Text watermark"
    IMAGE = "Image watermark"


@dataclass(frozen=True)
class TextWatermark:
    """Text drawn centred over the image."""
    text: str


@dataclass(frozen=True)
class ImageWatermark:
    """Image file blended centred over the image at reduced opacity."""
    path: Path


@dataclass
class SessionResult:
    """Outcome of one session."""
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    applied: List[Adjustment] = field(default_factory=list)
    success: bool = False
    error_message: str = ""


class WatermarkController:
    """
    Sequences one session: load, adjust, watermark, save.

    Responsibilities:
    - Collect answers through the injected prompter
    - Check that referenced files exist before using them
    - Hand the work image to the adjustment engine and the compositor
    - Close the work image on every exit path
    """

    def __init__(
            self,
            config: Optional[WatermarkConfig] = None,
            prompter: Optional[Prompter] = None,
            compositor: Optional[WatermarkCompositor] = None
    ):
        self.config = config or WatermarkConfig()
        self.prompter = prompter or ClickPrompter()
        self.compositor = compositor or WatermarkCompositor(self.config)

    def _resolve_existing(self, name: str, message: str) -> Path:
        path = self.config.image_path(name)
        if not path.exists():
            raise MissingInputFileError(path, message)
        return path

    def _ask_watermark(self, kind: WatermarkKind):
        """Collect the watermark details for the chosen kind."""
        cfg = self.config
        if kind is WatermarkKind.TEXT:
            text = self.prompter.text(
                "Type your watermark text:", default=cfg.default_text
            )
            return TextWatermark(text)

        filename = self.prompter.text(
            "Type your watermark name:", default=cfg.default_logo
        )
        path = self._resolve_existing(
            filename,
            "The specified watermark image does not exist. Please try again."
        )
        return ImageWatermark(path)

    def _apply_watermark(self, image: Image.Image, output_path: Path, watermark) -> bool:
        if isinstance(watermark, TextWatermark):
            return self.compositor.add_text_watermark(image, output_path, watermark.text)
        if isinstance(watermark, ImageWatermark):
            return self.compositor.add_image_watermark(image, output_path, watermark.path)
        raise TypeError(f"Unknown watermark: {watermark!r}")

    def _run_session(self, result: SessionResult) -> SessionResult:
        cfg = self.config
        prompter = self.prompter

        if not prompter.confirm(WELCOME_MESSAGE.format(image_dir=cfg.image_dir)):
            return result

        input_name = prompter.text(
            "What file do you want to mark?", default=cfg.default_input
        )
        kind = prompter.choose("Which watermark type?", list(WatermarkKind))

        input_path = self._resolve_existing(
            input_name,
            "The specified input file does not exist. Please try again."
        )
        result.input_path = input_path

        # Checked before loading so a bad name fails early
        output_path = cfg.image_path(prepare_output_filename(input_name))

        work_image = load_image(input_path)
        try:
            if prompter.confirm(
                    "Do you want to adjust the image before adding a watermark?"
            ):
                _, result.applied = adjust_interactively(
                    work_image, prompter, cfg.adjust_range
                )

            watermark = self._ask_watermark(kind)
            result.success = self._apply_watermark(work_image, output_path, watermark)
        finally:
            work_image.close()

        if result.success:
            result.output_path = output_path
            logger.info("Watermark added successfully!")
        else:
            result.error_message = "Watermarking failed"

        return result

    def run(self) -> SessionResult:
        """
        Run one session, handling every failure locally.

        Returns:
            SessionResult describing how the session ended.
        """
        result = SessionResult()
        try:
            return self._run_session(result)
        except click.Abort:
            raise
        except MissingInputFileError as e:
            logger.error("%s", e)
            result.error_message = str(e)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", e)
            logger.debug(traceback.format_exc())
            result.error_message = str(e)
        return result


def configure_logging(level: str = "INFO"):
    """Send log records to the console as plain status lines."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s"
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--img-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("img"),
    show_default=True,
    help="Directory holding input and watermark images.",
)
@click.option(
    "--font",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="TrueType font used for text watermarks.",
)
@click.option(
    "--log-level",
    type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
                      case_sensitive=False),
    default="INFO",
    show_default=True,
    help="Logging verbosity.",
)
@click.version_option(__version__, prog_name=__app_name__)
def main(img_dir: Path, font: Optional[Path], log_level: str):
    """Add a text or image watermark to an image in IMG_DIR."""
    configure_logging(log_level)
    config = WatermarkConfig(image_dir=img_dir, font_path=font)
    WatermarkController(config).run()


if __name__ == "__main__":
    main()
