import logging
import sys
from typing import Optional, Sequence

from PIL import UnidentifiedImageError
from PyQt5.QtWidgets import QApplication

from CE_Libs.cli_args import config_from_args, configure_logging, parse_args
from CE_Libs.errors import InvalidImageSizeError
from CE_Libs.ImageEditingLib.crop_editor_window import CropEditorWindow
from CE_Libs.ImageEditingLib.image_editing_ops import load_image

logger = logging.getLogger("coral_editor")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    try:
        configure_logging(args.log_level)
        config = config_from_args(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        record = load_image(args.image)
    except (OSError, UnidentifiedImageError, InvalidImageSizeError) as e:
        logger.error(f"Failed to load image {args.image}: {e}")
        return 1

    app = QApplication(sys.argv[:1])
    window = CropEditorWindow(record, config)
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
