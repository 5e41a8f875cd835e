"""
Command-line handling for the Coral Editor entry point.

Functions:
    build_arg_parser: Argument parser for coral_editor.py
    config_from_args: Build an EditorConfig from parsed arguments
    configure_logging: Set up root logging for the application
"""

import argparse
import logging
from typing import Optional, Sequence

from CE_Libs.constants import (
    DEFAULT_FIT_MARGIN,
    DEFAULT_INPUT_PATH,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_ROUNDING,
    LOG_FORMAT,
    ROUNDING_POLICIES,
    STDIN_SOURCE,
)
from CE_Libs.editor_config import EditorConfig


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coral_editor",
        description="Crop an image by dragging a selection. Esc cancels a selection, "
                    "or saves and exits when nothing is selected.",
    )
    parser.add_argument(
        "image",
        nargs="?",
        default=DEFAULT_INPUT_PATH,
        help=f"image to edit, or '{STDIN_SOURCE}' to read from stdin (default: {DEFAULT_INPUT_PATH})",
    )
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT_PATH, help="where to save on exit")
    parser.add_argument("--format", dest="save_format", default=DEFAULT_OUTPUT_FORMAT, help="output image format")
    parser.add_argument(
        "--fit-margin",
        type=float,
        default=DEFAULT_FIT_MARGIN,
        help="fraction of the window the image may fill, in (0, 1]",
    )
    parser.add_argument(
        "--rounding",
        choices=ROUNDING_POLICIES,
        default=DEFAULT_ROUNDING,
        help="how fractional selection corners snap to pixels",
    )
    parser.add_argument(
        "--no-exit-on-escape",
        dest="escape_exits",
        action="store_false",
        help="Esc only clears the selection and never closes the editor",
    )
    parser.add_argument("--no-save", dest="save_on_exit", action="store_false", help="do not save on exit")
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL, help="logging level (default: INFO)")
    return parser


def config_from_args(args: argparse.Namespace) -> EditorConfig:
    """
    Build the editor configuration from parsed arguments.

    Raises:
        ValueError: If an argument value is out of range
    """
    return EditorConfig(
        fit_margin=args.fit_margin,
        pixel_rounding=args.rounding,
        escape_exits=args.escape_exits,
        save_on_exit=args.save_on_exit,
        output_path=args.output,
        save_format=args.save_format,
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    numeric = logging.getLevelName(str(level).upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_arg_parser().parse_args(argv)
