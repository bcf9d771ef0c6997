"""
Command-line interface for vecdraw.
"""
import argparse
import logging
import sys
from typing import List, Optional

from vecdraw.core import configure
from vecdraw.core.renderer import SVGRenderer
from vecdraw.core.validator import SVGValidator
from vecdraw.gallery import GALLERY
from vecdraw.utils.io import load_config, load_svg
from vecdraw.utils.logger import setup_logger

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="vecdraw",
        description="Draw gallery pictures and convert or check SVG files.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to a JSON file with configuration overrides",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    gallery = subparsers.add_parser("gallery", help="Draw one of the gallery pictures")
    gallery.add_argument("name", choices=sorted(GALLERY), help="Gallery picture to draw")
    gallery.add_argument("--output", "-o", type=str, required=True,
                         help="Output file; the extension selects the format")
    gallery.add_argument("--width", type=float, help="Page width (map only)")
    gallery.add_argument("--height", type=float, help="Page height (map only)")
    gallery.add_argument("--size", type=float, help="Page size (sierpinski, logo and chart)")
    gallery.add_argument("--depth", type=int, default=6, help="Sierpinski recursion depth")
    gallery.add_argument("--shapefile", type=str, help="Shapefile with country outlines (map)")
    gallery.add_argument("--airports", type=str, help="CSV file with airport coordinates (map)")
    gallery.add_argument("--data", type=str, help="CSV file with label and value columns (chart)")
    gallery.add_argument("--title", type=str, default="", help="Chart title")

    convert = subparsers.add_parser("convert", help="Convert an SVG file to PNG, PDF or EPS")
    convert.add_argument("input", type=str, help="SVG file to convert")
    convert.add_argument("output", type=str, help="Output file; the extension selects the format")
    convert.add_argument("--scale", type=float, default=1.0, help="Scale factor")

    check = subparsers.add_parser("check", help="Validate an SVG file")
    check.add_argument("input", type=str, help="SVG file to validate")

    return parser.parse_args(argv)


def run_gallery(args: argparse.Namespace):
    """Draw the gallery picture selected on the command line."""
    func = GALLERY[args.name]
    kwargs = {}

    if args.name == "sierpinski":
        kwargs["depth"] = args.depth
    elif args.name == "map":
        if not args.shapefile:
            raise ValueError("The map picture needs --shapefile")
        kwargs["shapefile_path"] = args.shapefile
        kwargs["airports_csv"] = args.airports
        if args.width:
            kwargs["width"] = args.width
        if args.height:
            kwargs["height"] = args.height
    elif args.name == "chart":
        if not args.data:
            raise ValueError("The chart picture needs --data")
        kwargs["data"] = args.data
        kwargs["title"] = args.title

    if args.size and args.name != "map":
        kwargs["size"] = args.size

    return func(args.output, **kwargs)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_args(argv)
    setup_logger(level="DEBUG" if args.verbose else "INFO")

    try:
        if args.config:
            configure(load_config(args.config))

        if args.command == "gallery":
            result = run_gallery(args)
            logger.info(f"Drew {args.name} to {result}")
        elif args.command == "convert":
            result = SVGRenderer(scale=args.scale).convert_file(args.input, args.output)
            logger.info(f"Converted {args.input} to {result}")
        elif args.command == "check":
            valid, message = SVGValidator().validate(load_svg(args.input))
            if not valid:
                logger.error(f"{args.input} is not valid: {message}")
                return 1
            logger.info(f"{args.input} is valid")
        return 0

    except Exception as e:
        logger.error(f"{args.command} failed: {e}", exc_info=args.verbose)
        return 1


if __name__ == "__main__":
    sys.exit(main())
