"""Command-line entry point for palforge.

This tool loads an image, obtains a palette (given explicitly or extracted
from the image), renders the plain nearest-colour quantization and the
ordered-dither quantization, and saves the results.

All processing occurs on NumPy arrays; Pillow is used only for
loading, saving and palette extraction.

Usage example:
    palforge -i input.png -o dithered.png --colors 8 --depth 2 --compare both.png
    palforge -i input.png -o dithered.png --palette "0,0,0;255,255,255"
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from .dithers import default_strength, render
from .errors import InvalidArgument
from .utils.compose import side_by_side
from .utils.loader import load_image, save_image, to_uint8, to_unit
from .utils.palette import extract_palette, parse_palette


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="palforge",
        description=(
            "Reduce an image to a small palette with ordered (Bayer) dithering. "
            "Writes the dithered result and, optionally, the plain quantization."
        ),
    )

    parser.add_argument("-i", "--input", required=True, help="Path to input image file")
    parser.add_argument("-o", "--output", required=True, help="Path for the dithered output image")
    parser.add_argument("--plain-output", default=None, help="Optional path for the undithered quantization")
    parser.add_argument(
        "--compare",
        default=None,
        help="Optional path for a side-by-side image: source | plain | dithered",
    )

    parser.add_argument(
        "--depth",
        type=int,
        default=2,
        help="Bayer matrix depth (>=0). The matrix side is 2**depth (2 -> 4x4).",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--colors",
        type=int,
        default=8,
        help="Palette size to extract from the image (1..256).",
    )
    group.add_argument(
        "--palette",
        type=str,
        default=None,
        help='Explicit palette, e.g. "0,0,0;255,255,255". Overrides --colors.',
    )
    parser.add_argument(
        "--strength",
        type=float,
        default=None,
        help="Dither strength divisor (>0). Offsets are threshold/strength. Default: palette size.",
    )
    parser.add_argument("--workers", type=int, default=1, help="Threads used for quantization (>=1)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser.parse_args(argv)


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values and raise ValueError for invalid inputs.

    Parameters
    ----------
    ns : argparse.Namespace
        Parsed CLI arguments.
    """
    if ns.depth < 0:
        raise ValueError("--depth must be an integer >= 0")
    if ns.palette is None and not 1 <= ns.colors <= 256:
        raise ValueError("--colors must be between 1 and 256")
    if ns.strength is not None and not ns.strength > 0:
        raise ValueError("--strength must be > 0")
    if ns.workers < 1:
        raise ValueError("--workers must be an integer >= 1")
    if not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing.

    Returns
    -------
    int
        Exit status code (0 for success, non-zero for failure).
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        validate_args(args)
        palette = parse_palette(args.palette) if args.palette is not None else None
    except ValueError as e:
        print(f"Argument error: {e}")
        return 2

    # 1) Load (Pillow -> NumPy RGB uint8)
    img = load_image(args.input)

    # 2) Palette: explicit, or extracted from the source image
    if palette is None:
        palette = extract_palette(img, args.colors)
    strength = args.strength if args.strength is not None else default_strength(palette)

    # 3) Render plain and dithered quantizations
    try:
        result = render(to_unit(img), palette, args.depth, strength, workers=args.workers)
    except InvalidArgument as e:
        print(f"Render error: {e}")
        return 1

    # 4) Save (NumPy -> Pillow)
    dithered = to_uint8(result.dithered)
    plain = to_uint8(result.plain)
    written = [args.output]
    save_image(dithered, args.output)
    if args.plain_output:
        save_image(plain, args.plain_output)
        written.append(args.plain_output)
    if args.compare:
        save_image(side_by_side(img, plain, dithered, gap=4), args.compare)
        written.append(args.compare)

    for path in written:
        print(f"Wrote image: {path}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
