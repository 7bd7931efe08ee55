import os
import sys
import argparse

from PIL import Image

from .packer import pack, DimensionMismatch
from .emitter import PROGRAM_NAME, DIALECTS, EmissionConfig, get_dialect, emit
from .image import load_pixels, render_preview


def build_parser():
    parser = argparse.ArgumentParser(prog=PROGRAM_NAME, description="Convert a monochrome image to an XBM C array")
    parser.add_argument("file", help="Path to the input image")
    parser.add_argument("var_base", nargs="?", default="img", help="Variable name prefix (default: img)")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)", default=None)
    parser.add_argument("--dialect", choices=sorted(DIALECTS), default="u8g2", help="Target include/placement style")
    parser.add_argument("--bytes-per-row", type=int, default=19, help="Bytes per data line (default: 19)")
    parser.add_argument("--indent", type=int, default=4, help="Spaces before each data line (default: 4)")
    parser.add_argument("--preview", metavar="PNG", help="Also save an enlarged preview of the bitmap")
    return parser


def convert(path, config):
    width, height, pixels = load_pixels(path)
    image = pack(pixels, width, height)
    return image, emit(image, config)


def main(argv=None):
    args = build_parser().parse_args(argv)

    if not os.path.isfile(args.file):
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        sys.exit(1)

    if args.bytes_per_row < 1:
        print("Error: --bytes-per-row must be at least 1", file=sys.stderr)
        sys.exit(1)

    config = EmissionConfig(
        var_base=args.var_base,
        provenance=os.path.abspath(args.file),
        bytes_per_row=args.bytes_per_row,
        indent=" " * args.indent,
        dialect=get_dialect(args.dialect),
    )

    try:
        image, source = convert(args.file, config)
    except DimensionMismatch as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except (OSError, Image.DecompressionBombError) as e:
        print(f"Error loading image: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"{image.width} x {image.height}, {len(image.data)} bytes", file=sys.stderr)

    if args.preview:
        try:
            render_preview(image, args.preview)
        except (OSError, ValueError) as e:
            print(f"Error saving preview: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Saved {args.preview}", file=sys.stderr)

    if args.output:
        try:
            with open(args.output, "w") as f:
                f.write(source)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print(source)
