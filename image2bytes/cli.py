#!/usr/bin/env python3
"""
image2bytes - PNG to Go byte array converter
Converts a PNG image to a packed monochrome bitmap (1 bit per pixel,
1 = black, 0 = white) declared as a Go []byte with width/height constants.

Usage:
    image2bytes input.png output.go [options]
    image2bytes photo.png badger.go --size 296x128 --name Badger
"""

import argparse
import sys

from .converter import ImageToBytesConverter
from .naming import is_go_file, is_go_identifier, is_png_file
from .settings import (
    BADGER_2040W_SIZE,
    DEFAULT_BYTES_PER_LINE,
    DEFAULT_LUMINANCE,
    DEFAULT_PACKAGE,
    DEFAULT_RESAMPLE,
    LUMINANCE_RANGES,
    RESAMPLE_FILTERS,
    ConversionSettings,
    EmitSettings,
    LoadSettings,
    PackSettings,
    parse_size,
)

USAGE = "Usage: image2bytes input.png output.go"


def size_arg(value):
    """argparse type for WxH sizes"""
    try:
        return parse_size(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def positive_int(value):
    """argparse type for strictly positive integers"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        prog='image2bytes',
        description='Convert PNG images to packed monochrome Go byte arrays')
    # Optional so a missing argument prints the usage line instead of an argparse error
    parser.add_argument('input', nargs='?', help='Input PNG file')
    parser.add_argument('output', nargs='?', help='Output Go file')
    parser.add_argument('-n', '--name', help='Go variable name (default: derived from output file name)')
    parser.add_argument('--package', default=DEFAULT_PACKAGE,
                        help=f'Go package name (default: {DEFAULT_PACKAGE})')
    parser.add_argument('--size', type=size_arg,
                        help='Resize to WIDTHxHEIGHT before packing, e.g. %dx%d for a Badger 2040W'
                        % BADGER_2040W_SIZE)
    parser.add_argument('--resample', choices=RESAMPLE_FILTERS, default=DEFAULT_RESAMPLE,
                        help=f'Resampling filter used with --size (default: {DEFAULT_RESAMPLE})')
    parser.add_argument('--luminance', choices=sorted(LUMINANCE_RANGES), default=DEFAULT_LUMINANCE,
                        help=f'Luminance conversion (default: {DEFAULT_LUMINANCE})')
    parser.add_argument('--threshold', type=int,
                        help='Pixels darker than this are black (default: middle of the luminance range)')
    parser.add_argument('--bytes-per-line', type=positive_int, default=DEFAULT_BYTES_PER_LINE,
                        help=f'Array entries per line (default: {DEFAULT_BYTES_PER_LINE})')
    parser.add_argument('--no-dimensions', action='store_true',
                        help='Do not emit the Width/Height constants')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Check if the required arguments are provided
    if not args.input or not args.output:
        print(USAGE)
        return 0

    if not is_png_file(args.input):
        print("Error: Input file must be a PNG file (with .png extension)")
        return 0

    if not is_go_file(args.output):
        print("Error: Output file must be a Go file (with .go extension)")
        return 0

    if args.name is not None and not is_go_identifier(args.name):
        parser.error(f"--name must be a valid Go identifier, got {args.name!r}")

    try:
        settings = ConversionSettings(
            load=LoadSettings(size=args.size, resample=args.resample),
            pack=PackSettings(luminance=args.luminance, threshold=args.threshold),
            emit=EmitSettings(package_name=args.package,
                              bytes_per_line=args.bytes_per_line,
                              emit_dimension_constants=not args.no_dimensions),
        )
    except ValueError as e:
        parser.error(str(e))

    converter = ImageToBytesConverter(settings, verbose=args.verbose)

    # I/O and decode errors are not recoverable; let them propagate
    converter.convert(args.input, args.output, name=args.name)

    print(f"Done. Bytes written to {args.output}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
