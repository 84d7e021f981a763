from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional, Tuple

from .. import codec
from ..buffer import PixelBuffer
from ..drawing import draw_koch_snowflake, draw_perlin_noise, draw_sierpinski_triangle, resize
from ..errors import InvalidArgument
from ..imaging import open_any, save_image
from ..settings import RenderSettings
from ..types import BLACK, WHITE, Color, Encoding, Point

logger = logging.getLogger(__name__)

PPM_EXTENSIONS = {".ppm", ".pnm"}


def parse_size(value: str) -> Tuple[int, int]:
    parts = value.lower().split("x")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Size must be WIDTHxHEIGHT, got '{value}'")
    try:
        width, height = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Size must be WIDTHxHEIGHT, got '{value}'") from exc
    return width, height


def parse_color(value: str) -> Color:
    try:
        return Color.parse(value)
    except InvalidArgument as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ppmkit",
        description="ppmkit: read, transform and draw on P3/P6 color images.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", metavar="PATH", help="JSON file with render settings")
    sub = parser.add_subparsers(dest="command", required=True)

    info = sub.add_parser("info", help="Show header fields of an image")
    info.add_argument("path")

    convert = sub.add_parser("convert", help="Re-encode an image as P3 or P6")
    convert.add_argument("src")
    convert.add_argument("dst")
    encoding_group = convert.add_mutually_exclusive_group()
    encoding_group.add_argument("--text", action="store_true", help="Write the textual variant (P3)")
    encoding_group.add_argument("--binary", action="store_true", help="Write the binary variant (P6)")
    convert.add_argument("--max", type=int, metavar="N", help="Rescale to max intensity N (1-255)")

    transform = sub.add_parser("transform", help="Apply whole-image transforms in order")
    transform.add_argument("src")
    transform.add_argument("dst")
    transform.add_argument("--invert", dest="ops", action="append_const", const="invert")
    transform.add_argument("--flip", dest="ops", action="append_const", const="flip")
    transform.add_argument("--flop", dest="ops", action="append_const", const="flop")
    transform.add_argument("--rotate", dest="ops", action="append_const", const="rotate")
    transform.add_argument("--resize", type=parse_size, metavar="WxH")

    draw = sub.add_parser("draw", help="Render a procedural image onto a blank canvas")
    draw.add_argument("dst")
    draw.add_argument("--size", type=parse_size, default=(256, 256), metavar="WxH")
    draw.add_argument("--color", type=parse_color, default=WHITE, metavar="R,G,B")
    draw.add_argument("--color2", type=parse_color, default=BLACK, metavar="R,G,B")
    draw.add_argument("--background", type=parse_color, default=BLACK, metavar="R,G,B")
    shape_group = draw.add_mutually_exclusive_group(required=True)
    shape_group.add_argument("--snowflake", type=int, metavar="DEPTH")
    shape_group.add_argument("--sierpinski", type=int, metavar="DEPTH")
    shape_group.add_argument("--noise", action="store_true")

    export = sub.add_parser("export", help="Write an image in any format Pillow supports")
    export.add_argument("src")
    export.add_argument("dst")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def _is_ppm(path: str) -> bool:
    return os.path.splitext(path)[1].lower() in PPM_EXTENSIONS


def read_buffer(path: str) -> PixelBuffer:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"File not found: {path}")
    if _is_ppm(path):
        return codec.read_file(path)
    return open_any(path)


def write_buffer(path: str, buffer: PixelBuffer) -> None:
    if _is_ppm(path):
        codec.write_file(path, buffer)
    else:
        save_image(buffer, path)
    logger.info("Wrote %s (%dx%d)", path, buffer.width, buffer.height)


def load_settings(args: argparse.Namespace) -> RenderSettings:
    if args.config:
        return RenderSettings.load(args.config)
    return RenderSettings()


def show_info(args: argparse.Namespace) -> int:
    buffer = read_buffer(args.path)
    print(f"magic: {buffer.encoding.magic}")
    print(f"size: {buffer.width}x{buffer.height}")
    print(f"max intensity: {buffer.max_intensity}")
    return 0


def convert(args: argparse.Namespace) -> int:
    buffer = read_buffer(args.src)
    if args.text:
        buffer.set_encoding(Encoding.TEXT)
    elif args.binary:
        buffer.set_encoding(Encoding.BINARY)
    if args.max is not None:
        buffer.set_max_intensity(args.max)
    write_buffer(args.dst, buffer)
    return 0


def transform(args: argparse.Namespace) -> int:
    buffer = read_buffer(args.src)
    for op in args.ops or []:
        if op == "invert":
            buffer.invert()
        elif op == "flip":
            buffer.flip()
        elif op == "flop":
            buffer.flop()
        elif op == "rotate":
            buffer.rotate_90_cw()
    if args.resize:
        resize(buffer, *args.resize)
    write_buffer(args.dst, buffer)
    return 0


def draw(args: argparse.Namespace) -> int:
    settings = load_settings(args)
    width, height = args.size
    buffer = PixelBuffer(width, height, encoding=settings.default_encoding, fill=args.background)
    if args.noise:
        draw_perlin_noise(buffer, args.color, args.color2, settings)
    else:
        # Leave a margin and centre the base triangle horizontally.
        size = max(1, min(width, height) * 3 // 4)
        start = Point((width - size) // 2, height // 8)
        if args.snowflake is not None:
            draw_koch_snowflake(buffer, args.snowflake, start, size, args.color, settings)
        else:
            draw_sierpinski_triangle(buffer, args.sierpinski, start, size, args.color, settings)
    write_buffer(args.dst, buffer)
    return 0


def export(args: argparse.Namespace) -> int:
    buffer = read_buffer(args.src)
    save_image(buffer, args.dst)
    logger.info("Exported %s to %s", args.src, args.dst)
    return 0


COMMANDS = {
    "info": show_info,
    "convert": convert,
    "transform": transform,
    "draw": draw,
    "export": export,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return COMMANDS[args.command](args)
    except Exception as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
