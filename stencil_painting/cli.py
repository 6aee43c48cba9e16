"""Command-line entry point.

    stencil-painting generate-stencil 1920 1080 grid.png circle-grid 12
    stencil-painting dynamic photos/ out/ square-grid 16
    stencil-painting static grid.png photos/ out/ --alpha-averaging
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv

from stencil_painting.config import settings
from stencil_painting.errors import StencilError
from stencil_painting.models.specs import (
    CircleGrid,
    ConcentricCircleGrid,
    CrossGrid,
    FloodFill,
    MaskGrid,
    SquareGrid,
)
from stencil_painting.pipeline import generate_and_save_stencil, run_dynamic, run_static

logger = logging.getLogger(__name__)


def _add_generator_commands(parser: argparse.ArgumentParser) -> None:
    generators = parser.add_subparsers(dest="generator", required=True, metavar="GENERATOR")

    p = generators.add_parser("square-grid", help="Square tiles")
    p.add_argument("side_length", type=int)
    p.set_defaults(make_spec=lambda a: SquareGrid(a.side_length))

    p = generators.add_parser("circle-grid", help="Circles on a square lattice, background segment 0")
    p.add_argument("radius", type=int)
    p.set_defaults(make_spec=lambda a: CircleGrid(a.radius))

    p = generators.add_parser("concentric-circle-grid", help="Rings around the canvas center")
    p.add_argument("radius", type=int)
    p.set_defaults(make_spec=lambda a: ConcentricCircleGrid(a.radius))

    p = generators.add_parser("cross-grid", help="Plus-shaped segments on a diagonal lattice")
    p.add_argument("cross_intersection_width", type=int)
    p.set_defaults(make_spec=lambda a: CrossGrid(a.cross_intersection_width))

    p = generators.add_parser("mask-grid", help="Tile a folder of 8-bit greyscale masks")
    p.add_argument("mask_folder", type=Path)
    p.set_defaults(make_spec=lambda a: MaskGrid(a.mask_folder))

    p = generators.add_parser("flood-fill", help="Segment an existing image by flood fill")
    p.add_argument("source_path", type=Path)
    p.set_defaults(make_spec=lambda a: FloodFill(a.source_path))


def _add_alpha_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--alpha-averaging",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Average alpha like any channel instead of skipping transparent pixels",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stencil-painting",
        description="Recolor images by averaging content over stencil segments",
    )
    parser.add_argument("--log-level", default=None, help="Overrides STENCIL_LOG_LEVEL")
    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    dynamic = commands.add_parser("dynamic", help="Generate a stencil per image size and composite")
    dynamic.add_argument("input", type=Path, help="Image file or folder of images")
    dynamic.add_argument("output", type=Path, help="Output file or folder")
    _add_alpha_flag(dynamic)
    _add_generator_commands(dynamic)

    static = commands.add_parser("static", help="Composite against an existing stencil image")
    static.add_argument("stencil", type=Path)
    static.add_argument("input", type=Path, help="Image file or folder of images")
    static.add_argument("output", type=Path, help="Output file or folder")
    _add_alpha_flag(static)

    stencil = commands.add_parser("generate-stencil", help="Write a generated stencil image")
    stencil.add_argument("width", type=int)
    stencil.add_argument("height", type=int)
    stencil.add_argument("output", type=Path)
    _add_generator_commands(stencil)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    level = args.log_level or settings.stencil_log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        if args.command == "generate-stencil":
            out = generate_and_save_stencil(args.width, args.height, args.make_spec(args), args.output)
            logger.info("Stencil written to %s", out)
            return 0

        if args.command == "dynamic":
            result = run_dynamic(args.input, args.output, args.make_spec(args), args.alpha_averaging)
        else:
            result = run_static(args.stencil, args.input, args.output, args.alpha_averaging)
    except StencilError as e:
        logger.error("%s", e)
        return 1

    for name, error in result.failed.items():
        logger.error("%s: %s", name, error)
    return 0 if result.ok else 1
