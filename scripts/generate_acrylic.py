#!/usr/bin/env python3
"""CLI entry point for the acrylic material generator."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow running the script directly from the repository root without installing the
# package by adding ``src`` to ``sys.path`` when available.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH.exists():
    src_str = str(SRC_PATH)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)

from acrylic_material import (  # noqa: E402
    AcrylicConfig,
    AcrylicError,
    AcrylicMaterial,
    BlurAlgorithmKind,
    save_buffer,
)
from acrylic_material.config import DEFAULT_STACK_RADIUS  # noqa: E402

LOGGER = logging.getLogger("acrylic_material.cli")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render an acrylic material background from an image")
    parser.add_argument("input", type=Path, help="Background image to blur")
    parser.add_argument(
        "output",
        nargs="?",
        type=Path,
        help="Destination PNG (defaults to <input>_acrylic.png)",
    )
    parser.add_argument("--config", type=Path, help="YAML configuration providing the options below")
    parser.add_argument("--defaults", action="store_true", help="Start from the stock acrylic look")
    parser.add_argument("--scale", type=float, help="Downscale factor in (0, 1]")
    parser.add_argument("--blur", choices=["gaussian", "stack"], help="Blur algorithm")
    parser.add_argument("--radius", type=float, help="Blur radius")
    parser.add_argument("--saturation", type=float, help="Saturation (0 = gray, 1 = identity)")
    parser.add_argument("--tint", help="Tint colour as #AARRGGBB, #RRGGBB or 0xAARRGGBB")
    parser.add_argument("--noise", type=Path, help="Noise texture image drawn on top")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline stages")
    return parser.parse_args(argv)


def build_material(args: argparse.Namespace) -> AcrylicMaterial:
    config = AcrylicConfig.load(args.config) if args.config else AcrylicConfig()
    material = AcrylicMaterial(config)
    if args.defaults:
        material = material.use_defaults()
    material = material.background(args.input)
    if args.scale is not None:
        material = material.scale_by(args.scale)
    if args.blur == "gaussian":
        material = material.gaussian_blur(args.radius if args.radius is not None else 25.0)
    elif args.blur == "stack":
        material = material.stack_blur(args.radius if args.radius is not None else DEFAULT_STACK_RADIUS)
    elif args.radius is not None:
        current = material.config.blur
        if current is None:
            raise SystemExit("--radius requires --blur or a blur in the config file")
        if current.algorithm is BlurAlgorithmKind.GAUSSIAN:
            material = material.gaussian_blur(args.radius)
        else:
            material = material.stack_blur(args.radius)
    if args.saturation is not None:
        material = material.saturation(args.saturation)
    if args.tint:
        material = material.tint_color(args.tint)
    if args.noise:
        material = material.noise(args.noise)
    return material


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    output_path = args.output or args.input.with_name(f"{args.input.stem}_acrylic.png")
    try:
        image = build_material(args).generate()
    except AcrylicError as exc:
        LOGGER.error("%s", exc)
        return 1
    save_buffer(image, output_path)
    LOGGER.info("Saved %dx%d acrylic image to %s", image.width, image.height, output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
