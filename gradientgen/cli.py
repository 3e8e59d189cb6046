"""Command that renders a layered Perlin noise gradient to a PNG file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from gradientgen.color import Color, ColorLine
from gradientgen.gradient import Gradient
from gradientgen.noise import PerlinNoise

PALETTE = (
    Color(51, 102, 255),
    Color(102, 51, 255),
    Color(153, 51, 255),
    Color(204, 102, 255),
    Color(255, 153, 255),
)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gradientgen",
        description="Render a Perlin noise gradient to an image file.",
    )
    parser.add_argument("-o", "--output", default="output/img85.png")
    parser.add_argument("--size", type=int, default=1024, help="width and height")
    parser.add_argument("--grid-size", type=int, default=512)
    parser.add_argument("--octaves", type=int, default=5)
    parser.add_argument("--seed", type=int, default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)

    try:
        options = {"grid_size": (args.grid_size, args.grid_size), "n_octaves": args.octaves}
        if args.seed is not None:
            options["seed"] = args.seed
        method = PerlinNoise(**options)
    except ValueError as error:
        print(f"gradientgen: {error}", file=sys.stderr)
        return 1

    gradient = Gradient(method, ColorLine(PALETTE), height=args.size, width=args.size)
    output = Path(args.output)
    try:
        gradient.to_image().save(output)
    except (OSError, ValueError) as error:
        print(f"gradientgen: cannot save {output}: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())