#!/usr/bin/env python

# System
import argparse
import logging
import sys

# Third Party
import tomlkit as tk

# Internal
from . import __version__
from .color import Color
from .hsv import HSVColor
from .presets import list_color_presets, load_color_preset
from .registry import ColorRegistry, ColorSnapshot
from .rgb import RGBColor
from .settings import Settings
from .temperature import Temperature


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lightcolor",
        description="Convert a color between XYZ, RGB, HSV and color temperature.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--rgb", nargs=3, type=int, metavar=("R", "G", "B"), help="8-bit sRGB color"
    )
    source.add_argument(
        "--hsv", nargs=3, type=float, metavar=("H", "S", "V"), help="HSV in [0, 1]"
    )
    source.add_argument(
        "--xyz", nargs=3, type=float, metavar=("X", "Y", "Z"), help="CIE XYZ (D65)"
    )
    source.add_argument("--preset", help="Name of a packaged color preset")
    source.add_argument(
        "--list-presets", action="store_true", help="List packaged color presets"
    )
    parser.add_argument("--save", metavar="NAME", help="Save the color to the registry")
    parser.add_argument(
        "--config", help="TOML configuration file.", dest="cfg_file", required=False
    )
    parser.add_argument(
        "--version", action="version", version=f"lightcolor {__version__}"
    )
    return parser


def color_from_args(args: argparse.Namespace) -> Color:
    if args.rgb is not None:
        return RGBColor.new(*args.rgb).to_color()
    if args.hsv is not None:
        return HSVColor.new(*args.hsv).to_color()
    if args.xyz is not None:
        return Color.new(*args.xyz)
    return load_color_preset(args.preset).color


def describe(color: Color) -> str:
    """Render a color in every representation as a TOML document."""
    rgb = RGBColor.from_color(color)
    hsv = HSVColor.from_color(color)
    temperature = Temperature.from_color(color)

    doc = tk.document()
    doc["xyz"] = list(color.xyz)
    doc["rgb"] = list(rgb.channels)
    doc["hsv"] = [hsv.hue, hsv.saturation, hsv.value]
    doc["temperature"] = temperature.value
    return tk.dumps(doc)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = Settings.load(args.cfg_file)
    logging.basicConfig(level=settings.log_level)

    if args.list_presets:
        for name, description in sorted(list_color_presets().items()):
            print(f"{name}: {description}")
        return 0

    if args.rgb is None and args.hsv is None and args.xyz is None and not args.preset:
        parser.error("one of --rgb, --hsv, --xyz, --preset or --list-presets is required")

    try:
        color = color_from_args(args)
        if args.save:
            registry = ColorRegistry(settings.registry_directory)
            snapshot = ColorSnapshot(name=args.save, color=color)
            registry.save(snapshot, settings.default_kind)
    except (KeyError, ValueError) as e:
        logging.error(str(e))
        return 1

    print(describe(color), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
