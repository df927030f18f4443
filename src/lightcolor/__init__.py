from .color import Color
from .hsv import HSVColor
from .presets import list_color_presets, load_color_preset
from .registry import ColorRegistry, ColorSnapshot, SnapshotKind
from .rgb import RGBColor
from .temperature import Temperature
from .types import NonNegative, Normalized, non_negative, normalized

__all__ = [
    "Color",
    "RGBColor",
    "HSVColor",
    "Temperature",
    "Normalized",
    "NonNegative",
    "normalized",
    "non_negative",
    "ColorRegistry",
    "ColorSnapshot",
    "SnapshotKind",
    "load_color_preset",
    "list_color_presets",
]

__version__ = "2026.10.0"
