# System
import logging
import pathlib as pl
from collections.abc import Iterator

# Third Party
import pydantic as pc
import tomlkit as tk

# Internal
from .color import Color
from .hsv import HSVColor
from .rgb import RGBColor
from .types import Channel, NonNegative, Normalized


class ColorPreset(pc.BaseModel):
    """A named color stored in exactly one representation."""

    model_config = pc.ConfigDict(frozen=True)

    name: str = pc.Field(description="Display name of the preset")
    description: str = pc.Field(description="Description of the preset")
    rgb: tuple[Channel, Channel, Channel] | None = None
    hsv: tuple[Normalized, Normalized, Normalized] | None = None
    xyz: tuple[NonNegative, NonNegative, NonNegative] | None = None

    @pc.model_validator(mode="after")
    def validate_single_representation(self):
        given = [f for f in ("rgb", "hsv", "xyz") if getattr(self, f) is not None]
        if len(given) != 1:
            raise ValueError(
                f"Exactly one of rgb, hsv or xyz must be provided, got {given}"
            )
        return self

    @property
    def color(self) -> Color:
        """Canonical color of this preset."""
        if self.rgb is not None:
            return RGBColor.new(*self.rgb).to_color()
        if self.hsv is not None:
            return HSVColor.new(*self.hsv).to_color()
        return Color.new(*self.xyz)


PRESETS_DIRECTORY = pl.Path(__file__).parent / "assets"


def read_color_preset(path: pl.Path) -> ColorPreset:
    """Parse and validate one preset file; any failure surfaces as ``ValueError``."""
    try:
        with path.open("rt", encoding="utf-8") as fp:
            return ColorPreset.model_validate(tk.load(fp))
    except (ValueError, OSError) as e:
        raise ValueError(f"Invalid preset file '{path.name}': {e}") from e


def iter_color_presets() -> Iterator[tuple[str, ColorPreset]]:
    """Yield ``(file stem, preset)`` pairs, logging and skipping unreadable files."""
    for path in sorted(PRESETS_DIRECTORY.glob("*.toml")):
        try:
            yield path.stem, read_color_preset(path)
        except ValueError as e:
            logging.warning(f"Skipping color preset '{path.stem}': {e}")


def load_color_preset(preset_name: str) -> ColorPreset:
    """Load the packaged preset stored as ``<preset_name>.toml``."""
    path = PRESETS_DIRECTORY / f"{preset_name}.toml"
    if not path.exists():
        raise KeyError(
            f"Color preset '{preset_name}' not found. "
            f"Available presets: {sorted(list_color_presets())}"
        )
    return read_color_preset(path)


def list_color_presets() -> dict[str, str]:
    """Map each valid packaged preset to its description."""
    return {stem: preset.description for stem, preset in iter_color_presets()}
