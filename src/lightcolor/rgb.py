# Third Party
import numpy as np
import pydantic as pc

# Internal
from .color import Color
from .types import Channel


def decode_gamma(encoded: np.ndarray) -> np.ndarray:
    """sRGB decoding curve, [0, 1] gamma-encoded values to linear light."""
    return np.where(
        encoded <= 0.04045,
        encoded / 12.92,
        ((encoded + 0.055) / 1.055) ** 2.4,
    )


def encode_gamma(linear: np.ndarray) -> np.ndarray:
    """sRGB encoding curve, linear light to gamma-encoded values.

    Negative inputs beyond the linear segment encode below zero and are
    clamped away by the caller.
    """
    return np.where(
        np.abs(linear) < 0.0031308,
        12.92 * linear,
        1.055 * np.power(np.maximum(linear, 0.0), 1.0 / 2.4) - 0.055,
    )


def round_channels(values: np.ndarray) -> tuple[int, int, int]:
    """Round non-negative channel values half away from zero into 0..255."""
    values = np.nan_to_num(values, nan=0.0)
    rounded = np.floor(np.clip(values, 0.0, 255.0) + 0.5)
    return tuple(int(v) for v in rounded)


class RGBColor(pc.BaseModel):
    """8-bit gamma-encoded sRGB color."""

    model_config = pc.ConfigDict(frozen=True)

    red: Channel = 0
    green: Channel = 0
    blue: Channel = 0

    @classmethod
    def new(cls, red: int, green: int, blue: int) -> "RGBColor":
        return cls(red=red, green=green, blue=blue)

    @property
    def channels(self) -> tuple[int, int, int]:
        return self.red, self.green, self.blue

    @classmethod
    def from_color(cls, color: Color) -> "RGBColor":
        """Convert a canonical color, clamping anything outside the sRGB gamut."""
        encoded = np.clip(encode_gamma(color.linear_rgb), 0.0, 1.0)
        return cls.new(*round_channels(255 * encoded))

    def to_color(self) -> Color:
        encoded = np.array(self.channels, dtype=np.float64) / 255
        return Color.from_linear_rgb(decode_gamma(encoded))
