# Third Party
import numpy as np
import pydantic as pc

# Internal
from .color import Color
from .rgb import RGBColor, round_channels
from .types import Normalized

EPSILON = np.finfo(np.float64).eps


class HSVColor(pc.BaseModel):
    """Hue, saturation and value, each clamped to [0, 1].

    Hue is a fraction of the color wheel (0 red, 1/3 green, 2/3 blue). It is
    not cyclic: 1.0 is stored as 1.0 even though it names the same hue as 0.0.
    """

    model_config = pc.ConfigDict(frozen=True, ser_json_inf_nan="constants")

    hue: Normalized = 0.0
    saturation: Normalized = 0.0
    value: Normalized = 0.0

    @classmethod
    def new(cls, hue: float, saturation: float, value: float) -> "HSVColor":
        return cls(hue=hue, saturation=saturation, value=value)

    @classmethod
    def from_rgb(cls, rgb: RGBColor) -> "HSVColor":
        r, g, b = (float(c) for c in rgb.channels)
        max_ = max(r, g, b)
        min_ = min(r, g, b)
        diff = max_ - min_
        diff6 = 6.0 * diff

        if abs(diff) < EPSILON:
            hue = 0.0
        elif abs(max_ - r) < EPSILON:
            # Wrap negative hues into the top of the wheel
            if g >= b:
                hue = (g - b) / diff6
            else:
                hue = 1.0 - (b - g) / diff6
        elif abs(max_ - g) < EPSILON:
            hue = 1.0 / 3.0 + (b - r) / diff6
        else:
            hue = 2.0 / 3.0 + (r - g) / diff6

        saturation = 0.0 if abs(max_) < EPSILON else diff / max_

        return cls(hue=hue, saturation=saturation, value=max_ / 255)

    def to_rgb(self) -> RGBColor:
        """Convert to 8-bit RGB.

        The wheel is split into four bands with red, green, blue and red again
        as the dominant channel: [0, 1/6), [1/6, 1/2), [1/2, 5/6) and [5/6, 1].
        Inside the two middle bands the sign of the offset from the band
        center decides which of the other channels is rising.
        """
        hue = self.hue
        max_ = self.value * 255
        diff = self.saturation * max_
        diff6 = 6.0 * diff

        if abs(diff) < EPSILON:
            r = g = b = max_
        elif hue < 1.0 / 6.0:
            r = max_
            b = r - diff
            g = b + hue * diff6
        elif hue < 0.5:
            g = max_
            min_ = g - diff
            offset = (hue - 1.0 / 3.0) * diff6
            if offset >= 0.0:
                r = min_
                b = r + offset
            else:
                b = min_
                r = b - offset
        elif hue < 5.0 / 6.0:
            b = max_
            min_ = b - diff
            offset = (hue - 2.0 / 3.0) * diff6
            if offset >= 0.0:
                g = min_
                r = g + offset
            else:
                r = min_
                g = r - offset
        else:
            r = max_
            g = r - diff
            b = g - (hue - 1.0) * diff6

        return RGBColor.new(*round_channels(np.array([r, g, b])))

    @classmethod
    def from_color(cls, color: Color) -> "HSVColor":
        return cls.from_rgb(RGBColor.from_color(color))

    def to_color(self) -> Color:
        return self.to_rgb().to_color()
