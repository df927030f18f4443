# System
import logging

# Third Party
import numpy as np
import pydantic as pc

# Internal
from .color import Color
from .types import NonNegative

# Approximate warm white returned for every temperature, see Temperature.to_color
WARM_WHITE_PLACEHOLDER = Color.new(1.009794293297943, 1.0, 0.6444857332448575)


def mccamy_cct(x: float, y: float, z: float) -> float:
    """McCamy's cubic approximation of correlated color temperature.

    Undefined for black (x + y + z == 0) and for chromaticities with
    y == 0.1858; those yield NaN or infinity instead of raising.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        x, y, z = np.float64(x), np.float64(y), np.float64(z)
        s = x + y + z
        xc = x / s
        yc = y / s
        n = (xc - 0.3320) / (0.1858 - yc)
        return float(449.0 * n**3 + 3525.0 * n**2 + 6823.3 * n + 5520.33)


class Temperature(pc.RootModel[NonNegative]):
    """Correlated color temperature in McCamy-approximation units (~kelvin).

    Serializes as the bare number.
    """

    model_config = pc.ConfigDict(frozen=True, ser_json_inf_nan="constants")

    @classmethod
    def new(cls, value: float) -> "Temperature":
        return cls(value)

    @property
    def value(self) -> float:
        return self.root

    @classmethod
    def from_color(cls, color: Color) -> "Temperature":
        cct = mccamy_cct(*color.xyz)
        if not np.isfinite(cct):
            logging.warning(f"Degenerate color temperature {cct} for {color!r}.")
        return cls(cct)

    def to_color(self) -> Color:
        """Placeholder: NOT an inverse of from_color.

        The temperature is ignored and a fixed warm white is returned.
        """
        return WARM_WHITE_PLACEHOLDER
