# Third Party
import numpy as np
import pydantic as pc

# Internal
from .types import NonNegative

# Linear sRGB to CIE XYZ (D65), http://www.brucelindbloom.com/index.html?Eqn_RGB_XYZ_Matrix.html
SRGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ]
)

XYZ_TO_SRGB = np.array(
    [
        [3.2404542, -1.5371385, -0.4985314],
        [-0.9692660, 1.8760108, 0.0415560],
        [0.0556434, -0.2040259, 1.0572252],
    ]
)


class Color(pc.BaseModel):
    """Canonical color: CIE 1931 XYZ tristimulus values under D65.

    Components are clamped to be non-negative but have no upper bound, so
    overexposed or out-of-gamut light is still representable. Every other
    representation (RGB, HSV, temperature) converts through this type.
    """

    model_config = pc.ConfigDict(frozen=True, ser_json_inf_nan="constants")

    x: NonNegative = pc.Field(description="X tristimulus value")
    y: NonNegative = pc.Field(description="Y tristimulus value (luminance)")
    z: NonNegative = pc.Field(description="Z tristimulus value")

    @classmethod
    def new(cls, x: float, y: float, z: float) -> "Color":
        return cls(x=x, y=y, z=z)

    @classmethod
    def from_linear_rgb(cls, linear: np.ndarray) -> "Color":
        """Create from a linear (not gamma-encoded) sRGB triple."""
        x, y, z = SRGB_TO_XYZ @ np.asarray(linear, dtype=np.float64)
        return cls(x=float(x), y=float(y), z=float(z))

    @property
    def xyz(self) -> tuple[float, float, float]:
        return self.x, self.y, self.z

    @property
    def linear_rgb(self) -> np.ndarray:
        """Linear sRGB triple; may fall outside [0, 1] for out-of-gamut colors."""
        return XYZ_TO_SRGB @ np.array(self.xyz, dtype=np.float64)

    def isclose(self, other: "Color", atol: float = 1e-5) -> bool:
        return bool(np.allclose(self.xyz, other.xyz, rtol=0.0, atol=atol))
