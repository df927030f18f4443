"""Test RGB <-> XYZ conversion."""

import itertools

import numpy as np
import pydantic as pc
import pytest as pt

from lightcolor.color import Color
from lightcolor.rgb import RGBColor, decode_gamma, encode_gamma

KNOWN_COLORS = [
    ((255, 255, 255), (0.950470, 1.0, 1.088830)),
    ((255, 0, 0), (0.412456, 0.212673, 0.019334)),
    ((0, 255, 0), (0.357576, 0.715152, 0.119192)),
    ((0, 0, 255), (0.180437, 0.072175, 0.950304)),
    ((0, 0, 0), (0.0, 0.0, 0.0)),
    ((73, 193, 229), (0.359547, 0.452095, 0.809450)),
    ((255, 170, 0), (0.556194, 0.500148, 0.067246)),
]


@pt.mark.parametrize("rgb, xyz", KNOWN_COLORS)
def test_rgb_to_xyz(rgb, xyz):
    """Test RGB to XYZ conversion."""
    color = RGBColor.new(*rgb).to_color()
    assert np.allclose(color.xyz, xyz, rtol=0.0, atol=1e-5)


@pt.mark.parametrize("rgb, xyz", KNOWN_COLORS)
def test_xyz_to_rgb(rgb, xyz):
    """Test XYZ to RGB conversion."""
    assert RGBColor.from_color(Color.new(*xyz)).channels == rgb


def test_rgb_round_trip():
    """Test that RGB -> XYZ -> RGB reproduces every channel exactly."""
    values = range(0, 256, 15)
    for rgb in itertools.product(values, values, values):
        color = RGBColor.new(*rgb).to_color()
        assert RGBColor.from_color(color).channels == rgb


def test_out_of_gamut_is_clamped():
    """Test that colors outside the sRGB gamut clamp per channel."""
    assert RGBColor.from_color(Color.new(1.0, 1.0, 1.0)).channels == (255, 249, 244)


def test_overexposed_color_is_clamped():
    """Test that overexposed channels clamp to 255."""
    assert RGBColor.from_color(Color.new(10.0, 10.0, 10.0)).channels == (255, 255, 255)


def test_negative_linear_channel_is_clamped():
    """Test that pure X clamps its negative linear green to zero."""
    rgb = RGBColor.from_color(Color.new(1.0, 0.0, 0.0))
    assert rgb.red == 255
    assert rgb.green == 0


def test_nan_component_maps_to_zero():
    """Test that a NaN component becomes a zero channel."""
    rgb = RGBColor.from_color(Color.new(float("nan"), 0.0, 0.0))
    assert rgb.channels == (0, 0, 0)


def test_gamma_curves_are_inverse():
    """Test that the sRGB gamma curves invert each other."""
    encoded = np.linspace(0.0, 1.0, 101)
    assert np.allclose(encode_gamma(decode_gamma(encoded)), encoded, atol=1e-6)


def test_gamma_linear_segment():
    """Test the linear segment of the sRGB gamma curves."""
    assert float(decode_gamma(np.array(0.04045))) == pt.approx(0.04045 / 12.92)
    assert float(encode_gamma(np.array(0.003))) == pt.approx(12.92 * 0.003)


def test_rgb_channel_validation():
    """Test that channels are 8-bit integers."""
    with pt.raises(pc.ValidationError):
        RGBColor.new(256, 0, 0)

    with pt.raises(pc.ValidationError):
        RGBColor.new(0, -1, 0)


def test_rgb_serialization():
    """Test RGBColor JSON serialization."""
    rgb = RGBColor.new(73, 193, 229)
    assert rgb.model_dump() == {"red": 73, "green": 193, "blue": 229}
    assert RGBColor.model_validate(rgb.model_dump()) == rgb
