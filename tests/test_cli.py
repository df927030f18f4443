"""Test the lightcolor command line tool."""

import pytest as pt
import tomlkit as tk

from lightcolor import __version__
from lightcolor.cli import main
from lightcolor.registry import ColorRegistry


@pt.fixture(autouse=True)
def registry_directory(tmp_path, monkeypatch):
    monkeypatch.setenv("LIGHTCOLOR_REGISTRY_DIRECTORY", str(tmp_path))
    monkeypatch.delenv("LIGHTCOLOR_DEFAULT_KIND", raising=False)
    monkeypatch.delenv("LIGHTCOLOR_LOG_LEVEL", raising=False)
    return tmp_path


def run(capsys, *argv):
    code = main(list(argv))
    return code, capsys.readouterr().out


def test_cli_rgb(capsys):
    """Test describing an RGB color in every representation."""
    code, out = run(capsys, "--rgb", "73", "193", "229")
    doc = tk.loads(out)

    assert code == 0
    assert doc["rgb"] == [73, 193, 229]
    assert doc["xyz"][0] == pt.approx(0.359547, abs=1e-5)
    assert doc["hsv"][0] == pt.approx(0.538462, abs=1e-5)
    assert doc["temperature"] > 0


def test_cli_hsv(capsys):
    """Test describing an HSV color."""
    code, out = run(capsys, "--hsv", "0.3333333", "1", "1")

    assert code == 0
    assert tk.loads(out)["rgb"] == [0, 255, 0]


def test_cli_xyz_out_of_gamut(capsys):
    """Test that an out-of-gamut XYZ color prints clamped RGB channels."""
    code, out = run(capsys, "--xyz", "1", "1", "1")

    assert code == 0
    assert tk.loads(out)["rgb"] == [255, 249, 244]


def test_cli_preset(capsys):
    """Test describing a packaged preset."""
    code, out = run(capsys, "--preset", "red")

    assert code == 0
    assert tk.loads(out)["rgb"] == [255, 0, 0]


def test_cli_unknown_preset(capsys):
    """Test that an unknown preset fails without output."""
    code, out = run(capsys, "--preset", "nonexistent")

    assert code == 1
    assert out == ""


def test_cli_invalid_rgb(capsys):
    """Test that an out-of-range RGB channel fails."""
    code, _ = run(capsys, "--rgb", "300", "0", "0")
    assert code == 1


def test_cli_list_presets(capsys):
    """Test listing packaged presets."""
    code, out = run(capsys, "--list-presets")

    assert code == 0
    assert "warm_white: " in out


def test_cli_save(capsys, registry_directory):
    """Test saving the described color to the registry."""
    code, _ = run(capsys, "--rgb", "255", "170", "0", "--save", "amber")

    assert code == 0
    registry = ColorRegistry(registry_directory)
    assert registry.names() == ["amber"]
    snapshot = registry.load("amber")
    assert snapshot.color.xyz == pt.approx((0.556194, 0.500148, 0.067246), abs=1e-5)


def test_cli_save_invalid_name(capsys, registry_directory):
    """Test that an unsafe snapshot name is rejected before writing."""
    code, _ = run(capsys, "--rgb", "1", "2", "3", "--save", "bad-name")

    assert code == 1
    assert ColorRegistry(registry_directory).names() == []


def test_cli_requires_input():
    """Test that a color input is required."""
    with pt.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2


def test_cli_inputs_are_exclusive():
    """Test that color inputs cannot be combined."""
    with pt.raises(SystemExit):
        main(["--rgb", "1", "2", "3", "--preset", "red"])


def test_cli_version(capsys):
    """Test the version flag."""
    with pt.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out
