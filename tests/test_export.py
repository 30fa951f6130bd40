"""Tests for GIF export and the command line."""

import pytest
from house_scene.__main__ import main, parse_args
from house_scene.animation import HouseAnimation
from house_scene.export import export_gif


def test_export_gif(tmp_path):
    """Test frames are written as an animated GIF and the animation advances."""
    path = tmp_path / "house.gif"
    animation = HouseAnimation(seed=3)
    export_gif(animation, path, frames=3)
    assert path.read_bytes().startswith(b"GIF8")
    assert animation.ticks == 3


def test_export_rejects_no_frames(tmp_path):
    """Test at least one frame must be requested."""
    with pytest.raises(ValueError):
        export_gif(HouseAnimation(seed=3), tmp_path / "empty.gif", frames=0)


def test_parse_args_defaults():
    """Test defaults match the built-in timer period."""
    args = parse_args([])
    assert args.period == 100
    assert args.seed is None
    assert args.gif is None
    assert args.log_level == "WARNING"


def test_parse_args_overrides():
    """Test period and seed can be set from the command line."""
    args = parse_args(["--period", "40", "--seed", "7", "--gif", "out.gif", "--frames", "12"])
    assert args.period == 40
    assert args.seed == 7
    assert args.gif == "out.gif"
    assert args.frames == 12


@pytest.mark.parametrize("argv", [["--period", "0"], ["--frames", "-1"]])
def test_parse_args_rejects_non_positive(argv):
    """Test non-positive periods and frame counts are refused."""
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_main_writes_gif(tmp_path):
    """Test the command line can export a GIF without opening a window."""
    path = tmp_path / "cli.gif"
    main(["--gif", str(path), "--frames", "2", "--seed", "5"])
    assert path.read_bytes().startswith(b"GIF8")
