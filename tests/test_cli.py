from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest
from PIL import Image

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "generate_acrylic.py"


def _load_cli():
    spec = importlib.util.spec_from_file_location("generate_acrylic", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


cli = _load_cli()


@pytest.fixture
def photo(tmp_path: Path) -> Path:
    path = tmp_path / "photo.png"
    Image.new("RGB", (12, 8), (200, 40, 40)).save(path)
    return path


def test_render_writes_default_output_next_to_input(photo: Path, tmp_path: Path):
    assert cli.main([str(photo), "--blur", "stack", "--radius", "2"]) == 0

    output = tmp_path / "photo_acrylic.png"
    assert output.exists()
    with Image.open(output) as image:
        assert image.size == (12, 8)
        assert image.mode == "RGBA"


def test_explicit_output_and_scale(photo: Path, tmp_path: Path):
    output = tmp_path / "out" / "small.png"
    output.parent.mkdir()
    code = cli.main([str(photo), str(output), "--blur", "gaussian", "--radius", "3", "--scale", "0.5"])
    assert code == 0
    with Image.open(output) as image:
        assert image.size == (6, 4)


def test_missing_blur_returns_failure(photo: Path, tmp_path: Path):
    assert cli.main([str(photo)]) == 1
    assert not (tmp_path / "photo_acrylic.png").exists()


def test_fractional_stack_radius_returns_failure(photo: Path, tmp_path: Path):
    assert cli.main([str(photo), "--blur", "stack", "--radius", "2.5"]) == 1
    assert not (tmp_path / "photo_acrylic.png").exists()


def test_radius_without_blur_exits(photo: Path):
    with pytest.raises(SystemExit):
        cli.main([str(photo), "--radius", "3"])


def test_radius_overrides_blur_from_config(photo: Path, tmp_path: Path):
    config = tmp_path / "acrylic.yaml"
    config.write_text("blur:\n  algorithm: gaussian\n  radius: 10\nsaturation: 0\n", encoding="utf8")

    assert cli.main([str(photo), "--config", str(config), "--radius", "4"]) == 0

    with Image.open(tmp_path / "photo_acrylic.png") as image:
        r, g, b, a = image.getpixel((6, 4))
    assert r == g == b
    assert a == 255
