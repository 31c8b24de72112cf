"""Tests for reading intrinsic dimensions from local files."""

import pytest
from PIL import Image

from edge_images import Dimensions, image_source_from_file, probe_dimensions


@pytest.fixture
def png(tmp_path):
    path = tmp_path / "photo.png"
    Image.new("RGB", (120, 80), (200, 10, 10)).save(path)
    return path


def _write_svg(tmp_path, attrs: str):
    path = tmp_path / "logo.svg"
    path.write_text(f'<svg xmlns="http://www.w3.org/2000/svg" {attrs}><rect/></svg>')
    return path


def test_raster(png):
    assert probe_dimensions(png) == Dimensions(120, 80)


def test_svg_attributes(tmp_path):
    path = _write_svg(tmp_path, 'width="100px" height="50" viewBox="0 0 10 5"')
    assert probe_dimensions(path) == Dimensions(100, 50)


def test_svg_viewbox(tmp_path):
    path = _write_svg(tmp_path, 'viewBox="0 0 300 150"')
    assert probe_dimensions(path) == Dimensions(300, 150)


def test_svg_without_size(tmp_path):
    assert probe_dimensions(_write_svg(tmp_path, "")) is None


def test_not_an_image(tmp_path):
    path = tmp_path / "fake.jpg"
    path.write_text("not really a jpeg")
    assert probe_dimensions(path) is None


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        probe_dimensions(tmp_path / "missing.png")


def test_image_source_from_file(png):
    source = image_source_from_file("https://example.com/photo.png", png)
    assert (source.intrinsic_width, source.intrinsic_height) == (120, 80)
    assert source.url == "https://example.com/photo.png"
