"""Tests for raster export."""

import pytest
from PIL import Image

from sprite_editor.models.grid_model import PixelGrid
from sprite_editor.services.export_service import ExportService


@pytest.fixture
def service():
    return ExportService()


class TestToImage:
    @pytest.mark.parametrize("size", [8, 16, 128])
    def test_one_pixel_per_cell(self, service, size):
        assert service.to_image(PixelGrid(size)).size == (size, size)

    def test_empty_png_is_fully_transparent(self, service):
        image = service.to_image(PixelGrid(16), "png")
        assert image.mode == "RGBA"
        assert image.getchannel("A").getextrema() == (0, 0)

    @pytest.mark.parametrize("fmt", ["jpg", "bmp", "gif"])
    def test_formats_without_alpha_use_background(self, service, fmt):
        image = service.to_image(PixelGrid(8), fmt)
        assert image.mode == "RGB"
        assert image.getpixel((0, 0)) == (255, 255, 255)

    def test_painted_cells_are_opaque(self, service):
        grid = PixelGrid(8)
        grid.set(1, 2, (10, 20, 30))
        image = service.to_image(grid, "png")
        assert image.getpixel((1, 2)) == (10, 20, 30, 255)
        assert image.getpixel((2, 1)) == (0, 0, 0, 0)

    def test_painted_cells_over_background(self, service):
        grid = PixelGrid(8)
        grid.set(0, 0, (255, 0, 0))
        image = service.to_image(grid, "bmp")
        assert image.getpixel((0, 0)) == (255, 0, 0)

    def test_unknown_format(self, service):
        with pytest.raises(ValueError):
            service.to_image(PixelGrid(8), "tiff")


class TestExport:
    def test_writes_named_file(self, service, tmp_path):
        grid = PixelGrid(8)
        grid.set(3, 3, (0, 128, 0))
        path = service.export(grid, "png", "hero", tmp_path)
        assert path == tmp_path / "hero.png"
        with Image.open(path) as img:
            assert img.size == (8, 8)
            assert img.convert("RGBA").getpixel((3, 3)) == (0, 128, 0, 255)

    @pytest.mark.parametrize("fmt", ["png", "jpg", "bmp", "gif"])
    def test_every_format_round_trips_size(self, service, tmp_path, fmt):
        path = service.export(PixelGrid(16), fmt, "sprite", tmp_path)
        assert path.suffix == f".{fmt}"
        with Image.open(path) as img:
            assert img.size == (16, 16)

    def test_blank_filename_falls_back_to_default(self, service):
        assert service.build_filename("  ", "png") == "sprite.png"

    def test_missing_directory_raises_oserror(self, service, tmp_path):
        with pytest.raises(OSError):
            service.export(PixelGrid(8), "png", "x", tmp_path / "nope")
