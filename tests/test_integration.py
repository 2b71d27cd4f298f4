"""Integration tests for the end-to-end rendering pipeline.

This module tests the complete pipeline from scene creation through final
image output, including the command-line driver. Tests are designed to be fast
(low resolution, few samples) while still exercising the full pipeline.
"""

from __future__ import annotations

import io

import numpy as np
import pytest
from PIL import Image as PILImage

from examples.render_three_spheres import main
from pathtracer.camera.pinhole import PinholeCamera
from pathtracer.core.render import RenderSettings, render_image
from pathtracer.core.vec3 import Color, Vec3
from pathtracer.geometry.sphere import Sphere
from pathtracer.materials import Lambertian
from pathtracer.preview.export import write_ppm
from pathtracer.scene.default_scene import build_default_scene, create_default_scene
from pathtracer.scene.intersection import Scene


def render_ppm(seed: int) -> str:
    """Render a single gray sphere and return the PPM text."""
    scene = Scene([Sphere(Vec3(0.0, 0.0, -1.0), 0.5, Lambertian(Color(0.5, 0.5, 0.5)))])
    camera = PinholeCamera.from_viewport(aspect_ratio=2.0)
    settings = RenderSettings(image_width=16, aspect_ratio=2.0, samples_per_pixel=1, max_depth=1)

    image = render_image(scene, camera, settings, np.random.default_rng(seed))
    stream = io.StringIO()
    write_ppm(image, stream)
    return stream.getvalue()


class TestPipeline:
    """End-to-end tests through the library API."""

    def test_same_seed_identical_output(self):
        """Test identical seeds give byte-identical output."""
        assert render_ppm(7) == render_ppm(7)

    def test_depth_one_sphere_is_black_on_sky(self):
        """Test a sphere with no bounce budget left renders black against the sky."""
        lines = render_ppm(7).splitlines()
        pixels = lines[3:]
        assert "0 0 0" in pixels
        assert any(p != "0 0 0" for p in pixels)

    def test_default_scene_render(self):
        scene, camera = create_default_scene(aspect_ratio=2.0)
        settings = RenderSettings(image_width=16, aspect_ratio=2.0, samples_per_pixel=2, max_depth=8)
        image = render_image(scene, camera, settings, np.random.default_rng(3))

        assert image.shape == (8, 16, 3)
        assert np.all(np.isfinite(image))
        assert np.all(image >= 0.0)
        assert np.all(image <= 1.0 + 1e-12)


class TestCommandLine:
    """Tests for the render_three_spheres driver."""

    def test_ppm_to_stdout(self, capsys):
        assert main(["--width", "8", "--samples", "1", "--max-depth", "3", "--seed", "1", "--quiet"]) == 0
        out = capsys.readouterr().out.splitlines()
        # Default 16:9 aspect: int(8 / 1.777...) = 4 rows
        assert out[:3] == ["P3", "8 4", "255"]
        assert len(out) == 3 + 8 * 4

    def test_quiet_suppresses_progress(self, capsys):
        main(["--width", "8", "--samples", "1", "--max-depth", "3", "--seed", "1", "--quiet"])
        assert capsys.readouterr().err == ""

    def test_progress_to_stderr(self, capsys):
        main(["--width", "8", "--samples", "1", "--max-depth", "3", "--seed", "1"])
        err = capsys.readouterr().err
        assert "Scanlines remaining: 3" in err
        assert "Scanlines remaining: 0" in err
        assert "Operation complete." in err

    def test_same_seed_same_stdout(self, capsys):
        args = ["--width", "8", "--samples", "2", "--max-depth", "5", "--seed", "4", "--quiet"]
        main(args)
        first = capsys.readouterr().out
        main(args)
        assert capsys.readouterr().out == first

    def test_png_output(self, tmp_path):
        path = tmp_path / "spheres.png"
        args = ["--width", "8", "--samples", "1", "--max-depth", "3", "--seed", "1", "--quiet"]
        assert main(args + ["--output", str(path)]) == 0
        with PILImage.open(path) as img:
            assert img.size == (8, 4)

    def test_scene_from_json(self, tmp_path, capsys):
        path = tmp_path / "scene.json"
        build_default_scene().save_json(path)
        args = ["--width", "8", "--samples", "1", "--max-depth", "3", "--seed", "1", "--quiet"]
        assert main(args + ["--scene", str(path)]) == 0
        assert capsys.readouterr().out.startswith("P3\n8 4\n255\n")

    @pytest.mark.parametrize(
        "args",
        [
            ["--width", "1"],
            ["--samples", "0"],
            ["--width", "8", "--samples", "1", "--output", "image.jpg"],
        ],
    )
    def test_errors_exit_with_one(self, args, capsys, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main(args + ["--quiet"]) == 1
        assert capsys.readouterr().err.startswith("Error: ")
