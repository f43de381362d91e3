import sys
import unittest
from unittest import mock

import numpy as np

from fractol.buffer import PixelBuffer
from fractol.color import INTERIOR_COLOR, colorize
from fractol.config import RenderConfig
from fractol.fractals import FractalKind, evaluate
from fractol.pipeline import choose_renderer, make_renderer, render_frame
from fractol.renderers.cpu import render_frame_cpu
from fractol.renderers.jit import iteration_grid, probe_numba, render_frame_jit
from fractol.viewport import pixel_to_complex


class PixelBufferTests(unittest.TestCase):
    def test_shape_and_pixel_access(self):
        buf = PixelBuffer(8, 4)
        self.assertEqual(buf.pixels.shape, (4, 8, 4))
        buf.set_pixel(7, 3, (1, 2, 3, 4))
        self.assertEqual(buf.get_pixel(7, 3), (1, 2, 3, 4))
        self.assertEqual(buf.get_pixel(0, 0), (0, 0, 0, 0))

    def test_rejects_bad_size(self):
        with self.assertRaises(ValueError):
            PixelBuffer(0, 10)

    def test_fill_keeps_storage(self):
        buf = PixelBuffer(3, 2)
        storage = buf.pixels
        buf.fill_from(np.full((2, 3, 4), 9, dtype=np.uint8))
        self.assertIs(buf.pixels, storage)
        self.assertEqual(buf.get_pixel(2, 1), (9, 9, 9, 9))
        with self.assertRaises(ValueError):
            buf.fill_from(np.zeros((3, 2, 4), dtype=np.uint8))


class CpuRendererTests(unittest.TestCase):
    def test_every_pixel_matches_evaluator(self):
        config = RenderConfig(FractalKind.MANDELBROT, 20, zoom=1.3)
        buf = PixelBuffer(12, 9)
        render_frame_cpu(config, buf)
        for x in range(12):
            for y in range(9):
                point = pixel_to_complex(x, y, 12, 9, 1.3)
                self.assertEqual(buf.get_pixel(x, y), colorize(evaluate(config.fractal_kind, point, 20), 20))

    def test_render_is_idempotent(self):
        for kind in FractalKind:
            config = RenderConfig(kind, 25)
            buf = PixelBuffer(16, 16)
            render_frame_cpu(config, buf)
            first = buf.snapshot()
            render_frame_cpu(config, buf)
            np.testing.assert_array_equal(first, buf.pixels)

    def test_every_pixel_is_overwritten(self):
        buf = PixelBuffer(10, 10)
        buf.pixels[...] = 0
        render_frame_cpu(RenderConfig(FractalKind.JULIA, 10), buf)
        self.assertTrue(np.all(buf.pixels[..., 3] == 255))


class JitRendererTests(unittest.TestCase):
    def test_probe_reports_numba(self):
        info = probe_numba()
        self.assertTrue(info["available"])
        self.assertTrue(info["version"])

    def test_matches_cpu_renderer(self):
        for kind in FractalKind:
            for zoom in (1.0, 1.7, 0.4):
                config = RenderConfig(kind, 30, zoom=zoom)
                cpu = PixelBuffer(24, 16)
                jit = PixelBuffer(24, 16)
                render_frame_cpu(config, cpu)
                render_frame_jit(config, jit)
                np.testing.assert_array_equal(cpu.pixels, jit.pixels, err_msg=f"{kind} zoom={zoom}")

    def test_center_of_full_frame_is_interior(self):
        for kind in (FractalKind.MANDELBROT, FractalKind.BURNING_SHIP):
            its = iteration_grid(RenderConfig(kind, 50), 512, 512)
            self.assertEqual(its.shape, (512, 512))
            self.assertEqual(its[256, 256], 50)


class PipelineTests(unittest.TestCase):
    def test_choose_renderer(self):
        self.assertEqual(choose_renderer(renderer="cpu"), "cpu")
        self.assertEqual(choose_renderer(renderer="jit"), "jit")
        self.assertEqual(choose_renderer(renderer="auto"), "jit")
        with self.assertRaises(ValueError):
            choose_renderer(renderer="gpu")

    def test_auto_falls_back_to_cpu_without_numba(self):
        with mock.patch.dict(sys.modules, {"numba": None}):
            self.assertFalse(probe_numba()["available"])
            self.assertEqual(choose_renderer(renderer="auto"), "cpu")

    def test_cpu_renders_without_numba(self):
        config = RenderConfig(FractalKind.MANDELBROT, 10)
        buf = PixelBuffer(8, 8)
        with mock.patch.dict(sys.modules, {"numba": None}):
            render_frame(config, buf, renderer="auto")
        self.assertEqual(buf.get_pixel(4, 4), INTERIOR_COLOR)

    def test_jit_without_numba_raises(self):
        config = RenderConfig(FractalKind.MANDELBROT, 10)
        with mock.patch.dict(sys.modules, {"numba": None}), \
                mock.patch("fractol.renderers.jit._KERNEL", None):
            with self.assertRaises(RuntimeError):
                render_frame_jit(config, PixelBuffer(4, 4))

    def test_render_frame_uses_selected_backend(self):
        config = RenderConfig(FractalKind.MANDELBROT, 10)
        buf = PixelBuffer(4, 4)
        with mock.patch.dict("fractol.pipeline._RENDERERS", {"cpu": mock.Mock()}) as backends:
            render_frame(config, buf, renderer="cpu")
            backends["cpu"].assert_called_once_with(config, buf)

    def test_make_renderer_is_idempotent(self):
        render = make_renderer("auto")
        config = RenderConfig(FractalKind.BURNING_SHIP, 40, zoom=1.2)
        buf = PixelBuffer(32, 32)
        render(config, buf)
        first = buf.snapshot()
        render(config, buf)
        np.testing.assert_array_equal(first, buf.pixels)


if __name__ == "__main__":
    unittest.main()
