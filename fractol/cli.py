from __future__ import annotations

import argparse
import logging
from typing import NoReturn, Optional

from fractol.config import (
    HEIGHT,
    RENDERERS,
    WIDTH,
    RenderConfig,
    UsageError,
    load_config,
    normalise_config,
    parse_fractal_kind,
    parse_max_iterations,
)
from fractol.controller import ZoomController
from fractol.display.pygame_window import DisplayError, PygameWindow
from fractol.fractals import FractalKind
from fractol.pipeline import make_renderer
from fractol.util.logging_setup import configure_logging, get_logger

class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)

def build_arg_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(prog="fractol", description="Interactive escape-time fractal viewer (UP/DOWN to zoom, ESC to quit).")
    p.add_argument("fractal_type", type=str, help=f"Fractal to render: {', '.join(FractalKind.names())}.")
    p.add_argument("max_iterations", type=str, help="Iteration cap per pixel (positive integer).")
    p.add_argument("--config", type=str, default=None, help="Path to viewer settings JSON.")
    p.add_argument("--renderer", type=str, default=None, choices=list(RENDERERS), help="Renderer selection (overrides config).")
    p.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG","INFO","WARNING","ERROR"], help="Log level.")
    p.add_argument("--log-file", type=str, default="", help="Log file path (rotating). Empty disables file logging.")
    return p

def main(argv: Optional[list] = None) -> int:
    parser = build_arg_parser()
    try:
        args = parser.parse_args(argv)
        kind = parse_fractal_kind(args.fractal_type)
        max_iter = parse_max_iterations(args.max_iterations)
        cfg = normalise_config(load_config(args.config))
    except (ValueError, OSError) as e:
        print(parser.format_usage(), end="")
        print(f"Error: {e}")
        print(f"Fractal types: {', '.join(FractalKind.names())}")
        return 1

    if args.renderer:
        cfg["renderer"] = args.renderer

    log_level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level=log_level, console=True, log_file=args.log_file or None)
    logger = get_logger()

    config = RenderConfig(fractal_kind=kind, max_iterations=max_iter, zoom=cfg["start_zoom"])
    render = make_renderer(cfg["renderer"])
    logger.info("Starting kind=%s max_iter=%s zoom=%s renderer=%s",
                kind.value, max_iter, config.zoom, cfg["renderer"])

    try:
        window = PygameWindow.create(WIDTH, HEIGHT, cfg["title"], fps=cfg["fps"])
    except DisplayError as e:
        logger.error("%s", e)
        print(e)
        return 1

    try:
        buffer = window.create_image_buffer(WIDTH, HEIGHT)
        window.attach(buffer, 0, 0)
    except DisplayError as e:
        logger.error("%s", e)
        print(e)
        window.close()
        window.terminate()
        return 1

    render(config, buffer)

    controller = ZoomController(window, config, buffer, render,
                                zoom_step=cfg["zoom_step"], min_zoom=cfg["min_zoom"])
    window.register_per_frame_callback(controller.on_tick)

    try:
        window.run_event_loop()
    finally:
        window.terminate()
    logger.info("Window closed at zoom=%s", config.zoom)
    return 0
