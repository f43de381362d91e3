from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from fractol.fractals import FractalKind

WIDTH = 512
HEIGHT = 512

RENDERERS = ("auto", "cpu", "jit")

DEFAULTS: Dict[str, Any] = {
    "start_zoom": 1.0,
    "zoom_step": 0.1,
    "min_zoom": 0.1,
    "fps": 60,
    "title": "Fractol",
    "renderer": "auto",
}


class UsageError(ValueError):
    pass


@dataclass
class RenderConfig:
    fractal_kind: FractalKind
    max_iterations: int
    zoom: float = 1.0


def parse_fractal_kind(name: str) -> FractalKind:
    try:
        return FractalKind(name)
    except ValueError:
        raise UsageError(
            f"Invalid fractal type {name!r}. Use: {', '.join(FractalKind.names())}"
        ) from None


def parse_max_iterations(value: str) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        raise UsageError(f"Max iterations must be a positive number, got {value!r}") from None
    if n <= 0:
        raise UsageError(f"Max iterations must be a positive number, got {value!r}")
    return n


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    if not config_path:
        return dict(DEFAULTS)
    with open(config_path, "r", encoding="utf-8") as f:
        cfg = json.load(f)
    if not isinstance(cfg, dict):
        raise ValueError("Config JSON must be an object.")
    out = dict(DEFAULTS)
    out.update(cfg)
    return out


def _number(cfg: Dict[str, Any], key: str, cast):
    value = cfg[key]
    if isinstance(value, bool):
        raise ValueError(f"{key} must be a number, got {value!r}")
    try:
        if not math.isfinite(float(value)):
            raise ValueError(f"{key} must be finite, got {value!r}")
        return cast(value)
    except (TypeError, OverflowError):
        raise ValueError(f"{key} must be a number, got {value!r}") from None


def normalise_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    for r in DEFAULTS:
        if r not in cfg:
            raise ValueError(f"Missing config field: {r}")

    start_zoom = _number(cfg, "start_zoom", float)
    zoom_step = _number(cfg, "zoom_step", float)
    min_zoom = _number(cfg, "min_zoom", float)
    fps = _number(cfg, "fps", int)
    if start_zoom <= 0 or zoom_step <= 0 or min_zoom <= 0 or fps <= 0:
        raise ValueError("start_zoom/zoom_step/min_zoom/fps must be positive.")
    if min_zoom > start_zoom:
        raise ValueError("min_zoom must not exceed start_zoom.")

    renderer = str(cfg["renderer"])
    if renderer not in RENDERERS:
        raise ValueError(f"renderer must be one of: {', '.join(RENDERERS)}")

    out = dict(cfg)
    out["start_zoom"] = start_zoom
    out["zoom_step"] = zoom_step
    out["min_zoom"] = min_zoom
    out["fps"] = fps
    out["title"] = str(cfg["title"])
    out["renderer"] = renderer
    return out
