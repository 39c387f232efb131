"""Constants and presets for dragcanvas."""

from typing import Any, Dict


DEFAULT_AREA_WIDTH = 500
DEFAULT_AREA_HEIGHT = 500

SMOKE_ENV_VAR = "DRAGCANVAS_SMOKE"
WINDOW_TITLE = "dragcanvas"


SHAPE_PRESETS: Dict[str, Dict[str, Any]] = {
    "red_square": {
        "shape": "square",
        "color": "#ff0000",
        "size": 100.0,
        "x": 100.0,
        "y": 100.0,
    },
    "blue_square": {
        "shape": "square",
        "color": "#0000ff",
        "size": 100.0,
        "x": 300.0,
        "y": 100.0,
    },
    "green_circle": {
        "shape": "circle",
        "color": "#00ff00",
        "size": 50.0,
        "x": 250.0,
        "y": 350.0,
    },
}
