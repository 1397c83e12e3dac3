"""
Settings for the Mandelbrot visualizer.

Values come from settings.json next to this file. Missing keys (or a
missing/broken file) fall back to the built-in defaults below.
"""

import json
import os


DEFAULTS = {
    'width': 800,
    'height': 600,
    'max_iterations': 500,
    'fine_zoom': 1.1,     # Shift+click
    'coarse_zoom': 5.0,   # Plain click
    'smooth': True,
    'fast_path': True,
    'palette': 'Random',
    'palettes': {},
}


def load_settings(path=None):
    """
    Load settings from a JSON file, merged over DEFAULTS.

    Args:
        path: JSON file to read (default: settings.json beside this module)

    Returns:
        dict of settings
    """
    if path is None:
        path = os.path.join(os.path.dirname(__file__), 'settings.json')
    settings = dict(DEFAULTS)
    try:
        with open(path, 'r') as f:
            loaded = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"Warning: Could not load settings.json: {e}")
        return settings

    if not isinstance(loaded, dict):
        print(f"Warning: Ignoring settings.json: expected an object, got {type(loaded).__name__}")
        return settings

    settings.update(loaded)
    return settings


# Global settings loaded from JSON
SETTINGS = load_settings()
