"""
Mandelbrot Set Zoom Viewer Package

An interactive, click-to-zoom Mandelbrot set viewer using Pygame for
display and Numba for JIT-compiled computation.

Quick Start:
    from mandelzoom import run
    run()

Or from command line:
    python -m mandelzoom

Package Structure:
    - compute.py: JIT-compiled escape-time and coloring functions
    - palette.py: Cyclic and gradient palettes, named presets
    - viewport.py: Complex-plane mapping and click zoom
    - renderer.py: Frame rendering into a pixel surface
    - settings.py: Defaults and settings.json loading
    - app.py: Main application and event loop

Controls:
    - Click: Zoom in 5x, centered on the clicked point
    - Shift+Click: Zoom in 1.1x
    - Ctrl+Click: Zoom out instead of in
    - Scroll: Fine zoom in/out
    - R: Reset to default view
    - S: Save the current frame as PNG
    - ESC: Quit
"""

from .app import run, MandelbrotApp, AppContext
from .compute import escape
from .palette import (
    PALETTES,
    CyclicPalette,
    GradientPalette,
    Palette,
    PaletteError,
    get_palette,
    list_palette_names,
    random_palette,
)
from .renderer import FrameRenderer, PixelSurface, render_frame
from .viewport import ViewController, Viewport, map_pixel

__version__ = "1.0.0"
__all__ = [
    "run",
    "MandelbrotApp",
    "AppContext",
    "escape",
    "map_pixel",
    "Viewport",
    "ViewController",
    "Palette",
    "CyclicPalette",
    "GradientPalette",
    "PaletteError",
    "PALETTES",
    "get_palette",
    "list_palette_names",
    "random_palette",
    "render_frame",
    "FrameRenderer",
    "PixelSurface",
]
