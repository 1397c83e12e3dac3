"""
Frame rendering for the Mandelbrot visualizer.

render_frame() runs the whole per-pixel pipeline (map -> escape -> color)
for one frame and returns an RGBA grid. FrameRenderer wraps it with a
reusable PixelSurface and render timing for the interactive app.
"""

import time

import numpy as np

from .compute import compute_escape_grid, apply_palette


def render_frame(viewport, palette, max_iter, canvas_width, canvas_height,
                 smooth=True, fast_path=True):
    """
    Render one frame of the Mandelbrot set.

    Args:
        viewport: Viewport to render
        palette: Palette used for escaping points (inside points are black)
        max_iter: Iteration budget
        canvas_width, canvas_height: Output size in pixels
        smooth: Use smooth (fractional) escape indices
        fast_path: Skip iteration for the main cardioid and period-2 bulb

    Returns:
        (canvas_height, canvas_width, 4) uint8 array of RGBA pixels, row-major.
        Empty if either dimension is 0.
    """
    out = np.zeros((canvas_height, canvas_width, 4), dtype=np.uint8)
    if canvas_width == 0 or canvas_height == 0:
        return out

    data = compute_escape_grid(
        viewport.center_re, viewport.center_im,
        viewport.re_size, viewport.im_size,
        canvas_width, canvas_height, max_iter,
        smooth, fast_path
    )
    apply_palette(data, max_iter, palette.kind, palette.colors, out)
    return out


class PixelSurface:
    """
    A width x height RGBA pixel buffer handed to a display after each frame.

    Attributes:
        pixels: (height, width, 4) uint8 array
        display: Callable taking the pixel array, called by present()
    """

    def __init__(self, width, height, display=None):
        self.display = display
        self.resize(width, height)

    def resize(self, width, height):
        """Reallocate the buffer for a new size (contents are cleared)."""
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 4), dtype=np.uint8)

    def put_pixel(self, x, y, r, g, b):
        """Write one opaque pixel."""
        self.pixels[y, x] = (r, g, b, 255)

    def blit(self, grid):
        """Copy a whole rendered frame into the buffer."""
        if grid.shape != self.pixels.shape:
            raise ValueError(
                f"frame shape {grid.shape} does not match surface {self.pixels.shape}"
            )
        self.pixels[:] = grid

    def present(self):
        """Hand the buffer to the display, if one is attached."""
        if self.display is not None:
            self.display(self.pixels)


class FrameRenderer:
    """
    Renders an application context into a PixelSurface.

    Usage:
        renderer = FrameRenderer(surface)
        renderer.render(context)   # renders, then surface.present()
        print(renderer.last_render_ms)
    """

    def __init__(self, surface):
        self.surface = surface
        self.last_render_ms = None

    def render(self, context):
        """
        Render the context's current view and present it.

        Returns:
            Render time in milliseconds
        """
        controller = context.controller
        if (controller.canvas_width, controller.canvas_height) != \
                (self.surface.width, self.surface.height):
            self.surface.resize(controller.canvas_width, controller.canvas_height)

        start = time.perf_counter()
        grid = render_frame(
            controller.viewport, context.palette, context.max_iter,
            controller.canvas_width, controller.canvas_height,
            context.smooth, context.fast_path
        )
        self.surface.blit(grid)
        self.last_render_ms = (time.perf_counter() - start) * 1000.0

        self.surface.present()
        return self.last_render_ms
