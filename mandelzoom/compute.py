"""
Mandelbrot computation functions using Numba JIT compilation.

This module contains all the performance-critical computation functions
that are JIT-compiled for speed. These functions handle:
- Escape-time evaluation for a single point (smoothed or banded)
- Fast-path membership tests for the main cardioid and period-2 bulb
- Whole-frame escape grids, one row per parallel task
- Palette application (cyclic or gradient) onto an RGBA buffer

Palette kinds:
- 0: cyclic list of colors, interpolated piecewise
- 1: two-color gradient, interpolated over [0, max_iter]
"""

import math

import numpy as np
from numba import jit, prange


# Palette kinds
KIND_CYCLIC = 0
KIND_GRADIENT = 1

# Escape thresholds on |z|^2
SMOOTH_BAILOUT = 256.0  # Large enough for the log-log smoothing formula
BANDED_BAILOUT = 4.0

LN2 = math.log(2.0)


@jit(nopython=True, cache=True)
def in_main_cardioid(re, im):
    """Check whether c = re + im*i lies inside the main cardioid."""
    q = (re - 0.25) * (re - 0.25) + im * im
    return q * (q + (re - 0.25)) < 0.25 * im * im


@jit(nopython=True, cache=True)
def in_period2_bulb(re, im):
    """Check whether c = re + im*i lies inside the period-2 bulb."""
    return (re + 1.0) * (re + 1.0) + im * im < 1.0 / 16.0


@jit(nopython=True, cache=True)
def escape(re, im, max_iter, smooth=True, fast_path=True):
    """
    Compute the escape index of c = re + im*i.

    Iterates z <- z^2 + c from z = 0 until |z|^2 passes the bailout or the
    iteration budget runs out.

    Args:
        re, im: Real and imaginary parts of c
        max_iter: Iteration budget
        smooth: Return a fractional iteration count (bailout 256) instead
            of the raw count (bailout 4)
        fast_path: Short-circuit points in the main cardioid and the
            period-2 bulb

    Returns:
        float in [0, max_iter]. Exactly max_iter when the point is taken
        to be inside the set.
    """
    if fast_path:
        if in_main_cardioid(re, im) or in_period2_bulb(re, im):
            return float(max_iter)

    bailout = SMOOTH_BAILOUT if smooth else BANDED_BAILOUT

    i = 0
    x = 0.0
    y = 0.0
    while x * x + y * y <= bailout and i < max_iter:
        xtmp = x * x - y * y + re
        ytmp = 2.0 * x * y + im

        # Fixed point: the orbit will never move again
        if x == xtmp and y == ytmp:
            return float(max_iter)

        x = xtmp
        y = ytmp
        i += 1

    if i >= max_iter:
        return float(max_iter)
    if not smooth:
        return float(i)

    log_zn = math.log(x * x + y * y) / 2.0
    nu = math.log(log_zn / LN2) / LN2
    return max(i + 1 - nu, 0.0)


@jit(nopython=True, parallel=True, cache=True)
def compute_escape_grid(center_re, center_im, re_size, im_size, width, height,
                        max_iter, smooth=True, fast_path=True):
    """
    Compute escape indices for every pixel of a width x height canvas.

    Each pixel is mapped to the complex plane the same way as
    viewport.map_pixel, so the grid agrees exactly with per-point calls.

    Args:
        center_re, center_im: View center in the complex plane
        re_size, im_size: Current view extents
        width, height: Canvas dimensions in pixels
        max_iter: Iteration budget
        smooth, fast_path: Passed through to escape()

    Returns:
        2D numpy array (height, width) of float64 escape indices.
    """
    result = np.zeros((height, width), dtype=np.float64)

    for py in prange(height):
        im = center_im - im_size / 2.0 + (py / height) * im_size
        for px in range(width):
            re = center_re - re_size / 2.0 + (px / width) * re_size
            result[py, px] = escape(re, im, max_iter, smooth, fast_path)

    return result


@jit(nopython=True, cache=True)
def palette_color(kind, colors, index, max_iter):
    """
    Map an escape index to an RGB triple.

    Args:
        kind: KIND_CYCLIC or KIND_GRADIENT
        colors: Nx3 float64 array. Channels in [0, 255] for cyclic
            palettes, a (start, end) pair of [0, 1] fractions for gradients
        index: Escape index
        max_iter: Iteration budget the index was computed with

    Returns:
        (r, g, b) ints in [0, 255]
    """
    if kind == KIND_GRADIENT:
        t = index / max_iter
        r = math.floor(255.0 * (t * (colors[1, 0] - colors[0, 0]) + colors[0, 0]))
        g = math.floor(255.0 * (t * (colors[1, 1] - colors[0, 1]) + colors[0, 1]))
        b = math.floor(255.0 * (t * (colors[1, 2] - colors[0, 2]) + colors[0, 2]))
        return int(r), int(g), int(b)

    num_colors = colors.shape[0]
    n = int(math.floor(index))
    f = index - math.floor(index)
    c1 = n % num_colors
    c2 = (n + 1) % num_colors
    r = math.floor(colors[c1, 0] - f * (colors[c1, 0] - colors[c2, 0]))
    g = math.floor(colors[c1, 1] - f * (colors[c1, 1] - colors[c2, 1]))
    b = math.floor(colors[c1, 2] - f * (colors[c1, 2] - colors[c2, 2]))
    return int(r), int(g), int(b)


@jit(nopython=True, parallel=True, cache=True)
def apply_palette(data, max_iter, kind, colors, out):
    """
    Color a grid of escape indices into an RGBA buffer.

    Points with index >= max_iter are inside the set and drawn black.
    Alpha is always 255.

    Args:
        data: 2D array of escape indices from compute_escape_grid
        max_iter: Iteration budget
        kind, colors: Palette description (see palette_color)
        out: Output (height, width, 4) uint8 array, modified in place
    """
    height, width = data.shape

    for py in prange(height):
        for px in range(width):
            val = data[py, px]
            if val >= max_iter:
                out[py, px, 0] = 0
                out[py, px, 1] = 0
                out[py, px, 2] = 0
            else:
                r, g, b = palette_color(kind, colors, val, max_iter)
                out[py, px, 0] = r
                out[py, px, 1] = g
                out[py, px, 2] = b
            out[py, px, 3] = 255


def warmup_jit():
    """
    Warm up JIT compilation with small dummy arrays.

    Call this once at startup to pre-compile the Numba functions,
    avoiding a delay on the first actual render.
    """
    data = compute_escape_grid(-0.75, 0.0, 2.6, 2.4, 4, 4, 10)
    out = np.zeros((4, 4, 4), dtype=np.uint8)
    apply_palette(data, 10, KIND_CYCLIC, np.zeros((1, 3), dtype=np.float64), out)
    apply_palette(data, 10, KIND_GRADIENT, np.zeros((2, 3), dtype=np.float64), out)
