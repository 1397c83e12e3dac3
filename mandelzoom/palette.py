"""
Palette definitions for Mandelbrot visualization.

A palette turns an escape index into an RGB color. There are two kinds:

- CyclicPalette: an ordered list of colors (channels 0-255). The integer
  part of the index picks a color, wrapping around the list, and the
  fractional part blends it toward the next one.
- GradientPalette: two endpoint colors given as channel fractions in [0, 1],
  blended linearly over [0, max_iter].

Both store their colors as a read-only float64 array so the JIT-compiled
coloring kernel in compute.py can use them directly.

To add a new preset:
1. Define a create_palette_xxx() function that returns a Palette
2. Add it to the PALETTES dictionary at the bottom of this file
"""

from functools import partial

import numpy as np

from .compute import KIND_CYCLIC, KIND_GRADIENT, palette_color
from .settings import SETTINGS


class PaletteError(ValueError):
    """Raised when a palette is constructed from invalid colors."""


class Palette:
    """
    Base class holding the tagged palette representation.

    Attributes:
        kind: KIND_CYCLIC or KIND_GRADIENT
        colors: Nx3 float64 array (read-only)
    """

    kind = None

    def __init__(self, colors):
        self.colors = colors
        self.colors.setflags(write=False)

    def color_for(self, index, max_iter):
        """
        Get the color for an escape index.

        Does not special-case points inside the set; the frame renderer
        draws those black.

        Returns:
            (r, g, b) tuple of ints in [0, 255]
        """
        return palette_color(self.kind, self.colors, float(index), max_iter)

    def __len__(self):
        return self.colors.shape[0]

    def __eq__(self, other):
        if not isinstance(other, Palette):
            return NotImplemented
        return self.kind == other.kind and np.array_equal(self.colors, other.colors)

    def __hash__(self):
        return hash((self.kind, self.colors.tobytes()))


class CyclicPalette(Palette):
    """Ordered colors, cyclically interpolated by fractional index."""

    kind = KIND_CYCLIC

    def __init__(self, colors):
        super().__init__(_as_color_array(colors, 255, "cyclic"))

    def __repr__(self):
        return f"CyclicPalette({len(self)} colors)"


class GradientPalette(Palette):
    """Linear blend from start to end over [0, max_iter]."""

    kind = KIND_GRADIENT

    def __init__(self, start, end):
        super().__init__(_as_color_array([start, end], 1, "gradient"))

    @property
    def start(self):
        return tuple(self.colors[0])

    @property
    def end(self):
        return tuple(self.colors[1])

    def __repr__(self):
        return f"GradientPalette(start={self.start}, end={self.end})"


def _as_color_array(colors, limit, what):
    """Validate a list of RGB triples and pack it into a float64 array."""
    try:
        arr = np.array(colors, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise PaletteError(f"{what} palette colors must be numeric RGB triples: {e}") from e

    if arr.size == 0:
        raise PaletteError(f"{what} palette needs at least one color")
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise PaletteError(f"{what} palette colors must be RGB triples, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)) or arr.min() < 0 or arr.max() > limit:
        raise PaletteError(f"{what} palette channels must lie in [0, {limit}]")
    return arr


def random_palette(max_iter, seed=None):
    """
    Random cyclic palette.

    Picks between 1 and max_iter colors, each channel floor(255 * random).

    Args:
        max_iter: Upper bound on the number of colors
        seed: Seed for numpy's random Generator (None = fresh entropy)
    """
    rng = np.random.default_rng(seed)
    count = int(rng.integers(1, max(int(max_iter), 1) + 1))
    colors = np.floor(255 * rng.random((count, 3)))
    return CyclicPalette(colors)


def create_palette_classic():
    """
    Classic palette: the familiar 16-step blue/orange cycle.

    Short cycle, so bands repeat quickly and show fine structure.
    """
    return CyclicPalette([
        (66, 30, 15), (25, 7, 26), (9, 1, 47), (4, 4, 73),
        (0, 7, 100), (12, 44, 138), (24, 82, 177), (57, 125, 209),
        (134, 181, 229), (211, 236, 248), (241, 233, 191), (248, 201, 95),
        (255, 170, 0), (204, 128, 0), (153, 87, 0), (106, 52, 3),
    ])


def create_palette_fire():
    """Fire palette: dark red -> yellow, cycling every four iterations."""
    return CyclicPalette([
        (32, 0, 0), (160, 16, 0), (255, 128, 0), (255, 230, 90),
    ])


def create_palette_ocean():
    """Ocean gradient: deep blue -> white."""
    return GradientPalette((0.0, 0.05, 0.25), (1.0, 1.0, 1.0))


def create_palette_dusk():
    """Dusk gradient: purple -> orange."""
    return GradientPalette((0.25, 0.0, 0.5), (1.0, 0.6, 0.0))


def create_palette_grayscale():
    """Grayscale gradient: black -> white."""
    return GradientPalette((0.0, 0.0, 0.0), (1.0, 1.0, 1.0))


def _palette_from_settings(entry):
    """Build a palette from a settings.json entry."""
    if entry.get('kind') == 'gradient':
        return GradientPalette(entry['start'], entry['end'])
    return CyclicPalette(entry['colors'])


# Registry of all available palettes.
# Keys are display names, values are factory functions.
# 'Random' takes the iteration budget and an optional seed.
PALETTES = {
    'Classic': create_palette_classic,
    'Fire': create_palette_fire,
    'Ocean': create_palette_ocean,
    'Dusk': create_palette_dusk,
    'Grayscale': create_palette_grayscale,
}

for _name, _entry in SETTINGS.get('palettes', {}).items():
    PALETTES[_name] = partial(_palette_from_settings, _entry)


def get_palette(name, max_iter=None, seed=None):
    """
    Get a palette by name.

    Args:
        name: Key from PALETTES, or 'Random'
        max_iter: Iteration budget (only used by 'Random')
        seed: Random seed (only used by 'Random')

    Returns:
        Palette instance

    Raises:
        KeyError if name not found
    """
    if name == 'Random':
        return random_palette(max_iter or SETTINGS['max_iterations'], seed)
    return PALETTES[name]()


def list_palette_names():
    """Get list of available palette names."""
    return list(PALETTES.keys()) + ['Random']
