"""
Palette tests: cyclic interpolation and wrap-around, gradient endpoints,
construction errors, presets and random palettes.
"""

import numpy as np
import pytest

from mandelzoom.palette import (
    CyclicPalette,
    GradientPalette,
    PaletteError,
    get_palette,
    list_palette_names,
    random_palette,
)


def test_empty_cyclic_palette_is_rejected():
    with pytest.raises(PaletteError):
        CyclicPalette([])


def test_palette_error_is_value_error():
    assert issubclass(PaletteError, ValueError)


@pytest.mark.parametrize("colors", [
    [(1, 2)],
    [(1, 2, 3, 4)],
    [(0, 0, 256)],
    [(-1, 0, 0)],
    [("red", 0, 0)],
])
def test_bad_cyclic_colors_are_rejected(colors):
    with pytest.raises(PaletteError):
        CyclicPalette(colors)


def test_bad_gradient_colors_are_rejected():
    with pytest.raises(PaletteError):
        GradientPalette((0.0, 0.0, 2.0), (1.0, 1.0, 1.0))
    with pytest.raises(PaletteError):
        GradientPalette((0.0, 0.0), (1.0, 1.0, 1.0))


def test_cyclic_wraps_around():
    """Index N maps to the same color as index 0"""
    palette = CyclicPalette([(10, 20, 30), (40, 50, 60), (70, 80, 90)])
    assert palette.color_for(3.0, 100) == palette.color_for(0.0, 100)
    assert palette.color_for(0.0, 100) == (10, 20, 30)
    assert palette.color_for(4, 100) == (40, 50, 60)


def test_cyclic_interpolates_between_neighbours():
    palette = CyclicPalette([(0, 0, 0), (100, 200, 40)])
    assert palette.color_for(0.5, 10) == (50, 100, 20)
    # From the second color back to the first
    assert palette.color_for(1.25, 10) == (75, 150, 30)


def test_single_color_cyclic_palette():
    palette = CyclicPalette([(5, 6, 7)])
    assert palette.color_for(0.0, 10) == (5, 6, 7)
    assert palette.color_for(7.5, 10) == (5, 6, 7)


def test_gradient_endpoints():
    palette = GradientPalette((0.0, 0.5, 1.0), (1.0, 0.25, 0.0))
    assert palette.color_for(0, 100) == (0, 127, 255)
    assert palette.color_for(100, 100) == (255, 63, 0)


def test_gradient_midpoint():
    palette = GradientPalette((0.0, 0.0, 0.0), (1.0, 1.0, 1.0))
    assert palette.color_for(50, 100) == (127, 127, 127)


def test_colors_are_read_only():
    palette = CyclicPalette([(1, 2, 3)])
    with pytest.raises(ValueError):
        palette.colors[0, 0] = 9


def test_palette_equality():
    assert CyclicPalette([(1, 2, 3)]) == CyclicPalette([(1, 2, 3)])
    assert CyclicPalette([(1, 2, 3)]) != CyclicPalette([(3, 2, 1)])
    assert GradientPalette((0, 0, 0), (1, 1, 1)) != CyclicPalette([(0, 0, 0), (1, 1, 1)])


def test_random_palette_is_reproducible_with_seed():
    a = random_palette(500, seed=42)
    b = random_palette(500, seed=42)
    assert a == b
    assert 1 <= len(a) <= 500


def test_random_palette_channels():
    palette = random_palette(50, seed=7)
    assert np.all(palette.colors == np.floor(palette.colors))
    assert palette.colors.min() >= 0
    assert palette.colors.max() <= 254


def test_random_palette_never_empty():
    for seed in range(20):
        assert len(random_palette(1, seed=seed)) == 1


def test_presets():
    names = list_palette_names()
    assert 'Random' in names
    assert 'Classic' in names
    for name in names:
        palette = get_palette(name, max_iter=100, seed=1)
        r, g, b = palette.color_for(1.5, 100)
        assert 0 <= r <= 255 and 0 <= g <= 255 and 0 <= b <= 255


def test_presets_from_settings_file():
    """settings.json adds extra named palettes"""
    assert isinstance(get_palette('Moss'), GradientPalette)
    assert isinstance(get_palette('Neon'), CyclicPalette)


def test_unknown_palette_raises_key_error():
    with pytest.raises(KeyError):
        get_palette('No Such Palette')
