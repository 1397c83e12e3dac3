"""
Application tests: context construction and click handling.

Only exercises the state changes; no window is opened.
"""

import pygame
import pytest

from mandelzoom.app import AppContext, MandelbrotApp
from mandelzoom.palette import CyclicPalette, GradientPalette


PALETTE = GradientPalette((0.0, 0.0, 0.0), (1.0, 1.0, 1.0))


def make_app():
    return MandelbrotApp(200, 150, 50, palette=PALETTE)


def test_context_rejects_empty_budget():
    with pytest.raises(ValueError):
        AppContext.create(100, 100, 0)


def test_context_defaults():
    context = AppContext.create(100, 80, 64)
    assert isinstance(context.palette, CyclicPalette)
    assert 1 <= len(context.palette) <= 64
    assert context.smooth and context.fast_path
    assert context.controller.zoom_factor() == 5.0
    assert context.controller.zoom_factor(fine=True) == 1.1


def test_app_uses_given_settings():
    app = MandelbrotApp(200, 150, 50, palette=PALETTE, smooth=False, fast_path=False,
                        fine_zoom=2.0, coarse_zoom=10.0)
    context = app.context
    assert (context.controller.canvas_width, context.controller.canvas_height) == (200, 150)
    assert context.max_iter == 50
    assert context.palette is PALETTE
    assert not context.smooth
    assert not context.fast_path
    assert context.controller.zoom_factor() == 10.0


def test_app_defaults_from_settings():
    app = MandelbrotApp()
    assert (app.width, app.height, app.max_iter) == (800, 600, 500)


def test_plain_click_zooms_in_coarse(capsys):
    app = make_app()
    app.handle_click((100, 75))
    assert app.context.controller.viewport.scale == pytest.approx(1 / 5.0)
    assert app.pending_render
    assert "Location:" in capsys.readouterr().out


def test_shift_click_zooms_in_fine():
    app = make_app()
    app.handle_click((100, 75), pygame.KMOD_LSHIFT)
    assert app.context.controller.viewport.scale == pytest.approx(1 / 1.1)


def test_ctrl_click_zooms_out():
    app = make_app()
    app.handle_click((100, 75), pygame.KMOD_LCTRL)
    assert app.context.controller.viewport.scale == pytest.approx(5.0)


def test_shift_ctrl_click_zooms_out_fine():
    app = make_app()
    app.handle_click((100, 75), pygame.KMOD_SHIFT | pygame.KMOD_CTRL)
    assert app.context.controller.viewport.scale == pytest.approx(1.1)


def test_click_recentres_on_clicked_pixel():
    app = make_app()
    target = app.context.controller.map_pixel(20, 130)
    app.handle_click((20, 130))
    vp = app.context.controller.viewport
    assert (vp.center_re, vp.center_im) == pytest.approx(target)


def test_display_callback_builds_surface():
    pygame.init()
    app = make_app()
    app.renderer.render(app.context)
    assert app.current_surface is not None
    assert app.current_surface.get_size() == (200, 150)
