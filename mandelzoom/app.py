"""
Main application module for the Mandelbrot visualizer.

Contains:
- AppContext: everything a render needs, built once at startup
- MandelbrotApp: window setup, main loop, click/wheel/keyboard input,
  and handing rendered frames to the pygame display
"""

import os
from datetime import datetime

import pygame

from .compute import warmup_jit
from .palette import get_palette
from .renderer import FrameRenderer, PixelSurface
from .settings import SETTINGS
from .viewport import ViewController


class AppContext:
    """
    Render state shared by the controller and the frame renderer.

    Only the controller's viewport changes after startup (through zoom
    and reset); everything else is read-only.
    """

    def __init__(self, controller, palette, max_iter, smooth=True, fast_path=True):
        if max_iter < 1:
            raise ValueError(f"max_iter must be at least 1, got {max_iter}")
        self.controller = controller
        self.palette = palette
        self.max_iter = max_iter
        self.smooth = smooth
        self.fast_path = fast_path

    @classmethod
    def create(cls, width, height, max_iter, palette=None, smooth=True, fast_path=True,
               fine_zoom=None, coarse_zoom=None):
        """Build a context for a width x height canvas with default view."""
        controller = ViewController(
            width, height,
            fine_zoom=fine_zoom or SETTINGS['fine_zoom'],
            coarse_zoom=coarse_zoom or SETTINGS['coarse_zoom']
        )
        if palette is None:
            palette = get_palette(SETTINGS['palette'], max_iter)
        return cls(controller, palette, max_iter, smooth, fast_path)


class MandelbrotApp:
    """
    Main application class for the Mandelbrot visualizer.

    Handles the pygame window and event loop. Every click re-renders the
    whole frame synchronously.
    """

    # Default configuration
    DEFAULT_WIDTH = SETTINGS['width']
    DEFAULT_HEIGHT = SETTINGS['height']
    DEFAULT_MAX_ITER = SETTINGS['max_iterations']

    CAPTION = "Mandelbrot Set - Click to zoom (Shift: fine, Ctrl: out), R to reset"

    def __init__(self, width=None, height=None, max_iter=None, palette=None,
                 smooth=None, fast_path=None, fine_zoom=None, coarse_zoom=None):
        """
        Initialize the application.

        Args:
            width: Window width in pixels (default 800)
            height: Window height in pixels (default 600)
            max_iter: Maximum iteration count (default 500)
            palette: Palette instance (default: the settings palette, Random)
            smooth: Smooth coloring on/off (default from settings)
            fast_path: Cardioid/bulb short-circuit on/off (default from settings)
            fine_zoom, coarse_zoom: Click zoom factors (default 1.1 / 5.0)
        """
        self.width = width or self.DEFAULT_WIDTH
        self.height = height or self.DEFAULT_HEIGHT
        self.max_iter = max_iter or self.DEFAULT_MAX_ITER

        self.context = AppContext.create(
            self.width, self.height, self.max_iter,
            palette=palette,
            smooth=SETTINGS['smooth'] if smooth is None else smooth,
            fast_path=SETTINGS['fast_path'] if fast_path is None else fast_path,
            fine_zoom=fine_zoom,
            coarse_zoom=coarse_zoom
        )

        # Pygame state (initialized in run())
        self.screen = None
        self.clock = None
        self.current_surface = None

        self.surface = PixelSurface(self.width, self.height, display=self._display)
        self.renderer = FrameRenderer(self.surface)

        self.pending_render = False
        self.running = False

    def run(self):
        """Run the application main loop."""
        self._init_pygame()
        self._warmup_and_initial_render()

        self.running = True
        while self.running:
            self._handle_events()

            if self.pending_render:
                self.pending_render = False
                elapsed = self.renderer.render(self.context)
                pygame.display.set_caption(f"{self.CAPTION} - {elapsed:.0f} ms")

            self._draw()
            self.clock.tick(60)

        pygame.quit()

    def _init_pygame(self):
        """Initialize pygame and create window."""
        pygame.init()
        self.screen = pygame.display.set_mode(
            (self.width, self.height),
            pygame.DOUBLEBUF
        )
        pygame.display.set_caption(self.CAPTION)
        self.clock = pygame.time.Clock()

    def _warmup_and_initial_render(self):
        """Warm up JIT and do initial render."""
        pygame.display.set_caption("Compiling (first run only)...")
        warmup_jit()

        elapsed = self.renderer.render(self.context)
        print(f"Initial render took {elapsed:.1f} ms")
        pygame.display.set_caption(self.CAPTION)

    def _display(self, pixels):
        """Turn an RGBA pixel grid into the surface shown on screen."""
        self.current_surface = pygame.surfarray.make_surface(
            pixels[:, :, :3].swapaxes(0, 1)
        )

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.handle_click(event.pos, pygame.key.get_mods())
            elif event.type == pygame.MOUSEWHEEL:
                self._handle_wheel(event)
            elif event.type == pygame.KEYDOWN:
                self._handle_key(event)

    def handle_click(self, pos, mods=0):
        """
        Zoom on a click at pos.

        Shift picks the fine zoom factor, Ctrl zooms out instead of in.
        The frame is re-rendered on the next loop iteration.
        """
        controller = self.context.controller
        factor = controller.zoom_factor(
            fine=bool(mods & pygame.KMOD_SHIFT),
            invert=bool(mods & pygame.KMOD_CTRL)
        )
        controller.zoom(pos[0], pos[1], factor)

        vp = controller.viewport
        print(f"Location: {vp.center_re} {vp.center_im} {vp.scale}")
        self.pending_render = True

    def _handle_wheel(self, event):
        """Handle mouse wheel: fine zoom in/out at the cursor."""
        mods = pygame.KMOD_SHIFT
        if event.y < 0:
            mods |= pygame.KMOD_CTRL
        self.handle_click(pygame.mouse.get_pos(), mods)

    def _handle_key(self, event):
        """Handle keyboard input."""
        if event.key == pygame.K_r:
            self.context.controller.reset()
            self.pending_render = True
        elif event.key == pygame.K_s:
            self._save_image()
        elif event.key == pygame.K_ESCAPE:
            self.running = False

    def _save_image(self):
        """Save the current frame as a PNG in the working directory."""
        if self.current_surface is None:
            return
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = os.path.join(os.getcwd(), f"mandelbrot_{timestamp}.png")
        pygame.image.save(self.current_surface, filename)
        pygame.display.set_caption(f"Saved: {os.path.basename(filename)} - Mandelbrot Set")
        print(f"Image saved to: {filename}")

    def _draw(self):
        """Draw the current frame."""
        self.screen.fill((0, 0, 0))
        if self.current_surface is not None:
            self.screen.blit(self.current_surface, (0, 0))
        pygame.display.flip()


def run(width=None, height=None, max_iter=None, palette=None, smooth=None,
        fast_path=None, fine_zoom=None, coarse_zoom=None):
    """
    Run the Mandelbrot visualizer.

    Args:
        width: Window width (default 800)
        height: Window height (default 600)
        max_iter: Maximum iterations (default 500)
        palette: Palette instance (default: random)
        smooth, fast_path: Escape evaluator toggles
        fine_zoom, coarse_zoom: Click zoom factors
    """
    app = MandelbrotApp(width, height, max_iter, palette, smooth, fast_path,
                        fine_zoom, coarse_zoom)
    try:
        app.run()
    except KeyboardInterrupt:
        pygame.quit()
