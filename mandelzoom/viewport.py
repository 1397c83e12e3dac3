"""
View state for the Mandelbrot visualizer.

Viewport holds where we are looking in the complex plane; ViewController
ties a viewport to a canvas size and applies click zooms.
"""

# Initial view: classic overview of the whole set
DEFAULT_CENTER = (-0.75, 0.0)
DEFAULT_EXTENTS = (2.6, 2.4)  # real, imaginary


class Viewport:
    """
    A logical view of the complex plane.

    Attributes:
        center_re, center_im: Point shown at the center of the canvas
        scale: Zoom scale (1.0 = initial view, smaller = deeper)
        base_re_size, base_im_size: Extents of the view at scale 1.0
    """

    def __init__(self, center_re, center_im, base_re_size, base_im_size, scale=1.0):
        if scale <= 0:
            raise ValueError(f"scale must be positive, got {scale}")
        self.center_re = center_re
        self.center_im = center_im
        self.base_re_size = base_re_size
        self.base_im_size = base_im_size
        self.scale = scale

    @classmethod
    def for_canvas(cls, canvas_width, canvas_height,
                   center=DEFAULT_CENTER, extents=DEFAULT_EXTENTS):
        """
        Build the default viewport for a canvas.

        Widens whichever axis is proportionally too small for the canvas
        aspect ratio, so pixels stay square.
        """
        re_size, im_size = extents
        if canvas_width > 0 and canvas_height > 0:
            canvas_ratio = canvas_width / canvas_height
            if canvas_ratio < re_size / im_size:
                im_size = re_size / canvas_ratio
            else:
                re_size = im_size * canvas_ratio
        return cls(center[0], center[1], re_size, im_size)

    @property
    def re_size(self):
        return self.base_re_size * self.scale

    @property
    def im_size(self):
        return self.base_im_size * self.scale

    def copy(self):
        return Viewport(self.center_re, self.center_im,
                        self.base_re_size, self.base_im_size, self.scale)

    def __repr__(self):
        return (f"Viewport(center=({self.center_re!r}, {self.center_im!r}), "
                f"scale={self.scale!r})")


def map_pixel(px, py, viewport, canvas_width, canvas_height):
    """Convert a canvas pixel to a point (re, im) in the complex plane."""
    re_size = viewport.re_size
    im_size = viewport.im_size
    re = viewport.center_re - re_size / 2 + (px / canvas_width) * re_size
    im = viewport.center_im - im_size / 2 + (py / canvas_height) * im_size
    return re, im


class ViewController:
    """
    Owns the viewport for one canvas and updates it on clicks.

    Usage:
        controller = ViewController(800, 600)
        controller.zoom(x, y, controller.zoom_factor(fine=shift, invert=ctrl))
    """

    def __init__(self, canvas_width, canvas_height, fine_zoom=1.1, coarse_zoom=5.0):
        if fine_zoom <= 0 or coarse_zoom <= 0:
            raise ValueError("zoom factors must be positive")
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self.fine_zoom = fine_zoom
        self.coarse_zoom = coarse_zoom
        self.viewport = Viewport.for_canvas(canvas_width, canvas_height)

    def zoom(self, px, py, factor):
        """
        Recentre on pixel (px, py), then divide the scale by factor.

        factor > 1 zooms in, factor < 1 zooms out. The recentring uses the
        view size from before the zoom.
        """
        if factor <= 0:
            raise ValueError(f"zoom factor must be positive, got {factor}")
        vp = self.viewport
        re_size = vp.re_size
        im_size = vp.im_size
        vp.center_re += -re_size / 2 + (px / self.canvas_width) * re_size
        vp.center_im += -im_size / 2 + (py / self.canvas_height) * im_size
        vp.scale /= factor

    def zoom_factor(self, fine=False, invert=False):
        """Pick the fine or coarse factor; invert turns it into a zoom out."""
        factor = self.fine_zoom if fine else self.coarse_zoom
        if invert:
            factor = 1.0 / factor
        return factor

    def map_pixel(self, px, py):
        return map_pixel(px, py, self.viewport, self.canvas_width, self.canvas_height)

    def reset(self):
        """Go back to the default view for this canvas."""
        self.viewport = Viewport.for_canvas(self.canvas_width, self.canvas_height)
