"""
Allow running the package directly: python -m mandelzoom
"""
from argparse import ArgumentParser

from .app import run
from .palette import get_palette, list_palette_names
from .settings import SETTINGS


def build_parser():
    parser = ArgumentParser(prog='mandelzoom',
                            description='Interactive Mandelbrot set viewer. Click to zoom.')

    parser.add_argument('--width', type=int, default=SETTINGS['width'],
                        help='window width in pixels')
    parser.add_argument('--height', type=int, default=SETTINGS['height'],
                        help='window height in pixels')
    parser.add_argument('--max-iter', type=int, dest='max_iter', metavar='MAX_ITER',
                        default=SETTINGS['max_iterations'],
                        help='maximum number of iterations per point')
    parser.add_argument('--palette', type=str, default=SETTINGS['palette'],
                        help='palette name, one of: ' + ', '.join(list_palette_names()))
    parser.add_argument('--seed', type=int, default=None,
                        help='seed for the Random palette')
    parser.add_argument('--no-smooth', dest='smooth', action='store_false',
                        default=SETTINGS['smooth'],
                        help='banded coloring from raw iteration counts')
    parser.add_argument('--no-fast-path', dest='fast_path', action='store_false',
                        default=SETTINGS['fast_path'],
                        help='iterate points in the main cardioid and period-2 bulb too')
    parser.add_argument('--fine-zoom', type=float, dest='fine_zoom',
                        default=SETTINGS['fine_zoom'], help='zoom factor for Shift+click')
    parser.add_argument('--coarse-zoom', type=float, dest='coarse_zoom',
                        default=SETTINGS['coarse_zoom'], help='zoom factor for a plain click')

    return parser


def parse_args(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.width < 1 or args.height < 1:
        parser.error('--width and --height must be positive')
    if args.max_iter < 1:
        parser.error('--max-iter must be at least 1')
    if args.fine_zoom <= 0 or args.coarse_zoom <= 0:
        parser.error('zoom factors must be positive')
    try:
        args.palette = get_palette(args.palette, args.max_iter, args.seed)
    except KeyError:
        parser.error(f'unknown palette {args.palette!r}; choose from: '
                     + ', '.join(list_palette_names()))
    return args


def main(argv=None):
    args = parse_args(argv)

    run(args.width, args.height, args.max_iter, args.palette, args.smooth,
        args.fast_path, args.fine_zoom, args.coarse_zoom)


if __name__ == "__main__":
    main()
