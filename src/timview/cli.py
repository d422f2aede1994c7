from typing import List, Optional
import argparse
import os
import sys
from . import utils, terminal
from .config import Settings
from .image import view
from .kernels import Kernel
from .slideshow import play
from .typealiases import TimviewException


BANNER = r"""
  _____ ___ __  ____   ___
 |_   _|_ _|  \/  \ \ / (_)_____ __ __
   | |  | || |\/| |\ V /| / -_) V  V /
   |_| |___|_|  |_| \_/ |_\___|\_/\_/

Terminal
IMage
VIEWer

small program for viewing images (png, jpg) in terminal by using ANSI escape symbols
"""

DEFAULT_COLUMNS = 100


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='timview', description=BANNER, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('path', help='an image file, or a directory to browse with the arrow keys')
    parser.add_argument(
        '-r', '--ratio', type=float, default=0.5,
        help='share of the terminal width used by the image. Min = 0.1, Max = 1 (default: 0.5)')
    parser.add_argument(
        '-s', '--samples', type=int, default=2,
        help='samples count for smoothing the output image. Min = 2, Max = 16 (default: 2)')
    parser.add_argument(
        '-k', '--kernel', choices=Kernel.names(), default=Kernel.MITCHELL_NETRAVALI.value,
        help='interpolation kernel (default: mitchell)')
    parser.add_argument(
        '-w', '--width', type=int, default=None,
        help='terminal width in characters (default: detected)')
    parser.add_argument('--nowarn', action='store_true', help='disable WARN messages')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings(args.ratio, args.samples, args.kernel, args.nowarn)
    _warn = utils.conditional_print(settings.nowarn)
    stdout = sys.stdout

    if not terminal.enable_colored_output(stdout):
        print('ERROR: colored output not supported', file=sys.stderr)
        return 1

    if not terminal.is_terminal(stdout):
        _warn('WARN: not in terminal')

    columns = args.width
    if columns is None:
        bounds = terminal.size(stdout)
        if bounds is None:
            _warn(f'WARN: could not get terminal bounds. Width set to {DEFAULT_COLUMNS} symbols')
            columns = DEFAULT_COLUMNS
        else:
            columns = bounds[0]
    if columns <= 0:
        print(f'ERROR: terminal width must be positive, got {columns}', file=sys.stderr)
        return 1

    try:
        if os.path.isdir(args.path):
            play(args.path, columns, settings, sys.stdin, stdout)
        else:
            stdout.write(view(args.path, columns, settings))
            stdout.flush()
    except TimviewException as e:
        print(f'ERROR: {e}', file=sys.stderr)
        return 1
    return 0
