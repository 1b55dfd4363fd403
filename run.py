#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four game
"""

import argparse
import sys

from connect4_gui.debug import debug, DebugLevel
from connect4_gui.interfaces.gui import ConnectFourApp, DEFAULT_FONT_SIZE, DEFAULT_FPS
from connect4_gui.game.state import GameState


def configure_debug(args):
    """Configure logging from args.debug / args.debug_level / args.log_file."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)

    if args.log_file:
        debug.configure(log_file=args.log_file)


def build_parser():
    parser = argparse.ArgumentParser(
        description='Two-player Connect Four',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
    Click anywhere to start, click a column to drop a disc, press Q to quit.

    Examples:

    # Play with the default font at 60 fps
    python run.py

    # Use a custom TTF font
    python run.py --font fonts/iosevka.ttf --font_size 28

    # Log every move to a file
    python run.py --debug_level debug --log_file connect4.log
    """
    )

    parser.add_argument('--debug',
        action='store_true',
        help='Enable debug mode (equivalent to --debug_level debug)')
    parser.add_argument('--debug_level',
        choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
        default='warning',
        help='Set debug level: none (silent), error, warning, info, debug, trace (most verbose)')
    parser.add_argument('--log_file',
        type=str,
        default=None,
        help='Also write log output to this file')

    display_group = parser.add_argument_group('Display options')
    display_group.add_argument('--font',
        type=str,
        default=None,
        help='Path to a TTF font file (default: pygame built-in font)')
    display_group.add_argument('--font_size',
        type=int,
        default=DEFAULT_FONT_SIZE,
        help=f'Font size in pixels (default: {DEFAULT_FONT_SIZE})')
    display_group.add_argument('--fps',
        type=int,
        default=DEFAULT_FPS,
        help=f'Frame rate cap (default: {DEFAULT_FPS})')

    return parser


def main(argv=None):
    """Main entry point for the Connect Four game."""
    args = build_parser().parse_args(argv)
    configure_debug(args)

    app = ConnectFourApp(
        state=GameState(),
        font_path=args.font,
        font_size=args.font_size,
        fps=args.fps,
    )
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
