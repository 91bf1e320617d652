#!/usr/bin/env python3
"""
run.py - Main entry point for the Four-in-a-Row game
"""

import argparse

from fourinarow import config
from fourinarow.debug import debug, DebugLevel

# --- Utility Functions ---

def configure_debug(args):
    """Configure debug level based on args.debug, args.debug_level and config."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level or config.DEBUG_LEVEL)

    log_file = args.log_file or config.LOG_FILE
    if log_file:
        debug.configure(log_file=log_file)

# --- Command Handlers ---

def handle_play_command(args):
    """Handle the 'play' command: two players at one terminal."""
    from fourinarow.interfaces.cli import SimpleCLI

    configure_debug(args)
    cli = SimpleCLI(p1_color=args.p1_color, p2_color=args.p2_color)
    try:
        cli.play_game()
    except KeyboardInterrupt:
        print("\nGame interrupted.")

def handle_web_command(args):
    """Handle the 'web' command: serve the browser page."""
    from fourinarow.interfaces.web import create_app

    configure_debug(args)
    app = create_app()
    host = args.host or config.HOST
    port = args.port or config.PORT
    print(f"Serving Four in a Row on http://{host}:{port}/")
    app.run(host=host, port=port, debug=args.debug)

# --- Main Entry Point ---

def add_common_arguments(parser):
    parser.add_argument('--debug',
        action='store_true',
        help='Enable debug mode (equivalent to --debug_level debug)')
    parser.add_argument('--debug_level',
        choices=[level.name.lower() for level in DebugLevel],
        default=None,
        help=f'Set debug level (default from FOURINAROW_DEBUG_LEVEL: {config.DEBUG_LEVEL})')
    parser.add_argument('--log_file',
        type=str,
        default=None,
        help='Also write log messages to this file')

def main(argv=None):
    """Main entry point for the Four-in-a-Row game."""
    parser = argparse.ArgumentParser(
        description='Two-player Four in a Row',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
    Examples:

    # Play in the terminal with the default colors
    python run.py play

    # Pick the colors
    python run.py play --p1-color orange --p2-color purple

    # Serve the browser page on port 8000
    python run.py web --port 8000
    """
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    play_parser = subparsers.add_parser('play',
        help='Play in the terminal',
        description='Two players take turns at one keyboard')
    play_parser.add_argument('--p1-color',
        default=None,
        help=f'Color for player 1 (default: {config.DEFAULT_P1_COLOR})')
    play_parser.add_argument('--p2-color',
        default=None,
        help=f'Color for player 2 (default: {config.DEFAULT_P2_COLOR})')
    add_common_arguments(play_parser)

    web_parser = subparsers.add_parser('web',
        help='Serve the browser page',
        description='Run the Flask server for the browser game')
    web_parser.add_argument('--host',
        default=None,
        help=f'Interface to bind (default: {config.HOST})')
    web_parser.add_argument('--port',
        type=int,
        default=None,
        help=f'Port to listen on (default: {config.PORT})')
    add_common_arguments(web_parser)

    args = parser.parse_args(argv)
    if args.command == 'play':
        handle_play_command(args)
    elif args.command == 'web':
        handle_web_command(args)
    else:
        parser.print_help()

if __name__ == "__main__":
    main()
