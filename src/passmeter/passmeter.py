#!/usr/bin/env python3
"""
passmeter - Password Strength Meter
Terminal front end: classifies each entered password and draws the meter.
"""

import argparse
import os
import sys
from getpass import getpass
from typing import List, Optional

import pyperclip

from .config import DEFAULT_CONFIG_FILE, MeterOptions, load_options
from .errors import ClipboardError, PassmeterError
from .logger import meter_logger
from .meter import MeterState, build_state

SEGMENT_WIDTH = 10
FILLED = "█"
UNFILLED = "░"
RESET = "\x1b[0m"


def print_banner():
    """Display application banner."""
    banner = """
    ╔═══════════════════════════════════════╗
    ║          P A S S M E T E R            ║
    ║     Password Strength Meter v1.0      ║
    ╚═══════════════════════════════════════╝
    """
    print(banner)


def ansi_color(hex_color: str) -> str:
    """Truecolor foreground escape for a ``#RRGGBB`` color."""
    value = hex_color.lstrip('#')
    if len(value) != 6:
        return ""
    try:
        r, g, b = (int(value[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return ""
    return f"\x1b[38;2;{r};{g};{b}m"


def render_meter(state: MeterState, use_color: bool = True) -> str:
    """Render the three-segment bar, tier label and error line."""
    parts = []
    for segment in state.segments:
        if segment is None:
            parts.append(UNFILLED * SEGMENT_WIDTH)
        elif use_color and ansi_color(segment):
            parts.append(ansi_color(segment) + FILLED * SEGMENT_WIDTH + RESET)
        else:
            parts.append(FILLED * SEGMENT_WIDTH)

    line = f"[{' '.join(parts)}] {state.percent:>3}%"
    if state.label:
        line += f"  {state.label}"
    if state.error_text:
        line += f"\n  ✗ {state.error_text}"
    return line


def strip_line_terminator(text: str) -> str:
    """Drop one trailing newline left by copying a whole line."""
    for terminator in ("\r\n", "\n", "\r"):
        if text.endswith(terminator):
            return text[:-len(terminator)]
    return text


def read_clipboard() -> str:
    """Return the clipboard text."""
    try:
        text = pyperclip.paste()
    except pyperclip.PyperclipException as e:
        meter_logger.log_clipboard_read(False)
        raise ClipboardError(f"Clipboard unavailable: {e}") from e
    meter_logger.log_clipboard_read(True)
    return strip_line_terminator(text or "")


def evaluate(password: str, options: MeterOptions, use_color: bool = True) -> MeterState:
    """Classify, log and print one password."""
    state = build_state(password, options)
    meter_logger.log_evaluation(state.label, len(password), options.is_custom)
    print(render_meter(state, use_color))
    return state


def interactive_menu(options: MeterOptions, use_color: bool = True):
    """Prompt for passwords until an empty line is entered."""
    print("Enter a password to check it. Press Enter on an empty line to quit.")
    while True:
        password = getpass("\nPassword: ")
        if not password:
            print("Goodbye!")
            break
        evaluate(password, options, use_color)


def add_common_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Options shared by the terminal and desktop front ends."""
    parser.add_argument(
        "--config",
        help=f"JSON options file (default: ./{DEFAULT_CONFIG_FILE} if present)",
    )
    parser.add_argument("--log-file", help="append evaluation events to this file")
    return parser


def build_parser() -> argparse.ArgumentParser:
    parser = add_common_arguments(argparse.ArgumentParser(
        prog="passmeter",
        description="Check password strength as you type it.",
    ))
    parser.add_argument(
        "--clipboard", action="store_true",
        help="check the password currently on the clipboard and exit",
    )
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colors")
    return parser


def resolve_options(config_path: Optional[str]) -> MeterOptions:
    """Load options from ``config_path`` or the default file when present."""
    if config_path is None:
        if not os.path.exists(DEFAULT_CONFIG_FILE):
            return MeterOptions()
        config_path = DEFAULT_CONFIG_FILE
    try:
        options = load_options(config_path)
    except PassmeterError as e:
        meter_logger.log_config_error(str(e))
        raise
    meter_logger.log_config_loaded(config_path)
    return options


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)

    if args.log_file:
        meter_logger.add_log_file(args.log_file)

    use_color = not args.no_color and sys.stdout.isatty()

    try:
        options = resolve_options(args.config)
        if args.clipboard:
            evaluate(read_clipboard(), options, use_color)
            return 0
        print_banner()
        interactive_menu(options, use_color)
    except PassmeterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye!")
    finally:
        meter_logger.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
