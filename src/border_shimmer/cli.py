"""
Command-line flags

Flags override the config file only when set (non-empty / positive).
"""

import argparse
from typing import List, Optional

from border_shimmer import __version__
from border_shimmer.models.enums import LogLevel


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="border-shimmer",
        description="Pulse JankyBorders window border colors through a color cycle.",
    )
    parser.add_argument(
        "--colors",
        default="",
        help="Comma-separated list of colors in #RRGGBBAA format",
    )
    parser.add_argument(
        "--inactive_colors",
        default="",
        help="Comma-separated list of inactive colors in #RRGGBBAA format",
    )
    parser.add_argument(
        "--secs",
        type=float,
        default=0,
        help="Number of seconds between each color",
    )
    parser.add_argument(
        "--fps",
        type=float,
        default=0,
        help="Frames per second (number of intervening colors per second)",
    )
    parser.add_argument(
        "--width",
        type=float,
        default=0,
        help="Width of the border",
    )
    parser.add_argument(
        "--glow",
        action="store_true",
        help="Wrap active colors in glow()",
    )
    parser.add_argument(
        "--inactive_glow",
        action="store_true",
        help="Wrap inactive colors in glow()",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: $XDG_CONFIG_HOME/border-shimmer/config.yaml)",
    )
    parser.add_argument(
        "--command",
        default="",
        help="Border command to run for each frame (default: borders)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log frames instead of running the border command",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=0,
        help="Stop after this many frames (default: run until interrupted)",
    )
    parser.add_argument(
        "--log-level",
        default=LogLevel.INFO.name,
        choices=[level.name for level in LogLevel],
        type=str.upper,
        help="Minimum log level",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors in log output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
