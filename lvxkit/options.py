"""Command-line options shared by the recording tools."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Sequence

DEFAULT_SAVE_TIME = 10
"""Seconds of point cloud written to the LVX file when no time is given."""


@dataclass
class ProgramOptions:
    """Settings chosen on the command line."""

    broadcast_codes: list[str] = field(default_factory=list)
    save_log: bool = False
    save_time: int = DEFAULT_SAVE_TIME
    read_extrinsic_from_xml: bool = False


def split_broadcast_codes(text: str) -> list[str]:
    """Split an ``&``-separated list of broadcast codes."""
    return text.split("&")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Connect to devices and record their point cloud."
    )
    parser.add_argument(
        "-c", "--code", help="Register device broadcast code; join several with '&'"
    )
    parser.add_argument(
        "-l", "--log", action="store_true", help="Save the log file"
    )
    parser.add_argument(
        "-t",
        "--time",
        type=int,
        help="Time to save point cloud to the lvx file",
    )
    parser.add_argument(
        "-p",
        "--param",
        action="store_true",
        help="Get the extrinsic parameter from extrinsic.xml file",
    )
    return parser


def parse_options(argv: Sequence[str] | None = None) -> ProgramOptions:
    """Read the program options; invalid input exits with a usage message."""
    args = _build_parser().parse_args(sys.argv[1:] if argv is None else list(argv))
    options = ProgramOptions()
    if args.code is not None:
        options.broadcast_codes = split_broadcast_codes(args.code)
    options.save_log = args.log
    if args.time is not None:
        options.save_time = args.time
    options.read_extrinsic_from_xml = args.param
    return options