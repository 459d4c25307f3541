#!/usr/bin/env python3
import argparse

from .bit_manip import uint_registry

# Command-line interface for `dotbits` / `python -m dotbits`. Prints the bit
# views of one or more integers.


def valid_value(value):
    """
    Validates that the passed value is a non-negative integer literal.
    """
    try:
        ivalue = int(value, 0)  # Automatically detects base (e.g., hex)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid integer: {value}")

    if ivalue < 0:
        raise argparse.ArgumentTypeError(
            f"Got: {value}, only unsigned values have a bit view."
        )
    return ivalue


def valid_position(value):
    """
    Validates a bit position used for --range.
    """
    try:
        ivalue = int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid bit position: {value}")

    if ivalue < 0:
        raise argparse.ArgumentTypeError(f"Bit position must be >= 0, but got: {value}")
    return ivalue


def parse_cli():
    """Parses commandline args (using argparse) for the dotbits inspector."""

    parser = argparse.ArgumentParser(
        prog="dotbits",
        description="Show the bit views of fixed-width unsigned integers.\n"
        "Bit positions are little-endian: position 0 is the least significant bit.",
    )

    # Values to inspect
    parser.add_argument(
        "values",
        nargs="+",
        type=valid_value,
        help="Integers to inspect. Accepts 0b, 0o and 0x prefixes.",
    )

    # Width of the view
    parser.add_argument(
        "-t",
        "--type",
        default="u8",
        choices=list(uint_registry),
        help="Integer type to view the values as, default=u8",
    )

    # (Optional) Bit range to extract
    parser.add_argument(
        "-r",
        "--range",
        nargs=2,
        type=valid_position,
        metavar=("START", "END"),
        help="Extract bits [START, END) from every value.",
    )

    parser.add_argument(
        "--csv",
        action="store_true",
        help="Write CSV to stdout instead of text.",
    )

    parser.add_argument(
        "-log",
        "--loglevel",
        default="warning",
        choices=["notset", "debug", "info", "warning", "error", "critical"],
        help="Provide logging level. Example --loglevel debug, default=warning",
    )
    return parser

