#!/usr/bin/env python3

import csv
import logging
import sys

from .bit_manip import uint_type
from .cli import parse_cli
from .report import BitReport

logger = logging.getLogger(__name__)


def main(argv=None, out=None):
    """Entry point for the `dotbits` command. Returns the exit status."""
    out = out if out is not None else sys.stdout

    # ---- Handle Command-line Arguments ---- #
    parser = parse_cli()
    args = parser.parse_args(argv)

    # ---- Configure Stdout Logging ---- #
    logging.basicConfig(
        # Set based on cli args
        level=args.loglevel.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )

    UIntClass = uint_type(args.type)
    logger.info("Viewing %s value(s) as %s", len(args.values), UIntClass.__name__)

    if args.range is not None:
        start, end = args.range
        if not start < end <= UIntClass.bit_len():
            parser.error(
                f"--range {start} {end}: need START < END <= {UIntClass.bit_len()}"
            )

    reports = []
    for value in args.values:
        try:
            uint = UIntClass(value)
        except ValueError as e:
            parser.error(str(e))
        reports.append(BitReport.from_uint(uint, args.range))
        logger.debug("Report: %s", reports[-1])

    # Drop the range column when no range was asked for
    fields = None
    if args.range is None:
        fields = [name for name in BitReport.csv_header() if name != "range"]

    if args.csv:
        writer = csv.writer(out)
        writer.writerow(BitReport.csv_header(fields))
        for report in reports:
            writer.writerow(report.to_csv(fields))
    else:
        print("\n\n".join(report.to_text(fields) for report in reports), file=out)

    return 0


if __name__ == "__main__":
    sys.exit(main())
