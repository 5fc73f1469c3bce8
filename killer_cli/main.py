"""
Main entry point for the killer cage CLI.

Usage:
    python -m killer_cli [options] CELL_COUNT [TOTAL]

Example:
    python -m killer_cli 3 15
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from killer_core.combinations import KillerCage
from killer_core.config import DEFAULT_MAX_CELL_VALUE
from killer_core.exceptions import KillerCageError
from killer_core.results import CageResults

from . import __version__
from .config_builder import build_cage_config, format_config_summary
from .reporter import (
    export_to_csv,
    print_bounds,
    print_combinations,
    print_digit_analysis,
)


NO_OP_WARNING = (
    "Warning: [TOTAL] was omitted, and neither the -n nor -x options were "
    "provided. This is a no-op. This program will now exit."
)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="killer-cage",
        description="Digit combinations for killer sudoku cages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  killer-cage 2 10
  killer-cage -n -x 4
  killer-cage -c 6 3 12
  killer-cage 3 15 --digits --output cage.csv
        """
    )

    parser.add_argument(
        "cell_count",
        type=int,
        metavar="CELL_COUNT",
        help="Number of cells in the killer cage"
    )
    parser.add_argument(
        "total",
        type=int,
        nargs="?",
        default=None,
        metavar="TOTAL",
        help="When provided, list all combinations of cell values that sum to this total"
    )
    parser.add_argument(
        "-c", "--max-cell-value",
        type=int,
        default=DEFAULT_MAX_CELL_VALUE,
        help=f"Maximum value of a cell in the grid (default: {DEFAULT_MAX_CELL_VALUE})"
    )
    parser.add_argument(
        "-n", "-mN", "--minimum",
        action="store_true",
        help="Output the minimum possible sum for a cage of the given size"
    )
    parser.add_argument(
        "-x", "-mX", "--maximum",
        action="store_true",
        help="Output the maximum possible sum for a cage of the given size"
    )
    parser.add_argument(
        "-d", "--digits",
        action="store_true",
        help="Show required and excluded digits for TOTAL"
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output CSV file path for the combinations of TOTAL"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    logging.debug("Arguments: %s", args)

    if args.total is None and (args.digits or args.output):
        parser.error("--digits and --output require TOTAL")

    try:
        config = build_cage_config(args)
        logging.debug("Cage: %s", format_config_summary(config))
        cage = KillerCage.from_config(config)

        if not args.minimum and not args.maximum and args.total is None:
            print(NO_OP_WARNING)
            return 0

        print_bounds(cage, args.minimum, args.maximum)

        if args.total is not None:
            results = CageResults.from_cage(cage, args.total)
            print_combinations(results)

            if args.digits:
                print_digit_analysis(results)

            if args.output:
                export_to_csv(results, args.output)

        return 0

    except KillerCageError as e:
        logging.error("%s", e)
        return 1
    except KeyboardInterrupt:
        logging.error("Interrupted")
        return 130
    except Exception as e:
        logging.error("%s", e)
        if args.verbose:
            logging.exception("Unexpected error")
        return 1


if __name__ == "__main__":
    sys.exit(main())
