#!/usr/bin/env python3
"""
Command-line front end for lsgrid.
Prints labels from the command line or stdin in columns.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from rich.console import Console
from tabulate import tabulate

from .cell import Alignment, GridCell
from .grid import Display, Grid
from .layout import Direction

logger = logging.getLogger('lsgrid.cli')


def build_cells(labels: List[str], ansi: bool = False,
                alignment: Alignment = Alignment.LEFT) -> List[GridCell]:
    """Measure every label once; ANSI input is measured without its escape codes."""
    if ansi:
        return [GridCell.from_ansi(label, alignment) for label in labels]
    return [GridCell.from_text(label, alignment) for label in labels]


def resolve_width(width_arg: Optional[int]) -> int:
    """Display width from the flag, then $LSGRID_WIDTH, then the terminal."""
    if width_arg is not None:
        return width_arg

    env_width = os.environ.get('LSGRID_WIDTH')
    if env_width:
        try:
            return int(env_width)
        except ValueError:
            raise ValueError(f"LSGRID_WIDTH must be an integer, got {env_width!r}") from None

    return Console().width


def layout(grid: Grid, width: int, columns: Optional[int] = None) -> Display:
    """Fit the grid, falling back to one label per line when it cannot fit."""
    if columns is not None:
        return grid.fit_into_columns(columns)

    display = grid.fit_into_width(width)
    if display is None:
        logger.warning(f"Labels do not fit in {width} columns, printing one per line")
        return grid.fit_into_columns(1)
    return display


def explain(display: Display) -> str:
    """Describe the chosen geometry as a table."""
    rows = [[index, width] for index, width in enumerate(display.column_widths)]
    summary = f"{display.num_rows} rows x {display.num_columns} columns, {display.width} wide"
    return summary + '\n' + tabulate(rows, headers=['column', 'width'], tablefmt='simple')


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = argparse.ArgumentParser(description='Print labels in columns, like ls')

    parser.add_argument('labels', nargs='*',
                        help='Labels to print (default: read one per line from stdin)')

    # Geometry
    parser.add_argument('-w', '--width', type=int, default=None,
                        help='Display width (default: $LSGRID_WIDTH or the terminal width)')
    parser.add_argument('-n', '--columns', type=int, default=None,
                        help='Use exactly this many columns instead of fitting the width')
    parser.add_argument('-x', '--across', action='store_true',
                        help='Fill rows left to right instead of columns top to bottom')
    parser.add_argument('-s', '--spacing', type=int, default=2,
                        help='Spaces between columns')

    # Cells
    parser.add_argument('-r', '--right', action='store_true',
                        help='Right-align labels')
    parser.add_argument('--ansi', action='store_true',
                        help='Input contains ANSI colour codes; do not count them as width')

    # Output
    parser.add_argument('--explain', action='store_true',
                        help='Also print the chosen rows, columns and column widths')

    # Logging
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--debuglog', type=str,
                        help='Debug log file')

    args = parser.parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.debug else logging.WARNING
    log_format = '%(asctime)s - %(levelname)s - %(message)s'

    if args.debuglog:
        logging.basicConfig(
            level=log_level,
            format=log_format,
            filename=args.debuglog,
            filemode='w'
        )
    else:
        logging.basicConfig(
            level=log_level,
            format=log_format
        )

    if args.columns is not None and args.columns < 1:
        print("Error: --columns must be at least 1", file=sys.stderr)
        return 1
    if args.spacing < 0:
        print("Error: --spacing must not be negative", file=sys.stderr)
        return 1

    try:
        width = resolve_width(args.width)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    labels = args.labels
    if not labels:
        labels = [line.rstrip('\n') for line in sys.stdin]
        labels = [label for label in labels if label.strip()]

    alignment = Alignment.RIGHT if args.right else Alignment.LEFT
    direction = Direction.LEFT_TO_RIGHT if args.across else Direction.TOP_TO_BOTTOM

    cells = build_cells(labels, ansi=args.ansi, alignment=alignment)
    grid = Grid(args.spacing, direction, cells)
    logger.debug(f"Laying out {len(cells)} labels in width {width}")

    display = layout(grid, width, args.columns)
    display.write(sys.stdout)

    if args.explain:
        print(explain(display))

    return 0


if __name__ == '__main__':
    sys.exit(main())
