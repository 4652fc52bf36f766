#!/usr/bin/env python3
"""
lsgrid - lay out short labels in columns, the way `ls` does.
"""

from .cell import Alignment, GridCell, display_width, ansi_display_width
from .layout import Dimensions, Direction, div_ceil
from .grid import Grid, Display

__all__ = [
    'Alignment',
    'GridCell',
    'display_width',
    'ansi_display_width',
    'Dimensions',
    'Direction',
    'div_ceil',
    'Grid',
    'Display',
]

__version__ = '1.0'
