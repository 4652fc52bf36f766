#!/usr/bin/env python3
"""
Pre-measured grid cells.
A cell carries its display width so the layout engine never has to re-measure,
which keeps ANSI-coloured contents aligned correctly.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, TextIO

from rich.cells import cell_len
from rich.text import Text


class Alignment(Enum):
    """Side of the cell that stays flush when padding is required"""
    LEFT = 'left'    # padding goes on the right
    RIGHT = 'right'  # padding goes on the left


def display_width(text: str) -> int:
    """Number of terminal columns `text` occupies."""
    return cell_len(text)


def ansi_display_width(text: str) -> int:
    """Display width of `text` with ANSI escape sequences counted as zero columns."""
    return Text.from_ansi(text, end='').cell_len


@dataclass(frozen=True)
class GridCell:
    """A textual label with its display width and alignment.

    `contents` may be anything with a text form; only ``str(contents)`` is
    written. When `width` is omitted it is measured from ``str(contents)``.
    """

    contents: Any
    width: Optional[int] = None
    alignment: Alignment = Alignment.LEFT

    def __post_init__(self):
        if self.width is None:
            object.__setattr__(self, 'width', display_width(str(self.contents)))
        elif self.width < 0:
            raise ValueError(f"Cell width must be non-negative, got {self.width}")
        if not isinstance(self.alignment, Alignment):
            object.__setattr__(self, 'alignment', Alignment(self.alignment))

    @classmethod
    def from_text(cls, text: str, alignment: Alignment = Alignment.LEFT) -> 'GridCell':
        return cls(text, display_width(text), alignment)

    @classmethod
    def from_ansi(cls, text: str, alignment: Alignment = Alignment.LEFT) -> 'GridCell':
        """Build a cell from colourised text, ignoring escape sequences when measuring."""
        return cls(text, ansi_display_width(text), alignment)

    def write(self, target: TextIO, column_width: int) -> None:
        """Write contents padded to `column_width`; wider contents are never truncated."""
        pad_width = column_width - self.width if column_width > self.width else 0

        if pad_width == 0:
            target.write(str(self.contents))
        elif self.alignment == Alignment.LEFT:
            target.write(f"{self.contents}{' ' * pad_width}")
        else:
            target.write(f"{' ' * pad_width}{self.contents}")
