"""
Bit-board utilities for Connect Four.

A bit-board is a Python int used as a bitmap of one player's pieces.
Cells are laid out column-major with one spare "sentinel" bit above the
top of every column:

    .  .  .  .  .  .  .   <- sentinel row, never occupied
    5 12 19 26 33 40 47
    4 11 18 25 32 39 46
    3 10 17 24 31 38 45
    2  9 16 23 30 37 44
    1  8 15 22 29 36 43
    0  7 14 21 28 35 42

The sentinel row keeps shifted lines from wrapping into the next column
and makes "column is full" a single mask test.
"""

from __future__ import annotations

from typing import List

import numpy as np

BOARD_WIDTH = 7
BOARD_HEIGHT = 6
COLUMN_BITS = BOARD_HEIGHT + 1

ALL_LOCATIONS = (1 << COLUMN_BITS * BOARD_WIDTH) - 1
FIRST_COLUMN = (1 << COLUMN_BITS) - 1
BOTTOM_ROW = ALL_LOCATIONS // FIRST_COLUMN
ABOVE_TOP_ROW = BOTTOM_ROW << BOARD_HEIGHT
PLAYABLE = ALL_LOCATIONS ^ ABOVE_TOP_ROW

# Shift per step along each line direction
VERTICAL = 1
DIAGONAL_DOWN = BOARD_HEIGHT       # up-left to down-right
HORIZONTAL = BOARD_HEIGHT + 1
DIAGONAL_UP = BOARD_HEIGHT + 2     # down-left to up-right

DIRECTIONS = (VERTICAL, DIAGONAL_DOWN, HORIZONTAL, DIAGONAL_UP)


def count_ones(value: int) -> int:
    """Number of set bits in a non-negative int."""
    return bin(value).count("1")


def cell_bit(column: int, row: int) -> int:
    """Bit index of (column, row), row 0 being the bottom."""
    return column * COLUMN_BITS + row


def base_bit(column: int) -> int:
    """Bit index of the bottom cell of a column."""
    return column * COLUMN_BITS


def has_four_in_a_row(bit_board: int) -> bool:
    """
    Return True if the board holds four pieces in a line in any direction.

    Shifting by one step and AND-ing leaves pairs; doing it again with twice
    the step leaves runs of four.
    """
    for step in DIRECTIONS:
        pairs = bit_board & (bit_board >> step)
        if pairs & (pairs >> 2 * step):
            return True
    return False


def column_heights(occupied: int) -> List[int]:
    """
    Return, per column, the bit index of the lowest empty cell.

    A full column reports the index of its sentinel bit.
    """
    heights = []
    for column in range(BOARD_WIDTH):
        height = base_bit(column)
        while occupied & (1 << height):
            height += 1
        heights.append(height)
    return heights


def is_full(height: int) -> bool:
    """True if a column whose lowest empty bit is height has no room left."""
    return ((1 << height) & ABOVE_TOP_ROW) != 0


def to_array(bit_board_1: int, bit_board_2: int) -> np.ndarray:
    """
    Expand two bit-boards into an int8 grid of shape (height, width).

    0 = empty, 1 = first player, 2 = second player. Row 0 is the bottom row.
    """
    grid = np.zeros((BOARD_HEIGHT, BOARD_WIDTH), dtype=np.int8)
    for column in range(BOARD_WIDTH):
        for row in range(BOARD_HEIGHT):
            mask = 1 << cell_bit(column, row)
            if bit_board_1 & mask:
                grid[row, column] = 1
            elif bit_board_2 & mask:
                grid[row, column] = 2
    return grid
