"""
Type definitions used across layers
"""

from enum import IntEnum


class Stone(IntEnum):
    """Content of a single board intersection. Values match the integers stored in a board grid."""

    EMPTY = 0
    BLACK = 1
    WHITE = 2


# Standard Go board. Smaller boards (9x9, 13x13) only need a different size passed around.
DEFAULT_BOARD_SIZE = 19
