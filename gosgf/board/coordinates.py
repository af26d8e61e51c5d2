"""
Mapping between screen pixels and board coordinates.
----

Three flavours live here:

* to_board_coordinates / to_screen_coordinates: the app's historical helpers. They read ``board_size`` in two
  different ways (number of cells in the first, pixel size of one cell in the second), so they are NOT each
  other's inverse. Kept as-is for callers that depend on the old numbers, with explicit errors instead of
  division by zero.
* BoardGeometry: cells on a square board of a given pixel extent. Both directions derive the cell size the same way.
* ViewGeometry: intersections of a Go board drawn centred inside a view, with a small margin around the grid.
"""

import math
from typing import Optional, Self

from pydantic import BaseModel, ConfigDict, field_validator

from gosgf.core.exceptions import CoordinateError
from gosgf.core.shared_types import DEFAULT_BOARD_SIZE

Point = tuple[int, int]
PixelPoint = tuple[float, float]

# Fraction of the shorter view side left empty around the grid
VIEW_MARGIN_RATIO = 0.02

# Go boards skip "I" to avoid confusion with "J"
COLUMN_LETTERS = "ABCDEFGHJKLMNOPQRST"


def _check_board_size(board_size: int) -> None:
    if board_size <= 0:
        raise CoordinateError(f"board_size must be positive, got {board_size}.")


def _check_finite(*values: float) -> None:
    if not all(math.isfinite(value) for value in values):
        raise CoordinateError(f"Coordinates must be finite numbers, got {values}.")


# --- Legacy helpers ---
def to_board_coordinates(screen_x: float, screen_y: float, board_size: int) -> Point:
    """
    Pixel -> cell, treating board_size as the number of cells per side.

    NOTE the cell size is derived from screen_x itself, so cell_x always comes out as board_size
    (e.g. (300, 150, 10) -> (10, 5)). No clamping to the board.
    """
    _check_board_size(board_size)
    _check_finite(screen_x, screen_y)

    cell_size = screen_x / board_size
    if cell_size == 0:
        if screen_y == 0:
            return 0, 0
        raise CoordinateError(
            f"Cannot derive a cell size from screen_x=0 to place screen_y={screen_y}."
        )
    cells = (screen_x / cell_size, screen_y / cell_size)
    _check_finite(*cells)
    return math.floor(cells[0]), math.floor(cells[1])


def to_screen_coordinates(cell_x: int, cell_y: int, board_size: int) -> PixelPoint:
    """Cell -> pixel, treating board_size as the pixel size of one cell."""
    _check_board_size(board_size)
    cell_size = float(board_size)
    return cell_x * cell_size, cell_y * cell_size


# --- Consistent geometry ---
class BoardGeometry(BaseModel):
    """A square board of cell_count x cell_count cells spanning board_pixel_extent pixels per side."""

    model_config = ConfigDict(frozen=True)

    board_pixel_extent: float
    cell_count: int

    @field_validator("board_pixel_extent")
    @classmethod
    def validate_extent(cls, value: float) -> float:
        if not math.isfinite(value) or value <= 0:
            raise CoordinateError("board_pixel_extent must be a positive, finite number.")
        return value

    @field_validator("cell_count")
    @classmethod
    def validate_cell_count(cls, value: int) -> int:
        if value <= 0:
            raise CoordinateError("cell_count must be positive.")
        return value

    @property
    def cell_size(self) -> float:
        return self.board_pixel_extent / self.cell_count

    def to_cell(self, x: float, y: float, clamp: bool = False) -> Point:
        """Cell containing the pixel. Pixels off the board raise, unless clamp is set."""
        _check_finite(x, y)
        cells = (x / self.cell_size, y / self.cell_size)
        _check_finite(*cells)
        cell_x, cell_y = math.floor(cells[0]), math.floor(cells[1])
        if clamp:
            return self._clamp(cell_x), self._clamp(cell_y)
        if not self.contains(cell_x, cell_y):
            raise CoordinateError(f"Pixel ({x}, {y}) lies outside the board.")
        return cell_x, cell_y

    def to_pixel(self, cell_x: int, cell_y: int) -> PixelPoint:
        """Centre of the cell."""
        if not self.contains(cell_x, cell_y):
            raise CoordinateError(f"Cell ({cell_x}, {cell_y}) lies outside the board.")
        return (cell_x + 0.5) * self.cell_size, (cell_y + 0.5) * self.cell_size

    def contains(self, cell_x: int, cell_y: int) -> bool:
        return 0 <= cell_x < self.cell_count and 0 <= cell_y < self.cell_count

    def _clamp(self, index: int) -> int:
        return max(0, min(self.cell_count - 1, index))


class ViewGeometry(BaseModel):
    """
    Grid lines of a Go board drawn inside a view.
    ----
    Stones sit on intersections, so a board with line_count lines has line_count - 1 gaps of grid_size pixels.
    The grid is a square centred in the view, shrunk by a margin of 2% of the shorter side on each edge.
    """

    model_config = ConfigDict(frozen=True)

    start_x: float
    start_y: float
    grid_size: float
    line_count: int

    @field_validator("grid_size")
    @classmethod
    def validate_grid_size(cls, value: float) -> float:
        if not math.isfinite(value) or value <= 0:
            raise CoordinateError("grid_size must be a positive, finite number.")
        return value

    @field_validator("line_count")
    @classmethod
    def validate_line_count(cls, value: int) -> int:
        if value < 2:
            raise CoordinateError("A board needs at least 2 lines per side.")
        return value

    @classmethod
    def for_view(
        cls, width: float, height: float, line_count: int = DEFAULT_BOARD_SIZE
    ) -> Self:
        if line_count < 2:
            raise CoordinateError("A board needs at least 2 lines per side.")
        shorter_side = min(width, height)
        margin = shorter_side * VIEW_MARGIN_RATIO
        extent = shorter_side - 2 * margin
        return cls(
            start_x=(width - extent) / 2,
            start_y=(height - extent) / 2,
            grid_size=extent / (line_count - 1),
            line_count=line_count,
        )

    @property
    def extent(self) -> float:
        return self.grid_size * (self.line_count - 1)

    def to_intersection(self, x: float, y: float) -> Optional[Point]:
        """Nearest intersection to a touch, or None when the touch is outside the grid."""
        _check_finite(x, y)
        if not (
            self.start_x <= x <= self.start_x + self.extent
            and self.start_y <= y <= self.start_y + self.extent
        ):
            return None
        # round half up, not Python's round-half-to-even
        board_x = math.floor((x - self.start_x) / self.grid_size + 0.5)
        board_y = math.floor((y - self.start_y) / self.grid_size + 0.5)
        return self._clamp(board_x), self._clamp(board_y)

    def to_pixel(self, board_x: int, board_y: int) -> PixelPoint:
        last = self.line_count - 1
        if not (0 <= board_x <= last and 0 <= board_y <= last):
            raise CoordinateError(f"Intersection ({board_x}, {board_y}) lies outside the board.")
        return self.start_x + board_x * self.grid_size, self.start_y + board_y * self.grid_size

    def _clamp(self, index: int) -> int:
        return max(0, min(self.line_count - 1, index))


def coordinate_label(x: int, y: int, line_count: int = DEFAULT_BOARD_SIZE) -> str:
    """Human readable point name, columns lettered from the left, rows numbered from the bottom: (0, 0) -> 'A19'."""
    column = COLUMN_LETTERS[x] if 0 <= x < len(COLUMN_LETTERS) else chr(ord("A") + x)
    return f"{column}{line_count - y}"
