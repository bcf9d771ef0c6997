"""
Grid tiling helper for laying out repeated drawings.
"""

from typing import Iterator, Tuple

from vecdraw.models.point import Point


class Tiler:
    """
    Divide a rectangular area centered on the origin into a grid of tiles.

    Iterating yields (center, n) for each tile, row by row, with n
    starting at 1.
    """

    def __init__(self, area_width: float, area_height: float, rows: int, cols: int, margin: float = 20.0):
        """
        Initialize the tiler.

        Args:
            area_width: Width of the area to fill
            area_height: Height of the area to fill
            rows: Number of rows (positive)
            cols: Number of columns (positive)
            margin: Space left around the grid on every side

        Raises:
            ValueError: If rows or cols is not positive, or the margin leaves no room
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Tiler needs at least one row and one column, got {rows} x {cols}")
        if area_width - 2 * margin <= 0 or area_height - 2 * margin <= 0:
            raise ValueError("Margin leaves no room for tiles")

        self.rows = rows
        self.cols = cols
        self.margin = margin
        self.tilewidth = (area_width - 2 * margin) / cols
        self.tileheight = (area_height - 2 * margin) / rows
        self._left = -(area_width / 2) + margin
        self._top = -(area_height / 2) + margin

    def tile_center(self, n: int) -> Point:
        """Center of tile `n` (1-based, row by row)."""
        if not 1 <= n <= len(self):
            raise IndexError(f"Tile {n} out of range 1..{len(self)}")
        row, col = divmod(n - 1, self.cols)
        return Point(
            self._left + (col + 0.5) * self.tilewidth,
            self._top + (row + 0.5) * self.tileheight,
        )

    def __len__(self) -> int:
        return self.rows * self.cols

    def __iter__(self) -> Iterator[Tuple[Point, int]]:
        for n in range(1, len(self) + 1):
            yield self.tile_center(n), n
