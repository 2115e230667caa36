"""
Screen geometry for the mine field.

Maps between continuous drawing-space points and integer cell
coordinates, and locates cell icons in the texture atlas.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .cell import CellVisual

Point = Tuple[float, float]
Rect = Tuple[float, float, float, float]

# Icon atlas is 8 columns by 2 rows
ATLAS_COLUMNS = 8
ATLAS_ROWS = 2


@dataclass
class FieldGeometry:
    """
    On-screen placement of a mine field.

    Cells are square, sized so the larger grid dimension fills the
    available area, and the grid is centered inside that area.

    Attributes:
        width: Number of columns in the grid.
        height: Number of rows in the grid.
        origin: Top-left corner of the drawing area.
        extents: Width and height of the drawing area.
    """

    width: int
    height: int
    origin: Point = (0.0, 0.0)
    extents: Point = (1.0, 1.0)
    cell_size: float = field(init=False)
    offset: Point = field(init=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("Grid dimensions must be positive")
        self.cell_size = min(self.extents) / max(self.width, self.height)
        self.offset = (
            0.5 * (self.extents[0] - self.width * self.cell_size),
            0.5 * (self.extents[1] - self.height * self.cell_size),
        )

    @classmethod
    def for_field(
        cls,
        mine_field,
        origin: Point = (0.0, 0.0),
        extents: Point = (1.0, 1.0),
    ) -> "FieldGeometry":
        """Build geometry matching a mine field's dimensions."""
        return cls(mine_field.width, mine_field.height, origin, extents)

    @property
    def bounds(self) -> Rect:
        """Drawn grid rectangle as (left, top, right, bottom)."""
        left = self.origin[0] + self.offset[0]
        top = self.origin[1] + self.offset[1]
        return (
            left,
            top,
            left + self.width * self.cell_size,
            top + self.height * self.cell_size,
        )

    def point_to_cell(self, px: float, py: float) -> Optional[Tuple[int, int]]:
        """
        Find the cell under a point.

        Args:
            px: Horizontal coordinate in drawing space.
            py: Vertical coordinate in drawing space.

        Returns:
            (x, y) of the cell, or None if the point lies outside the
            drawn grid or is not a finite number.
        """
        left, top, right, bottom = self.bounds
        # NaN fails every comparison, so test for inclusion
        if not (left <= px < right and top <= py < bottom):
            return None
        x = min(int((px - left) / self.cell_size), self.width - 1)
        y = min(int((py - top) / self.cell_size), self.height - 1)
        return x, y

    def cell_rect(self, x: int, y: int) -> Rect:
        """Get (left, top, width, height) of a cell in drawing space."""
        left, top, _, _ = self.bounds
        return (
            left + x * self.cell_size,
            top + y * self.cell_size,
            self.cell_size,
            self.cell_size,
        )


def atlas_region(visual: CellVisual) -> Rect:
    """
    Get the texture coordinates of a visual's icon.

    Returns:
        (u, v, width, height) in normalized atlas space.
    """
    index = int(visual)
    u = (index % ATLAS_COLUMNS) / ATLAS_COLUMNS
    v = (index // ATLAS_COLUMNS) / ATLAS_ROWS
    return (u, v, 1.0 / ATLAS_COLUMNS, 1.0 / ATLAS_ROWS)
