import math
from collections import defaultdict
from typing import Dict, Hashable, List, Set

from superboids.types import Cell, Vector2


class SpatialHash:
    """
    Uniform grid of buckets keyed by integer cell coordinates.
    Items are points; a radius query returns every item in a bucket that
    the query circle's bounding square touches, so callers still need an
    exact distance test on the candidates.
    """

    def __init__(self, cell_size: float = 50.0):
        if cell_size <= 0.0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.cell_size = cell_size
        # Map: (cell_x, cell_y) -> item keys
        self.buckets: Dict[Cell, Set[Hashable]] = defaultdict(set)
        # Reverse lookup to handle moves efficiently
        self._item_cells: Dict[Hashable, Cell] = {}

    def cell_of(self, point: Vector2) -> Cell:
        return (
            math.floor(point.x / self.cell_size),
            math.floor(point.y / self.cell_size),
        )

    def _get_cells(self, point: Vector2, radius: float) -> List[Cell]:
        """Returns all buckets that the square around point overlaps."""
        start_x, start_y = self.cell_of(Vector2(point.x - radius, point.y - radius))
        end_x, end_y = self.cell_of(Vector2(point.x + radius, point.y + radius))

        cells = []
        for cx in range(start_x, end_x + 1):
            for cy in range(start_y, end_y + 1):
                cells.append((cx, cy))
        return cells

    def insert(self, key: Hashable, point: Vector2) -> None:
        """Add or Update an item in the hash."""
        self.remove(key)  # Clear old position first

        cell = self.cell_of(point)
        self.buckets[cell].add(key)
        self._item_cells[key] = cell

    def remove(self, key: Hashable) -> None:
        cell = self._item_cells.pop(key, None)
        if cell is None:
            return
        bucket = self.buckets.get(cell)
        if bucket is not None:
            bucket.discard(key)
            if not bucket:
                del self.buckets[cell]  # Cleanup empty buckets

    def query(self, point: Vector2, radius: float) -> Set[Hashable]:
        """Returns unique items in the buckets around point."""
        results: Set[Hashable] = set()
        for cell in self._get_cells(point, radius):
            bucket = self.buckets.get(cell)
            if bucket:
                results.update(bucket)
        return results
