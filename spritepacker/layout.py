from dataclasses import dataclass, field
from typing import List, Optional

from .ordering import SortOrder
from .packer import HeuristicType


@dataclass(frozen=True)
class Placement:
    """Where one sprite landed during a single packing attempt.

    index is the sprite's position in the caller's input list, and (x, y) is
    the offset of the sprite's own pixels, inside its padding and extrusion.
    """
    index: int
    x: int
    y: int
    width: int
    height: int
    atlas_index: int


@dataclass
class Layout:
    """The result of packing one sprite collection with one ordering and one heuristic."""
    placements: List[Placement] = field(default_factory=list)
    unplaced: List[int] = field(default_factory=list)
    max_x: int = 0
    max_y: int = 0
    used_area: int = 0  # Padded and extruded area of the placed sprites
    ordering: Optional[SortOrder] = None
    heuristic: Optional[HeuristicType] = None

    @property
    def placed_count(self) -> int:
        return len(self.placements)

    @property
    def bounding_area(self) -> int:
        return self.max_x * self.max_y

    @property
    def occupancy(self) -> float:
        """Exact fraction of the bounding box covered by placed sprites."""
        if self.bounding_area == 0:
            return 0.0
        return self.used_area / self.bounding_area

    def is_better_than(self, other: Optional['Layout']) -> bool:
        """Strict comparison: more sprites placed, then a smaller bounding box, then higher occupancy."""
        if other is None:
            return True
        if self.placed_count != other.placed_count:
            return self.placed_count > other.placed_count
        if self.bounding_area != other.bounding_area:
            return self.bounding_area < other.bounding_area
        return self.occupancy > other.occupancy
