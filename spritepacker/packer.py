import enum
import logging
from typing import List, Optional, Tuple, Union

from .errors import InvalidConfigError
from .rect import Rectangle

logger = logging.getLogger(__name__)


class HeuristicType(enum.Enum):
    """Enum for placement heuristics."""
    BEST_SHORT_SIDE_FIT = 1  # Minimize the shorter leftover side
    BEST_LONG_SIDE_FIT = 2   # Minimize the longer leftover side
    BEST_AREA_FIT = 3        # Pick the smallest free rectangle
    BOTTOM_LEFT = 4          # Tetris-style, lowest top edge then leftmost
    CONTACT_POINT = 5        # Maximize contact with bin edges and placed rectangles
    BEST = 6                 # Try all of the above and keep the best layout

    @classmethod
    def placement_heuristics(cls) -> List['HeuristicType']:
        """The concrete heuristics, in the order they are tried."""
        return [heuristic for heuristic in cls if heuristic is not cls.BEST]

    @classmethod
    def parse(cls, value: Union['HeuristicType', str]) -> 'HeuristicType':
        """Accept an enum member or one of its names ("best-area-fit", "area", "BAF", ...)."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace('_', '-')
        try:
            return _HEURISTIC_NAMES[key]
        except KeyError:
            raise InvalidConfigError(f"Unknown placement heuristic: {value!r}") from None


_HEURISTIC_NAMES = {
    'best-short-side-fit': HeuristicType.BEST_SHORT_SIDE_FIT,
    'shortside': HeuristicType.BEST_SHORT_SIDE_FIT,
    'bssf': HeuristicType.BEST_SHORT_SIDE_FIT,
    'best-long-side-fit': HeuristicType.BEST_LONG_SIDE_FIT,
    'longside': HeuristicType.BEST_LONG_SIDE_FIT,
    'blsf': HeuristicType.BEST_LONG_SIDE_FIT,
    'best-area-fit': HeuristicType.BEST_AREA_FIT,
    'area': HeuristicType.BEST_AREA_FIT,
    'baf': HeuristicType.BEST_AREA_FIT,
    'bottom-left': HeuristicType.BOTTOM_LEFT,
    'bottomleft': HeuristicType.BOTTOM_LEFT,
    'bl': HeuristicType.BOTTOM_LEFT,
    'contact-point': HeuristicType.CONTACT_POINT,
    'contact': HeuristicType.CONTACT_POINT,
    'cp': HeuristicType.CONTACT_POINT,
    'best': HeuristicType.BEST,
    'optimal': HeuristicType.BEST,
}


class MaxRectsPackerSheet:
    """Implementation of the Maximal Rectangles algorithm for a single sheet.

    Free space is tracked as a list of maximal free rectangles. These may
    overlap each other, which keeps splitting simple but means occupancy()
    is only an approximation until the sheet is full.

    A sheet is meant to be used for exactly one packing attempt and then
    thrown away.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Sheet size must be positive, got {width}×{height}")
        self.width = width
        self.height = height
        # Start with the entire sheet as a free rectangle
        self.free_rects: List[Rectangle] = [Rectangle(width, height)]
        self.placed_rects: List[Rectangle] = []

    def can_fit(self, width: int, height: int) -> bool:
        """Check if a rectangle of given size fits in any free rectangle. Does not modify the sheet."""
        return any(width <= rect.width and height <= rect.height for rect in self.free_rects)

    def _find_position(self, width: int, height: int, heuristic: HeuristicType) -> Optional[Rectangle]:
        best_score = None
        best_rect = None

        for rect in self.free_rects:
            if rect.width >= width and rect.height >= height:
                score = self._calculate_score(rect, width, height, heuristic)
                # Strictly lower only, so the first free rectangle wins ties
                if best_score is None or score < best_score:
                    best_score = score
                    best_rect = Rectangle(width, height, rect.x, rect.y)

        return best_rect

    def _calculate_score(self, free_rect: Rectangle, width: int, height: int,
                         heuristic: HeuristicType) -> Tuple[int, int]:
        """Calculate the score based on the selected heuristic. Lower is better."""
        leftover_width = free_rect.width - width
        leftover_height = free_rect.height - height

        if heuristic == HeuristicType.BEST_LONG_SIDE_FIT:
            return max(leftover_width, leftover_height), min(leftover_width, leftover_height)

        elif heuristic == HeuristicType.BEST_AREA_FIT:
            return free_rect.area(), min(leftover_width, leftover_height)

        elif heuristic == HeuristicType.BOTTOM_LEFT:
            return free_rect.y + height, free_rect.x

        elif heuristic == HeuristicType.CONTACT_POINT:
            # Negated so that more contact sorts first
            return -self._contact_score(free_rect.x, free_rect.y, width, height), 0

        # BEST_SHORT_SIDE_FIT, and the default for BEST
        return min(leftover_width, leftover_height), max(leftover_width, leftover_height)

    def _contact_score(self, x: int, y: int, width: int, height: int) -> int:
        """Total edge length a candidate at (x, y) would share with the bin edges and placed rectangles."""
        score = 0

        if x == 0:
            score += height
        if y == 0:
            score += width
        if x + width == self.width:
            score += height
        if y + height == self.height:
            score += width

        for placed in self.placed_rects:
            # Left or right edge touching: count the vertical overlap
            if x == placed.right or x + width == placed.x:
                overlap = min(y + height, placed.bottom) - max(y, placed.y)
                if overlap > 0:
                    score += overlap
            # Top or bottom edge touching: count the horizontal overlap
            if y == placed.bottom or y + height == placed.y:
                overlap = min(x + width, placed.right) - max(x, placed.x)
                if overlap > 0:
                    score += overlap

        return score

    def insert(self, width: int, height: int,
               heuristic: HeuristicType = HeuristicType.BEST_SHORT_SIDE_FIT) -> Optional[Rectangle]:
        """Try to insert a rectangle with given dimensions. Returns the placed rectangle or None if it couldn't fit."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Rectangle size must be positive, got {width}×{height}")

        placed_rect = self._find_position(width, height, heuristic)
        if placed_rect is None:
            return None

        self._split_free_rectangles(placed_rect)
        self._prune_free_rectangles()
        self._merge_free_rectangles()
        self.placed_rects.append(placed_rect)

        logger.debug(f"Placed {width}×{height} at ({placed_rect.x},{placed_rect.y}) "
                     f"using {heuristic.name}, {len(self.free_rects)} free rectangles left")
        return placed_rect

    def _split_free_rectangles(self, inserted_rect: Rectangle):
        """Split all free rectangles that overlap with the inserted rectangle."""
        kept_rects = []
        new_free_rects = []

        for free_rect in self.free_rects:
            if not inserted_rect.intersects(free_rect):
                kept_rects.append(free_rect)
                continue

            # Left of the inserted rect
            if inserted_rect.x > free_rect.x:
                new_free_rects.append(Rectangle(
                    inserted_rect.x - free_rect.x,
                    free_rect.height,
                    free_rect.x,
                    free_rect.y
                ))

            # Right of the inserted rect
            if inserted_rect.right < free_rect.right:
                new_free_rects.append(Rectangle(
                    free_rect.right - inserted_rect.right,
                    free_rect.height,
                    inserted_rect.right,
                    free_rect.y
                ))

            # Above the inserted rect
            if inserted_rect.y > free_rect.y:
                new_free_rects.append(Rectangle(
                    free_rect.width,
                    inserted_rect.y - free_rect.y,
                    free_rect.x,
                    free_rect.y
                ))

            # Below the inserted rect
            if inserted_rect.bottom < free_rect.bottom:
                new_free_rects.append(Rectangle(
                    free_rect.width,
                    free_rect.bottom - inserted_rect.bottom,
                    free_rect.x,
                    inserted_rect.bottom
                ))

        self.free_rects = kept_rects + new_free_rects

    def _prune_free_rectangles(self):
        """Remove redundant free rectangles (those completely contained within others)."""
        i = 0
        while i < len(self.free_rects):
            j = i + 1
            while j < len(self.free_rects):
                if self.free_rects[j].contains(self.free_rects[i]):
                    self.free_rects.pop(i)
                    i -= 1
                    break
                elif self.free_rects[i].contains(self.free_rects[j]):
                    self.free_rects.pop(j)
                else:
                    j += 1
            i += 1

    def _merge_free_rectangles(self):
        """Combine free rectangles that share a full edge, until no pair can be combined."""
        merged = True
        while merged:
            merged = False
            i = 0
            while i < len(self.free_rects):
                j = i + 1
                while j < len(self.free_rects):
                    combined = merge_rectangles(self.free_rects[i], self.free_rects[j])
                    if combined is not None:
                        self.free_rects[i] = combined
                        self.free_rects.pop(j)
                        merged = True
                    else:
                        j += 1
                i += 1

    def occupancy(self) -> float:
        """Approximate used fraction of the sheet, from the free rectangle areas.

        Overlapping free rectangles are counted twice, so this under-reports
        until the sheet is full. Only use it for relative ranking or logging.
        """
        total_area = self.width * self.height
        free_area = sum(rect.area() for rect in self.free_rects)
        return max(0.0, 1.0 - free_area / total_area)


def merge_rectangles(a: Rectangle, b: Rectangle) -> Optional[Rectangle]:
    """Return the union of a and b if they share a full edge, otherwise None."""
    if a.y == b.y and a.height == b.height:
        if a.right == b.x:
            return Rectangle(a.width + b.width, a.height, a.x, a.y)
        if b.right == a.x:
            return Rectangle(a.width + b.width, a.height, b.x, a.y)

    if a.x == b.x and a.width == b.width:
        if a.bottom == b.y:
            return Rectangle(a.width, a.height + b.height, a.x, a.y)
        if b.bottom == a.y:
            return Rectangle(a.width, a.height + b.height, a.x, b.y)

    return None
