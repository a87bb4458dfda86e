"""Sprite orderings tried by the builder.

The MaxRects packer is greedy, so the order sprites are offered in matters
as much as the placement heuristic. In ``PackMode.BEST`` every order below
is tried; ``PackMode.SINGLE`` keeps the caller's order.
"""

import enum
from fractions import Fraction
from typing import List, Sequence, Tuple, Union

from .errors import InvalidConfigError


class PackMode(enum.Enum):
    """Enum for how many sprite orderings to try."""
    SINGLE = 1  # Sprites in input order only
    BEST = 2    # Every SortOrder

    @classmethod
    def parse(cls, value: Union['PackMode', str]) -> 'PackMode':
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise InvalidConfigError(f"Unknown pack mode: {value!r}") from None


class SortOrder(enum.Enum):
    """Enum for sprite orderings. All but ORIGINAL sort largest first."""
    ORIGINAL = 1
    AREA = 2
    PERIMETER = 3
    MAX_SIDE = 4
    WIDTH = 5
    HEIGHT = 6
    ASPECT_RATIO = 7  # Long side / short side, most elongated first
    DIAGONAL = 8      # Squared diagonal, so no floating point


_SORT_KEYS = {
    SortOrder.AREA: lambda w, h: w * h,
    SortOrder.PERIMETER: lambda w, h: 2 * (w + h),
    SortOrder.MAX_SIDE: lambda w, h: max(w, h),
    SortOrder.WIDTH: lambda w, h: w,
    SortOrder.HEIGHT: lambda w, h: h,
    SortOrder.ASPECT_RATIO: lambda w, h: Fraction(max(w, h), min(w, h)),
    SortOrder.DIAGONAL: lambda w, h: w * w + h * h,
}


def orders_for_mode(mode: PackMode) -> List[SortOrder]:
    """The orderings to try for a pack mode, in search order."""
    if mode == PackMode.BEST:
        return list(SortOrder)
    return [SortOrder.ORIGINAL]


def sort_indices(sizes: Sequence[Tuple[int, int]], order: SortOrder) -> List[int]:
    """Return positions into sizes, arranged by order.

    Sorting is stable, so sprites with equal keys keep their input order.
    """
    indices = list(range(len(sizes)))
    if order == SortOrder.ORIGINAL:
        return indices
    key = _SORT_KEYS[order]
    indices.sort(key=lambda i: key(*sizes[i]), reverse=True)
    return indices
