import logging
from typing import List, Optional, Sequence, Tuple, Union

from .atlas import Atlas, packing_efficiency, render_atlas
from .errors import (DuplicateSpriteError, EmptyInputError, InvalidConfigError, PackingCancelled,
                     SpriteTooLargeError)
from .layout import Layout, Placement
from .ordering import PackMode, SortOrder, orders_for_mode, sort_indices
from .packer import HeuristicType, MaxRectsPackerSheet
from .sprite import Sprite

logger = logging.getLogger(__name__)


class SpriteSheetPacker:
    """Packs sprites into as few fixed-maximum-size atlases as it can.

    Every sheet is packed by trying each requested (ordering, heuristic)
    combination on a fresh MaxRects sheet and keeping the best layout.
    Sprites that do not fit are carried over to the next sheet.

    cancel_event is anything with an ``is_set()`` method, usually a
    ``threading.Event`` owned by the caller. It is polled between sheets,
    orderings, heuristics and individual placements; once set, packing
    stops with PackingCancelled.
    """

    def __init__(self, max_width: int, max_height: int, padding: int = 1,
                 heuristic: Union[HeuristicType, str] = HeuristicType.BEST_SHORT_SIDE_FIT,
                 power_of_two: bool = False, extrude: int = 0,
                 pack_mode: Union[PackMode, str] = PackMode.SINGLE,
                 cancel_event=None):
        if max_width <= 0 or max_height <= 0:
            raise InvalidConfigError(f"Maximum atlas size must be positive, got {max_width}×{max_height}")
        if padding < 0:
            raise InvalidConfigError(f"Padding must not be negative, got {padding}")
        if extrude < 0:
            raise InvalidConfigError(f"Extrusion must not be negative, got {extrude}")

        self.max_width = max_width
        self.max_height = max_height
        self.padding = padding
        self.heuristic = HeuristicType.parse(heuristic)
        self.power_of_two = power_of_two
        self.extrude = extrude
        self.pack_mode = PackMode.parse(pack_mode)
        self.cancel_event = cancel_event

    @property
    def heuristics(self) -> List[HeuristicType]:
        """The heuristics tried for every sheet."""
        if self.heuristic == HeuristicType.BEST:
            return HeuristicType.placement_heuristics()
        return [self.heuristic]

    @property
    def orderings(self) -> List[SortOrder]:
        """The sprite orderings tried for every sheet."""
        return orders_for_mode(self.pack_mode)

    @property
    def border(self) -> int:
        """Space reserved on each side of a sprite."""
        return self.padding + self.extrude

    def padded_size(self, sprite: Sprite) -> Tuple[int, int]:
        return sprite.width + 2 * self.border, sprite.height + 2 * self.border

    def _check_cancelled(self):
        if self.cancel_event is not None and self.cancel_event.is_set():
            logger.info("Packing cancelled")
            raise PackingCancelled()

    def _validate(self, sprites: Sequence[Sprite]):
        """Reject inputs that can never be packed, before any packing is attempted."""
        if not sprites:
            raise EmptyInputError()

        names = set()
        for sprite in sprites:
            if sprite.name in names:
                raise DuplicateSpriteError(sprite.name)
            names.add(sprite.name)

            padded_width, padded_height = self.padded_size(sprite)
            if padded_width > self.max_width or padded_height > self.max_height:
                raise SpriteTooLargeError(sprite.name, sprite.width, sprite.height,
                                          padded_width, padded_height,
                                          self.max_width, self.max_height)

    def pack_sprites(self, sprites: Sequence[Sprite]) -> List[Atlas]:
        """Pack sprites into sheets and return the rendered atlases in order.

        Raises EmptyInputError, DuplicateSpriteError or SpriteTooLargeError for
        unusable input, and PackingCancelled if the cancel event gets set. No
        atlases are returned in either case.
        """
        sprites = list(sprites)
        self._validate(sprites)

        logger.info(f"Packing {len(sprites)} sprites into sheets of at most "
                    f"{self.max_width}×{self.max_height}")

        results = []
        remaining = list(range(len(sprites)))

        while remaining:
            self._check_cancelled()
            atlas_index = len(results)

            layout = self.find_best_layout(sprites, remaining, atlas_index)
            # A trial interrupted by cancellation never gets this far, but the
            # flag may have been set after the last poll inside the search
            self._check_cancelled()

            results.append(render_atlas(atlas_index, layout, sprites, self.extrude, self.power_of_two))
            # Carry leftovers over in input order so the next sheet's ORIGINAL ordering is stable
            remaining = sorted(layout.unplaced)

        logger.info(f"Created {len(results)} atlas(es) with "
                    f"{sum(len(atlas.sprites) for atlas in results)} total sprites, "
                    f"{packing_efficiency(results) * 100:.2f}% packing efficiency")
        return results

    def find_best_layout(self, sprites: Sequence[Sprite], indices: Sequence[int],
                         atlas_index: int = 0) -> Layout:
        """Try every ordering × heuristic combination on the given sprites and return the best layout.

        A later candidate only replaces the current best if it is strictly
        better, so enumeration order breaks exact ties.
        """
        indices = list(indices)
        sizes = [self.padded_size(sprites[i]) for i in indices]

        best_layout: Optional[Layout] = None
        for ordering in self.orderings:
            self._check_cancelled()
            order = [indices[i] for i in sort_indices(sizes, ordering)]

            for heuristic in self.heuristics:
                self._check_cancelled()
                layout = self._pack_trial(sprites, order, heuristic, atlas_index)
                layout.ordering = ordering

                logger.debug(f"Sheet {atlas_index} {ordering.name}/{heuristic.name}: "
                             f"{layout.placed_count}/{len(order)} placed, "
                             f"{layout.max_x}×{layout.max_y}, {layout.occupancy * 100:.1f}% occupancy")

                if layout.is_better_than(best_layout):
                    best_layout = layout

        logger.debug(f"Sheet {atlas_index}: best is {best_layout.ordering.name}/"
                     f"{best_layout.heuristic.name} with {best_layout.placed_count} sprites")
        return best_layout

    def _pack_trial(self, sprites: Sequence[Sprite], order: Sequence[int], heuristic: HeuristicType,
                    atlas_index: int) -> Layout:
        """Pack sprites in the given order on a fresh sheet."""
        sheet = MaxRectsPackerSheet(self.max_width, self.max_height)
        layout = Layout(heuristic=heuristic)

        for index in order:
            self._check_cancelled()
            sprite = sprites[index]
            padded_width, padded_height = self.padded_size(sprite)

            rect = sheet.insert(padded_width, padded_height, heuristic)
            if rect is None:
                layout.unplaced.append(index)
                continue

            layout.placements.append(Placement(
                index=index,
                x=rect.x + self.border,
                y=rect.y + self.border,
                width=sprite.width,
                height=sprite.height,
                atlas_index=atlas_index,
            ))
            layout.max_x = max(layout.max_x, rect.right)
            layout.max_y = max(layout.max_y, rect.bottom)
            layout.used_area += rect.area()

        return layout
