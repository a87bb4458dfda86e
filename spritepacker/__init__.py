"""Pack sprites into texture atlases with the MaxRects algorithm."""

from .atlas import Atlas, extrude_sprite, next_power_of_two, packing_efficiency, render_atlas
from .builder import SpriteSheetPacker
from .errors import (DuplicateSpriteError, EmptyInputError, InvalidConfigError, PackingCancelled,
                     SpritePackerError, SpriteTooLargeError)
from .layout import Layout, Placement
from .ordering import PackMode, SortOrder, orders_for_mode, sort_indices
from .packer import HeuristicType, MaxRectsPackerSheet
from .rect import Rectangle
from .sprite import PackedSprite, Sprite, TrimInfo

__all__ = [
    'Atlas',
    'DuplicateSpriteError',
    'EmptyInputError',
    'HeuristicType',
    'InvalidConfigError',
    'Layout',
    'MaxRectsPackerSheet',
    'PackMode',
    'PackedSprite',
    'PackingCancelled',
    'Placement',
    'Rectangle',
    'SortOrder',
    'Sprite',
    'SpritePackerError',
    'SpriteTooLargeError',
    'SpriteSheetPacker',
    'TrimInfo',
    'extrude_sprite',
    'next_power_of_two',
    'orders_for_mode',
    'packing_efficiency',
    'render_atlas',
    'sort_indices',
]
