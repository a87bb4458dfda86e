from dataclasses import dataclass, field
from typing import Optional, Tuple

from PIL import Image

from .rect import Rectangle


@dataclass(frozen=True)
class TrimInfo:
    """Where a trimmed sprite sat inside its original image.

    The packer never looks inside this; it only hands it back with the
    packed sprite so the renderer can restore the original offsets.
    """
    trim_x: int
    trim_y: int
    original_width: int
    original_height: int
    trimmed_width: int
    trimmed_height: int

    @classmethod
    def untrimmed(cls, width: int, height: int) -> 'TrimInfo':
        return cls(0, 0, width, height, width, height)

    @property
    def was_trimmed(self) -> bool:
        return (self.trimmed_width != self.original_width or
                self.trimmed_height != self.original_height)

    def margins(self) -> Tuple[int, int, int, int]:
        """Transparent border removed on each side, as (left, top, right, bottom)."""
        right = self.original_width - self.trimmed_width - self.trim_x
        bottom = self.original_height - self.trimmed_height - self.trim_y
        return self.trim_x, self.trim_y, right, bottom


@dataclass
class Sprite:
    """An input sprite: a unique name and its (already trimmed) pixels."""
    name: str
    image: Image.Image
    trim: Optional[TrimInfo] = None

    def __post_init__(self):
        if self.image.width <= 0 or self.image.height <= 0:
            raise ValueError(f"Sprite '{self.name}' has an empty image")
        if self.trim is None:
            self.trim = TrimInfo.untrimmed(self.image.width, self.image.height)

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size


@dataclass
class PackedSprite:
    """A sprite's final place in an atlas."""
    name: str
    x: int
    y: int
    width: int
    height: int
    trim: TrimInfo = field(repr=False)
    atlas_index: int

    @property
    def rect(self) -> Rectangle:
        return Rectangle(self.width, self.height, self.x, self.y)
