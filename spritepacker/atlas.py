import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from PIL import Image

from .layout import Layout
from .sprite import PackedSprite, Sprite

logger = logging.getLogger(__name__)


@dataclass
class Atlas:
    """One rendered sheet and the sprites packed into it."""
    index: int
    width: int
    height: int
    image: Image.Image = field(repr=False)
    sprites: List[PackedSprite] = field(default_factory=list)
    occupancy: float = 0.0  # Exact occupancy of the packed bounding box

    @property
    def sprite_area(self) -> int:
        return sum(sprite.width * sprite.height for sprite in self.sprites)

    @property
    def efficiency(self) -> float:
        """Fraction of the final canvas covered by sprite pixels (padding and extrusion excluded)."""
        return self.sprite_area / (self.width * self.height)


def next_power_of_two(n: int) -> int:
    """Return the next power of two greater than or equal to n (1 for n <= 1)."""
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def packing_efficiency(atlases: Sequence[Atlas]) -> float:
    """Sprite pixels over atlas pixels across a whole build."""
    total_pixels = sum(atlas.width * atlas.height for atlas in atlases)
    sprite_pixels = sum(atlas.sprite_area for atlas in atlases)
    return sprite_pixels / total_pixels if total_pixels > 0 else 0.0


def extrude_sprite(canvas: Image.Image, image: Image.Image, x: int, y: int, extrude: int):
    """Repeat the outer ring of image outward by extrude pixels around (x, y) on canvas.

    Edges are copied first, then the corner blocks are filled with the
    corner pixels. Anything that would land outside the canvas is skipped.
    """
    w, h = image.size
    canvas_w, canvas_h = canvas.size

    top = image.crop((0, 0, w, 1))
    bottom = image.crop((0, h - 1, w, h))
    left = image.crop((0, 0, 1, h))
    right = image.crop((w - 1, 0, w, h))

    for e in range(1, extrude + 1):
        if y - e >= 0:
            canvas.paste(top, (x, y - e))
        if y + h - 1 + e < canvas_h:
            canvas.paste(bottom, (x, y + h - 1 + e))
        if x - e >= 0:
            canvas.paste(left, (x - e, y))
        if x + w - 1 + e < canvas_w:
            canvas.paste(right, (x + w - 1 + e, y))

    corners = [
        (image.getpixel((0, 0)), -1, -1, x, y),
        (image.getpixel((w - 1, 0)), 1, -1, x + w - 1, y),
        (image.getpixel((0, h - 1)), -1, 1, x, y + h - 1),
        (image.getpixel((w - 1, h - 1)), 1, 1, x + w - 1, y + h - 1),
    ]
    for pixel, step_x, step_y, corner_x, corner_y in corners:
        for ey in range(1, extrude + 1):
            py = corner_y + step_y * ey
            if not 0 <= py < canvas_h:
                continue
            for ex in range(1, extrude + 1):
                px = corner_x + step_x * ex
                if 0 <= px < canvas_w:
                    canvas.putpixel((px, py), pixel)


def render_atlas(index: int, layout: Layout, sprites: Sequence[Sprite], extrude: int = 0,
                 power_of_two: bool = False) -> Atlas:
    """Create the atlas image for a winning layout.

    The canvas covers the layout's bounding box, optionally rounded up to a
    power of two on each axis, and starts fully transparent.
    """
    if power_of_two:
        width, height = next_power_of_two(layout.max_x), next_power_of_two(layout.max_y)
    else:
        width, height = max(layout.max_x, 1), max(layout.max_y, 1)

    sheet_img = Image.new('RGBA', (width, height), (0, 0, 0, 0))
    atlas = Atlas(index, width, height, sheet_img, occupancy=layout.occupancy)

    for placement in layout.placements:
        sprite = sprites[placement.index]
        img = sprite.image if sprite.image.mode == 'RGBA' else sprite.image.convert('RGBA')

        if extrude > 0:
            extrude_sprite(sheet_img, img, placement.x, placement.y, extrude)
        sheet_img.paste(img, (placement.x, placement.y))

        atlas.sprites.append(PackedSprite(
            name=sprite.name,
            x=placement.x,
            y=placement.y,
            width=placement.width,
            height=placement.height,
            trim=sprite.trim,
            atlas_index=index,
        ))

    logger.info(f"Atlas {index}: {width}×{height} with {len(atlas.sprites)} sprites "
                f"({layout.occupancy * 100:.1f}% occupancy)")
    return atlas
