import pytest
from PIL import Image

from spritepacker import Layout, Placement, Sprite, TrimInfo, extrude_sprite, next_power_of_two, render_atlas
from spritepacker.atlas import packing_efficiency

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
WHITE = (255, 255, 255, 255)
CLEAR = (0, 0, 0, 0)


def four_color_sprite(name='quad'):
    img = Image.new('RGBA', (2, 2))
    img.putpixel((0, 0), RED)
    img.putpixel((1, 0), GREEN)
    img.putpixel((0, 1), BLUE)
    img.putpixel((1, 1), WHITE)
    return Sprite(name, img)


@pytest.mark.parametrize('n, expected', [
    (0, 1), (1, 1), (2, 2), (3, 4), (5, 8), (100, 128), (1000, 1024), (4097, 8192),
])
def test_next_power_of_two(n, expected):
    assert next_power_of_two(n) == expected


def test_next_power_of_two_is_idempotent():
    for exponent in range(16):
        power = 1 << exponent
        assert next_power_of_two(power) == power
        assert next_power_of_two(next_power_of_two(power + 1)) == next_power_of_two(power + 1)


def test_extrude_repeats_edges_and_corners():
    canvas = Image.new('RGBA', (4, 4), CLEAR)
    sprite = four_color_sprite()
    extrude_sprite(canvas, sprite.image, 1, 1, 1)
    canvas.paste(sprite.image, (1, 1))

    expected = [
        [RED, RED, GREEN, GREEN],
        [RED, RED, GREEN, GREEN],
        [BLUE, BLUE, WHITE, WHITE],
        [BLUE, BLUE, WHITE, WHITE],
    ]
    for y, row in enumerate(expected):
        for x, color in enumerate(row):
            assert canvas.getpixel((x, y)) == color, (x, y)


def test_extrude_fills_whole_corner_blocks():
    canvas = Image.new('RGBA', (6, 6), CLEAR)
    sprite = four_color_sprite()
    extrude_sprite(canvas, sprite.image, 2, 2, 2)

    assert canvas.getpixel((0, 0)) == RED
    assert canvas.getpixel((1, 0)) == RED
    assert canvas.getpixel((0, 1)) == RED
    assert canvas.getpixel((5, 5)) == WHITE
    assert canvas.getpixel((4, 5)) == WHITE
    assert canvas.getpixel((2, 0)) == RED
    assert canvas.getpixel((3, 0)) == GREEN


def test_extrude_skips_pixels_outside_the_canvas():
    canvas = Image.new('RGBA', (3, 3), CLEAR)
    sprite = four_color_sprite()
    # Only one pixel of room on the top and left, none on the right and bottom
    extrude_sprite(canvas, sprite.image, 1, 1, 3)

    assert canvas.getpixel((0, 0)) == RED
    assert canvas.getpixel((1, 0)) == RED
    assert canvas.getpixel((0, 2)) == BLUE


def test_render_atlas_places_pixels_and_records_sprites():
    trim = TrimInfo(1, 2, 5, 6, 2, 2)
    sprite = Sprite('quad', four_color_sprite().image, trim)
    layout = Layout(placements=[Placement(0, 2, 2, 2, 2, 3)], max_x=6, max_y=6, used_area=36)

    atlas = render_atlas(3, layout, [sprite], extrude=1)

    assert (atlas.index, atlas.width, atlas.height) == (3, 6, 6)
    assert atlas.occupancy == 1.0
    assert atlas.image.getpixel((2, 2)) == RED
    assert atlas.image.getpixel((1, 1)) == RED
    assert atlas.image.getpixel((0, 0)) == CLEAR
    packed = atlas.sprites[0]
    assert (packed.name, packed.x, packed.y, packed.width, packed.height) == ('quad', 2, 2, 2, 2)
    assert packed.atlas_index == 3
    assert packed.trim is trim


def test_render_atlas_rounds_to_power_of_two():
    sprite = Sprite('solid', Image.new('RGBA', (30, 20), RED))
    layout = Layout(placements=[Placement(0, 0, 0, 30, 20, 0)], max_x=30, max_y=20, used_area=600)

    atlas = render_atlas(0, layout, [sprite], power_of_two=True)

    assert (atlas.width, atlas.height) == (32, 32)
    assert atlas.image.size == (32, 32)
    assert atlas.image.getpixel((31, 31)) == CLEAR
    assert atlas.efficiency == 600 / 1024
    # Occupancy is measured on the packed bounding box, not the rounded canvas
    assert atlas.occupancy == 1.0


def test_render_atlas_converts_to_rgba():
    sprite = Sprite('rgb', Image.new('RGB', (2, 2), (10, 20, 30)))
    layout = Layout(placements=[Placement(0, 0, 0, 2, 2, 0)], max_x=2, max_y=2, used_area=4)

    atlas = render_atlas(0, layout, [sprite])

    assert atlas.image.mode == 'RGBA'
    assert atlas.image.getpixel((1, 1)) == (10, 20, 30, 255)


def test_packing_efficiency():
    sprites = [Sprite('a', Image.new('RGBA', (10, 10))), Sprite('b', Image.new('RGBA', (10, 10)))]
    first = render_atlas(0, Layout([Placement(0, 0, 0, 10, 10, 0)], [], 20, 10, 200), sprites)
    second = render_atlas(1, Layout([Placement(1, 0, 0, 10, 10, 1)], [], 10, 10, 100), sprites)

    assert packing_efficiency([first, second]) == 200 / 300
    assert packing_efficiency([]) == 0.0
