import pytest
from PIL import Image

from spritepacker import Sprite


@pytest.fixture
def make_sprites():
    """Factory turning a list of (width, height) into uniquely named solid sprites."""
    def factory(sizes, prefix='sprite'):
        sprites = []
        for i, (width, height) in enumerate(sizes):
            color = ((i * 53) % 256, (i * 97) % 256, (i * 151) % 256, 255)
            sprites.append(Sprite(f"{prefix}_{i}", Image.new('RGBA', (width, height), color)))
        return sprites
    return factory
