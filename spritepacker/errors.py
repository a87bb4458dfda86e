class SpritePackerError(Exception):
    """Base class for every error raised while building atlases."""

    pass


class InvalidConfigError(SpritePackerError, ValueError):
    """Indicates a packer setting is out of range or unknown."""

    pass


class EmptyInputError(SpritePackerError):
    """Indicates there were no sprites to pack."""

    def __init__(self):
        super().__init__("No sprites to pack")


class DuplicateSpriteError(SpritePackerError):
    """Indicates two input sprites share the same name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Sprite name '{name}' is used more than once")


class SpriteTooLargeError(SpritePackerError):
    """Indicates a sprite can never fit an empty atlas of the maximum size.

    The padded size includes padding and extrusion on both sides.
    """

    def __init__(self, name: str, width: int, height: int, padded_width: int, padded_height: int,
                 max_width: int, max_height: int):
        self.name = name
        self.width = width
        self.height = height
        self.padded_width = padded_width
        self.padded_height = padded_height
        self.max_width = max_width
        self.max_height = max_height
        super().__init__(
            f"Sprite '{name}' ({width}×{height}, {padded_width}×{padded_height} with padding "
            f"and extrusion) exceeds maximum atlas size ({max_width}×{max_height})"
        )


class PackingCancelled(SpritePackerError):
    """Raised when the caller's cancel event is set during a build.

    This is not a fault: callers should discard any partial state.
    """

    def __init__(self):
        super().__init__("Packing cancelled")
