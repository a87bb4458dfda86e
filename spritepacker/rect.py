class Rectangle:
    """Represents an axis-aligned rectangle with width, height, and position (x, y)."""
    def __init__(self, width: int, height: int, x: int = 0, y: int = 0):
        self.width = width
        self.height = height
        self.x = x
        self.y = y

    def __repr__(self):
        return f"Rectangle({self.width}×{self.height} at ({self.x},{self.y}))"

    def __eq__(self, other):
        if not isinstance(other, Rectangle):
            return NotImplemented
        return (self.x, self.y, self.width, self.height) == (other.x, other.y, other.width, other.height)

    def __hash__(self):
        return hash((self.x, self.y, self.width, self.height))

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def intersects(self, other: 'Rectangle') -> bool:
        """Check if the interiors of the two rectangles overlap.

        Rectangles that only share an edge do not intersect.
        """
        return not (
            self.right <= other.x or
            self.bottom <= other.y or
            self.x >= other.right or
            self.y >= other.bottom
        )

    def contains(self, other: 'Rectangle') -> bool:
        """Check if other lies completely inside this rectangle (edges inclusive)."""
        return (
            self.x <= other.x and
            self.y <= other.y and
            self.right >= other.right and
            self.bottom >= other.bottom
        )

    def area(self) -> int:
        """Get the area of the rectangle."""
        return self.width * self.height
