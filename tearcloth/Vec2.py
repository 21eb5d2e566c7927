import math


class Vec2:
    __slots__ = ('x', 'y')

    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def length(self):
        return math.hypot(self.x, self.y)

    def distance_sq(self, other):
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def set(self, x, y):
        """Overwrite both components in place."""
        self.x = float(x)
        self.y = float(y)

    def clamped(self, bound):
        """Return a copy with each component limited to [-bound, bound]."""
        return Vec2(max(-bound, min(bound, self.x)), max(-bound, min(bound, self.y)))

    def copy(self):
        return Vec2(self.x, self.y)

    def to_tuple(self):
        return (self.x, self.y)

    def __eq__(self, other):
        if other is None or not isinstance(other, Vec2):
            return False
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Vec2({self.x:.2f}, {self.y:.2f})"
