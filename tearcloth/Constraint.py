import math

import constants


class Constraint:
    """
    Stick between two particles of the cloth arena.

    Endpoints are stored as indices into the cloth's particle list, so the
    same particle can be shared by up to four constraints.
    """
    def __init__(self, p1, p2, length):
        self.p1 = int(p1)
        self.p2 = int(p2)
        self.length = float(length)
        self.active = True
        self.selected = False

    def endpoints(self, particles):
        return particles[self.p1], particles[self.p2]

    def is_live(self, particles):
        a, b = self.endpoints(particles)
        return a.active and b.active

    def update(self, particles, pointer, tear_distance=constants.CONSTRAINT_TEAR_DISTANCE, eps=1e-9):
        """
        Apply one relaxation step. Returns True when the stick tears.

        Only stretching is resisted. A compressed stick is left alone, and so
        is a stick whose endpoints coincide.
        """
        a, b = self.endpoints(particles)
        self.selected = a.highlighted and b.highlighted

        dx = a.pos.x - b.pos.x
        dy = a.pos.y - b.pos.y
        dist = math.sqrt(dx * dx + dy * dy)
        if dist < eps or dist <= self.length:
            return False

        if pointer.dragging and dist > tear_distance:
            self.active = False
            return True

        diff = (self.length - dist) / dist
        mul = diff * 0.4 * (1.0 - self.length / dist)
        offset_x, offset_y = dx * mul, dy * mul

        if not a.pinned:
            a.pos.x += offset_x
            a.pos.y += offset_y
        if not b.pinned:
            b.pos.x -= offset_x
            b.pos.y -= offset_y
        return False

    def __repr__(self):
        return f"<{self.__class__.__name__} p1={self.p1} p2={self.p2} length={self.length}>"

    def __str__(self):
        return self.__repr__()
