import constants
from tearcloth.Vec2 import Vec2


class Particle:
    def __init__(self, pos, friction=constants.CLOTH_FRICTION,
                 elasticity=constants.SLIDERS["elasticity"][2],
                 drag_force=constants.SLIDERS["drag_force"][2], pinned=False):
        self.pos = pos.copy() if isinstance(pos, Vec2) else Vec2(pos[0], pos[1])
        # Verlet history: velocity is implied by pos - prev_pos
        self.prev_pos = self.pos.copy()
        # per-step force accumulator, cleared at the end of every update
        self.vel = Vec2(0.0, 0.0)

        self.friction = float(friction)
        self.elasticity = float(elasticity)
        self.drag_force = float(drag_force)

        self.pinned = bool(pinned)
        self.active = True
        self.highlighted = False

    def update(self, pointer, tunables, dt, width, height, offset=(0.0, 0.0)):
        """
        Advance the particle by one frame using Verlet integration.

        Pointer interaction is applied before integrating: dragging moves
        `prev_pos` so the drag turns into velocity on this step, Ctrl pins,
        and the secondary button deactivates particles inside the focus area.
        """
        self.highlighted = False
        self.friction = tunables.friction
        self.elasticity = tunables.elasticity

        if self.pinned:
            # Pinned particles only follow the window when it is resized.
            self.pos.x += offset[0]
            self.pos.y += offset[1]
            self.prev_pos.set(self.pos.x, self.pos.y)
            return

        dist_sq = self.pos.distance_sq(pointer.pos)

        tear = tunables.tear_distance
        if pointer.dragging and dist_sq < tear * tear:
            drag = pointer.displacement().clamped(self.elasticity)
            self.prev_pos.set(self.pos.x - drag.x * self.drag_force,
                              self.pos.y - drag.y * self.drag_force)

        if pointer.ctrl_down and dist_sq < constants.PIN_DISTANCE * constants.PIN_DISTANCE:
            self.pinned = True

        focus = tunables.focus_radius(pointer.focus_radius)
        if dist_sq < focus * focus:
            self.highlighted = True
            if pointer.right_down:
                self.active = False

        # Holding the primary button raises the drag force above the slider
        # value; pointer.force already grows with the hold time.
        if pointer.left_down:
            self.increase_force(tunables.drag_force, pointer.force, tunables.max_drag_force)
        else:
            self.drag_force = tunables.drag_force

        self.vel.y += tunables.gravity

        x, y = self.pos.x, self.pos.y
        dt2 = dt * dt
        self.pos.x = x + (x - self.prev_pos.x) * self.friction + self.vel.x * dt2
        self.pos.y = y + (y - self.prev_pos.y) * self.friction + self.vel.y * dt2
        self.prev_pos.set(x, y)

        self._apply_boundary_constraints(width, height)

        self.vel.set(0.0, 0.0)

    def increase_force(self, base, force, max_drag_force):
        self.drag_force = min(base + force, max_drag_force)

    def _apply_boundary_constraints(self, width, height):
        # Clamp to the canvas and drop the residual velocity on that axis
        # so the particle rests on the border instead of bouncing.
        if self.pos.x > width:
            self.pos.x = float(width)
            self.prev_pos.x = self.pos.x
        elif self.pos.x < 0.0:
            self.pos.x = 0.0
            self.prev_pos.x = self.pos.x

        if self.pos.y > height:
            self.pos.y = float(height)
            self.prev_pos.y = self.pos.y
        elif self.pos.y < 0.0:
            self.pos.y = 0.0
            self.prev_pos.y = self.pos.y

    def __repr__(self):
        return (f"Particle(pos=({self.pos.x:.2f}, {self.pos.y:.2f}), "
                f"prev=({self.prev_pos.x:.2f}, {self.prev_pos.y:.2f}), "
                f"pinned={self.pinned}, active={self.active})")

    def __str__(self):
        return self.__repr__()
