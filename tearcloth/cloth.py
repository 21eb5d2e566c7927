import logging

import numpy as np

import constants
from .Constraint import Constraint
from .Particle import Particle
from .Vec2 import Vec2
from .tunables import Tunables

logger = logging.getLogger(__name__)


class Cloth:
    def __init__(self, width, height, spacing=constants.CLOTH_SPACING, friction=constants.CLOTH_FRICTION):
        """
        A tearable cloth made of a grid of particles joined by sticks.

        :param width: Cloth width in pixels.
        :param height: Cloth height in pixels.
        :param spacing: Distance between neighbouring particles, also the rest length of every stick.
        :param friction: Velocity retention used by particles until the first update.
        """
        if spacing <= 0:
            raise ValueError(f"cloth spacing must be positive, got {spacing}")
        if width < 0 or height < 0:
            raise ValueError(f"cloth size must not be negative, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.spacing = int(spacing)
        self.friction = float(friction)

        self.particles: list[Particle] = []
        self.constraints: list[Constraint] = []
        self.initialized = False

    @property
    def columns(self):
        return self.width // self.spacing + 1

    @property
    def rows(self):
        return self.height // self.spacing + 1

    def init(self, start_x, start_y, tunables=None):
        """
        Build the particle grid with its top-left corner at (start_x, start_y).

        Does nothing on an already initialized cloth (resize handlers may call
        it before the first layout); use `reset` to rebuild. Returns True when
        a grid was built.
        """
        if self.initialized:
            logger.debug("cloth already initialized, skipping init")
            return False
        if tunables is None:
            tunables = Tunables.defaults()

        cols = self.columns
        rows = self.rows
        pin_every = max(1, (cols - 1) // constants.PIN_EVERY)

        def get_index(x, y):
            return y * cols + x

        for y in range(rows):
            for x in range(cols):
                pos = Vec2(start_x + x * self.spacing, start_y + y * self.spacing)
                p = Particle(pos, friction=self.friction, elasticity=tunables.elasticity,
                             drag_force=tunables.drag_force)

                # Link every particle to its upper and left neighbour, so the
                # first row and first column only receive links from others.
                index = get_index(x, y)
                if y != 0:
                    self.constraints.append(Constraint(get_index(x, y - 1), index, self.spacing))
                if x != 0:
                    self.constraints.append(Constraint(get_index(x - 1, y), index, self.spacing))

                if y == 0 and x % pin_every == 0:
                    p.pinned = True

                self.particles.append(p)

        self.initialized = True
        logger.info("cloth built: %dx%d particles, %d constraints",
                    cols, rows, len(self.constraints))
        return True

    def reset(self, start_x, start_y, tunables=None):
        """Discard the current grid and build a new one."""
        self.particles = []
        self.constraints = []
        self.initialized = False
        return self.init(start_x, start_y, tunables)

    def update(self, pointer, tunables, dt, width, height, offset=(0.0, 0.0)):
        """
        Advance the cloth by one frame.

        All particles are integrated first, then every live constraint gets a
        single relaxation step in creation order. Torn constraints, and those
        left with an inactive endpoint, are dropped after the pass.
        Returns the number of constraints removed.
        """
        particles = self.particles

        for p in particles:
            if p.active:
                p.update(pointer, tunables, dt, width, height, offset)

        removed = set()
        torn = 0
        for idx, c in enumerate(self.constraints):
            if not c.is_live(particles):
                removed.add(idx)
                continue
            if c.update(particles, pointer):
                removed.add(idx)
                torn += 1

        if removed:
            self.constraints = [c for idx, c in enumerate(self.constraints) if idx not in removed]
            logger.debug("removed %d constraints (%d torn), %d left",
                         len(removed), torn, len(self.constraints))
        return len(removed)

    def live_particles(self):
        return (p for p in self.particles if p.active)

    def live_constraints(self):
        particles = self.particles
        return (c for c in self.constraints if c.is_live(particles))

    def positions(self):
        """Particle positions as an (N, 2) float64 array."""
        if not self.particles:
            return np.empty((0, 2), dtype=np.float64)
        return np.array([p.pos.to_tuple() for p in self.particles], dtype=np.float64)

    def segments(self):
        """Endpoints of the live constraints as an (M, 2, 2) float64 array."""
        particles = self.particles
        segs = [(particles[c.p1].pos.to_tuple(), particles[c.p2].pos.to_tuple())
                for c in self.live_constraints()]
        if not segs:
            return np.empty((0, 2, 2), dtype=np.float64)
        return np.asarray(segs, dtype=np.float64)

    def selection(self):
        """Boolean mask of the focused constraints, aligned with `segments()`."""
        return np.fromiter((c.selected for c in self.live_constraints()), dtype=bool)

    def pinned_positions(self):
        """Positions of the live pinned particles as an (K, 2) array."""
        pinned = np.fromiter((p.pinned and p.active for p in self.particles), dtype=bool,
                             count=len(self.particles))
        return self.positions()[pinned]

    def snapshot(self):
        """Copy of the full cloth state as numpy arrays."""
        particles = self.particles
        n = len(particles)
        return {
            'pos': self.positions(),
            'prev_pos': np.array([p.prev_pos.to_tuple() for p in particles], dtype=np.float64).reshape(n, 2),
            'pinned': np.fromiter((p.pinned for p in particles), dtype=bool, count=n),
            'active': np.fromiter((p.active for p in particles), dtype=bool, count=n),
            'constraints': np.array([(c.p1, c.p2) for c in self.constraints], dtype=np.int64).reshape(-1, 2),
            'lengths': np.fromiter((c.length for c in self.constraints), dtype=np.float64,
                                   count=len(self.constraints)),
        }

    def __repr__(self):
        return (f"<{self.__class__.__name__} {self.columns}x{self.rows} "
                f"particles={len(self.particles)} constraints={len(self.constraints)}>")
