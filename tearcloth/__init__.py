from .Vec2 import Vec2
from .Particle import Particle
from .Constraint import Constraint
from .pointer import PointerState
from .tunables import Tunables
from .cloth import Cloth

__all__ = ['Vec2', 'Particle', 'Constraint', 'PointerState', 'Tunables', 'Cloth']
