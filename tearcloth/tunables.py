import logging
from collections import namedtuple

import constants

logger = logging.getLogger(__name__)

_FIELDS = ('drag_force', 'max_drag_force', 'gravity', 'elasticity', 'friction',
           'tear_distance', 'min_focus_area', 'max_focus_area')


class Tunables(namedtuple('Tunables', _FIELDS)):
    """
    Immutable snapshot of the slider values for a single frame.

    The slider process may change its values at any time, so the main loop
    takes a fresh snapshot every frame and hands it to `Cloth.update`.
    """
    __slots__ = ()

    @classmethod
    def defaults(cls):
        sliders = constants.SLIDERS
        return cls(
            drag_force=sliders['drag_force'][2],
            max_drag_force=sliders['drag_force'][3],
            gravity=sliders['gravity'][2],
            elasticity=sliders['elasticity'][2],
            friction=sliders['friction'][2],
            tear_distance=sliders['tear_distance'][2],
            min_focus_area=float(constants.MIN_FOCUS_AREA),
            max_focus_area=float(constants.MAX_FOCUS_AREA),
        )

    @classmethod
    def from_shared(cls, shared, fallback=None):
        """
        Build a snapshot from the dict written by the slider process.

        Missing keys and values that do not convert to float keep the
        fallback value (the slider defaults unless given).
        """
        base = fallback if fallback is not None else cls.defaults()
        values = {}
        for name in _FIELDS:
            default = getattr(base, name)
            raw = shared.get(name, default)
            try:
                values[name] = float(raw)
            except (TypeError, ValueError):
                logger.warning("ignoring malformed tunable %s=%r", name, raw)
                values[name] = default
        return cls(**values)

    def focus_radius(self, requested):
        """Clamp a scroll-derived focus radius to the configured bounds."""
        return max(self.min_focus_area, min(self.max_focus_area, requested))


def slider_defaults():
    """Initial shared-dict content for the slider process."""
    return dict(Tunables.defaults()._asdict())
