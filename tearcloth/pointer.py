import constants
from .Vec2 import Vec2


class PointerState:
    """
    Mouse state fed to the cloth once per frame.

    The input layer mutates it as events arrive; the cloth only reads it.
    `focus_radius` is adjusted by scrolling and always stays inside
    [min_focus, max_focus].
    """
    def __init__(self, focus_radius=constants.DEFAULT_FOCUS_AREA,
                 min_focus=constants.MIN_FOCUS_AREA, max_focus=constants.MAX_FOCUS_AREA):
        self.pos = Vec2(0.0, 0.0)
        self.prev_pos = Vec2(0.0, 0.0)
        self.force = 0.0
        self.min_focus = float(min_focus)
        self.max_focus = float(max_focus)
        self._focus_radius = 0.0
        self.focus_radius = focus_radius

        self.left_down = False
        self.right_down = False
        self.dragging = False
        self.ctrl_down = False

    @property
    def focus_radius(self):
        return self._focus_radius

    @focus_radius.setter
    def focus_radius(self, value):
        self._focus_radius = max(self.min_focus, min(self.max_focus, float(value)))

    def update_position(self, x, y):
        self.pos.set(x, y)

    def end_frame(self):
        # the next frame measures movement from here
        self.prev_pos.set(self.pos.x, self.pos.y)

    def displacement(self):
        """Pointer movement since the previous frame."""
        return self.pos - self.prev_pos

    def scroll(self, delta):
        self.focus_radius = self._focus_radius + delta
        return self._focus_radius

    def press_left(self, ctrl=False):
        self.left_down = True
        if ctrl:
            self.ctrl_down = True

    def press_right(self):
        self.right_down = True

    def set_dragging(self, dragging):
        self.dragging = bool(dragging)

    def set_ctrl_down(self, status):
        self.ctrl_down = bool(status)

    def set_force(self, force):
        self.force = float(force)

    def reset_force(self):
        self.force = 0.0

    def release(self):
        # a release ends every interaction at once
        self.left_down = False
        self.right_down = False
        self.dragging = False
        self.ctrl_down = False
        self.reset_force()

    def __repr__(self):
        return (f"<PointerState pos={self.pos} focus={self._focus_radius:.1f} "
                f"left={self.left_down} right={self.right_down} "
                f"dragging={self.dragging} ctrl={self.ctrl_down}>")
