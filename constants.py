# --- Window ---
WIDTH, HEIGHT = 1024, 640
FPS = 60
# fixed nominal timestep; the cloth is not advanced by wall-clock time
DT = 0.022

# --- Colors ---
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
BACKGROUND = (242, 242, 242)
CLOTH_COLOR = (154, 154, 154)
FOCUS_COLOR = (85, 0, 0)
PIN_COLOR = (217, 3, 104)

# --- Cloth ---
CLOTH_SPACING = 6
CLOTH_HEIGHT_RATIO = 0.33   # cloth height relative to the window
CLOTH_TOP_RATIO = 0.2       # vertical anchor relative to the window
CLOTH_FRICTION = 0.98
PIN_EVERY = 10              # one pinned column per tenth of the cloth width

# --- Interaction ---
PIN_DISTANCE = 4
CONSTRAINT_TEAR_DISTANCE = 150
DEFAULT_FOCUS_AREA = 50
MIN_FOCUS_AREA = 30
MAX_FOCUS_AREA = 120
SCROLL_STEP = 5
FORCE_RATE = 5

# --- Sliders (min, default, max) ---
SLIDERS = {
    'drag_force': ("Dragging force", 1.1, 2.0, 15.0),
    'gravity': ("Gravity", 100.0, 250.0, 500.0),
    'elasticity': ("Cloth elasticity", 10.0, 30.0, 50.0),
    'friction': ("Cloth friction", 0.95, 0.98, 0.99),
    'tear_distance': ("Tear distance", 5.0, 15.0, 50.0),
}

HELP_COMMANDS = [
    ("F1", "Toggle the quick help panel"),
    ("Space", "Redraw the cloth"),
    ("Right click", "Tear the cloth at mouse position"),
    ("Click & hold", "Increase cloth tearing force"),
    ("Scroll Up/Down", "Increase/decrease cloth tearing area"),
    ("CTRL+click", "Pin the particle at mouse position"),
]
