VIRTUAL_WIDTH = 800
VIRTUAL_HEIGHT = 600
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
FPS = 60

# Per-frame units: one tick per rendered frame.
ROTATION_SPEED = 0.1  # radians/frame
THRUST_POWER = 0.1
PROJECTILE_SPEED = 5
PROJECTILE_LIFESPAN = 60  # frames
SHOOT_INTERVAL = 15  # frames

CRAFT_RADIUS = 15
PROJECTILE_RADIUS = 2

OBSTACLE_RADII = {
    "large": 40,
    "medium": 20,
    "small": 10,
}
OBSTACLE_SCORES = {
    "large": 20,
    "medium": 50,
    "small": 100,
}
OBSTACLE_POINTS = 10
OBSTACLE_JITTER = 0.5
WAVE_DRIFT = 1.0
FRAGMENT_DRIFT = 2.0

STARTING_LIVES = 3
WAVE_BASE_COUNT = 3
SPAWN_SAFE_RADIUS = 100
SPAWN_ATTEMPTS = 60

CRAFT_SHAPE = [(0, -10), (5, 10), (-5, 10)]
EXHAUST_SHAPE = [(-3, 10), (0, 15), (3, 10)]

JOY_AXIS_X = 0
JOY_AXIS_Y = 1
JOY_AXIS_DEADZONE = 0.5
JOY_FIRE_BUTTON = 0


COLORS = {
    "bg": (0, 0, 0),
    "craft": (255, 255, 255),
    "exhaust": (255, 190, 120),
    "projectile": (255, 255, 255),
    "obstacle": (255, 255, 255),
    "ui": (255, 255, 255),
    "warning": (255, 140, 140),
}
