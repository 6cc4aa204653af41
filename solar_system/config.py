"""Tuning knobs for the solar system viewer."""

WINDOW_TITLE = "Solar System"

ASSET_DIR = "image"

# Camera
CAMERA_FOV = 65
CAMERA_NEAR = 0.1
CAMERA_FAR = 2000
CAMERA_POSITION = (-60.0, 100.0, 180.0)
DAMPING_FACTOR = 0.05
ROTATE_SPEED = 1.0
ZOOM_STEP = 0.95
PAN_SPEED = 1.0
MIN_DISTANCE = 20.0
MAX_DISTANCE = 700.0

# Bodies
SUN_RADIUS = 15
SUN_SPIN_RATE = 0.2
SUN_EMISSIVE_COLOR = (1.0, 1.0, 0.2)
ORBIT_SPEED_MULTIPLIER = 40
SUN_SEGMENTS = 64
PLANET_SEGMENTS = 48
RING_SEGMENTS = 64
ORBIT_SEGMENTS = 100
ORBIT_OPACITY = 0.3

# Backgrounds
SKYBOX_SIZE = 1800
DAY_SKY_SCALE = 1700

# Control panel ranges
SPEED_RANGE = (0.0, 5.0)
ORBIT_RANGE = (0.0, 2.0)
SPIN_RANGE = (0.0, 1.0)
