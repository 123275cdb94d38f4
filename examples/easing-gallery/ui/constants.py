"""Layout constants and color definitions."""
from tick_ease import FAMILIES

# Timing
FPS = 60
TPS = 20

# Layout dimensions
LANE_COUNT = 4
LANE_H = 120
LABEL_W = 150
CURVE_W = 140
TRACK_W = 440
SIDEBAR_W = 150
STATUS_H = 36

SCREEN_W = LABEL_W + CURVE_W + TRACK_W + SIDEBAR_W
SCREEN_H = LANE_H * LANE_COUNT + STATUS_H

# Orb
ORB_RADIUS = 10
TRACK_PAD = 20  # padding inside the track

# Duration bounds (ticks)
DEFAULT_DURATION = 60
MIN_DURATION = 20
MAX_DURATION = 120
DURATION_STEP = 20

# Colors
BG_COLOR = (20, 20, 30)
LANE_BG = (30, 30, 45)
LANE_BORDER = (50, 50, 70)
CURVE_BG = (15, 15, 25)
TRACK_BG = (25, 25, 40)
TRACK_RAIL = (60, 60, 80)
SIDEBAR_BG = (25, 25, 38)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)
STATE_COMPLETED = (255, 255, 255)

# Variant -> color (None is linear)
VARIANT_COLORS: dict[str | None, tuple[int, int, int]] = {
    None: (0, 220, 220),
    "in": (255, 160, 40),
    "out": (60, 220, 80),
    "in_out": (220, 80, 220),
}

# Families selectable with the number keys, linear always has lane 0
FAMILY_KEYS = [f for f in FAMILIES if f != "linear"]
