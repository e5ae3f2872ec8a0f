"""Layout constants and color definitions."""

# Timing
FPS = 60
SPIN_FPS = 60
SPIN_SECONDS = 5.0

# Layout dimensions
WHEEL_AREA = 520
SIDEBAR_W = 180
STATUS_H = 36

SCREEN_W = WHEEL_AREA + SIDEBAR_W
SCREEN_H = WHEEL_AREA + STATUS_H

WHEEL_CX = WHEEL_AREA // 2
WHEEL_CY = WHEEL_AREA // 2
WHEEL_RADIUS = 220
WHEEL_INNER = 30

# Wedges are drawn as polygons with this many degrees per edge
ARC_STEP = 3

# Colors
BG_COLOR = (20, 20, 30)
SIDEBAR_BG = (25, 25, 38)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)
WIN_COLOR = (255, 220, 90)
POINTER_COLOR = (230, 60, 60)

# Spin presets selectable with 1-4
EASING_NAMES = ["Power3.easeOut", "ease_out_cubic", "Sine.easeInOut", "linear"]
