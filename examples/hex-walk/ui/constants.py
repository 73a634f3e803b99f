"""Layout constants and fallback colors."""

# Timing
FPS = 60

# Layout dimensions
SCREEN_W = 1366
SCREEN_H = 768

# Map
MAP_RADIUS = 24

# Player marker, as a fraction of the hex radius
PLAYER_SIZE = 0.45
OUTLINE_W = 2

# Colors used when no settings file is found
BG_COLOR = (16, 16, 20)
FG_COLOR = (200, 200, 210)
PLAYER_COLOR = (224, 160, 48)
PLAYER_OUTLINE = (255, 255, 255)
TEXT_COLOR = (200, 200, 210)
