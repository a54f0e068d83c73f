# Panel settings
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 800
WINDOW_TITLE = "Raycaster"
# Upper bound on main loop iterations per second (the redraw cadence is set by the tick timer)
FPS = 120

# Redraw timer
# Interval between redraw ticks in milliseconds
TICK_INTERVAL_MS = 20

# Off-screen buffer settings
# Buffers are never smaller than this, whatever size the host reports
MIN_BUFFER_WIDTH = 30
MIN_BUFFER_HEIGHT = 30

# Cursor marker
CURSOR_RADIUS = 5

# Walls
# Stroke width of wall segments in pixels
WALL_WIDTH = 1

# Colors
BACKGROUND_COLOR = (255, 255, 255)
CURSOR_COLOR = (255, 0, 0)
WALL_COLOR = (0, 0, 0)

# Logging
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
