# Surface constants
WIDTH, HEIGHT = 300, 300                # Drawing surface dimensions in scene units (pixels)
X_OFFSET, Y_OFFSET = 10, 100            # Offset applied to the literal house geometry

# Time constants
FRAME_DELAY = 100                       # Timer period between ticks in milliseconds
TIME_SPEED = 0.01                       # Time of day advanced per tick
NIGHT_START = 0.3                       # Time of day above which it is night
LIGHTS_OUT = 0.8                        # Time of day at which the house lights go out
OVERLAY_DIVISOR = 1.5                   # Darkness overlay alpha is time / OVERLAY_DIVISOR

# Smoke constants
SMOKE_VEL_X = 0.8                       # Horizontal drift per tick in pixels
SMOKE_VEL_Y = -0.8                      # Vertical drift per tick in pixels
SMOKE_RANDOMNESS = 0.4                  # Magnitude of the per-puff jitter per tick
SMOKE_RADIUS = 5                        # Divisor turning a puff's age into its radius
SMOKE_SPAWN_X = 150                     # Newest puff past this x triggers a new puff
SMOKE_RETIRE_X = WIDTH                  # Oldest puff past this x is removed
SMOKE_POINTS = (123, 126, 128)          # Horizontal offsets of a new puff
SMOKE_EXTRA_POINTS = (131, 133)         # Offsets added to a new puff on a coin flip
SMOKE_BAND = (153, 147)                 # Vertical offsets shared by a new puff's points
SMOKE_VISIBILITY_STEP = 1.5             # Point i is visible once age > i * SMOKE_VISIBILITY_STEP
SMOKE_RISE = 2                          # Extra vertical lift per point index in pixels
SMOKE_GRADIENT_END = 290                # Smoke fades from grey to white over x = 0..290
