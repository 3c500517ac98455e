"""Default parameter values for the device map.

These constants are used as `Field(default=...)` values in the Pydantic
config schemas. They live in the schemas layer so that `schemas` does not
depend on `core`.

All screen values are CSS pixels. Simulation positions are in simulation
units and are multiplied by DEFAULT_MAP_SCALE before placement.
"""

# =============================================================================
# PROJECTION
# =============================================================================
DEFAULT_MAP_SCALE = 100.0  # px per simulation unit

# Sprite colors, assigned by index among rendered devices
DEFAULT_PALETTE = ["red", "orange", "yellow", "green", "blue", "indigo", "purple"]

DEFAULT_SPRITE_SIZE = "30px"

# =============================================================================
# BACKGROUND PATTERNS
# =============================================================================
# pattern0: grid, pattern1: polar, pattern2: hexagonal (see vis/assets/style.css)
DEFAULT_PATTERN_COUNT = 3

# =============================================================================
# ISOMETRIC PROJECTION
# =============================================================================
ISOMETRIC_TRANSFORM = (
    "perspective(200rem) rotateX(60deg) rotateY(0deg) rotateZ(0deg) "
    "scale3d(0.8,0.8,0.8)"
)
FLAT_TRANSFORM = "none"
DEFAULT_ISOMETRIC_TOP_PX = 250
FLAT_TOP_PX = 0

# =============================================================================
# PLAYBACK
# =============================================================================
DEFAULT_PLAYBACK_INTERVAL = 0.5  # seconds between recorded frames
