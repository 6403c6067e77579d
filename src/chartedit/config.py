"""Global constants and default settings."""

# Timing defaults for newly created difficulties
DEFAULT_TEMPO = 120.0  # beats per minute
DEFAULT_OFFSET = 0.0  # seconds, wall-clock time of beat 0

# Reproduce the old beat -> time seeding (first point's beat used as the
# starting tempo). Every positive beat then converts to NaN.
LEGACY_TIME_SEED = False

# Lanes are stored as unsigned bytes
MIN_LANE = 0
MAX_LANE = 255

# Playback speed limits
MIN_TEMPO_SCALE = 0.25
MAX_TEMPO_SCALE = 2.0
