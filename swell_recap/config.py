"""Configuration constants for the daily summary engine."""

# Hourly channel names (Open-Meteo naming)
TIME_KEY = "time"
SWELL_TIERS = {
    "primary": "swell_wave",
    "secondary": "secondary_swell_wave",
    "tertiary": "tertiary_swell_wave",
}
WAVE_HEIGHT = "wave_height"
WIND_SPEED = "wind_speed_10m"
WIND_DIRECTION = "wind_direction_10m"
WATER_TEMPERATURE = "sea_surface_temperature"
SEA_LEVEL = "sea_level_height_msl"

MARINE_CHANNELS = [
    "wave_height",
    "wave_direction",
    "wave_period",
    "swell_wave_height",
    "swell_wave_direction",
    "swell_wave_period",
    "secondary_swell_wave_height",
    "secondary_swell_wave_direction",
    "secondary_swell_wave_period",
    "tertiary_swell_wave_height",
    "tertiary_swell_wave_direction",
    "tertiary_swell_wave_period",
    "sea_surface_temperature",
    "sea_level_height_msl",
]
WIND_CHANNELS = [WIND_SPEED, WIND_DIRECTION]

# Rounding of height-like outputs (metres, seconds, degrees C, km/h)
VALUE_DECIMALS = 3

# Direction histogram: 36 bins of 10 degrees, keyed by bin centre (0, 10, ..., 350)
DIRECTION_BIN_WIDTH = 10

# Tide turning points kept per day for each of highs and lows
MAX_TIDE_EVENTS = 2
# Fewer date-matching sea-level samples than this yields no tide events
MIN_TIDE_SAMPLES = 3
