# settings.py

# Window / display
WINDOW_WIDTH = 960
WINDOW_HEIGHT = 540
FPS = 60
TITLE = "Day/Night Cycle"

# Colors
COLOR_BG = (15, 15, 20)
COLOR_CLOCK_TEXT = (235, 235, 220)
COLOR_CLOCK_SHADOW = (10, 10, 14)

# Sky palette (RGB)
SKY_NIGHT = (12, 16, 40)
SKY_DAWN = (235, 140, 90)
SKY_DAY = (110, 170, 235)

# Day/night cycle
ENVIRONMENT_LIGHT_COMPONENT = "EnvironmentLight"
DAY_LENGTH_SECONDS = 60.0  # one full day per minute of frame time
ATTACH_DELAY_SECONDS = 1.0

# Telemetry
TELEMETRY_SAMPLE_EVERY_N_FRAMES = 30
