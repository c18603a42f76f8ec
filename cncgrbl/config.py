"""Build-time settings for the controller."""

GRBL_VERSION = "1.0"

BAUD_RATE = 115200

# Raw G-code line queue
GCODE_BUFFER_SIZE = 16
GCODE_LINE_MAX_LENGTH = 100

# Motion planner queue
PLANNER_BUFFER_SIZE = 16

# Machine defaults
FEEDRATE_DEFAULT = 1000.0
DEFAULT_MODE_ABSOLUTE = True
STEPS_PER_MM_X = 8
STEPS_PER_MM_Y = 10
STEPS_PER_MM_Z = 200