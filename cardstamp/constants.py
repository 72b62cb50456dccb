import math

ALL_NAME = "all"
UNBOUNDED_NAMES = {"unbounded", "infinite"}
CLOCKWISE_NAME = "clockwise"
COUNTERCLOCKWISE_NAME = "counterclockwise"

ROTATION_ANGLES = {
    CLOCKWISE_NAME: 0.5 * math.pi,
    COUNTERCLOCKWISE_NAME: 1.5 * math.pi,
}

# Keys repeated per card by the "expand" need.
EXPANDING_KEYS = (
    "x",
    "y",
    "width",
    "height",
    "color",
    "fill_color",
    "stroke_color",
    "file",
    "text",
    "font_size",
    "alpha",
    "angle",
)

# Keys that are never repeated per card.
NON_EXPANDING_KEYS = {"layout", "range"}

DEFAULT_COLUMNS = 5
DEFAULT_DIR = "_output"
DEFAULT_CONFIG_NAME = "config.yml"
LAYOUT_EXTENDS_KEY = "extends"
LAYOUT_SUFFIXES = (".yml", ".yaml", ".json")
DEFAULT_COLOR = "black"
