# colorguide/palette.py
WHITE = "White"
BLACK = "Black"
GREY = "Grey"
BROWN = "Brown"
ORANGE = "Orange"

# ascending hue, ties in nearest-hue search resolve to the earlier entry
HUE_PALETTE = (
    ("Red",         0),
    ("Orange",      30),
    ("Yellow",      60),
    ("YellowGreen", 90),
    ("Green",       120),
    ("GreenCyan",   150),
    ("Cyan",        180),
    ("BlueCyan",    210),
    ("Blue",        240),
    ("Violet",      270),
    ("Magenta",     300),
    ("Rose",        330),
)

PREFIX_DARK = "dark"
PREFIX_LIGHT = "light"
PREFIX_VERY_LIGHT = "very light"
PREFIX_GREYISH = "greyish"
