# -*- coding: utf-8 -*-

""" wiringdiagrams configuration. """

# Number of copies made by mcopy and mmerge when no arity is given.
DEFAULT_ARITY = 2

# Whether add_wire checks that source and target ports hold equal values.
VALIDATE_PORT_VALUES = True

# Default drawing parameters.
DRAWING_DEFAULT = {
    "k": .25,
    "fontsize": 12,
    "box_size": 600,
    "junction_size": 60,
    "sentinel_size": 0,
    "facecolor": "white",
    "edgecolor": "black",
    "junction_color": "black",
}
