# -*- coding: utf-8 -*-

""" wiringdiagrams: the Python toolkit for computing with wiring diagrams. """

from wiringdiagrams import (
    ports,
    core,
    algebraic,
    drawing,
    utils,
    config,
    messages,
)

__version__ = '0.1.0'
