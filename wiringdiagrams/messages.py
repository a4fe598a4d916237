# -*- coding: utf-8 -*-

"""
wiringdiagrams error messages.
"""

TYPE_ERROR = "Expected {}, got {} instead."
INCOMPATIBLE_DOMAINS = "Incompatible domains {} and {}."
THEORY_MISMATCH = "Cannot mix ports of theories {} and {}."
PORT_VALUE_MISMATCH = "Cannot wire {} of value {!r} to {} of value {!r}."
PORT_OUT_OF_RANGE = "Node {} has no {} port {}, it has {} of them."
WRONG_DIRECTION = "Expected a wire from an output to an input, got {} => {}."
NO_SUCH_WIRE = "Diagram has no wire {}."
NOT_A_BOX = "Expected the id of an interior box, got {} instead."
WRONG_PERMUTATION = "Expected a permutation of length {}, got {}."
UNDEFINED_OPERATION = "Operation {} is not defined for theory {}."
WRONG_SUBSTITUTE = "Cannot substitute {} for box {} with {} inputs and "\
                   "{} outputs."
SUBSTITUTE_LENGTHS = "Expected as many substitutes as boxes, "\
                     "got {} boxes and {} substitutes."
PASS_THROUGH_CYCLE = "Substitution of boxes {} creates a cycle of "\
                     "pass-through wires."
OVERLAPPING_COMPONENTS = "Box {} belongs to more than one component."
HETEROGENEOUS_JUNCTIONS = "Cannot merge adjacent junctions {} "\
                          "with distinct values {}."
OCOMPOSE_LENGTHS = "Expected {} diagrams to substitute, got {} instead."
OCOMPOSE_INDEX = "Expected a box index in range({}), got {} instead."
OCOMPOSE_ARGS = "Expected ocompose(f, gs) or ocompose(f, i, g), "\
                "got {} arguments."
NEGATIVE_ARITY = "Expected a non-negative arity, got {} instead."
