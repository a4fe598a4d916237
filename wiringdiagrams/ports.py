# -*- coding: utf-8 -*-

"""
Lists of ports tagged with an algebraic theory, the objects in categories of
wiring diagrams.

Summary
-------

.. autosummary::
    :template: class.rst
    :nosignatures:
    :toctree:

    Theory
    Ports

Example
-------
>>> A, B = Ports(['x']), Ports(['y', 'z'])
>>> assert A @ B == Ports(['x', 'y', 'z'])
>>> assert A ** 3 == A @ A @ A
>>> assert A ** 0 == Ports() == Ports.unit()
>>> print(A @ B)
x @ y @ z
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

from wiringdiagrams import messages
from wiringdiagrams.utils import AxiomError, assert_isinstance, factory_name


class Theory(Enum):
    """
    The algebraic theory a category of wiring diagrams is considered in.

    The theory decides how diagonals (copying and deleting) and codiagonals
    (merging and creating) are represented, see
    :data:`wiringdiagrams.algebraic.DIAGONALS`.
    """
    UNTYPED = "untyped"
    SYMMETRIC_MONOIDAL = "symmetric monoidal"
    DIAGONAL = "diagonal"
    CARTESIAN = "cartesian"
    CODIAGONAL = "codiagonal"
    COCARTESIAN = "cocartesian"
    BIDIAGONAL = "bidiagonal"
    BIPRODUCT = "biproduct"
    COMPACT_CLOSED = "compact closed"

    def __repr__(self):
        return f"{type(self).__name__}.{self.name}"


class Ports:
    """
    A list of port values with :meth:`Ports.tensor` as concatenation.

    Parameters:
        inside : The port values, these can be of any type.
        theory : The theory the ports live in.

    Note
    ----
    Indexing with an integer gives a port value back, slicing gives ports.

    >>> A = Ports(['x', 'y', 'z'], Theory.CARTESIAN)
    >>> assert A[0] == 'x'
    >>> assert A[1:] == Ports(['y', 'z'], Theory.CARTESIAN)
    """
    def __init__(self, inside: Iterable[Any] = (),
                 theory: Theory = Theory.UNTYPED):
        assert_isinstance(theory, Theory)
        self.inside, self.theory = tuple(inside), theory

    @classmethod
    def unit(cls, theory: Theory = Theory.UNTYPED) -> Ports:
        """
        The empty list of ports of a given theory, i.e. the monoidal unit.

        Parameters:
            theory : The theory of the unit.
        """
        return cls((), theory)

    def tensor(self, *others: Ports) -> Ports:
        """
        Concatenation of lists of ports, called with :code:`@`.

        Parameters:
            others : The other ports to concatenate, of the same theory.

        Example
        -------
        >>> A = Ports(['x'], Theory.BIPRODUCT)
        >>> assert A.tensor() == A
        >>> A @ Ports(['y'])
        Traceback (most recent call last):
        ...
        wiringdiagrams.utils.AxiomError: Cannot mix ports of theories \
Theory.BIPRODUCT and Theory.UNTYPED.
        """
        for other in others:
            assert_isinstance(other, Ports)
            if other.theory != self.theory:
                raise AxiomError(messages.THEORY_MISMATCH.format(
                    repr(self.theory), repr(other.theory)))
        inside = self.inside + tuple(x for A in others for x in A.inside)
        return type(self)(inside, self.theory)

    def __eq__(self, other):
        return isinstance(other, Ports) and (self.theory, self.inside)\
            == (other.theory, other.inside)

    def __hash__(self):
        return hash((self.theory, self.inside))

    def __repr__(self):
        theory = "" if self.theory == Theory.UNTYPED\
            else f", theory={repr(self.theory)}"
        return factory_name(type(self)) + f"({repr(self.inside)}{theory})"

    def __str__(self):
        return ' @ '.join(map(str, self.inside)) or type(self).__name__ + '()'

    def __len__(self):
        return len(self.inside)

    def __iter__(self):
        return iter(self.inside)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return type(self)(self.inside[key], self.theory)
        return self.inside[key]

    def __pow__(self, n_times: int) -> Ports:
        assert_isinstance(n_times, int)
        return self.unit(self.theory).tensor(*n_times * [self])

    def __matmul__(self, other):
        if not isinstance(other, Ports):
            return NotImplemented
        return self.tensor(other)
