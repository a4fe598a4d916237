# -*- coding: utf-8 -*-

""" wiringdiagrams utility functions. """

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import wraps
from typing import Any, Optional

from wiringdiagrams import messages


def factory_name(cls: type) -> str:
    """
    Returns a string describing a wiringdiagrams class.

    Example
    -------
    >>> from wiringdiagrams.core import Junction
    >>> assert factory_name(Junction) == "core.Junction"
    >>> assert factory_name(int) == "int"
    """
    module = cls.__module__.removeprefix('wiringdiagrams.')
    return f"{module}.{cls.__name__}".removeprefix('builtins.')


def assert_isinstance(object_, cls: type | tuple[type, ...]):
    """ Raise ``TypeError`` if ``object`` is not instance of ``cls``. """
    classes = cls if isinstance(cls, tuple) else (cls, )
    cls_name = ' | '.join(map(factory_name, classes))
    if not any(isinstance(object_, cls) for cls in classes):
        raise TypeError(messages.TYPE_ERROR.format(
            cls_name, factory_name(type(object_))))


def unbiased(binary_method):
    """
    Turn a biased method with signature (self, other) to an unbiased one, i.e.
    with signature (self, *others), see the `nLab`_.

    .. _nLab: https://ncatlab.org/nlab/show/biased+definition
    """
    @wraps(binary_method)
    def method(self, *others):
        result = self
        for other in others:
            result = binary_method(result, other)
        return result
    return method


def unique(values) -> list:
    """
    The distinct elements of ``values`` in order of first occurrence,
    compared with ``==`` so that they need not be hashable.

    Example
    -------
    >>> unique(['x', ['y'], 'x', ['y'], 'z'])
    ['x', ['y'], 'z']
    """
    result = []
    for value in values:
        if value not in result:
            result.append(value)
    return result


class Composable(ABC):
    """
    Abstract class implementing the syntactic sugar :code:`>>` and :code:`<<`
    for forward and backward composition with some method :code:`then`.

    Example
    -------
    >>> class List(list, Composable):
    ...     def then(self, other):
    ...         return self + other
    >>> assert List([1, 2]) >> List([3]) == List([1, 2, 3])
    >>> assert List([3]) << List([1, 2]) == List([1, 2, 3])
    """
    @abstractmethod
    def then(self, other: Optional[Composable], *others: Composable
             ) -> Composable:
        """
        Sequential composition, to be instantiated.

        Parameters:
            other : The other composable object to compose sequentially.
        """

    __rshift__ = lambda self, other: self.then(other)
    __lshift__ = lambda self, other: other.then(self)


class Whiskerable(ABC):
    """
    Abstract class implementing the syntactic sugar :code:`@` for whiskering
    and parallel composition with some method :code:`tensor`.
    """
    @classmethod
    @abstractmethod
    def id(cls, dom: Any) -> Whiskerable:
        """
        Identity on a given domain, to be instantiated.

        Parameters:
            dom : The object on which to take the identity.
        """

    @abstractmethod
    def tensor(self, other: Whiskerable) -> Whiskerable:
        """
        Parallel composition, to be instantiated.

        Parameters:
            other : The other diagram to compose in parallel.
        """

    @classmethod
    def whisker(cls, other: Any) -> Whiskerable:
        """
        Apply :meth:`Whiskerable.id` if :code:`other` is not tensorable else do
        nothing.

        Parameters:
            other : The whiskering object.
        """
        return other if isinstance(other, Whiskerable) else cls.id(other)

    def __matmul__(self, other):
        return self.tensor(self.whisker(other))

    def __rmatmul__(self, other):
        return self.whisker(other).tensor(self)


class AxiomError(Exception):
    """ The gods of category theory are not happy. """


class IncompatibleDomainError(AxiomError):
    """ The codomain of a diagram does not match the domain of the next. """
