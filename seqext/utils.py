"""Miscellaneous tools for internal use."""

import logging
import numbers
from logging import NullHandler

from .errors import InvalidParameterError


def isint(x):
    """Return wether `x` is an integral number."""
    return isinstance(x, numbers.Integral)


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


def check_factor(M, name="M"):
    """Validate a sampling factor and return it as a Python int."""
    if not isint(M) or M <= 0:
        raise InvalidParameterError(
            "{} must be a positive integer, got {!r}".format(name, M))
    return int(M)


def bi_infinite_getitem(func):
    """Decorate a `__getitem__` method to add slicing support.

    Args:
        func (Callable[[Sequence, int], Any]):
            A `__getitem__` method that accepts any integer index.

    Return:
        A `__getitem__` method that also accepts slices with explicit
        bounds. Unlike python lists, negative values are plain indices
        and do not count from an end.
    """
    def getitem(self, key):
        if isinstance(key, slice):
            if key.start is None or key.stop is None:
                raise IndexError(
                    "Cannot slice " + self.__class__.__name__
                    + " without explicit bounds")
            step = 1 if key.step is None else key.step
            if step == 0:
                raise ValueError("slice step cannot be 0")
            return [getitem(self, k) for k in range(key.start, key.stop, step)]

        elif isint(key):
            return func(self, int(key))

        else:
            raise TypeError(
                self.__class__.__name__ + " indices must be integers or "
                "slices, not " + key.__class__.__name__)

    return getitem


def bi_infinite_setitem(func):
    """Decorate a `__setitem__` method to add slicing support.

    Slice assignment is one-to-one: the number of values must match the
    number of targeted indices.
    """
    def setitem(self, key, value):
        if isinstance(key, slice):
            if key.start is None or key.stop is None:
                raise IndexError(
                    "Cannot slice " + self.__class__.__name__
                    + " without explicit bounds")
            step = 1 if key.step is None else key.step
            if step == 0:
                raise ValueError("slice step cannot be 0")
            indexes = range(key.start, key.stop, step)

            if len(indexes) != len(value):
                raise ValueError(
                    self.__class__.__name__ +
                    " only supports one-to-one assignment")

            for k, val in zip(indexes, value):
                func(self, k, val)

        elif isint(key):
            func(self, int(key), value)

        else:
            raise TypeError(
                self.__class__.__name__ + " indices must be integers or "
                "slices, not " + key.__class__.__name__)

    return setitem
