"""Finite vectors with an arbitrary first index."""

import numpy as np

from .errors import InvalidParameterError
from .utils import isint


class OffsetVector:
    """A finite vector whose indices run from `first` to `last`.

    The data container is kept by reference, assignments through the
    vector are visible to any other holder of the container.

    Args:
        data (Sequence): a mutable indexable container with a length,
            typically a list or a :class:`numpy:numpy.ndarray`.
        first (int): index of the first element (default 0).
    """
    def __init__(self, data, first=0):
        if not isint(first):
            raise TypeError("first must be an integer")
        if len(data) == 0:
            raise InvalidParameterError(
                "cannot index an empty vector (last < first)")

        self.data = data
        self.first = int(first)
        # containers without a dtype are inspected once
        self._dtype = getattr(data, 'dtype', None)
        if self._dtype is None:
            self._dtype = np.asarray(data).dtype

    @classmethod
    def from_range(cls, data, first, last):
        """Build a vector over the explicit index range `[first, last]`."""
        if last < first:
            raise InvalidParameterError(
                "malformed index range [{}, {}]".format(first, last))
        if last - first + 1 != len(data):
            raise InvalidParameterError(
                "index range [{}, {}] does not match data of length {}".format(
                    first, last, len(data)))
        return cls(data, first)

    @property
    def last(self):
        return self.first + len(self.data) - 1

    @property
    def dtype(self):
        """The numpy dtype of the elements."""
        return getattr(self.data, 'dtype', self._dtype)

    def indices(self):
        return range(self.first, self.last + 1)

    def __len__(self):
        return len(self.data)

    def __iter__(self):
        return iter(self.data)

    def _offset(self, key):
        if not isint(key):
            raise TypeError(
                self.__class__.__name__ + " indices must be integers, not "
                + key.__class__.__name__)
        if key < self.first or key > self.last:
            raise IndexError(
                "{} index {} out of range [{}, {}]".format(
                    self.__class__.__name__, key, self.first, self.last))
        return key - self.first

    def __getitem__(self, key):
        return self.data[self._offset(key)]

    def __setitem__(self, key, value):
        self.data[self._offset(key)] = value
        if not hasattr(self.data, 'dtype'):
            self._dtype = np.result_type(self._dtype, np.asarray(value).dtype)

    def conj(self):
        """Return a conjugated copy with the same index range."""
        return OffsetVector(np.conj(np.asarray(self.data)), self.first)

    def __repr__(self):
        return "{}({!r}, first={})".format(
            self.__class__.__name__, self.data, self.first)


def as_vector(a):
    """Return `a` as an :class:`OffsetVector`, indexed from 0 if needed."""
    if isinstance(a, OffsetVector):
        return a
    return OffsetVector(a)


def reverse_indices(a):
    """Return a vector with reversed indices.

    If `b = reverse_indices(a)` then `b[i] == a[-i]`, the result is a
    copy indexed from `-a.last` to `-a.first`.

    Example:

        >>> b = reverse_indices(OffsetVector([1, 2, 3], first=-2))
        >>> b.first, b.last
        (0, 2)
        >>> b.data.tolist()
        [3, 2, 1]
    """
    a = as_vector(a)
    data = np.array([a[i] for i in range(a.last, a.first - 1, -1)],
                    dtype=a.dtype)
    return OffsetVector(data, -a.last)
