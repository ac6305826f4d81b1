"""A collection of special sequences."""

import numpy as np

from .sequence import Sequence


class ZeroSequence(Sequence):
    """The sequence of all zeros."""
    def __init__(self, dtype=float):
        self._dtype = np.dtype(dtype)

    @property
    def dtype(self):
        return self._dtype

    def get(self, k):
        return self.zero()

    def iscompact(self):
        return True

    def nzrange(self):
        return 0, 0

    def reverse(self):
        return self

    def conj(self):
        return self

    def ztransform(self, z):
        return self.zero()


class DiracSequence(Sequence):
    """The unit impulse: all zeros except for `h[0] = 1`.

    It is the identity element of convolution.
    """
    def __init__(self, dtype=float):
        self._dtype = np.dtype(dtype)

    @property
    def dtype(self):
        return self._dtype

    def get(self, k):
        return self.dtype.type(1) if k == 0 else self.zero()

    def iscompact(self):
        return True

    def nzrange(self):
        return 0, 0

    def reverse(self):
        return self

    def conj(self):
        return self

    def ztransform(self, z):
        return self.dtype.type(1)
