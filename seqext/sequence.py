"""The abstract bi-infinite sequence."""

from abc import ABC, abstractmethod

import numpy as np

from .errors import IndexNotWritableError, InvalidParameterError, \
    NotCompactError
from .utils import isint, bi_infinite_getitem, bi_infinite_setitem


def promote_argument(z):
    """Return a transform argument that supports negative powers."""
    if isint(z):
        return float(z)
    return z


class Sequence(ABC):
    """A bi-infinite discrete set of values, indexed by all integers.

    Subclasses implement :meth:`get`, and override :meth:`iscompact`
    together with :meth:`nzrange` when the sequence is known to vanish
    outside of a finite range of indices. Each sequence has an element
    type given by :attr:`dtype`.
    """

    @property
    @abstractmethod
    def dtype(self):
        """The numpy dtype of the elements."""
        raise NotImplementedError

    @abstractmethod
    def get(self, k):
        """Return element `k`, for any integer `k`."""
        raise NotImplementedError

    def set(self, k, value):
        raise IndexNotWritableError(
            self.__class__.__name__ + " does not support item assignment")

    @bi_infinite_getitem
    def __getitem__(self, key):
        return self.get(key)

    @bi_infinite_setitem
    def __setitem__(self, key, value):
        self.set(key, value)

    def __iter__(self):
        raise TypeError(
            self.__class__.__name__ + " is bi-infinite and cannot be "
            "iterated, use each_nonzero_index() instead")

    def zero(self):
        return self.dtype.type(0)

    # Support -----------------------------------------------------------------

    def iscompact(self):
        """Return wether the sequence vanishes outside of :meth:`nzrange`."""
        return False

    def nzrange(self):
        """Return the inclusive range `(lo, hi)` of non-zero elements.

        Elements outside of this range are zero, elements inside may
        also be zero.

        Raises:
            NotCompactError: the sequence has no finite support.
        """
        raise NotCompactError(
            self.__class__.__name__ + " does not have compact support")

    def each_nonzero_index(self):
        lo, hi = self.nzrange()
        return range(lo, hi + 1)

    def firstindex(self):
        return self.nzrange()[0]

    def lastindex(self):
        return self.nzrange()[1]

    # Time reversal and conjugation -------------------------------------------

    def reverse(self):
        """Return the time-reversed sequence `g[k] = self[-k]`."""
        from .lazy import ReversedSequence
        return ReversedSequence(self)

    def conj(self):
        """Return the elementwise conjugate sequence."""
        if np.issubdtype(self.dtype, np.complexfloating):
            from .lazy import ConjugatedSequence
            return ConjugatedSequence(self)
        return self

    def transpose(self):
        # The transpose of a sequence is its time-reversal
        return self.reverse()

    def adjoint(self):
        return self.reverse().conj()

    @property
    def T(self):
        return self.transpose()

    @property
    def H(self):
        return self.adjoint()

    # Reductions and transforms -----------------------------------------------

    def moment(self, j):
        """Return the discrete moment :code:`sum(self[k] * k ** j)`."""
        if not isint(j) or j < 0:
            raise InvalidParameterError(
                "moment order must be a non-negative integer")
        total = self.zero()
        for k in self.each_nonzero_index():
            total += self[k] * k ** j
        return total

    def ztransform(self, z):
        """Return the Z transform :code:`sum(self[k] * z ** -k)` at `z`.

        The sum runs over :meth:`each_nonzero_index`, sequences without
        compact support raise :class:`NotCompactError` unless they
        provide a closed form.
        """
        z = promote_argument(z)
        result_type = np.result_type(self.dtype, np.asarray(z).dtype, float)
        total = result_type.type(0)
        for k in self.each_nonzero_index():
            total += self[k] * z ** (-k)
        return total

    def fouriertransform(self, omega):
        """Return the Fourier transform, the Z transform at `exp(i omega)`."""
        return self.ztransform(np.exp(1j * omega))

    def __mul__(self, other):
        if not isinstance(other, Sequence):
            return NotImplemented
        from .lazy import convolve
        return convolve(self, other)
