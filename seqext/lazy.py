"""Lazy sequences that compute their elements on the fly.

The sequences below wrap one or two other sequences and perform a
computation whenever an element is read, nothing is stored. A lazy
sequence can be turned into a stored one with :func:`collect`.
"""

import cmath

import numpy as np

from .errors import EvaluationError, NotCompactError, SequenceError, \
    UndefinedConvolutionError, format_stack, seterr
from .extensions import CompactSequence
from .sequence import Sequence, promote_argument
from .utils import bi_infinite_getitem, check_factor, get_logger, isint
from .vector import OffsetVector


logger = get_logger(__name__)


class LazySequence(Sequence):
    """Base class for sequences computed from other sequences.

    Failures of the element arithmetic are reported with the location
    where the lazy sequence was created, see :func:`seqext.seterr`.
    """
    def __init__(self):
        self.stack = format_stack(2)

    @bi_infinite_getitem
    def __getitem__(self, key):
        try:
            return self.get(key)

        except Exception as cause:
            if seterr() == 'passthrough' \
                    or isinstance(cause, (EvaluationError, SequenceError)):
                raise
            else:
                msg = "Failed to evaluate item {} in {} created at:\n{}".format(
                    key, self.__class__.__name__, self.stack)
                raise EvaluationError(msg) from cause


def collect(s):
    """Evaluate a compact sequence and store its non-zero range.

    Returns:
        CompactSequence: a zero-padded sequence over a numpy vector
        that spans :code:`s.nzrange()`.

    Raises:
        NotCompactError: `s` does not have compact support.
    """
    if not s.iscompact():
        raise NotCompactError(
            "cannot collect the infinite support of "
            + s.__class__.__name__)

    lo, hi = s.nzrange()
    logger.debug("collecting %s over [%d, %d]", s.__class__.__name__, lo, hi)
    # external writes to a shared container can widen values past s.dtype
    data = np.array([s[k] for k in range(lo, hi + 1)])
    data = data.astype(np.result_type(data.dtype, s.dtype), copy=False)
    return CompactSequence(OffsetVector(data, lo))


# Convolution -----------------------------------------------------------------

class Convolution(LazySequence):
    """Lazy convolution `h = f * g` of two sequences.

    Elements are computed on every read with
    :code:`h[n] = sum(f[k] * g[n - k] for k in f.each_nonzero_index())`,
    which requires at least one of the two sequences to be compact.
    """
    def __init__(self, f, g):
        super().__init__()
        self.f = f
        self.g = g

    @property
    def dtype(self):
        return np.result_type(self.f.dtype, self.g.dtype)

    def get(self, n):
        f, g = self.f, self.g
        z = self.zero()
        if f.iscompact():
            for k in f.each_nonzero_index():
                z += f[k] * g[n - k]
        elif g.iscompact():
            for k in g.each_nonzero_index():
                z += g[k] * f[n - k]
        else:
            raise UndefinedConvolutionError(
                "cannot convolve two sequences without compact support")
        return z

    def iscompact(self):
        return self.f.iscompact() and self.g.iscompact()

    def nzrange(self):
        if not self.iscompact():
            return super().nzrange()

        # f[k] and g[n-k] overlap when [a, b] meets [n-d, n-c]
        a, b = self.f.nzrange()
        c, d = self.g.nzrange()
        return a + c, b + d

    def conj(self):
        return Convolution(self.f.conj(), self.g.conj())

    def ztransform(self, z):
        return self.f.ztransform(z) * self.g.ztransform(z)


def convolve(f, g):
    """Return the lazy convolution of two sequences, also :code:`f * g`.

    Example:

        >>> f = CompactSequence(OffsetVector([1, 2, 3, 4, 5, 6], first=1))
        >>> int((f * f)[4])
        10
    """
    return Convolution(f, g)


# Shift -----------------------------------------------------------------------

class ShiftedSequence(LazySequence):
    """Lazy sequence shifted forward by `k` positions: `g[n] = f[n - k]`."""
    def __init__(self, f, k):
        super().__init__()
        if not isint(k):
            raise TypeError("shift must be an integer")
        if isinstance(f, ShiftedSequence):  # merge nested shifts
            k = f.k + k
            f = f.f
        self.f = f
        self.k = int(k)

    @property
    def dtype(self):
        return self.f.dtype

    def supersequence(self):
        return self.f

    def sequence_shift(self):
        return self.k

    def get(self, n):
        return self.f[n - self.k]

    def iscompact(self):
        return self.f.iscompact()

    def nzrange(self):
        lo, hi = self.f.nzrange()
        return lo + self.k, hi + self.k

    def conj(self):
        return ShiftedSequence(self.f.conj(), self.k)

    def ztransform(self, z):
        z = promote_argument(z)
        return z ** (-self.k) * self.f.ztransform(z)


def shift(s, k):
    """Shift a sequence by `k` positions forward."""
    return ShiftedSequence(s, k)


# Time reversal ---------------------------------------------------------------

class ReversedSequence(LazySequence):
    """Lazy time reversal of a sequence: `g[k] = f[-k]`."""
    def __init__(self, f):
        super().__init__()
        self.f = f

    @property
    def dtype(self):
        return self.f.dtype

    def supersequence(self):
        return self.f

    def get(self, k):
        return self.f[-k]

    def iscompact(self):
        return self.f.iscompact()

    def nzrange(self):
        lo, hi = self.f.nzrange()
        return -hi, -lo

    def reverse(self):
        return self.f

    def conj(self):
        return ReversedSequence(self.f.conj())

    def ztransform(self, z):
        return self.f.ztransform(1 / promote_argument(z))


def reverse(s):
    """Return the time-reversed sequence.

    Extension sequences reverse their embedded vector, other sequences
    are wrapped lazily. Reversing twice returns the original sequence
    for lazy reversals.
    """
    return s.reverse()


# Sampling --------------------------------------------------------------------

class DownsampledSequence(LazySequence):
    """Lazy sequence downsampled by a factor `M`: `g[k] = f[M * k]`."""
    def __init__(self, f, M=2):
        super().__init__()
        M = check_factor(M)
        if isinstance(f, DownsampledSequence):  # merge nested downsampling
            M = f.M * M
            f = f.f
        self.f = f
        self.M = M

    @property
    def dtype(self):
        return self.f.dtype

    def supersequence(self):
        return self.f

    def samplefactor(self):
        return self.M

    def get(self, k):
        return self.f[self.M * k]

    def iscompact(self):
        return self.f.iscompact()

    def nzrange(self):
        a, b = self.f.nzrange()
        return (a - 1) // self.M + 1, (b - 1) // self.M + 1

    def conj(self):
        return DownsampledSequence(self.f.conj(), self.M)

    def ztransform(self, z):
        # Aliasing sum over the M roots of z, all roots contribute so
        # the principal branch of z ** (1 / M) is as good as any.
        M = self.M
        root = complex(z) ** (1 / M)
        logger.debug("downsampled transform at principal root %r", root)
        u = 0j
        for m in range(M):
            u += self.f.ztransform(cmath.exp(-2j * cmath.pi * m / M) * root)
        u /= M
        if np.iscomplexobj(z) or np.issubdtype(self.dtype, np.complexfloating):
            return u
        # real coefficients at a real argument give a real value, the
        # imaginary part left by the rotated roots is rounding error
        result_type = np.result_type(self.dtype, np.asarray(z).dtype, float)
        return result_type.type(u.real)


def downsample(s, M=2):
    """Return the sequence downsampled by a factor `M` (default 2)."""
    return DownsampledSequence(s, M)


class UpsampledSequence(LazySequence):
    """Lazy sequence upsampled by a factor `M` with intermediate zeros.

    `g[k] = f[k // M]` if `k` is a multiple of `M`, `g[k] = 0` otherwise.
    """
    def __init__(self, f, M=2):
        super().__init__()
        M = check_factor(M)
        if isinstance(f, UpsampledSequence):  # merge nested upsampling
            M = f.M * M
            f = f.f
        self.f = f
        self.M = M

    @property
    def dtype(self):
        return self.f.dtype

    def supersequence(self):
        return self.f

    def samplefactor(self):
        return self.M

    def get(self, k):
        if k % self.M == 0:
            return self.f[k // self.M]
        return self.zero()

    def iscompact(self):
        return self.f.iscompact()

    def nzrange(self):
        a, b = self.f.nzrange()
        return a * self.M, b * self.M

    def conj(self):
        return UpsampledSequence(self.f.conj(), self.M)

    def ztransform(self, z):
        return self.f.ztransform(promote_argument(z) ** self.M)


def upsample(s, M=2):
    """Return the sequence upsampled by a factor `M` (default 2)."""
    return UpsampledSequence(s, M)


# Conjugation -----------------------------------------------------------------

class ConjugatedSequence(LazySequence):
    """Lazy elementwise conjugate of a sequence: `g[k] = conj(f[k])`.

    Used by :meth:`Sequence.conj` for complex sequences that have no more
    specific way to conjugate themselves.
    """
    def __init__(self, f):
        super().__init__()
        self.f = f

    @property
    def dtype(self):
        return self.f.dtype

    def supersequence(self):
        return self.f

    def get(self, k):
        return np.conj(self.f[k])

    def iscompact(self):
        return self.f.iscompact()

    def nzrange(self):
        return self.f.nzrange()

    def conj(self):
        return self.f

    def ztransform(self, z):
        return np.conj(self.f.ztransform(np.conj(promote_argument(z))))


# Modulation ------------------------------------------------------------------

class ModulatedSequence(LazySequence):
    """Lazy modulation of a sequence: `g[k] = (-1) ** k * f[k]`."""
    def __init__(self, f):
        super().__init__()
        self.f = f

    @property
    def dtype(self):
        return self.f.dtype

    def supersequence(self):
        return self.f

    def get(self, k):
        value = self.f[k]
        return -value if k % 2 else value

    def iscompact(self):
        return self.f.iscompact()

    def nzrange(self):
        return self.f.nzrange()

    def conj(self):
        return ModulatedSequence(self.f.conj())

    def ztransform(self, z):
        return self.f.ztransform(-promote_argument(z))


def modulate(s):
    """Return the modulated sequence, modulating twice is a no-op."""
    if isinstance(s, ModulatedSequence):
        return s.f
    return ModulatedSequence(s)
