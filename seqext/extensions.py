"""Bi-infinite sequences obtained by extending a finite vector.

An extension sequence embeds an :class:`~seqext.vector.OffsetVector`
`a` with indices `i0..i1` and extends it to all integers. Indexing with
`i0 <= k <= i1` simply returns `a[k]`, other indices are resolved by the
extension rule of the sequence.

Extension sequences are views: they keep a reference to the embedded
vector, so that assignments through the sequence reach the vector and
later modifications of the vector are visible through the sequence.

A convention followed below is that `k` refers to indices of the
sequence and `i` to indices of the embedded vector.
"""

import enum

import numpy as np

from .errors import IndexNotWritableError, InvalidParameterError, settings
from .sequence import Sequence
from .utils import get_logger
from .vector import as_vector, reverse_indices


logger = get_logger(__name__)


# Extension rules -------------------------------------------------------------

class Symmetry(enum.Enum):
    """Position of the mirror near an endpoint of a symmetric extension."""
    WHOLEPOINT = 'wp'  # the endpoint is repeated
    HALFPOINT = 'hp'  # the endpoint is the axis of symmetry


class Parity(enum.Enum):
    EVEN = 'even'
    ODD = 'odd'


def periodic_index(k, i0, i1):
    """Map `k` into `[i0, i1]` modulo the length of the range."""
    return (k - i0) % (i1 - i0 + 1) + i0


class Extension:
    """Base class of the rules that define out of range elements."""

    def element_extension(self, a, k, i0, i1):
        raise NotImplementedError

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self):
        return hash((type(self),) + tuple(sorted(vars(self).items())))

    def __repr__(self):
        params = ", ".join("{}={!r}".format(*kv) for kv in vars(self).items())
        return "{}({})".format(self.__class__.__name__, params)


class PeriodicExtension(Extension):
    def element_extension(self, a, k, i0, i1):
        return a[periodic_index(k, i0, i1)]


class ZeroPadding(Extension):
    def element_extension(self, a, k, i0, i1):
        return a.dtype.type(0)


class ConstantPadding(Extension):
    def __init__(self, constant):
        self.constant = constant

    def element_extension(self, a, k, i0, i1):
        return a.dtype.type(self.constant)


class SymmetricExtension(Extension):
    """Symmetric extension around each of the two endpoints.

    Each endpoint has its own symmetry type and parity. Indices outside
    of the vector range are folded back with respect to the nearest
    endpoint, repeatedly, until they reach the range. Every fold across
    an odd endpoint flips the sign of the result.

    - right of `i1`: whole-point maps `k` to `2*i1 - k + 1`, half-point
      maps `k` to `2*i1 - k`.
    - left of `i0`: whole-point maps `k` to `2*i0 - k - 1`, half-point
      maps `k` to `2*i0 - k`.

    The number of folds grows linearly with the distance of `k` to the
    vector range, see :func:`~seqext.errors.setfold`.
    """
    def __init__(self, left_symmetry=Symmetry.WHOLEPOINT,
                 right_symmetry=Symmetry.WHOLEPOINT,
                 left_parity=Parity.EVEN, right_parity=Parity.EVEN):
        self.left_symmetry = Symmetry(left_symmetry)
        self.right_symmetry = Symmetry(right_symmetry)
        self.left_parity = Parity(left_parity)
        self.right_parity = Parity(right_parity)

    def reversed(self):
        """Return the extension obtained by swapping both endpoints."""
        return SymmetricExtension(
            self.right_symmetry, self.left_symmetry,
            self.right_parity, self.left_parity)

    def can_fold(self, n):
        # two half-point mirrors around a single sample map k onto itself
        return n > 1 or self.left_symmetry is Symmetry.WHOLEPOINT \
            or self.right_symmetry is Symmetry.WHOLEPOINT

    def element_extension(self, a, k, i0, i1):
        # every two folds bring k at least one step closer to [i0, i1]
        max_folds = 2 * (k - i1 if k > i1 else i0 - k)
        folds = 0
        negate = False

        while k > i1 or k < i0:
            if folds > max_folds:
                raise RuntimeError(
                    "symmetric folding does not converge for a vector of "
                    "length {} with {!r}".format(i1 - i0 + 1, self))

            if k > i1:
                if self.right_symmetry is Symmetry.WHOLEPOINT:
                    k = 2 * i1 - k + 1
                else:
                    k = 2 * i1 - k
                negate ^= self.right_parity is Parity.ODD
            else:
                if self.left_symmetry is Symmetry.WHOLEPOINT:
                    k = 2 * i0 - k - 1
                else:
                    k = 2 * i0 - k
                negate ^= self.left_parity is Parity.ODD

            folds += 1

        if folds > settings.fold_warning:
            logger.debug(
                "%d symmetric folds needed to reach [%d, %d]", folds, i0, i1)

        return -a[k] if negate else a[k]


def element(extension, a, k):
    """Return element `k` of the extension of `a` by `extension`."""
    i0, i1 = a.first, a.last
    # Valid indices for a are returned right away
    if i0 <= k <= i1:
        return a[k]
    return extension.element_extension(a, k, i0, i1)


# Extension sequences ---------------------------------------------------------

class ExtensionSequence(Sequence):
    """Base class for sequences that extend an embedded vector.

    Concrete subclasses define the `extension` rule and :meth:`similar`.
    """
    extension = None

    def __init__(self, a):
        self.a = as_vector(a)

    def subvector(self):
        """The embedded vector of the extension sequence."""
        return self.a

    def sublength(self):
        return len(self.a)

    def first_subindex(self):
        return self.a.first

    def last_subindex(self):
        return self.a.last

    @property
    def dtype(self):
        return self.a.dtype

    def similar(self, a):
        """Return a sequence of the same kind which extends `a`."""
        raise NotImplementedError

    def get(self, k):
        return element(self.extension, self.a, k)

    def set(self, k, value):
        if not self.a.first <= k <= self.a.last:
            raise IndexNotWritableError(
                "index {} of {} is outside of the embedded vector "
                "[{}, {}]".format(k, self.__class__.__name__,
                                  self.a.first, self.a.last))
        self.a[k] = value

    def reverse(self):
        return self.similar(reverse_indices(self.a))

    def conj(self):
        if not np.issubdtype(self.dtype, np.complexfloating):
            return self
        return self.similar(self.a.conj())

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, self.a)


class PeriodicSequence(ExtensionSequence):
    """Extend a vector periodically to a bi-infinite sequence.

    Indices outside of the vector range are mapped by periodization
    modulo the length of the vector. Assignment is possible at any
    index and modifies the corresponding vector element.
    """
    extension = PeriodicExtension()

    def similar(self, a):
        return PeriodicSequence(a)

    def set(self, k, value):
        self.a[periodic_index(k, self.a.first, self.a.last)] = value


class CompactSequence(ExtensionSequence):
    """Extend a vector with zeros to a bi-infinite sequence.

    The zeros have the element type of the vector.
    """
    extension = ZeroPadding()

    def similar(self, a):
        return CompactSequence(a)

    def iscompact(self):
        return True

    def nzrange(self):
        return self.a.first, self.a.last


ZeroPaddingSequence = CompactSequence


class ConstantPaddingSequence(ExtensionSequence):
    """Extend a vector with a given `constant` to a bi-infinite sequence.

    The constant is converted to the element type of the vector when
    read.
    """
    def __init__(self, a, constant):
        super().__init__(a)
        self.extension = ConstantPadding(constant)

    @property
    def constant(self):
        return self.extension.constant

    def similar(self, a):
        return ConstantPaddingSequence(a, self.constant)

    def conj(self):
        if not np.issubdtype(self.dtype, np.complexfloating):
            return self
        return ConstantPaddingSequence(self.a.conj(), np.conj(self.constant))


class SymmetricSequence(ExtensionSequence):
    """Extend a vector symmetrically to a bi-infinite sequence.

    The symmetry around each of the endpoints can be whole-point (the
    endpoint is repeated) or half-point (the endpoint is the axis of
    symmetry and is not repeated). The symmetry can also be even
    (symmetric) or odd (anti-symmetric). All sixteen combinations are
    allowed, the defaults give a whole-point even extension.

    Args:
        a (OffsetVector or Sequence): the embedded vector.
        left_symmetry (Symmetry or str): `'wp'` or `'hp'` near `i0`.
        right_symmetry (Symmetry or str): `'wp'` or `'hp'` near `i1`.
        left_parity (Parity or str): `'even'` or `'odd'` near `i0`.
        right_parity (Parity or str): `'even'` or `'odd'` near `i1`.

    Example:

        >>> s = SymmetricSequence([1, 2, 3], 'wp', 'hp', 'even', 'odd')
        >>> s[-1], s[3]
        (1, -2)
    """
    def __init__(self, a, left_symmetry=Symmetry.WHOLEPOINT,
                 right_symmetry=Symmetry.WHOLEPOINT,
                 left_parity=Parity.EVEN, right_parity=Parity.EVEN):
        super().__init__(a)
        self.extension = SymmetricExtension(
            left_symmetry, right_symmetry, left_parity, right_parity)

        if not self.extension.can_fold(len(self.a)):
            raise InvalidParameterError(
                "half-point symmetry on both ends requires at least two "
                "elements")

    @property
    def left_symmetry(self):
        return self.extension.left_symmetry

    @property
    def right_symmetry(self):
        return self.extension.right_symmetry

    @property
    def left_parity(self):
        return self.extension.left_parity

    @property
    def right_parity(self):
        return self.extension.right_parity

    def _with_extension(self, a, extension):
        return SymmetricSequence(
            a, extension.left_symmetry, extension.right_symmetry,
            extension.left_parity, extension.right_parity)

    def similar(self, a):
        return self._with_extension(a, self.extension)

    def reverse(self):
        # The endpoints exchange their roles
        return self._with_extension(
            reverse_indices(self.a), self.extension.reversed())


def symmetric_extension_wholepoint_even(a):
    return SymmetricSequence(
        a, Symmetry.WHOLEPOINT, Symmetry.WHOLEPOINT, Parity.EVEN, Parity.EVEN)


def symmetric_extension_halfpoint_even(a):
    return SymmetricSequence(
        a, Symmetry.HALFPOINT, Symmetry.HALFPOINT, Parity.EVEN, Parity.EVEN)


def symmetric_extension_wholepoint_odd(a):
    return SymmetricSequence(
        a, Symmetry.WHOLEPOINT, Symmetry.WHOLEPOINT, Parity.ODD, Parity.ODD)


def symmetric_extension_halfpoint_odd(a):
    return SymmetricSequence(
        a, Symmetry.HALFPOINT, Symmetry.HALFPOINT, Parity.ODD, Parity.ODD)
