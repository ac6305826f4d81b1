from .sequence import Sequence


class DerivedSequence(Sequence):
    """A sequence that inherits its behaviour from a wrapped sequence.

    Without further definitions a derived sequence is functionally
    equivalent to the wrapped one. Subclasses override selected methods
    to specialize it without copying the underlying storage.

    Example:

        >>> class Scaled(DerivedSequence):
        ...     def get(self, k):
        ...         return 2 * super().get(k)
    """
    def __init__(self, supersequence):
        self._supersequence = supersequence

    def supersequence(self):
        """Return the underlying sequence."""
        return self._supersequence

    @property
    def dtype(self):
        return self._supersequence.dtype

    def get(self, k):
        return self._supersequence[k]

    def set(self, k, value):
        self._supersequence[k] = value

    def iscompact(self):
        return self._supersequence.iscompact()

    def nzrange(self):
        return self._supersequence.nzrange()
