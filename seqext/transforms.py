"""Z and Fourier transforms of sequences."""


def ztransform(s, z):
    r"""Compute the Z transform of a sequence, :math:`S(z) = \sum_k s_k z^{-k}`.

    The result type is the promotion of the element type of `s` with the
    type of `z`, so that real sequences can be evaluated at complex
    arguments.

    Raises:
        NotCompactError: `s` has no compact support and no closed form.
    """
    return s.ztransform(z)


def fouriertransform(s, omega):
    r"""Compute the Fourier transform of a sequence.

    It is defined as :math:`S(\omega) = \sum_k s_k e^{-i \omega k}` and
    corresponds to the Z transform at :math:`z = e^{i \omega}`. The
    Fourier transform is a :math:`2 \pi`-periodic function of `omega`.
    """
    return s.fouriertransform(omega)


class ZTransform:
    """Lazy wrapper for :func:`ztransform`.

    Example:

        >>> h = CompactSequence([0.25, 0.5, 0.25])
        >>> H = ZTransform(h)
        >>> float(H(1))
        1.0
    """
    def __init__(self, sequence):
        self.sequence = sequence

    def __call__(self, z):
        return ztransform(self.sequence, z)


class FourierTransform:
    """Lazy wrapper for :func:`fouriertransform`."""
    def __init__(self, sequence):
        self.sequence = sequence

    def __call__(self, omega):
        return fouriertransform(self.sequence, omega)
