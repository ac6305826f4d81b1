import cmath
import math
import numpy as np
import pytest
from seqext import (
    CompactSequence, PeriodicSequence, OffsetVector, ZeroSequence,
    DiracSequence, ZTransform, FourierTransform, ztransform, fouriertransform,
    shift, reverse, ReversedSequence, downsample, upsample, modulate,
    NotCompactError)


ARGUMENTS = [2, 0.5, -2.0, 1j, 0.7 + 0.4j, -3 + 2j]


def brute_ztransform(s, z):
    return sum(s[k] * complex(z) ** (-k) for k in s.each_nonzero_index())


def h():
    return CompactSequence(OffsetVector([1.0, 2.0, 3.0], first=-1))


def test_ztransform_compact():
    H = ZTransform(h())
    assert H.sequence.nzrange() == (-1, 1)
    for z in ARGUMENTS:
        assert H(z) == pytest.approx(1 * z + 2 + 3 / z)
        assert ztransform(h(), z) == H(z)

    # integer arguments behave like floats
    assert h().ztransform(2) == h().ztransform(2.0)
    assert isinstance(h().ztransform(1j), complex)

    with pytest.raises(NotCompactError):
        ztransform(PeriodicSequence([1, 2]), 0.5)
    with pytest.raises(NotCompactError):
        fouriertransform(PeriodicSequence([1, 2]), 0.5)


@pytest.mark.parametrize('z', ARGUMENTS)
def test_special_ztransform(z):
    assert ZTransform(DiracSequence())(z) == 1
    assert ZTransform(ZeroSequence())(z) == 0
    assert FourierTransform(DiracSequence())(z.real) == 1


def combinators():
    a = CompactSequence(OffsetVector([0.5, -1.0, 2.0, 4.0, 1.5], first=-2))
    b = CompactSequence(OffsetVector([1.0, -2.0, 0.25], first=1))
    return [
        shift(a, 3),
        shift(a, -4),
        ReversedSequence(a),
        reverse(shift(a, 2)),
        downsample(a, 2),
        downsample(shift(a, 1), 3),
        upsample(a, 2),
        upsample(a, 3),
        modulate(a),
        a * b,
        modulate(upsample(a * b, 2))]


@pytest.mark.parametrize('s', combinators())
@pytest.mark.parametrize('z', ARGUMENTS)
def test_closed_form(s, z):
    assert ztransform(s, z) == pytest.approx(brute_ztransform(s, z))


def test_downsample_branch():
    # the aliasing sum does not depend on the chosen root of z
    a = CompactSequence(OffsetVector([1.0, 2.0, 3.0, 4.0, 5.0], first=-2))
    s = downsample(a, 2)
    z = -1 - 1e-15j
    assert s.ztransform(z) == pytest.approx(s.ztransform(-1 + 1e-15j))
    assert s.ztransform(z) == pytest.approx(a[-2] * -1 + a[0] + a[2] * -1)


def test_fouriertransform():
    a = CompactSequence(OffsetVector([1.0, 2.0, 3.0, 4.0], first=0))
    assert fouriertransform(a, 0) == pytest.approx(10)
    assert fouriertransform(a, math.pi) == pytest.approx(1 - 2 + 3 - 4)

    F = FourierTransform(a)
    assert F.sequence is a
    assert F(0.3) == pytest.approx(
        sum(a[k] * cmath.exp(-0.3j * k) for k in range(4)))


@pytest.mark.parametrize('s', combinators() + [DiracSequence(), h()])
def test_fourier_periodicity(s):
    for omega in np.linspace(-math.pi, math.pi, 7):
        F = fouriertransform(s, omega)
        assert abs(F - fouriertransform(s, omega + 2 * math.pi)) < 1e-9
        assert abs(F - s.fouriertransform(omega - 2 * math.pi)) < 1e-9


def test_downsample_result_type():
    a = CompactSequence(OffsetVector([1.0, 2.0, 3.0, 4.0, 5.0], first=-2))
    for M in (2, 3):
        s = downsample(a, M)
        for z in (2, 0.5, -2.0):
            value = s.ztransform(z)
            assert isinstance(value, np.float64)
            assert value == pytest.approx(brute_ztransform(s, z).real)

    assert isinstance(downsample(a, 2).ztransform(1j), complex)

    c = CompactSequence(OffsetVector([1j, 2.0, 3.0], first=0))
    assert isinstance(downsample(c, 2).ztransform(2.0), complex)
