import numpy as np
import pytest
from seqext import DerivedSequence, CompactSequence, PeriodicSequence, \
    OffsetVector, NotCompactError, shift


class Scaled(DerivedSequence):
    def get(self, k):
        return 2 * super().get(k)


def test_derived_sequence():
    data = [1, 2, 3]
    a = CompactSequence(OffsetVector(data, first=1))
    d = DerivedSequence(a)

    assert d.supersequence() is a
    assert d.dtype == a.dtype
    assert d[-2:6] == a[-2:6]
    assert d.iscompact()
    assert d.nzrange() == (1, 3)
    assert d.ztransform(2) == a.ztransform(2)
    assert d.reverse()[-2] == a[2]

    # assignments reach the underlying storage
    d[2] = 10
    assert data[1] == 10

    assert shift(d, 1)[3] == 10


def test_specialized_derived_sequence():
    a = CompactSequence(OffsetVector([1, 2, 3], first=1))
    s = Scaled(a)
    assert s[0:5] == [0, 2, 4, 6, 0]
    assert s.moment(0) == 12
    assert (s * s)[2] == 4

    p = Scaled(PeriodicSequence([1, 2]))
    assert p[5] == 4
    with pytest.raises(NotCompactError):
        p.nzrange()


def test_derived_conj():
    a = CompactSequence(OffsetVector([1 + 1j, 2 - 1j, -3j], first=-1))
    d = DerivedSequence(a)

    c = d.conj()
    assert c[-3:4] == [np.conj(v) for v in a[-3:4]]
    assert c.iscompact()
    assert c.nzrange() == (-1, 1)
    assert c.conj() is d
    assert c.ztransform(0.5 + 1j) == pytest.approx(
        sum(np.conj(a[k]) * (0.5 + 1j) ** -k for k in range(-1, 2)))

    assert d.H[-3:4] == [np.conj(v) for v in a[3:-4:-1]]
    assert (d * d.H)[0] == pytest.approx(sum(abs(v) ** 2 for v in a[-1:2]))

    s = Scaled(a)
    assert s.H[1] == 2 * np.conj(a[-1])
    assert s.conj()[0:2] == [2 * np.conj(a[0]), 2 * np.conj(a[1])]

    real = DerivedSequence(CompactSequence([1.0, 2.0]))
    assert real.conj() is real
