"""
A python library to manipulate bi-infinite discrete sequences.

The seqext package models functions from all integers to values. Finite
vectors are turned into sequences by extension rules (periodic, zero or
constant padding, symmetric), and sequences are combined with lazy
operations (shift, time reversal, up and downsampling, modulation,
convolution) which compute elements on demand without storing them.

Sequences with compact support can be summed, evaluated through their Z
and Fourier transforms, or collected back into a stored sequence.
"""

from .derived import DerivedSequence
from .errors import (
    EvaluationError,
    IndexNotWritableError,
    InvalidParameterError,
    NotCompactError,
    SequenceError,
    UndefinedConvolutionError,
    seterr,
    setfold,
)
from .extensions import (
    CompactSequence,
    ConstantPadding,
    ConstantPaddingSequence,
    Extension,
    ExtensionSequence,
    Parity,
    PeriodicExtension,
    PeriodicSequence,
    SymmetricExtension,
    SymmetricSequence,
    Symmetry,
    ZeroPadding,
    ZeroPaddingSequence,
    element,
    periodic_index,
    symmetric_extension_halfpoint_even,
    symmetric_extension_halfpoint_odd,
    symmetric_extension_wholepoint_even,
    symmetric_extension_wholepoint_odd,
)
from .lazy import (
    ConjugatedSequence,
    Convolution,
    DownsampledSequence,
    ModulatedSequence,
    ReversedSequence,
    ShiftedSequence,
    UpsampledSequence,
    collect,
    convolve,
    downsample,
    modulate,
    reverse,
    shift,
    upsample,
)
from .sequence import Sequence
from .special import DiracSequence, ZeroSequence
from .transforms import FourierTransform, ZTransform, fouriertransform, \
    ztransform
from .vector import OffsetVector, reverse_indices

__all__ = [
    "Sequence",
    "DerivedSequence",
    "OffsetVector",
    "reverse_indices",
    "SequenceError",
    "NotCompactError",
    "UndefinedConvolutionError",
    "IndexNotWritableError",
    "InvalidParameterError",
    "EvaluationError",
    "seterr",
    "setfold",
    "Extension",
    "PeriodicExtension",
    "ZeroPadding",
    "ConstantPadding",
    "SymmetricExtension",
    "Symmetry",
    "Parity",
    "element",
    "periodic_index",
    "ExtensionSequence",
    "PeriodicSequence",
    "CompactSequence",
    "ZeroPaddingSequence",
    "ConstantPaddingSequence",
    "SymmetricSequence",
    "symmetric_extension_wholepoint_even",
    "symmetric_extension_wholepoint_odd",
    "symmetric_extension_halfpoint_even",
    "symmetric_extension_halfpoint_odd",
    "Convolution",
    "ConjugatedSequence",
    "ShiftedSequence",
    "ReversedSequence",
    "DownsampledSequence",
    "UpsampledSequence",
    "ModulatedSequence",
    "collect",
    "convolve",
    "shift",
    "reverse",
    "downsample",
    "upsample",
    "modulate",
    "ZeroSequence",
    "DiracSequence",
    "ztransform",
    "fouriertransform",
    "ZTransform",
    "FourierTransform",
]
