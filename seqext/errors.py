import inspect
import threading


class SequenceError(Exception):
    """Base class for the errors raised by sequence operations."""


class NotCompactError(SequenceError):
    """Raised when an operation requires a sequence with compact support."""


class UndefinedConvolutionError(SequenceError):
    """Raised when convolving two sequences that are both not compact."""


class IndexNotWritableError(SequenceError, IndexError):
    """Raised when assigning to an index that has no backing storage."""


class InvalidParameterError(SequenceError, ValueError):
    """Raised at construction for invalid factors or index ranges."""


class EvaluationError(Exception):
    """Raised when evaluating an element of a lazy sequence fails."""


# Settings --------------------------------------------------------------------

def seterr(evaluation=None):
    """Set how errors are handled.

    Args:
        evaluation (str): how errors from element arithmetic triggered
            by lazy sequences are propagated:

            - `'wrap'`: raise :class:`EvaluationError` with original error as
              its cause.
            - `'passthrough'`: let the error propagate through SeqExt code,
              might facilitate step-by-step debugging.
            - `None` leave unchanged and return current setting

    Returns:
        The setting value.

    Errors from the library itself (:class:`SequenceError` and its
    subclasses) are never wrapped.
    """
    if evaluation == 'wrap':
        settings.passthrough = False
    elif evaluation == 'passthrough':
        settings.passthrough = True
    elif evaluation is not None:
        raise ValueError("evaluation must be 'wrap' or 'passthrough'")

    return "passthrough" if settings.passthrough else 'wrap'


def setfold(warn_after=None):
    """Set the number of symmetric folds reported as slow.

    Indexing a symmetric extension far away from its embedded vector
    requires a number of folds proportional to the distance. Lookups
    needing more than `warn_after` folds emit a debug log record.

    Args:
        warn_after (Optional[int]): the new threshold, `None` leaves it
            unchanged.

    Returns:
        The setting value.
    """
    if warn_after is not None:
        if warn_after < 0:
            raise ValueError("warn_after must be non-negative")
        settings.fold_warning = int(warn_after)

    return settings.fold_warning


class Settings(threading.local):
    def __init__(self):
        super().__init__()
        self.passthrough = False
        self.fold_warning = 64


settings = Settings()


# Helpers ---------------------------------------------------------------------

def unindent(lines):
    if lines is None:
        return []

    prefix = lines[0]
    while len(prefix) > 0 and not prefix.isspace():
        prefix = prefix[:-1]

    for line in lines[1:]:
        while not line.startswith(prefix):
            prefix = prefix[:-1]

    return [line[len(prefix):] for line in lines]


def format_stack(skip=1):
    out = ""
    for frame in inspect.stack()[:skip:-1]:
        _, filename, lineno, function, code_context, _ = frame
        out += "  File \"{}\", line {}, in {}\n".format(
            filename, lineno, function)
        for line in unindent(code_context):
            out += "    " + line

    return out
