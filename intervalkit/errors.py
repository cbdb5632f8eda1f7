"""Exceptions raised by interval construction and identification."""


class IntervalError(ValueError):
    """Base class for every caller-facing intervalkit failure."""


class ArityError(IntervalError):
    """The argument array holds fewer than 2 or more than 3 elements."""


class InvalidDirectionError(IntervalError):
    """The direction token is neither "asc" nor "dsc"."""


class InvalidNoteError(IntervalError):
    """A note token does not match the accepted note pattern."""


class UnknownIntervalError(IntervalError):
    """The interval name is not one of the tabulated intervals."""


class UnidentifiableIntervalError(IntervalError):
    """The semitone distance between two notes maps to no tabulated interval."""
