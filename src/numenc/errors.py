"""
Errors raised by the codecs.
"""


class NumberEncodingError(ValueError):
    """
    Base class for every error raised by this package.
    """


class InvalidInput(NumberEncodingError):
    """
    A caller supplied structure violates the preconditions
    of the number system, e.g. repeated values.
    """


class InvalidPermutation(InvalidInput):
    """
    The values are not an arrangement of distinct elements.
    """


class InvalidCombination(InvalidInput):
    """
    The values are not a strictly increasing sequence of
    non-negative integers.
    """


class OutOfRange(NumberEncodingError):
    """
    An integer has no corresponding structure for the
    given size parameters.
    """


class DivisionByZero(NumberEncodingError, ZeroDivisionError):
    """
    Division of an integer by zero.
    """
