"""Shared helpers and error types for the emulator."""


class EmulatorError(Exception):
    """Base class for errors raised by the emulator."""


class NotYetImplementedError(EmulatorError):
    """Raised when the emulated machine reaches a feature that is not emulated yet."""

    def __init__(self, message="NOT YET IMPLEMENTED"):
        super().__init__(message)


def bit(value, n):
    """Return bit ``n`` of ``value`` as 0 or 1."""
    return (value >> n) & 1


def set_bit(value, n, on):
    """Return ``value`` with bit ``n`` set when ``on`` is true, cleared otherwise."""
    mask = 1 << n
    return value | mask if on else value & ~mask


def between(a, low, high):
    """Tell whether ``a`` lies in the inclusive range ``low``..``high``."""
    return low <= a <= high