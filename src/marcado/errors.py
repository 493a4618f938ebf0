"""Exception classes for Marcado.

Provides standardized exceptions for error handling throughout Marcado.
Every failure is raised at the call that violates a precondition; nothing
in the library catches its own errors.
"""

from __future__ import annotations


class MarcadoError(Exception):
    """Base exception for all Marcado errors.
    
    Subclass this for specific error categories.
    """

    pass


class InvalidArgumentError(MarcadoError, ValueError):
    """An argument was rejected before any state changed.

    Raised for malformed attribute names.
    """

    pass


class UnsupportedTypeError(InvalidArgumentError, TypeError):
    """A value of an unsupported runtime type was passed to a normalizer.

    Raised by ``ensure_html()`` and ``ensure_attributes()``.
    """

    def __init__(self, expected: str, received: object) -> None:
        """Initialize with the accepted shapes and the offending value.
        
        Args:
            expected: Human readable list of accepted shapes
            received: The value that was rejected
        """
        self.received_type = type(received).__qualname__

        super().__init__(f"{expected} expected. Got {self.received_type} instead.")


class InvalidStateError(MarcadoError, TypeError):
    """An operation is not possible given an object's current state.

    Raised when removing values from an attribute whose value is not a list.
    """

    pass
