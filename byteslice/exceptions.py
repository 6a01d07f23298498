"""Exception classes for byteslice.

This module defines the exception types raised by buffers, codecs and the
codec registry.
"""


class ByteSliceError(Exception):
    """Base exception class for all byteslice errors."""

    pass


class NullBufferError(ByteSliceError):
    """Exception raised when decoding into an absent buffer."""

    pass


class FramingError(ByteSliceError):
    """Exception raised when raw JSON text is not a valid string literal."""

    pass


class CodecError(ByteSliceError):
    """Exception raised when a codec strategy rejects its input."""

    pass


class DecodingError(CodecError):
    """Exception raised when encoded text cannot be turned into bytes."""

    pass


class EncodingError(CodecError):
    """Exception raised when bytes cannot be turned into encoded text."""

    pass


class UnsupportedTypeError(ByteSliceError, TypeError):
    """Exception raised when a buffer is handed a value of an unknown type."""

    def __init__(self, value: object) -> None:
        self.value_type = type(value)
        super().__init__(
            f"failed to accept value for byteslice.Buffer: "
            f"can't handle type {self.value_type.__qualname__}"
        )
