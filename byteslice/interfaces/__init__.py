"""byteslice interfaces package.

This package provides protocol definitions for base64 codec strategies.
"""

from .encoding import IBase64Decoder, IBase64Encoder

__all__ = [
    "IBase64Decoder",
    "IBase64Encoder",
]
