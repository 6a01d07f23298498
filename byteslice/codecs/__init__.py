"""Codec implementation package.

This package provides the concrete base64 codec strategies: the four fixed
variants, the heuristic decoder, and function adapters.
"""

from .base64 import (
    AUTO_DECODER,
    RAW_STD_ENCODING,
    RAW_URL_ENCODING,
    STD_ENCODING,
    URL_ENCODING,
    VARIANTS,
    Base64Codec,
    DecoderFunc,
    EncoderFunc,
    HeuristicDecoder,
    lookup_variant,
)

__all__ = [
    "AUTO_DECODER",
    "RAW_STD_ENCODING",
    "RAW_URL_ENCODING",
    "STD_ENCODING",
    "URL_ENCODING",
    "VARIANTS",
    "Base64Codec",
    "DecoderFunc",
    "EncoderFunc",
    "HeuristicDecoder",
    "lookup_variant",
]
