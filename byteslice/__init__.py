"""byteslice: bytes with a configurable base64 JSON representation.

This package provides a buffer type to use in place of ``bytes`` in JSON
documents, letting applications choose which base64 variant (standard or
URL-safe alphabet, padded or raw) is written, and reading any of them.

Main Components:
    - Buffer: The byte container, with JSON and pydantic support
    - CodecRegistry: Default decoder/encoder holder
    - Codecs: The four base64 variants and the heuristic decoder
    - Interfaces: Protocol definitions for codec strategies

Example:
    >>> from byteslice import Buffer, STD_ENCODING
    >>> Buffer(b"Alice").set_encoder(STD_ENCODING).marshal_json()
    b'"QWxpY2U="'
"""

from byteslice.buffer import (
    Buffer,
    BufferValue,
    FromBuffer,
    FromBytes,
    FromText,
    buffer_bytes,
    buffer_len,
    to_buffer_value,
    unmarshal_into,
)
from byteslice.codecs import (
    AUTO_DECODER,
    RAW_STD_ENCODING,
    RAW_URL_ENCODING,
    STD_ENCODING,
    URL_ENCODING,
    Base64Codec,
    DecoderFunc,
    EncoderFunc,
    HeuristicDecoder,
    lookup_variant,
)
from byteslice.exceptions import (
    ByteSliceError,
    CodecError,
    DecodingError,
    EncodingError,
    FramingError,
    NullBufferError,
    UnsupportedTypeError,
)
from byteslice.interfaces import IBase64Decoder, IBase64Encoder
from byteslice.registry import (
    CodecRegistry,
    default_registry,
    global_decoder,
    global_encoder,
    set_global_decoder,
    set_global_encoder,
)
from byteslice.serialization import BufferJSONEncoder
from byteslice.settings import CodecSettings

__version__ = "0.1.0"

__all__ = [
    # Buffer
    "Buffer",
    "BufferValue",
    "FromBuffer",
    "FromBytes",
    "FromText",
    "buffer_bytes",
    "buffer_len",
    "to_buffer_value",
    "unmarshal_into",
    "BufferJSONEncoder",
    # Codecs
    "AUTO_DECODER",
    "RAW_STD_ENCODING",
    "RAW_URL_ENCODING",
    "STD_ENCODING",
    "URL_ENCODING",
    "Base64Codec",
    "DecoderFunc",
    "EncoderFunc",
    "HeuristicDecoder",
    "lookup_variant",
    # Interfaces
    "IBase64Decoder",
    "IBase64Encoder",
    # Registry
    "CodecRegistry",
    "CodecSettings",
    "default_registry",
    "global_decoder",
    "global_encoder",
    "set_global_decoder",
    "set_global_encoder",
    # Exceptions
    "ByteSliceError",
    "CodecError",
    "DecodingError",
    "EncodingError",
    "FramingError",
    "NullBufferError",
    "UnsupportedTypeError",
]
