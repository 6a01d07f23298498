"""Byte buffer with configurable base64 JSON representation.

JSON has no binary type, so bytes travel as base64 text. Serializers usually
hard-code one base64 flavour, while protocols in the wild disagree on padding
and alphabet. Using ``Buffer`` as the field type instead of ``bytes`` lets
each field, or the whole process, choose how that text is produced and read.

Example:
    >>> buf = Buffer()
    >>> buf.unmarshal_json(b'"QWxpY2U="')
    >>> bytes(buf)
    b'Alice'
    >>> buf.marshal_json()
    b'"QWxpY2U"'
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import PydanticCustomError, core_schema

from byteslice.exceptions import (
    ByteSliceError,
    DecodingError,
    EncodingError,
    FramingError,
    NullBufferError,
    UnsupportedTypeError,
)
from byteslice.interfaces import IBase64Decoder, IBase64Encoder
from byteslice.lock import RWLock
from byteslice.registry import CodecRegistry, default_registry

BytesLike = bytes | bytearray | memoryview


class Buffer:
    """A byte sequence that knows how to appear in JSON.

    A buffer created with no arguments is empty and ready to use. Codecs
    not set on the buffer itself are looked up in its registry on every
    operation, so clearing an override immediately falls back to whatever
    the registry holds at that moment.

    All state is guarded by a reader/writer lock. The lock does not extend
    to the object returned by ``bytes()``, which is the live internal buffer.

    Args:
        data: Initial contents. A ``bytearray`` is adopted as the internal
            buffer without copying; anything else is copied.
        registry: Registry supplying default codecs. Defaults to the
            process-wide registry.
    """

    def __init__(
        self,
        data: BytesLike | None = None,
        *,
        registry: CodecRegistry | None = None,
    ) -> None:
        self._lock = RWLock()
        if data is None:
            self._data = bytearray()
        elif isinstance(data, bytearray):
            self._data = data
        else:
            self._data = bytearray(data)
        self._decoder: IBase64Decoder | None = None
        self._encoder: IBase64Encoder | None = None
        self._registry = registry

    def __repr__(self) -> str:
        return f"Buffer({bytes(self)!r})"

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._data)

    def __bytes__(self) -> bytes:
        with self._lock.read():
            return bytes(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Buffer):
            return bytes(self) == bytes(other)
        if isinstance(other, (bytes, bytearray, memoryview)):
            return bytes(self) == bytes(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def registry(self) -> CodecRegistry:
        """Return the registry this buffer falls back to."""
        with self._lock.read():
            return self._registry_nolock()

    def _registry_nolock(self) -> CodecRegistry:
        if self._registry is not None:
            return self._registry
        return default_registry()

    def decoder(self) -> IBase64Decoder:
        """Return the decoder in effect: the buffer's own, else the registry default."""
        with self._lock.read():
            return self._decoder_nolock()

    def _decoder_nolock(self) -> IBase64Decoder:
        if self._decoder is not None:
            return self._decoder
        return self._registry_nolock().decoder()

    def set_decoder(self, decoder: IBase64Decoder | None) -> Buffer:
        """Set this buffer's decoder; ``None`` reverts to the registry default."""
        with self._lock.write():
            self._decoder = decoder
        return self

    def encoder(self) -> IBase64Encoder:
        """Return the encoder in effect: the buffer's own, else the registry default."""
        with self._lock.read():
            return self._encoder_nolock()

    def _encoder_nolock(self) -> IBase64Encoder:
        if self._encoder is not None:
            return self._encoder
        return self._registry_nolock().encoder()

    def set_encoder(self, encoder: IBase64Encoder | None) -> Buffer:
        """Set this buffer's encoder; ``None`` reverts to the registry default."""
        with self._lock.write():
            self._encoder = encoder
        return self

    def unmarshal_json(self, data: bytes | str) -> None:
        """Populate the buffer from a JSON string literal.

        The literal is parsed first, then its contents are decoded with the
        decoder in effect. On any failure the stored bytes are left as they
        were.

        Args:
            data: The framed JSON value, quotes included, e.g. ``b'"QWxpY2U"'``.

        Raises:
            FramingError: If ``data`` is not a JSON string literal.
            DecodingError: If the decoder rejects the string's contents.
        """
        try:
            raw = json.loads(data)
        except (TypeError, ValueError) as err:
            raise FramingError(f"failed to unmarshal data to byteslice.Buffer: {err}") from err

        if not isinstance(raw, str):
            raise FramingError(
                f"failed to unmarshal data to byteslice.Buffer: "
                f"expected a JSON string, got {type(raw).__name__}"
            )

        with self._lock.write():
            self._decode_and_set_nolock(raw)

    def set_encoded(self, text: str) -> None:
        """Decode unquoted base64 text with the decoder in effect and store it.

        Raises:
            DecodingError: If the decoder rejects the text.
        """
        with self._lock.write():
            self._decode_and_set_nolock(text)

    def _decode_and_set_nolock(self, text: str) -> None:
        try:
            decoded = self._decoder_nolock().decode_string(text)
        except Exception as err:
            raise DecodingError(f"failed to decode string for byteslice.Buffer: {err}") from err

        if not isinstance(decoded, (bytes, bytearray, memoryview)):
            raise DecodingError(
                f"failed to decode string for byteslice.Buffer: "
                f"decoder returned {type(decoded).__name__}, expected bytes"
            )
        self._data = bytearray(decoded)

    def encode_string(self) -> str:
        """Encode the stored bytes with the encoder in effect, without JSON quoting.

        Raises:
            EncodingError: If the encoder fails or does not return text.
        """
        with self._lock.read():
            encoder = self._encoder_nolock()
            data = bytes(self._data)

        try:
            encoded = encoder.encode_to_string(data)
        except Exception as err:
            raise EncodingError(f"failed to encode byteslice.Buffer: {err}") from err

        if not isinstance(encoded, str):
            raise EncodingError(
                f"failed to encode byteslice.Buffer: "
                f"encoder returned {type(encoded).__name__}, expected str"
            )
        return encoded

    def marshal_json(self) -> bytes:
        """Return the stored bytes as a JSON string literal, quotes included.

        Raises:
            EncodingError: If the encoder in effect fails.
        """
        return json.dumps(self.encode_string()).encode("utf-8")

    def bytes(self) -> bytearray:
        """Return the live internal buffer.

        Changes made through the returned object change the buffer's
        contents; callers sharing it across threads must synchronize
        themselves. While a ``memoryview`` of it is alive, a ``set_bytes``
        that changes the length stores a new bytearray instead, and the
        view keeps showing the old contents.
        """
        with self._lock.read():
            return self._data

    def set_bytes(self, data: BytesLike) -> None:
        """Copy ``data`` into the internal buffer, reusing its storage."""
        with self._lock.write():
            try:
                self._data[:] = data
            except BufferError:
                # exported views pin the current size
                self._data = bytearray(data)

    def accept(self, value: BufferValue) -> None:
        """Replace the contents from a tagged value.

        Args:
            value: A ``FromBuffer``, ``FromBytes`` or ``FromText``.

        Raises:
            DecodingError: If a ``FromText`` value cannot be decoded.
        """
        value.apply(self)

    def accept_value(self, value: Any) -> None:
        """Replace the contents from a value whose type is not known up front.

        A ``Buffer`` is copied, a bytes-like object is stored as with
        ``set_bytes``, and a ``str`` is decoded as base64 text. Unlike
        ``unmarshal_json``, the string must not carry JSON quotes; quotes
        are passed to the decoder as-is.

        Raises:
            UnsupportedTypeError: If ``value`` is of any other type.
            DecodingError: If a string cannot be decoded.
        """
        self.accept(to_buffer_value(value))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, when_used="json"
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> Buffer:
        if isinstance(value, cls):
            return value

        buf = cls()
        try:
            buf.accept_value(value)
        except ByteSliceError as err:
            raise PydanticCustomError("byteslice", "{reason}", {"reason": str(err)}) from err
        return buf

    @staticmethod
    def _serialize(buf: Buffer) -> str:
        return buf.encode_string()


@dataclass(frozen=True)
class FromBuffer:
    """Contents copied from another buffer."""

    source: Buffer | None

    def apply(self, target: Buffer) -> None:
        target.set_bytes(bytes(buffer_bytes(self.source)))


@dataclass(frozen=True)
class FromBytes:
    """Contents given as raw bytes."""

    data: BytesLike

    def apply(self, target: Buffer) -> None:
        target.set_bytes(self.data)


@dataclass(frozen=True)
class FromText:
    """Contents given as unquoted base64 text."""

    text: str

    def apply(self, target: Buffer) -> None:
        target.set_encoded(self.text)


BufferValue = FromBuffer | FromBytes | FromText


def to_buffer_value(value: Any) -> BufferValue:
    """Wrap an untyped value in the matching tagged value.

    Raises:
        UnsupportedTypeError: If ``value`` is not a buffer, bytes-like or str.
    """
    if isinstance(value, Buffer):
        return FromBuffer(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return FromBytes(value)
    if isinstance(value, str):
        return FromText(value)
    raise UnsupportedTypeError(value)


def buffer_bytes(buf: Buffer | None) -> bytearray:
    """Return the live contents of ``buf``, or an empty bytearray for ``None``."""
    if buf is None:
        return bytearray()
    return buf.bytes()


def buffer_len(buf: Buffer | None) -> int:
    """Return the length of ``buf``, or zero for ``None``."""
    if buf is None:
        return 0
    return len(buf)


def unmarshal_into(buf: Buffer | None, data: bytes | str) -> None:
    """Populate ``buf`` from a JSON string literal.

    Raises:
        NullBufferError: If ``buf`` is ``None``.
        FramingError: If ``data`` is not a JSON string literal.
        DecodingError: If the contents cannot be decoded.
    """
    if buf is None:
        raise NullBufferError("nil byteslice.Buffer")
    buf.unmarshal_json(data)
