"""Codec registry.

This module holds the default decoder and encoder used by buffers that have
no codec of their own. A ``CodecRegistry`` is an ordinary object: build one
at startup and bind it to buffers with ``Buffer(registry=...)``. For
convenience a single process-wide registry is created on first use from
``CodecSettings`` and served by ``default_registry()`` and the
``global_*`` / ``set_global_*`` functions.
"""

from __future__ import annotations

import logging
import threading

from byteslice.codecs import AUTO_DECODER, RAW_URL_ENCODING, lookup_variant
from byteslice.interfaces import IBase64Decoder, IBase64Encoder
from byteslice.lock import RWLock
from byteslice.settings import AUTO, CodecSettings

logger = logging.getLogger(__name__)


class CodecRegistry:
    """Holder of one default decoder and one default encoder.

    Reads share a reader/writer lock, so lookups from many threads proceed
    together; replacing a codec is exclusive. Operations that already fetched
    a codec keep using it after it is replaced.

    Args:
        decoder: Initial default decoder. Defaults to the heuristic decoder.
        encoder: Initial default encoder. Defaults to raw URL-safe base64.
    """

    def __init__(
        self,
        decoder: IBase64Decoder | None = None,
        encoder: IBase64Encoder | None = None,
    ) -> None:
        self._lock = RWLock()
        self._decoder: IBase64Decoder = decoder if decoder is not None else AUTO_DECODER
        self._encoder: IBase64Encoder = encoder if encoder is not None else RAW_URL_ENCODING

    @classmethod
    def from_settings(cls, settings: CodecSettings) -> CodecRegistry:
        """Build a registry from codec settings.

        Args:
            settings: The settings naming the default variants.

        Returns:
            A new registry.
        """
        if settings.default_decoder == AUTO:
            decoder: IBase64Decoder = AUTO_DECODER
        else:
            decoder = lookup_variant(settings.default_decoder)
        encoder = lookup_variant(settings.default_encoder)
        return cls(decoder=decoder, encoder=encoder)

    def decoder(self) -> IBase64Decoder:
        with self._lock.read():
            return self._decoder

    def encoder(self) -> IBase64Encoder:
        with self._lock.read():
            return self._encoder

    def set_decoder(self, decoder: IBase64Decoder) -> None:
        """Replace the default decoder. No validation is performed."""
        with self._lock.write():
            self._decoder = decoder
        logger.debug(f"Default decoder set to {decoder!r}")

    def set_encoder(self, encoder: IBase64Encoder) -> None:
        """Replace the default encoder. No validation is performed."""
        with self._lock.write():
            self._encoder = encoder
        logger.debug(f"Default encoder set to {encoder!r}")


_default_registry: CodecRegistry | None = None
_default_registry_lock = threading.Lock()


def default_registry() -> CodecRegistry:
    """Return the process-wide registry, creating it from the environment on first use."""
    global _default_registry

    with _default_registry_lock:
        if _default_registry is None:
            settings = CodecSettings()
            logger.debug(
                f"Creating default codec registry "
                f"(decoder={settings.default_decoder}, encoder={settings.default_encoder})"
            )
            _default_registry = CodecRegistry.from_settings(settings)
        return _default_registry


def global_decoder() -> IBase64Decoder:
    return default_registry().decoder()


def global_encoder() -> IBase64Encoder:
    return default_registry().encoder()


def set_global_decoder(decoder: IBase64Decoder) -> None:
    default_registry().set_decoder(decoder)


def set_global_encoder(encoder: IBase64Encoder) -> None:
    default_registry().set_encoder(encoder)
