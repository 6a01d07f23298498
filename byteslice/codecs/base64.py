"""Base64 codec strategies.

This module provides the four fixed base64 variants (standard and URL-safe
alphabets, each with and without padding), a heuristic decoder that picks one
of them by looking at the text, and adapters that turn plain functions into
codec strategies.
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Callable

from byteslice.exceptions import DecodingError, EncodingError

logger = logging.getLogger(__name__)

PAD_CHAR = "="
STD_ONLY_CHARS = "+/"
URL_ALTCHARS = b"-_"


class Base64Codec:
    """One base64 variant, usable both as decoder and as encoder.

    Decoding is strict about the variant: a padded codec rejects text whose
    length is not a multiple of four, a raw codec rejects any padding, and
    each alphabet rejects the two characters that belong to the other one.

    Attributes:
        name: Short variant name, e.g. ``"raw_url"``.
        url_safe: Whether the URL-safe alphabet (``-`` and ``_``) is used.
        padded: Whether encoded text carries trailing ``=`` padding.
    """

    def __init__(self, name: str, *, url_safe: bool, padded: bool) -> None:
        self.name = name
        self.url_safe = url_safe
        self.padded = padded
        self._altchars = URL_ALTCHARS if url_safe else None
        self._foreign = STD_ONLY_CHARS if url_safe else URL_ALTCHARS.decode("ascii")

    def __repr__(self) -> str:
        return f"Base64Codec({self.name!r})"

    def encode_to_string(self, data: bytes) -> str:
        """Encode bytes with this variant.

        Args:
            data: The bytes to encode. Any bytes-like object is accepted.

        Returns:
            The encoded text.
        """
        try:
            encoded = base64.b64encode(bytes(data), altchars=self._altchars).decode("ascii")
        except TypeError as err:
            raise EncodingError(f"failed to encode data with {self.name}: {err}") from err

        if not self.padded:
            encoded = encoded.rstrip(PAD_CHAR)
        return encoded

    def decode_string(self, text: str) -> bytes:
        """Decode text encoded with this variant.

        Carriage returns and newlines anywhere in the text are ignored, so
        line-wrapped base64 decodes as if it were on one line.

        Args:
            text: The encoded text.

        Returns:
            The decoded bytes.

        Raises:
            DecodingError: If the text is not valid for this variant.
        """
        text = text.replace("\r", "").replace("\n", "")

        for char in self._foreign:
            if char in text:
                raise DecodingError(f"illegal character {char!r} in {self.name} input")

        if self.padded:
            if len(text) % 4 != 0:
                raise DecodingError(f"{self.name} input length {len(text)} is not a multiple of 4")
            payload = text
        else:
            if PAD_CHAR in text:
                raise DecodingError(f"unexpected padding in {self.name} input")
            payload = text + PAD_CHAR * (-len(text) % 4)

        try:
            return base64.b64decode(payload, altchars=self._altchars, validate=True)
        except (binascii.Error, ValueError) as err:
            raise DecodingError(f"failed to decode {self.name} input: {err}") from err


STD_ENCODING = Base64Codec("std", url_safe=False, padded=True)
RAW_STD_ENCODING = Base64Codec("raw_std", url_safe=False, padded=False)
URL_ENCODING = Base64Codec("url", url_safe=True, padded=True)
RAW_URL_ENCODING = Base64Codec("raw_url", url_safe=True, padded=False)

VARIANTS: dict[str, Base64Codec] = {
    codec.name: codec
    for codec in (STD_ENCODING, RAW_STD_ENCODING, URL_ENCODING, RAW_URL_ENCODING)
}


def lookup_variant(name: str) -> Base64Codec:
    """Return the codec registered under a variant name.

    Args:
        name: One of ``std``, ``raw_std``, ``url`` or ``raw_url``.

    Returns:
        The matching codec.

    Raises:
        ValueError: If no variant has that name.
    """
    try:
        return VARIANTS[name]
    except KeyError:
        known = ", ".join(sorted(VARIANTS))
        raise ValueError(f"unknown base64 variant {name!r} (expected one of: {known})") from None


class HeuristicDecoder:
    """Decoder that guesses the base64 variant from the text itself.

    The guess combines two independent checks:

    1. A trailing ``=`` means padded text, anything else means raw text.
    2. Any ``+`` or ``/`` means the standard alphabet, otherwise URL-safe.

    The selected variant decodes the text. A failure is raised as-is; no
    other variant is tried.

    Example:
        >>> AUTO_DECODER.decode_string("QWxpY2U=")
        b'Alice'
        >>> AUTO_DECODER.decode_string("QWxpY2U")
        b'Alice'
    """

    def __repr__(self) -> str:
        return "HeuristicDecoder()"

    def select(self, text: str) -> Base64Codec:
        """Pick the variant the text appears to use."""
        is_raw = not text.endswith(PAD_CHAR)
        is_url = not any(char in text for char in STD_ONLY_CHARS)

        if is_raw and is_url:
            codec = RAW_URL_ENCODING
        elif is_url:
            codec = URL_ENCODING
        elif is_raw:
            codec = RAW_STD_ENCODING
        else:
            codec = STD_ENCODING

        logger.debug(f"Detected base64 variant {codec.name} for {len(text)} characters of input")
        return codec

    def decode_string(self, text: str) -> bytes:
        return self.select(text).decode_string(text)


AUTO_DECODER = HeuristicDecoder()


class DecoderFunc:
    """Adapter that turns a plain function into a decoder strategy.

    Example:
        >>> dec = DecoderFunc(lambda text: text.encode("ascii"))
        >>> dec.decode_string("abc")
        b'abc'
    """

    def __init__(self, func: Callable[[str], bytes]) -> None:
        self._func = func

    def decode_string(self, text: str) -> bytes:
        return self._func(text)


class EncoderFunc:
    """Adapter that turns a plain function into an encoder strategy."""

    def __init__(self, func: Callable[[bytes], str]) -> None:
        self._func = func

    def encode_to_string(self, data: bytes) -> str:
        return self._func(data)
