"""Codec interfaces for byteslice.

This module defines the two capability contracts a base64 codec strategy
fulfils. Any object with a matching method satisfies the contract; there is
no base class to inherit from.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IBase64Decoder(Protocol):
    """Interface for objects that decode base64 text into bytes."""

    def decode_string(self, text: str) -> bytes:
        """Decode base64 encoded text.

        Args:
            text: The encoded text, without any JSON string quoting.

        Returns:
            The decoded bytes.

        Raises:
            Exception: When the text is not valid for this decoder.
        """
        ...


@runtime_checkable
class IBase64Encoder(Protocol):
    """Interface for objects that encode bytes into base64 text."""

    def encode_to_string(self, data: bytes) -> str:
        """Encode bytes as base64 text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text, without any JSON string quoting.

        Raises:
            Exception: When the encoder cannot represent the data.
        """
        ...
