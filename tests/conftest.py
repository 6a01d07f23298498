"""Shared fixtures for byteslice tests."""

from __future__ import annotations

from typing import Iterator

import pytest

from byteslice import (
    CodecRegistry,
    global_decoder,
    global_encoder,
    set_global_decoder,
    set_global_encoder,
)

# Every byte value from 0 to 63, so that all four base64 variants differ.
MESSAGE = bytes(range(64))


@pytest.fixture(autouse=True)
def restore_global_codecs() -> Iterator[None]:
    """Put the process-wide default codecs back after each test."""
    decoder = global_decoder()
    encoder = global_encoder()
    yield
    set_global_decoder(decoder)
    set_global_encoder(encoder)


@pytest.fixture
def registry() -> CodecRegistry:
    """A fresh registry with the built-in defaults."""
    return CodecRegistry()


@pytest.fixture
def message() -> bytes:
    return MESSAGE
