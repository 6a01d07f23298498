"""Tests for the base64 codec strategies."""

from __future__ import annotations

import base64

import pytest

from byteslice import (
    AUTO_DECODER,
    RAW_STD_ENCODING,
    RAW_URL_ENCODING,
    STD_ENCODING,
    URL_ENCODING,
    Base64Codec,
    DecoderFunc,
    DecodingError,
    EncoderFunc,
    IBase64Decoder,
    IBase64Encoder,
    lookup_variant,
)


def reference_encodings(data: bytes) -> dict[str, str]:
    """Encode data with the standard library for every variant."""
    std = base64.b64encode(data).decode("ascii")
    url = base64.urlsafe_b64encode(data).decode("ascii")
    return {
        "std": std,
        "raw_std": std.rstrip("="),
        "url": url,
        "raw_url": url.rstrip("="),
    }


VARIANT_CODECS = {
    "std": STD_ENCODING,
    "raw_std": RAW_STD_ENCODING,
    "url": URL_ENCODING,
    "raw_url": RAW_URL_ENCODING,
}


@pytest.mark.parametrize("name", sorted(VARIANT_CODECS))
def test_encode_matches_reference(name: str, message: bytes) -> None:
    """Each variant produces the same text as the standard library."""
    expected = reference_encodings(message)[name]
    assert VARIANT_CODECS[name].encode_to_string(message) == expected


@pytest.mark.parametrize("name", sorted(VARIANT_CODECS))
def test_decode_own_output(name: str, message: bytes) -> None:
    """Each variant decodes text in its own format."""
    codec = VARIANT_CODECS[name]
    assert codec.decode_string(reference_encodings(message)[name]) == message


def test_alice() -> None:
    """The worked example encodes as documented."""
    assert STD_ENCODING.encode_to_string(b"Alice") == "QWxpY2U="
    assert RAW_URL_ENCODING.encode_to_string(b"Alice") == "QWxpY2U"


def test_encode_accepts_bytearray() -> None:
    """Encoders take any bytes-like object."""
    assert URL_ENCODING.encode_to_string(bytearray(b"Alice")) == "QWxpY2U="


def test_padded_rejects_missing_padding() -> None:
    """Padded variants require a length that is a multiple of four."""
    with pytest.raises(DecodingError):
        STD_ENCODING.decode_string("QWxpY2U")
    with pytest.raises(DecodingError):
        URL_ENCODING.decode_string("QWxpY2U")


def test_raw_rejects_padding() -> None:
    """Raw variants reject any padding character."""
    with pytest.raises(DecodingError):
        RAW_STD_ENCODING.decode_string("QWxpY2U=")
    with pytest.raises(DecodingError):
        RAW_URL_ENCODING.decode_string("QWxpY2U=")


def test_alphabets_reject_each_other(message: bytes) -> None:
    """Standard text is invalid URL-safe text and vice versa."""
    encodings = reference_encodings(message)

    with pytest.raises(DecodingError):
        URL_ENCODING.decode_string(encodings["std"])
    with pytest.raises(DecodingError):
        STD_ENCODING.decode_string(encodings["url"])


def test_raw_rejects_impossible_length() -> None:
    """A single trailing character can never be valid base64."""
    with pytest.raises(DecodingError):
        RAW_URL_ENCODING.decode_string("QWxpY")


def test_decode_rejects_garbage() -> None:
    """Characters outside both alphabets fail to decode."""
    with pytest.raises(DecodingError):
        STD_ENCODING.decode_string("QW!pY2U=")


@pytest.mark.parametrize("name", sorted(VARIANT_CODECS))
def test_decode_ignores_line_breaks(name: str, message: bytes) -> None:
    """CR and LF inside the text are skipped, as with wrapped MIME base64."""
    text = reference_encodings(message)[name]
    wrapped = "\r\n".join(text[i:i + 19] for i in range(0, len(text), 19))

    assert VARIANT_CODECS[name].decode_string(wrapped) == message


def test_heuristic_ignores_inner_line_breaks() -> None:
    assert AUTO_DECODER.decode_string("QWxp\nY2U=") == b"Alice"
    assert AUTO_DECODER.decode_string("QWxp\r\nY2U") == b"Alice"


def test_empty_round_trip() -> None:
    """Empty data encodes to empty text for every variant."""
    for codec in VARIANT_CODECS.values():
        assert codec.encode_to_string(b"") == ""
        assert codec.decode_string("") == b""


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("QWxpY2U", RAW_URL_ENCODING),
        ("QWxpY2U=", URL_ENCODING),
        ("a+b/", RAW_STD_ENCODING),
        ("a+b/QQ==", STD_ENCODING),
        ("a+bc", RAW_STD_ENCODING),
        ("a/b=", STD_ENCODING),
        ("", RAW_URL_ENCODING),
    ],
)
def test_heuristic_selection(text: str, expected: Base64Codec) -> None:
    """The heuristic picks the variant from padding and alphabet characters."""
    assert AUTO_DECODER.select(text) is expected


@pytest.mark.parametrize("name", sorted(VARIANT_CODECS))
def test_heuristic_decodes_every_variant(name: str, message: bytes) -> None:
    """Text from any variant decodes back to the original bytes."""
    assert AUTO_DECODER.decode_string(reference_encodings(message)[name]) == message


@pytest.mark.parametrize("length", range(10))
@pytest.mark.parametrize("name", sorted(VARIANT_CODECS))
def test_heuristic_every_padding_length(name: str, length: int) -> None:
    """Text ending in '==', '=' or no padding at all decodes for every variant."""
    data = bytes(range(250, 250 - length, -1))
    text = reference_encodings(data)[name]

    assert AUTO_DECODER.decode_string(text) == data
    assert VARIANT_CODECS[name].decode_string(text) == data


def test_padding_lengths_are_covered() -> None:
    """Lengths 0 to 9 produce every kind of padded ending."""
    endings = {
        len(reference_encodings(bytes(n))["std"]) - len(reference_encodings(bytes(n))["raw_std"])
        for n in range(10)
    }
    assert endings == {0, 1, 2}


def test_heuristic_empty_input() -> None:
    """Empty text decodes to empty bytes."""
    assert AUTO_DECODER.decode_string("") == b""


def test_heuristic_does_not_retry() -> None:
    """A failure with the selected variant is raised without trying another."""
    # Padded text with no '+' or '/' is read as URL-safe; '!' is invalid there.
    with pytest.raises(DecodingError):
        AUTO_DECODER.decode_string("QW!pY2U=")


def test_lookup_variant() -> None:
    """Variants can be found by name."""
    assert lookup_variant("std") is STD_ENCODING
    assert lookup_variant("raw_url") is RAW_URL_ENCODING


def test_lookup_unknown_variant() -> None:
    """Unknown names are rejected with the list of known ones."""
    with pytest.raises(ValueError, match="raw_url"):
        lookup_variant("base32")


def test_function_adapters() -> None:
    """Plain functions can act as codec strategies."""
    decoder = DecoderFunc(lambda text: text[::-1].encode("ascii"))
    encoder = EncoderFunc(lambda data: data.hex())

    assert decoder.decode_string("cba") == b"abc"
    assert encoder.encode_to_string(b"\x01\xff") == "01ff"


def test_codecs_satisfy_protocols() -> None:
    """Built-in codecs satisfy the decoder and encoder contracts."""
    for codec in VARIANT_CODECS.values():
        assert isinstance(codec, IBase64Decoder)
        assert isinstance(codec, IBase64Encoder)
    assert isinstance(AUTO_DECODER, IBase64Decoder)
    assert isinstance(DecoderFunc(bytes.fromhex), IBase64Decoder)
    assert isinstance(EncoderFunc(bytes.hex), IBase64Encoder)
