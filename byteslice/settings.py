"""Environment configuration for the process-wide codec defaults."""

from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from byteslice.codecs import lookup_variant

AUTO = "auto"


class CodecSettings(BaseSettings):
    """
    Process-wide codec defaults, read from ``BYTESLICE_*`` environment
    variables when the default registry is first built.
    """

    model_config = SettingsConfigDict(env_prefix="BYTESLICE_")

    default_decoder: Annotated[
        str,
        Field(
            description=(
                "Decoder used by buffers without their own decoder.\n"
                "'auto' detects the variant from the text; otherwise one of\n"
                "'std', 'raw_std', 'url' or 'raw_url'."
            ),
            default=AUTO
        )
    ]

    default_encoder: Annotated[
        str,
        Field(
            description=(
                "Encoder used by buffers without their own encoder.\n"
                "One of 'std', 'raw_std', 'url' or 'raw_url'."
            ),
            default="raw_url"
        )
    ]

    @field_validator("default_decoder")
    @classmethod
    def validate_decoder(cls, value: str) -> str:
        if value != AUTO:
            lookup_variant(value)
        return value

    @field_validator("default_encoder")
    @classmethod
    def validate_encoder(cls, value: str) -> str:
        lookup_variant(value)
        return value
