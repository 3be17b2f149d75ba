"""Opaque address values consumed by the principal model.

Encoding, checksums and key derivation live elsewhere. This module only
gives the version tag and the raw hash a type to travel in.
"""

from enum import IntEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

HASH_LENGTH = 20


class AddressVersion(IntEnum):
    """Network and signature kind an address belongs to."""

    MAINNET_SINGLE_SIG = 22
    MAINNET_MULTI_SIG = 20
    TESTNET_SINGLE_SIG = 26
    TESTNET_MULTI_SIG = 21

    @property
    def is_mainnet(self) -> bool:
        return self in (
            AddressVersion.MAINNET_SINGLE_SIG,
            AddressVersion.MAINNET_MULTI_SIG,
        )

    @property
    def is_multisig(self) -> bool:
        return self in (
            AddressVersion.MAINNET_MULTI_SIG,
            AddressVersion.TESTNET_MULTI_SIG,
        )


class StacksAddress(BaseModel):
    """
    A raw address: the 20-byte hash identifying an account.

    Attributes:
        hash_bytes (bytes): The hash (e.g. hash160 of a public key).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        ser_json_bytes="hex",
        val_json_bytes="hex",
    )

    hash_bytes: bytes = Field(
        min_length=HASH_LENGTH,
        max_length=HASH_LENGTH,
        description="The 20-byte hash identifying the address.",
    )

    @classmethod
    def from_hex(cls, text: str) -> Self:
        """Build an address from its hex representation.

        Args:
            text (str): 40 hexadecimal characters.

        Returns:
            Self: The address wrapping the decoded bytes.

        Raises:
            ValueError: If the text is not valid hex.
            pydantic.ValidationError: If the decoded hash has the wrong size.
        """
        return cls(hash_bytes=bytes.fromhex(text))

    def to_hex(self) -> str:
        return self.hash_bytes.hex()
