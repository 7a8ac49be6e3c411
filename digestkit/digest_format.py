"""Output formats for message digests."""

from __future__ import annotations

from enum import Enum


class DigestFormat(Enum):
    """How a digest is written out, keyed by its preference name."""

    HEX_LOWER = "hex-lower"
    HEX_UPPER = "hex-upper"
    BASE64 = "base64"

    @classmethod
    def from_pref(cls, name: str) -> "DigestFormat":
        """Return the format stored under ``name`` in the preferences."""
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"unknown digest format {name!r}") from None

    def to_pref(self) -> str:
        """Return the name under which this format is stored."""
        return self.value