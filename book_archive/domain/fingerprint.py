"""Fingerprint derivation for archived books. Pure functions, no infrastructure."""

import hashlib
from dataclasses import dataclass

from book_archive.domain.exceptions import InvalidFingerprintError

FINGERPRINT_SIZE = 32  # BLAKE2b-256


@dataclass(frozen=True)
class Fingerprint:
    """Fixed-width digest identifying a normalized (title, author) pair."""

    digest: bytes

    def __post_init__(self) -> None:
        if len(self.digest) != FINGERPRINT_SIZE:
            raise InvalidFingerprintError(
                f"fingerprint must be {FINGERPRINT_SIZE} bytes, got {len(self.digest)}"
            )

    @property
    def hex(self) -> str:
        return self.digest.hex()

    @classmethod
    def from_hex(cls, value: str) -> "Fingerprint":
        """Parse a hex digest; an optional 0x prefix is accepted. Raises InvalidFingerprintError."""
        text = value.strip()
        if text[:2].lower() == "0x":
            text = text[2:]
        try:
            digest = bytes.fromhex(text)
        except ValueError as e:
            raise InvalidFingerprintError(f"fingerprint is not valid hex: {value!r}") from e
        return cls(digest)

    def __str__(self) -> str:
        return self.hex


def normalize(value: bytes) -> bytes:
    """ASCII case folding. Non-ASCII bytes pass through unchanged."""
    return bytes(value).lower()


def _render(value: bytes) -> str:
    # b"ab" -> "[97, 98]"; brackets keep the field boundary visible
    return "[" + ", ".join(str(b) for b in value) + "]"


def preimage(title: bytes, author: bytes) -> bytes:
    """Canonical byte string hashed into a fingerprint."""
    return (_render(normalize(title)) + _render(normalize(author))).encode("ascii")


def fingerprint(title: bytes, author: bytes) -> Fingerprint:
    """Derive the archive key for a book. Deterministic and total over all byte inputs."""
    digest = hashlib.blake2b(preimage(title, author), digest_size=FINGERPRINT_SIZE).digest()
    return Fingerprint(digest)
