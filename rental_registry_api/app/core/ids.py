"""
Identifier generation and textual encoding.

Every record is keyed by 29 random bytes.  On the wire and in the
database the bytes are written in the principal text form: a CRC32
checksum of the raw bytes (4 bytes, big endian) is prepended, the
result is base32 encoded, lowercased, stripped of ``=`` padding and
split into groups of five characters joined by ``-``.  The checksum
lets ``decode_id`` reject mistyped identifiers before they reach a
store lookup.

Uniqueness is probabilistic only; generated identifiers are never
checked against existing keys.
"""

import base64
import binascii
import secrets
import zlib

ID_LENGTH = 29
CHECKSUM_LENGTH = 4
GROUP_SIZE = 5


class InvalidIdentifier(ValueError):
    """Raised when a text identifier cannot be decoded."""


def encode_id(raw: bytes) -> str:
    """Render raw identifier bytes in the dashed base32 text form."""
    if len(raw) > ID_LENGTH:
        raise InvalidIdentifier(f"identifier is longer than {ID_LENGTH} bytes")
    checksum = zlib.crc32(raw).to_bytes(CHECKSUM_LENGTH, "big")
    text = base64.b32encode(checksum + raw).decode("ascii").lower().rstrip("=")
    return "-".join(text[i:i + GROUP_SIZE] for i in range(0, len(text), GROUP_SIZE))


def decode_id(text: str) -> bytes:
    """Parse a text identifier back into its raw bytes.

    Raises
    ------
    InvalidIdentifier
        If the text is not valid base32, is too long, or its checksum
        does not match.
    """
    compact = text.replace("-", "").upper()
    padded = compact + "=" * (-len(compact) % 8)
    try:
        data = base64.b32decode(padded)
    except (binascii.Error, ValueError) as exc:
        raise InvalidIdentifier(f"malformed identifier {text!r}") from exc
    if len(data) < CHECKSUM_LENGTH or len(data) - CHECKSUM_LENGTH > ID_LENGTH:
        raise InvalidIdentifier(f"identifier {text!r} has an invalid length")
    checksum, raw = data[:CHECKSUM_LENGTH], data[CHECKSUM_LENGTH:]
    if zlib.crc32(raw).to_bytes(CHECKSUM_LENGTH, "big") != checksum:
        raise InvalidIdentifier(f"identifier {text!r} failed its checksum")
    # Reject alternative spellings so every key has exactly one text form.
    if encode_id(raw) != text:
        raise InvalidIdentifier(f"identifier {text!r} is not in canonical form")
    return raw


def is_valid_id(text: str) -> bool:
    try:
        decode_id(text)
    except InvalidIdentifier:
        return False
    return True


def generate_id() -> str:
    """Return a fresh identifier built from 29 bytes of OS randomness."""
    return encode_id(secrets.token_bytes(ID_LENGTH))
