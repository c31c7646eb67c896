"""Encoder: keystream cipher followed by a custom base-32 rendering.

Pipeline for the code points of the latest secret:

1. keystream_cipher      v ^ ((i % 33) + 9) per position
2. decimal_stringify     concatenate the decimal forms, no separators
3. to_hex                lowercase hex of the decimal string's bytes
4. clean_buffer          strip whitespace, decode hex back to bytes
5. base32_from_bytes     5-bit groups, MSB first, no padding

Step 2 is lossy: [1, 23] and [12, 3] both become "123". That is the
artifact format; do not make it reversible.
"""

from typing import Iterable, List, Sequence

from secretgrab.kernel.models import SecretBase32, SecretBytes

SECRET_SAUCE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
KEYSTREAM_PERIOD = 33
KEYSTREAM_OFFSET = 9


class MalformedHexError(ValueError):
    """Raised when the hex stage produced something that does not decode."""
    pass


def keystream_key(index: int) -> int:
    return (index % KEYSTREAM_PERIOD) + KEYSTREAM_OFFSET


def keystream_cipher(values: Iterable[int]) -> List[int]:
    """XOR each value with its positional key. Applying it twice is a no-op."""
    return [v ^ keystream_key(i) for i, v in enumerate(values)]


def decimal_stringify(values: Iterable[int]) -> str:
    return "".join(str(v) for v in values)


def to_hex(text: str) -> str:
    return text.encode("utf-8").hex()


def clean_buffer(hex_text: str) -> bytes:
    """Strip whitespace and decode a hex string.

    Raises:
        MalformedHexError: on odd length or non-hex characters
    """
    compact = "".join(hex_text.split())
    try:
        return bytes.fromhex(compact)
    except ValueError as e:
        raise MalformedHexError(f"Malformed hex buffer: {e}") from e


def base32_from_bytes(data: Sequence[int], alphabet: str = SECRET_SAUCE) -> str:
    """Encode bytes as 5-bit groups over `alphabet`.

    Bits are packed MSB first across byte boundaries. A trailing group of
    1-4 bits is shifted left and zero-filled. No padding is emitted, so the
    output always has ceil(8 * len(data) / 5) characters.
    """
    if len(alphabet) != 32:
        raise ValueError(f"Base-32 alphabet must have 32 characters, got {len(alphabet)}")

    buffer = 0
    bits = 0
    out: List[str] = []
    for b in data:
        buffer = (buffer << 8) | (b & 0xFF)
        bits += 8
        while bits >= 5:
            out.append(alphabet[(buffer >> (bits - 5)) & 31])
            bits -= 5
        buffer &= (1 << bits) - 1

    if bits > 0:
        out.append(alphabet[(buffer << (5 - bits)) & 31])

    return "".join(out)


def encode_values(values: Sequence[int]) -> str:
    """Run code points through every encoder stage and return the base-32 text."""
    ciphered = keystream_cipher(values)
    joined = decimal_stringify(ciphered)
    hex_text = to_hex(joined)
    buffer = clean_buffer(hex_text)
    return base32_from_bytes(buffer)


def encode_secret(latest: SecretBytes) -> SecretBase32:
    """Encode the latest secret, keeping its version."""
    return SecretBase32(version=latest.version, secret=encode_values(latest.secret))
