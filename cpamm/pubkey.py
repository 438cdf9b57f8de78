"""Public keys, base58 text form and program-derived addresses."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(_ALPHABET)}

PUBKEY_BYTES = 32
MAX_SEED_LEN = 32
MAX_SEEDS = 16
_PDA_MARKER = b"ProgramDerivedAddress"

_P = 2**255 - 19
_D = (-121665 * pow(121666, _P - 2, _P)) % _P


def b58encode(data):
    """Encode bytes as base58 text."""
    data = bytes(data)
    stripped = data.lstrip(b"\x00")
    zeros = len(data) - len(stripped)
    number = int.from_bytes(stripped, "big")
    digits = []
    while number:
        number, rem = divmod(number, 58)
        digits.append(_ALPHABET[rem])
    return "1" * zeros + "".join(reversed(digits))


def b58decode(text):
    """Decode base58 text into bytes."""
    stripped = text.lstrip("1")
    zeros = len(text) - len(stripped)
    number = 0
    for char in stripped:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character {char!r}") from None
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\x00" * zeros + body


def is_on_curve(data):
    """Whether 32 bytes decompress to a point on the ed25519 curve."""
    data = bytes(data)
    if len(data) != PUBKEY_BYTES:
        return False
    y = (int.from_bytes(data, "little") & ((1 << 255) - 1)) % _P
    y2 = y * y % _P
    u = (y2 - 1) % _P
    v = (_D * y2 + 1) % _P
    x2 = u * pow(v, _P - 2, _P) % _P
    return x2 == 0 or pow(x2, (_P - 1) // 2, _P) == 1


@dataclass(frozen=True, order=True)
class Pubkey:
    """A 32-byte account address, ordered by its bytes."""

    data: bytes

    def __post_init__(self):
        raw = bytes(self.data)
        if len(raw) != PUBKEY_BYTES:
            raise ValueError(f"a public key is {PUBKEY_BYTES} bytes, got {len(raw)}")
        object.__setattr__(self, "data", raw)

    @classmethod
    def from_base58(cls, text):
        return cls(b58decode(text))

    @classmethod
    def default(cls):
        return cls(bytes(PUBKEY_BYTES))

    def __bytes__(self):
        return self.data

    def __str__(self):
        return b58encode(self.data)

    def __repr__(self):
        return f"Pubkey('{self}')"


def create_program_address(seeds, program_id):
    """Derive the address for exactly these seeds; raises if it lies on the curve."""
    seeds = [bytes(seed) for seed in seeds]
    if len(seeds) > MAX_SEEDS:
        raise ValueError(f"at most {MAX_SEEDS} seeds are allowed")
    if any(len(seed) > MAX_SEED_LEN for seed in seeds):
        raise ValueError(f"a seed is at most {MAX_SEED_LEN} bytes")
    digest = hashlib.sha256()
    for seed in seeds:
        digest.update(seed)
    digest.update(bytes(program_id))
    digest.update(_PDA_MARKER)
    address = digest.digest()
    if is_on_curve(address):
        raise ValueError("derived address lies on the ed25519 curve")
    return Pubkey(address)


def find_program_address(seeds, program_id):
    """Return (address, bump) for the highest bump giving an off-curve address."""
    seeds = [bytes(seed) for seed in seeds]
    for bump in range(255, 0, -1):
        try:
            return create_program_address([*seeds, bytes([bump])], program_id), bump
        except ValueError:
            if len(seeds) >= MAX_SEEDS or any(len(s) > MAX_SEED_LEN for s in seeds):
                raise
    raise ValueError("unable to find a viable program address bump seed")