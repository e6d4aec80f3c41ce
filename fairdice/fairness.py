"""
Commit/reveal fairness exchange.

The computer commits to a secret value in ``[0, modulus)`` by publishing
``HMAC(key, value)``. The user then picks their own value knowing only the
HMAC. Once the user's value is fixed the computer reveals the key and the
secret, anyone can check the HMAC, and the shared result is
``(secret + user_value) mod modulus``.
"""

import hashlib
import hmac
import secrets
from dataclasses import dataclass, field

from fairdice.errors import FairnessError

KEY_BYTES = 32
HASH_ALGORITHM = hashlib.sha3_256

# ==============================================================================
# Cryptographic primitives
# ==============================================================================


def generate_key() -> bytes:
    return secrets.token_bytes(KEY_BYTES)


def generate_secure_random(modulus: int) -> int:
    if modulus < 1:
        raise ValueError(f"Modulus must be a positive integer, got {modulus}.")
    return secrets.randbelow(modulus)


def calculate_hmac(key: bytes, message_int: int) -> str:
    message_bytes = str(message_int).encode("utf-8")
    h = hmac.new(key, message_bytes, HASH_ALGORITHM)
    return h.hexdigest().upper()


def verify(key: bytes, secret_value: int, digest: str) -> bool:
    """Checks that ``digest`` is the HMAC of ``secret_value`` under ``key``."""
    expected = calculate_hmac(key, secret_value)
    return hmac.compare_digest(expected.encode("utf-8"), digest.upper().encode("utf-8"))


def combine(secret_value: int, counterparty_value: int, modulus: int) -> int:
    if not 0 <= counterparty_value < modulus:
        raise ValueError(f"Value {counterparty_value} is outside the range 0..{modulus - 1}.")
    return (secret_value + counterparty_value) % modulus

# ==============================================================================
# Commitment
# ==============================================================================


@dataclass(frozen=True)
class Commitment:
    modulus: int
    secret_value: int = field(repr=False)
    key: bytes = field(repr=False)
    digest: str

    @property
    def key_hex(self) -> str:
        return self.key.hex().upper()

    def reveal(self) -> tuple[bytes, int]:
        """Only call once the counterparty's value has been received."""
        return self.key, self.secret_value


def commit(modulus: int) -> Commitment:
    """Draws a fresh secret value and key and binds them with an HMAC."""
    secret_value = generate_secure_random(modulus)
    key = generate_key()
    return Commitment(modulus, secret_value, key, calculate_hmac(key, secret_value))


def check_reveal(commitment: Commitment) -> None:
    key, secret_value = commitment.reveal()
    if not verify(key, secret_value, commitment.digest):
        raise FairnessError(
            f"revealed value {secret_value} with KEY={commitment.key_hex} "
            f"does not match HMAC={commitment.digest}"
        )
    if not 0 <= secret_value < commitment.modulus:
        raise FairnessError(
            f"revealed value {secret_value} is outside the committed range 0..{commitment.modulus - 1}"
        )
