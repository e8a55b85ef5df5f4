"""Credential verification: the compiled-in credential set and pluggable secret checks."""

import hmac
from typing import Protocol

import bcrypt

from commodities.schemas.auth import MANAGER, STORE_KEEPER, Credential

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# Demo credential set. Compiled in; not configurable at runtime.
CREDENTIALS: tuple[Credential, ...] = (
    Credential(username="manager", secret="manager123", role=MANAGER, display_name="A. Manager"),
    Credential(username="store", secret="store123", role=STORE_KEEPER, display_name="S. Keeper"),
)


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for a credential entry. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


class CredentialVerifier(Protocol):
    """Checks a submitted password against the secret stored on a Credential."""

    def verify(self, plain_password: str, stored_secret: str) -> bool: ...


class PlaintextVerifier:
    """Exact comparison against a plaintext secret (demo credential set)."""

    def verify(self, plain_password: str, stored_secret: str) -> bool:
        return hmac.compare_digest(
            plain_password.encode("utf-8"), stored_secret.encode("utf-8")
        )


class BcryptVerifier:
    """Comparison against a bcrypt hash produced by hash_password."""

    def verify(self, plain_password: str, stored_secret: str) -> bool:
        return verify_password(plain_password, stored_secret)
