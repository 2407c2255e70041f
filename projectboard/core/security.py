"""Security helpers (password hashing and session cookie signing)."""

from __future__ import annotations

import hashlib
import hmac
import secrets

from argon2 import PasswordHasher, exceptions as argon_exc

_ph = PasswordHasher()
_PREFIX = "argon2$"


def hash_password(password: str) -> str:
    """Create an Argon2 hash with a prefix for detection."""
    hashed = _ph.hash(password)
    return f"{_PREFIX}{hashed}"


def verify_password(password: str, stored_hash: str | None) -> bool:
    stored = stored_hash or ""
    if stored.startswith(_PREFIX):
        stored = stored[len(_PREFIX) :]
    if not stored or not password:
        return False
    try:
        return _ph.verify(stored, password)
    except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
        return False


def _signature(token: str, secret: str) -> str:
    return hmac.new(secret.encode(), token.encode(), hashlib.sha256).hexdigest()


def sign_token(token: str, secret: str) -> str:
    """Return ``<token>.<hmac>`` for use as a cookie value."""
    return f"{token}.{_signature(token, secret)}"


def unsign_token(value: str | None, secret: str) -> str | None:
    """Return the token if the signature matches, otherwise None."""
    if not value or "." not in value:
        return None
    token, _, signature = value.rpartition(".")
    if not token or not secrets.compare_digest(signature, _signature(token, secret)):
        return None
    return token
