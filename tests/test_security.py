from __future__ import annotations

from projectboard.core.security import hash_password, sign_token, unsign_token, verify_password


def test_hash_and_verify_password():
    stored = hash_password("correct horse")
    assert stored.startswith("argon2$")
    assert verify_password("correct horse", stored) is True
    assert verify_password("wrong", stored) is False


def test_verify_accepts_bare_argon2_hash():
    stored = hash_password("pw")[len("argon2$") :]
    assert verify_password("pw", stored) is True


def test_verify_rejects_empty_or_garbage_hash():
    assert verify_password("pw", None) is False
    assert verify_password("pw", "") is False
    assert verify_password("pw", "not-a-hash") is False


def test_signed_token_round_trip_and_tampering():
    value = sign_token("abc-123", "secret")
    assert unsign_token(value, "secret") == "abc-123"
    assert unsign_token(value, "other-secret") is None
    assert unsign_token(value[:-1] + ("0" if value[-1] != "0" else "1"), "secret") is None
    assert unsign_token("abc-123", "secret") is None
    assert unsign_token(None, "secret") is None
