from datetime import timedelta

from app.core.security import (
    get_password_hash,
    verify_password,
    create_access_token,
    create_user_token,
    decode_access_token,
)


def test_password_hash_is_salted():
    first = get_password_hash("same password")
    second = get_password_hash("same password")
    assert first != second
    assert "same password" not in first
    assert verify_password("same password", first)
    assert verify_password("same password", second)


def test_password_hash_uses_ten_rounds():
    assert get_password_hash("x").startswith("$2b$10$")


def test_verify_password_rejects_wrong_password():
    hashed = get_password_hash("right")
    assert not verify_password("wrong", hashed)


def test_user_token_round_trip():
    payload = decode_access_token(create_user_token(42))
    assert payload["sub"] == "42"
    assert "exp" in payload


def test_expired_token_is_rejected():
    token = create_access_token({"sub": "1"}, expires_delta=timedelta(seconds=-1))
    assert decode_access_token(token) is None
