"""
Password hashing and access tokens.
"""

import pytest
from jose import JWTError, jwt

from app.core.config import settings
from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_hash_is_salted_and_verifiable():
    first, second = hash_password("qwerty"), hash_password("qwerty")
    assert first != second
    assert first != "qwerty"
    assert verify_password("qwerty", first)
    assert not verify_password("qwertz", first)


def test_access_token_carries_subject():
    token = create_access_token("abc", "a@example.com")
    payload = decode_access_token(token)
    assert payload["sub"] == "abc"
    assert payload["email"] == "a@example.com"
    assert payload["type"] == "access"


def test_token_of_other_type_is_rejected():
    token = jwt.encode(
        {"sub": "abc", "type": "refresh"},
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )
    with pytest.raises(JWTError):
        decode_access_token(token)


def test_tampered_token_is_rejected():
    token = create_access_token("abc", "a@example.com")
    with pytest.raises(JWTError):
        decode_access_token(token[:-2] + ("AA" if token[-2:] != "AA" else "BB"))
