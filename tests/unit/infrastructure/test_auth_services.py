from __future__ import annotations

from uuid import uuid4

import pytest
from jose import jwt

from src.application.errors import AuthError
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher


def make_service(**overrides) -> JWTService:
    options = dict(secret_key="unit-secret", algorithm="HS256", access_token_expires_minutes=5)
    options.update(overrides)
    return JWTService(**options)


def test_password_hash_roundtrip_and_bad_hash():
    hasher = PasswordHasher(rounds=4)
    hashed = hasher.hash("password123")
    assert hashed != "password123"
    assert hasher.verify("password123", hashed)
    assert not hasher.verify("wrong", hashed)
    assert not hasher.verify("password123", "")
    assert not hasher.verify("password123", "not-a-hash")


def test_access_token_carries_subject_and_audience():
    volunteer_id = uuid4()
    service = make_service(issuer="sfp", audience="portal")
    claims = service.decode(service.create_access_token(subject=volunteer_id))
    assert claims["sub"] == str(volunteer_id)
    assert claims["iss"] == "sfp"
    assert claims["typ"] == "access"
    assert service.max_age_seconds == 300


def test_expired_token_is_rejected():
    service = make_service(access_token_expires_minutes=-1)
    with pytest.raises(AuthError, match="expired"):
        service.decode(service.create_access_token(subject=uuid4()))


def test_foreign_signature_and_token_type_are_rejected():
    service = make_service()
    other = make_service(secret_key="another-secret")
    with pytest.raises(AuthError, match="Invalid token"):
        service.decode(other.create_access_token(subject=uuid4()))

    refresh = jwt.encode({"sub": str(uuid4()), "typ": "refresh"}, "unit-secret", algorithm="HS256")
    with pytest.raises(AuthError, match="Invalid token type"):
        service.decode(refresh)
