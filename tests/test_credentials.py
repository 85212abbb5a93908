"""Tests for password hashing, session tokens and one-time tokens."""

import re
from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from src.config import Settings
from src.models.user import IssuedToken, User
from src.services.auth import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    is_strong_password,
    verify_password,
)
from src.services.tokens import issue_reset_token, issue_verification_code

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


@pytest.mark.parametrize("password", ["secret", "secret1", "a much longer pass phrase", "ünïcødé!"])
def test_hash_then_verify(password):
    """Test a hashed password verifies and a different one does not."""
    hashed = get_password_hash(password)
    assert hashed != password
    assert verify_password(password, hashed)
    assert not verify_password(password + "x", hashed)


def test_hash_is_salted():
    """Test hashing the same password twice gives different hashes."""
    assert get_password_hash("secret1") != get_password_hash("secret1")


def test_hash_uses_configured_work_factor():
    """Test the bcrypt cost comes from the settings passed in."""
    settings = Settings(bcrypt_rounds=5)
    hashed = get_password_hash("secret1", settings)
    assert hashed.startswith("$2b$05$")
    assert verify_password("secret1", hashed, settings)


@pytest.mark.parametrize(
    "password, expected",
    [("", False), ("12345", False), ("123456", True), ("1234567", True)],
)
def test_password_strength(password, expected):
    """Test the six character minimum."""
    assert is_strong_password(password) is expected


def test_verification_code_format():
    """Test codes are six digits and expire after 24 hours."""
    for _ in range(50):
        token = issue_verification_code(NOW)
        assert re.fullmatch(r"[1-9]\d{5}", token.value)
        assert token.expires_at == NOW + timedelta(hours=24)


def test_reset_token_format():
    """Test reset tokens are 40 hex characters and expire after one hour."""
    token = issue_reset_token(NOW)
    assert re.fullmatch(r"[0-9a-f]{40}", token.value)
    assert token.expires_at == NOW + timedelta(hours=1)
    assert issue_reset_token(NOW).value != token.value


def test_pending_token_expiry_is_read_back_as_utc():
    """Naive timestamps read back from SQLite are treated as UTC."""
    user = User(verification_token="123456", verification_token_expires_at=NOW.replace(tzinfo=None))
    assert user.verification == IssuedToken("123456", NOW)
    assert user.password_reset is None


def test_access_token_round_trip():
    """Test a session token carries the user id."""
    settings = Settings(jwt_secret="test-secret")
    token = create_access_token(42, settings)

    payload = decode_access_token(token, settings)
    assert payload["sub"] == "42"
    assert payload["exp"] > datetime.now(UTC).timestamp() + 7 * 24 * 3600 - 60


def test_access_token_wrong_secret():
    """Test a token signed with another secret is rejected."""
    token = create_access_token(42, Settings(jwt_secret="one"))
    assert decode_access_token(token, Settings(jwt_secret="two")) is None


def test_access_token_expired():
    """Test an expired session token is rejected."""
    settings = Settings(jwt_secret="test-secret")
    token = jwt.encode(
        {"sub": "42", "exp": datetime.now(UTC) - timedelta(seconds=1)},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )
    assert decode_access_token(token, settings) is None
