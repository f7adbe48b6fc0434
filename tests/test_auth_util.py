from datetime import datetime, timedelta, timezone

from dsa_companion.business.services import (
    create_access_token,
    decode_token,
    generate_password_hash,
    verify_password,
)


def test_password_hash_is_salted():
    first = generate_password_hash("password123")
    second = generate_password_hash("password123")

    assert first != second
    assert verify_password("password123", first)
    assert verify_password("password123", second)
    assert not verify_password("wrongpass", first)


def test_verify_password_with_malformed_hash():
    assert not verify_password("password123", "not-a-bcrypt-hash")


def test_access_token_expires_within_seven_days():
    token = create_access_token("user-1")

    claims = decode_token(token)

    assert claims["user_id"] == "user-1"
    expires = datetime.fromtimestamp(claims["exp"], tz=timezone.utc)
    assert expires <= datetime.now(timezone.utc) + timedelta(days=7)
    assert expires > datetime.now(timezone.utc) + timedelta(days=6)


def test_decode_rejects_tampered_token():
    token = create_access_token("user-1")
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])

    assert decode_token(tampered) is None
