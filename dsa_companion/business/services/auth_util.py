from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt
from passlib.context import CryptContext

from dsa_companion.config import Config

passwd_context = CryptContext(
    schemes=["bcrypt"], bcrypt__rounds=Config.BCRYPT_ROUNDS
)


def generate_password_hash(password: str) -> str:
    return passwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return passwd_context.verify(password, password_hash)
    except ValueError:
        # Unrecognised or malformed stored hash
        return False


def create_access_token(
    user_id: str,
    expiry: timedelta = timedelta(seconds=Config.JWT_ACCESS_TOKEN_EXPIRY),
) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "user_id": user_id,
        "iat": now,
        "exp": now + expiry,
    }
    return encode_token(payload)


def encode_token(payload: dict) -> str:
    return jwt.encode(
        payload=payload, key=Config.JWT_SECRET, algorithm=Config.JWT_ALGORITHM
    )


def decode_token(token: str) -> Optional[Any]:
    """Return the token's claims, or None if the signature or expiry check fails."""
    try:
        return jwt.decode(
            jwt=token, key=Config.JWT_SECRET, algorithms=[Config.JWT_ALGORITHM]
        )
    except jwt.PyJWTError:
        return None
