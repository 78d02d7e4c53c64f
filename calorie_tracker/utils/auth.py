"""
Credential handling.

The bearer credential is produced and resolved by an ``Authenticator`` kept in
``app.extensions["authenticator"]``. The default ``Base64Authenticator`` is a
plain reversible encoding of the user id: any holder of a user id can forge a
token, there is no expiry and no revocation. ``JwtAuthenticator`` signs the
same claim with ``SECRET_KEY`` and can be selected with ``AUTH_SCHEME=jwt``
without touching any handler.
"""

import base64
import binascii
import datetime as dt
from functools import wraps

import jwt
from flask import request, current_app
from werkzeug.security import check_password_hash, generate_password_hash

from calorie_tracker.extensions import db
from calorie_tracker.utils.errors import AuthenticationError
from calorie_tracker.utils.http import id_in_range


def hash_password(plain: str) -> str:
    return generate_password_hash(plain)


class Authenticator:
    """Turns a user id into a bearer credential and back."""

    def issue(self, user_id: int) -> str:
        raise NotImplementedError

    def resolve(self, token: str) -> int:
        raise NotImplementedError


class Base64Authenticator(Authenticator):
    def issue(self, user_id: int) -> str:
        return base64.b64encode(str(user_id).encode("utf-8")).decode("ascii")

    def resolve(self, token: str) -> int:
        try:
            raw = base64.b64decode(token, validate=True).decode("utf-8")
            return int(raw)
        except (binascii.Error, UnicodeDecodeError, ValueError):
            raise AuthenticationError("Invalid token")


class JwtAuthenticator(Authenticator):
    def __init__(self, secret: str, ttl_hours: int = 12):
        self.secret = secret
        self.ttl_hours = ttl_hours

    def issue(self, user_id: int) -> str:
        now = dt.datetime.now(dt.timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": int(now.timestamp()),
            "exp": int((now + dt.timedelta(hours=self.ttl_hours)).timestamp()),
        }
        return jwt.encode(payload, self.secret, algorithm="HS256")

    def resolve(self, token: str) -> int:
        try:
            payload = jwt.decode(token, self.secret, algorithms=["HS256"])
            return int(payload["sub"])
        except (jwt.PyJWTError, KeyError, ValueError):
            raise AuthenticationError("Invalid token")


def build_authenticator(config) -> Authenticator:
    scheme = (config.get("AUTH_SCHEME") or "base64").lower()
    if scheme == "jwt":
        return JwtAuthenticator(config["SECRET_KEY"], config.get("TOKEN_TTL_HOURS", 12))
    if scheme == "base64":
        return Base64Authenticator()
    raise ValueError(f"Unknown AUTH_SCHEME '{scheme}'")


def get_authenticator() -> Authenticator:
    return current_app.extensions["authenticator"]


def create_token(user_id: int) -> str:
    return get_authenticator().issue(user_id)


def resolve_user_id() -> int:
    """Resolve the request's bearer credential to an existing user id."""
    from calorie_tracker.models.user import User

    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith("Bearer "):
        raise AuthenticationError("Not authenticated")
    token = auth_header.split(" ", 1)[1].strip()
    if not token:
        raise AuthenticationError("Not authenticated")

    user_id = get_authenticator().resolve(token)
    if not id_in_range(user_id):
        raise AuthenticationError("Invalid token")
    if db.session.get(User, user_id) is None:
        raise AuthenticationError("User not found")
    return user_id


def require_auth(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        request.user_id = resolve_user_id()  # type: ignore
        return f(*args, **kwargs)
    return wrapper

__all__ = [
    "Authenticator",
    "Base64Authenticator",
    "JwtAuthenticator",
    "build_authenticator",
    "hash_password",
    "create_token",
    "require_auth",
    "check_password_hash",
]
