"""
Auth Service

Account creation and password sign-in. Tokens are issued by the configured
Authenticator (see ``calorie_tracker.utils.auth``).
"""

import logging
from typing import Any, Dict, Optional

from calorie_tracker.extensions import db
from calorie_tracker.models.user import User
from calorie_tracker.utils.auth import check_password_hash, create_token, hash_password
from calorie_tracker.utils.errors import AuthenticationError, ValidationError

logger = logging.getLogger(__name__)


def _session_payload(user: User) -> Dict[str, Any]:
    return {"user": user.to_dict(), "token": create_token(user.id)}


def signup(email: str, password: str, name: Optional[str] = None) -> Dict[str, Any]:
    email = email.strip().lower()
    if User.query.filter_by(email=email).first():
        raise ValidationError("Email already registered")

    user = User(email=email, password=hash_password(password), name=name)
    db.session.add(user)
    db.session.commit()
    logger.info("Registered user %s", user.id)
    return _session_payload(user)


def _mask_email(email: str) -> str:
    local, _, domain = email.partition("@")
    return f"{local[:1]}***@{domain}" if domain else "***"


def signin(email: str, password: str) -> Dict[str, Any]:
    email = email.strip().lower()
    user = User.query.filter_by(email=email).first()
    if not user or not check_password_hash(user.password, password):
        logger.info("Failed sign-in for %s", _mask_email(email))
        raise AuthenticationError("Email or password incorrect")
    return _session_payload(user)


def get_user(user_id: int) -> User:
    user = db.session.get(User, user_id)
    if not user:
        raise AuthenticationError("User not found")
    return user
