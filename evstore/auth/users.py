from __future__ import annotations

import itertools
from datetime import datetime, timezone
from typing import Any

import bcrypt

MIN_PASSWORD_LENGTH = 6

_users: dict[str, dict[str, Any]] = {}
_ids = itertools.count(1)


class EmailAlreadyRegistered(Exception):
    pass


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def _hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def _verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


def public_user(record: dict[str, Any]) -> dict[str, Any]:
    """The user record without its password hash."""
    return {k: v for k, v in record.items() if k != "password_hash"}


def find_user(email: str) -> dict[str, Any] | None:
    return _users.get(_normalize_email(email))


def create_user(name: str, email: str, password: str, role: str = "user") -> dict[str, Any]:
    """Register a new account. Raises ``EmailAlreadyRegistered`` on duplicates."""
    key = _normalize_email(email)
    if key in _users:
        raise EmailAlreadyRegistered(key)
    _users[key] = {
        "id": next(_ids),
        "name": name.strip(),
        "email": key,
        "role": role,
        "password_hash": _hash_password(password),
        "createdAt": datetime.now(timezone.utc).isoformat(),
    }
    return public_user(_users[key])


def authenticate(email: str, password: str) -> dict[str, Any] | None:
    """Verify credentials. Returns the public user record or ``None``."""
    record = find_user(email)
    if record and _verify_password(password, record["password_hash"]):
        return public_user(record)
    return None


def clear_users() -> None:
    _users.clear()
    _seed_users()


def _seed_users() -> None:
    """Pre-seed the demo admin account."""
    create_user("Store Admin", "admin@evstore.dev", "admin123", role="admin")


_seed_users()
