from __future__ import annotations

from fastapi import HTTPException, Request

SESSION_KEY = "user"


def get_current_user(request: Request) -> dict | None:
    """Session user for endpoints where signing in is optional."""
    return request.session.get(SESSION_KEY)


def login_session(request: Request, user: dict) -> None:
    request.session.clear()
    request.session[SESSION_KEY] = user


def require_user(request: Request) -> dict:
    """Raise 401 unless a shopper is signed in."""
    user = get_current_user(request)
    if not user:
        raise HTTPException(
            status_code=401,
            detail="Please login to continue. Your session may have expired.",
        )
    return user


def require_admin(request: Request) -> dict:
    """Raise 401 if not signed in, 403 for non-admin accounts."""
    user = require_user(request)
    if user.get("role") != "admin":
        raise HTTPException(status_code=403, detail="Admin access required")
    return user
