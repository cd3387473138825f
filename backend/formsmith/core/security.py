import hmac
from datetime import datetime, timedelta, timezone

from fastapi import Request, Response

from formsmith.core.config import settings

SESSION_VALUE = "authenticated"


def verify_credentials(username: str, password: str) -> bool:
    """Compare against the single configured admin identity."""
    username_ok = hmac.compare_digest(username.encode("utf-8"), settings.ADMIN_USERNAME.encode("utf-8"))
    password_ok = hmac.compare_digest(password.encode("utf-8"), settings.ADMIN_PASSWORD.encode("utf-8"))
    return username_ok and password_ok


def is_authenticated(request: Request) -> bool:
    return request.cookies.get(settings.SESSION_COOKIE_NAME) == SESSION_VALUE


def set_session_cookie(response: Response) -> None:
    duration = timedelta(hours=settings.SESSION_DURATION_HOURS)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=SESSION_VALUE,
        max_age=int(duration.total_seconds()),
        expires=datetime.now(timezone.utc) + duration,
        path="/",
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="strict",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="strict",
    )
