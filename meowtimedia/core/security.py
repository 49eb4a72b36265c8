"""Auth cookie signing (session-based auth after Google login)."""
import base64
import hmac
import hashlib
import time

from starlette.responses import Response

from meowtimedia.core.config import Settings, get_settings


# Session token: base64(user_id:timestamp).hmac
def _signature(payload: bytes, settings: Settings) -> str:
    return hmac.new(settings.secret_key.encode("utf-8"), payload, hashlib.sha256).hexdigest()


def create_session_token(user_id: int, settings: Settings | None = None) -> str:
    """Create a signed session token for the user (for auth cookie)."""
    settings = settings or get_settings()
    payload = f"{user_id}:{int(time.time())}".encode("utf-8")
    encoded = base64.urlsafe_b64encode(payload).decode("ascii").rstrip("=")
    return encoded + "." + _signature(payload, settings)


def verify_session_token(token: str, settings: Settings | None = None) -> int | None:
    """Verify signed token and return user_id if valid; None otherwise."""
    if not token or "." not in token:
        return None
    settings = settings or get_settings()
    try:
        encoded, sig = token.rsplit(".", 1)
        pad = 4 - len(encoded) % 4
        if pad != 4:
            encoded += "=" * pad
        payload = base64.urlsafe_b64decode(encoded)
        if not hmac.compare_digest(_signature(payload, settings), sig):
            return None
        user_id, ts = payload.decode("utf-8").split(":", 1)
        if abs(time.time() - int(ts)) > settings.auth_cookie_max_age:
            return None
        return int(user_id)
    except (ValueError, UnicodeDecodeError):
        return None


def set_auth_cookie(response: Response, user_id: int, settings: Settings) -> None:
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=create_session_token(user_id, settings),
        max_age=settings.auth_cookie_max_age,
        httponly=True,
        secure=settings.is_production,
        samesite="none" if settings.is_production else "lax",
        domain=settings.cookie_domain if settings.is_production else None,
        path="/",
    )


def clear_auth_cookie(response: Response, settings: Settings) -> None:
    # path/domain must match what set_cookie() used
    response.delete_cookie(
        settings.auth_cookie_name,
        path="/",
        domain=settings.cookie_domain if settings.is_production else None,
    )
