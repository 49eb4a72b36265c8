"""Auth routes: Google login, callback, current user, logout."""
import logging
from typing import Annotated

from authlib.integrations.starlette_client import OAuthError
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from meowtimedia.core.auth import OptionalUser
from meowtimedia.core.config import Settings, get_settings
from meowtimedia.core.errors import AppError, ConflictError, UnauthenticatedError
from meowtimedia.core.oauth import get_google_client
from meowtimedia.core.security import clear_auth_cookie, set_auth_cookie
from meowtimedia.db.session import get_db
from meowtimedia.schemas.quiz import CountryProgressSchema
from meowtimedia.schemas.user import GoogleProfile, UserDetailSchema, UserOutSchema
from meowtimedia.services.progress import get_progress_entries
from meowtimedia.services.users import upsert_google_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


class OAuthNotConfiguredError(AppError):
    status_code = 503
    default_message = "Google login is not configured"


@router.get("/google")
async def google_login(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Redirect to Google's consent screen."""
    google = get_google_client(settings)
    if google is None:
        raise OAuthNotConfiguredError()
    redirect_uri = settings.google_callback_url or str(request.url_for("google_callback"))
    return await google.authorize_redirect(request, redirect_uri)


@router.get("/google/callback")
async def google_callback(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Exchange the code, upsert the user, set auth cookie; redirect to the dashboard."""
    google = get_google_client(settings)
    if google is None:
        raise OAuthNotConfiguredError()

    try:
        token = await google.authorize_access_token(request)
        userinfo = token.get("userinfo") or await google.userinfo(token=token)
        profile = GoogleProfile.model_validate(dict(userinfo))
    except (OAuthError, ValidationError) as exc:
        logger.warning("Google login failed: %s", exc)
        return RedirectResponse(settings.client_url, status_code=303)

    try:
        user = await upsert_google_user(db, profile)
    except ConflictError as exc:
        logger.warning("Google login rejected for %s: %s", profile.email, exc.message)
        return RedirectResponse(settings.client_url, status_code=303)

    response = RedirectResponse(f"{settings.client_url}/dashboard", status_code=303)
    set_auth_cookie(response, user.id, settings)
    return response


@router.get("/login-success")
async def login_success(current_user: OptionalUser):
    if current_user is None:
        raise UnauthenticatedError("Not authenticated")
    return {
        "success": True,
        "message": "Login successful",
        "user": UserOutSchema.model_validate(current_user).model_dump(by_alias=True),
    }


@router.get("/login-failed")
async def login_failed():
    return JSONResponse(status_code=401, content={"success": False, "message": "Login failed"})


@router.get("/logout")
async def logout(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Clear auth cookie and the OAuth state session."""
    request.session.clear()
    response = JSONResponse({"success": True, "message": "Logged out successfully"})
    clear_auth_cookie(response, settings)
    return response


@router.get("/user")
async def current_user_info(
    current_user: OptionalUser,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Current user with country progress and stamps."""
    if current_user is None:
        raise UnauthenticatedError("Not authenticated")
    entries = await get_progress_entries(db, current_user.id)
    detail = UserDetailSchema(
        id=current_user.id,
        email=current_user.email,
        display_name=current_user.display_name,
        first_name=current_user.first_name,
        last_name=current_user.last_name,
        avatar=current_user.avatar,
        role=current_user.role,
        countries_progress=[CountryProgressSchema.model_validate(entry) for entry in entries],
        feedback_stamp_collected_at=current_user.feedback_stamp_collected_at,
    )
    return {"success": True, "user": detail.model_dump(mode="json", by_alias=True)}
