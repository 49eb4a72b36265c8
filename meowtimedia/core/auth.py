"""Request dependencies: current user from the auth cookie, role guards."""
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from meowtimedia.core.config import Settings, get_settings
from meowtimedia.core.errors import ForbiddenError, UnauthenticatedError
from meowtimedia.core.security import verify_session_token
from meowtimedia.db.session import get_db
from meowtimedia.models.user import User
from meowtimedia.services.users import admin_expired, get_user, is_admin, is_owner


async def get_current_user_optional(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> User | None:
    """Return current user if auth cookie is valid; else None."""
    token = request.cookies.get(settings.auth_cookie_name)
    if not token:
        return None
    user_id = verify_session_token(token, settings)
    if user_id is None:
        return None
    return await get_user(db, user_id)


async def get_current_user(
    user: Annotated[User | None, Depends(get_current_user_optional)],
) -> User:
    if user is None:
        raise UnauthenticatedError()
    return user


async def require_admin(
    user: Annotated[User, Depends(get_current_user)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> User:
    if is_admin(user, settings):
        return user
    if admin_expired(user):
        raise ForbiddenError("Admin rights expired.")
    raise ForbiddenError("Access denied. Admin rights required.")


async def require_owner(
    user: Annotated[User, Depends(get_current_user)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> User:
    if not is_owner(user, settings):
        raise ForbiddenError("Access denied. Owner rights required.")
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
OptionalUser = Annotated[User | None, Depends(get_current_user_optional)]
AdminUser = Annotated[User, Depends(require_admin)]
OwnerUser = Annotated[User, Depends(require_owner)]
