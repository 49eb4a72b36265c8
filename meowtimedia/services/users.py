"""Users: Google login upsert, roles and role management."""
import logging
from datetime import datetime, timedelta

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from meowtimedia.core.config import Settings
from meowtimedia.core.errors import ConflictError, NotFoundError
from meowtimedia.db.session import as_utc, utcnow
from meowtimedia.models.user import User
from meowtimedia.schemas.user import GoogleProfile

logger = logging.getLogger(__name__)


async def get_user(db: AsyncSession, user_id: int) -> User | None:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_google_id(db: AsyncSession, google_id: str) -> User | None:
    result = await db.execute(select(User).where(User.google_id == google_id))
    return result.scalar_one_or_none()


async def _refresh_login(db: AsyncSession, user: User, profile: GoogleProfile) -> User:
    user.avatar = profile.picture
    user.last_login_at = utcnow()
    await db.commit()
    logger.info("Existing user logged in: %s", user.email)
    return user


async def upsert_google_user(db: AsyncSession, profile: GoogleProfile) -> User:
    """Create the local user for a Google account, or refresh it on every login.

    A concurrent first login for the same account falls back to the row the
    other request created. An email already owned by another Google account
    raises ConflictError.
    """
    user = await get_user_by_google_id(db, profile.sub)
    if user is not None:
        return await _refresh_login(db, user, profile)

    now = utcnow()
    user = User(
        google_id=profile.sub,
        email=profile.email,
        display_name=profile.name or profile.email,
        first_name=profile.given_name,
        last_name=profile.family_name,
        avatar=profile.picture,
        role="user",
        created_at=now,
        last_login_at=now,
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        existing = await get_user_by_google_id(db, profile.sub)
        if existing is None:
            logger.warning("Google account %s uses an email that is already registered", profile.sub)
            raise ConflictError("An account with this email already exists") from exc
        return await _refresh_login(db, existing, profile)

    logger.info("New user created: %s", user.email)
    return user


def is_owner(user: User, settings: Settings) -> bool:
    owners = {email.strip().lower() for email in settings.owner_emails}
    return (user.email or "").lower() in owners or user.role == "owner"


def admin_expired(user: User, now: datetime | None = None) -> bool:
    expires_at = as_utc(user.admin_expires_at)
    return user.role == "admin" and expires_at is not None and (now or utcnow()) > expires_at


def is_admin(user: User, settings: Settings, now: datetime | None = None) -> bool:
    if is_owner(user, settings):
        return True
    return user.role == "admin" and not admin_expired(user, now)


async def list_users(db: AsyncSession) -> list[User]:
    result = await db.execute(select(User).order_by(User.id.asc()))
    return list(result.scalars().all())


async def update_role(db: AsyncSession, user_id: int, role: str, expires_in_days: int | None = None) -> User:
    """Set a user's role. expires_in_days limits admin rights; otherwise they are permanent."""
    user = await get_user(db, user_id)
    if user is None:
        raise NotFoundError("User not found")

    user.role = role
    user.admin_expires_at = utcnow() + timedelta(days=expires_in_days) if expires_in_days else None
    await db.commit()
    logger.info("Role of user %s set to %s (expires %s)", user.id, role, user.admin_expires_at)
    return user
