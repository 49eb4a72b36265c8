"""Fun fact reactions: toggle semantics and per-type aggregation."""
from collections.abc import Iterable, Sequence
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from meowtimedia.core.errors import ConflictError, InvalidInputError, NotFoundError
from meowtimedia.db.session import utcnow
from meowtimedia.models.reaction import REACTION_TYPES, Reaction
from meowtimedia.models.user import User

DASHBOARD_PREFIX = "dashboard-"

# (reaction, reporter) pairs, newest first
ReactionRows = Sequence[tuple[Reaction, User]]


def _reporter(reaction: Reaction, user: User) -> dict[str, Any]:
    return {
        "id": user.id,
        "displayName": user.display_name,
        "avatar": user.avatar,
        "reactedAt": reaction.created_at,
    }


def _group_by_type(rows: Iterable[tuple[Reaction, User]]) -> dict[str, dict[str, Any]]:
    grouped: dict[str, dict[str, Any]] = {}
    for reaction, user in rows:
        bucket = grouped.setdefault(reaction.reaction_type, {"count": 0, "users": []})
        bucket["count"] += 1
        bucket["users"].append(_reporter(reaction, user))
    return grouped


def aggregate_reactions(rows: ReactionRows, requester_id: int | None = None) -> dict[str, Any]:
    """Single fun fact: counts and reporters per type, plus the requester's own reaction."""
    grouped = _group_by_type(rows)
    # canonical type order; types nobody used are omitted
    ordered = {t: grouped[t] for t in REACTION_TYPES if t in grouped}

    user_reaction = None
    if requester_id is not None:
        user_reaction = next(
            (reaction.reaction_type for reaction, user in rows if user.id == requester_id),
            None,
        )
    return {
        "reactions": ordered,
        "userReaction": user_reaction,
        "totalReactions": len(rows),
    }


def group_reactions_by_funfact(rows: ReactionRows, requester_id: int | None = None) -> dict[str, Any]:
    """Bulk mode: fun fact id -> type -> counts and reporters."""
    by_funfact: dict[str, list[tuple[Reaction, User]]] = {}
    for reaction, user in rows:
        by_funfact.setdefault(reaction.funfact_id, []).append((reaction, user))

    user_reactions = {}
    if requester_id is not None:
        user_reactions = {
            reaction.funfact_id: reaction.reaction_type
            for reaction, user in rows
            if user.id == requester_id
        }
    return {
        "reactions": {funfact_id: _group_by_type(items) for funfact_id, items in by_funfact.items()},
        "userReactions": user_reactions,
    }


async def _fetch(db: AsyncSession, *criteria) -> list[tuple[Reaction, User]]:
    result = await db.execute(
        select(Reaction, User)
        .join(User, Reaction.user_id == User.id)
        .where(*criteria)
        .order_by(Reaction.created_at.desc(), Reaction.id.desc())
    )
    return [(reaction, user) for reaction, user in result.all()]


async def reactions_for_funfact(db: AsyncSession, funfact_id: str) -> list[tuple[Reaction, User]]:
    return await _fetch(db, Reaction.funfact_id == funfact_id)


async def reactions_for_country(db: AsyncSession, country_slug: str) -> list[tuple[Reaction, User]]:
    return await _fetch(db, Reaction.country_slug == country_slug)


async def dashboard_reactions(db: AsyncSession) -> list[tuple[Reaction, User]]:
    return await _fetch(db, Reaction.funfact_id.startswith(DASHBOARD_PREFIX, autoescape=True))


def validate_reaction(reaction_type: str, country_slug: str | None) -> None:
    if reaction_type not in REACTION_TYPES:
        raise InvalidInputError(f"Invalid reaction type. Must be one of: {', '.join(REACTION_TYPES)}")
    if not country_slug:
        raise InvalidInputError("countrySlug is required")


async def get_user_reaction(db: AsyncSession, user_id: int, funfact_id: str) -> Reaction | None:
    result = await db.execute(
        select(Reaction).where(Reaction.funfact_id == funfact_id, Reaction.user_id == user_id)
    )
    return result.scalar_one_or_none()


async def toggle_reaction(
    db: AsyncSession,
    user: User,
    funfact_id: str,
    reaction_type: str,
    country_slug: str | None,
) -> str:
    """Add, switch or remove the user's reaction. Return 'added', 'updated' or 'removed'."""
    validate_reaction(reaction_type, country_slug)

    existing = await get_user_reaction(db, user.id, funfact_id)

    if existing is not None and existing.reaction_type == reaction_type:
        await db.delete(existing)
        await db.commit()
        return "removed"

    if existing is not None:
        existing.reaction_type = reaction_type
        existing.created_at = utcnow()
        action = "updated"
    else:
        db.add(
            Reaction(
                country_slug=country_slug,
                funfact_id=funfact_id,
                user_id=user.id,
                reaction_type=reaction_type,
            )
        )
        action = "added"

    try:
        await db.commit()
    except IntegrityError as exc:
        # a concurrent request already inserted this user's reaction
        await db.rollback()
        raise ConflictError("Reaction already exists") from exc
    return action


async def remove_reaction(db: AsyncSession, user: User, funfact_id: str) -> None:
    result = await db.execute(
        delete(Reaction).where(Reaction.funfact_id == funfact_id, Reaction.user_id == user.id)
    )
    await db.commit()
    if result.rowcount == 0:
        raise NotFoundError("Reaction not found")
