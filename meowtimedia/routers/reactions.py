"""Reaction routes: public aggregates, toggle and remove for logged-in users."""
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from meowtimedia.core.auth import CurrentUser, OptionalUser
from meowtimedia.db.session import get_db, utcnow
from meowtimedia.schemas.reaction import ReactionOutSchema, ReactionSubmitSchema
from meowtimedia.services.reactions import (
    aggregate_reactions,
    dashboard_reactions,
    group_reactions_by_funfact,
    reactions_for_country,
    reactions_for_funfact,
    remove_reaction,
    toggle_reaction,
)

router = APIRouter(prefix="/reactions", tags=["reactions"])

_MESSAGES = {"added": "Reaction added", "updated": "Reaction updated", "removed": "Reaction removed"}


@router.get("/all")
async def all_dashboard_reactions(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: OptionalUser,
):
    """All dashboard fun fact reactions (initial load)."""
    rows = await dashboard_reactions(db)
    grouped = group_reactions_by_funfact(rows, current_user.id if current_user else None)
    last_update = rows[0][0].created_at if rows else utcnow()
    return {
        "success": True,
        **grouped,
        "lastUpdate": last_update,
        "totalReactions": len(rows),
    }


@router.get("/country/{country_slug}")
async def country_reactions(
    country_slug: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: OptionalUser,
):
    rows = await reactions_for_country(db, country_slug)
    grouped = group_reactions_by_funfact(rows, current_user.id if current_user else None)
    return {"success": True, "countrySlug": country_slug, **grouped}


@router.get("/{funfact_id}")
async def funfact_reactions(
    funfact_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: OptionalUser,
):
    rows = await reactions_for_funfact(db, funfact_id)
    aggregated = aggregate_reactions(rows, current_user.id if current_user else None)
    return {"success": True, "funfactId": funfact_id, **aggregated}


@router.post("/{funfact_id}")
async def react(
    funfact_id: str,
    body: ReactionSubmitSchema,
    current_user: CurrentUser,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Add a reaction; same type again removes it, a different type replaces it."""
    action = await toggle_reaction(db, current_user, funfact_id, body.reaction_type, body.country_slug)
    content = {"success": True, "action": action, "message": _MESSAGES[action]}
    if action != "removed":
        content["reaction"] = ReactionOutSchema(
            funfact_id=funfact_id,
            reaction_type=body.reaction_type,
            country_slug=body.country_slug,
        ).model_dump(by_alias=True)
    return JSONResponse(status_code=201 if action == "added" else 200, content=content)


@router.delete("/{funfact_id}")
async def unreact(
    funfact_id: str,
    current_user: CurrentUser,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    await remove_reaction(db, current_user, funfact_id)
    return {"success": True, "message": "Reaction removed"}
