"""Admin routes: users and roles (owner), candidates, feedback overview."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from meowtimedia.core.auth import AdminUser, OwnerUser
from meowtimedia.db.session import get_db
from meowtimedia.schemas.admin import AdminUserSchema, CandidateCreateSchema, RoleUpdateSchema
from meowtimedia.services.candidates import list_candidates, suggest_candidate
from meowtimedia.services.feedback import list_feedback
from meowtimedia.services.users import list_users, update_role

router = APIRouter(prefix="/admin", tags=["admin"])


def _user_out(user) -> dict:
    return AdminUserSchema.model_validate(user).model_dump(mode="json", by_alias=True)


# ---------- owner ----------

@router.put("/users/{user_id}/role")
async def set_user_role(
    user_id: int,
    body: RoleUpdateSchema,
    _owner: OwnerUser,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Grant or revoke a role; expiresIn (days) makes admin rights temporary."""
    user = await update_role(db, user_id, body.role, body.expires_in)
    return {"success": True, "user": _user_out(user)}


@router.get("/candidates")
async def candidates(
    _owner: OwnerUser,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return {"success": True, "candidates": await list_candidates(db)}


# ---------- admin ----------

@router.get("/users")
async def users(
    _admin: AdminUser,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return {"success": True, "users": [_user_out(user) for user in await list_users(db)]}


@router.get("/feedback")
async def feedback(
    _admin: AdminUser,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return {"success": True, "feedback": await list_feedback(db)}


@router.post("/candidates")
async def create_candidate(
    body: CandidateCreateSchema,
    admin: AdminUser,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    await suggest_candidate(db, admin, body)
    return {"success": True, "message": "Candidate suggested successfully"}
