"""Feedback routes: one-time survey and the admin listing."""
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from meowtimedia.core.auth import AdminUser, CurrentUser
from meowtimedia.db.session import get_db
from meowtimedia.schemas.feedback import FeedbackSubmitSchema
from meowtimedia.services.feedback import get_feedback_for_user, list_feedback, submit_feedback

router = APIRouter(prefix="/feedback", tags=["feedback"])


@router.get("/status")
async def feedback_status(
    current_user: CurrentUser,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Has the current user already submitted feedback?"""
    feedback = await get_feedback_for_user(db, current_user.id)
    return {
        "success": True,
        "hasSubmitted": feedback is not None,
        "submittedAt": feedback.created_at if feedback else None,
    }


@router.post("")
async def create_feedback(
    request: Request,
    body: FeedbackSubmitSchema,
    current_user: CurrentUser,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Submit feedback once; grants the feedback stamp."""
    await submit_feedback(db, current_user, body, user_agent=request.headers.get("user-agent"))
    return {"success": True, "message": "Thank you for your feedback!", "stampAwarded": True}


@router.get("/all")
async def all_feedback(
    _admin: AdminUser,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    feedbacks = await list_feedback(db)
    return {"success": True, "count": len(feedbacks), "feedbacks": feedbacks}
