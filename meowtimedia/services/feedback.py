"""Feedback survey: one submission per user, rewarded with the feedback stamp."""
import json
import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from meowtimedia.core.errors import ConflictError
from meowtimedia.db.session import utcnow
from meowtimedia.models.feedback import Feedback
from meowtimedia.models.user import User
from meowtimedia.schemas.feedback import FeedbackSubmitSchema

logger = logging.getLogger(__name__)

ALREADY_SUBMITTED = "You have already submitted feedback"


async def get_feedback_for_user(db: AsyncSession, user_id: int) -> Feedback | None:
    result = await db.execute(select(Feedback).where(Feedback.user_id == user_id))
    return result.scalar_one_or_none()


async def submit_feedback(
    db: AsyncSession,
    user: User,
    body: FeedbackSubmitSchema,
    user_agent: str | None = None,
) -> Feedback:
    if await get_feedback_for_user(db, user.id) is not None:
        raise ConflictError(ALREADY_SUBMITTED)

    issues = body.issues or ["none"]
    feedback = Feedback(
        user_id=user.id,
        first_impression=body.first_impression,
        first_impression_other=body.first_impression_other if body.first_impression == "other" else None,
        ease_of_use=body.ease_of_use,
        issues_json=json.dumps(issues),
        issues_other=body.issues_other if "other" in issues else None,
        recommendation=body.recommendation,
        referral=body.referral,
        additional_feedback=body.additional_feedback,
        user_agent=user_agent,
    )
    db.add(feedback)
    try:
        await db.flush()
    except IntegrityError as exc:
        # unique user_id: a concurrent submission won the race
        await db.rollback()
        raise ConflictError(ALREADY_SUBMITTED) from exc

    if user.feedback_stamp_collected_at is None:
        user.feedback_stamp_collected_at = utcnow()
    await db.commit()
    logger.info("Feedback received from user %s", user.id)
    return feedback


def feedback_payload(feedback: Feedback, user: User | None) -> dict[str, Any]:
    return {
        "id": feedback.id,
        "user": {
            "id": user.id,
            "displayName": user.display_name,
            "email": user.email,
            "avatar": user.avatar,
        } if user is not None else None,
        "firstImpression": feedback.first_impression,
        "firstImpressionOther": feedback.first_impression_other,
        "easeOfUse": feedback.ease_of_use,
        "issues": json.loads(feedback.issues_json or "[]"),
        "issuesOther": feedback.issues_other,
        "recommendation": feedback.recommendation,
        "referral": feedback.referral,
        "additionalFeedback": feedback.additional_feedback,
        "userAgent": feedback.user_agent,
        "createdAt": feedback.created_at,
    }


async def list_feedback(db: AsyncSession) -> list[dict[str, Any]]:
    """All feedback, newest first, with the author's public info."""
    result = await db.execute(
        select(Feedback, User)
        .outerjoin(User, Feedback.user_id == User.id)
        .order_by(Feedback.created_at.desc(), Feedback.id.desc())
    )
    return [feedback_payload(feedback, user) for feedback, user in result.all()]
