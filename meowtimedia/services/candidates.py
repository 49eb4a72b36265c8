"""Admin candidates: suggestions for new admins, reviewed by owners."""
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from meowtimedia.models.candidate import Candidate
from meowtimedia.models.user import User
from meowtimedia.schemas.admin import CandidateCreateSchema


async def suggest_candidate(db: AsyncSession, suggested_by: User, body: CandidateCreateSchema) -> Candidate:
    candidate = Candidate(
        suggested_by_id=suggested_by.id,
        candidate_name=body.candidate_name,
        candidate_email=body.candidate_email,
        reason=body.reason,
        suggested_role=body.suggested_role,
        status="pending",
    )
    db.add(candidate)
    await db.commit()
    return candidate


async def list_candidates(db: AsyncSession) -> list[dict[str, Any]]:
    result = await db.execute(
        select(Candidate, User)
        .outerjoin(User, Candidate.suggested_by_id == User.id)
        .order_by(Candidate.created_at.desc(), Candidate.id.desc())
    )
    return [
        {
            "id": candidate.id,
            "suggestedBy": {
                "id": user.id,
                "displayName": user.display_name,
                "email": user.email,
            } if user is not None else None,
            "candidateName": candidate.candidate_name,
            "candidateEmail": candidate.candidate_email,
            "reason": candidate.reason,
            "suggestedRole": candidate.suggested_role,
            "status": candidate.status,
            "createdAt": candidate.created_at,
        }
        for candidate, user in result.all()
    ]
