"""Country progress: quiz results and the one-time country stamp."""
import logging
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from meowtimedia.core.config import STAMP_THRESHOLD
from meowtimedia.core.errors import ConflictError, InvalidInputError
from meowtimedia.db.session import utcnow
from meowtimedia.models.progress import CountryProgress
from meowtimedia.models.user import User

logger = logging.getLogger(__name__)


def _is_count(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def validate_score(score, total_questions) -> None:
    if not (_is_count(score) and _is_count(total_questions)) or total_questions == 0 or score > total_questions:
        raise InvalidInputError("Invalid score or totalQuestions")


def new_progress_entry(user_id: int, country_slug: str) -> CountryProgress:
    return CountryProgress(
        user_id=user_id,
        country_slug=country_slug,
        last_quiz_time=None,
        last_quiz_score=0,
        highest_score=0,
        total_attempts=0,
        stamp_collected_at=None,
    )


def apply_quiz_result(
    entry: CountryProgress,
    score: int,
    total_questions: int,
    threshold: float = STAMP_THRESHOLD,
    now: datetime | None = None,
) -> bool:
    """Record one quiz result on entry. Return True if the stamp was granted by this call."""
    validate_score(score, total_questions)
    now = now or utcnow()

    entry.last_quiz_time = now
    entry.last_quiz_score = score
    entry.total_attempts = (entry.total_attempts or 0) + 1
    if score > (entry.highest_score or 0):
        entry.highest_score = score

    if score / total_questions >= threshold and entry.stamp_collected_at is None:
        entry.stamp_collected_at = now
        return True
    return False


async def get_progress_entries(db: AsyncSession, user_id: int) -> list[CountryProgress]:
    result = await db.execute(
        select(CountryProgress).where(CountryProgress.user_id == user_id).order_by(CountryProgress.id.asc())
    )
    return list(result.scalars().all())


async def get_progress_entry(db: AsyncSession, user_id: int, country_slug: str) -> CountryProgress | None:
    result = await db.execute(
        select(CountryProgress).where(
            CountryProgress.user_id == user_id,
            CountryProgress.country_slug == country_slug,
        )
    )
    return result.scalar_one_or_none()


async def record_quiz_result(
    db: AsyncSession,
    user: User,
    country_slug: str,
    score: int,
    total_questions: int,
    threshold: float = STAMP_THRESHOLD,
) -> tuple[CountryProgress, bool]:
    """Find or create the (user, country) entry and apply the result.

    Plain read-modify-write: concurrent submissions for the same user and
    country are last-write-wins and may lose attempt increments. Two
    concurrent first submissions collide on the unique constraint; the loser
    gets a ConflictError.
    """
    validate_score(score, total_questions)

    entry = await get_progress_entry(db, user.id, country_slug)
    if entry is None:
        entry = new_progress_entry(user.id, country_slug)
        db.add(entry)

    stamp_awarded = apply_quiz_result(entry, score, total_questions, threshold)

    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        raise ConflictError("Quiz results are already being saved, try again") from exc

    if stamp_awarded:
        logger.info("User %s earned the %s stamp (%s/%s)", user.id, country_slug, score, total_questions)
    return entry, stamp_awarded
