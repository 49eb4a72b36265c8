"""Country routes: content, fun facts, quizzes and quiz results."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from meowtimedia.core.auth import CurrentUser
from meowtimedia.core.config import Settings, get_settings
from meowtimedia.db.session import get_db
from meowtimedia.schemas.quiz import QuizOutSchema, QuizResultSchema, QuizResultSubmitSchema
from meowtimedia.services.content import get_country_content, get_simple_funfacts, list_countries
from meowtimedia.services.progress import record_quiz_result
from meowtimedia.services.quiz import get_quiz

router = APIRouter(prefix="/country", tags=["country"])


@router.get("/funfacts")
async def funfacts(db: Annotated[AsyncSession, Depends(get_db)]):
    """All loading-screen fun facts as {slug: [facts]}."""
    return {"success": True, "funfacts": await get_simple_funfacts(db)}


@router.get("/count")
async def country_count(db: Annotated[AsyncSession, Depends(get_db)]):
    countries = await list_countries(db)
    return {"success": True, "count": len(countries), "countries": countries}


@router.get("/{slug}")
async def country_content(slug: str, db: Annotated[AsyncSession, Depends(get_db)]):
    """Festivals, food and fun facts for one country."""
    return {"success": True, "country": slug, "data": await get_country_content(db, slug)}


@router.get("/{slug}/quiz", response_model=QuizOutSchema)
async def country_quiz(
    slug: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Random quiz for a country with shuffled options."""
    questions = await get_quiz(db, slug, size=settings.quiz_size)
    return QuizOutSchema(country=slug, total_questions=len(questions), questions=questions)


@router.post("/{slug}/update")
async def update_quiz_result(
    slug: str,
    body: QuizResultSubmitSchema,
    current_user: CurrentUser,
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Save a quiz result; awards the country stamp on the first passing score."""
    entry, stamp_awarded = await record_quiz_result(
        db,
        current_user,
        slug,
        body.score,
        body.total_questions,
        threshold=settings.stamp_threshold,
    )
    data = QuizResultSchema(
        country_slug=entry.country_slug,
        last_quiz_time=entry.last_quiz_time,
        last_quiz_score=entry.last_quiz_score,
        highest_score=entry.highest_score,
        total_attempts=entry.total_attempts,
        stamp_collected_at=entry.stamp_collected_at,
        stamp_awarded=stamp_awarded,
    )
    return {
        "success": True,
        "message": "Quiz completed! You earned a stamp!" if stamp_awarded else "Quiz results saved",
        "data": data.model_dump(mode="json", by_alias=True),
    }
