"""Quiz building: random question draw and per-question option shuffle."""
import random
from collections.abc import Sequence
from typing import TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from meowtimedia.core.config import QUIZ_SIZE
from meowtimedia.core.errors import NotFoundError
from meowtimedia.models.question import OPTION_LABELS, Question
from meowtimedia.schemas.quiz import QuizQuestionSchema
from meowtimedia.services.content import slug_to_country_key

T = TypeVar("T")


def fisher_yates(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a shuffled copy of items; the input is left untouched."""
    rng = rng or random
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def shuffle_options(question: Question, rng: random.Random | None = None) -> tuple[list[str], int]:
    """Shuffle the four options; return texts and the new index of the correct one."""
    labels = fisher_yates(OPTION_LABELS, rng)
    options = question.options
    return [options[label] for label in labels], labels.index(question.answer)


def build_quiz(
    questions: Sequence[Question],
    size: int = QUIZ_SIZE,
    rng: random.Random | None = None,
) -> list[QuizQuestionSchema]:
    """Draw min(size, len(questions)) distinct questions with shuffled options."""
    if not questions:
        raise NotFoundError("Quiz not found for this country")

    selected = fisher_yates(questions, rng)[: min(size, len(questions))]
    quiz = []
    for position, question in enumerate(selected, start=1):
        options, correct = shuffle_options(question, rng)
        quiz.append(
            QuizQuestionSchema(
                id=position,
                question=question.text,
                options=options,
                correct_answer=correct,
            )
        )
    return quiz


async def list_questions(db: AsyncSession, slug: str) -> list[Question]:
    """All questions for a country slug (case-insensitive on the stored country)."""
    country = slug_to_country_key(slug)
    result = await db.execute(select(Question).where(func.lower(Question.country) == country.lower()))
    return list(result.scalars().all())


async def get_quiz(
    db: AsyncSession,
    slug: str,
    size: int = QUIZ_SIZE,
    rng: random.Random | None = None,
) -> list[QuizQuestionSchema]:
    return build_quiz(await list_questions(db, slug), size=size, rng=rng)
