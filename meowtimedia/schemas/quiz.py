"""Pydantic schemas for quizzes and quiz results."""
from datetime import datetime

from pydantic import StrictInt

from meowtimedia.schemas.base import CamelSchema


class QuizQuestionSchema(CamelSchema):
    id: int  # 1-based position in this quiz, not the stored question id
    question: str
    options: list[str]
    correct_answer: int  # index into options


class QuizOutSchema(CamelSchema):
    success: bool = True
    country: str
    total_questions: int
    questions: list[QuizQuestionSchema]


class QuizResultSubmitSchema(CamelSchema):
    # strict: "8" or 8.0 is a malformed score
    score: StrictInt
    total_questions: StrictInt


class CountryProgressSchema(CamelSchema):
    country_slug: str
    last_quiz_time: datetime | None = None
    last_quiz_score: int
    highest_score: int
    total_attempts: int
    stamp_collected_at: datetime | None = None


class QuizResultSchema(CountryProgressSchema):
    stamp_awarded: bool
