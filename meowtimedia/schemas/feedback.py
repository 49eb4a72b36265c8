"""Pydantic schemas for the feedback survey."""
from typing import Literal

from pydantic import Field

from meowtimedia.schemas.base import CamelSchema

FirstImpression = Literal["learning", "planning", "games", "not-sure", "other"]
IssueType = Literal["none", "slow", "loading", "sound", "button", "other"]


class FeedbackSubmitSchema(CamelSchema):
    first_impression: FirstImpression
    first_impression_other: str | None = Field(default=None, max_length=200)
    ease_of_use: int = Field(ge=1, le=5)
    issues: list[IssueType] | None = None
    issues_other: str | None = Field(default=None, max_length=200)
    recommendation: int = Field(ge=1, le=5)
    referral: str = Field(min_length=1, max_length=200)
    additional_feedback: str | None = Field(default=None, max_length=1000)
