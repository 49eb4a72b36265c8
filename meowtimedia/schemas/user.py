"""Pydantic schemas for users and the Google profile."""
from datetime import datetime

from pydantic import BaseModel

from meowtimedia.schemas.base import CamelSchema
from meowtimedia.schemas.quiz import CountryProgressSchema


class GoogleProfile(BaseModel):
    """OpenID Connect userinfo claims returned by Google."""

    sub: str
    email: str
    name: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    picture: str | None = None


class UserOutSchema(CamelSchema):
    id: int
    email: str
    display_name: str
    first_name: str | None = None
    last_name: str | None = None
    avatar: str | None = None


class UserDetailSchema(UserOutSchema):
    role: str
    countries_progress: list[CountryProgressSchema] = []
    feedback_stamp_collected_at: datetime | None = None
