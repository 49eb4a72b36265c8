"""Pydantic schemas for the admin area."""
from datetime import datetime
from typing import Literal

from pydantic import Field

from meowtimedia.schemas.base import CamelSchema


class AdminUserSchema(CamelSchema):
    id: int
    display_name: str
    email: str
    role: str
    admin_expires_at: datetime | None = None
    avatar: str | None = None
    last_login_at: datetime | None = None


class RoleUpdateSchema(CamelSchema):
    role: Literal["user", "admin", "owner"]
    expires_in: int | None = Field(default=None, ge=1)  # days; omitted = permanent


class CandidateCreateSchema(CamelSchema):
    candidate_name: str = Field(min_length=1)
    candidate_email: str = Field(min_length=3)
    reason: str = Field(min_length=1)
    suggested_role: Literal["admin", "moderator"] = "admin"
