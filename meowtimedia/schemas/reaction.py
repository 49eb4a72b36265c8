"""Pydantic schemas for fun fact reactions."""
from meowtimedia.schemas.base import CamelSchema


class ReactionSubmitSchema(CamelSchema):
    reaction_type: str
    country_slug: str | None = None


class ReactionOutSchema(CamelSchema):
    funfact_id: str
    reaction_type: str
    country_slug: str
