"""Country content: slugs, festivals/food/fun facts, loading-screen fun facts."""
import json
import re

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from meowtimedia.core.errors import NotFoundError
from meowtimedia.models.content import CONTENT_TYPES, Content, SimpleFunFact

_WHITESPACE_RE = re.compile(r"\s+")

# content type -> key in the response payload
_SECTION_KEYS = {"festival": "festivals", "food": "foods", "funfact": "funfacts"}


def country_to_slug(name: str) -> str:
    """'South Korea' -> 'south-korea'."""
    return _WHITESPACE_RE.sub("-", name.strip().lower())


def slug_to_country_key(slug: str) -> str:
    """'south-korea' -> 'south_korea' (how content and questions are stored)."""
    return slug.replace("-", "_")


def _content_item(slug: str, content_type: str, index: int, item: dict) -> dict:
    out = {
        "id": f"{slug}-{content_type}-{index}",
        "countrySlug": slug,
        "type": content_type,
        "title": item.get("title"),
        "content": item.get("content"),
        "image": item.get("picture_url") or "",
    }
    if content_type == "festival":
        out["date"] = item.get("date")
    return out


async def get_country_content(db: AsyncSession, slug: str) -> dict[str, list[dict]]:
    result = await db.execute(select(Content).where(Content.country == slug_to_country_key(slug)))
    rows = result.scalars().all()
    if not rows:
        raise NotFoundError("Country content not found")

    by_type = {row.type: json.loads(row.contents_json or "[]") for row in rows}
    return {
        _SECTION_KEYS[content_type]: [
            _content_item(slug, content_type, i, item)
            for i, item in enumerate(by_type.get(content_type, []))
        ]
        for content_type in CONTENT_TYPES
    }


async def get_simple_funfacts(db: AsyncSession) -> dict[str, list[str]]:
    result = await db.execute(select(SimpleFunFact))
    return {
        country_to_slug(row.country): json.loads(row.funfacts_json or "[]")
        for row in result.scalars().all()
    }


async def list_countries(db: AsyncSession) -> list[str]:
    result = await db.execute(select(SimpleFunFact.country).distinct().order_by(SimpleFunFact.country))
    return [country_to_slug(country) for country in result.scalars().all()]
