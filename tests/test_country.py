"""
Tests for country content and fun fact routes.
"""
import json

from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from meowtimedia.db.session import get_db
from meowtimedia.main import app as fastapi_app
from meowtimedia.models.content import Content, SimpleFunFact
from meowtimedia.services.content import country_to_slug, slug_to_country_key


def test_slugs():
    assert country_to_slug("South Korea") == "south-korea"
    assert country_to_slug("  Japan ") == "japan"
    assert slug_to_country_key("south-korea") == "south_korea"


async def test_country_content(client, db):
    db.add_all([
        Content(
            country="south_korea",
            type="festival",
            contents_json=json.dumps([
                {"title": "Seollal", "date": "Jan/Feb", "content": "Lunar New Year", "picture_url": "https://img/s.png"},
            ]),
        ),
        Content(
            country="south_korea",
            type="food",
            contents_json=json.dumps([
                {"title": "Kimchi", "content": "Fermented cabbage"},
                {"title": "Bibimbap", "content": "Mixed rice"},
            ]),
        ),
    ])
    await db.commit()

    resp = await client.get("/country/south-korea")
    assert resp.status_code == 200
    body = resp.json()
    assert body["country"] == "south-korea"
    festivals, foods = body["data"]["festivals"], body["data"]["foods"]
    assert festivals == [{
        "id": "south-korea-festival-0",
        "countrySlug": "south-korea",
        "type": "festival",
        "title": "Seollal",
        "content": "Lunar New Year",
        "image": "https://img/s.png",
        "date": "Jan/Feb",
    }]
    assert [f["id"] for f in foods] == ["south-korea-food-0", "south-korea-food-1"]
    assert foods[0]["image"] == ""
    assert body["data"]["funfacts"] == []


async def test_country_content_not_found(client):
    resp = await client.get("/country/atlantis")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "Country content not found"}


async def test_funfacts_and_count(client, db):
    db.add_all([
        SimpleFunFact(country="Japan", funfacts_json=json.dumps(["Vending machines everywhere"])),
        SimpleFunFact(country="South Korea", funfacts_json=json.dumps(["Age counting differs", "Fan death"])),
    ])
    await db.commit()

    funfacts = (await client.get("/country/funfacts")).json()
    assert funfacts["funfacts"] == {
        "japan": ["Vending machines everywhere"],
        "south-korea": ["Age counting differs", "Fan death"],
    }

    count = (await client.get("/country/count")).json()
    assert count == {"success": True, "count": 2, "countries": ["japan", "south-korea"]}


async def test_health_and_index(client):
    assert (await client.get("/health")).json() == {"status": "ok"}
    assert (await client.get("/")).json()["message"] == "Meowtimedia Backend API"


async def test_unknown_route_uses_error_envelope(client):
    resp = await client.get("/nope/nothing/here")
    assert resp.status_code == 404
    assert resp.json()["success"] is False


async def test_database_error_is_generic_500(client):
    async def broken_db():
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))
        yield

    fastapi_app.dependency_overrides[get_db] = broken_db
    resp = await client.get("/country/count")
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "Internal server error"}
    assert "locked" not in resp.text


async def test_unhandled_error_is_generic_500(client):
    async def broken_db():
        raise RuntimeError("connection pool exploded")
        yield

    fastapi_app.dependency_overrides[get_db] = broken_db
    transport = ASGITransport(app=fastapi_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as raw_client:
        resp = await raw_client.get("/country/count")
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "Internal server error"}
    assert "exploded" not in resp.text
