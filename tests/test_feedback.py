"""
Tests for the feedback survey.
"""
import pytest
from sqlalchemy import select

from meowtimedia.core.errors import ConflictError
from meowtimedia.models.feedback import Feedback
from meowtimedia.models.user import User
from meowtimedia.schemas.feedback import FeedbackSubmitSchema
from meowtimedia.services import feedback as feedback_service
from tests.conftest import OWNER_EMAIL

VALID = {
    "firstImpression": "learning",
    "easeOfUse": 4,
    "issues": ["slow", "other"],
    "issuesOther": "map was laggy",
    "recommendation": 5,
    "referral": "friend",
    "additionalFeedback": "Love the stamps",
}


async def test_submit_then_conflict(client, make_user, auth_headers, session_factory):
    user = await make_user()
    headers = auth_headers(user) | {"User-Agent": "pytest-browser"}

    status = (await client.get("/feedback/status", headers=headers)).json()
    assert status == {"success": True, "hasSubmitted": False, "submittedAt": None}

    resp = await client.post("/feedback", json=VALID, headers=headers)
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Thank you for your feedback!", "stampAwarded": True}

    again = await client.post("/feedback", json=VALID, headers=headers)
    assert again.status_code == 400
    assert again.json()["message"] == "You have already submitted feedback"

    status = (await client.get("/feedback/status", headers=headers)).json()
    assert status["hasSubmitted"] is True
    assert status["submittedAt"] is not None

    async with session_factory() as session:
        stored = (await session.execute(select(Feedback))).scalars().all()
        refreshed = await session.get(User, user.id)
    assert len(stored) == 1
    assert stored[0].user_agent == "pytest-browser"
    assert stored[0].issues_other == "map was laggy"
    assert refreshed.feedback_stamp_collected_at is not None


async def test_other_text_only_kept_for_other(client, make_user, auth_headers, session_factory):
    user = await make_user()
    payload = VALID | {"issues": ["slow"], "firstImpressionOther": "ignored"}
    await client.post("/feedback", json=payload, headers=auth_headers(user))

    async with session_factory() as session:
        stored = (await session.execute(select(Feedback))).scalar_one()
    assert stored.issues_other is None
    assert stored.first_impression_other is None


async def test_issues_default_to_none(client, make_user, auth_headers, session_factory):
    user = await make_user()
    payload = {k: v for k, v in VALID.items() if k != "issues"}
    await client.post("/feedback", json=payload, headers=auth_headers(user))

    async with session_factory() as session:
        stored = (await session.execute(select(Feedback))).scalar_one()
    assert stored.issues_json == '["none"]'


@pytest.mark.parametrize(
    "override",
    [
        {"referral": ""},
        {"easeOfUse": 6},
        {"recommendation": 0},
        {"firstImpression": "bored"},
        {"issues": ["crash"]},
        {"additionalFeedback": "x" * 1001},
    ],
)
async def test_invalid_answers(client, make_user, auth_headers, override):
    user = await make_user()
    resp = await client.post("/feedback", json=VALID | override, headers=auth_headers(user))
    assert resp.status_code == 400
    assert resp.json()["success"] is False


async def test_requires_login(client):
    assert (await client.post("/feedback", json=VALID)).status_code == 401
    assert (await client.get("/feedback/status")).status_code == 401


async def test_concurrent_duplicate_hits_unique_constraint(db, make_user, monkeypatch):
    user = await make_user()
    body = FeedbackSubmitSchema.model_validate(VALID)
    await feedback_service.submit_feedback(db, user, body)

    async def not_found_yet(_db, _user_id):
        return None

    # simulate the second request passing the existence check before the first commits
    monkeypatch.setattr(feedback_service, "get_feedback_for_user", not_found_yet)
    with pytest.raises(ConflictError):
        await feedback_service.submit_feedback(db, user, body)


async def test_all_feedback_admin_only(client, make_user, auth_headers):
    user = await make_user()
    owner = await make_user(OWNER_EMAIL)
    await client.post("/feedback", json=VALID, headers=auth_headers(user))

    assert (await client.get("/feedback/all", headers=auth_headers(user))).status_code == 403

    body = (await client.get("/feedback/all", headers=auth_headers(owner))).json()
    assert body["count"] == 1
    assert body["feedbacks"][0]["user"]["email"] == "cat@example.com"
    assert body["feedbacks"][0]["issues"] == ["slow", "other"]
