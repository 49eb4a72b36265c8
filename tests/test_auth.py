"""
Tests for Google login upsert, session cookies and the auth routes.
"""
from datetime import timedelta

import pytest
from sqlalchemy import func, select

from meowtimedia.core.errors import ConflictError
from meowtimedia.core.security import create_session_token, verify_session_token
from meowtimedia.models.user import User
from meowtimedia.schemas.user import GoogleProfile
from meowtimedia.services import users as users_service
from meowtimedia.services.users import upsert_google_user

PROFILE = GoogleProfile(
    sub="google-123",
    email="neko@example.com",
    name="Neko Cat",
    given_name="Neko",
    family_name="Cat",
    picture="https://img.example.com/a.png",
)


class TestUpsert:
    async def test_creates_user(self, db):
        user = await upsert_google_user(db, PROFILE)
        assert user.id is not None
        assert user.google_id == "google-123"
        assert user.display_name == "Neko Cat"
        assert user.role == "user"
        assert user.last_login_at is not None

    async def test_refreshes_on_login(self, db):
        first = await upsert_google_user(db, PROFILE)
        first_login = first.last_login_at - timedelta(seconds=1)
        first.last_login_at = first_login
        await db.commit()

        again = await upsert_google_user(
            db, PROFILE.model_copy(update={"picture": "https://img.example.com/b.png", "name": "Renamed"})
        )
        assert again.id == first.id
        assert again.avatar == "https://img.example.com/b.png"
        assert again.display_name == "Neko Cat"
        assert again.last_login_at > first_login
        assert await db.scalar(select(func.count(User.id))) == 1

    async def test_display_name_falls_back_to_email(self, db):
        user = await upsert_google_user(db, GoogleProfile(sub="g-2", email="quiet@example.com"))
        assert user.display_name == "quiet@example.com"

    async def test_email_owned_by_other_account(self, db, make_user):
        await make_user(PROFILE.email, google_id="google-other")
        with pytest.raises(ConflictError):
            await upsert_google_user(db, PROFILE)
        assert await db.scalar(select(func.count(User.id))) == 1

    async def test_concurrent_first_login_reuses_row(self, db, make_user, monkeypatch):
        existing = await make_user(PROFILE.email, google_id=PROFILE.sub)
        real_lookup = users_service.get_user_by_google_id
        calls = []

        async def missing_on_first_lookup(session, google_id):
            calls.append(google_id)
            if len(calls) == 1:
                return None
            return await real_lookup(session, google_id)

        # the other login inserted the row between our lookup and our insert
        monkeypatch.setattr(users_service, "get_user_by_google_id", missing_on_first_lookup)
        user = await upsert_google_user(db, PROFILE)
        assert user.id == existing.id
        assert user.avatar == PROFILE.picture
        assert await db.scalar(select(func.count(User.id))) == 1


class TestSessionToken:
    def test_roundtrip_and_tamper(self, settings):
        token = create_session_token(42, settings)
        assert verify_session_token(token, settings) == 42
        assert verify_session_token(token[:-1] + ("0" if token[-1] != "0" else "1"), settings) is None
        assert verify_session_token("garbage", settings) is None
        assert verify_session_token("", settings) is None

    def test_other_secret_rejected(self, settings):
        token = create_session_token(42, settings)
        other = settings.model_copy(update={"secret_key": "another"})
        assert verify_session_token(token, other) is None

    def test_expired(self, settings):
        token = create_session_token(42, settings)
        expired = settings.model_copy(update={"auth_cookie_max_age": -1})
        assert verify_session_token(token, expired) is None


class TestAuthRoutes:
    async def test_user_requires_session(self, client):
        resp = await client.get("/auth/user")
        assert resp.status_code == 401
        assert resp.json() == {"success": False, "message": "Not authenticated"}

    async def test_user_info(self, client, make_user, auth_headers):
        user = await make_user(display_name="Tama", avatar="https://img.example.com/t.png")
        body = (await client.get("/auth/user", headers=auth_headers(user))).json()
        assert body["success"] is True
        assert body["user"]["displayName"] == "Tama"
        assert body["user"]["avatar"] == "https://img.example.com/t.png"
        assert body["user"]["countriesProgress"] == []
        assert body["user"]["feedbackStampCollectedAt"] is None

    async def test_login_success_and_failed(self, client, make_user, auth_headers):
        user = await make_user()
        ok = await client.get("/auth/login-success", headers=auth_headers(user))
        assert ok.json()["user"]["email"] == "cat@example.com"
        assert (await client.get("/auth/login-success")).status_code == 401
        assert (await client.get("/auth/login-failed")).status_code == 401

    async def test_bad_cookie_is_anonymous(self, client, settings):
        headers = {"Cookie": f"{settings.auth_cookie_name}=forged.token"}
        assert (await client.get("/auth/user", headers=headers)).status_code == 401

    async def test_deleted_user_is_anonymous(self, client, settings):
        headers = {"Cookie": f"{settings.auth_cookie_name}={create_session_token(999, settings)}"}
        assert (await client.get("/api/protected", headers=headers)).status_code == 401

    async def test_protected(self, client, make_user, auth_headers):
        user = await make_user()
        resp = await client.get("/api/protected", headers=auth_headers(user))
        assert resp.status_code == 200
        assert resp.json()["user"]["id"] == user.id

    async def test_logout_clears_cookie(self, client, settings):
        resp = await client.get("/auth/logout")
        assert resp.status_code == 200
        assert resp.json()["message"] == "Logged out successfully"
        set_cookie = resp.headers["set-cookie"]
        assert set_cookie.startswith(f"{settings.auth_cookie_name}=")
        assert "Max-Age=0" in set_cookie

    async def test_google_login_not_configured(self, client):
        resp = await client.get("/auth/google")
        assert resp.status_code == 503
        assert resp.json() == {"success": False, "message": "Google login is not configured"}


class FakeGoogle:
    def __init__(self, profile):
        self.profile = profile

    async def authorize_access_token(self, request):
        return {"userinfo": self.profile.model_dump()}


class TestGoogleCallback:
    async def test_success_sets_cookie(self, client, settings, monkeypatch):
        monkeypatch.setattr("meowtimedia.routers.auth.get_google_client", lambda _settings: FakeGoogle(PROFILE))
        resp = await client.get("/auth/google/callback")
        assert resp.status_code == 303
        assert resp.headers["location"] == f"{settings.client_url}/dashboard"
        assert resp.headers["set-cookie"].startswith(f"{settings.auth_cookie_name}=")

    async def test_email_conflict_redirects_home(self, client, settings, make_user, monkeypatch):
        await make_user(PROFILE.email, google_id="google-other")
        monkeypatch.setattr("meowtimedia.routers.auth.get_google_client", lambda _settings: FakeGoogle(PROFILE))
        resp = await client.get("/auth/google/callback")
        assert resp.status_code == 303
        assert resp.headers["location"] == settings.client_url
        assert "set-cookie" not in resp.headers
