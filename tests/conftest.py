import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from meowtimedia.core.config import Settings, get_settings
from meowtimedia.core.security import create_session_token
from meowtimedia.db.base import Base
from meowtimedia.db.session import get_db
from meowtimedia.main import app as fastapi_app
from meowtimedia.models.question import Question
from meowtimedia.models.user import User

OWNER_EMAIL = "owner@example.com"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        secret_key="test-secret",
        owner_emails=[OWNER_EMAIL],
        google_client_id=None,
        google_client_secret=None,
        client_url="http://frontend.test",
    )


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory, settings):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_settings] = lambda: settings
    async with AsyncClient(transport=ASGITransport(app=fastapi_app), base_url="http://test") as ac:
        yield ac
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    async def _make(email="cat@example.com", role="user", **fields):
        user = User(
            google_id=fields.pop("google_id", f"google-{email}"),
            email=email,
            display_name=fields.pop("display_name", email.split("@")[0]),
            role=role,
            **fields,
        )
        db.add(user)
        await db.commit()
        return user

    return _make


@pytest.fixture
def auth_headers(settings):
    def _headers(user):
        return {"Cookie": f"{settings.auth_cookie_name}={create_session_token(user.id, settings)}"}

    return _headers


def make_question(country="japan", n=0, answer="A"):
    return Question(
        country=country,
        text=f"Question {n}?",
        option_a=f"q{n} alpha",
        option_b=f"q{n} bravo",
        option_c=f"q{n} charlie",
        option_d=f"q{n} delta",
        answer=answer,
    )


@pytest.fixture
def add_questions(db):
    async def _add(country="japan", count=12):
        questions = [make_question(country, n, answer="ABCD"[n % 4]) for n in range(count)]
        db.add_all(questions)
        await db.commit()
        return questions

    return _add
