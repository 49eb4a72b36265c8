"""Meowtimedia Backend API - FastAPI app entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from meowtimedia.core.auth import CurrentUser
from meowtimedia.core.config import get_settings
from meowtimedia.core.errors import register_error_handlers
from meowtimedia.core.logging import setup_logging
from meowtimedia.db.base import Base
from meowtimedia.db.session import engine
from meowtimedia.routers import admin, auth, country, feedback, reactions
from meowtimedia.schemas.user import UserOutSchema

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database ready (%s)", engine.url.render_as_string(hide_password=True))
    yield
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="Country facts, quizzes, stamps and reactions",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.client_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
# Holds only the OAuth state between /auth/google and the callback
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.secret_key,
    same_site="none" if settings.is_production else "lax",
    https_only=settings.is_production,
)

register_error_handlers(app)

app.include_router(auth.router)
app.include_router(country.router)
app.include_router(reactions.router)
app.include_router(feedback.router)
app.include_router(admin.router)


@app.get("/")
async def index():
    return {
        "message": "Meowtimedia Backend API",
        "endpoints": {
            "auth": {
                "login": "GET /auth/google",
                "callback": "GET /auth/google/callback",
                "user": "GET /auth/user",
                "logout": "GET /auth/logout",
            },
            "country": {
                "content": "GET /country/:slug - Get country festivals, food, funfacts",
                "quiz": "GET /country/:slug/quiz - Get quiz questions",
                "update": "POST /country/:slug/update - Update quiz results (auth required)",
            },
            "reactions": {
                "getByFunfact": "GET /reactions/:funfactId - Get reactions for a funfact",
                "getByCountry": "GET /reactions/country/:countrySlug - Get all reactions for a country",
                "addReaction": "POST /reactions/:funfactId - Add/toggle reaction (auth required)",
                "removeReaction": "DELETE /reactions/:funfactId - Remove reaction (auth required)",
            },
            "protected": "GET /api/protected",
        },
    }


@app.get("/api/protected")
async def protected(current_user: CurrentUser):
    return {
        "success": True,
        "message": "You have access to protected content!",
        "user": UserOutSchema.model_validate(current_user).model_dump(by_alias=True),
    }


@app.get("/health")
async def health():
    return {"status": "ok"}
