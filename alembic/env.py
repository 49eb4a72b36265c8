"""Alembic env: runs migrations on a sync driver (psycopg2 / sqlite) while the app uses asyncpg / aiosqlite."""
from logging.config import fileConfig
import os

from alembic import context
from sqlalchemy import engine_from_config, pool

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

from meowtimedia.db.base import Base  # noqa: E402
from meowtimedia.core.config import get_settings  # noqa: E402

target_metadata = Base.metadata

_SYNC_DRIVERS = {
    "postgresql+asyncpg://": "postgresql+psycopg2://",
    "sqlite+aiosqlite://": "sqlite://",
}


def _to_sync_url(url: str) -> str:
    for async_prefix, sync_prefix in _SYNC_DRIVERS.items():
        if url.startswith(async_prefix):
            return url.replace(async_prefix, sync_prefix, 1)
    return url


def get_url() -> str:
    # ALEMBIC_DATABASE_URL wins, then the app setting, then alembic.ini
    url = os.getenv("ALEMBIC_DATABASE_URL") or get_settings().database_url
    if url:
        return _to_sync_url(url)
    return config.get_main_option("sqlalchemy.url")


def _configure_kwargs(url: str) -> dict:
    # SQLite cannot ALTER most things in place; batch mode recreates tables
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "render_as_batch": url.startswith("sqlite"),
    }


def run_migrations_offline() -> None:
    url = get_url()
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_kwargs(url),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    url = get_url()
    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = url

    connectable = engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
        future=True,
    )

    with connectable.connect() as connection:
        context.configure(connection=connection, **_configure_kwargs(url))
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
