"""
Alembic Migration Environment
===============================

What:  Runs the `owners` schema migrations against the configured database.
How:   The URL always comes from petclinic settings (DATABASE_URL), never
       from alembic.ini. Online runs open a short-lived async engine and
       hand its connection to Alembic; offline runs print the SQL instead.
Who:   Called by `alembic` CLI commands (upgrade, downgrade, revision).
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from petclinic.config import settings
from petclinic.database import Base

# Registers the owners table on Base.metadata for --autogenerate
import petclinic.models.owner  # noqa: F401

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def _configure(**kwargs) -> None:
    # compare_type: column length changes (e.g. String(30) → String(40))
    # show up in autogenerated revisions
    context.configure(
        target_metadata=Base.metadata,
        compare_type=True,
        **kwargs,
    )


def _migrate(connection: Connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_online() -> None:
    engine = create_async_engine(settings.database_url, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    _configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()
else:
    asyncio.run(_migrate_online())
