"""Async SQLite connection pool construction and disposal.

The engine is built once by the application lifespan and stored on
``app.state``; request handlers receive it through a FastAPI dependency
instead of reaching for a module global.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine


def sqlite_url(db_path: str) -> str:
    """Build the aiosqlite connection URL for a database file path."""
    return f"sqlite+aiosqlite:///{db_path}"


def create_db_engine(db_path: str, pool_size: int = 10) -> AsyncEngine:
    """Create the async engine backed by a pool of SQLite file connections.

    Args:
        db_path: Filesystem path of the SQLite database file.
        pool_size: Number of pooled connections kept open.

    Connections are opened lazily on first checkout, so nothing touches the
    file until a query is issued.
    """
    return create_async_engine(
        sqlite_url(db_path),
        pool_size=pool_size,
        max_overflow=0,
        pool_pre_ping=True,
        echo=False,
    )


async def dispose_db_engine(engine: AsyncEngine | None) -> None:
    """Dispose the async engine, closing all pooled connections."""
    if engine is not None:
        await engine.dispose()
