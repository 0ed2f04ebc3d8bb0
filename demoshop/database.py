import ssl as _ssl
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from demoshop.config import settings


def asyncpg_url(url: str) -> tuple[str, dict]:
    """Convert a database URL for asyncpg compatibility.

    asyncpg does not accept ``sslmode`` as a query parameter; it expects
    ``ssl`` to be passed via ``connect_args``.  This helper strips
    ``sslmode`` from the URL and returns the cleaned URL plus any extra
    ``connect_args`` needed.
    """
    parts = urlsplit(url)
    qs = parse_qs(parts.query)
    connect_args: dict = {}

    if "sslmode" in qs:
        mode = qs.pop("sslmode")[0]
        if mode in ("require", "verify-ca", "verify-full"):
            connect_args["ssl"] = _ssl.create_default_context()
        new_query = urlencode(qs, doseq=True)
        url = urlunsplit(parts._replace(query=new_query))

    return url, connect_args


def _engine_options(url: str) -> dict:
    """Pool sizing applies to server databases only; SQLite manages its own pool."""
    if url.startswith("sqlite"):
        return {}
    return {"pool_pre_ping": True, "pool_size": 5, "max_overflow": 10}


_url, _connect_args = asyncpg_url(settings.database_url)

engine = create_async_engine(
    _url,
    connect_args=_connect_args,
    **_engine_options(_url),
)

AsyncSessionLocal: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)
