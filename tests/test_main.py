"""Tests for the ``python -m seed`` entry point."""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

import seed.__main__ as entrypoint
from demoshop.config import Settings
from demoshop.models import User
from seed.seeder import DatabaseSeeder


@pytest.mark.asyncio
async def test_main_rolls_back_and_reraises_when_seeding_fails(
    engine: AsyncEngine, monkeypatch, caplog
) -> None:
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    fake_engine = MagicMock()
    fake_engine.dispose = AsyncMock()
    monkeypatch.setattr(entrypoint, "AsyncSessionLocal", session_factory)
    monkeypatch.setattr(entrypoint, "engine", fake_engine)

    async def failing_run(self: DatabaseSeeder) -> dict[str, int]:
        await self.seed_admin_user()
        raise RuntimeError("connection lost")

    monkeypatch.setattr(DatabaseSeeder, "run", failing_run)

    with caplog.at_level(logging.ERROR, logger="seed"):
        with pytest.raises(RuntimeError, match="connection lost"):
            await entrypoint.main()

    [record] = [r for r in caplog.records if r.name == "seed"]
    assert record.levelno == logging.ERROR
    assert "connection lost" in record.getMessage()
    assert record.exc_info is None
    fake_engine.dispose.assert_awaited_once()

    async with session_factory() as session:
        assert await session.scalar(select(func.count()).select_from(User)) == 0


def test_run_configures_logging_from_settings(monkeypatch) -> None:
    basic_config = MagicMock()
    asyncio_run = MagicMock()
    monkeypatch.setattr(entrypoint, "settings", Settings(_env_file=None, log_level="debug"))
    monkeypatch.setattr(entrypoint.logging, "basicConfig", basic_config)
    monkeypatch.setattr(entrypoint.asyncio, "run", asyncio_run)
    monkeypatch.setattr(entrypoint, "main", MagicMock(return_value="main-coroutine"))

    entrypoint.run()

    basic_config.assert_called_once()
    assert basic_config.call_args.kwargs["level"] == "DEBUG"
    asyncio_run.assert_called_once_with("main-coroutine")
