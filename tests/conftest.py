"""Shared fixtures: isolate HOME, PETCLI_* env vars and the petcli logger."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator
from datetime import UTC, datetime
from pathlib import Path

import pytest

from petcli.core.store import PetStore

FIXED_NOW = datetime(2026, 10, 18, 12, 30, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for var in ("PETCLI_CONFIG", "PETCLI_DB_PATH", "PETCLI_TICK_MS", "PETCLI_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    yield home
    logger = logging.getLogger("petcli")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "db.json"


@pytest.fixture
def store(db_path: Path) -> PetStore:
    """An initialised, empty store with a seeded RNG and a fixed clock."""
    s = PetStore(db_path, rng=random.Random(1234), clock=lambda: FIXED_NOW)
    s.initialise()
    return s


@pytest.fixture
def fill(store: PetStore):
    """Append *n* generated pets to the shared store."""

    def _fill(n: int) -> PetStore:
        for _ in range(n):
            store.append_generated()
        return store

    return _fill
