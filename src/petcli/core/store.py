"""
JSON-file pet store.

The whole collection lives in one JSON array. Every operation reads the file
from scratch and every mutation rewrites it in full; nothing is cached
between calls. There is a single writer (the dashboard's main loop or one
CLI command), so no locking is done.

Lifecycle::

    store = PetStore(path)
    store.initialise()          # creates "[]" if the file is missing
    pets = store.load_all()
    store.append_generated()
    store.delete_at(0)
"""

from __future__ import annotations

import contextlib
import logging
import random
import string
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

from pydantic import ValidationError

from petcli.core.constants import PET_AGE_RANGE, PET_CATEGORIES, PET_ID_RANGE, PET_NAME_LENGTH
from petcli.core.exceptions import ParseError, ReadError, RecordIndexError, WriteError
from petcli.core.models import PET_LIST, Pet

logger = logging.getLogger(__name__)

_ALPHANUMERIC = string.ascii_letters + string.digits


def _utcnow() -> datetime:
    return datetime.now(UTC)


def generate_pet(rng: random.Random, now: datetime) -> Pet:
    """Build a random pet. Ids are not checked against existing pets."""
    return Pet(
        id=rng.randrange(*PET_ID_RANGE),
        name="".join(rng.choice(_ALPHANUMERIC) for _ in range(PET_NAME_LENGTH)),
        category=rng.choice(PET_CATEGORIES),
        age=rng.randrange(*PET_AGE_RANGE),
        created_at=now,
    )


class PetStore:
    """The only path through which pets are read or written."""

    def __init__(
        self,
        path: Path,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._path = Path(path)
        self._rng = rng or random.Random()
        self._clock = clock or _utcnow

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def initialise(self) -> bool:
        """Create an empty store if none exists. Returns True if a file was created."""
        if self._path.exists():
            return False
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise WriteError(f"cannot create directory for {self._path}: {exc}") from exc
        self._write([])
        logger.info("Created empty pet store: %s", self._path)
        return True

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def load_all(self) -> list[Pet]:
        try:
            content = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ReadError(f"error reading the pet store {self._path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise ParseError(f"pet store {self._path} is not UTF-8 text: {exc}") from exc
        try:
            return PET_LIST.validate_json(content)
        except ValidationError as exc:
            raise ParseError(
                f"error parsing the pet store {self._path}: "
                f"{exc.error_count()} validation error(s)"
            ) from exc

    # ------------------------------------------------------------------
    # Mutations (read-modify-rewrite)
    # ------------------------------------------------------------------

    def append_generated(self) -> list[Pet]:
        """Append one random pet and return the updated collection."""
        pets = self.load_all()
        pet = generate_pet(self._rng, self._clock())
        pets.append(pet)
        self._write(pets)
        logger.info("Added pet id=%d name=%s (%d total)", pet.id, pet.name, len(pets))
        return pets

    def delete_at(self, index: int) -> Pet:
        """Remove the pet at *index*, shifting later pets left. Returns the removed pet."""
        pets = self.load_all()
        if not 0 <= index < len(pets):
            raise RecordIndexError(
                f"no pet at index {index} (store holds {len(pets)} pet(s))"
            )
        removed = pets.pop(index)
        self._write(pets)
        logger.info("Deleted pet id=%d name=%s at index %d", removed.id, removed.name, index)
        return removed

    def _write(self, pets: list[Pet]) -> None:
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            tmp_path.write_bytes(PET_LIST.dump_json(pets, indent=2))
            tmp_path.replace(self._path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise WriteError(f"error writing the pet store {self._path}: {exc}") from exc
