"""petcli constants: filesystem layout, exit codes, and generation ranges."""

from __future__ import annotations

from enum import IntEnum

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
    CONFIG_ERROR = 2
    STORE_ERROR = 3
    TERMINAL_ERROR = 4


# ---------------------------------------------------------------------------
# Filesystem layout
# ---------------------------------------------------------------------------

PETCLI_DIR_NAME = ".petcli"
CONFIG_FILENAME = "config.toml"
DB_FILENAME = "db.json"
LOG_FILENAME = "petcli.log"

# ---------------------------------------------------------------------------
# Dashboard timing
# ---------------------------------------------------------------------------

DEFAULT_TICK_RATE_MS = 200
MIN_TICK_RATE_MS = 20
MAX_TICK_RATE_MS = 5000
MIN_INPUT_POLL_SECONDS = 0.001  # floor for the input wait when a tick is due

# ---------------------------------------------------------------------------
# Random pet generation
# ---------------------------------------------------------------------------

PET_ID_RANGE = (0, 999_999)  # half-open
PET_AGE_RANGE = (1, 15)  # half-open
PET_NAME_LENGTH = 10
PET_CATEGORIES = ("cats", "dogs")
