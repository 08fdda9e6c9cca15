"""
petcli — terminal dashboard for a flat-file pet registry.

petcli keeps a list of pets in a single JSON document and lets you browse,
add and delete them from a full-screen terminal dashboard. The dashboard
redraws on a fixed tick even when no key is pressed.

Package layout (src/petcli/):
  core/   — config, constants, exceptions, logging, pet model, JSON store
  tui/    — event multiplexer, state machine, rendering, dashboard runner
  cli/    — Click CLI entry point
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
