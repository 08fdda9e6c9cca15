"""
petcli test suite.

Tests are organized by layer:
    tests/unit/   Unit tests (store, state machine, multiplexer, rendering)
    tests/cli/    CLI tests through click's CliRunner

Run all tests:
    pytest

Run unit tests only:
    pytest tests/unit/
"""
