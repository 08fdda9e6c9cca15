"""CLI tests for petcli store, config, version and dashboard commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from petcli.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def env(tmp_path: Path) -> dict[str, str]:
    return {"PETCLI_CONFIG": str(tmp_path / "config.toml")}


@pytest.fixture
def db(tmp_path: Path) -> Path:
    return tmp_path / "pets" / "db.json"


def _invoke(runner: CliRunner, args: list[str], env: dict[str, str]):
    return runner.invoke(cli, args, env=env, catch_exceptions=False)


def _listed(runner: CliRunner, db: Path, env: dict[str, str]) -> list[dict]:
    result = _invoke(runner, ["list", "--db", str(db), "--json"], env)
    assert result.exit_code == 0
    return json.loads(result.stdout)


# ---------------------------------------------------------------------------
# petcli init / add / list / delete
# ---------------------------------------------------------------------------


class TestStoreCommands:
    def test_init_creates_then_reports_existing(self, runner, db, env) -> None:
        first = _invoke(runner, ["init", "--db", str(db)], env)
        assert first.exit_code == 0
        assert "Created empty pet store" in first.output
        assert json.loads(db.read_text()) == []

        second = _invoke(runner, ["init", "--db", str(db)], env)
        assert second.exit_code == 0
        assert "already exists" in second.output

    def test_add_and_list(self, runner, db, env) -> None:
        result = _invoke(runner, ["add", "--db", str(db), "--count", "3"], env)
        assert result.exit_code == 0
        assert result.output.count("Added") == 3

        pets = _listed(runner, db, env)
        assert len(pets) == 3
        assert {p["category"] for p in pets} <= {"cats", "dogs"}
        assert all(1 <= p["age"] <= 15 for p in pets)

    def test_list_table(self, runner, db, env) -> None:
        _invoke(runner, ["add", "--db", str(db)], env)
        name = _listed(runner, db, env)[0]["name"]
        result = _invoke(runner, ["list", "--db", str(db)], env)
        assert result.exit_code == 0
        assert name in result.output

    def test_list_empty_store(self, runner, db, env) -> None:
        _invoke(runner, ["init", "--db", str(db)], env)
        result = _invoke(runner, ["list", "--db", str(db)], env)
        assert result.exit_code == 0
        assert "No pets stored yet" in result.output

    def test_list_missing_store(self, runner, db, env) -> None:
        result = _invoke(runner, ["list", "--db", str(db), "--json"], env)
        assert result.exit_code == 3
        assert "Store error" in result.stderr
        assert result.stdout == ""

    def test_list_corrupt_store(self, runner, db, env) -> None:
        db.parent.mkdir(parents=True)
        db.write_text("{not json")
        result = _invoke(runner, ["list", "--db", str(db)], env)
        assert result.exit_code == 3
        assert "Store error" in result.stderr

    def test_delete(self, runner, db, env) -> None:
        _invoke(runner, ["add", "--db", str(db), "-n", "2"], env)
        before = _listed(runner, db, env)

        result = _invoke(runner, ["delete", "--db", str(db), "0"], env)
        assert result.exit_code == 0
        assert before[0]["name"] in result.output
        assert _listed(runner, db, env) == before[1:]

    def test_delete_out_of_range(self, runner, db, env) -> None:
        _invoke(runner, ["add", "--db", str(db)], env)
        result = _invoke(runner, ["delete", "--db", str(db), "10"], env)
        assert result.exit_code == 3
        assert "no pet at index 10" in result.stderr
        assert len(_listed(runner, db, env)) == 1

    def test_add_rejects_zero_count(self, runner, db, env) -> None:
        result = runner.invoke(cli, ["add", "--db", str(db), "--count", "0"], env=env)
        assert result.exit_code == 2
        assert not db.exists()

    def test_db_path_from_env(self, runner, db, env) -> None:
        env = {**env, "PETCLI_DB_PATH": str(db)}
        result = _invoke(runner, ["add"], env)
        assert result.exit_code == 0
        assert len(json.loads(db.read_text())) == 1


# ---------------------------------------------------------------------------
# petcli config show / init
# ---------------------------------------------------------------------------


class TestConfigCommands:
    def test_show_defaults_json(self, runner, env) -> None:
        result = _invoke(runner, ["config", "show", "--json"], env)
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ui"]["tick_rate_ms"] == 200
        assert data["_config_exists"] is False
        assert data["_config_path"] == env["PETCLI_CONFIG"]

    def test_show_rich(self, runner, env) -> None:
        result = _invoke(runner, ["config", "show"], env)
        assert result.exit_code == 0
        assert "[ui]" in result.output
        assert "tick_rate_ms = 200" in result.output

    def test_show_bad_env(self, runner, env) -> None:
        env = {**env, "PETCLI_TICK_MS": "abc"}
        result = _invoke(runner, ["config", "show", "--json"], env)
        assert result.exit_code == 2
        assert "Config error" in result.stderr
        assert result.stdout == ""

    def test_init_then_refuse_then_force(self, runner, env) -> None:
        cfg = Path(env["PETCLI_CONFIG"])
        first = _invoke(runner, ["config", "init"], env)
        assert first.exit_code == 0
        assert cfg.exists()

        cfg.write_text("[ui]\ntick_rate_ms = 900\n")
        second = _invoke(runner, ["config", "init"], env)
        assert second.exit_code == 2
        assert "already exists" in second.stderr
        assert "tick_rate_ms = 900" in cfg.read_text()

        forced = _invoke(runner, ["config", "init", "--force"], env)
        assert forced.exit_code == 0
        assert "tick_rate_ms = 200" in cfg.read_text()

    def test_bad_config_blocks_store_commands(self, runner, db, env) -> None:
        Path(env["PETCLI_CONFIG"]).write_text("[ui]\ntick_rate_ms = 1\n")
        result = _invoke(runner, ["add", "--db", str(db)], env)
        assert result.exit_code == 2
        assert "Config error" in result.stderr
        assert not db.exists()


# ---------------------------------------------------------------------------
# petcli version / dashboard
# ---------------------------------------------------------------------------


class TestMisc:
    def test_version_json(self, runner, env) -> None:
        from petcli import __version__

        result = _invoke(runner, ["version", "--json"], env)
        assert result.exit_code == 0
        assert json.loads(result.stdout)["petcli"] == __version__

    def test_version_flag(self, runner, env) -> None:
        result = _invoke(runner, ["--version"], env)
        assert result.exit_code == 0
        assert "petcli" in result.output

    def test_dashboard_needs_a_tty(self, runner, db, env) -> None:
        result = _invoke(runner, ["dashboard", "--db", str(db)], env)
        assert result.exit_code == 4
        assert "Terminal error" in result.stderr

    def test_dashboard_rejects_bad_tick(self, runner, db, env) -> None:
        result = runner.invoke(cli, ["dashboard", "--db", str(db), "--tick-ms", "5"], env=env)
        assert result.exit_code == 2
