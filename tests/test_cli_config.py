"""Tests for the command line entry point and environment settings."""

import sys

import pytest

import cli
from shift_split import config
from shift_split.names import NamePool
from shift_split.store import NameStore


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for var in ("SHIFT_SPLIT_STORE", "SHIFT_SPLIT_GRANULARITY", "SHIFT_SPLIT_LOCALE", "SHIFT_SPLIT_CORS_ORIGINS"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("SHIFT_SPLIT_STORE", str(tmp_path / "names.json"))
    monkeypatch.setattr(config, "load_dotenv", lambda *a, **k: None)


def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["shift-split", *argv])
    return cli.main()


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SHIFT_SPLIT_STORE")
        s = config.settings()
        assert s.granularity == 5
        assert s.locale == "en"
        assert str(s.store_path).endswith("names.json")
        assert "http://localhost:5173" in s.cors_origins

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("SHIFT_SPLIT_GRANULARITY", "15")
        monkeypatch.setenv("SHIFT_SPLIT_LOCALE", "he")
        monkeypatch.setenv("SHIFT_SPLIT_CORS_ORIGINS", "https://a.example, https://b.example")
        s = config.settings()
        assert s.granularity == 15
        assert s.locale == "he"
        assert s.cors_origins == ("https://a.example", "https://b.example")

    @pytest.mark.parametrize("value", ["five", "0"])
    def test_bad_granularity(self, monkeypatch, value):
        monkeypatch.setenv("SHIFT_SPLIT_GRANULARITY", value)
        with pytest.raises(ValueError, match="SHIFT_SPLIT_GRANULARITY"):
            config.settings()


class TestCli:
    def test_exact(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "22:00", "06:00", "-n", "8") == 0
        out = capsys.readouterr().out
        assert "Perfect!" in out
        assert "8\t05:00\t06:00" in out

    def test_alternatives_hebrew(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "22:00", "06:00", "-n", "9", "--locale", "he") == 0
        assert "לוז חדש: 22:30 - 06:00" in capsys.readouterr().out

    def test_bad_time(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "22", "06:00", "-n", "8") == 1
        assert "Error: Invalid time format" in capsys.readouterr().err

    def test_missing_names_file(self, monkeypatch, capsys, tmp_path):
        assert run_cli(monkeypatch, "22:00", "06:00", "-n", "8", "--names", str(tmp_path / "x.csv")) == 1
        assert "names file not found" in capsys.readouterr().err

    def test_store_names_auto_count(self, monkeypatch, capsys, tmp_path):
        NameStore(tmp_path / "names.json").save(NamePool.from_names(["Dana", "Noa"]))
        assert run_cli(monkeypatch, "22:00", "06:00", "--auto-count", "--seed", "3") == 0
        out = capsys.readouterr().out
        assert "into 2 round shifts" in out
        assert "Dana" in out and "Noa" in out

    def test_export(self, monkeypatch, capsys, tmp_path):
        target = tmp_path / "shifts.xlsx"
        assert run_cli(monkeypatch, "22:00", "06:00", "-n", "9", "--export", str(target)) == 0
        assert target.exists()
        assert f"Exported: {target}" in capsys.readouterr().out
