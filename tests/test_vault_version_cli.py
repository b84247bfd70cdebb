"""
Tests for scripts/vault_version.py: command-line front end.
"""

import logging

import pytest

from vault_version import main


class TestParseCommand:
    def test_prints_canonical_form(self, capsys):
        assert main(["parse", "2.0.0.RELEASE"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("2.0  ")
        assert "build=0" in out

    def test_malformed_exits_1(self, capsys):
        assert main(["parse", "1.x"]) == 1
        err = capsys.readouterr().err
        assert err.startswith("ERROR:")
        assert "'x'" in err

    def test_invalid_exits_1(self, capsys):
        assert main(["parse", "1.2.3.4.5"]) == 1
        assert "ERROR:" in capsys.readouterr().err


class TestCompareCommand:
    @pytest.mark.parametrize("left, right, symbol", [
        ("1.0", "1.0.1", "<"),
        ("1.0.0", "1.0", "="),
        ("1.10", "1.9.9", ">"),
    ])
    def test_ordering(self, capsys, left, right, symbol):
        assert main(["compare", left, right]) == 0
        assert f" {symbol} " in capsys.readouterr().out

    def test_bad_operand_exits_1(self, capsys):
        assert main(["compare", "1.0", ""]) == 1
        assert "ERROR:" in capsys.readouterr().err


class TestBackendCommand:
    def test_explicit_version(self, capsys, monkeypatch):
        monkeypatch.delenv("VAULT_SERVER_VERSION", raising=False)
        assert main(["backend", "0.9.6"]) == 0
        assert "KV_1" in capsys.readouterr().out

    def test_version_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("VAULT_SERVER_VERSION", "1.4.2")
        assert main(["backend"]) == 0
        out = capsys.readouterr().out
        assert "Vault 1.4.2: KV_2" in out
        assert ">= 0.10" in out

    def test_missing_version_exits_2(self, capsys, monkeypatch):
        monkeypatch.delenv("VAULT_SERVER_VERSION", raising=False)
        assert main(["backend"]) == 2
        assert "VAULT_SERVER_VERSION" in capsys.readouterr().err

    def test_old_server_falls_back_to_kv1(self, capsys, monkeypatch):
        monkeypatch.delenv("VAULT_SERVER_VERSION", raising=False)
        assert main(["backend", "0.0.1"]) == 0
        assert "Vault 0.0.1: KV_1" in capsys.readouterr().out

    def test_malformed_version_exits_1(self, capsys, monkeypatch):
        monkeypatch.setenv("VAULT_SERVER_VERSION", "1.x")
        assert main(["backend"]) == 1
        assert "ERROR:" in capsys.readouterr().err


class TestUsage:
    def test_no_command_is_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_debug_logging_from_environment(self, monkeypatch, caplog):
        monkeypatch.setenv("VAULTKV_LOG_LEVEL", "debug")
        with caplog.at_level(logging.DEBUG, logger="vaultkv_core"):
            assert main(["parse", "1.2.3-SNAPSHOT"]) == 0
        assert any("Discarded qualifier" in r.getMessage() for r in caplog.records)
