"""Tests for the ``tillerscope`` click command."""

from __future__ import annotations

from datetime import timedelta
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from tillerscope import __version__
from tillerscope.cli import cli
from tillerscope.models.config import DEFAULT_SINCE, TillerScopeConfig


def _invoke(*args: str) -> tuple[int, str, TillerScopeConfig | None]:
    runner = CliRunner()
    with patch("tillerscope.cli.main.main", new_callable=AsyncMock) as main:
        result = runner.invoke(cli, list(args))
    config = main.await_args.args[0] if main.await_args else None
    return result.exit_code, result.output, config


class TestOptions:
    def test_defaults(self) -> None:
        exit_code, _, config = _invoke()
        assert exit_code == 0
        assert config is not None
        assert config.source.storage == "cfgmaps"
        assert config.source.tiller_namespace == "kube-system"
        assert config.source.label_selector == "OWNER=TILLER"
        assert config.filter.namespace == ""
        assert config.filter.since == DEFAULT_SINCE

    def test_all_flags(self) -> None:
        exit_code, _, config = _invoke(
            "--namespace",
            "prod",
            "--storage",
            "secrets",
            "--since",
            "3h",
            "--tiller-namespace",
            "tiller",
            "-l",
            "OWNER=TILLER,NAME=web",
            "--max-column-width",
            "60",
            "--context",
            "staging",
            "--log-level",
            "debug",
        )
        assert exit_code == 0
        assert config is not None
        assert config.filter.namespace == "prod"
        assert config.source.storage == "secrets"
        assert config.filter.since == timedelta(hours=3)
        assert config.source.tiller_namespace == "tiller"
        assert config.source.label_selector == "OWNER=TILLER,NAME=web"
        assert config.output.max_column_width == 60
        assert config.kube.context == "staging"
        assert config.log.level == "debug"

    def test_environment_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TILLERSCOPE_STORAGE", "secrets")
        _, _, config = _invoke()
        assert config is not None
        assert config.source.storage == "secrets"

    def test_version(self) -> None:
        exit_code, output, _ = _invoke("--version")
        assert exit_code == 0
        assert __version__ in output


class TestUsageErrors:
    def test_invalid_since(self) -> None:
        exit_code, output, config = _invoke("--since", "yesterday")
        assert exit_code == 2
        assert "Invalid duration" in output
        assert config is None

    def test_out_of_range_since(self) -> None:
        exit_code, output, config = _invoke("--since", "99999999999h")
        assert exit_code == 2
        assert "Invalid duration" in output
        assert config is None

    def test_invalid_storage(self) -> None:
        exit_code, _, config = _invoke("--storage", "etcd")
        assert exit_code == 2
        assert config is None

    def test_negative_width(self) -> None:
        exit_code, _, _ = _invoke("--max-column-width", "-1")
        assert exit_code == 2
