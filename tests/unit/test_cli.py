"""Tests for the command-line entry point."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from historify.cli import build_parser, main


class TestParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.config is None
        assert args.port is None
        assert args.documents is None
        assert args.reload is False

    def test_overrides(self) -> None:
        args = build_parser().parse_args(["-p", "9000", "--documents", "docs.json", "--log-level", "debug"])
        assert args.port == 9000
        assert args.documents == "docs.json"
        assert args.log_level == "debug"

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--log-level", "verbose"])


class TestMain:
    def test_missing_config_exits(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(tmp_path / "missing.yaml")])
        assert exc_info.value.code == 1

    def test_missing_documents_exits(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--documents", str(tmp_path / "missing.json")])
        assert exc_info.value.code == 1

    def test_runs_uvicorn_with_overrides(self, tmp_path: Path) -> None:
        documents = tmp_path / "docs.json"
        documents.write_text("[]")

        with (
            patch("historify.cli._port_available", return_value=True),
            patch("historify.observability.logging.setup_logging"),
            patch("uvicorn.run") as mock_run,
        ):
            main(["--port", "9123", "--host", "127.0.0.1", "--documents", str(documents)])

        mock_run.assert_called_once()
        app = mock_run.call_args.args[0]
        assert app.state.settings.server.port == 9123
        assert app.state.settings.documents.path == documents
        assert mock_run.call_args.kwargs["port"] == 9123
