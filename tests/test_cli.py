"""CLI parser and command behaviour tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from repolens.cli import _build_parser, main
from repolens.logging import configure_logging


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "classify", "https://github.com/a/b"])
    assert args.verbose is True
    assert args.command == "classify"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["analyze", "https://github.com/a/b", "--verbose"])
    assert args.verbose is True
    assert args.command == "analyze"


def test_cli_collects_repeated_sections() -> None:
    parser = _build_parser()
    args = parser.parse_args(
        ["analyze", "https://github.com/a/b", "--section", "tasks", "--section", "summary"]
    )
    assert args.sections == ["tasks", "summary"]
    assert args.format is None


def test_cli_rejects_unknown_format() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["analyze", "https://github.com/a/b", "--format", "html"])


def test_analyze_prints_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(
        [
            "analyze",
            "https://github.com/acme/todo-rest-api",
            "--language",
            "Python",
            "--format",
            "json",
            "--config",
            str(tmp_path),
        ]
    )

    payload = json.loads(capsys.readouterr().out)
    assert payload["projectType"] == "todo"
    assert payload["tasks"][0] == "[Setup] Clone the repository: git clone <repo-url>"
    assert len(payload["learningPath"]) == 8


def test_analyze_uses_config_defaults(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / ".repolens.yml").write_text(
        "language: Java\nsections: [summary]\noutput:\n  format: markdown\n",
        encoding="utf-8",
    )

    main(["analyze", "https://github.com/acme/widgets", "--config", str(tmp_path)])

    out = capsys.readouterr().out
    assert out.startswith("# widgets\n")
    assert "- **Language:** Java" in out
    assert "## Project Summary" in out
    assert "## Suggested Tasks" not in out


def test_analyze_rejects_invalid_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["analyze", "https://gitlab.com/acme/app", "--config", str(tmp_path)])

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "Please enter a valid GitHub URL." in err
    assert "Please select a programming language." in err


def test_analyze_no_validate_allows_any_input(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    main(["analyze", "", "--no-validate", "--config", str(tmp_path), "--section", "summary"])

    out = capsys.readouterr().out
    assert out.startswith("Repository (general)\n")
    assert '"this project" is a project.' in out


def test_analyze_reports_config_errors(tmp_path: Path) -> None:
    (tmp_path / ".repolens.yml").write_text("output:\n  format: pdf\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["analyze", "https://github.com/a/b", "-l", "C", "--config", str(tmp_path)])
    assert excinfo.value.code == 1


def test_classify_prints_label_and_signals(capsys: pytest.CaptureFixture[str]) -> None:
    main(["classify", "https://github.com/acme/docker-auth-db-app"])

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["general", "signals: has_docker, has_auth, has_db"]


def test_cli_serve_options() -> None:
    parser = _build_parser()
    args = parser.parse_args(["serve", "--port", "9000", "-v"])
    assert args.command == "serve"
    assert args.port == 9000
    assert args.host is None
    assert args.verbose is True


def test_cli_accepts_log_file_before_or_after_command() -> None:
    parser = _build_parser()
    before = parser.parse_args(["--log-file", "run.log", "classify", "https://github.com/a/b"])
    after = parser.parse_args(["classify", "https://github.com/a/b", "--log-file", "run.log"])
    default = parser.parse_args(["classify", "https://github.com/a/b"])

    assert before.log_file == "run.log"
    assert after.log_file == "run.log"
    assert default.log_file is None


def test_analyze_writes_log_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    log_file = tmp_path / "repolens.log"
    main(
        [
            "--log-file",
            str(log_file),
            "analyze",
            "https://github.com/acme/app",
            "-l",
            "Python",
            "--config",
            str(tmp_path),
        ]
    )
    for handler in logging.getLogger("repolens").handlers:
        handler.flush()

    assert "Analyzing https://github.com/acme/app" in log_file.read_text(encoding="utf-8")
    assert "[repolens] INFO Analyzing https://github.com/acme/app" in capsys.readouterr().err
    configure_logging()


def test_serve_passes_logging_options(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(
        "repolens.service.run_service", lambda **kwargs: calls.append(kwargs)
    )

    main(
        [
            "serve",
            "--port",
            "9001",
            "-v",
            "--log-file",
            str(tmp_path / "serve.log"),
            "--config",
            str(tmp_path),
        ]
    )
    configure_logging()

    assert calls == [
        {
            "host": "127.0.0.1",
            "port": 9001,
            "require_github": True,
            "verbose": True,
            "log_file": str(tmp_path / "serve.log"),
        }
    ]
