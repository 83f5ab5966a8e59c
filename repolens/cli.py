"""CLI entrypoints for repolens commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, RepoLensConfig, load_config
from .constants import DEFAULT_SECTIONS, OUTPUT_FORMATS
from .logging import configure_logging
from .models import RepoDescriptor
from .orchestrator import Orchestrator
from .render import render
from .validators import ValidationError, ensure_valid


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_log_file_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "--log-file",
        default=argparse.SUPPRESS if suppress_default else None,
        help="Also append log records to this file.",
    )


def _add_config_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .repolens.yml or the directory containing it (defaults to cwd).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repolens",
        description="Classify a repository from its URL and description and suggest next steps.",
    )
    _add_verbose_option(parser)
    _add_log_file_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Produce summary, tasks, README tips, architecture, learning path and extensions.",
    )
    _add_verbose_option(analyze_parser, suppress_default=True)
    _add_log_file_option(analyze_parser, suppress_default=True)
    _add_config_option(analyze_parser)
    analyze_parser.add_argument("url", help="Repository URL, e.g. https://github.com/owner/name.")
    analyze_parser.add_argument(
        "-l",
        "--language",
        default=None,
        help="Primary language (Python, JavaScript, Java, C, C++, ...).",
    )
    analyze_parser.add_argument(
        "-d",
        "--description",
        default="",
        help="Free-text description of the repository.",
    )
    analyze_parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (defaults to the configured format, then text).",
    )
    analyze_parser.add_argument(
        "--section",
        action="append",
        choices=DEFAULT_SECTIONS,
        dest="sections",
        help="Only render the given section; repeat to select several.",
    )
    analyze_parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip URL and language checks before analyzing.",
    )

    classify_parser = subparsers.add_parser(
        "classify",
        help="Print the detected project type and URL signals.",
    )
    _add_verbose_option(classify_parser, suppress_default=True)
    _add_log_file_option(classify_parser, suppress_default=True)
    classify_parser.add_argument("url", help="Repository URL.")
    classify_parser.add_argument(
        "-d",
        "--description",
        default="",
        help="Free-text description of the repository.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    _add_log_file_option(serve_parser, suppress_default=True)
    _add_config_option(serve_parser)
    serve_parser.add_argument("--host", default=None, help="Bind address.")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for repolens commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "analyze":
        config = _load(parser, args.config)
        descriptor = RepoDescriptor(
            url=args.url,
            language=args.language if args.language is not None else (config.language or ""),
            description=args.description,
        ).normalised()
        if not args.no_validate:
            try:
                ensure_valid(descriptor, require_github=config.require_github)
            except ValidationError as exc:
                messages = "\n".join(f"  {issue.field}: {issue.message}" for issue in exc.issues)
                parser.exit(1, f"repolens analyze: invalid input\n{messages}\n")
        sections = args.sections or config.output.sections
        fmt = args.format or config.output.format
        report = Orchestrator().run(descriptor)
        try:
            output = render(report, fmt, sections)
        except ValueError as exc:
            parser.exit(1, f"repolens analyze failed: {exc}\n")
        sys.stdout.write(output)
    elif args.command == "classify":
        report = Orchestrator().run(
            RepoDescriptor(url=args.url, description=args.description).normalised()
        )
        flags = ", ".join(flag.value for flag in report.signals.active_flags()) or "none"
        print(report.project_type.value)
        print(f"signals: {flags}")
    elif args.command == "serve":
        config = _load(parser, args.config)
        from .service import run_service

        run_service(
            host=args.host or config.service.host,
            port=args.port or config.service.port,
            require_github=config.require_github,
            verbose=bool(args.verbose),
            log_file=args.log_file,
        )
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _load(parser: argparse.ArgumentParser, path: str) -> RepoLensConfig:
    try:
        return load_config(Path(path))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")


if __name__ == "__main__":
    main(sys.argv[1:])
