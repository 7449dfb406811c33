"""Command-line interface for writing the svgdoc demo document."""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
import traceback
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .log import setup_default_logging
from .resources import load_cheatsheet
from .shapes import demo_document
from .svg import SvgdocError

logger = logging.getLogger(__name__)

SUBCOMMANDS_HINT = "Use one of: demo, cheatsheet."


@dataclass
class CliError(Exception):
    code: str
    message: str
    hint: Optional[str] = None
    exit_code: int = 1
    file: Optional[str] = None
    retryable: bool = True


class UsageError(Exception):
    pass


class FriendlyArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # pragma: no cover - argparse callback
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = FriendlyArgumentParser(
        prog="svgdoc",
        description="Build SVG documents from circles, polylines and text.",
    )
    parser.add_argument("--error-format", choices=["text", "json"], default="text")
    parser.add_argument("--debug", action="store_true")

    subparsers = parser.add_subparsers(dest="command")

    demo_parser = subparsers.add_parser("demo", help="Write the demo SVG document")
    demo_parser.add_argument("--stdout", action="store_true", help="Write SVG to stdout")
    demo_parser.add_argument("-o", "--output", help="Output .svg path")

    subparsers.add_parser("cheatsheet", help="Print svgdoc quick reference")

    return parser


def _write_text(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise CliError(
            "E_IO_WRITE",
            f"failed to write output file: {path}",
            hint=str(exc),
            exit_code=4,
            file=str(path),
        )


def _read_cheatsheet() -> str:
    try:
        return load_cheatsheet()
    except OSError as exc:
        raise CliError(
            "E_RESOURCE",
            f"failed to load packaged quick reference: {exc}",
            hint="Reinstall svgdoc; packaged data may be missing.",
            exit_code=1,
            retryable=False,
        )


def _error_from_exception(exc: Exception) -> CliError:
    if isinstance(exc, CliError):
        return exc
    if isinstance(exc, SvgdocError):
        return CliError(
            "E_SVGDOC",
            str(exc),
            hint="Check colors and attributes set on the document objects.",
            exit_code=3,
            retryable=False,
        )
    return CliError(
        "E_INTERNAL",
        str(exc) or exc.__class__.__name__,
        hint="Re-run with --debug to see traceback.",
        exit_code=1,
        retryable=False,
    )


def _emit_error(err: CliError, *, error_format: str) -> None:
    if error_format == "json":
        payload = {
            "ok": False,
            "code": err.code,
            "message": err.message,
            "file": err.file,
            "hint": err.hint,
            "retryable": err.retryable,
        }
        sys.stderr.write(json.dumps(payload) + "\n")
        return

    sys.stderr.write(f"error[{err.code}]: {err.message}\n")
    if err.hint:
        sys.stderr.write(f"hint: {err.hint}\n")


def _handle_demo(args: argparse.Namespace) -> int:
    if args.stdout and args.output:
        raise CliError(
            "E_ARGS",
            "--stdout and --output are mutually exclusive",
            hint="Choose either --stdout or --output.",
            exit_code=2,
        )

    svg_text = demo_document().to_string()

    if args.stdout or not args.output:
        try:
            sys.stdout.write(svg_text)
            if not svg_text.endswith("\n"):
                sys.stdout.write("\n")
        except OSError as exc:
            raise CliError(
                "E_IO_WRITE",
                "failed to write SVG to stdout",
                hint=str(exc),
                exit_code=4,
            )
        return 0

    output_path = Path(args.output)
    _write_text(output_path, svg_text)
    logger.info("wrote %d characters to %s", len(svg_text), output_path)
    print(f"Wrote {output_path}")
    return 0


def main(argv: Optional[Iterable[str]] = None) -> int:
    raw_argv = list(argv) if argv is not None else sys.argv[1:]
    parser = _build_parser()

    if not raw_argv:
        err = CliError("E_ARGS", "missing subcommand", hint=SUBCOMMANDS_HINT, exit_code=2)
        _emit_error(err, error_format="text")
        return err.exit_code

    debug_enabled = "--debug" in raw_argv or os.getenv("SVGDOC_DEBUG") == "1"
    setup_default_logging("DEBUG" if debug_enabled else "WARNING")
    error_format = "text"
    if "--error-format" in raw_argv:
        idx = raw_argv.index("--error-format")
        if idx + 1 < len(raw_argv):
            error_format = raw_argv[idx + 1]

    try:
        args = parser.parse_args(raw_argv)
        error_format = args.error_format

        if args.command == "demo":
            return _handle_demo(args)
        if args.command == "cheatsheet":
            print(_read_cheatsheet())
            return 0

        raise CliError("E_ARGS", "missing subcommand", hint=SUBCOMMANDS_HINT, exit_code=2)
    except UsageError as exc:
        err = CliError("E_ARGS", str(exc), hint=SUBCOMMANDS_HINT, exit_code=2)
        _emit_error(err, error_format=error_format)
        return err.exit_code
    except Exception as exc:  # pragma: no cover - exercised in integration tests
        err = _error_from_exception(exc)
        _emit_error(err, error_format=error_format)
        if debug_enabled:
            traceback.print_exc(file=sys.stderr)
        return err.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
