"""Orchestration logic for retracing a file with a mapping from the CLI."""

import argparse
import sys
from pathlib import Path
from typing import Any, TextIO

from retrace.compile_pattern import STACK_TRACE_EXPRESSION
from retrace.errors import MappingError, StackTraceError
from retrace.load_config import load_config
from retrace.retrace_stream import retrace_stream


def run_retrace(
    args: argparse.Namespace,
    settings: dict[str, Any] | None = None,
    output: TextIO | None = None,
) -> int:
    """Execute a retrace run described by parsed command line arguments."""
    if settings is None:
        settings = resolve_settings(args)
    if output is None:
        output = sys.stdout

    try:
        mapping_file = Path(args.mapping_file).open(encoding="utf-8")  # noqa: SIM115
    except OSError as e:
        msg = f"Can't open mapping file ({e})"
        raise MappingError(msg) from e

    with mapping_file:
        if args.stacktrace_file is None:
            retrace_stream(mapping_file, sys.stdin, output, **settings)
            return 0

        try:
            text_path = Path(args.stacktrace_file)
            text_file = text_path.open(encoding="utf-8")  # noqa: SIM115
        except OSError as e:
            msg = f"Can't open stack trace ({e})"
            raise StackTraceError(msg) from e

        with text_file:
            retrace_stream(mapping_file, text_file, output, **settings)
    return 0


def resolve_settings(args: argparse.Namespace) -> dict[str, Any]:
    """Return the template and verbose settings for a run."""
    return _resolve_settings(args, load_config(args.config))


def _resolve_settings(
    args: argparse.Namespace, config: dict[str, Any]
) -> dict[str, Any]:
    """Combine command line options with the configuration file."""
    section = config.get("retrace") or {}

    if args.pattern is not None:
        template, regex = args.pattern, False
    elif args.regex is not None:
        template, regex = args.regex, True
    elif section.get("pattern") is not None:
        template, regex = section["pattern"], False
    elif section.get("regex") is not None:
        template, regex = section["regex"], True
    else:
        template, regex = STACK_TRACE_EXPRESSION, True

    return {
        "template": template,
        "regex": regex,
        "verbose": args.verbose or section.get("verbose") is True,
    }
