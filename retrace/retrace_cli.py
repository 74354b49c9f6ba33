"""Deobfuscate stack traces of applications obfuscated with ProGuard.

Reads a ProGuard mapping file and a stack trace (a file, or standard input),
and writes the stack trace with the original class, field, and method names.
"""

import argparse
import logging

from retrace.errors import RetraceError
from retrace.run_retrace import resolve_settings, run_retrace

logger = logging.getLogger("retrace")


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    ap = argparse.ArgumentParser(
        prog="retrace",
        description="Retrace ProGuard obfuscated stack traces.",
    )
    template = ap.add_mutually_exclusive_group()
    template.add_argument(
        "--regex",
        help=(
            "Regular expression for the lines to retrace, with placeholders "
            "%%c %%C %%l %%t %%f %%m %%a (default: Java stack trace lines)"
        ),
    )
    template.add_argument(
        "--pattern",
        help="Like --regex, but all text except the placeholders is literal",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Print member types and arguments, and full tracebacks on errors",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    ap.add_argument(
        "mapping_file",
        help="Mapping file written by ProGuard",
    )
    ap.add_argument(
        "stacktrace_file",
        nargs="?",
        help="Stack trace to retrace (default: standard input)",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run retrace; return 0 on success and 1 on processing errors."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(message)s",
    )

    verbose = args.verbose
    try:
        settings = resolve_settings(args)
        verbose = settings["verbose"]
        return run_retrace(args, settings)
    except RetraceError as e:
        if verbose:
            logger.exception("Error: %s", e)
        else:
            logger.error("Error: %s", e)  # noqa: TRY400
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
