"""Logic for retracing a whole text stream with a mapping."""

import logging
from collections.abc import Iterable, Iterator
from typing import TextIO

from retrace.compile_pattern import STACK_TRACE_EXPRESSION, compile_pattern
from retrace.errors import StackTraceError
from retrace.line_retracer import LineRetracer
from retrace.mapping_model import MappingModel
from retrace.mapping_reader import MappingReader

logger = logging.getLogger(__name__)


def build_mapping(mapping_lines: Iterable[str]) -> MappingModel:
    """Read a mapping file into a new MappingModel."""
    mapping = MappingModel()
    MappingReader(mapping_lines).pump(mapping)
    return mapping


def read_lines(text_lines: Iterable[str]) -> Iterator[str]:
    """Yield lines without their terminators, wrapping read failures."""
    try:
        for raw_line in text_lines:
            yield raw_line.rstrip("\r\n")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Can't read stack trace ({e})"
        raise StackTraceError(msg) from e


def retrace_lines(
    retracer: LineRetracer, text_lines: Iterable[str], output: TextIO
) -> int:
    """Retrace lines one by one into the output; return how many were read."""
    count = 0
    try:
        for line in read_lines(text_lines):
            count += 1
            for out_line in retracer.retrace_line(line):
                output.write(out_line + "\n")
        output.flush()
    except OSError as e:
        msg = f"Can't write output ({e})"
        raise StackTraceError(msg) from e
    return count


def retrace_stream(
    mapping_lines: Iterable[str],
    text_lines: Iterable[str],
    output: TextIO,
    *,
    template: str = STACK_TRACE_EXPRESSION,
    regex: bool = True,
    verbose: bool = False,
) -> int:
    """Deobfuscate `text_lines` into `output` using a mapping file's lines.

    The mapping is read completely before the first text line. Returns the
    number of text lines read.
    """
    mapping = build_mapping(mapping_lines)
    compiled = compile_pattern(template, regex=regex)
    retracer = LineRetracer(mapping, compiled, verbose=verbose)
    count = retrace_lines(retracer, text_lines, output)
    logger.info("Retraced %d lines", count)
    return count
