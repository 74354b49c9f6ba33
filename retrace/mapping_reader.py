"""Logic for reading ProGuard mapping files.

A mapping file lists each renamed class, followed by its renamed members:

    com.example.Foo -> a.a.a:
        int count -> a
        java.lang.String name -> a
        10:20:void bar(int,java.lang.String) -> b
        22:30:void bar(int,java.lang.String):5:13 -> b

Member names are always the original ones, line ranges are optional, and the
original line numbers after the argument list are accepted but not used.
"""

import logging
import re
from collections.abc import Iterable

from retrace.errors import MappingError
from retrace.mapping_processor import MappingProcessor

logger = logging.getLogger(__name__)

CLASS_LINE_RE = re.compile(r"(?P<name>.+?)\s*->\s*(?P<new_name>[^:]+?)\s*:.*")
MEMBER_LINE_RE = re.compile(
    r"(?:(?P<first_line>\d+):(?P<last_line>\d+):)?"
    r"(?P<type>\S+)\s+(?P<name>[^\s(]+)"
    r"(?:\((?P<arguments>[^)]*)\)(?::\d+(?::\d+)?)?)?"
    r"\s*->\s*(?P<new_name>\S+)"
)


class MappingReader:
    """Parses mapping file lines and feeds the declarations to a processor."""

    def __init__(self, lines: Iterable[str]) -> None:
        """Initialize the reader with any iterable of lines, such as a file."""
        self.lines = lines

    def pump(self, processor: MappingProcessor) -> None:
        """Read all lines, passing every declaration to the processor in order."""
        class_name: str | None = None
        counts = {"classes": 0, "fields": 0, "methods": 0}
        line_number = 0
        try:
            for line_number, raw_line in enumerate(self.lines, start=1):
                line = raw_line.strip()
                if not line or line.startswith("#"):
                    continue
                if line.endswith(":"):
                    class_name = self._process_class_mapping(line, processor)
                    if class_name is None:
                        logger.debug("Skipping class line %d: %r", line_number, line)
                    else:
                        counts["classes"] += 1
                elif class_name is not None:
                    kind = self._process_member_mapping(class_name, line, processor)
                    if kind is None:
                        logger.debug("Skipping member line %d: %r", line_number, line)
                    else:
                        counts[kind] += 1
                else:
                    logger.debug("Skipping orphan line %d: %r", line_number, line)
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Can't process mapping file ({e})"
            raise MappingError(msg) from e

        logger.info(
            "Read %d classes, %d fields, %d methods from %d mapping lines",
            counts["classes"],
            counts["fields"],
            counts["methods"],
            line_number,
        )

    def _process_class_mapping(
        self, line: str, processor: MappingProcessor
    ) -> str | None:
        """Parse `original -> obfuscated:` and return the original class name."""
        m = CLASS_LINE_RE.fullmatch(line)
        if not m:
            return None
        class_name = m.group("name")
        processor.process_class_mapping(class_name, m.group("new_name"))
        return class_name

    def _process_member_mapping(
        self, class_name: str, line: str, processor: MappingProcessor
    ) -> str | None:
        """Parse a field or method line of the current class.

        Returns the kind of declaration that was passed on, if any.
        """
        m = MEMBER_LINE_RE.fullmatch(line)
        if not m:
            return None

        arguments = m.group("arguments")
        if arguments is None:
            processor.process_field_mapping(
                class_name, m.group("type"), m.group("name"), m.group("new_name")
            )
            return "fields"

        processor.process_method_mapping(
            class_name,
            int(m.group("first_line") or 0),
            int(m.group("last_line") or 0),
            m.group("type"),
            m.group("name"),
            arguments.strip(),
            m.group("new_name"),
        )
        return "methods"
