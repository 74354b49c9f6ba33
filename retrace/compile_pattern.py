"""Logic for compiling line templates into regular expressions."""

import logging
import re

from retrace.compiled_pattern import CompiledPattern, group_name
from retrace.errors import ConfigError
from retrace.expression_type import ExpressionType

logger = logging.getLogger(__name__)

# Matches `at <class>.<method>(<source>:<line>)` frames, or lines that start
# with a class name, such as `<class>: message` and `Caused by: <class>`.
STACK_TRACE_EXPRESSION = (
    r"(?:.*?\bat\s+%c\.%m\s*\(.*?(?::%l)?\)\s*)|(?:(?:.*?[:\"]\s+)?%c(?::.*)?)"
)


def compile_pattern(template: str, *, regex: bool = True) -> CompiledPattern:
    """Compile a template with `%x` placeholders into a CompiledPattern.

    With `regex=True` the text between placeholders is regular expression
    syntax. With `regex=False` it is matched literally. Unknown placeholder
    characters are dropped.
    """
    parts: list[str] = []
    expression_types: list[ExpressionType] = []

    index = 0
    while True:
        next_index = template.find("%", index)
        if next_index < 0 or next_index + 1 >= len(template):
            break
        parts.append(_literal(template[index:next_index], regex=regex))

        char = template[next_index + 1]
        try:
            expression_type = ExpressionType(char)
        except ValueError:
            logger.debug("Dropping unknown placeholder %%%s", char)
        else:
            name = group_name(len(expression_types))
            parts.append(f"(?P<{name}>{expression_type.regex})")
            expression_types.append(expression_type)

        index = next_index + 2

    parts.append(_literal(template[index:], regex=regex))

    try:
        pattern = re.compile("".join(parts))
    except re.error as e:
        msg = f"Invalid line template {template!r} ({e})"
        raise ConfigError(msg) from e

    return CompiledPattern(pattern, tuple(expression_types))


def _literal(text: str, *, regex: bool) -> str:
    """Return template text as regex source."""
    return text if regex else re.escape(text)
