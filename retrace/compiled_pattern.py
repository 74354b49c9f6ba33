"""Data models for compiled line templates."""

import re
from collections.abc import Iterator
from dataclasses import dataclass

from retrace.expression_type import ExpressionType


def group_name(index: int) -> str:
    """Return the regex group name used for the placeholder at `index`."""
    return f"rt{index}"


@dataclass(frozen=True)
class CompiledPattern:
    """A line template compiled to a regular expression.

    Every placeholder of the template owns the named group
    `group_name(index)`, where `index` is its position in `expression_types`.
    Named groups keep the roles aligned even if a custom regular expression
    brings capturing groups of its own.
    """

    pattern: re.Pattern[str]
    expression_types: tuple[ExpressionType, ...]

    def fullmatch(self, line: str) -> re.Match[str] | None:
        """Match the whole line against the template."""
        return self.pattern.fullmatch(line)

    def matched_groups(
        self, m: re.Match[str]
    ) -> Iterator[tuple[ExpressionType, str, int, int]]:
        """Yield (role, text, start, end) for the placeholders that took part."""
        for index, expression_type in enumerate(self.expression_types):
            name = group_name(index)
            start = m.start(name)
            if start >= 0:
                yield expression_type, m.group(name), start, m.end(name)
