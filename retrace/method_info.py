"""Data models for retraced method records."""

from dataclasses import dataclass

from retrace.context_matches import context_matches


@dataclass(frozen=True)
class MethodInfo:
    """Represents the original declaration behind an obfuscated method name."""

    class_name: str  # original owning class
    first_line: int
    last_line: int  # 0 when the mapping has no line table for the method
    type: str
    original_name: str
    arguments: str  # comma separated original types, no spaces

    def matches(
        self, line_number: int, type: str | None, arguments: str | None
    ) -> bool:
        """Check whether the method is compatible with the line's context.

        A line number of 0 means the line did not carry one.
        """
        return (
            self.covers_line(line_number)
            and context_matches(type, self.type)
            and context_matches(arguments, self.arguments)
        )

    def covers_line(self, line_number: int) -> bool:
        """Check whether the line number falls in the method's line range."""
        return (
            line_number == 0
            or self.last_line == 0
            or self.first_line <= line_number <= self.last_line
        )
