"""Placeholder roles recognized in line templates."""

from enum import Enum

REGEX_CLASS = r"\b(?:[A-Za-z0-9_$]+\.)*[A-Za-z0-9_$]+\b"
REGEX_CLASS_SLASH = r"\b(?:[A-Za-z0-9_$]+/)*[A-Za-z0-9_$]+\b"
REGEX_LINE_NUMBER = r"\b[0-9]+\b"
REGEX_TYPE = REGEX_CLASS + r"(?:\[\])*"
REGEX_MEMBER = r"<?\b[A-Za-z0-9_$]+\b>?"
REGEX_ARGUMENTS = rf"(?:{REGEX_TYPE}(?:\s*,\s*{REGEX_TYPE})*)?"


class ExpressionType(Enum):
    """A `%x` placeholder; the value is the character following the `%`."""

    CLASS = "c"
    CLASS_SLASH = "C"
    LINE_NUMBER = "l"
    TYPE = "t"
    FIELD = "f"
    METHOD = "m"
    ARGUMENTS = "a"

    @property
    def regex(self) -> str:
        """Return the regular expression matching text of this role."""
        return _REGEXES[self]

    @property
    def is_member(self) -> bool:
        """Check whether the role names a field or method."""
        return self in (ExpressionType.FIELD, ExpressionType.METHOD)


_REGEXES: dict[ExpressionType, str] = {
    ExpressionType.CLASS: REGEX_CLASS,
    ExpressionType.CLASS_SLASH: REGEX_CLASS_SLASH,
    ExpressionType.LINE_NUMBER: REGEX_LINE_NUMBER,
    ExpressionType.TYPE: REGEX_TYPE,
    ExpressionType.FIELD: REGEX_MEMBER,
    ExpressionType.METHOD: REGEX_MEMBER,
    ExpressionType.ARGUMENTS: REGEX_ARGUMENTS,
}
