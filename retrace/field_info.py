"""Data models for retraced field records."""

from dataclasses import dataclass

from retrace.context_matches import context_matches


@dataclass(frozen=True)
class FieldInfo:
    """Represents the original declaration behind an obfuscated field name."""

    class_name: str  # original owning class
    type: str
    original_name: str

    def matches(self, type: str | None) -> bool:
        """Check whether the field is compatible with the type from the line."""
        return context_matches(type, self.type)
