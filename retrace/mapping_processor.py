"""Interface for consumers of mapping file declarations."""

from typing import Protocol


class MappingProcessor(Protocol):
    """Receives class, field, and method declarations in mapping file order."""

    def process_class_mapping(self, class_name: str, new_class_name: str) -> None:
        """Handle `class_name -> new_class_name:`."""

    def process_field_mapping(
        self, class_name: str, field_type: str, field_name: str, new_field_name: str
    ) -> None:
        """Handle a field of the original class `class_name`."""

    def process_method_mapping(
        self,
        class_name: str,
        first_line: int,
        last_line: int,
        method_return_type: str,
        method_name: str,
        method_arguments: str,
        new_method_name: str,
    ) -> None:
        """Handle a method of the original class `class_name`."""
