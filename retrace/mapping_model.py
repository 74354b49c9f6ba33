"""Reverse lookup structures built from an obfuscation mapping."""

from retrace.field_info import FieldInfo
from retrace.method_info import MethodInfo


class MappingModel:
    """Maps obfuscated names back to their original declarations.

    Implements the MappingProcessor interface, so a MappingReader can pump a
    mapping file straight into it. After ingestion the model is only read.
    """

    def __init__(self) -> None:
        """Initialize empty indices."""
        # obfuscated class name -> original class name
        self.class_map: dict[str, str] = {}
        # original class name -> obfuscated member name -> records
        # (dicts keyed by record keep insertion order and drop duplicates)
        self.class_field_map: dict[str, dict[str, dict[FieldInfo, None]]] = {}
        self.class_method_map: dict[str, dict[str, dict[MethodInfo, None]]] = {}

    # MappingProcessor

    def process_class_mapping(self, class_name: str, new_class_name: str) -> None:
        """Record an obfuscated class name."""
        self.class_map[new_class_name] = class_name

    def process_field_mapping(
        self, class_name: str, field_type: str, field_name: str, new_field_name: str
    ) -> None:
        """Record an obfuscated field name of an original class."""
        field_map = self.class_field_map.setdefault(class_name, {})
        field_set = field_map.setdefault(new_field_name, {})
        field_set[FieldInfo(class_name, field_type, field_name)] = None

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
        """Record an obfuscated method name of an original class."""
        method_map = self.class_method_map.setdefault(class_name, {})
        method_set = method_map.setdefault(new_method_name, {})
        info = MethodInfo(
            class_name,
            first_line,
            last_line,
            method_return_type,
            method_name,
            method_arguments,
        )
        method_set[info] = None

    # Lookups

    def original_class_name(self, obfuscated_class_name: str) -> str:
        """Return the original class name, or the input if it is unknown."""
        return self.class_map.get(obfuscated_class_name, obfuscated_class_name)

    def original_type(self, obfuscated_type: str) -> str:
        """Return the original type, keeping any array suffix."""
        index = obfuscated_type.find("[")
        if index < 0:
            return self.original_class_name(obfuscated_type)
        return (
            self.original_class_name(obfuscated_type[:index])
            + obfuscated_type[index:]
        )

    def original_arguments(self, obfuscated_arguments: str) -> str:
        """Return the original argument types, joined by commas."""
        return ",".join(
            self.original_type(arg.strip()) for arg in obfuscated_arguments.split(",")
        )

    def fields(self, class_name: str, obfuscated_field_name: str) -> list[FieldInfo]:
        """Return all fields of an original class renamed to the given name."""
        field_map = self.class_field_map.get(class_name, {})
        return list(field_map.get(obfuscated_field_name, {}))

    def methods(
        self, class_name: str, obfuscated_method_name: str
    ) -> list[MethodInfo]:
        """Return all methods of an original class renamed to the given name."""
        method_map = self.class_method_map.get(class_name, {})
        return list(method_map.get(obfuscated_method_name, {}))

    def counts(self) -> tuple[int, int, int]:
        """Return the number of class, field, and method records."""
        fields = sum(
            len(records)
            for field_map in self.class_field_map.values()
            for records in field_map.values()
        )
        methods = sum(
            len(records)
            for method_map in self.class_method_map.values()
            for records in method_map.values()
        )
        return len(self.class_map), fields, methods
