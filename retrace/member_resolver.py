"""Logic for resolving obfuscated member names to their original candidates."""

from retrace.field_info import FieldInfo
from retrace.line_info import LineInfo
from retrace.mapping_model import MappingModel
from retrace.method_info import MethodInfo


class MemberResolver:
    """Finds and renders the original fields and methods behind a name.

    Candidates keep mapping file order, so the first one is what the line
    retracer writes in place.
    """

    def __init__(self, mapping: MappingModel, *, verbose: bool = False) -> None:
        """Initialize the resolver with a mapping and the rendering mode."""
        self.mapping = mapping
        self.verbose = verbose

    def original_fields(
        self, line_info: LineInfo, obfuscated_field_name: str
    ) -> list[FieldInfo]:
        """Return the fields matching the name and the line's type, if any."""
        if line_info.class_name is None:
            return []
        return [
            info
            for info in self.mapping.fields(line_info.class_name, obfuscated_field_name)
            if info.matches(line_info.type)
        ]

    def original_methods(
        self, line_info: LineInfo, obfuscated_method_name: str
    ) -> list[MethodInfo]:
        """Return the methods matching the name and the line's context."""
        if line_info.class_name is None:
            return []
        return [
            info
            for info in self.mapping.methods(
                line_info.class_name, obfuscated_method_name
            )
            if info.matches(line_info.line_number, line_info.type, line_info.arguments)
        ]

    def original_field_names(
        self, line_info: LineInfo, obfuscated_field_name: str
    ) -> list[str]:
        """Return rendered field candidates."""
        return [
            self.render_field(info)
            for info in self.original_fields(line_info, obfuscated_field_name)
        ]

    def original_method_names(
        self, line_info: LineInfo, obfuscated_method_name: str
    ) -> list[str]:
        """Return rendered method candidates."""
        return [
            self.render_method(info)
            for info in self.original_methods(line_info, obfuscated_method_name)
        ]

    def render_field(self, info: FieldInfo) -> str:
        """Render a field as `name`, or `type name` when verbose."""
        if self.verbose:
            return f"{info.type} {info.original_name}"
        return info.original_name

    def render_method(self, info: MethodInfo) -> str:
        """Render a method as `name`, or `type name(arguments)` when verbose."""
        if self.verbose:
            return f"{info.type} {info.original_name}({info.arguments})"
        return info.original_name
