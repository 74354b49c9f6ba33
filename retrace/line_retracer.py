"""Logic for retracing single lines of text."""

from retrace.compiled_pattern import CompiledPattern
from retrace.expression_type import ExpressionType
from retrace.external_class_name import external_class_name
from retrace.line_info import LineInfo
from retrace.mapping_model import MappingModel
from retrace.member_resolver import MemberResolver


class LineRetracer:
    """Rewrites lines matching a compiled template using a mapping.

    Lines that don't match are returned unchanged. In a matching line every
    placeholder's text is replaced by its original name. If a field or method
    name is ambiguous, the first candidate is written in place and every other
    candidate gets its own line, indented to the column of the name.
    """

    def __init__(
        self,
        mapping: MappingModel,
        compiled_pattern: CompiledPattern,
        *,
        verbose: bool = False,
    ) -> None:
        """Initialize the retracer with a mapping and a compiled template."""
        self.mapping = mapping
        self.compiled_pattern = compiled_pattern
        self.resolver = MemberResolver(mapping, verbose=verbose)

    def retrace_line(self, line: str) -> list[str]:
        """Return the retraced line followed by any alternative lines."""
        m = self.compiled_pattern.fullmatch(line)
        if not m:
            return [line]

        groups = list(self.compiled_pattern.matched_groups(m))

        # Collect the class, line number, type, and arguments of the whole line
        # first, so members can use context that appears after them.
        line_info = LineInfo()
        for expression_type, text, _, _ in groups:
            if not expression_type.is_member:
                self._set_original_value(expression_type, text, line_info)

        out: list[str] = []
        out_length = 0
        line_index = 0
        for expression_type, text, start, end in groups:
            literal = line[line_index:start]
            out.append(literal)
            out_length += len(literal)

            if expression_type.is_member:
                value = self._original_member_name(
                    expression_type, text, line_info, out_length
                )
            else:
                value = self._set_original_value(expression_type, text, line_info)
            out.append(value)
            out_length += len(value)

            line_index = end

        out.append(line[line_index:])
        return ["".join(out), *line_info.extra_out_lines]

    def _set_original_value(
        self, expression_type: ExpressionType, text: str, line_info: LineInfo
    ) -> str:
        """Store the original value of a non-member match and return it."""
        match expression_type:
            case ExpressionType.CLASS:
                value = self.mapping.original_class_name(text)
                line_info.class_name = value
            case ExpressionType.CLASS_SLASH:
                value = self.mapping.original_class_name(external_class_name(text))
                line_info.class_name = value
            case ExpressionType.LINE_NUMBER:
                line_info.line_number = int(text)
                value = str(line_info.line_number)
            case ExpressionType.TYPE:
                value = self.mapping.original_type(text)
                line_info.type = value
            case ExpressionType.ARGUMENTS:
                value = self.mapping.original_arguments(text)
                line_info.arguments = value
            case ExpressionType.FIELD | ExpressionType.METHOD:
                msg = f"{expression_type} is resolved by the member resolver"
                raise ValueError(msg)
        return value

    def _original_member_name(
        self,
        expression_type: ExpressionType,
        text: str,
        line_info: LineInfo,
        column: int,
    ) -> str:
        """Return the first original member name, queuing the alternatives."""
        if expression_type is ExpressionType.FIELD:
            names = self.resolver.original_field_names(line_info, text)
        else:
            names = self.resolver.original_method_names(line_info, text)

        if not names:
            return text

        indent = " " * column
        line_info.extra_out_lines.extend(indent + name for name in names[1:])
        return names[0]
