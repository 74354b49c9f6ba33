"""Data models for the context gathered while retracing one line."""

from dataclasses import dataclass, field


@dataclass
class LineInfo:
    """Holds what a single matched line says about its class and member.

    `line_number` is 0 and the other fields are None when the line did not
    provide them.
    """

    class_name: str | None = None  # original, already retraced
    line_number: int = 0
    type: str | None = None
    arguments: str | None = None
    extra_out_lines: list[str] = field(default_factory=list)
