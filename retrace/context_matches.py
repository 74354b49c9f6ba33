"""Logic for matching optional line context against recorded attributes."""


def context_matches(context: object | None, value: object) -> bool:
    """Check a recorded value against context taken from the input line.

    Absent context accepts every record; present context requires equality.
    """
    return context is None or context == value
