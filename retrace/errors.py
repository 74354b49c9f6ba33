"""Exceptions raised while retracing."""


class RetraceError(Exception):
    """Base class for failures that abort a retrace run."""


class MappingError(RetraceError):
    """The mapping file could not be read."""


class StackTraceError(RetraceError):
    """The text to retrace could not be read or written."""


class ConfigError(RetraceError):
    """The configuration or the line template is unusable."""
