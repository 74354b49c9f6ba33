"""Logic for converting internal Java class names to external ones."""

JAVA_PACKAGE_SEPARATOR = "."
CLASS_PACKAGE_SEPARATOR = "/"


def external_class_name(internal_class_name: str) -> str:
    """Convert an internal class name (java/lang/Object) to java.lang.Object."""
    return internal_class_name.replace(CLASS_PACKAGE_SEPARATOR, JAVA_PACKAGE_SEPARATOR)
