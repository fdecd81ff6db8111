from .exceptions import TreeFormatError, YamlIndentationError, YamlSyntaxError

__all__ = [
    "TreeFormatError",
    "YamlIndentationError",
    "YamlSyntaxError",
]
