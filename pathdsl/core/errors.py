"""
Error taxonomy for path parsing and composition.

Errors are returned inside a Failure result rather than raised; they are
only raised when a caller unwraps a failed result with get().
"""
from enum import Enum


class PathErrorKind(Enum):
    """Kind of path error."""
    NOT_A_STRING = "not_a_string"
    INVALID_SEGMENT = "invalid_segment"
    INVALID_SEPARATOR = "invalid_separator"
    ABOVE_ROOT = "above_root"
    CANNOT_APPEND_ABSOLUTE = "cannot_append_absolute"


class PathError(Exception):
    """Base class for all path errors."""
    kind: PathErrorKind


class NotAStringError(PathError):
    """Input to parse was not a string."""
    kind = PathErrorKind.NOT_A_STRING

    def __init__(self, value: object):
        super().__init__(f"Path is not a string: {value!r}")
        self.value = value


class InvalidSegmentError(PathError):
    """Segment text contains the path separator."""
    kind = PathErrorKind.INVALID_SEGMENT

    def __init__(self, segment: str, sep: str):
        super().__init__(f'Invalid path segment "{segment}": may not include path separator "{sep}"')
        self.segment = segment
        self.sep = sep


class InvalidSeparatorError(PathError):
    """Separator is empty."""
    kind = PathErrorKind.INVALID_SEPARATOR

    def __init__(self, sep: object):
        super().__init__(f"Invalid path separator: {sep!r}")
        self.sep = sep


class AboveRootError(PathError):
    """An absolute path went up past its root."""
    kind = PathErrorKind.ABOVE_ROOT

    def __init__(self):
        super().__init__("Cannot go up from absolute root")


class CannotAppendAbsoluteError(PathError):
    """An absolute path was appended onto another path."""
    kind = PathErrorKind.CANNOT_APPEND_ABSOLUTE

    def __init__(self, path: object):
        super().__init__(f"Cannot append absolute path: {path}")
        self.path = path
