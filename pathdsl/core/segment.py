"""
Path segment classes.

A path string is split on its separator into components, and each component
is classified as one of four segment types:

    ""      empty segment, ex. "/hello///there"
    "."     current segment, ex. "/hello/././there"
    ".."    up (parent) segment, ex. "/hello/../there"
    other   named segment, any string not containing the separator
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from pathdsl.core.errors import InvalidSegmentError, NotAStringError
from pathdsl.core.result import Failure, Result, Success

DEFAULT_SEP = "/"


class SegmentType(Enum):
    """Type of path segment."""
    EMPTY = "empty"       # "" between two separators
    CURRENT = "current"   # "."
    UP = "up"             # ".."
    NAMED = "named"       # Any other text


@dataclass(frozen=True)
class PathSegment(ABC):
    """Base class for path segments."""

    @property
    @abstractmethod
    def segment_type(self) -> SegmentType:
        """Get the type of this segment."""
        pass

    @abstractmethod
    def to_string(self) -> str:
        pass

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class EmptySegment(PathSegment):
    """An empty segment (produced by repeated or trailing separators)."""

    @property
    def segment_type(self) -> SegmentType:
        return SegmentType.EMPTY

    def to_string(self) -> str:
        return ""


@dataclass(frozen=True)
class CurrentSegment(PathSegment):
    """The "." segment."""

    @property
    def segment_type(self) -> SegmentType:
        return SegmentType.CURRENT

    def to_string(self) -> str:
        return "."


@dataclass(frozen=True)
class UpSegment(PathSegment):
    """The ".." segment."""

    @property
    def segment_type(self) -> SegmentType:
        return SegmentType.UP

    def to_string(self) -> str:
        return ".."


@dataclass(frozen=True)
class NamedSegment(PathSegment):
    """A named segment (file or directory name)."""
    value: str

    @property
    def segment_type(self) -> SegmentType:
        return SegmentType.NAMED

    def to_string(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str, sep: str = DEFAULT_SEP) -> Result["NamedSegment"]:
        """
        Create a named segment, rejecting text that contains the separator.

        Args:
            text: Segment text
            sep: Path separator the segment will be rendered with

        Returns:
            Success with the segment, or Failure with InvalidSegmentError
        """
        if sep in text:
            return Failure(InvalidSegmentError(text, sep))
        return Success(cls(text))


EMPTY_SEGMENT = EmptySegment()
CURRENT_SEGMENT = CurrentSegment()
UP_SEGMENT = UpSegment()


def parse_segment(text: str, sep: str = DEFAULT_SEP) -> Result[PathSegment]:
    """
    Classify a single path component.

    Args:
        text: Component string (already split on the separator)
        sep: Path separator

    Returns:
        Success with the segment, or Failure with NotAStringError or
        InvalidSegmentError
    """
    if not isinstance(text, str):
        return Failure(NotAStringError(text))

    if text == "":
        return Success(EMPTY_SEGMENT)
    elif text == ".":
        return Success(CURRENT_SEGMENT)
    elif text == "..":
        return Success(UP_SEGMENT)
    return NamedSegment.parse(text, sep)
