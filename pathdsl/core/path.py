"""
Immutable absolute and relative paths.

A path is a backward-linked chain of nodes. Each non-root node holds the
previous node and one segment, so building a child is O(1) and shares the
whole prefix with its parent. Normalization happens while the chain is
built: empty and "." segments are dropped, and ".." is resolved against
the chain as far as it can be.

    ABSOLUTE_ROOT <- AbsolutePath("usr") <- AbsolutePath("lib")     "/usr/lib"
    RELATIVE_ROOT <- RelativePath("..") <- RelativePath("src")      "../src"

Going up past an absolute root is an error. Going up past a relative root
grows a chain of ".." segments, since the starting point is unknown.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Tuple, TypeVar, Union

from pathdsl.core.errors import (
    AboveRootError,
    CannotAppendAbsoluteError,
    InvalidSeparatorError,
    NotAStringError,
)
from pathdsl.core.result import Failure, Result, Success
from pathdsl.core.segment import (
    DEFAULT_SEP,
    UP_SEGMENT,
    NamedSegment,
    PathSegment,
    SegmentType,
    UpSegment,
    parse_segment,
)

A = TypeVar("A")


class PathType(Enum):
    """Type of path node."""
    ABSOLUTE_ROOT = "absolute_root"
    ABSOLUTE_PATH = "absolute_path"
    RELATIVE_ROOT = "relative_root"
    RELATIVE_PATH = "relative_path"


class Path(ABC):
    """Base class for all path nodes."""

    @property
    @abstractmethod
    def path_type(self) -> PathType:
        """Get the type of this path node."""
        pass

    @property
    @abstractmethod
    def is_absolute(self) -> bool:
        pass

    @property
    def is_root(self) -> bool:
        return self.path_type in (PathType.ABSOLUTE_ROOT, PathType.RELATIVE_ROOT)

    def segments(self) -> Tuple[PathSegment, ...]:
        """Get the stored segments, ordered from root to tip."""
        collected: List[PathSegment] = []
        node = self
        while not node.is_root:
            collected.append(node.segment)
            node = node.previous
        collected.reverse()
        return tuple(collected)

    def fold(self, seed: A, fn: Callable[[A, PathSegment], A]) -> A:
        """
        Traverse the chain from root to tip, accumulating a result.

        Args:
            seed: Initial accumulator (returned as-is for a root)
            fn: Called as fn(acc, segment) for every stored segment

        Returns:
            Final accumulator
        """
        acc = seed
        for segment in self.segments():
            acc = fn(acc, segment)
        return acc

    @abstractmethod
    def append(self, other: "Path") -> Result["Path"]:
        pass

    @abstractmethod
    def to_string(self, sep: str = DEFAULT_SEP) -> str:
        pass

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        if self is other:
            return True
        return self.is_absolute == other.is_absolute and self.segments() == other.segments()

    def __hash__(self) -> int:
        return hash((self.is_absolute, self.segments()))


# ============================================================================
# Absolute paths
# ============================================================================

class AbsoluteChain(Path):
    """Shared behaviour of the absolute root and absolute paths."""

    @property
    def is_absolute(self) -> bool:
        return True

    def child(self, segment: NamedSegment) -> "AbsolutePath":
        return AbsolutePath(self, segment)

    @abstractmethod
    def up(self) -> Result["AbsoluteChain"]:
        """Pop one level, failing at the root."""
        pass

    def append(self, other: Path) -> Result[Path]:
        """
        Resolve a relative path against this one.

        Named segments descend, ".." segments pop a level. The first ".."
        that would pass the root fails the whole append.

        Args:
            other: Relative path to append

        Returns:
            Success with the resulting absolute path, or Failure with
            AboveRootError or CannotAppendAbsoluteError
        """
        if other.is_absolute:
            return Failure(CannotAppendAbsoluteError(other))

        def step(acc: Result[AbsoluteChain], segment: PathSegment) -> Result[AbsoluteChain]:
            if segment.segment_type == SegmentType.UP:
                return acc.flat_map(lambda path: path.up())
            return acc.map(lambda path: path.child(segment))

        return other.fold(Success(self), step)

    def to_string(self, sep: str = DEFAULT_SEP) -> str:
        if self.is_root:
            return sep
        return "".join(f"{sep}{segment}" for segment in self.segments())


class AbsoluteRoot(AbsoluteChain):
    """The absolute root ("/")."""

    @property
    def path_type(self) -> PathType:
        return PathType.ABSOLUTE_ROOT

    def up(self) -> Result[AbsoluteChain]:
        return Failure(AboveRootError())


@dataclass(frozen=True, eq=False, repr=False)
class AbsolutePath(AbsoluteChain):
    """A non-root absolute path; stores only named segments."""
    previous: AbsoluteChain
    segment: NamedSegment

    def __post_init__(self):
        if not isinstance(self.segment, NamedSegment):
            raise TypeError(f"Absolute paths only store named segments, got {self.segment!r}")

    @property
    def path_type(self) -> PathType:
        return PathType.ABSOLUTE_PATH

    def up(self) -> Result[AbsoluteChain]:
        return Success(self.previous)


# ============================================================================
# Relative paths
# ============================================================================

class RelativeChain(Path):
    """Shared behaviour of the relative root and relative paths."""

    @property
    def is_absolute(self) -> bool:
        return False

    def child(self, segment: Union[UpSegment, NamedSegment]) -> "RelativeChain":
        """
        Descend into a named segment, or go up for "..".

        ".." is never stored after a named segment; it cancels it instead.
        """
        if segment.segment_type == SegmentType.UP:
            return self.parent()
        return RelativePath(self, segment)

    @abstractmethod
    def parent(self) -> "RelativeChain":
        pass

    def append(self, other: Path) -> Result[Path]:
        if other.is_absolute:
            return Failure(CannotAppendAbsoluteError(other))
        return Success(other.fold(self, lambda acc, segment: acc.child(segment)))

    def to_string(self, sep: str = DEFAULT_SEP) -> str:
        return sep.join(str(segment) for segment in self.segments())


class RelativeRoot(RelativeChain):
    """The empty relative path ("")."""

    @property
    def path_type(self) -> PathType:
        return PathType.RELATIVE_ROOT

    def parent(self) -> "RelativePath":
        return RelativePath(self, UP_SEGMENT)

    def append(self, other: Path) -> Result[Path]:
        if other.is_absolute:
            return Failure(CannotAppendAbsoluteError(other))
        # Already normalized, nothing to resolve against
        return Success(other)


@dataclass(frozen=True, eq=False, repr=False)
class RelativePath(RelativeChain):
    """A non-root relative path; stores ".." or named segments."""
    previous: RelativeChain
    segment: Union[UpSegment, NamedSegment]

    def __post_init__(self):
        if not isinstance(self.segment, (UpSegment, NamedSegment)):
            raise TypeError(f"Relative paths only store '..' or named segments, got {self.segment!r}")

    @property
    def path_type(self) -> PathType:
        return PathType.RELATIVE_PATH

    def parent(self) -> RelativeChain:
        if self.segment.segment_type == SegmentType.UP:
            # Nothing concrete to pop, so go further up
            return RelativePath(self, UP_SEGMENT)
        return self.previous


ABSOLUTE_ROOT = AbsoluteRoot()
RELATIVE_ROOT = RelativeRoot()


# ============================================================================
# Parsing and joining
# ============================================================================

def _fold_absolute(path: AbsoluteChain, parts: List[str], sep: str) -> Result[Path]:
    for part in parts:
        parsed = parse_segment(part, sep)
        if parsed.is_failure():
            return parsed
        segment = parsed.get()

        if segment.segment_type == SegmentType.UP:
            popped = path.up()
            if popped.is_failure():
                return popped
            path = popped.get()
        elif segment.segment_type == SegmentType.NAMED:
            path = path.child(segment)

    return Success(path)


def _fold_relative(path: RelativeChain, parts: List[str], sep: str) -> Result[Path]:
    for part in parts:
        parsed = parse_segment(part, sep)
        if parsed.is_failure():
            return parsed
        segment = parsed.get()

        if segment.segment_type in (SegmentType.UP, SegmentType.NAMED):
            path = path.child(segment)

    return Success(path)


def parse(text: str, sep: str = DEFAULT_SEP) -> Result[Path]:
    """
    Parse and normalize a path string.

    A string starting with the separator is absolute; anything else
    (including "") is relative.

    Args:
        text: Path string to parse
        sep: Path separator

    Returns:
        Success with the normalized path, or Failure with NotAStringError,
        InvalidSeparatorError or AboveRootError
    """
    if not isinstance(text, str):
        return Failure(NotAStringError(text))
    if not isinstance(sep, str) or not sep:
        return Failure(InvalidSeparatorError(sep))

    parts = text.split(sep)
    if len(parts) > 1 and parts[0] == "":
        return _fold_absolute(ABSOLUTE_ROOT, parts[1:], sep)
    return _fold_relative(RELATIVE_ROOT, parts, sep)


def concat(left: Path, right: Path) -> Result[Path]:
    """
    Append right onto left.

    An absolute right-hand side is rejected rather than replacing left.
    """
    if right.is_absolute:
        return Failure(CannotAppendAbsoluteError(right))
    return left.append(right)


def join_using(sep: str = DEFAULT_SEP) -> Callable[..., Result[Path]]:
    """
    Build a join function that parses and concatenates paths using sep.

    Example:
        >>> join_using(":")(":usr", "lib").get().to_string(":")
        ':usr:lib'
    """
    def join_paths(*texts: str) -> Result[Path]:
        if not texts:
            return Success(RELATIVE_ROOT)

        parsed: List[Path] = []
        for text in texts:
            result = parse(text, sep)
            if result.is_failure():
                return result
            parsed.append(result.get())

        # Combine right to left: the tail is joined before the head
        # is appended onto it
        joined: Path = parsed[-1]
        for head in reversed(parsed[:-1]):
            result = concat(head, joined)
            if result.is_failure():
                return result
            joined = result.get()
        return Success(joined)

    return join_paths


join = join_using(DEFAULT_SEP)
