from .errors import (
    PathErrorKind,
    PathError,
    NotAStringError,
    InvalidSegmentError,
    InvalidSeparatorError,
    AboveRootError,
    CannotAppendAbsoluteError,
)
from .result import Result, Success, Failure
from .segment import (
    DEFAULT_SEP,
    SegmentType,
    PathSegment,
    EmptySegment,
    CurrentSegment,
    UpSegment,
    NamedSegment,
    EMPTY_SEGMENT,
    CURRENT_SEGMENT,
    UP_SEGMENT,
    parse_segment,
)
from .path import (
    PathType,
    Path,
    AbsoluteChain,
    AbsoluteRoot,
    AbsolutePath,
    RelativeChain,
    RelativeRoot,
    RelativePath,
    ABSOLUTE_ROOT,
    RELATIVE_ROOT,
    parse,
    concat,
    join,
    join_using,
)

__all__ = ['PathErrorKind', 'PathError', 'NotAStringError', 'InvalidSegmentError', 'InvalidSeparatorError',
           'AboveRootError', 'CannotAppendAbsoluteError', 'Result', 'Success', 'Failure', 'DEFAULT_SEP',
           'SegmentType', 'PathSegment', 'EmptySegment', 'CurrentSegment', 'UpSegment', 'NamedSegment',
           'EMPTY_SEGMENT', 'CURRENT_SEGMENT', 'UP_SEGMENT', 'parse_segment', 'PathType', 'Path',
           'AbsoluteChain', 'AbsoluteRoot', 'AbsolutePath', 'RelativeChain', 'RelativeRoot', 'RelativePath',
           'ABSOLUTE_ROOT', 'RELATIVE_ROOT', 'parse', 'concat', 'join', 'join_using']
