"""Exception hierarchy for grid, world and codec operations."""


class LifeGridError(Exception):
    """Base class for all lifegrid errors."""


class OutOfBoundsError(LifeGridError, IndexError):
    """A coordinate lies outside the grid."""


class InvalidArgumentError(LifeGridError, ValueError):
    """An operation was called with malformed parameters."""


class FormatError(LifeGridError, ValueError):
    """Stored data does not describe a valid grid."""


class TruncatedInputError(FormatError, EOFError):
    """Fewer bytes or rows were available than the format requires."""


class ReadOnlyGridError(LifeGridError, TypeError):
    """A write was attempted through a read-only grid view."""
