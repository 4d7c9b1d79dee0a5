"""Exceptions raised while building the family tree graph."""


class BloodlineError(Exception):
    """Base class for all pipeline failures."""


class StoreError(BloodlineError):
    """The SQLite store could not be opened, queried or written."""


class RowDecodeError(BloodlineError):
    """A row's columns do not match the expected record types."""


class OutOfBoundsError(BloodlineError):
    """An edge endpoint references a node that was never allocated."""


class IoError(BloodlineError):
    """An image or DOT file could not be read or written."""
