"""Exceptions raised across the layers of the package."""


class GoRecordError(Exception):
    """Base class for all errors raised by gosgf."""


class RepositoryError(GoRecordError):
    """Storage failed underneath the repository (I/O, corruption, locking...)."""


class MigrationError(RepositoryError):
    """The schema found on disk cannot be brought to the current version."""


class CoordinateError(GoRecordError, ValueError):
    """Pixel or grid coordinates that cannot be mapped."""
