"""Exceptions raised by go-resolve."""


class GoResolveError(Exception):
    """Base class for all go-resolve errors."""


class UnsupportedAccessError(GoResolveError):
    """A caller asked a package for something its variant cannot provide.

    Raised when reading VCS, root path or URL metadata from an unrecognized
    package, or when shortening a recognized one. Always a bug in the caller;
    never caught inside go-resolve.
    """


class VisitationError(GoResolveError):
    """A project's dependencies could not be read (manifest or sources)."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class FetchError(GoResolveError):
    """A package's source could not be materialized locally."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
