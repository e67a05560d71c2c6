class FileManagerError(Exception):
    """Base class for expected, client-facing failures."""
    pass


class AccessDeniedError(FileManagerError):
    """Raised when a path resolves outside the storage root."""

    def __init__(self, message: str = "Access denied: The specified path is outside the storage directory."):
        super().__init__(message)


class NotFoundError(FileManagerError):
    pass


class WrongTypeError(FileManagerError):
    """A directory was given where a file was expected, or the reverse."""
    pass


class UnsupportedContentError(FileManagerError):
    pass


class DirectoryNotEmptyError(FileManagerError):
    pass


class SearchCancelledError(FileManagerError):
    pass
