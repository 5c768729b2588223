# File: docreader/core/common/errors.py


class DocReaderError(Exception):
    """
    Base class for every failure surfaced to the front end.
    str(error) is the message shown to the user.
    """


class PathAccessError(DocReaderError):
    """Path is missing, unreadable or cannot be canonicalized."""


class UnsupportedFileTypeError(DocReaderError):
    """A single targeted file has an extension the viewer cannot preview."""


class NotAFileOrFolderError(DocReaderError):
    """Target exists but is neither a regular file nor a directory."""


class NotAFolderError(DocReaderError):
    """A folder was expected (folder picker) but something else was chosen."""


class PersistenceError(DocReaderError):
    """Reading or writing one of the persisted state files failed."""


class ConfigParseError(PersistenceError):
    """The persisted config document exists but is malformed."""
