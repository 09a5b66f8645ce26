"""Exceptions raised by doc-trainer."""


class DocTrainerError(Exception):
    """Base class for all doc-trainer errors."""


class InputUnavailableError(DocTrainerError):
    """The source document (or directory) could not be read.

    Fatal: the parse is aborted and no Document is produced.
    """


class ImageUnresolvableError(DocTrainerError):
    """A referenced image is missing or unreadable.

    Recoverable: parsers log it and drop the reference.
    """


class ConfigError(DocTrainerError):
    """The configuration file is missing or invalid."""
