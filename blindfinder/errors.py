"""Exceptions raised by the analysis engine and its collaborators."""


class BlindFinderError(Exception):
    """Base class for all blindfinder errors."""


class DocumentReadError(BlindFinderError):
    """A single document's text could not be read.

    Non-fatal to an analysis run: the document is reported as failed and the
    remaining documents are still analyzed.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not read {path}: {reason}")
        self.path = path
        self.reason = reason


class LinkIndexError(BlindFinderError):
    """The link index supplied data in a shape the analysis cannot use."""
