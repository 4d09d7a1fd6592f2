class ResumeExtractionError(Exception):
    """Base class for errors raised by the extraction engine"""


class MissingResumeTextError(ResumeExtractionError, ValueError):
    """Raised when the pipeline is invoked without any text at all"""


class UnsupportedDocumentError(ResumeExtractionError, ValueError):
    """Raised when a document's format cannot be decoded into text"""
