from __future__ import annotations


class ResumeAnalysisError(RuntimeError):
    status_code = 500

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class InputError(ResumeAnalysisError):
    """Caller supplied no usable document. Not retried."""

    status_code = 400


class UnsupportedFormatError(InputError):
    pass


class PageLimitExceededError(InputError):
    pass


class ExtractionError(ResumeAnalysisError):
    """Text extraction (or hashing) failed; no partial result is produced."""

    status_code = 500


class NotFoundError(ResumeAnalysisError):
    status_code = 404
