"""Exceptions raised by the reporting client and the download workflow."""

from __future__ import annotations


class ReportDownloadError(Exception):
    """Base error; ``cause`` holds the underlying transport or parsing error."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class RegistrationFailed(ReportDownloadError):
    pass


class InstanceResolutionFailed(ReportDownloadError):
    pass


class DocumentResolutionFailed(ReportDownloadError):
    pass


class KeepAliveFailed(ReportDownloadError):
    pass


class DownloadFailed(ReportDownloadError):
    """Logged by the client only; never raised out of ``download_document``."""


class WorkflowFailed(ReportDownloadError):
    """The single failure the workflow surfaces to its caller."""
