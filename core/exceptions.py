"""
Custom exceptions for the printer admin web interface.

Exception Hierarchy:
    PrinterAdminError (base)
    ├── FormDataInvalidError - Submission body empty or unparsable
    ├── FormValidationError  - Anti-forgery/session token check failed
    ├── InvalidJobIdError    - Missing, zero or non-numeric job id
    │   └── JobNotFoundError - Well-formed job id with no matching job
    └── StateStoreError      - Printer state file could not be read/written

Usage:
    Form and job errors are recovered by the page handlers: the page is
    re-rendered with ``error.message`` in the banner. Field-level parse
    failures never raise; the field is simply left unchanged.
"""

from typing import Optional, Dict, Any


class PrinterAdminError(Exception):
    """
    Base exception for all printer admin errors.

    All custom exceptions inherit from this class, allowing callers to catch
    all application-specific errors with a single except clause if needed.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message (shown in the page banner)
            details: Optional dictionary with additional context for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# FORM ERRORS - Page is re-rendered with a banner
# =============================================================================

class FormDataInvalidError(PrinterAdminError):
    """
    The submitted form had no fields at all.

    Typical causes:
    - Empty POST body
    - Body sent with an unsupported content type
    """

    def __init__(self, message: str = "Invalid form data."):
        super().__init__(message)


class FormValidationError(PrinterAdminError):
    """
    The submission did not carry the session token issued with the form.

    Typical causes:
    - Cross-site request forgery attempt
    - Session cookie expired between rendering and submitting the form
    """

    def __init__(self, message: str = "Invalid form submission."):
        super().__init__(message, {"field": "session"})


# =============================================================================
# JOB ERRORS
# =============================================================================

class InvalidJobIdError(PrinterAdminError):
    """The job-id field was missing, zero or not a number."""

    def __init__(self, job_id: Optional[str] = None, message: str = "Invalid Job ID."):
        details = {"job_id": job_id} if job_id is not None else {}
        super().__init__(message, details)
        self.job_id = job_id


class JobNotFoundError(InvalidJobIdError):
    """
    The job-id was well formed but no job with that id exists.

    Reported to the user with the same banner as a malformed id.
    """

    def __init__(self, job_id: int):
        super().__init__(str(job_id))
        self.details["resolution"] = "The job may have been purged from history"


# =============================================================================
# PERSISTENCE ERRORS
# =============================================================================

class StateStoreError(PrinterAdminError):
    """
    The printer state file could not be read or written.

    Logged by the printer service; never shown on a page because the
    in-memory state is still authoritative.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"Printer state file error: {reason}", {"path": path})
        self.path = path
