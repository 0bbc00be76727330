"""
Core module for the printer admin web interface.

Contains fundamental infrastructure components:
- exceptions: Custom exception hierarchy
- guarded_state: Lock-guarded copy-on-read / swap-on-write container
"""

from .exceptions import (
    PrinterAdminError,
    FormDataInvalidError,
    FormValidationError,
    InvalidJobIdError,
    JobNotFoundError,
    StateStoreError,
)
from .guarded_state import GuardedState

__all__ = [
    "PrinterAdminError",
    "FormDataInvalidError",
    "FormValidationError",
    "InvalidJobIdError",
    "JobNotFoundError",
    "StateStoreError",
    "GuardedState",
]
