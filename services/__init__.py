"""
Services layer for the printer admin web interface.

This module contains the stateful services behind the admin pages:
- PrinterService: Lock-guarded identity, driver options, supplies, status
- JobQueue: Thread-safe job queue with cancel support
- StateStore: JSON persistence of the printer configuration

Thread Model:
    Flask request threads and the job pipeline share one PrinterService.
    Configuration edits are copy-mutate-swap under the printer lock; job
    reads are snapshots taken under the queue lock.
"""

from .job_queue import JobQueue
from .printer_service import PrinterService
from .state_store import StateStore

__all__ = [
    "JobQueue",
    "PrinterService",
    "StateStore",
]
