"""
Printer service.

Owns the shared state of one printer: identity, driver options (including
ready media), supplies, printer state/reasons and the job queue. Admin
page handlers and the job pipeline both go through this service.

Edits follow one pattern everywhere:
    acquire lock -> copy current value -> mutate the copy -> swap it in
    -> release lock

so the pipeline reading options in the middle of an admin edit sees either
the old or the new configuration, never a mix.

Usage:
    printer = PrinterService(name="Office", driver=default_label_printer())

    options = printer.get_driver_options()       # private copy

    with printer.edit_driver_options() as options:
        apply_defaults_form(options, form)       # committed on exit
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from core.exceptions import StateStoreError
from core.guarded_state import GuardedState
from models.options import PrinterReason, PrinterState
from models.printer import DriverOptions, MediaCol, PrinterIdentity, Supply
from services.job_queue import JobQueue
from services.state_store import StateStore
from logging_config import get_logger


# Module logger
logger = get_logger(__name__)


class PrinterService:
    """
    Shared, lock-guarded printer state.

    Attributes:
        name: Printer display name
        job_queue: The printer's JobQueue
    """

    def __init__(
        self,
        name: str,
        driver: DriverOptions,
        identity: Optional[PrinterIdentity] = None,
        supplies: Optional[List[Supply]] = None,
        job_queue: Optional[JobQueue] = None,
        store: Optional[StateStore] = None,
    ):
        self.name = name
        self.job_queue = job_queue or JobQueue()
        self._store = store

        self._driver = GuardedState(driver)
        self._identity = GuardedState(identity or PrinterIdentity())
        self._supplies: List[Supply] = list(supplies or [])

        self._status_lock = threading.Lock()
        self._save_lock = threading.Lock()
        self._state = PrinterState.IDLE
        self._reasons = PrinterReason(0)

        logger.info(f"Printer '{name}' ready with {len(driver.sources)} source(s)")

    @classmethod
    def from_store(
        cls,
        name: str,
        store: StateStore,
        driver: DriverOptions,
        identity: PrinterIdentity,
        supplies: Optional[List[Supply]] = None,
        job_queue: Optional[JobQueue] = None,
    ) -> "PrinterService":
        """
        Create a printer, preferring the saved state over the given defaults.

        A missing or unreadable state file falls back to the defaults.
        """
        try:
            saved = store.load()
        except StateStoreError as e:
            logger.error(f"Ignoring unreadable printer state: {e}")
            saved = None

        if saved:
            driver = DriverOptions.from_dict(saved.get("driver", {}))
            identity = PrinterIdentity.from_dict(saved.get("identity", {}))

        return cls(name, driver, identity, supplies, job_queue, store)

    # =========================================================================
    # STATUS
    # =========================================================================

    @property
    def state(self) -> PrinterState:
        with self._status_lock:
            return self._state

    @property
    def reasons(self) -> PrinterReason:
        with self._status_lock:
            return self._reasons

    def set_status(self, state: PrinterState, reasons: PrinterReason = PrinterReason(0)) -> None:
        """Called by the device/pipeline side when the printer state changes."""
        with self._status_lock:
            self._state = state
            self._reasons = reasons

    @property
    def active_job_count(self) -> int:
        return self.job_queue.number_of_active_jobs

    # =========================================================================
    # DRIVER OPTIONS
    # =========================================================================

    def get_driver_options(self) -> DriverOptions:
        """Private copy of the current driver options."""
        return self._driver.get()

    @contextmanager
    def edit_driver_options(self) -> Iterator[DriverOptions]:
        """
        Edit driver options atomically.

        Yields a private copy while holding the printer lock; the copy
        replaces the stored options when the block exits normally.

        Raises:
            ValueError: If the edit broke the sources/ready-media alignment
        """
        with self._driver.edit() as options:
            yield options
            if len(options.media_ready) != len(options.sources):
                raise ValueError(
                    f"{len(options.media_ready)} ready media entries for "
                    f"{len(options.sources)} sources"
                )
        self._save()

    def set_ready_media(self, media_ready: List[MediaCol]) -> None:
        with self.edit_driver_options() as options:
            options.media_ready = list(media_ready)

    # =========================================================================
    # IDENTITY
    # =========================================================================

    def get_identity(self) -> PrinterIdentity:
        return self._identity.get()

    @contextmanager
    def edit_identity(self) -> Iterator[PrinterIdentity]:
        with self._identity.edit() as identity:
            yield identity
        self._save()

    # =========================================================================
    # SUPPLIES
    # =========================================================================

    def get_supplies(self) -> List[Supply]:
        with self._status_lock:
            return list(self._supplies)

    def set_supplies(self, supplies: List[Supply]) -> None:
        with self._status_lock:
            self._supplies = list(supplies)

    # =========================================================================
    # PERSISTENCE
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "identity": self._identity.get().to_dict(),
            "driver": self._driver.get().to_dict(),
        }

    def _save(self) -> None:
        """Write the committed configuration, if a state file is configured."""
        if self._store is None:
            return
        try:
            with self._save_lock:
                self._store.save(self.to_dict())
        except StateStoreError as e:
            logger.error(f"Failed to save printer state: {e}")
