"""
Shared fixtures for the printer admin tests.
"""

from datetime import datetime

import pytest

from app import create_app
from models.options import MediaTracking
from models.printer import DriverOptions, MediaCol
from modules.printer_profiles import default_identity, default_label_printer, default_supplies
from services.job_queue import JobQueue
from services.printer_service import PrinterService


TEST_TOKEN = "test-form-token"


class FakeClock:
    """Deterministic clock for job timestamps."""

    def __init__(self, start=datetime(2024, 5, 1, 9, 30, 0)):
        self.now = start

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def label_options():
    """Driver options of the default thermal label printer."""
    return default_label_printer()


@pytest.fixture
def office_options():
    """Two-tray color office printer with custom sizes and duplex."""
    letter_tray1 = MediaCol(
        size_name="na_letter_8.5x11in", size_width=21590, size_length=27940,
        bottom_margin=423, left_margin=423, right_margin=423, top_margin=423,
        source="tray-1", type="stationery",
    )
    letter_tray2 = MediaCol(
        size_name="na_letter_8.5x11in", size_width=21590, size_length=27940,
        bottom_margin=423, left_margin=423, right_margin=423, top_margin=423,
        source="tray-2", type="stationery-letterhead",
    )
    return DriverOptions(
        color_supported=0x1F,
        sides_supported=0x07,
        tracking_supported=MediaTracking(0),
        media=[
            "custom_max_8.5x14in",
            "custom_min_3x5in",
            "iso_a4_210x297mm",
            "na_legal_8.5x14in",
            "na_letter_8.5x11in",
        ],
        types=["stationery", "stationery-letterhead", "photographic-glossy"],
        sources=["tray-1", "tray-2", "manual"],
        media_ready=[letter_tray1, letter_tray2, MediaCol()],
        media_default=letter_tray1,
        resolutions=[(300, 300), (600, 600), (600, 1200)],
        x_default=600,
        y_default=600,
        borderless=True,
        bottom_top=423,
        left_right=423,
    )


@pytest.fixture
def printer(label_options, clock):
    """In-memory label printer."""
    return PrinterService(
        "Test Printer",
        label_options,
        default_identity("Test Printer"),
        default_supplies(),
        JobQueue(max_completed_jobs=10, clock=clock),
    )


@pytest.fixture
def app(printer):
    app = create_app("config.TestingConfig", printer=printer)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def token(client):
    """Store a known anti-forgery token in the client session."""
    with client.session_transaction() as sess:
        sess["form_token"] = TEST_TOKEN
    return TEST_TOKEN
