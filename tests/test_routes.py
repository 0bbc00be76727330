"""
Page-level tests using the Flask test client.
"""

import pytest

from app import create_app
from config import TestingConfig
from models.job import JobState
from models.options import ColorMode, PrinterState, Quality
from models.printer import MediaCol
from services.printer_service import PrinterService


def page(response) -> str:
    return response.get_data(as_text=True)


class MultiQueueConfig(TestingConfig):
    MULTI_QUEUE = True
    PRINTER_RESOURCE_ROOT = "/ipp/print/office"


# =============================================================================
# STATUS
# =============================================================================

class TestStatusPage:
    """Tests for the home page."""

    def test_idle_summary(self, client):
        response = client.get("/")
        assert response.status_code == 200
        html = page(response)
        assert "Idle, 0 jobs." in html
        assert "No jobs in history." in html
        assert 'http-equiv="refresh"' not in html

    def test_reasons_and_refresh(self, client, printer):
        printer.job_queue.create_job("a.pdf", "alice")
        printer.set_status(PrinterState.PROCESSING, 0x0200)
        html = page(client.get("/"))
        assert "Printing, 1 job, Media Low." in html
        assert 'http-equiv="refresh" content="10"' in html

    def test_identity_block(self, client, printer):
        with printer.edit_identity() as identity:
            identity.location = "Dock <3>"
            identity.geo_location = "geo:45.5,-73.25"
        html = page(client.get("/"))
        assert "Test Printer" in html
        assert "Dock &lt;3&gt;" in html
        assert "45.5&deg;, -73.25&deg;" in html

    def test_supplies_link(self, client):
        assert "/supplies" in page(client.get("/"))


# =============================================================================
# CONFIG
# =============================================================================

class TestConfigPage:
    """Tests for /config."""

    def test_form_has_token(self, client):
        html = page(client.get("/config"))
        assert 'name="session"' in html
        assert 'name="contact_email"' in html

    def test_save(self, client, token, printer):
        response = client.post("/config", data={
            "session": token,
            "location": "Warehouse",
            "geo_location_lat": "10.5",
            "geo_location_lon": "-20",
        })
        assert response.status_code == 200
        assert "Changes saved." in page(response)

        identity = printer.get_identity()
        assert identity.location == "Warehouse"
        assert identity.geo_location == "geo:10.5,-20"
        assert identity.dns_sd_name == "Test Printer"

    def test_bad_token(self, client, token, printer):
        response = client.post("/config", data={"session": "wrong", "location": "Warehouse"})
        assert "Invalid form submission." in page(response)
        assert printer.get_identity().location is None

    def test_missing_token(self, client, printer):
        response = client.post("/config", data={"location": "Warehouse"})
        assert "Invalid form submission." in page(response)
        assert printer.get_identity().location is None

    def test_empty_submission(self, client, token):
        assert "Invalid form data." in page(client.post("/config", data={}))

    def test_repeated_key_last_wins(self, client, token, printer):
        client.post("/config", data={"session": token, "location": ["First", "Second"]})
        assert printer.get_identity().location == "Second"


# =============================================================================
# PRINTING DEFAULTS
# =============================================================================

class TestPrintingPage:
    """Tests for /printing."""

    def test_monochrome_label_printer(self, client):
        html = page(client.get("/printing"))
        assert "B&amp;W" in html
        assert 'name="print-color-mode"' not in html
        assert 'name="print-darkness"' in html
        assert 'name="sides"' not in html

    def test_partial_update(self, client, token, printer):
        before = printer.get_driver_options()
        response = client.post("/printing", data={
            "session": token,
            "print-quality": "draft",
            "print-speed": "3",
        })
        assert "Changes saved." in page(response)

        after = printer.get_driver_options()
        assert after.quality_default == Quality.DRAFT
        assert after.speed_default == 3 * 2540
        assert after.color_default == before.color_default
        assert after.darkness_configured == before.darkness_configured
        assert after.media_ready == before.media_ready

    def test_orientation_icons(self, client):
        html = page(client.get("/printing"))
        assert html.count('<img src="data:image/svg+xml,%3csvg') == 5
        assert '>%3csvg' not in html

    def test_color_printer_radios(self, client, printer):
        with printer.edit_driver_options() as options:
            options.color_supported = ColorMode.AUTO | ColorMode.COLOR | ColorMode.MONOCHROME
        html = page(client.get("/printing"))
        assert html.count('name="print-color-mode"') == 3
        assert 'value="auto-monochrome"' not in html


# =============================================================================
# MEDIA
# =============================================================================

class TestMediaPage:
    """Tests for /media."""

    def test_render(self, client):
        html = page(client.get("/media"))
        assert "Custom Size" in html
        assert 'name="ready0-custom-width"' in html
        assert 'name="ready1-size"' in html
        assert 'name="ready2-size"' not in html
        assert "show_hide_custom" in html

    def test_omitted_group_zeroed(self, client, token, printer):
        client.post("/media", data={
            "session": token,
            "ready0-size": "na_index-4x6_4x6in",
            "ready1-size": "na_5x7_5x7in",
            "ready1-type": "labels",
        })
        assert printer.get_driver_options().media_ready[1].size_name == "na_5x7_5x7in"

        response = client.post("/media", data={
            "session": token,
            "ready0-size": "na_5x7_5x7in",
            "ready0-borderless": "on",
        })
        assert "Changes saved." in page(response)

        media_ready = printer.get_driver_options().media_ready
        assert media_ready[0].size_name == "na_5x7_5x7in"
        assert media_ready[1] == MediaCol()
        assert media_ready[2] == MediaCol()

    def test_oversized_offset_not_fatal(self, client, token, printer):
        response = client.post("/media", data={
            "session": token,
            "ready0-size": "na_index-4x6_4x6in",
            "ready0-top-offset": "1e308",
        })
        assert response.status_code == 200
        assert "Changes saved." in page(response)

        media = printer.get_driver_options().media_ready[0]
        assert media.size_name == "na_index-4x6_4x6in"
        assert media.top_offset == 0


# =============================================================================
# SUPPLIES
# =============================================================================

class TestSuppliesPage:
    """Tests for /supplies."""

    def test_render(self, client):
        html = page(client.get("/supplies"))
        assert "Black Ribbon" in html
        assert 'title="80%"' in html

    def test_not_found_without_supplies(self, office_options):
        printer = PrinterService("Office", office_options)
        client = create_app("config.TestingConfig", printer=printer).test_client()
        assert client.get("/supplies").status_code == 404
        assert "/supplies" not in page(client.get("/"))


# =============================================================================
# JOBS / CANCEL
# =============================================================================

class TestJobPages:
    """Tests for /jobs, /cancel and /cancelall."""

    def test_jobs_list(self, client, printer):
        pending = printer.job_queue.create_job("a.pdf", "alice")
        done = printer.job_queue.create_job("b.pdf", "bob")
        printer.job_queue.start_job(done)
        printer.job_queue.finish_job(done)

        html = page(client.get("/jobs"))
        assert f"job-id={pending}" in html
        assert f"job-id={done}" not in html
        assert "Queued at" in html
        assert "Completed at" in html
        assert "Cancel All Jobs" in html

    def test_cancel_get_prefills_form(self, client, printer):
        response = client.get("/cancel?job-id=42")
        assert response.status_code == 200
        html = page(response)
        assert 'name="job-id" value="42"' in html
        assert printer.job_queue.number_of_jobs == 0

    def test_cancel_get_without_id(self, client):
        html = page(client.get("/cancel"))
        assert 'name="job-id"' not in html
        assert 'class="banner' not in html

    def test_cancel_post_redirects(self, client, token, printer):
        job_id = printer.job_queue.create_job("a.pdf", "alice")
        response = client.post("/cancel", data={"session": token, "job-id": str(job_id)})
        assert response.status_code == 302
        assert response.headers["Location"].endswith("/jobs")
        assert printer.job_queue.find_job(job_id).state == JobState.CANCELED

    @pytest.mark.parametrize("job_id", ["0", "abc", "99"])
    def test_cancel_invalid_id(self, client, token, job_id):
        response = client.post("/cancel", data={"session": token, "job-id": job_id})
        assert response.status_code == 200
        assert "Invalid Job ID." in page(response)

    def test_cancel_bad_token(self, client, token, printer):
        job_id = printer.job_queue.create_job("a.pdf", "alice")
        response = client.post("/cancel", data={"session": "nope", "job-id": str(job_id)})
        assert "Invalid form submission." in page(response)
        assert printer.job_queue.find_job(job_id).state == JobState.PENDING

    def test_cancel_all(self, client, token, printer):
        first = printer.job_queue.create_job("a.pdf", "alice")
        second = printer.job_queue.create_job("b.pdf", "bob")
        printer.job_queue.start_job(second)

        html = page(client.get("/cancelall"))
        assert "Confirm Cancel All" in html

        response = client.post("/cancelall", data={"session": token})
        assert response.status_code == 302
        assert printer.job_queue.find_job(first).state == JobState.CANCELED
        assert printer.job_queue.find_job(second).is_canceled

    def test_cancel_all_nothing_active(self, client):
        html = page(client.get("/cancelall"))
        assert "No active jobs currently." in html
        assert "Confirm Cancel All" not in html


# =============================================================================
# HEADER / ERRORS
# =============================================================================

class TestHeader:
    """Tests for the sub-header and navigation."""

    def test_single_queue_version(self, client, app):
        html = page(client.get("/media"))
        assert f"Version {app.config['VERSION_STRING']}" in html
        assert 'class="nav"' not in html

    def test_multi_queue_nav(self, printer):
        client = create_app(MultiQueueConfig, printer=printer).test_client()
        response = client.get("/ipp/print/office/media")
        assert response.status_code == 200

        html = page(response)
        assert "<title>Media - Test Printer</title>" in html
        assert '<span class="active">Media</span>' in html
        assert 'href="/ipp/print/office/config"' in html
        assert 'href="/ipp/print/office/supplies"' in html
        assert client.get("/media").status_code == 404

    def test_not_found(self, client):
        response = client.get("/no-such-page")
        assert response.status_code == 404
        assert "Not found." in page(response)
