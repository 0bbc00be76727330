"""
Printer Admin Web - Flask Application Entry Point.

This is a slim app factory that:
1. Loads configuration (.env + config classes)
2. Configures logging
3. Creates (or accepts) the printer service and its job queue
4. Registers the printer page blueprints under the resource root
5. Sets up error handlers and context processors

ARCHITECTURE:
    Flask request threads
    └── PrinterService (shared)
        ├── identity / driver options: copy-mutate-swap under a lock
        ├── JobQueue: snapshot reads, cancel
        └── StateStore: JSON file written after each committed edit

    Job pipeline (external)
    └── reads driver options and drives job transitions through the
        same PrinterService
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, render_template

from logging_config import setup_logging, get_logger
from modules.printer_profiles import default_identity, default_label_printer, default_supplies
from routes import register_blueprints
from routes.forms import form_token
from services.job_queue import JobQueue
from services.printer_service import PrinterService
from services.state_store import StateStore


# Module logger (configured after setup_logging)
logger = get_logger(__name__)


def _create_printer(app: Flask) -> PrinterService:
    """Build the printer from the configured profile and saved state."""
    name = app.config.get("PRINTER_NAME")
    job_queue = JobQueue(max_completed_jobs=app.config.get("MAX_COMPLETED_JOBS", 100))
    state_file = app.config.get("PRINTER_STATE_FILE")

    if not state_file:
        return PrinterService(
            name,
            default_label_printer(),
            default_identity(name),
            default_supplies(),
            job_queue,
        )

    return PrinterService.from_store(
        name,
        StateStore(state_file),
        default_label_printer(),
        default_identity(name),
        default_supplies(),
        job_queue,
    )


def create_app(config_object: str = "config.Config",
               printer: Optional[PrinterService] = None) -> Flask:
    """
    Application factory - creates and configures Flask app.

    Args:
        config_object: Import path of the configuration class
        printer: Printer to serve (default: built from PRINTER_NAME and
            PRINTER_STATE_FILE)

    Returns:
        Configured Flask application
    """
    # Use override=True so .env file always takes precedence over shell environment
    load_dotenv(override=True)

    app = Flask(__name__)
    app.config.from_object(config_object)

    # Configure logging
    log_level = logging.DEBUG if app.config.get("DEBUG") else logging.INFO
    enable_file_logging = app.config.get("ENVIRONMENT") == "production"

    root_logger = setup_logging(
        log_level=log_level,
        enable_file_logging=enable_file_logging
    )

    # Set Flask's logger to use our configured logger
    app.logger.handlers = root_logger.handlers
    app.logger.setLevel(log_level)

    logger.info(f"Starting printer admin in {app.config.get('ENVIRONMENT')} mode")

    # =========================================================================
    # PRINTER
    # =========================================================================

    if printer is None:
        printer = _create_printer(app)
    app.config["PRINTER_SERVICE"] = printer

    # =========================================================================
    # REGISTER BLUEPRINTS
    # =========================================================================

    register_blueprints(app, app.config.get("PRINTER_RESOURCE_ROOT"))

    # =========================================================================
    # CONTEXT PROCESSORS
    # =========================================================================

    @app.context_processor
    def inject_printer_header():
        """Inject sub-header data and the form token into all templates."""
        return {
            "printer_name": printer.name,
            "multi_queue": app.config.get("MULTI_QUEUE", False),
            "version_string": app.config.get("VERSION_STRING", ""),
            "show_supplies": printer.get_driver_options().has_supplies,
            "form_token": form_token,
        }

    # =========================================================================
    # ERROR HANDLERS
    # =========================================================================

    @app.errorhandler(404)
    def handle_not_found(e):
        return render_template(
            "error.html", page=None, title="Not Found",
            message="Not found.", is_error=True,
        ), 404

    @app.errorhandler(500)
    def handle_server_error(e):
        logger.error(f"500 error: {e}", exc_info=True)
        return render_template(
            "error.html", page=None, title="Error",
            message="An unexpected error occurred. Please try again.", is_error=True,
        ), 500

    logger.info(f"Serving printer '{printer.name}'")
    return app


if __name__ == "__main__":
    app = create_app()
    debug_mode = os.environ.get("FLASK_DEBUG", "1") == "1"
    app.run(debug=debug_mode)
