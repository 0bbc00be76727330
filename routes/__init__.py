"""
Flask route blueprints for the printer admin pages.

This module contains all route handlers organized by page:
- status: Home page (status summary, identity, job history)
- config: Identity and contact configuration
- printing: Printing defaults
- media: Ready media per source
- supplies: Supply levels
- jobs: Job history, cancel and cancel-all

Each blueprint is registered with the Flask app in create_app(), under
the printer's resource root.
"""

from typing import Optional

from .status import status_bp
from .config import config_bp
from .printing import printing_bp
from .media import media_bp
from .supplies import supplies_bp
from .jobs import jobs_bp

__all__ = [
    "status_bp",
    "config_bp",
    "printing_bp",
    "media_bp",
    "supplies_bp",
    "jobs_bp",
]


def register_blueprints(app, url_prefix: Optional[str] = None):
    """
    Register all blueprints with the Flask app.

    Args:
        app: Flask application instance
        url_prefix: Printer resource root, e.g. "/ipp/print/office"
            (None or empty = site root)
    """
    url_prefix = url_prefix or None
    for blueprint in (status_bp, config_bp, printing_bp, media_bp, supplies_bp, jobs_bp):
        app.register_blueprint(blueprint, url_prefix=url_prefix)
